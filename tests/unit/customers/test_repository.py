"""Unit tests for CustomerDjangoRepository.

Covers:
- Interface compliance.
- CRUD operations: get_by_id, exists, list, save, delete.
- Domain look-ups: get_by_email, get_by_mobile_number.
"""

from __future__ import annotations

import pytest

from django.db import IntegrityError
from django.utils import timezone

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.unit


def _make_customer(save: bool = True, **overrides) -> Customer:
    """Create a Customer instance with sane defaults."""
    defaults = {
        "name": "John Doe",
        "email": "john@example.com",
        "mobile_number": "81234567",
        "created_at": timezone.now(),
        "created_by": "Account Service",
    }
    defaults.update(overrides)
    customer = Customer(**defaults)
    if save:
        customer.save()
    return customer


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        from modules.customers.repositories.interfaces import ICustomerRepository

        assert isinstance(repo, ICustomerRepository)


class TestGetById:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer()
        result = repo.get_by_id(customer.customer_id)
        assert result is not None
        assert result.customer_id == customer.customer_id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) is None


class TestExists:
    def test_true_for_existing(self, repo):
        customer = _make_customer()
        assert repo.exists(customer.customer_id) is True

    def test_false_for_missing(self, repo):
        assert repo.exists(999) is False


class TestList:
    def test_returns_all_ordered_by_id(self, repo):
        first = _make_customer(email="a@test.com", mobile_number="81111111")
        second = _make_customer(email="b@test.com", mobile_number="92222222")
        result = repo.list()
        assert [c.customer_id for c in result] == [first.customer_id, second.customer_id]

    def test_returns_empty_list_when_no_customers(self, repo):
        assert repo.list() == []


class TestSave:
    def test_inserts_new_customer(self, repo):
        customer = _make_customer(save=False)
        saved = repo.save(customer)
        assert saved.customer_id is not None
        assert Customer.objects.filter(customer_id=saved.customer_id).exists()

    def test_updates_existing_customer(self, repo):
        customer = _make_customer()
        customer.name = "Jane Doe"
        repo.save(customer)
        customer.refresh_from_db()
        assert customer.name == "Jane Doe"
        assert Customer.objects.count() == 1

    def test_duplicate_email_violates_constraint(self, repo):
        _make_customer()
        duplicate = _make_customer(save=False, mobile_number="99999999")
        with pytest.raises(IntegrityError):
            repo.save(duplicate)


class TestDelete:
    def test_deletes_existing(self, repo):
        customer = _make_customer()
        assert repo.delete(customer.customer_id) is True
        assert not Customer.objects.filter(customer_id=customer.customer_id).exists()

    def test_returns_false_when_missing(self, repo):
        assert repo.delete(999) is False


class TestLookups:
    def test_get_by_email(self, repo):
        customer = _make_customer()
        assert repo.get_by_email("john@example.com").customer_id == customer.customer_id
        assert repo.get_by_email("other@example.com") is None

    def test_get_by_mobile_number(self, repo):
        customer = _make_customer()
        assert repo.get_by_mobile_number("81234567").customer_id == customer.customer_id
        assert repo.get_by_mobile_number("99999999") is None
