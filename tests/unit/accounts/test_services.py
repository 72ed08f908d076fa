"""Unit tests for AccountService.

Covers:
- create_account: happy path, unknown customer, generator exhaustion.
- update_account / partial_update_account: customer re-validated only on change.
- delete_account, get_account, list_accounts, list_accounts_by_customer.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from modules.accounts.dtos import AccountPatchDTO, AccountRequestDTO
from modules.accounts.exceptions import AccountNotFound, AccountNumberGenerationFailed
from modules.accounts.models import Account
from modules.accounts.services import AccountService
from modules.core.audit import Auditor
from modules.customers.exceptions import CustomerNotFound

pytestmark = pytest.mark.unit

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda account: account
    return repo


@pytest.fixture()
def mock_customer_repo():
    repo = MagicMock()
    repo.exists.return_value = True
    return repo


@pytest.fixture()
def mock_generator():
    generator = MagicMock()
    generator.generate.return_value = 1234567
    return generator


@pytest.fixture()
def service(mock_repo, mock_customer_repo, mock_generator):
    return AccountService(
        account_repository=mock_repo,
        customer_repository=mock_customer_repo,
        number_generator=mock_generator,
        auditor=Auditor(actor="tester", clock=lambda: NOW),
    )


def _make_account(**overrides) -> Account:
    defaults = {
        "account_number": 1234567,
        "customer_id": 1,
        "account_type": "Savings",
        "branch_address": "1 Main St",
        "created_at": NOW,
        "created_by": "seed",
    }
    defaults.update(overrides)
    account = Account(**defaults)
    account._state.adding = False
    return account


def _request(**overrides) -> AccountRequestDTO:
    data = {"customer_id": 1, "account_type": "Savings", "branch_address": "1 Main St"}
    data.update(overrides)
    return AccountRequestDTO(**data)


class TestCreateAccount:
    def test_success(self, service, mock_repo, mock_generator):
        result = service.create_account(_request())

        assert result.account_number == 1234567
        assert result.customer_id == 1
        assert result.created_by == "tester"
        assert result.created_at == NOW
        mock_generator.generate.assert_called_once()
        mock_repo.save.assert_called_once()

    def test_unknown_customer_raises(
        self, service, mock_repo, mock_customer_repo, mock_generator
    ):
        mock_customer_repo.exists.return_value = False

        with pytest.raises(CustomerNotFound, match="Customer not found with id: 1"):
            service.create_account(_request())

        mock_generator.generate.assert_not_called()
        mock_repo.save.assert_not_called()

    def test_generation_failure_propagates(self, service, mock_repo, mock_generator):
        mock_generator.generate.side_effect = AccountNumberGenerationFailed()

        with pytest.raises(AccountNumberGenerationFailed):
            service.create_account(_request())

        mock_repo.save.assert_not_called()

    def test_default_generator_uses_account_repository(
        self, mock_repo, mock_customer_repo
    ):
        mock_repo.exists.return_value = False
        service = AccountService(mock_repo, mock_customer_repo)

        result = service.create_account(_request())

        mock_repo.exists.assert_called_once_with(result.account_number)


class TestUpdateAccount:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_account()

        result = service.update_account(
            1234567, _request(account_type="Checking", branch_address="2 High St")
        )

        assert result.account_type == "Checking"
        assert result.branch_address == "2 High St"
        assert result.updated_by == "tester"
        assert result.created_by == "seed"

    def test_same_customer_not_revalidated(self, service, mock_repo, mock_customer_repo):
        mock_repo.get_by_id.return_value = _make_account()

        service.update_account(1234567, _request())

        mock_customer_repo.exists.assert_not_called()

    def test_changed_to_unknown_customer_raises(
        self, service, mock_repo, mock_customer_repo
    ):
        mock_repo.get_by_id.return_value = _make_account()
        mock_customer_repo.exists.return_value = False

        with pytest.raises(CustomerNotFound, match="id: 9"):
            service.update_account(1234567, _request(customer_id=9))

        mock_repo.save.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(
            AccountNotFound, match="Account not found with account number: 7654321"
        ):
            service.update_account(7654321, _request())


class TestPartialUpdateAccount:
    def test_only_present_fields_change(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_account()

        result = service.partial_update_account(
            1234567, AccountPatchDTO(branch_address="9 New Road")
        )

        assert result.branch_address == "9 New Road"
        assert result.account_type == "Savings"
        assert result.customer_id == 1

    def test_move_to_existing_customer(self, service, mock_repo, mock_customer_repo):
        mock_repo.get_by_id.return_value = _make_account()

        result = service.partial_update_account(1234567, AccountPatchDTO(customer_id=2))

        assert result.customer_id == 2
        mock_customer_repo.exists.assert_called_once_with(2)

    def test_move_to_unknown_customer_raises(
        self, service, mock_repo, mock_customer_repo
    ):
        mock_repo.get_by_id.return_value = _make_account()
        mock_customer_repo.exists.return_value = False

        with pytest.raises(CustomerNotFound):
            service.partial_update_account(1234567, AccountPatchDTO(customer_id=2))

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(AccountNotFound):
            service.partial_update_account(1234567, AccountPatchDTO())


class TestDeleteAccount:
    def test_success(self, service, mock_repo):
        mock_repo.delete.return_value = True

        service.delete_account(1234567)

        mock_repo.delete.assert_called_once_with(1234567)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(AccountNotFound):
            service.delete_account(1234567)


class TestQueries:
    def test_get_account(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_account()
        assert service.get_account(1234567).account_number == 1234567

    def test_get_account_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(AccountNotFound):
            service.get_account(1234567)

    def test_list_accounts(self, service, mock_repo):
        mock_repo.list.return_value = [
            _make_account(account_number=1000000),
            _make_account(account_number=2000000),
        ]
        assert [a.account_number for a in service.list_accounts()] == [1000000, 2000000]

    def test_list_by_customer(self, service, mock_repo):
        mock_repo.list_by_customer.return_value = [_make_account()]

        result = service.list_accounts_by_customer(1)

        assert [a.account_number for a in result] == [1234567]
        mock_repo.list_by_customer.assert_called_once_with(1)

    def test_list_by_unknown_customer_raises(
        self, service, mock_repo, mock_customer_repo
    ):
        mock_customer_repo.exists.return_value = False

        with pytest.raises(CustomerNotFound):
            service.list_accounts_by_customer(1)

        mock_repo.list_by_customer.assert_not_called()
