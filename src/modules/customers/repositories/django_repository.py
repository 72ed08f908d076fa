"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Missing rows come back as ``None`` (Null Object style); the service layer
decides how a missing entity becomes an API error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.filter(customer_id=id).first()

    def exists(self, id: int) -> bool:
        return Customer.objects.filter(customer_id=id).exists()

    def list(self) -> List[Customer]:
        return list(Customer.objects.order_by("customer_id"))

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save(force_insert=is_new)
        logger.info(
            "customer.saved",
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer by ID.

        Returns ``False`` if no customer exists with the given ID.
        """
        deleted, _ = Customer.objects.filter(customer_id=id).delete()
        if deleted:
            logger.info("customer.removed", customer_id=id)
        return bool(deleted)

    def get_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email=email).first()

    def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        return Customer.objects.filter(mobile_number=mobile_number).first()
