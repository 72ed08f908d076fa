"""Django ORM implementation of the Account repository."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.accounts.models import Account
from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)


class AccountDjangoRepository(IAccountRepository):
    """Concrete Account repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Account]:
        """Retrieve an account by its account number."""
        return Account.objects.filter(account_number=id).first()

    def exists(self, id: int) -> bool:
        return Account.objects.filter(account_number=id).exists()

    def list(self) -> List[Account]:
        return list(Account.objects.order_by("account_number"))

    def list_by_customer(self, customer_id: int) -> List[Account]:
        return list(
            Account.objects.filter(customer_id=customer_id).order_by("account_number")
        )

    def exists_for_customer(self, customer_id: int) -> bool:
        return Account.objects.filter(customer_id=customer_id).exists()

    def account_numbers_by_customer(
        self, customer_ids: Iterable[int]
    ) -> Dict[int, List[int]]:
        ids = list(customer_ids)
        numbers: Dict[int, List[int]] = {customer_id: [] for customer_id in ids}
        rows = (
            Account.objects.filter(customer_id__in=ids)
            .order_by("account_number")
            .values_list("customer_id", "account_number")
        )
        for customer_id, account_number in rows:
            numbers[customer_id].append(account_number)
        return numbers

    @transaction.atomic
    def save(self, entity: Account) -> Account:
        """Persist an account.

        New accounts are always INSERTed; a number that is already taken
        raises ``IntegrityError`` instead of updating the existing row.
        """
        is_new = entity._state.adding
        entity.save(force_insert=is_new)
        logger.info(
            "account.saved",
            account_number=entity.account_number,
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        deleted, _ = Account.objects.filter(account_number=id).delete()
        if deleted:
            logger.info("account.removed", account_number=id)
        return bool(deleted)
