"""Account repository interface.

Extends ``IRepository[Account]`` (keyed by account number) with the
per-customer look-ups used by both services.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import Account


class IAccountRepository(IRepository["Account"]):
    """Repository contract for the Account aggregate."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[Account]:
        """List a customer's accounts ordered by account number."""

    @abstractmethod
    def exists_for_customer(self, customer_id: int) -> bool:
        """Return ``True`` if the customer owns at least one account."""

    @abstractmethod
    def account_numbers_by_customer(
        self, customer_ids: Iterable[int]
    ) -> Dict[int, List[int]]:
        """Map each given customer ID to its account numbers (ascending).

        Customers without accounts map to an empty list.
        """
