"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by the
uniqueness rules (email, mobile number).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""

    @abstractmethod
    def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        """Retrieve a customer by mobile number."""
