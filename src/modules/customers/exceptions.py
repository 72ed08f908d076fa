"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
Each one pins an ``ErrorCode``; the DRF exception handler translates
them into HTTP responses.
"""

from __future__ import annotations

from modules.core.errors import (
    OperationNotAllowed,
    ResourceAlreadyExists,
    ResourceNotFound,
)


class CustomerAlreadyExists(ResourceAlreadyExists):
    """A customer with the same email or mobile number already exists."""


class CustomerNotFound(ResourceNotFound):
    """The requested customer does not exist."""


class CustomerHasAccounts(OperationNotAllowed):
    """The customer still owns accounts and cannot be deleted."""
