"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable and camelCase on the wire.

- ``CustomerRequestDTO``: input for creation and full update (PUT).
- ``CustomerPatchDTO``: input for partial update (PATCH); every field optional.
- ``CustomerOutputDTO``: output enriched with the customer's account numbers.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, List, Optional

from pydantic import Field, field_validator

from modules.core.dtos import CamelDTO

if TYPE_CHECKING:
    from modules.customers.models import Customer

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MOBILE_NUMBER_PATTERN = re.compile(r"^[89][0-9]{7}$")


def _check_name(value: str) -> str:
    if not value.strip():
        raise ValueError("Name cannot be blank")
    return value


def _check_email(value: str) -> str:
    if not value.strip():
        raise ValueError("Email cannot be blank")
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Email should be valid")
    return value


def _check_mobile_number(value: str) -> str:
    if not value.strip():
        raise ValueError("Mobile number cannot be blank")
    if not MOBILE_NUMBER_PATTERN.match(value):
        raise ValueError("Mobile number should be 8 digits starting with 8 or 9")
    return value


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CustomerRequestDTO(CamelDTO):
    """Immutable DTO for customer creation and full-update requests."""

    name: str = Field(max_length=100)
    email: str = Field(max_length=100)
    mobile_number: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_name(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("mobile_number")
    @classmethod
    def validate_mobile_number(cls, v: str) -> str:
        return _check_mobile_number(v)


class CustomerPatchDTO(CamelDTO):
    """Immutable DTO for partial updates.

    Only supplied fields will be updated; supplied fields obey the same
    rules as in ``CustomerRequestDTO``.
    """

    name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[str] = Field(default=None, max_length=100)
    mobile_number: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_name(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_email(v)

    @field_validator("mobile_number")
    @classmethod
    def validate_mobile_number(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _check_mobile_number(v)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(CamelDTO):
    """Immutable DTO for customer API responses."""

    customer_id: int
    name: str
    email: str
    mobile_number: str
    account_numbers: List[int]
    created_at: Optional[datetime]
    created_by: Optional[str]
    updated_at: Optional[datetime]
    updated_by: Optional[str]

    @classmethod
    def from_entity(
        cls, customer: Customer, account_numbers: Iterable[int] = ()
    ) -> CustomerOutputDTO:
        """Build an output DTO from a Customer model instance."""
        audit = customer.audit
        return cls(
            customer_id=customer.customer_id,
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            account_numbers=sorted(account_numbers),
            created_at=audit.created_at,
            created_by=audit.created_by,
            updated_at=audit.updated_at,
            updated_by=audit.updated_by,
        )
