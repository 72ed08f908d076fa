"""Account DTOs for the Service Layer.

- ``AccountRequestDTO``: input for creation and full update (PUT).
- ``AccountPatchDTO``: input for partial update (PATCH).
- ``AccountOutputDTO``: output mapped from an ``Account`` entity.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator

from modules.core.dtos import CamelDTO

if TYPE_CHECKING:
    from modules.accounts.models import Account


def _not_blank(value: str, label: str) -> str:
    if not value.strip():
        raise ValueError(f"{label} cannot be blank")
    return value


def _not_bool(value):
    if isinstance(value, bool):
        raise ValueError("Customer ID must be an integer")
    return value


class AccountRequestDTO(CamelDTO):
    """Immutable DTO for account creation and full-update requests."""

    customer_id: int = Field(gt=0)
    account_type: str = Field(max_length=100)
    branch_address: str = Field(max_length=200)

    @field_validator("customer_id", mode="before")
    @classmethod
    def validate_customer_id(cls, v):
        return _not_bool(v)

    @field_validator("account_type")
    @classmethod
    def validate_account_type(cls, v: str) -> str:
        return _not_blank(v, "Account type")

    @field_validator("branch_address")
    @classmethod
    def validate_branch_address(cls, v: str) -> str:
        return _not_blank(v, "Branch address")


class AccountPatchDTO(CamelDTO):
    """Immutable DTO for partial updates; only supplied fields are applied."""

    customer_id: Optional[int] = Field(default=None, gt=0)
    account_type: Optional[str] = Field(default=None, max_length=100)
    branch_address: Optional[str] = Field(default=None, max_length=200)

    @field_validator("customer_id", mode="before")
    @classmethod
    def validate_customer_id(cls, v):
        return _not_bool(v)

    @field_validator("account_type")
    @classmethod
    def validate_account_type(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _not_blank(v, "Account type")

    @field_validator("branch_address")
    @classmethod
    def validate_branch_address(cls, v: Optional[str]) -> Optional[str]:
        return v if v is None else _not_blank(v, "Branch address")


class AccountOutputDTO(CamelDTO):
    account_number: int
    customer_id: int
    account_type: str
    branch_address: str
    created_at: Optional[datetime]
    created_by: Optional[str]
    updated_at: Optional[datetime]
    updated_by: Optional[str]

    @classmethod
    def from_entity(cls, account: Account) -> AccountOutputDTO:
        """Build an output DTO from an Account model instance."""
        audit = account.audit
        return cls(
            account_number=account.account_number,
            customer_id=account.customer_id,
            account_type=account.account_type,
            branch_address=account.branch_address,
            created_at=audit.created_at,
            created_by=audit.created_by,
            updated_at=audit.updated_at,
            updated_by=audit.updated_by,
        )
