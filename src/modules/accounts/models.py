"""Account model.

Business rules implemented:
- ``account_number`` is the primary key: a random 7-digit value assigned by
  ``AccountNumberGenerator`` before the first save.
- Every account references an existing customer; the FK uses PROTECT so a
  customer owning accounts cannot be removed, even outside the service layer.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.accounts.constants import MAX_ACCOUNT_NUMBER, MIN_ACCOUNT_NUMBER
from modules.core.models import AuditedModel


class Account(AuditedModel):
    account_number = models.PositiveIntegerField(
        primary_key=True,
        validators=[
            MinValueValidator(MIN_ACCOUNT_NUMBER),
            MaxValueValidator(MAX_ACCOUNT_NUMBER),
        ],
    )
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="accounts",
        db_column="customer_id",
    )
    account_type = models.CharField(max_length=100)
    branch_address = models.CharField(max_length=200)

    class Meta:
        db_table = "accounts"
        ordering = ["account_number"]

    def __str__(self) -> str:
        return f"{self.account_number} ({self.account_type})"
