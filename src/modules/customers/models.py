"""Customer model.

Business rules implemented:
- Email must be unique in the system.
- Mobile number must be unique in the system (8 digits starting with 8 or 9;
  format enforced by the request DTOs).
- A customer owning accounts cannot be deleted (enforced at service layer,
  backed by ``on_delete=PROTECT`` on ``Account.customer``).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import AuditedModel


class Customer(AuditedModel):
    """Customer aggregate root, keyed by a generated integer ``customer_id``."""

    customer_id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=100, unique=True)
    mobile_number = models.CharField(max_length=20, unique=True)

    class Meta:
        db_table = "customer"
        ordering = ["customer_id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.customer_id})"
