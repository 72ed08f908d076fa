"""Base abstract model carrying the audit columns.

Every entity stores ``created_at``/``created_by``/``updated_at``/``updated_by``
and exposes them together as an ``AuditFields`` value through ``.audit``.

Nothing here fills the columns in automatically (no ``auto_now``): the
service layer stamps them through ``modules.core.audit.Auditor`` at write
time, so the values are always the ones the service decided on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from django.db import models


@dataclass(frozen=True)
class AuditFields:
    """Who created / last touched an entity, and when."""

    created_at: Optional[datetime]
    created_by: Optional[str]
    updated_at: Optional[datetime]
    updated_by: Optional[str]


class AuditedModel(models.Model):
    """Abstract base holding the audit columns."""

    created_at = models.DateTimeField()
    created_by = models.CharField(max_length=100)
    updated_at = models.DateTimeField(null=True, blank=True)
    updated_by = models.CharField(  # noqa: DJ01
        max_length=100, null=True, blank=True
    )

    class Meta:
        abstract = True

    @property
    def audit(self) -> AuditFields:
        return AuditFields(
            created_at=self.created_at,
            created_by=self.created_by,
            updated_at=self.updated_at,
            updated_by=self.updated_by,
        )
