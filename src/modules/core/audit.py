"""Explicit audit stamping for entities built on ``AuditedModel``."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from django.conf import settings
from django.utils import timezone

from modules.core.models import AuditedModel


class Auditor:
    """Stamps audit columns with the configured actor and the current time.

    ``actor`` defaults to ``settings.AUDIT_ACTOR``; ``clock`` can be swapped
    in tests to freeze time.
    """

    def __init__(
        self,
        actor: Optional[str] = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self.actor = actor or settings.AUDIT_ACTOR
        self._clock = clock

    def stamp_created(self, entity: AuditedModel) -> None:
        now = self._clock()
        entity.created_at = now
        entity.created_by = self.actor
        entity.updated_at = now
        entity.updated_by = self.actor

    def stamp_updated(self, entity: AuditedModel) -> None:
        entity.updated_at = self._clock()
        entity.updated_by = self.actor
