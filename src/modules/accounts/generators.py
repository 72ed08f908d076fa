"""Account number generation.

Numbers are drawn uniformly from ``[MIN_ACCOUNT_NUMBER, MAX_ACCOUNT_NUMBER]``
with ``secrets`` so they are neither sequential nor predictable.  A drawn
number already in use is discarded and redrawn; after
``ACCOUNT_NUMBER_MAX_ATTEMPTS`` collisions generation fails for good; there
is no sequential fallback.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

import structlog

from modules.accounts.constants import (
    ACCOUNT_NUMBER_MAX_ATTEMPTS,
    MAX_ACCOUNT_NUMBER,
    MIN_ACCOUNT_NUMBER,
)
from modules.accounts.exceptions import AccountNumberGenerationFailed

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)


class AccountNumberGenerator:
    def __init__(
        self,
        repository: IAccountRepository,
        max_attempts: int = ACCOUNT_NUMBER_MAX_ATTEMPTS,
    ) -> None:
        self._repo = repository
        self._max_attempts = max_attempts

    @staticmethod
    def draw() -> int:
        """Return a random candidate in the account number range."""
        span = MAX_ACCOUNT_NUMBER - MIN_ACCOUNT_NUMBER + 1
        return MIN_ACCOUNT_NUMBER + secrets.randbelow(span)

    def generate(self) -> int:
        """Return an account number not yet used by any account.

        Raises:
            AccountNumberGenerationFailed: every attempt hit an existing number.
        """
        for attempt in range(1, self._max_attempts + 1):
            candidate = self.draw()
            if not self._repo.exists(candidate):
                return candidate
            logger.debug("account_number.collision", attempt=attempt)

        logger.error("account_number.exhausted", attempts=self._max_attempts)
        raise AccountNumberGenerationFailed(
            "Unable to generate unique account number after "
            f"{self._max_attempts} attempts"
        )
