"""Account domain exceptions.

Raised by the Service Layer and the number generator.  A missing
customer is reported with ``modules.customers.exceptions.CustomerNotFound``.
"""

from __future__ import annotations

from modules.core.errors import GenerationFailed, ResourceNotFound


class AccountNotFound(ResourceNotFound):
    """The requested account does not exist."""


class AccountNumberGenerationFailed(GenerationFailed):
    """No unused account number was found within the attempt budget."""
