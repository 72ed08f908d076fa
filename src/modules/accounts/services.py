"""Account service layer (Use Cases).

Business rules enforced here:
- An account can only be created for, or moved to, an existing customer.
- New accounts get a unique random number from ``AccountNumberGenerator``.
- Deletion by number is unconditional once the account exists.

All write operations are atomic: the existence checks, number draw and
write share one transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.accounts.dtos import AccountOutputDTO
from modules.accounts.exceptions import AccountNotFound
from modules.accounts.generators import AccountNumberGenerator
from modules.accounts.models import Account
from modules.core.audit import Auditor
from modules.customers.exceptions import CustomerNotFound

if TYPE_CHECKING:
    from modules.accounts.dtos import AccountPatchDTO, AccountRequestDTO
    from modules.accounts.repositories.interfaces import IAccountRepository
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class AccountService:
    """Application service for Account use-cases.

    Receives repositories via constructor injection (DIP).  When no
    generator is given, one is built on top of ``account_repository``.
    """

    def __init__(
        self,
        account_repository: IAccountRepository,
        customer_repository: ICustomerRepository,
        number_generator: Optional[AccountNumberGenerator] = None,
        auditor: Optional[Auditor] = None,
    ) -> None:
        self._repo = account_repository
        self._customer_repo = customer_repository
        self._generator = number_generator or AccountNumberGenerator(account_repository)
        self._auditor = auditor or Auditor()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_account(self, dto: AccountRequestDTO) -> AccountOutputDTO:
        """Open an account for an existing customer.

        Raises:
            CustomerNotFound: the referenced customer does not exist.
            AccountNumberGenerationFailed: no free account number was found.
        """
        log = logger.bind(customer_id=dto.customer_id)
        self._ensure_customer_exists(dto.customer_id)

        account = Account(
            account_number=self._generator.generate(),
            customer_id=dto.customer_id,
            account_type=dto.account_type,
            branch_address=dto.branch_address,
        )
        self._auditor.stamp_created(account)
        account = self._repo.save(account)
        log.info("account.created", account_number=account.account_number)
        return AccountOutputDTO.from_entity(account)

    @transaction.atomic
    def update_account(
        self, account_number: int, dto: AccountRequestDTO
    ) -> AccountOutputDTO:
        """Replace every editable field of an account.

        Raises:
            AccountNotFound: the account does not exist.
            CustomerNotFound: ``customer_id`` changed to an unknown customer.
        """
        account = self._get_or_raise(account_number)
        if dto.customer_id != account.customer_id:
            self._ensure_customer_exists(dto.customer_id)

        account.customer_id = dto.customer_id
        account.account_type = dto.account_type
        account.branch_address = dto.branch_address
        return self._save_update(account)

    @transaction.atomic
    def partial_update_account(
        self, account_number: int, dto: AccountPatchDTO
    ) -> AccountOutputDTO:
        """Apply only the fields supplied in ``dto``.

        Raises:
            AccountNotFound: the account does not exist.
            CustomerNotFound: ``customer_id`` changed to an unknown customer.
        """
        account = self._get_or_raise(account_number)
        if dto.customer_id is not None and dto.customer_id != account.customer_id:
            self._ensure_customer_exists(dto.customer_id)
            account.customer_id = dto.customer_id
        if dto.account_type is not None:
            account.account_type = dto.account_type
        if dto.branch_address is not None:
            account.branch_address = dto.branch_address
        return self._save_update(account)

    @transaction.atomic
    def delete_account(self, account_number: int) -> None:
        """Remove an account by number.

        Raises:
            AccountNotFound: the account does not exist.
        """
        if not self._repo.delete(account_number):
            raise AccountNotFound(
                f"Account not found with account number: {account_number}"
            )
        logger.info("account.deleted", account_number=account_number)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_account(self, account_number: int) -> AccountOutputDTO:
        """Raises ``AccountNotFound`` if the account does not exist."""
        return AccountOutputDTO.from_entity(self._get_or_raise(account_number))

    def list_accounts(self) -> List[AccountOutputDTO]:
        return [AccountOutputDTO.from_entity(account) for account in self._repo.list()]

    def list_accounts_by_customer(self, customer_id: int) -> List[AccountOutputDTO]:
        """Raises ``CustomerNotFound`` if the customer does not exist."""
        self._ensure_customer_exists(customer_id)
        return [
            AccountOutputDTO.from_entity(account)
            for account in self._repo.list_by_customer(customer_id)
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, account_number: int) -> Account:
        account = self._repo.get_by_id(account_number)
        if not account:
            raise AccountNotFound(
                f"Account not found with account number: {account_number}"
            )
        return account

    def _ensure_customer_exists(self, customer_id: int) -> None:
        if not self._customer_repo.exists(customer_id):
            logger.warning("account.unknown_customer", customer_id=customer_id)
            raise CustomerNotFound(f"Customer not found with id: {customer_id}")

    def _save_update(self, account: Account) -> AccountOutputDTO:
        self._auditor.stamp_updated(account)
        account = self._repo.save(account)
        logger.info("account.updated", account_number=account.account_number)
        return AccountOutputDTO.from_entity(account)
