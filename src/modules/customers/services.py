"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected repositories.

Business rules enforced here:
- Email must be unique; re-checked on update only when it changes.
- Mobile number must be unique; re-checked on update only when it changes.
- A customer owning accounts cannot be deleted.
- Every read is enriched with the customer's account numbers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.core.audit import Auditor
from modules.customers.dtos import CustomerOutputDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasAccounts,
    CustomerNotFound,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountRepository
    from modules.customers.dtos import CustomerPatchDTO, CustomerRequestDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives repositories via constructor injection (DIP).  The account
    repository is only read: to list account numbers and to guard deletion.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        account_repository: IAccountRepository,
        auditor: Optional[Auditor] = None,
    ) -> None:
        self._repo = repository
        self._account_repo = account_repository
        self._auditor = auditor or Auditor()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerRequestDTO) -> CustomerOutputDTO:
        """Create a new customer after enforcing uniqueness rules.

        Raises:
            CustomerAlreadyExists: if the email or mobile number is taken.
        """
        self._ensure_email_free(dto.email)
        self._ensure_mobile_number_free(dto.mobile_number)

        customer = Customer(
            name=dto.name,
            email=dto.email,
            mobile_number=dto.mobile_number,
        )
        self._auditor.stamp_created(customer)
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.customer_id)
        return CustomerOutputDTO.from_entity(customer, account_numbers=[])

    @transaction.atomic
    def update_customer(
        self, customer_id: int, dto: CustomerRequestDTO
    ) -> CustomerOutputDTO:
        """Replace every editable field of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if a changed email / mobile number collides.
        """
        customer = self._get_or_raise(customer_id)

        if dto.email != customer.email:
            self._ensure_email_free(dto.email)
        if dto.mobile_number != customer.mobile_number:
            self._ensure_mobile_number_free(dto.mobile_number)

        customer.name = dto.name
        customer.email = dto.email
        customer.mobile_number = dto.mobile_number
        return self._save_update(customer)

    @transaction.atomic
    def partial_update_customer(
        self, customer_id: int, dto: CustomerPatchDTO
    ) -> CustomerOutputDTO:
        """Apply only the fields supplied in ``dto``.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if a changed email / mobile number collides.
        """
        customer = self._get_or_raise(customer_id)

        if dto.email is not None and dto.email != customer.email:
            self._ensure_email_free(dto.email)
            customer.email = dto.email
        if dto.mobile_number is not None and dto.mobile_number != customer.mobile_number:
            self._ensure_mobile_number_free(dto.mobile_number)
            customer.mobile_number = dto.mobile_number
        if dto.name is not None:
            customer.name = dto.name

        return self._save_update(customer)

    @transaction.atomic
    def delete_customer(self, customer_id: int) -> None:
        """Remove a customer that owns no accounts.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerHasAccounts: if the customer still owns an account.
        """
        self._get_or_raise(customer_id)
        if self._account_repo.exists_for_customer(customer_id):
            logger.warning("customer.delete_blocked", customer_id=customer_id)
            raise CustomerHasAccounts(
                f"Cannot delete customer with id {customer_id} "
                "because they have associated accounts"
            )
        self._repo.delete(customer_id)
        logger.info("customer.deleted", customer_id=customer_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, customer_id: int) -> CustomerOutputDTO:
        """Retrieve a single customer with its account numbers.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_or_raise(customer_id)
        return self._to_dto(customer)

    def list_customers(self) -> List[CustomerOutputDTO]:
        customers = self._repo.list()
        numbers = self._account_repo.account_numbers_by_customer(
            [customer.customer_id for customer in customers]
        )
        return [
            CustomerOutputDTO.from_entity(
                customer, account_numbers=numbers.get(customer.customer_id, [])
            )
            for customer in customers
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, customer_id: int) -> Customer:
        customer = self._repo.get_by_id(customer_id)
        if not customer:
            raise CustomerNotFound(f"Customer not found with id: {customer_id}")
        return customer

    def _ensure_email_free(self, email: str) -> None:
        if self._repo.get_by_email(email):
            logger.warning("customer.duplicate_email", email=email)
            raise CustomerAlreadyExists(f"Customer with email {email} already exists")

    def _ensure_mobile_number_free(self, mobile_number: str) -> None:
        if self._repo.get_by_mobile_number(mobile_number):
            logger.warning("customer.duplicate_mobile_number", mobile_number=mobile_number)
            raise CustomerAlreadyExists(
                f"Customer with mobile number {mobile_number} already exists"
            )

    def _save_update(self, customer: Customer) -> CustomerOutputDTO:
        self._auditor.stamp_updated(customer)
        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=customer.customer_id)
        return self._to_dto(customer)

    def _to_dto(self, customer: Customer) -> CustomerOutputDTO:
        numbers = self._account_repo.account_numbers_by_customer([customer.customer_id])
        return CustomerOutputDTO.from_entity(
            customer, account_numbers=numbers.get(customer.customer_id, [])
        )
