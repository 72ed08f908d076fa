"""Account API views.

Exposes the ``AccountService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to the project's exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.accounts.dtos import AccountPatchDTO, AccountRequestDTO
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.serializers import (
    AccountListResponseSerializer,
    AccountPatchSerializer,
    AccountRequestSerializer,
    AccountResponseSerializer,
)
from modules.accounts.services import AccountService
from modules.core.responses import envelope, parse_positive_id
from modules.core.serializers import EmptyResponseSerializer, ErrorResponseSerializer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: ErrorResponseSerializer,
    status.HTTP_404_NOT_FOUND: ErrorResponseSerializer,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ErrorResponseSerializer,
}


@extend_schema_view(
    list=extend_schema(
        summary="List all accounts",
        responses={200: AccountListResponseSerializer, **_ERRORS},
    ),
    retrieve=extend_schema(
        summary="Get an account by number",
        responses={200: AccountResponseSerializer, **_ERRORS},
    ),
    create=extend_schema(
        summary="Open an account for an existing customer",
        request=AccountRequestSerializer,
        responses={201: AccountResponseSerializer, **_ERRORS},
    ),
    update=extend_schema(
        summary="Replace an account",
        request=AccountRequestSerializer,
        responses={200: AccountResponseSerializer, **_ERRORS},
    ),
    partial_update=extend_schema(
        summary="Partially update an account",
        request=AccountPatchSerializer,
        responses={200: AccountResponseSerializer, **_ERRORS},
    ),
    destroy=extend_schema(
        summary="Delete an account",
        responses={200: EmptyResponseSerializer, **_ERRORS},
    ),
    by_customer=extend_schema(
        summary="List a customer's accounts",
        responses={200: AccountListResponseSerializer, **_ERRORS},
    ),
)
class AccountViewSet(ViewSet):
    """ViewSet for Account CRUD operations plus the per-customer listing."""

    lookup_field = "account_number"
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = AccountService(
            account_repository=AccountDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/accounts"""
        return envelope(self._service.list_accounts())

    def retrieve(
        self, request: Request, account_number: str | None = None
    ) -> Response:
        """GET /api/accounts/{accountNumber}"""
        number = parse_positive_id(account_number, "accountNumber")
        return envelope(self._service.get_account(number))

    @action(detail=False, methods=["get"], url_path=r"customer/(?P<customer_id>[^/]+)")
    def by_customer(self, request: Request, customer_id: str | None = None) -> Response:
        """GET /api/accounts/customer/{customerId}"""
        pk = parse_positive_id(customer_id, "customerId")
        return envelope(self._service.list_accounts_by_customer(pk))

    def create(self, request: Request) -> Response:
        """POST /api/accounts"""
        dto = AccountRequestDTO.model_validate(request.data)
        account = self._service.create_account(dto)
        return envelope(
            account,
            message="Account created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, account_number: str | None = None) -> Response:
        """PUT /api/accounts/{accountNumber}"""
        number = parse_positive_id(account_number, "accountNumber")
        dto = AccountRequestDTO.model_validate(request.data)
        account = self._service.update_account(number, dto)
        return envelope(account, message="Account updated successfully")

    def partial_update(
        self, request: Request, account_number: str | None = None
    ) -> Response:
        """PATCH /api/accounts/{accountNumber}"""
        number = parse_positive_id(account_number, "accountNumber")
        dto = AccountPatchDTO.model_validate(request.data)
        account = self._service.partial_update_account(number, dto)
        return envelope(account, message="Account updated successfully")

    def destroy(self, request: Request, account_number: str | None = None) -> Response:
        """DELETE /api/accounts/{accountNumber}"""
        number = parse_positive_id(account_number, "accountNumber")
        self._service.delete_account(number)
        return envelope(None, message="Account deleted successfully")
