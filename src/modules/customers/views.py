"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Views parse input into DTOs and wrap results in the success envelope;
validation and domain exceptions propagate to the project's exception
handler, which renders the error envelope.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.core.responses import envelope, parse_positive_id
from modules.core.serializers import EmptyResponseSerializer, ErrorResponseSerializer
from modules.customers.dtos import CustomerPatchDTO, CustomerRequestDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CustomerListResponseSerializer,
    CustomerPatchSerializer,
    CustomerRequestSerializer,
    CustomerResponseSerializer,
)
from modules.customers.services import CustomerService

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: ErrorResponseSerializer,
    status.HTTP_404_NOT_FOUND: ErrorResponseSerializer,
    status.HTTP_409_CONFLICT: ErrorResponseSerializer,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ErrorResponseSerializer,
}


@extend_schema_view(
    list=extend_schema(
        summary="List all customers",
        responses={200: CustomerListResponseSerializer, **_ERRORS},
    ),
    retrieve=extend_schema(
        summary="Get a customer by ID",
        responses={200: CustomerResponseSerializer, **_ERRORS},
    ),
    create=extend_schema(
        summary="Create a new customer",
        request=CustomerRequestSerializer,
        responses={201: CustomerResponseSerializer, **_ERRORS},
    ),
    update=extend_schema(
        summary="Replace a customer",
        request=CustomerRequestSerializer,
        responses={200: CustomerResponseSerializer, **_ERRORS},
    ),
    partial_update=extend_schema(
        summary="Partially update a customer",
        request=CustomerPatchSerializer,
        responses={200: CustomerResponseSerializer, **_ERRORS},
    ),
    destroy=extend_schema(
        summary="Delete a customer without accounts",
        responses={200: EmptyResponseSerializer, **_ERRORS},
    ),
)
class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with the Django repositories (DIP); no ORM
    access happens here.
    """

    lookup_field = "customer_id"
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            account_repository=AccountDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/customers"""
        return envelope(self._service.list_customers())

    def retrieve(self, request: Request, customer_id: str | None = None) -> Response:
        """GET /api/customers/{customerId}"""
        pk = parse_positive_id(customer_id, "customerId")
        return envelope(self._service.get_customer(pk))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/customers"""
        dto = CustomerRequestDTO.model_validate(request.data)
        customer = self._service.create_customer(dto)
        return envelope(
            customer,
            message="Customer created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, customer_id: str | None = None) -> Response:
        """PUT /api/customers/{customerId}"""
        pk = parse_positive_id(customer_id, "customerId")
        dto = CustomerRequestDTO.model_validate(request.data)
        customer = self._service.update_customer(pk, dto)
        return envelope(customer, message="Customer updated successfully")

    def partial_update(
        self, request: Request, customer_id: str | None = None
    ) -> Response:
        """PATCH /api/customers/{customerId}"""
        pk = parse_positive_id(customer_id, "customerId")
        dto = CustomerPatchDTO.model_validate(request.data)
        customer = self._service.partial_update_customer(pk, dto)
        return envelope(customer, message="Customer updated successfully")

    def destroy(self, request: Request, customer_id: str | None = None) -> Response:
        """DELETE /api/customers/{customerId}"""
        pk = parse_positive_id(customer_id, "customerId")
        self._service.delete_customer(pk)
        return envelope(None, message="Customer deleted successfully")
