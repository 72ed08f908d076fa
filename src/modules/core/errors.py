"""Error taxonomy shared by every module.

``ErrorCode`` pairs each failure kind with its HTTP status and default
message.  Domain exceptions subclass ``ServiceError`` and pin one code;
the DRF exception handler (``modules.core.exception_handler``) is the
only place that turns them into HTTP responses.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Dict, List, Optional

from rest_framework import status


class ErrorCode(Enum):
    VALIDATION_FAILED = (
        status.HTTP_400_BAD_REQUEST,
        "Validation failed for the request",
    )
    CONSTRAINT_VALIDATION_FAILED = (
        status.HTTP_400_BAD_REQUEST,
        "Constraint validation failed",
    )
    INVALID_INPUT = (status.HTTP_400_BAD_REQUEST, "Invalid input provided")
    INVALID_PARAMETER = (status.HTTP_400_BAD_REQUEST, "Invalid parameter provided")
    RESOURCE_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Resource not found")
    RESOURCE_ALREADY_EXISTS = (status.HTTP_409_CONFLICT, "Resource already exists")
    OPERATION_NOT_ALLOWED = (status.HTTP_400_BAD_REQUEST, "Operation not allowed")
    GENERATION_FAILED = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Generation operation failed",
    )
    INTERNAL_SERVER_ERROR = (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred",
    )

    def __init__(self, http_status: int, default_message: str) -> None:
        self.http_status = http_status
        self.default_message = default_message

    @property
    def code(self) -> str:
        return self.name


class ServiceError(Exception):
    """Base class for failures that map onto an ``ErrorCode``.

    ``message`` falls back to the code's default message.  ``details`` and
    ``validation_errors`` are copied verbatim into the error envelope.
    """

    error_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[Dict[str, str]] = None,
        validation_errors: Optional[List[str]] = None,
    ) -> None:
        self.message = message or self.error_code.default_message
        self.details = details
        self.validation_errors = validation_errors
        super().__init__(self.message)


class InvalidInput(ServiceError):
    error_code = ErrorCode.INVALID_INPUT


class InvalidParameter(ServiceError):
    """A path or query parameter could not be parsed."""

    error_code = ErrorCode.INVALID_PARAMETER


class ConstraintViolation(ServiceError):
    """A parameter parsed correctly but breaks a declared constraint."""

    error_code = ErrorCode.CONSTRAINT_VALIDATION_FAILED


class ResourceNotFound(ServiceError):
    error_code = ErrorCode.RESOURCE_NOT_FOUND


class ResourceAlreadyExists(ServiceError):
    error_code = ErrorCode.RESOURCE_ALREADY_EXISTS


class OperationNotAllowed(ServiceError):
    error_code = ErrorCode.OPERATION_NOT_ALLOWED


class GenerationFailed(ServiceError):
    error_code = ErrorCode.GENERATION_FAILED
