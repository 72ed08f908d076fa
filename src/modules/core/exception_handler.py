"""DRF exception handler rendering every failure in the error envelope.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  This is the single
place where exceptions are matched to an ``ErrorCode``; views and services
raise and never build error responses themselves.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

import structlog
from django.core.exceptions import PermissionDenied
from django.db import IntegrityError
from django.db.models import ProtectedError
from django.http import Http404
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from modules.core.dtos import ErrorResponseDTO
from modules.core.errors import ErrorCode, ServiceError

logger = structlog.get_logger(__name__)


def error_body(
    api_path: str,
    error_code: str,
    message: str,
    *,
    details: Optional[Dict[str, str]] = None,
    validation_errors: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Render the error envelope as a JSON-ready dict."""
    return ErrorResponseDTO(
        api_path=api_path,
        error_code=error_code,
        error_message=message,
        error_time=timezone.now(),
        error_details=details or None,
        validation_errors=validation_errors or None,
    ).to_json()


def _field_name(loc: Tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def _pydantic_errors(exc: PydanticValidationError) -> Tuple[Dict[str, str], List[str]]:
    details: Dict[str, str] = {}
    messages: List[str] = []
    for error in exc.errors():
        field = _field_name(error.get("loc", ()))
        ctx = error.get("ctx") or {}
        # ValueError raised by our validators: keep its message verbatim.
        message = str(ctx["error"]) if "error" in ctx else error["msg"]
        details.setdefault(field, message)
        messages.append(f"{field}: {message}")
    return details, messages


def _drf_errors(detail: Any) -> Tuple[Dict[str, str], List[str]]:
    details: Dict[str, str] = {}
    messages: List[str] = []
    if isinstance(detail, Mapping):
        for field, value in detail.items():
            message = str(value[0]) if isinstance(value, list) and value else str(value)
            details[str(field)] = message
            messages.append(f"{field}: {message}")
    elif isinstance(detail, list):
        messages.extend(str(item) for item in detail)
    else:
        messages.append(str(detail))
    return details, messages


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    request = context.get("request")
    api_path = request.path if request is not None else ""
    log = logger.bind(api_path=api_path, exception=type(exc).__name__)

    if isinstance(exc, PydanticValidationError):
        code = ErrorCode.VALIDATION_FAILED
        details, messages = _pydantic_errors(exc)
        log.info("request.validation_failed", errors=messages)
        body = error_body(
            api_path,
            code.code,
            code.default_message,
            details=details,
            validation_errors=messages,
        )
        return Response(body, status=code.http_status)

    if isinstance(exc, ServiceError):
        code = exc.error_code
        if code.http_status >= 500:
            log.error("request.service_error", error_code=code.code, error=exc.message)
        else:
            log.info("request.service_error", error_code=code.code, error=exc.message)
        body = error_body(
            api_path,
            code.code,
            exc.message,
            details=exc.details,
            validation_errors=exc.validation_errors,
        )
        return Response(body, status=code.http_status)

    if isinstance(exc, (drf_exceptions.ParseError, drf_exceptions.UnsupportedMediaType)):
        code = ErrorCode.INVALID_INPUT
        log.info("request.invalid_input", error=str(exc.detail))
        body = error_body(api_path, code.code, str(exc.detail) or code.default_message)
        return Response(body, status=code.http_status)

    if isinstance(exc, drf_exceptions.ValidationError):
        code = ErrorCode.VALIDATION_FAILED
        details, messages = _drf_errors(exc.detail)
        body = error_body(
            api_path,
            code.code,
            code.default_message,
            details=details,
            validation_errors=messages,
        )
        return Response(body, status=code.http_status)

    if isinstance(exc, (Http404, drf_exceptions.NotFound)):
        code = ErrorCode.RESOURCE_NOT_FOUND
        body = error_body(api_path, code.code, code.default_message)
        return Response(body, status=code.http_status)

    if isinstance(exc, ProtectedError):
        code = ErrorCode.OPERATION_NOT_ALLOWED
        log.warning("request.protected_delete", error=str(exc))
        body = error_body(api_path, code.code, code.default_message)
        return Response(body, status=code.http_status)

    if isinstance(exc, IntegrityError):
        code = ErrorCode.CONSTRAINT_VALIDATION_FAILED
        log.warning("request.integrity_error", error=str(exc))
        body = error_body(api_path, code.code, code.default_message)
        return Response(body, status=code.http_status)

    if isinstance(exc, (drf_exceptions.APIException, PermissionDenied)):
        # Let DRF compute status and headers (Allow, Retry-After, ...).
        response = drf_exception_handler(exc, context)
        if response is not None:
            error_code = getattr(exc, "default_code", "error").upper()
            response.data = error_body(api_path, error_code, _detail_text(exc))
            return response

    log.exception("request.unhandled_error")
    set_rollback()
    code = ErrorCode.INTERNAL_SERVER_ERROR
    body = error_body(api_path, code.code, code.default_message)
    return Response(body, status=code.http_status)


def _detail_text(exc: Exception) -> str:
    detail = getattr(exc, "detail", None)
    return str(detail) if detail else str(exc)
