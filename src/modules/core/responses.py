"""Helpers that wrap view results in the success envelope."""

from __future__ import annotations

import re
from typing import Any

from django.utils import timezone
from pydantic import BaseModel
from rest_framework import status as http_status
from rest_framework.response import Response

from modules.core.dtos import ResponseDTO
from modules.core.errors import ConstraintViolation, InvalidParameter

SUCCESS_MESSAGE = "Success"
# Body status code of every success envelope, including 201 creates.
SUCCESS_STATUS_CODE = "200"

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _to_primitive(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json")
    if isinstance(data, (list, tuple)):
        return [_to_primitive(item) for item in data]
    return data


def envelope(
    data: Any = None,
    *,
    message: str = SUCCESS_MESSAGE,
    status: int = http_status.HTTP_200_OK,
) -> Response:
    """Build a ``Response`` carrying ``data`` inside the standard envelope.

    ``status`` sets the HTTP status only; the body always reports ``"200"``.
    """
    body = ResponseDTO(
        status_code=SUCCESS_STATUS_CODE,
        status_msg=message,
        data=_to_primitive(data),
        response_time=timezone.now(),
    )
    return Response(body.to_json(), status=status)


def parse_positive_id(value: Any, name: str) -> int:
    """Parse a path parameter as a positive integer.

    Only ASCII digits with an optional leading minus sign are accepted.

    Raises:
        InvalidParameter: ``value`` is not an integer.
        ConstraintViolation: ``value`` is zero or negative.
    """
    if not isinstance(value, str) or not _INTEGER_PATTERN.fullmatch(value):
        raise InvalidParameter(
            f"Invalid value '{value}' for parameter '{name}'. Expected type: int"
        )
    parsed = int(value)
    if parsed <= 0:
        message = f"{name} must be a positive number"
        raise ConstraintViolation(validation_errors=[message], details={name: message})
    return parsed
