"""Envelope DTOs shared by every endpoint.

- ``CamelDTO``: frozen Pydantic base that speaks camelCase on the wire and
  still accepts snake_case on input.
- ``ResponseDTO``: success envelope ``{statusCode, statusMsg, data, responseTime}``.
- ``ErrorResponseDTO``: error envelope ``{apiPath, errorCode, errorMessage,
  errorTime, errorDetails?, validationErrors?}``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelDTO(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json(self) -> Dict[str, Any]:
        """Dump with camelCase keys and JSON-native values."""
        return self.model_dump(by_alias=True, mode="json")


class ResponseDTO(CamelDTO):
    status_code: str
    status_msg: str
    data: Any = None
    response_time: datetime


class ErrorResponseDTO(CamelDTO):
    api_path: str
    error_code: str
    error_message: str
    error_time: datetime
    error_details: Optional[Dict[str, str]] = None
    validation_errors: Optional[List[str]] = None

    def to_json(self) -> Dict[str, Any]:
        """Optional keys are left out entirely when empty."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
