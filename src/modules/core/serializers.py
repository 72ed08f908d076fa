"""Envelope serializers used to document responses in the OpenAPI schema."""

from __future__ import annotations

from typing import Optional

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    apiPath = serializers.CharField(help_text="API path where the error occurred")
    errorCode = serializers.CharField(help_text="Error code, e.g. RESOURCE_NOT_FOUND")
    errorMessage = serializers.CharField()
    errorTime = serializers.DateTimeField()
    errorDetails = serializers.DictField(child=serializers.CharField(), required=False)
    validationErrors = serializers.ListField(
        child=serializers.CharField(), required=False
    )


def envelope_serializer(
    name: str, data: Optional[serializers.Field] = None
) -> type[serializers.Serializer]:
    """Build a named serializer for ``{statusCode, statusMsg, data, responseTime}``."""
    fields = {
        "statusCode": serializers.CharField(help_text="HTTP status code"),
        "statusMsg": serializers.CharField(),
        "data": data if data is not None else serializers.JSONField(allow_null=True),
        "responseTime": serializers.DateTimeField(),
    }
    return type(name, (serializers.Serializer,), fields)


EmptyResponseSerializer = envelope_serializer("EmptyResponse")
