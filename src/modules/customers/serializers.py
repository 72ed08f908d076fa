"""Customer DRF serializers for the OpenAPI schema.

Requests are validated by the Pydantic DTOs in ``dtos.py``; these
serializers only describe the wire format to drf-spectacular.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.serializers import envelope_serializer


class CustomerRequestSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, help_text="Full name of the customer")
    email = serializers.EmailField(
        max_length=100, help_text="Email address of the customer (must be unique)"
    )
    mobileNumber = serializers.RegexField(
        r"^[89][0-9]{7}$",
        help_text="8 digits starting with 8 or 9 (must be unique)",
    )


class CustomerPatchSerializer(CustomerRequestSerializer):
    name = serializers.CharField(max_length=100, required=False)
    email = serializers.EmailField(max_length=100, required=False)
    mobileNumber = serializers.RegexField(r"^[89][0-9]{7}$", required=False)


class CustomerSerializer(serializers.Serializer):
    customerId = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    mobileNumber = serializers.CharField()
    accountNumbers = serializers.ListField(child=serializers.IntegerField())
    createdAt = serializers.DateTimeField()
    createdBy = serializers.CharField()
    updatedAt = serializers.DateTimeField(allow_null=True)
    updatedBy = serializers.CharField(allow_null=True)


CustomerResponseSerializer = envelope_serializer("CustomerResponse", CustomerSerializer())
CustomerListResponseSerializer = envelope_serializer(
    "CustomerListResponse", CustomerSerializer(many=True)
)
