"""Account DRF serializers for the OpenAPI schema.

Requests are validated by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.constants import ACCOUNT_TYPE_EXAMPLES
from modules.core.serializers import envelope_serializer

_ACCOUNT_TYPE_HELP = "Type of account, e.g. " + ", ".join(ACCOUNT_TYPE_EXAMPLES)


class AccountRequestSerializer(serializers.Serializer):
    customerId = serializers.IntegerField(
        min_value=1, help_text="Customer ID who will own this account"
    )
    accountType = serializers.CharField(max_length=100, help_text=_ACCOUNT_TYPE_HELP)
    branchAddress = serializers.CharField(
        max_length=200, help_text="Branch address where the account will be held"
    )


class AccountPatchSerializer(AccountRequestSerializer):
    customerId = serializers.IntegerField(min_value=1, required=False)
    accountType = serializers.CharField(max_length=100, required=False)
    branchAddress = serializers.CharField(max_length=200, required=False)


class AccountSerializer(serializers.Serializer):
    accountNumber = serializers.IntegerField(help_text="Unique 7-digit account number")
    customerId = serializers.IntegerField()
    accountType = serializers.CharField()
    branchAddress = serializers.CharField()
    createdAt = serializers.DateTimeField()
    createdBy = serializers.CharField()
    updatedAt = serializers.DateTimeField(allow_null=True)
    updatedBy = serializers.CharField(allow_null=True)


AccountResponseSerializer = envelope_serializer("AccountResponse", AccountSerializer())
AccountListResponseSerializer = envelope_serializer(
    "AccountListResponse", AccountSerializer(many=True)
)
