"""Unit tests for Account DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.accounts.dtos import AccountOutputDTO, AccountPatchDTO, AccountRequestDTO
from modules.accounts.models import Account

pytestmark = pytest.mark.unit

VALID = {"customerId": 1, "accountType": "Savings", "branchAddress": "1 Main St"}


def _fields(exc_info) -> set:
    return {err["loc"][0] for err in exc_info.value.errors()}


class TestAccountRequestDTO:
    def test_valid_camel_case(self):
        dto = AccountRequestDTO.model_validate(VALID)
        assert dto.customer_id == 1
        assert dto.account_type == "Savings"
        assert dto.branch_address == "1 Main St"

    def test_numeric_string_customer_id_is_coerced(self):
        dto = AccountRequestDTO.model_validate({**VALID, "customerId": "7"})
        assert dto.customer_id == 7

    @pytest.mark.parametrize("customer_id", [True, False])
    def test_boolean_customer_id_rejected(self, customer_id):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({**VALID, "customerId": customer_id})
        assert _fields(exc_info) == {"customerId"}
        assert "Customer ID must be an integer" in str(exc_info.value)

    @pytest.mark.parametrize("customer_id", [0, -1])
    def test_customer_id_must_be_positive(self, customer_id):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({**VALID, "customerId": customer_id})
        assert _fields(exc_info) == {"customerId"}

    def test_blank_account_type(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({**VALID, "accountType": "  "})
        assert "Account type cannot be blank" in str(exc_info.value)

    def test_blank_branch_address(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({**VALID, "branchAddress": ""})
        assert "Branch address cannot be blank" in str(exc_info.value)

    def test_branch_address_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({**VALID, "branchAddress": "x" * 201})
        assert _fields(exc_info) == {"branchAddress"}

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountRequestDTO.model_validate({})
        assert _fields(exc_info) == {"customerId", "accountType", "branchAddress"}


class TestAccountPatchDTO:
    def test_empty_patch_is_valid(self):
        dto = AccountPatchDTO.model_validate({})
        assert dto.customer_id is None
        assert dto.account_type is None
        assert dto.branch_address is None

    def test_present_fields_are_validated(self):
        with pytest.raises(ValidationError):
            AccountPatchDTO.model_validate({"accountType": ""})

    def test_boolean_customer_id_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountPatchDTO.model_validate({"customerId": True})
        assert _fields(exc_info) == {"customerId"}

    def test_null_customer_id_means_absent(self):
        assert AccountPatchDTO.model_validate({"customerId": None}).customer_id is None


class TestAccountOutputDTO:
    def test_from_entity(self):
        account = Account(
            account_number=1234567,
            customer_id=3,
            account_type="Checking",
            branch_address="2 High St",
            created_by="Account Service",
        )
        data = AccountOutputDTO.from_entity(account).to_json()
        assert data["accountNumber"] == 1234567
        assert data["customerId"] == 3
        assert data["accountType"] == "Checking"
        assert data["branchAddress"] == "2 High St"
        assert data["createdBy"] == "Account Service"
        assert data["updatedAt"] is None
