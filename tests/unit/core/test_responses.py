"""Unit tests for the success envelope and path-parameter parsing."""

from __future__ import annotations

import pytest

from modules.core.dtos import CamelDTO
from modules.core.errors import ConstraintViolation, InvalidParameter
from modules.core.responses import envelope, parse_positive_id

pytestmark = pytest.mark.unit


class _Item(CamelDTO):
    item_id: int
    display_name: str


class TestEnvelope:
    def test_default_read_envelope(self):
        response = envelope({"a": 1})
        assert response.status_code == 200
        assert response.data["statusCode"] == "200"
        assert response.data["statusMsg"] == "Success"
        assert response.data["data"] == {"a": 1}
        assert "responseTime" in response.data

    def test_created_keeps_200_status_code_in_body(self):
        response = envelope(None, message="Customer created successfully", status=201)
        assert response.status_code == 201
        assert response.data["statusCode"] == "200"
        assert response.data["statusMsg"] == "Customer created successfully"

    def test_data_null_for_delete(self):
        response = envelope(None, message="Account deleted successfully")
        assert response.data["data"] is None

    def test_dto_serialized_in_camel_case(self):
        response = envelope(_Item(item_id=1, display_name="x"))
        assert response.data["data"] == {"itemId": 1, "displayName": "x"}

    def test_list_of_dtos(self):
        response = envelope([_Item(item_id=1, display_name="a"), _Item(item_id=2, display_name="b")])
        assert [row["itemId"] for row in response.data["data"]] == [1, 2]


class TestParsePositiveId:
    def test_valid(self):
        assert parse_positive_id("42", "customerId") == 42

    @pytest.mark.parametrize("value", ["abc", "1.5", "", None])
    def test_not_an_integer(self, value):
        with pytest.raises(InvalidParameter, match="customerId"):
            parse_positive_id(value, "customerId")

    @pytest.mark.parametrize("value", ["\u0661", "\uff14\uff12", " 1", "1 ", "+1", "1_000"])
    def test_only_plain_ascii_digits_accepted(self, value):
        with pytest.raises(InvalidParameter, match="customerId"):
            parse_positive_id(value, "customerId")

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_not_positive(self, value):
        with pytest.raises(ConstraintViolation) as exc_info:
            parse_positive_id(value, "accountNumber")
        assert exc_info.value.details == {
            "accountNumber": "accountNumber must be a positive number"
        }
        assert exc_info.value.validation_errors == [
            "accountNumber must be a positive number"
        ]
