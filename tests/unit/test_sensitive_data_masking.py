import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_email_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "email": "john@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "john@example.com" not in result["email"]
        assert "***MASKED***" in result["email"]

    def test_mobile_number_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "mobile_number": "81234567"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "81234567" not in result["mobile_number"]
        assert "***MASKED***" in result["mobile_number"]

    def test_mobile_number_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "Customer with mobile number 91234567 already exists"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "91234567" not in result["event"]

    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "account.created", "account_type": "Savings"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["account_type"] == "Savings"
        assert result["event"] == "account.created"

    def test_account_numbers_are_not_mistaken_for_mobile_numbers(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "detail": "account 1234567 moved"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["detail"] == "account 1234567 moved"

    def test_non_string_values_untouched(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "customer_id": 81234567}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["customer_id"] == 81234567
