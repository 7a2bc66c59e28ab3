"""
Tests for MizbanCloudError.

Run:
    python -m pytest tests/test_exceptions.py -v
"""

import pytest

from mizbancloud import MizbanCloudError


class TestConstructor:

    def test_message_and_status_code(self):
        error = MizbanCloudError("Test error", 400, {"success": False, "message": "Test error"})

        assert error.message == "Test error"
        assert error.status_code == 400
        assert str(error) == "MizbanCloudError (HTTP 400): Test error"

    def test_is_an_exception(self):
        error = MizbanCloudError("Test", 500, {"success": False, "message": "Test"})

        assert isinstance(error, Exception)
        with pytest.raises(MizbanCloudError):
            raise error

    def test_network_error_string_has_no_status(self):
        error = MizbanCloudError("Network error", 0, {"success": False, "message": "Network error"})
        assert str(error) == "MizbanCloudError: Network error"

    def test_default_envelope(self):
        error = MizbanCloudError("Boom", 500)
        assert error.response == {"success": False, "message": "Boom"}

    def test_stores_full_response(self):
        response = {
            "success": False,
            "message": "Full response test",
            "fields": ["field1"],
            "invalidFields": ["field2"],
            "missing_fields": ["field3"],
        }
        error = MizbanCloudError("Error", 400, response)

        assert error.response == response


class TestFieldErrors:

    def test_exposes_all_field_lists(self):
        error = MizbanCloudError("Validation error", 422, {
            "success": False,
            "message": "Validation error",
            "fields": ["email"],
            "invalidFields": ["password"],
            "missing_fields": ["name"],
        })

        assert error.fields == ["email"]
        assert error.invalid_fields == ["password"]
        assert error.missing_fields == ["name"]

    def test_absent_field_lists_are_none(self):
        """No field errors reported reads as None, not as an empty list."""
        error = MizbanCloudError("Simple error", 400, {"success": False, "message": "Simple error"})

        assert error.fields is None
        assert error.invalid_fields is None
        assert error.missing_fields is None

    def test_field_lists_follow_the_envelope(self):
        """Field views are read from the stored envelope on every access."""
        error = MizbanCloudError("Invalid", 422, {"success": False, "message": "Invalid"})
        assert error.missing_fields is None

        error.response["missing_fields"] = ["address"]
        assert error.missing_fields == ["address"]

        error.response = {"success": False, "message": "Invalid", "fields": ["phone"]}
        assert error.fields == ["phone"]
        assert error.missing_fields is None
