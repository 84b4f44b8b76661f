"""Unit tests for inquiry validation."""

import pytest

from wholesale_inquiry.core.models import REQUIRED_FIELDS
from wholesale_inquiry.core.validation import (
    find_missing_fields,
    is_valid_email,
    validate_inquiry,
)


class TestMissingFields:
    """Tests for required-field detection."""

    def test_valid_payload_has_no_missing_fields(self, valid_payload):
        assert find_missing_fields(valid_payload) == []

    def test_empty_payload_lists_all_fields_in_order(self):
        assert find_missing_fields({}) == list(REQUIRED_FIELDS)

    def test_whitespace_only_counts_as_missing(self, valid_payload):
        valid_payload["city"] = "   \t"
        assert find_missing_fields(valid_payload) == ["city"]

    def test_none_and_non_string_count_as_missing(self, valid_payload):
        valid_payload["zip"] = None
        valid_payload["name"] = 42
        assert find_missing_fields(valid_payload) == ["name", "zip"]

    def test_order_follows_declaration_not_payload(self, valid_payload):
        for key in ("message", "business_type", "email"):
            del valid_payload[key]
        assert find_missing_fields(valid_payload) == ["email", "business_type", "message"]

    def test_optional_fields_are_not_required(self, minimal_payload):
        assert find_missing_fields(minimal_payload) == []


class TestEmailPattern:
    """Tests for the permissive email check."""

    @pytest.mark.parametrize("value", [
        "dana@larkcafe.com",
        "a@b.c",
        "first.last+tag@sub.example.co.uk",
        "weird!chars@x.y",
    ])
    def test_accepts(self, value):
        assert is_valid_email(value) is True

    @pytest.mark.parametrize("value", [
        "plainaddress",
        "no-dot@domain",
        "two@@example.com",
        "a@b@c.com",
        "spaces in@example.com",
        " dana@larkcafe.com",
        "dana@larkcafe.com\n",
        "@example.com",
        "dana@.",
    ])
    def test_rejects(self, value):
        assert is_valid_email(value) is False


class TestValidateInquiry:
    """Tests for the combined validation result."""

    def test_valid(self, valid_payload):
        result = validate_inquiry(valid_payload)
        assert result.is_valid
        assert result.error_message is None

    def test_missing_fields_message(self, valid_payload):
        del valid_payload["name"]
        valid_payload["coffee_program"] = ""
        result = validate_inquiry(valid_payload)
        assert not result.is_valid
        assert result.error_message == "Missing required fields: name, coffee_program"

    def test_invalid_email_message(self, valid_payload):
        valid_payload["email"] = "dana-at-larkcafe"
        result = validate_inquiry(valid_payload)
        assert result.missing_fields == []
        assert result.email_valid is False
        assert result.error_message == "Invalid email address"

    def test_missing_fields_take_precedence_over_email(self, valid_payload):
        valid_payload["email"] = "bad"
        valid_payload["message"] = " "
        result = validate_inquiry(valid_payload)
        assert result.error_message == "Missing required fields: message"
