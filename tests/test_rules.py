"""Tests for the rule catalog."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from pydantic import ValidationError

from formvalidator.errors import RuleDefinitionError, UnknownRuleError
from formvalidator.logic.rules import (
    RULES,
    EMAIL,
    NAME,
    PASSWORD_LENGTH,
    PHONE_NUMBER,
    REQUIRED,
    ZIP_CODE,
    Rule,
    get_rule,
    min_length_rule,
    pattern_rule,
    resolve_rules,
)


class TestRequiredRule:
    def test_empty(self):
        assert REQUIRED("") is False
        assert REQUIRED.message == "This field is required"

    def test_non_empty(self):
        assert REQUIRED("x") is True

    def test_whitespace_counts_as_content(self):
        assert REQUIRED("   ") is True


class TestEmailRule:
    def test_valid_email(self):
        assert EMAIL("test@example.com") is True
        assert EMAIL("first.last+tag@sub.example.co") is True

    def test_invalid_email(self):
        assert EMAIL("not-an-email") is False
        assert EMAIL.message == "Invalid email address"

    def test_short_tld(self):
        assert EMAIL("a@b.c") is False

    def test_trailing_newline(self):
        assert EMAIL("a@b.com\n") is False


class TestPhoneNumberRule:
    def test_ten_digits(self):
        assert PHONE_NUMBER("1234567890") is True

    def test_nine_digits(self):
        assert PHONE_NUMBER("123456789") is False

    def test_eleven_digits(self):
        assert PHONE_NUMBER("12345678901") is False

    def test_non_digit(self):
        assert PHONE_NUMBER("12345a7890") is False
        assert PHONE_NUMBER("(615) 555-1234") is False

    def test_non_ascii_digits(self):
        assert PHONE_NUMBER("١٢٣٤٥٦٧٨٩٠") is False


class TestZipCodeRule:
    def test_five_digits(self):
        assert ZIP_CODE("37201") is True

    def test_plus_four(self):
        assert ZIP_CODE("37201-1234") is True

    def test_bad_plus_four(self):
        assert ZIP_CODE("37201-123") is False
        assert ZIP_CODE("37201-") is False

    def test_too_short(self):
        assert ZIP_CODE("3720") is False


class TestLengthRules:
    def test_name_min_length(self):
        assert NAME("Al") is False
        assert NAME("Ada") is True
        assert NAME.message == "Name must be at least 3 characters long"

    def test_password_min_length(self):
        assert PASSWORD_LENGTH("1234567") is False
        assert PASSWORD_LENGTH("12345678") is True
        assert PASSWORD_LENGTH.message == "Password must be at least 8 characters long"


class TestRuleDefinition:
    def test_rules_are_frozen(self):
        with pytest.raises(ValidationError):
            REQUIRED.message = "changed"

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            Rule(name="x", message="", predicate=lambda v: True)

    def test_predicate_must_be_callable(self):
        with pytest.raises(ValidationError):
            Rule(name="x", message="m", predicate="not callable")

    def test_invalid_pattern_fails_at_definition(self):
        with pytest.raises(RuleDefinitionError) as exc:
            pattern_rule("broken", "Broken", "[0-9")
        assert exc.value.details["rule"] == "broken"

    def test_pattern_rule_matches_whole_value(self):
        rule = pattern_rule("digits", "Digits only", r"[0-9]+")
        assert rule("123") is True
        assert rule("123x") is False

    def test_negative_min_length(self):
        with pytest.raises(RuleDefinitionError):
            min_length_rule("bad", "Bad", -1)

    def test_custom_rule(self):
        no_spaces = Rule(name="no_spaces", message="No spaces", predicate=lambda v: " " not in v)
        assert no_spaces("abc") is True
        assert no_spaces("a b") is False


class TestCatalog:
    def test_catalog_entries(self):
        assert set(RULES) == {
            "required",
            "email",
            "phone_number",
            "zip_code",
            "name",
            "password_length",
        }

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            RULES["required"] = NAME

    def test_get_rule(self):
        assert get_rule("email") is EMAIL

    def test_get_unknown(self):
        assert get_rule("nonexistent") is None

    def test_resolve_keeps_order(self):
        assert resolve_rules(["required", "email"]) == [REQUIRED, EMAIL]

    def test_resolve_unknown(self):
        with pytest.raises(UnknownRuleError) as exc:
            resolve_rules(["required", "nope"])
        assert "nope" in str(exc.value)
