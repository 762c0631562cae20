"""Tests for password policy messages."""

import pytest

from helpers.password_validation import (
    get_password_strength_message,
    validate_password,
)
from models.password_types import ComplexityLevel
from models.schemas import PolicyOptions
from services.password_engine import PasswordEngine


class TestValidatePassword:
    """Test cases for password validation messages."""

    def test_valid_password_with_defaults(self, engine):
        """Password meeting the default policy is valid."""
        is_valid, errors = validate_password("Tr0ub4dor", engine)
        assert is_valid is True
        assert errors == []

    def test_password_too_short(self, word_dictionary):
        """Password shorter than minimum length fails."""
        options = PolicyOptions(
            minimum_length=8,
            required_lower_count=0,
            required_upper_count=0,
            required_numeric_count=0,
            minimum_complexity_level=ComplexityLevel.NONE,
        )
        engine = PasswordEngine(word_dictionary, options)
        is_valid, errors = validate_password("short", engine)
        assert is_valid is False
        assert len(errors) == 1
        assert "between 8 and 15 characters" in errors[0]

    def test_missing_uppercase(self, engine):
        """Password without uppercase fails when required."""
        is_valid, errors = validate_password("abcdefg12", engine)
        assert is_valid is False
        assert errors == ["Password must contain at least one uppercase letter"]

    def test_missing_special_uses_plural(self, word_dictionary):
        """Counts above one are reported with plural labels."""
        engine = PasswordEngine(
            word_dictionary, PolicyOptions(required_special_count=2)
        )
        is_valid, errors = validate_password("Tr0ub4dor!", engine)
        assert is_valid is False
        assert errors == ["Password must contain at least 2 special characters"]

    def test_complexity_too_low(self, engine):
        """Dictionary words fail the complexity requirement."""
        is_valid, errors = validate_password("Password", engine)
        assert is_valid is False
        assert "Password complexity is low, but medium is required" in errors

    def test_multiple_validation_errors(self, engine):
        """Password can have multiple validation errors."""
        is_valid, errors = validate_password("short", engine)
        assert is_valid is False
        # too short, no uppercase, no digit, complexity
        assert len(errors) == 4

    @pytest.mark.parametrize(
        "password",
        ["Tr0ub4dor", "Password1", "password", "short", "p@ssw0rd", "", "Abcdef1!"],
    )
    def test_consistent_with_format_standards(self, engine, password):
        """Validation agrees with meets_format_standards."""
        is_valid, _ = validate_password(password, engine)
        assert is_valid is engine.meets_format_standards(password)


class TestPasswordStrengthMessage:
    """Test cases for password strength message generation."""

    def test_strength_message_default_policy(self):
        """Message for the default policy."""
        assert get_password_strength_message() == (
            "Password must contain between 6 and 15 characters, "
            "one lowercase letter, one uppercase letter, and one digit "
            "(minimum complexity: medium)"
        )

    def test_strength_message_plural_counts(self):
        """Counts above one use plural labels."""
        message = get_password_strength_message(
            PolicyOptions(required_numeric_count=2, required_special_count=3)
        )
        assert "2 digits" in message
        assert "3 special characters" in message

    def test_strength_message_length_only(self):
        """A policy without type or complexity requirements only mentions length."""
        options = PolicyOptions(
            required_lower_count=0,
            required_upper_count=0,
            required_numeric_count=0,
            minimum_complexity_level=ComplexityLevel.NONE,
        )
        assert (
            get_password_strength_message(options)
            == "Password must contain between 6 and 15 characters"
        )
