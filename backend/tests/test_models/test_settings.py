"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from models.config import Settings, get_settings, settings
from models.password_types import ComplexityLevel
from models.schemas import PolicyOptions


class TestSettings:
    """Test cases for Settings."""

    def test_policy_defaults(self):
        """Policy settings default to the documented policy."""
        config = Settings()
        assert config.PASSWORD_MINIMUM_LENGTH == 6
        assert config.PASSWORD_MAXIMUM_LENGTH == 15
        assert config.PASSWORD_MINIMUM_COMPLEXITY is ComplexityLevel.MEDIUM
        assert config.PASSWORD_GENERATOR_SECURE_RANDOM is False
        assert config.WORD_DICTIONARY_PATH is None

    def test_reads_environment(self, monkeypatch):
        """Settings are read from environment variables."""
        monkeypatch.setenv("PASSWORD_MINIMUM_LENGTH", "9")
        monkeypatch.setenv("PASSWORD_MINIMUM_COMPLEXITY", "high")
        monkeypatch.setenv("PASSWORD_GENERATOR_SECURE_RANDOM", "true")

        config = Settings()

        assert config.PASSWORD_MINIMUM_LENGTH == 9
        assert config.PASSWORD_MINIMUM_COMPLEXITY is ComplexityLevel.HIGH
        assert config.PASSWORD_GENERATOR_SECURE_RANDOM is True

    def test_rejects_invalid_complexity(self, monkeypatch):
        """Unknown complexity names fail validation."""
        monkeypatch.setenv("PASSWORD_MINIMUM_COMPLEXITY", "extreme")
        with pytest.raises(ValidationError):
            Settings()

    def test_ignores_unrelated_environment(self, monkeypatch):
        """Extra environment variables are ignored."""
        monkeypatch.setenv("SOME_OTHER_SETTING", "value")
        Settings()

    def test_get_settings_returns_module_instance(self):
        """get_settings returns the shared settings object."""
        assert get_settings() is settings


class TestPolicyOptionsFromSettings:
    """Test cases for building a policy from settings."""

    def test_maps_every_field(self):
        """Each policy setting maps onto PolicyOptions."""
        config = Settings(
            PASSWORD_MINIMUM_LENGTH=8,
            PASSWORD_MAXIMUM_LENGTH=20,
            PASSWORD_MINIMUM_COMPLEXITY="low",
            PASSWORD_REQUIRED_LOWER_COUNT=2,
            PASSWORD_REQUIRED_UPPER_COUNT=3,
            PASSWORD_REQUIRED_NUMERIC_COUNT=1,
            PASSWORD_REQUIRED_SPECIAL_COUNT=1,
        )

        options = PolicyOptions.from_settings(config)

        assert options == PolicyOptions(
            minimum_length=8,
            maximum_length=20,
            minimum_complexity_level=ComplexityLevel.LOW,
            required_lower_count=2,
            required_upper_count=3,
            required_numeric_count=1,
            required_special_count=1,
        )
