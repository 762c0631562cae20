import os
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from models.password_types import ComplexityLevel


def _should_load_env_file() -> str | None:
    """Determine if .env should be loaded.

    For local development, load `.env` automatically so policy overrides can
    live next to the code. Do NOT auto-load `.env` when running under pytest
    or in CI, so tests always see the documented defaults.
    """
    if any("pytest" in str(x) for x in sys.argv if x):
        return None
    if os.environ.get("CI") in ("1", "true", "True"):
        return None
    return ".env"


class Settings(BaseSettings):
    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development' logs to console, anything else logs JSON",
    )
    LOG_LEVEL: str | None = Field(
        default=None,
        description="Override the log level (DEBUG in development, INFO otherwise)",
    )
    LOG_FILE: str | None = Field(
        default=None,
        description="Optional path of a rotating log file",
    )

    # Password policy
    PASSWORD_MINIMUM_LENGTH: int = Field(
        default=6,
        ge=0,
        description="Minimum password length",
    )
    PASSWORD_MAXIMUM_LENGTH: int = Field(
        default=15,
        ge=0,
        description="Maximum password length",
    )
    PASSWORD_MINIMUM_COMPLEXITY: ComplexityLevel = Field(
        default=ComplexityLevel.MEDIUM,
        description="Minimum complexity level: NONE, LOW, MEDIUM or HIGH",
    )
    PASSWORD_REQUIRED_LOWER_COUNT: int = Field(
        default=1,
        ge=0,
        description="Minimum number of lowercase letters",
    )
    PASSWORD_REQUIRED_UPPER_COUNT: int = Field(
        default=1,
        ge=0,
        description="Minimum number of uppercase letters",
    )
    PASSWORD_REQUIRED_NUMERIC_COUNT: int = Field(
        default=1,
        ge=0,
        description="Minimum number of digits",
    )
    PASSWORD_REQUIRED_SPECIAL_COUNT: int = Field(
        default=0,
        ge=0,
        description="Minimum number of special characters",
    )

    # Generation
    PASSWORD_GENERATOR_SECURE_RANDOM: bool = Field(
        default=False,
        description="Use the OS CSPRNG for every choice instead of a CSPRNG-seeded PRNG",
    )

    # Word dictionary
    WORD_DICTIONARY_PATH: str | None = Field(
        default=None,
        description="Path to a JSON ({group: [words]}) or one-word-per-line dictionary. "
        "The bundled common-password list is used when unset.",
    )

    @field_validator("PASSWORD_MINIMUM_COMPLEXITY", mode="before")
    @classmethod
    def parse_complexity(cls, v: str | int | ComplexityLevel) -> ComplexityLevel:
        """Parse complexity level names from environment variables."""
        return ComplexityLevel.parse(v)

    model_config = SettingsConfigDict(
        env_file=_should_load_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance (for dependency injection)."""
    return settings
