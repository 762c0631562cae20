"""Enumerations shared by the password policy engine."""

from enum import Enum, IntEnum


class CharacterType(str, Enum):
    """Categories a password character can fall into."""

    UPPER_LETTER = "upper_letter"
    LOWER_LETTER = "lower_letter"
    NUMERIC = "numeric"
    SPECIAL = "special"


class ComplexityLevel(IntEnum):
    """
    Ordered password complexity verdict.

    Ordering is meaningful: a password meets a requirement when
    ``actual >= required``.
    """

    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @classmethod
    def parse(cls, value: "str | int | ComplexityLevel") -> "ComplexityLevel":
        """Parse a level from its name (case-insensitive) or integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown complexity level: {value!r}") from None
        return cls(value)


class CanonicalizationMode(str, Enum):
    """Which characters are eligible for look-alike substitution."""

    EVERYTHING = "everything"
    LETTERS_ONLY = "letters_only"


class GenerationStatus(str, Enum):
    """Outcome of a password generation request."""

    GENERATED = "generated"
    EXHAUSTED_RETRIES = "exhausted_retries"
