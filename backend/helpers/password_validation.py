"""
Password policy messages.

Turns a policy check into user-facing error messages.
"""

from typing import TYPE_CHECKING, List

from helpers.character_classes import count_by_type
from models.password_types import CharacterType, ComplexityLevel
from models.schemas import PolicyOptions

if TYPE_CHECKING:
    from services.password_engine import PasswordEngine

# (singular, plural) labels per character type
_TYPE_LABELS = {
    CharacterType.LOWER_LETTER: ("lowercase letter", "lowercase letters"),
    CharacterType.UPPER_LETTER: ("uppercase letter", "uppercase letters"),
    CharacterType.NUMERIC: ("digit", "digits"),
    CharacterType.SPECIAL: ("special character", "special characters"),
}


def _required_counts(options: PolicyOptions) -> dict[CharacterType, int]:
    return {
        CharacterType.LOWER_LETTER: options.required_lower_count,
        CharacterType.UPPER_LETTER: options.required_upper_count,
        CharacterType.NUMERIC: options.required_numeric_count,
        CharacterType.SPECIAL: options.required_special_count,
    }


def _count_phrase(count: int, char_type: CharacterType) -> str:
    singular, plural = _TYPE_LABELS[char_type]
    if count == 1:
        return f"one {singular}"
    return f"{count} {plural}"


def validate_password(
    password: str | None, engine: "PasswordEngine"
) -> tuple[bool, List[str]]:
    """
    Validate a password against the engine's policy.

    The result is valid exactly when ``engine.meets_format_standards`` holds.

    Args:
        password: Password to validate
        engine: Engine carrying the policy and word dictionary

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    options = engine.options
    errors: List[str] = []

    # Check length
    if not engine.meets_length_standards(password):
        errors.append(
            f"Password must be between {options.minimum_length} and "
            f"{options.maximum_length} characters long"
        )

    # Check per-type minimums
    counts = count_by_type(password)
    for char_type, required in _required_counts(options).items():
        if counts[char_type] < required:
            errors.append(
                f"Password must contain at least {_count_phrase(required, char_type)}"
            )

    # Check complexity
    required_level = options.minimum_complexity_level
    if not engine.meets_complexity_standards(password):
        actual = engine.calculate_complexity(password)
        errors.append(
            f"Password complexity is {actual.name.lower()}, "
            f"but {required_level.name.lower()} is required"
        )

    return len(errors) == 0, errors


def get_password_strength_message(options: PolicyOptions | None = None) -> str:
    """
    Get a user-friendly message describing password requirements.

    Args:
        options: Policy to describe (defaults to PolicyOptions())

    Returns:
        String describing password requirements
    """
    options = options or PolicyOptions()
    parts = [
        f"between {options.minimum_length} and {options.maximum_length} characters"
    ]

    for char_type, required in _required_counts(options).items():
        if required:
            parts.append(_count_phrase(required, char_type))

    message = (
        f"Password must contain {', '.join(parts[:-1])}, and {parts[-1]}"
        if len(parts) > 1
        else f"Password must contain {parts[0]}"
    )

    if options.minimum_complexity_level > ComplexityLevel.NONE:
        message += (
            f" (minimum complexity: {options.minimum_complexity_level.name.lower()})"
        )
    return message
