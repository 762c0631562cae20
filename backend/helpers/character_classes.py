"""
Password character classification.

Classification follows the Unicode general category of each character so it
is locale-independent and total over every code point.
"""

import unicodedata

from models.password_types import CharacterType

_UPPER_CATEGORIES = frozenset({"Lu", "Lt"})
_LOWER_CATEGORIES = frozenset({"Ll"})
_NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


def classify(char: str) -> CharacterType:
    """
    Classify a single character.

    Uppercase and titlecase letters are UPPER_LETTER, lowercase letters are
    LOWER_LETTER and any number is NUMERIC. Everything else (punctuation,
    separators, symbols, whitespace, uncased letters, controls) is SPECIAL.

    Args:
        char: A string of exactly one character

    Returns:
        The character's CharacterType

    Raises:
        ValueError: If ``char`` is not a single character

    Examples:
        >>> classify("A")
        <CharacterType.UPPER_LETTER: 'upper_letter'>
        >>> classify("@")
        <CharacterType.SPECIAL: 'special'>
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {len(char)}")

    category = unicodedata.category(char)
    if category in _UPPER_CATEGORIES:
        return CharacterType.UPPER_LETTER
    if category in _LOWER_CATEGORIES:
        return CharacterType.LOWER_LETTER
    if category in _NUMERIC_CATEGORIES:
        return CharacterType.NUMERIC
    return CharacterType.SPECIAL


def count_by_type(password: str | None) -> dict[CharacterType, int]:
    """Count the characters of each type, including types that never occur."""
    counts = {char_type: 0 for char_type in CharacterType}
    for char in password or "":
        counts[classify(char)] += 1
    return counts


def spans_character_types(password: str | None, minimum: int) -> bool:
    """Check that at least ``minimum`` distinct character types occur."""
    present = {classify(char) for char in password or ""}
    return len(present) >= minimum
