"""
Look-alike character canonicalization.

Maps leetspeak-style substitutions back to the letter they imitate so
obfuscated dictionary words ("p@ssw0rd") can be recognized.
"""

from types import MappingProxyType
from typing import Mapping

from helpers.character_classes import classify
from models.password_types import CanonicalizationMode, CharacterType

SIMILARITY_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "3": "e",
        "x": "k",
        "5": "s",
        "$": "s",
        "6": "g",
        "7": "t",
        "8": "b",
        "|": "l",
        "9": "g",
        "+": "t",
        "@": "a",
        "0": "o",
        "1": "l",
        "2": "z",
        "!": "i",
        "4": "a",
    }
)


def canonicalize(
    word: str | None,
    mode: CanonicalizationMode = CanonicalizationMode.EVERYTHING,
) -> str:
    """
    Lowercase a word and replace look-alike characters.

    In EVERYTHING mode every character found in SIMILARITY_TABLE is replaced.
    In LETTERS_ONLY mode only lowercase letters are eligible, so digits and
    symbols pass through untouched and exact lookups only match words that
    were not obfuscated.

    Args:
        word: Text to canonicalize
        mode: Which characters are eligible for substitution

    Returns:
        The canonicalized word, or an empty string for blank input

    Examples:
        >>> canonicalize("p@ssw0rd")
        'password'
        >>> canonicalize("p4ssw0rd", CanonicalizationMode.LETTERS_ONLY)
        'p4ssw0rd'
    """
    if not word or word.isspace():
        return ""

    everything = mode is CanonicalizationMode.EVERYTHING
    canonical = []
    for char in word.lower():
        if everything or classify(char) is CharacterType.LOWER_LETTER:
            char = SIMILARITY_TABLE.get(char, char)
        canonical.append(char)
    return "".join(canonical)
