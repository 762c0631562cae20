"""
Dictionary Matcher

Detects passwords that are dictionary words or leetspeak variations of them.
"""

import math

from loguru import logger

from helpers.similarity import canonicalize
from models.password_types import CanonicalizationMode
from services.word_dictionary import WordDictionary

log = logger.bind(component="dictionary_matcher")


class DictionaryMatcher:
    """Exact and fuzzy lookups of passwords against a word dictionary."""

    def __init__(self, dictionary: WordDictionary):
        self.dictionary = dictionary

    def exists_verbatim(self, password: str | None) -> bool:
        """
        Check whether the lowercased password is itself a dictionary word.

        Only letters are canonicalized, so obfuscated digits and symbols
        ("p4ssw0rd") are not undone here; see ``is_close_variation``.
        """
        canonical = canonicalize(password, CanonicalizationMode.LETTERS_ONLY)
        if not canonical:
            return False
        return self.dictionary.contains_word(canonical)

    def is_close_variation(self, password: str | None, minimum_ratio: float) -> bool:
        """
        Check whether the password embeds a dictionary word after full canonicalization.

        Windows are probed from longest to shortest and left to right, so the
        longest embedded word is found first. A window must be at least
        ``floor(minimum_ratio * length)`` characters long.

        Args:
            password: Password text to evaluate
            minimum_ratio: Minimum share of the password a match must cover

        Returns:
            True if some window of the canonicalized password is a dictionary word
        """
        canonical = canonicalize(password, CanonicalizationMode.EVERYTHING)
        length = len(canonical)
        if not length:
            return False

        minimum_match = math.floor(minimum_ratio * length)
        for window in range(length, max(minimum_match, 1) - 1, -1):
            start = 0
            while start + minimum_match < length and start + window <= length:
                if self.dictionary.contains_word(canonical[start : start + window]):
                    log.debug(
                        f"Dictionary word of length {window} found at offset {start}"
                    )
                    return True
                start += 1
        return False
