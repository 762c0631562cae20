"""Word dictionary used to detect dictionary-based passwords.

The engine only needs a containment check. Grouping of the corpus is an
implementation detail of GroupedWordDictionary.
"""

import json
from collections import defaultdict
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, runtime_checkable

from loguru import logger

from models.config import get_settings
from models.exceptions import WordDictionaryException
from services.common_passwords import COMMON_PASSWORD_GROUPS


@runtime_checkable
class WordDictionary(Protocol):
    """Read-only lookup source for weak words."""

    def contains_word(self, candidate: str) -> bool:
        """Return True if ``candidate`` appears verbatim in the corpus."""
        ...


def _normalize(word: str) -> str:
    return word.strip().lower()


class GroupedWordDictionary:
    """
    Case-normalized word corpus partitioned into named groups.

    Lookups go through a single frozenset index, so they are O(1) and safe
    for concurrent readers.
    """

    def __init__(self, groups: Mapping[str, Iterable[str]]):
        normalized: dict[str, frozenset[str]] = {}
        for name, words in groups.items():
            if isinstance(words, str):
                raise WordDictionaryException(
                    f"Word group {name!r} must be a list of words, not a string"
                )
            words = list(words)
            if not all(isinstance(word, str) for word in words):
                raise WordDictionaryException(
                    f"Word group {name!r} contains non-string entries"
                )
            cleaned = frozenset(
                _normalize(word) for word in words if word and not word.isspace()
            )
            normalized[str(name)] = cleaned

        self._groups = MappingProxyType(normalized)
        self._index: frozenset[str] = frozenset().union(*normalized.values())

    @property
    def groups(self) -> Mapping[str, frozenset[str]]:
        """Read-only view of the word groups."""
        return self._groups

    def contains_word(self, candidate: str) -> bool:
        if not candidate:
            return False
        return candidate.lower() in self._index

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.contains_word(candidate)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"GroupedWordDictionary(groups={len(self._groups)}, words={len(self)})"

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "GroupedWordDictionary":
        """Build a dictionary grouped by the first character of each word."""
        grouped: dict[str, list[str]] = defaultdict(list)
        for word in words:
            word = _normalize(word)
            if word:
                grouped[word[0]].append(word)
        return cls(grouped)

    @classmethod
    def from_file(cls, path: str | Path) -> "GroupedWordDictionary":
        """
        Load a dictionary from disk.

        ``.json`` files must hold an object mapping group names to word
        lists. Any other file is read as one word per line; blank lines and
        lines starting with ``#`` are skipped.

        Args:
            path: Dictionary file location

        Returns:
            The loaded dictionary

        Raises:
            WordDictionaryException: If the file is missing or malformed
        """
        dictionary_file = Path(path)
        if not dictionary_file.is_file():
            raise WordDictionaryException(
                f"Word dictionary not found: {dictionary_file}", path=str(path)
            )

        try:
            with open(dictionary_file, encoding="utf-8-sig") as f:
                if dictionary_file.suffix.lower() == ".json":
                    data = json.load(f)
                    if not isinstance(data, dict):
                        raise WordDictionaryException(
                            "JSON word dictionary must be an object of word groups",
                            path=str(path),
                        )
                    dictionary = cls(data)
                else:
                    dictionary = cls.from_words(
                        line for line in f if not line.lstrip().startswith("#")
                    )
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise WordDictionaryException(
                f"Failed to load word dictionary {dictionary_file}: {e}",
                path=str(path),
            ) from e

        logger.info(
            f"Loaded word dictionary from {dictionary_file}: "
            f"{len(dictionary)} words in {len(dictionary.groups)} groups"
        )
        return dictionary

    @classmethod
    def default(cls) -> "GroupedWordDictionary":
        """Dictionary built from the bundled common-password corpus."""
        return cls(COMMON_PASSWORD_GROUPS)


@lru_cache(maxsize=1)
def load_word_dictionary() -> GroupedWordDictionary:
    """Load the configured word dictionary, falling back to the bundled corpus."""
    path = get_settings().WORD_DICTIONARY_PATH
    if path:
        return GroupedWordDictionary.from_file(path)
    return GroupedWordDictionary.default()


def clear_word_dictionary_cache() -> None:
    """Clear the word dictionary cache.

    Useful for testing or when WORD_DICTIONARY_PATH changes at runtime.
    """
    load_word_dictionary.cache_clear()
