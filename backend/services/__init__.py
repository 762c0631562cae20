"""
Services layer for the password policy engine.

This package contains the dictionary lookups, complexity scoring and password
generation, plus the PasswordEngine facade that combines them.
"""

from .complexity_service import ComplexityScorer
from .dictionary_matcher import DictionaryMatcher
from .password_engine import PasswordEngine, get_password_engine
from .password_generator import PasswordGenerator
from .word_dictionary import GroupedWordDictionary, WordDictionary

__all__ = [
    "ComplexityScorer",
    "DictionaryMatcher",
    "GroupedWordDictionary",
    "PasswordEngine",
    "PasswordGenerator",
    "WordDictionary",
    "get_password_engine",
]
