"""
Pytest configuration and fixtures for backend tests.
"""

import sys
from pathlib import Path

import pytest

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from models.schemas import PolicyOptions  # noqa: E402
from services.password_engine import (  # noqa: E402
    PasswordEngine,
    clear_password_engine_cache,
)
from services.word_dictionary import (  # noqa: E402
    GroupedWordDictionary,
    clear_word_dictionary_cache,
)

TEST_WORD_GROUPS = {
    "common": ["password", "letmein", "welcome", "secret"],
    "keyboard": ["qwerty", "asdfgh"],
    "animals": ["dragon", "monkey"],
}


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear the dictionary and engine caches around each test."""
    clear_word_dictionary_cache()
    clear_password_engine_cache()
    yield
    clear_word_dictionary_cache()
    clear_password_engine_cache()


@pytest.fixture
def word_dictionary():
    """Small in-memory word dictionary."""
    return GroupedWordDictionary(TEST_WORD_GROUPS)


@pytest.fixture
def policy_options():
    """Default password policy."""
    return PolicyOptions()


@pytest.fixture
def engine(word_dictionary, policy_options):
    """Password engine over the test dictionary and default policy."""
    return PasswordEngine(word_dictionary, policy_options)
