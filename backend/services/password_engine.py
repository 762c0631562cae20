"""
Password Engine

Facade tying the policy, dictionary matcher, complexity scorer and password
generator together. This is the entry point callers are expected to use.
"""

from functools import lru_cache

from helpers.password_validation import validate_password
from models.config import get_settings
from models.exceptions import InvalidArgumentException
from models.password_types import ComplexityLevel
from models.schemas import GenerationResult, PolicyOptions
from services.complexity_service import ComplexityScorer
from services.dictionary_matcher import DictionaryMatcher
from services.password_generator import (
    PasswordGenerator,
    seeded_random,
    system_random,
)
from services.word_dictionary import WordDictionary, load_word_dictionary


class PasswordEngine:
    """
    Password format validation, complexity calculation and generation.

    The engine holds no mutable state: the policy and dictionary are shared
    read-only, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        word_dictionary: WordDictionary,
        options: PolicyOptions | None = None,
        *,
        secure_random: bool = False,
    ):
        """
        Initialize the engine.

        Args:
            word_dictionary: Lookup source for weak words
            options: Password policy (defaults to PolicyOptions())
            secure_random: Draw every generated character from the OS CSPRNG
                instead of a CSPRNG-seeded PRNG

        Raises:
            InvalidArgumentException: If the dictionary is missing or the
                options are not a PolicyOptions
        """
        if word_dictionary is None:
            raise InvalidArgumentException("word_dictionary is required")
        if not isinstance(word_dictionary, WordDictionary):
            raise InvalidArgumentException(
                "word_dictionary must provide contains_word(candidate)"
            )
        if options is None:
            options = PolicyOptions()
        elif not isinstance(options, PolicyOptions):
            raise InvalidArgumentException("options must be a PolicyOptions instance")

        self.options = options
        self.word_dictionary = word_dictionary
        self.matcher = DictionaryMatcher(word_dictionary)
        self.scorer = ComplexityScorer(options, self.matcher)
        self.generator = PasswordGenerator(
            options,
            self.scorer,
            random_factory=system_random if secure_random else seeded_random,
        )

    def meets_length_standards(
        self,
        password: str | None,
        minimum_length: int | None = None,
        maximum_length: int | None = None,
    ) -> bool:
        return self.scorer.meets_length_standards(
            password, minimum_length, maximum_length
        )

    def meets_complexity_standards(
        self,
        password: str | None,
        required_level: ComplexityLevel | str | int | None = None,
    ) -> bool:
        return self.scorer.meets_complexity_standards(password, required_level)

    def meets_format_standards(
        self,
        password: str | None,
        lower_minimum: int | None = None,
        upper_minimum: int | None = None,
        numeric_minimum: int | None = None,
        special_minimum: int | None = None,
        required_level: ComplexityLevel | str | int | None = None,
        minimum_length: int | None = None,
        maximum_length: int | None = None,
    ) -> bool:
        return self.scorer.meets_format_standards(
            password,
            lower_minimum,
            upper_minimum,
            numeric_minimum,
            special_minimum,
            required_level,
            minimum_length,
            maximum_length,
        )

    def calculate_complexity(self, password: str | None) -> ComplexityLevel:
        return self.scorer.calculate_complexity(password)

    def generate(
        self,
        lower_count: int | None = None,
        upper_count: int | None = None,
        numeric_count: int | None = None,
        special_count: int | None = None,
        required_level: ComplexityLevel | str | int | None = None,
        minimum_length: int | None = None,
        maximum_length: int | None = None,
    ) -> GenerationResult:
        return self.generator.generate(
            lower_count,
            upper_count,
            numeric_count,
            special_count,
            required_level,
            minimum_length,
            maximum_length,
        )

    def generate_password(
        self,
        lower_count: int | None = None,
        upper_count: int | None = None,
        numeric_count: int | None = None,
        special_count: int | None = None,
        required_level: ComplexityLevel | str | int | None = None,
        minimum_length: int | None = None,
        maximum_length: int | None = None,
    ) -> str:
        return self.generator.generate_password(
            lower_count,
            upper_count,
            numeric_count,
            special_count,
            required_level,
            minimum_length,
            maximum_length,
        )

    def describe_violations(self, password: str | None) -> list[str]:
        """List human-readable reasons the password fails the policy."""
        _, errors = validate_password(password, self)
        return errors


@lru_cache(maxsize=1)
def get_password_engine() -> PasswordEngine:
    """Get the process-wide engine built from settings."""
    settings = get_settings()
    return PasswordEngine(
        load_word_dictionary(),
        PolicyOptions.from_settings(settings),
        secure_random=settings.PASSWORD_GENERATOR_SECURE_RANDOM,
    )


def clear_password_engine_cache() -> None:
    """Clear the engine cache.

    Useful for testing or when settings change at runtime.
    """
    get_password_engine.cache_clear()
