"""
Complexity Service

Scores password strength and checks passwords against a policy.
"""

from typing import Callable, NamedTuple

from helpers.character_classes import count_by_type, spans_character_types
from models.password_types import CharacterType, ComplexityLevel
from models.schemas import PolicyOptions
from services.dictionary_matcher import DictionaryMatcher

# Floors applied on top of the configured minimum length
STRONG_LENGTH_FLOOR = 7
WEAK_LENGTH_FLOOR = 6

# Share of the password a dictionary word must cover to rule out HIGH
CLOSE_VARIATION_RATIO = 0.6


def _is_blank(password: str | None) -> bool:
    return not password or password.isspace()


class ComplexityRule(NamedTuple):
    """One row of the complexity decision table."""

    level: ComplexityLevel
    length_floor: int
    min_character_types: int
    dictionary_check: Callable[[DictionaryMatcher, str], bool] | None


# Evaluated top to bottom; the first satisfied rule wins.
COMPLEXITY_RULES: tuple[ComplexityRule, ...] = (
    ComplexityRule(
        ComplexityLevel.HIGH,
        STRONG_LENGTH_FLOOR,
        3,
        lambda matcher, pw: not matcher.is_close_variation(pw, CLOSE_VARIATION_RATIO),
    ),
    ComplexityRule(
        ComplexityLevel.MEDIUM,
        STRONG_LENGTH_FLOOR,
        2,
        lambda matcher, pw: not matcher.exists_verbatim(pw),
    ),
    ComplexityRule(ComplexityLevel.LOW, WEAK_LENGTH_FLOOR, 0, None),
)


class ComplexityScorer:
    """Service for password complexity scoring and policy checks."""

    def __init__(self, options: PolicyOptions, matcher: DictionaryMatcher):
        self.options = options
        self.matcher = matcher

    def calculate_complexity(self, password: str | None) -> ComplexityLevel:
        """
        Calculate the complexity level of a password.

        Length floors are ``max(options.minimum_length, floor)``, so a policy
        with a very low minimum still gets the floor enforced.

        Args:
            password: Password text to evaluate

        Returns:
            The first level in COMPLEXITY_RULES the password satisfies, or NONE
        """
        if _is_blank(password):
            return ComplexityLevel.NONE

        for rule in COMPLEXITY_RULES:
            if len(password) < max(self.options.minimum_length, rule.length_floor):
                continue
            if not spans_character_types(password, rule.min_character_types):
                continue
            if rule.dictionary_check and not rule.dictionary_check(
                self.matcher, password
            ):
                continue
            return rule.level

        return ComplexityLevel.NONE

    def meets_length_standards(
        self,
        password: str | None,
        minimum_length: int | None = None,
        maximum_length: int | None = None,
    ) -> bool:
        """Check that the password is not blank and its length is within bounds."""
        if minimum_length is None:
            minimum_length = self.options.minimum_length
        if maximum_length is None:
            maximum_length = self.options.maximum_length

        return (
            not _is_blank(password)
            and minimum_length <= len(password) <= maximum_length
        )

    def meets_complexity_standards(
        self,
        password: str | None,
        required_level: ComplexityLevel | str | int | None = None,
    ) -> bool:
        """Check that the password reaches the required complexity level."""
        if required_level is None:
            required_level = self.options.minimum_complexity_level
        required_level = ComplexityLevel.parse(required_level)

        return (
            not _is_blank(password)
            and self.calculate_complexity(password) >= required_level
        )

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
        """
        Check a password against every policy requirement.

        Per-type minimum counts, length bounds and complexity level must all
        hold. Arguments left as None fall back to the configured policy.

        Args:
            password: Password text to evaluate
            lower_minimum: Minimum number of lowercase letters
            upper_minimum: Minimum number of uppercase letters
            numeric_minimum: Minimum number of digits
            special_minimum: Minimum number of special characters
            required_level: Minimum complexity level
            minimum_length: Minimum overall length
            maximum_length: Maximum overall length

        Returns:
            True if the password is acceptable
        """
        options = self.options
        minimums = {
            CharacterType.LOWER_LETTER: (
                options.required_lower_count if lower_minimum is None else lower_minimum
            ),
            CharacterType.UPPER_LETTER: (
                options.required_upper_count if upper_minimum is None else upper_minimum
            ),
            CharacterType.NUMERIC: (
                options.required_numeric_count
                if numeric_minimum is None
                else numeric_minimum
            ),
            CharacterType.SPECIAL: (
                options.required_special_count
                if special_minimum is None
                else special_minimum
            ),
        }

        counts = count_by_type(password)
        return (
            self.meets_length_standards(password, minimum_length, maximum_length)
            and all(counts[char_type] >= minimums[char_type] for char_type in minimums)
            and self.meets_complexity_standards(password, required_level)
        )
