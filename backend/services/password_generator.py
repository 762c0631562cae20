"""
Password Generator

Builds random passwords that satisfy a policy, retrying a bounded number of
times. The outcome is reported explicitly through GenerationResult.
"""

import random
import secrets
from typing import Callable

from loguru import logger

from models.exceptions import InvalidArgumentException, PasswordGenerationException
from models.password_types import ComplexityLevel, GenerationStatus
from models.schemas import GenerationResult, PolicyOptions
from services.complexity_service import ComplexityScorer

log = logger.bind(component="password_generator")

LOWER_CHARACTERS = "qwertyuiopasdfghjklzxcvbnm"
UPPER_CHARACTERS = "QWERTYUIOPASDFGHJKLZXCVBNM"
NUMERIC_CHARACTERS = "0123456789"
SPECIAL_CHARACTERS = "!@#$%^&*?"

# Filler never uses special characters
FILLER_CHARACTERS = LOWER_CHARACTERS + UPPER_CHARACTERS + NUMERIC_CHARACTERS

MAX_GENERATION_ATTEMPTS = 4


def seeded_random() -> random.Random:
    """
    Create a PRNG seeded from 4 bytes of OS entropy.

    The seed is a 31-bit non-negative integer (top bit masked). Only the seed
    comes from the CSPRNG; the choices made with the returned generator do not.
    """
    seed = int.from_bytes(secrets.token_bytes(4), "big") & 0x7FFFFFFF
    return random.Random(seed)


def system_random() -> random.Random:
    """Create a generator backed by the OS CSPRNG for every choice."""
    return random.SystemRandom()


def _available_position(buffer: list[str | None], rng: random.Random) -> int:
    """Pick a random empty slot, scanning forward with wraparound if taken."""
    size = len(buffer)
    index = rng.randrange(size)
    for offset in range(size):
        position = (index + offset) % size
        if buffer[position] is None:
            return position
    raise IndexError("No empty position left in password buffer")


class PasswordGenerator:
    """Service for generating policy-compliant random passwords."""

    def __init__(
        self,
        options: PolicyOptions,
        scorer: ComplexityScorer,
        random_factory: Callable[[], random.Random] = seeded_random,
    ):
        self.options = options
        self.scorer = scorer
        self.random_factory = random_factory

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
        """
        Generate a random password.

        Length bounds are widened when the per-type counts could not fit in
        them. Each attempt uses a freshly created random source. After
        MAX_GENERATION_ATTEMPTS failed validations the last candidate is
        returned with status EXHAUSTED_RETRIES.

        Args:
            lower_count: Minimum number of lowercase letters
            upper_count: Minimum number of uppercase letters
            numeric_count: Minimum number of digits
            special_count: Minimum number of special characters
            required_level: Minimum complexity level
            minimum_length: Minimum overall length
            maximum_length: Maximum overall length

        Returns:
            GenerationResult with the password, status and attempts used

        Raises:
            InvalidArgumentException: If any count or length is negative
        """
        options = self.options
        counts = (
            options.required_lower_count if lower_count is None else lower_count,
            options.required_upper_count if upper_count is None else upper_count,
            options.required_numeric_count if numeric_count is None else numeric_count,
            options.required_special_count if special_count is None else special_count,
        )
        if required_level is None:
            required_level = options.minimum_complexity_level
        required_level = ComplexityLevel.parse(required_level)
        if minimum_length is None:
            minimum_length = options.minimum_length
        if maximum_length is None:
            maximum_length = options.maximum_length

        if min(*counts, minimum_length, maximum_length) < 0:
            raise InvalidArgumentException(
                "Character counts and lengths must not be negative"
            )

        absolute_minimum = sum(counts)
        minimum_length = max(minimum_length, absolute_minimum)
        maximum_length = max(maximum_length, absolute_minimum, minimum_length)

        groups = (
            LOWER_CHARACTERS,
            UPPER_CHARACTERS,
            NUMERIC_CHARACTERS,
            SPECIAL_CHARACTERS,
        )

        password = ""
        for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
            rng = self.random_factory()
            buffer: list[str | None] = [None] * rng.randint(
                minimum_length, maximum_length
            )

            for alphabet, count in zip(groups, counts):
                for _ in range(count):
                    buffer[_available_position(buffer, rng)] = rng.choice(alphabet)

            for position, char in enumerate(buffer):
                if char is None:
                    buffer[position] = rng.choice(FILLER_CHARACTERS)

            password = "".join(buffer)
            if self.scorer.meets_format_standards(
                password,
                *counts,
                required_level,
                minimum_length,
                maximum_length,
            ):
                return GenerationResult(
                    password=password,
                    status=GenerationStatus.GENERATED,
                    attempts=attempt,
                )

            log.debug(
                f"Attempt {attempt} produced a {len(password)}-character "
                "password that failed validation"
            )

        log.warning(
            f"Password generation exhausted {MAX_GENERATION_ATTEMPTS} attempts "
            f"(required level {required_level.name}, "
            f"length {minimum_length}-{maximum_length})"
        )
        return GenerationResult(
            password=password,
            status=GenerationStatus.EXHAUSTED_RETRIES,
            attempts=MAX_GENERATION_ATTEMPTS,
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
        """
        Generate a password, raising instead of returning a non-compliant one.

        Raises:
            PasswordGenerationException: If every attempt failed validation
        """
        result = self.generate(
            lower_count,
            upper_count,
            numeric_count,
            special_count,
            required_level,
            minimum_length,
            maximum_length,
        )
        if not result.succeeded:
            raise PasswordGenerationException(
                last_candidate=result.password, attempts=result.attempts
            )
        return result.password
