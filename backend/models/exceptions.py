"""
Custom domain exceptions for the password policy engine.

Evaluation never raises for bad password input (it degrades to False or
ComplexityLevel.NONE). These exceptions cover construction errors, dictionary
loading failures and callers that insist on a policy-compliant password.
"""


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """Raised when input validation fails."""

    pass


class InvalidArgumentException(ValidationException, ValueError):
    """Raised when a required argument is missing or out of range."""

    pass


class WordDictionaryException(DomainException):
    """Raised when a word dictionary cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class PasswordGenerationException(DomainException):
    """
    Raised when no generated candidate satisfied the policy.

    Attributes:
        last_candidate: The last (non-compliant) password built.
        attempts: Number of attempts made before giving up.
    """

    def __init__(
        self,
        message: str = "Could not generate a password satisfying the policy",
        last_candidate: str = "",
        attempts: int = 0,
    ):
        self.last_candidate = last_candidate
        self.attempts = attempts
        super().__init__(message)
