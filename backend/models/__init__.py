"""Models package - Pydantic schemas and domain types."""

from .password_types import (
    CanonicalizationMode,
    CharacterType,
    ComplexityLevel,
    GenerationStatus,
)
from .schemas import GenerationResult, PolicyOptions

__all__ = [
    "CanonicalizationMode",
    "CharacterType",
    "ComplexityLevel",
    "GenerationResult",
    "GenerationStatus",
    "PolicyOptions",
]
