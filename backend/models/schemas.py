from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from models.password_types import ComplexityLevel, GenerationStatus

if TYPE_CHECKING:
    from models.config import Settings


# Policy Schemas
class PolicyOptions(BaseModel):
    """
    Password policy consumed by the complexity scorer and generator.

    Length bounds are widened after validation so that
    ``maximum_length >= minimum_length >= absolute_minimum``.
    """

    model_config = ConfigDict(frozen=True)

    minimum_length: int = Field(default=6, ge=0)
    maximum_length: int = Field(default=15, ge=0)
    minimum_complexity_level: ComplexityLevel = ComplexityLevel.MEDIUM
    required_lower_count: int = Field(default=1, ge=0)
    required_upper_count: int = Field(default=1, ge=0)
    required_numeric_count: int = Field(default=1, ge=0)
    required_special_count: int = Field(default=0, ge=0)

    @field_validator("minimum_complexity_level", mode="before")
    @classmethod
    def parse_complexity_level(cls, v: str | int | ComplexityLevel) -> ComplexityLevel:
        """Accept level names such as "medium" as well as enum values."""
        return ComplexityLevel.parse(v)

    @model_validator(mode="after")
    def widen_length_bounds(self) -> "PolicyOptions":
        """Raise the length bounds until the per-type minimums fit."""
        minimum = max(self.minimum_length, self.absolute_minimum)
        # Frozen model: write the coerced, widened values directly
        self.__dict__["minimum_length"] = minimum
        self.__dict__["maximum_length"] = max(self.maximum_length, minimum)
        return self

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> "PolicyOptions":
        """Copy the options, re-validating when fields are updated."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})

    @property
    def absolute_minimum(self) -> int:
        """Sum of all per-type minimum counts."""
        return (
            self.required_lower_count
            + self.required_upper_count
            + self.required_numeric_count
            + self.required_special_count
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PolicyOptions":
        """Build the policy from application settings."""
        return cls(
            minimum_length=settings.PASSWORD_MINIMUM_LENGTH,
            maximum_length=settings.PASSWORD_MAXIMUM_LENGTH,
            minimum_complexity_level=settings.PASSWORD_MINIMUM_COMPLEXITY,
            required_lower_count=settings.PASSWORD_REQUIRED_LOWER_COUNT,
            required_upper_count=settings.PASSWORD_REQUIRED_UPPER_COUNT,
            required_numeric_count=settings.PASSWORD_REQUIRED_NUMERIC_COUNT,
            required_special_count=settings.PASSWORD_REQUIRED_SPECIAL_COUNT,
        )


# Generation Schemas
class GenerationResult(BaseModel):
    """Outcome of a generation request, including the last candidate built."""

    model_config = ConfigDict(frozen=True)

    password: str
    status: GenerationStatus
    attempts: int = Field(ge=1)

    @property
    def succeeded(self) -> bool:
        return self.status is GenerationStatus.GENERATED
