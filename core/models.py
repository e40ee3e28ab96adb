"""Value types shared by the generator, the scorer and their callers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from core.config import DEFAULT_PASSWORD_LENGTH


class GenerationConfig(BaseModel):
    """Character-class policy for one password generation request."""
    model_config = ConfigDict(frozen=True, strict=True)

    length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=1, description="Password length")
    include_uppercase: bool = Field(default=True, description="Include uppercase letters")
    include_lowercase: bool = Field(default=True, description="Include lowercase letters")
    include_numbers: bool = Field(default=True, description="Include digits")
    include_symbols: bool = Field(default=True, description="Include special characters")
    exclude_similar: bool = Field(default=False, description="Drop 0/O and 1/l/I from letters and digits")
    exclude_ambiguous: bool = Field(default=False, description="Drop brackets, slashes and quotes from symbols")


class StrengthLevel(str, Enum):
    """Qualitative strength buckets, weakest first."""
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


class StrengthReport(BaseModel):
    """Score, level and suggestions computed for one password."""
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: StrengthLevel
    feedback: list[str] = Field(default_factory=list)
    entropy_bits: float = 0.0
