"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from pydantic import BaseModel, Field

from core import (
    DEFAULT_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    GenerationConfig,
    StrengthLevel,
    StrengthReport,
)
from core.config import MAX_CHECK_PASSWORD_LENGTH


class PasswordGenerateRequest(BaseModel):
    """Request model for password generation."""
    length: int = Field(
        default=DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
        description="Password length",
    )
    include_uppercase: bool = Field(default=True, description="Include uppercase letters")
    include_lowercase: bool = Field(default=True, description="Include lowercase letters")
    include_numbers: bool = Field(default=True, description="Include digits")
    include_symbols: bool = Field(default=True, description="Include special characters")
    exclude_similar: bool = Field(default=False, description="Exclude 0/O and 1/l/I")
    exclude_ambiguous: bool = Field(default=False, description="Exclude ambiguous symbols")

    def to_config(self) -> GenerationConfig:
        """Convert the request into a generation policy."""
        return GenerationConfig(**self.model_dump())


class PasswordGenerateResponse(BaseModel):
    """Response model for generated password."""
    password: str
    length: int
    charset_size: int
    strength: StrengthReport
    label: str
    color: str


class PasswordCheckRequest(BaseModel):
    """Request model for password strength check."""
    password: str = Field(..., max_length=MAX_CHECK_PASSWORD_LENGTH, description="Password to check")


class PasswordCheckResponse(StrengthReport):
    """Strength report with display hints."""
    label: str
    color: str


class StrengthLevelInfo(BaseModel):
    """Display information for one strength level."""
    level: StrengthLevel
    label: str
    color: str
    min_score: int


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
