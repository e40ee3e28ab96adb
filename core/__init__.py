"""Password generator core package.

Provides the stateless building blocks used by the CLI and the API:
- config: Centralized configuration constants
- models: Generation policy and strength report types
- charsets: Character class lookup tables
- random_source: Secure index sampling
- generator: Password generation
- events: Structured event logging
"""

# Configuration constants
from core.config import (
    DEFAULT_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)

# Value types
from core.models import (
    GenerationConfig,
    StrengthLevel,
    StrengthReport,
)

# Character sets
from core.charsets import (
    CharClass,
    CHARACTER_TABLES,
    SIMILAR_CHARACTERS,
    AMBIGUOUS_SYMBOLS,
    build_character_set,
)

# Random source
from core.random_source import draw_index

# Generation
from core.generator import ConfigurationError, generate_password

# Logging
from core.events import configure_logging, log_event

__all__ = [
    # Config
    "DEFAULT_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    # Models
    "GenerationConfig",
    "StrengthLevel",
    "StrengthReport",
    # Charsets
    "CharClass",
    "CHARACTER_TABLES",
    "SIMILAR_CHARACTERS",
    "AMBIGUOUS_SYMBOLS",
    "build_character_set",
    # Random source
    "draw_index",
    # Generation
    "ConfigurationError",
    "generate_password",
    # Logging
    "configure_logging",
    "log_event",
]
