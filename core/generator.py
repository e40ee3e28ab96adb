"""Secure password generation.

Builds the character set selected by a GenerationConfig and samples each
position independently from the secure random source.
"""

from typing import Callable

from core.charsets import build_character_set
from core.events import log_event, logger
from core.models import GenerationConfig
from core.random_source import draw_index


class ConfigurationError(ValueError):
    """The requested character classes yield an empty alphabet."""
    pass


def generate_password(
    config: GenerationConfig,
    draw: Callable[[int], int] = draw_index,
) -> str:
    """Generate a random password for the given policy.

    Args:
        config: Length and character-class policy
        draw: Returns an index in [0, n) for a given n. Defaults to the
            secure random source.

    Returns:
        Password of exactly ``config.length`` characters

    Raises:
        ConfigurationError: If no character class is enabled
    """
    charset = build_character_set(config)

    if not charset:
        log_event(
            "generation_rejected",
            "REJECTED",
            details={"reason": "empty_character_set"},
        )
        raise ConfigurationError("At least one character type must be selected.")

    charset_size = len(charset)
    password = "".join(charset[draw(charset_size)] for _ in range(config.length))

    logger.debug("Generated password from %d-character alphabet", charset_size)
    log_event(
        "password_generated",
        "SUCCESS",
        details={
            "length": config.length,
            "charset_size": charset_size,
            "exclude_similar": config.exclude_similar,
            "exclude_ambiguous": config.exclude_ambiguous,
        },
    )

    return password
