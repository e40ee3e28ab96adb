"""Character class lookup tables.

Each class has a full alphabet and one reduced alphabet. Letters and
numbers drop visually similar glyphs (0/O, 1/l/I) when ``exclude_similar``
is set; symbols drop characters that are easy to misread or need shell
quoting when ``exclude_ambiguous`` is set. A class only ever consults its
own flag.
"""

import string
from enum import Enum


class CharClass(str, Enum):
    """Character classes in the order they are concatenated."""
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?/~`"
SIMILAR_CHARACTERS = frozenset("0O1lI")
AMBIGUOUS_SYMBOLS = frozenset("[]{}|<>/~`")

# (class, excluded) -> alphabet
CHARACTER_TABLES: dict[tuple[CharClass, bool], str] = {
    (CharClass.UPPERCASE, False): string.ascii_uppercase,
    (CharClass.UPPERCASE, True): "ABCDEFGHJKLMNPQRSTUVWXYZ",
    (CharClass.LOWERCASE, False): string.ascii_lowercase,
    (CharClass.LOWERCASE, True): "abcdefghijkmnopqrstuvwxyz",
    (CharClass.NUMBERS, False): string.digits,
    (CharClass.NUMBERS, True): "23456789",
    (CharClass.SYMBOLS, False): SYMBOLS,
    (CharClass.SYMBOLS, True): "!@#$%^&*()_+-=;:,.?",
}

# class -> (include flag, exclusion flag) on GenerationConfig
CLASS_FLAGS: dict[CharClass, tuple[str, str]] = {
    CharClass.UPPERCASE: ("include_uppercase", "exclude_similar"),
    CharClass.LOWERCASE: ("include_lowercase", "exclude_similar"),
    CharClass.NUMBERS: ("include_numbers", "exclude_similar"),
    CharClass.SYMBOLS: ("include_symbols", "exclude_ambiguous"),
}


def build_character_set(config) -> str:
    """Concatenate the alphabets selected by a generation config.

    Args:
        config: GenerationConfig (or any object with the same flag attributes)

    Returns:
        Ordered character set; empty if no class is enabled
    """
    parts = []
    for char_class in CharClass:
        include_flag, exclude_flag = CLASS_FLAGS[char_class]
        if getattr(config, include_flag):
            excluded = bool(getattr(config, exclude_flag))
            parts.append(CHARACTER_TABLES[(char_class, excluded)])

    return "".join(parts)
