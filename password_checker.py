"""Password strength scoring.

Additive heuristic: length thresholds, character class presence, the
share of distinct characters and a rough entropy estimate, each capped,
summed and clamped to 0-100.
"""

import logging
import math
import re
from typing import Optional

from core.events import log_event
from core.models import StrengthLevel, StrengthReport


LENGTH_THRESHOLDS = (8, 12, 16, 20)
LENGTH_BONUS = 10
CLASS_BONUS = 10
MAX_UNIQUENESS_BONUS = 20
MAX_ENTROPY_BONUS = 10

# pattern -> estimated alphabet size for that class
CLASS_PATTERNS = {
    "lowercase": (re.compile(r'[a-z]'), 26),
    "uppercase": (re.compile(r'[A-Z]'), 26),
    "digit": (re.compile(r'[0-9]'), 10),
    "symbol": (re.compile(r'[^a-zA-Z0-9]'), 32),
}

# minimum score -> level, checked from the top
LEVEL_THRESHOLDS = (
    (80, StrengthLevel.VERY_STRONG),
    (60, StrengthLevel.STRONG),
    (40, StrengthLevel.MEDIUM),
)

LEVEL_LABELS = {
    StrengthLevel.WEAK: "weak",
    StrengthLevel.MEDIUM: "medium",
    StrengthLevel.STRONG: "strong",
    StrengthLevel.VERY_STRONG: "very strong",
}

LEVEL_COLORS = {
    StrengthLevel.VERY_STRONG: "#10b981",  # green
    StrengthLevel.STRONG: "#3b82f6",       # blue
    StrengthLevel.MEDIUM: "#f59e0b",       # amber
    StrengthLevel.WEAK: "#ef4444",         # red
}
UNKNOWN_LEVEL_COLOR = "#6b7280"            # gray

FEEDBACK_MIN_LENGTH = "Use at least 8 characters."
FEEDBACK_RECOMMENDED_LENGTH = "Use 12 or more characters."
FEEDBACK_MISSING_CLASS = {
    "lowercase": "Add lowercase letters.",
    "uppercase": "Add uppercase letters.",
    "digit": "Add numbers.",
    "symbol": "Add special characters.",
}
FEEDBACK_LOW_UNIQUENESS = "Use more distinct characters."


def _level_for_score(score: float) -> StrengthLevel:
    for minimum, level in LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return StrengthLevel.WEAK


def score_strength(password: str) -> StrengthReport:
    """Score a password and suggest improvements.

    Args:
        password: Password to score (any string, including empty)

    Returns:
        StrengthReport with an integer score in [0, 100], its level and
        ordered feedback messages
    """
    if not password:
        return StrengthReport(score=0, level=StrengthLevel.WEAK, feedback=[])

    length = len(password)
    score = 0.0
    feedback = []

    # check length
    for threshold in LENGTH_THRESHOLDS:
        if length >= threshold:
            score += LENGTH_BONUS

    # check for different character types
    present = {
        name: pattern.search(password) is not None
        for name, (pattern, _) in CLASS_PATTERNS.items()
    }
    score += CLASS_BONUS * sum(present.values())

    unique_ratio = len(set(password)) / length
    score += min(unique_ratio * MAX_UNIQUENESS_BONUS, MAX_UNIQUENESS_BONUS)

    charset_size = sum(size for name, (_, size) in CLASS_PATTERNS.items() if present[name])
    entropy = length * math.log2(charset_size)
    score += min(entropy / 10, MAX_ENTROPY_BONUS)

    score = min(max(score, 0.0), 100.0)
    level = _level_for_score(score)

    if length < LENGTH_THRESHOLDS[0]:
        feedback.append(FEEDBACK_MIN_LENGTH)
    if length < LENGTH_THRESHOLDS[1]:
        feedback.append(FEEDBACK_RECOMMENDED_LENGTH)
    for name, message in FEEDBACK_MISSING_CLASS.items():
        if not present[name]:
            feedback.append(message)
    if unique_ratio < 0.5:
        feedback.append(FEEDBACK_LOW_UNIQUENESS)

    # floor keeps the reported score on the same side of every level threshold
    report = StrengthReport(
        score=math.floor(score),
        level=level,
        feedback=feedback,
        entropy_bits=round(entropy, 2),
    )
    log_event(
        "strength_scored",
        "SUCCESS",
        details={"score": report.score, "level": level.value},
        level=logging.DEBUG,
    )
    return report


def _coerce_level(level) -> Optional[StrengthLevel]:
    try:
        return StrengthLevel(level)
    except (ValueError, TypeError):
        return None


def label_for_level(level) -> str:
    """Get the display label for a strength level.

    Accepts StrengthLevel members or their string values; anything else
    gets the 'weak' label.
    """
    return LEVEL_LABELS.get(_coerce_level(level), LEVEL_LABELS[StrengthLevel.WEAK])


def color_for_level(level) -> str:
    """Get the meter colour for a strength level, gray if unrecognized."""
    return LEVEL_COLORS.get(_coerce_level(level), UNKNOWN_LEVEL_COLOR)
