"""Strength Scorer — rule-based point model over a password's surface features.

Invariants:
    - score() is PURE and total: every str (empty, huge, non-ASCII) yields a StrengthResult
    - Final score clamped to [0, 100]
    - Each penalty fires at most once regardless of how many matches exist
    - Feedback order is fixed: length, diversity, repetition, sequential

Design Decisions:
    - Repetition and sequential families are an exact baseline (runs of 3, nine literal
      triples) — extending them changes scores callers already display
    - Diversity "symbol" means anything that is not an ASCII letter or digit, so
      whitespace and non-ASCII characters count toward it
"""

import re
from dataclasses import dataclass

from app.core.domain_types import Score, StrengthTier


STRONG_LENGTH: int = 12
MIN_LENGTH: int = 8

LENGTH_POINTS_STRONG: int = 25
LENGTH_POINTS_FAIR: int = 15
LENGTH_POINTS_SHORT: int = 5
POINTS_PER_CHAR_TYPE: int = 15
MIN_CHAR_TYPES: int = 3
REPETITION_PENALTY: int = 10
SEQUENTIAL_PENALTY: int = 10

FEEDBACK_LENGTH_FAIR = "Consider using at least 12 characters"
FEEDBACK_LENGTH_SHORT = "Password is too short"
FEEDBACK_DIVERSITY = "Include more character types (uppercase, lowercase, numbers, symbols)"
FEEDBACK_REPETITION = "Avoid repeating characters"
FEEDBACK_SEQUENTIAL = "Avoid sequential patterns"

SEQUENTIAL_PATTERNS: tuple[str, ...] = (
    "abc", "bcd", "cde", "123", "234", "345", "qwe", "wer", "ert",
)

# Highest first, first match wins
TIER_THRESHOLDS: tuple[tuple[int, StrengthTier], ...] = (
    (80, StrengthTier.VERY_STRONG),
    (60, StrengthTier.STRONG),
    (40, StrengthTier.GOOD),
    (20, StrengthTier.FAIR),
)

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_OTHER = re.compile(r"[^a-zA-Z0-9]")
_REPEAT_RUN = re.compile(r"(.)\1{2,}", re.DOTALL)
_SEQUENTIAL = re.compile("|".join(SEQUENTIAL_PATTERNS), re.IGNORECASE)


@dataclass(frozen=True)
class StrengthResult:
    """Scored password — immutable value record."""
    tier: StrengthTier
    score: Score
    feedback: tuple[str, ...] = ()


def score(password: str) -> StrengthResult:
    """Score a password. Pure, never raises for str input."""
    points = 0
    feedback: list[str] = []

    length = len(password)
    if length >= STRONG_LENGTH:
        points += LENGTH_POINTS_STRONG
    elif length >= MIN_LENGTH:
        points += LENGTH_POINTS_FAIR
        feedback.append(FEEDBACK_LENGTH_FAIR)
    else:
        points += LENGTH_POINTS_SHORT
        feedback.append(FEEDBACK_LENGTH_SHORT)

    char_types = count_char_types(password)
    points += char_types * POINTS_PER_CHAR_TYPE
    if char_types < MIN_CHAR_TYPES:
        feedback.append(FEEDBACK_DIVERSITY)

    if has_repeated_run(password):
        points -= REPETITION_PENALTY
        feedback.append(FEEDBACK_REPETITION)

    if has_sequential_pattern(password):
        points -= SEQUENTIAL_PENALTY
        feedback.append(FEEDBACK_SEQUENTIAL)

    clamped = Score(max(0, min(100, points)))
    return StrengthResult(tier=tier_for(clamped), score=clamped, feedback=tuple(feedback))


def count_char_types(password: str) -> int:
    """Number of categories present among lowercase, uppercase, digit, other (0–4)."""
    return sum(
        1 for pattern in (_LOWER, _UPPER, _DIGIT, _OTHER) if pattern.search(password)
    )


def has_repeated_run(password: str) -> bool:
    """True if any character appears 3+ times in a row."""
    return _REPEAT_RUN.search(password) is not None


def has_sequential_pattern(password: str) -> bool:
    return _SEQUENTIAL.search(password) is not None


def tier_for(points: int) -> StrengthTier:
    for threshold, tier in TIER_THRESHOLDS:
        if points >= threshold:
            return tier
    return StrengthTier.WEAK
