"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntryId wraps UUID — never use bare UUID for history entries in domain logic
    - Score is bounded 0–100
    - Character classes are listed in the fixed order lowercase, uppercase, digits, symbols
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (tiers travel in API responses)
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EntryId = NewType("EntryId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Score = NewType("Score", int)   # 0–100


# ─── Limits ──────────────────────────────────────────────────────

MIN_PASSWORD_LENGTH: int = 4
MAX_PASSWORD_LENGTH: int = 128
DEFAULT_PASSWORD_LENGTH: int = 16


# ─── Enums ───────────────────────────────────────────────────────

class CharacterClass(str, Enum):
    """Independently selectable character classes, in pool-building order."""
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"


class StrengthTier(str, Enum):
    """Ordered strength labels derived from the numeric score."""
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very-strong"
