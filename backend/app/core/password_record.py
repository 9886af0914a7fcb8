"""Password Record — immutable snapshot of one generated password.

Invariants:
    - Frozen: id, password, created_at and config never change after creation
    - created_at is timezone-aware UTC
    - Strength is NOT stored — it is recomputed on demand from the password

Design Decisions:
    - Plain dataclass in core: the history store (shell) assigns ids and timestamps,
      core only defines the shape
"""

from dataclasses import dataclass
from datetime import datetime

from app.core.character_sets import CharacterClassConfig
from app.core.domain_types import EntryId


@dataclass(frozen=True)
class GeneratedPassword:
    id: EntryId
    password: str
    created_at: datetime
    config: CharacterClassConfig
