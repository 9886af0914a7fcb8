"""History Store — bounded, insertion-ordered in-memory log of generated passwords.

Invariants:
    - Newest entry first; once capacity is exceeded the oldest entry is evicted
    - Every entry gets a fresh uuid4 id and a UTC timestamp at record time
    - get() raises ResourceNotFoundError for unknown ids (never returns None)

Design Decisions:
    - deque(maxlen=capacity) with appendleft: eviction is O(1) and automatic
    - Process-wide store behind get_history(): deliberate exception to no-global-state rule
      (ADR: single-process uvicorn, history lost on restart — no persistence by design)
"""

import logging
from collections import deque
from datetime import datetime, timezone
from uuid import uuid4

from app.config import get_settings
from app.core.character_sets import CharacterClassConfig
from app.core.domain_types import EntryId
from app.core.errors import ResourceNotFoundError
from app.core.password_record import GeneratedPassword

logger = logging.getLogger(__name__)


class PasswordHistory:
    """Fixed-capacity history of generated passwords."""

    def __init__(self, capacity: int = 50):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._entries: deque[GeneratedPassword] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, password: str, config: CharacterClassConfig) -> GeneratedPassword:
        """Store a freshly generated password and return its record."""
        entry = GeneratedPassword(
            id=EntryId(uuid4()),
            password=password,
            created_at=datetime.now(timezone.utc),
            config=config,
        )
        if len(self._entries) == self.capacity:
            logger.debug(
                "History full, evicting oldest entry",
                extra={"entry_id": str(self._entries[-1].id)},
            )
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[GeneratedPassword]:
        """Snapshot, newest first."""
        return list(self._entries)

    def get(self, entry_id: EntryId) -> GeneratedPassword:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise ResourceNotFoundError("Password", str(entry_id))

    def clear(self) -> int:
        """Drop every entry. Returns how many were removed."""
        removed = len(self._entries)
        self._entries.clear()
        return removed


_history: PasswordHistory | None = None


def get_history() -> PasswordHistory:
    """Process-wide history, created on first use from settings."""
    global _history
    if _history is None:
        _history = PasswordHistory(capacity=get_settings().history_capacity)
    return _history


def reset_history() -> None:
    """Forget the process-wide history (next get_history() builds a fresh one)."""
    global _history
    _history = None
