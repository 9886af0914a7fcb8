"""Root conftest — shared test configuration.

Invariants:
    - Every test starts with an empty process-wide history
    - scripted_source replays a fixed list of 32-bit words, then fails loudly
"""

import os

import pytest

# Keep tests independent of any developer .env
os.environ.setdefault("HISTORY_CAPACITY", "50")
os.environ.setdefault("LOG_FORMAT", "text")

from app.config import get_settings  # noqa: E402
from app.services.history_store import reset_history  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_state():
    get_settings.cache_clear()
    reset_history()
    yield
    reset_history()
    get_settings.cache_clear()


class ScriptedRandomSource:
    """Replays recorded words in order; running out is a test bug."""

    def __init__(self, words):
        self._words = list(words)
        self.calls = 0

    def next_uint32(self) -> int:
        if self.calls >= len(self._words):
            raise AssertionError(f"scripted source exhausted after {self.calls} draws")
        word = self._words[self.calls]
        self.calls += 1
        return word


@pytest.fixture
def scripted_source():
    """Factory: scripted_source([w1, w2, ...]) -> RandomSource."""
    return ScriptedRandomSource
