"""Service test fixtures — in-memory history + FastAPI test client.

Invariants:
    - Every test gets a fresh PasswordHistory
    - get_history dependency overridden so routes and assertions share one store

Design Decisions:
    - Small capacity (5) keeps eviction tests cheap; routes never assume 50
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.services.history_store import PasswordHistory, get_history


@pytest.fixture
def history():
    return PasswordHistory(capacity=5)


@pytest.fixture
async def client(history):
    """FastAPI test client with the history dependency overridden."""
    app.dependency_overrides[get_history] = lambda: history

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
