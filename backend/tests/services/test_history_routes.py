"""History Routes — list, fetch, clear and export over HTTP.

Invariants:
    - Listing newest first with capacity reported
    - Unknown id → 404 RESOURCE_NOT_FOUND
    - Export is an attachment with camelCase options
"""

import json
from uuid import uuid4

from app.core.character_sets import CharacterClassConfig


CONFIG = CharacterClassConfig(length=12, include_symbols=False)


async def test_list_empty_history(client):
    res = await client.get("/api/v1/history")
    assert res.status_code == 200
    assert res.json() == {"entries": [], "count": 0, "capacity": 5}


async def test_list_newest_first_with_strength(client, history):
    history.record("aaaaaaaaaaaa", CONFIG)
    history.record("Tr0ub4dor&3XyZ", CONFIG)
    body = (await client.get("/api/v1/history")).json()
    assert body["count"] == 2
    first, second = body["entries"]
    assert first["password"] == "Tr0ub4dor&3XyZ"
    assert first["strength"]["tier"] == "very-strong"
    assert second["strength"]["score"] == 30


async def test_history_evicts_beyond_capacity(client):
    for _ in range(7):
        await client.post("/api/v1/passwords", json={"length": 8})
    body = (await client.get("/api/v1/history")).json()
    assert body["count"] == 5


async def test_get_entry(client, history):
    entry = history.record("Zx9!Zx9!Zx9!", CONFIG)
    res = await client.get(f"/api/v1/history/{entry.id}")
    assert res.status_code == 200
    assert res.json()["password"] == "Zx9!Zx9!Zx9!"
    assert res.json()["options"]["include_symbols"] is False


async def test_get_unknown_entry_returns_404(client):
    res = await client.get(f"/api/v1/history/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_clear_history(client, history):
    history.record("a", CONFIG)
    history.record("b", CONFIG)
    res = await client.delete("/api/v1/history")
    assert res.json() == {"cleared": 2}
    assert len(history) == 0


async def test_export_history(client, history):
    history.record("first-pass", CONFIG)
    history.record("second-pass", CONFIG)
    res = await client.get("/api/v1/history/export")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    disposition = res.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="passwords-')
    assert disposition.endswith('.json"')

    records = json.loads(res.text)
    assert [r["password"] for r in records] == ["second-pass", "first-pass"]
    assert records[0]["length"] == 12
    assert records[0]["options"]["includeSymbols"] is False
    assert set(records[0]) == {"password", "timestamp", "length", "options"}
    assert records[0]["timestamp"].endswith("Z")


async def test_export_empty_history(client):
    res = await client.get("/api/v1/history/export")
    assert json.loads(res.text) == []
