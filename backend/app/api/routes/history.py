"""History Routes — list, fetch, clear and export the in-memory password history.

Invariants:
    - Listing is newest first, strength recomputed per entry on every read
    - Unknown entry id → 404 RESOURCE_NOT_FOUND via the global handler
    - Export is a JSON attachment named passwords-YYYY-MM-DD.json

Design Decisions:
    - /export declared before /{entry_id} so the literal path wins routing
    - Export body built by core.export_format (pure), serialized here (IO edge)
"""

import json
import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from app.core.domain_types import EntryId
from app.core.export_format import EXPORT_INDENT, build_export_records, export_filename
from app.core.strength import score
from app.schemas.password import HistoryResponse, PasswordResponse
from app.services.history_store import PasswordHistory, get_history

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/history", tags=["history"])


@router.get("", response_model=HistoryResponse)
async def list_history(history: PasswordHistory = Depends(get_history)):
    """List generated passwords, newest first."""
    entries = history.entries()
    return HistoryResponse(
        entries=[PasswordResponse.from_entry(e, score(e.password)) for e in entries],
        count=len(entries),
        capacity=history.capacity,
    )


@router.delete("")
async def clear_history(history: PasswordHistory = Depends(get_history)):
    """Drop every history entry."""
    cleared = history.clear()
    logger.info("History cleared", extra={"count": cleared})
    return {"cleared": cleared}


@router.get("/export")
async def export_history(history: PasswordHistory = Depends(get_history)):
    """Download the history as a JSON file."""
    records = build_export_records(history.entries())
    filename = export_filename(datetime.now(timezone.utc))
    logger.info("History exported", extra={"count": len(records)})
    return Response(
        content=json.dumps(records, indent=EXPORT_INDENT),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{entry_id}", response_model=PasswordResponse)
async def get_history_entry(
    entry_id: UUID, history: PasswordHistory = Depends(get_history),
):
    """Fetch one history entry."""
    entry = history.get(EntryId(entry_id))
    return PasswordResponse.from_entry(entry, score(entry.password))
