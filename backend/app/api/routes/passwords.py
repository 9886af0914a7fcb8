"""Password Routes — generate one password or a batch, recording each in history.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Every generated password is recorded in history and returned with its strength
    - Batch count bounded by settings.max_batch_count

Design Decisions:
    - History injected via Depends(get_history): tests swap it with dependency_overrides
    - InvalidConfigError propagates to the global handler (no hand-built error payloads)
"""

import logging

from fastapi import APIRouter, Depends, status

from app.config import get_settings
from app.core.errors import InvalidConfigError
from app.core.strength import score
from app.schemas.password import (
    BatchRequest, BatchResponse, PasswordOptions, PasswordResponse,
)
from app.services.history_store import PasswordHistory, get_history
from app.services.password_service import create_password, create_passwords

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/passwords", tags=["passwords"])


@router.post(
    "", response_model=PasswordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_password(
    body: PasswordOptions, history: PasswordHistory = Depends(get_history),
):
    """Generate a password from the given options."""
    entry = await create_password(body.to_config(), history)
    return PasswordResponse.from_entry(entry, score(entry.password))


@router.post(
    "/batch", response_model=BatchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_batch(
    body: BatchRequest, history: PasswordHistory = Depends(get_history),
):
    """Generate several passwords with one set of options."""
    limit = get_settings().max_batch_count
    if body.count > limit:
        raise InvalidConfigError(
            f"Batch count {body.count} exceeds the limit of {limit}", "count",
        )
    entries = await create_passwords(body.options.to_config(), body.count, history)
    return BatchResponse(
        passwords=[PasswordResponse.from_entry(e, score(e.password)) for e in entries],
    )
