"""Strength Route — score any password without recording it.

Invariants:
    - POST /api/v1/strength never touches history
    - Always 200 for a valid body: the scorer is total
"""

from fastapi import APIRouter

from app.schemas.password import StrengthRequest, StrengthResponse
from app.services.password_service import evaluate_password

router = APIRouter(prefix="/api/v1/strength", tags=["strength"])


@router.post("", response_model=StrengthResponse)
async def check_strength(body: StrengthRequest):
    """Score a password and return tier, score and suggestions."""
    result = await evaluate_password(body.password)
    return StrengthResponse.from_result(result)
