"""Password Service — async shell around the pure generator and scorer.

Invariants:
    - Core is called synchronously; async exists only for consistency with the event loop
    - Every generated password is recorded in the given history before returning
    - Passwords are never logged — only lengths, counts and entry ids

Design Decisions:
    - History passed in, not imported: routes inject it via Depends, tests pass their own
      (ADR: impureim sandwich — pure core, IO/state at the edges)
"""

import logging

from app.core.character_sets import CharacterClassConfig
from app.core.generator import generate, generate_many
from app.core.password_record import GeneratedPassword
from app.core.random_source import RandomSource
from app.core.strength import StrengthResult, score
from app.services.history_store import PasswordHistory

logger = logging.getLogger(__name__)


async def create_password(
    config: CharacterClassConfig,
    history: PasswordHistory,
    source: RandomSource | None = None,
) -> GeneratedPassword:
    """Generate one password and record it."""
    password = generate(config, source)
    entry = history.record(password, config)
    logger.info(
        "Password generated",
        extra={
            "entry_id": str(entry.id),
            "length": config.length,
            "classes": [c.value for c in config.selected_classes],
        },
    )
    return entry


async def create_passwords(
    config: CharacterClassConfig,
    count: int,
    history: PasswordHistory,
    source: RandomSource | None = None,
) -> list[GeneratedPassword]:
    """Generate a batch; each password is recorded, oldest first, so the batch reads newest-first."""
    passwords = generate_many(config, count, source)
    entries = [history.record(p, config) for p in passwords]
    logger.info(
        "Password batch generated",
        extra={"count": count, "length": config.length},
    )
    return entries


async def evaluate_password(password: str) -> StrengthResult:
    """Score an arbitrary password."""
    return score(password)
