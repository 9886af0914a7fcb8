"""Export Format — pure conversion of history entries into the downloadable JSON shape.

Invariants:
    - One record per entry, in the order given (history order: newest first)
    - Record keys: password, timestamp (ISO-8601, UTC with Z suffix), length, options
    - options uses camelCase keys so exported files stay compatible with earlier exports
    - No IO: the route layer serializes and serves the result

Design Decisions:
    - Filename carries only the UTC date (passwords-YYYY-MM-DD.json), like the browser download
"""

from datetime import datetime, timezone
from typing import Iterable

from app.core.character_sets import CharacterClassConfig
from app.core.password_record import GeneratedPassword


EXPORT_INDENT: int = 2


def config_to_options(config: CharacterClassConfig) -> dict:
    """Config snapshot as the camelCase options object."""
    return {
        "length": config.length,
        "includeUppercase": config.include_uppercase,
        "includeLowercase": config.include_lowercase,
        "includeNumbers": config.include_numbers,
        "includeSymbols": config.include_symbols,
        "excludeSimilar": config.exclude_similar,
    }


def build_export_records(entries: Iterable[GeneratedPassword]) -> list[dict]:
    return [
        {
            "password": entry.password,
            "timestamp": to_iso_utc(entry.created_at),
            "length": entry.config.length,
            "options": config_to_options(entry.config),
        }
        for entry in entries
    ]


def to_iso_utc(moment: datetime) -> str:
    """UTC, millisecond precision, Z suffix (2026-03-09T14:00:00.000Z)."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def export_filename(now: datetime) -> str:
    return f"passwords-{now.date().isoformat()}.json"
