"""Password Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PasswordOptions.length: 4–128
    - PasswordOptions requires at least one include_* flag (empty pool never reaches core)
    - StrengthRequest.password: at most 1024 chars, empty allowed (scorer is total)
    - BatchRequest.count: >= 1; upper bound checked against settings in the route

Design Decisions:
    - to_config()/from_config() convert at the boundary — core never sees Pydantic models
    - tier serialized as StrengthTier str enum: no custom encoder needed
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from app.core.character_sets import CharacterClassConfig
from app.core.domain_types import (
    DEFAULT_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH, StrengthTier,
)
from app.core.password_record import GeneratedPassword
from app.core.strength import StrengthResult


MAX_SCORED_PASSWORD_LENGTH: int = 1024


class PasswordOptions(BaseModel):
    """Generation criteria — validates length range and class selection."""
    length: int = Field(
        DEFAULT_PASSWORD_LENGTH, ge=MIN_PASSWORD_LENGTH, le=MAX_PASSWORD_LENGTH,
    )
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False

    @model_validator(mode="after")
    def require_one_class(self):
        if not (
            self.include_uppercase or self.include_lowercase
            or self.include_numbers or self.include_symbols
        ):
            raise ValueError("At least one character type must be selected")
        return self

    def to_config(self) -> CharacterClassConfig:
        return CharacterClassConfig(
            length=self.length,
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_symbols=self.include_symbols,
            exclude_similar=self.exclude_similar,
        )

    @classmethod
    def from_config(cls, config: CharacterClassConfig) -> "PasswordOptions":
        return cls(
            length=config.length,
            include_uppercase=config.include_uppercase,
            include_lowercase=config.include_lowercase,
            include_numbers=config.include_numbers,
            include_symbols=config.include_symbols,
            exclude_similar=config.exclude_similar,
        )


class BatchRequest(BaseModel):
    """Batch generation — one config, several passwords."""
    options: PasswordOptions = Field(default_factory=PasswordOptions)
    count: int = Field(5, ge=1)


class StrengthRequest(BaseModel):
    password: str = Field(max_length=MAX_SCORED_PASSWORD_LENGTH)


class StrengthResponse(BaseModel):
    """Strength result — tier, clamped score, ordered suggestions."""
    tier: StrengthTier
    score: int = Field(ge=0, le=100)
    feedback: list[str]

    @classmethod
    def from_result(cls, result: StrengthResult) -> "StrengthResponse":
        return cls(tier=result.tier, score=result.score, feedback=list(result.feedback))


class PasswordResponse(BaseModel):
    """Generated password as returned to the client, strength computed on demand."""
    id: UUID
    password: str
    created_at: datetime
    options: PasswordOptions
    strength: StrengthResponse

    @classmethod
    def from_entry(
        cls, entry: GeneratedPassword, result: StrengthResult,
    ) -> "PasswordResponse":
        return cls(
            id=entry.id,
            password=entry.password,
            created_at=entry.created_at,
            options=PasswordOptions.from_config(entry.config),
            strength=StrengthResponse.from_result(result),
        )


class BatchResponse(BaseModel):
    passwords: list[PasswordResponse]


class HistoryResponse(BaseModel):
    """History listing — newest first."""
    entries: list[PasswordResponse]
    count: int
    capacity: int
