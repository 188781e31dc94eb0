"""Pydantic schemas for per-user game progress."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from gamehub.games.constants import MAX_LEVEL, MIN_LEVEL
from gamehub.games.schemas import SessionResult


class GameProgress(BaseModel):
    current_level: int = Field(MIN_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)
    best_level: int = Field(MIN_LEVEL, ge=MIN_LEVEL)
    total_score: int = Field(0, ge=0)
    best_time: int | None = None  # ms
    best_attempts: int | None = None
    best_accuracy: float | None = Field(None, ge=0, le=100)


class UserProgress(BaseModel):
    user_id: str
    player_name: str
    created_at: datetime
    last_updated: datetime | None = None
    games: dict[str, GameProgress]


class InitProgressRequest(BaseModel):
    player_name: str = Field(..., min_length=1, max_length=64)


class LevelCompleteResponse(BaseModel):
    progress: UserProgress
    result: SessionResult
