"""Pydantic schemas for leaderboard documents."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from gamehub.games.constants import GAME_IDS
from gamehub.progress.schemas import GameProgress


class LeaderboardEntry(BaseModel):
    user_id: str
    player_name: str
    best_level: int
    total_score: int
    best_time: int | None = None
    best_attempts: int | None = None
    best_accuracy: float | None = None
    updated_at: datetime | None = None


class GlobalLeaderboardEntry(BaseModel):
    user_id: str
    player_name: str
    total_score: int  # weighted
    average_level: int
    games_completed: int
    raw_score: int
    total_levels: int
    updated_at: datetime | None = None


class GlobalPlayerData(BaseModel):
    """Everything needed to recompute one player's global entry."""

    user_id: str
    player_name: str
    games: dict[str, GameProgress]

    @field_validator("games")
    @classmethod
    def require_every_game(cls, v: dict[str, GameProgress]) -> dict[str, GameProgress]:
        """The global average always spans all four games."""
        if set(v) != set(GAME_IDS):
            msg = f"Expected progress for exactly: {', '.join(GAME_IDS)}"
            raise ValueError(msg)
        return v


class LeaderboardResponse(BaseModel):
    board: str
    players: list[LeaderboardEntry]
    updated_at: datetime | None = None


class GlobalLeaderboardResponse(BaseModel):
    players: list[GlobalLeaderboardEntry]
    updated_at: datetime | None = None
