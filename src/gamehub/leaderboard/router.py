"""Leaderboards API — per-game and global top 10."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from gamehub.leaderboard.schemas import GlobalLeaderboardResponse, LeaderboardResponse
from gamehub.leaderboard.service import GLOBAL_BOARD, get_leaderboard
from gamehub.store.base import DocumentStore, StoreError
from gamehub.store.client import get_store

router = APIRouter(prefix="/api/v1/leaderboards", tags=["Leaderboards"])


# Declared before /{game_id} so "global" is not captured as a game id
@router.get("/global", response_model=GlobalLeaderboardResponse)
async def global_leaderboard(
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> GlobalLeaderboardResponse:
    try:
        doc = await get_leaderboard(store, GLOBAL_BOARD)
    except StoreError as exc:
        raise HTTPException(status_code=503, detail="Leaderboard unavailable") from exc
    return GlobalLeaderboardResponse.model_validate(doc)


@router.get("/{game_id}", response_model=LeaderboardResponse)
async def game_leaderboard(
    game_id: str,
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> LeaderboardResponse:
    try:
        doc = await get_leaderboard(store, game_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except StoreError as exc:
        raise HTTPException(status_code=503, detail="Leaderboard unavailable") from exc
    return LeaderboardResponse.model_validate({"board": game_id, **doc})
