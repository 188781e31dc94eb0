"""Progress API: player records and finished rounds."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException

from gamehub.games.schemas import SessionOutcome
from gamehub.progress.schemas import InitProgressRequest, LevelCompleteResponse, UserProgress
from gamehub.progress.service import (
    ProgressNotFoundError,
    UnknownGameError,
    complete_level,
    end_game,
    get_user_progress,
    initialize_user_progress,
)
from gamehub.store.base import DocumentStore, StoreError
from gamehub.store.client import get_store

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1/progress", tags=["Progress"])


def _update_failed(user_id: str, exc: StoreError) -> HTTPException:
    logger.error("progress_update_failed", user_id=user_id, error=str(exc))
    return HTTPException(status_code=503, detail="Update failed")


@router.post("/{user_id}", response_model=UserProgress)
async def init_progress(
    user_id: str,
    body: InitProgressRequest,
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> UserProgress:
    try:
        return await initialize_user_progress(store, user_id, body.player_name)
    except StoreError as exc:
        raise _update_failed(user_id, exc) from exc


@router.get("/{user_id}", response_model=UserProgress)
async def read_progress(
    user_id: str,
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> UserProgress:
    try:
        progress = await get_user_progress(store, user_id)
    except StoreError as exc:
        raise HTTPException(status_code=503, detail="Progress unavailable") from exc
    if progress is None:
        raise HTTPException(status_code=404, detail="Progress not found")
    return progress


@router.post("/{user_id}/{game_id}/complete", response_model=LevelCompleteResponse)
async def level_complete(
    user_id: str,
    game_id: str,
    body: SessionOutcome,
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> LevelCompleteResponse:
    """Record a won round: score it, advance a level, re-rank the player."""
    try:
        progress, result = await complete_level(store, user_id, game_id, body)
    except ProgressNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Progress not found") from exc
    except UnknownGameError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StoreError as exc:
        raise _update_failed(user_id, exc) from exc
    return LevelCompleteResponse(progress=progress, result=result)


@router.post("/{user_id}/{game_id}/game-over", response_model=UserProgress)
async def game_over(
    user_id: str,
    game_id: str,
    store: DocumentStore = Depends(get_store),  # noqa: B008
) -> UserProgress:
    try:
        return await end_game(store, user_id, game_id)
    except ProgressNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Progress not found") from exc
    except UnknownGameError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except StoreError as exc:
        raise _update_failed(user_id, exc) from exc
