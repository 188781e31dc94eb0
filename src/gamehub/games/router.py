"""Games API: difficulty curves, Sequence Sprint puzzles and Higher-or-Lower feedback."""

from __future__ import annotations

import random

from fastapi import APIRouter, Query

from gamehub.games.difficulty import (
    get_difficulty_config,
    get_higher_lower_difficulty,
    get_sequence_sprint_difficulty,
)
from gamehub.games.hints import get_hint
from gamehub.games.schemas import GuessFeedback, GuessRequest, HintResponse, PatternResponse
from gamehub.games.scoring import guess_feedback
from gamehub.games.sequences import generate_sequence_pattern

router = APIRouter(prefix="/api/v1/games", tags=["Games"])


@router.get("/sequence-sprint/pattern", response_model=PatternResponse)
async def sequence_pattern(
    level: int = Query(1, ge=1),
    length: int | None = Query(None, ge=1, le=50),
    seed: int | None = Query(None),
) -> PatternResponse:
    """New puzzle; ``length`` defaults to the level's sequence length."""
    if length is None:
        length = get_sequence_sprint_difficulty(level).sequence_length
    rng = random.Random(seed)  # noqa: S311
    pattern = generate_sequence_pattern(level, length, rng)
    return PatternResponse(**pattern.model_dump(), level=level, hint=get_hint(pattern.type))


@router.get("/sequence-sprint/hints/{pattern_type}", response_model=HintResponse)
async def sequence_hint(pattern_type: str) -> HintResponse:
    return HintResponse(type=pattern_type, hint=get_hint(pattern_type))


@router.post("/higher-lower/feedback", response_model=GuessFeedback)
async def higher_lower_feedback(body: GuessRequest) -> GuessFeedback:
    threshold = get_higher_lower_difficulty(body.level).proximity_threshold
    return guess_feedback(body.guess, body.target, threshold)


@router.get("/{game_id}/difficulty")
async def difficulty(game_id: str, level: int = Query(..., ge=1)) -> dict:
    """Difficulty config for ``game_id``; unknown games return only ``level``."""
    return get_difficulty_config(game_id, level).model_dump()

