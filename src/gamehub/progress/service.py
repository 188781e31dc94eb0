"""Player progress: level-complete and game-over transitions, then leaderboard sync.

Best metrics are ratchets: best_level, best_accuracy and total_score only go
up, best_time and best_attempts only go down. current_level stays in [1, 100].
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from gamehub.config import get_settings
from gamehub.games.constants import (
    GAME_IDS,
    HIGHER_LOWER,
    MAX_LEVEL,
    MEMORY_MATCH,
    MIN_LEVEL,
    QUICK_COUNT,
    SEQUENCE_SPRINT,
)
from gamehub.games.schemas import SessionOutcome, SessionResult
from gamehub.games.scoring import score_session
from gamehub.leaderboard.service import update_global_leaderboard, update_leaderboard
from gamehub.progress.schemas import GameProgress, UserProgress
from gamehub.store.base import Document, DocumentStore, user_progress_key

logger = structlog.get_logger()

# Which best_* metrics each game keeps
TRACKED_METRICS: dict[str, frozenset[str]] = {
    HIGHER_LOWER: frozenset({"attempts", "time"}),
    QUICK_COUNT: frozenset({"time", "accuracy"}),
    SEQUENCE_SPRINT: frozenset({"time", "accuracy"}),
    MEMORY_MATCH: frozenset({"attempts", "accuracy", "time"}),
}

_LEADERBOARD_FIELDS = {"best_level", "total_score", "best_time", "best_attempts", "best_accuracy"}


class ProgressNotFoundError(LookupError):
    """No progress record exists for the user."""


class UnknownGameError(LookupError):
    """The game id is not one of the four hub games."""


def _progress_key(user_id: str, namespace: str | None) -> str:
    return user_progress_key(namespace or get_settings().store_namespace, user_id)


def _check_game(game_id: str) -> None:
    if game_id not in GAME_IDS:
        msg = f"Unknown game: {game_id}"
        raise UnknownGameError(msg)


def _lowest(current: int | None, value: int) -> int:
    return value if current is None else min(current, value)


def new_user_progress(user_id: str, player_name: str) -> UserProgress:
    """Fresh record: every game at level 1 with no score."""
    return UserProgress(
        user_id=user_id,
        player_name=player_name,
        created_at=datetime.now(timezone.utc),
        games={game_id: GameProgress() for game_id in GAME_IDS},
    )


def apply_level_complete(game_id: str, progress: GameProgress, result: SessionResult) -> GameProgress:
    """Advance one level and ratchet the game's tracked best metrics."""
    metrics = TRACKED_METRICS.get(game_id, frozenset())
    updated = progress.model_copy(
        update={
            "current_level": min(progress.current_level + 1, MAX_LEVEL),
            "best_level": max(progress.best_level, progress.current_level),
            "total_score": progress.total_score + max(0, result.score),
        },
    )
    if "time" in metrics and result.time_ms:
        updated.best_time = _lowest(progress.best_time, result.time_ms)
    if "attempts" in metrics:
        updated.best_attempts = _lowest(progress.best_attempts, result.attempts)
    if "accuracy" in metrics:
        updated.best_accuracy = max(progress.best_accuracy or 0.0, result.accuracy)
    return updated


def apply_game_over(progress: GameProgress) -> GameProgress:
    """Back to level 1; bests and total score are kept."""
    return progress.model_copy(update={"current_level": MIN_LEVEL})


async def get_user_progress(
    store: DocumentStore, user_id: str, namespace: str | None = None,
) -> UserProgress | None:
    doc = await store.get(_progress_key(user_id, namespace))
    return UserProgress.model_validate(doc) if doc else None


async def initialize_user_progress(
    store: DocumentStore, user_id: str, player_name: str, namespace: str | None = None,
) -> UserProgress:
    """Create the user's progress record, or return the existing one untouched."""

    def mutate(doc: Document | None) -> Document:
        if doc:
            return doc
        return new_user_progress(user_id, player_name).model_dump(mode="json")

    doc = await store.update(_progress_key(user_id, namespace), mutate)
    return UserProgress.model_validate(doc)


async def _save_game(
    store: DocumentStore,
    user_id: str,
    game_id: str,
    transform: Callable[[GameProgress], GameProgress],
    namespace: str | None,
) -> UserProgress:
    """Atomically rewrite one game's progress, then refresh both leaderboards."""
    _check_game(game_id)

    def mutate(doc: Document | None) -> Document:
        if not doc:
            raise ProgressNotFoundError(user_id)
        progress = UserProgress.model_validate(doc)
        progress.games[game_id] = transform(progress.games.get(game_id, GameProgress()))
        progress.last_updated = datetime.now(timezone.utc)
        return progress.model_dump(mode="json")

    progress = UserProgress.model_validate(
        await store.update(_progress_key(user_id, namespace), mutate),
    )

    game = progress.games[game_id]
    await update_leaderboard(
        store,
        game_id,
        {
            "user_id": progress.user_id,
            "player_name": progress.player_name,
            **game.model_dump(include=_LEADERBOARD_FIELDS),
        },
        namespace,
    )
    await update_global_leaderboard(
        store, progress.model_dump(include={"user_id", "player_name", "games"}), namespace,
    )
    return progress


async def update_user_progress(
    store: DocumentStore,
    user_id: str,
    game_id: str,
    game_progress: GameProgress,
    namespace: str | None = None,
) -> UserProgress:
    """Replace one game's progress and re-rank the player."""
    return await _save_game(store, user_id, game_id, lambda _current: game_progress, namespace)


async def complete_level(
    store: DocumentStore,
    user_id: str,
    game_id: str,
    outcome: SessionOutcome,
    namespace: str | None = None,
) -> tuple[UserProgress, SessionResult]:
    """Score a won round at the player's current level and advance them."""
    _check_game(game_id)
    if not outcome.won:
        msg = "A lost round ends the game; it cannot complete a level"
        raise ValueError(msg)

    scored: list[tuple[int, SessionResult]] = []

    def transform(game: GameProgress) -> GameProgress:
        # May run more than once if the store retries a conflicting write
        result = score_session(game_id, game.current_level, outcome)
        scored[:] = [(game.current_level, result)]
        return apply_level_complete(game_id, game, result)

    progress = await _save_game(store, user_id, game_id, transform, namespace)
    level, result = scored[0]
    logger.info(
        "level_completed",
        user_id=user_id,
        game_id=game_id,
        level=level,
        score=result.score,
    )
    return progress, result


async def end_game(
    store: DocumentStore, user_id: str, game_id: str, namespace: str | None = None,
) -> UserProgress:
    """Game over: reset the current level to 1."""
    progress = await _save_game(store, user_id, game_id, apply_game_over, namespace)
    logger.info("game_over", user_id=user_id, game_id=game_id)
    return progress
