"""Progress service: records, level completion, game over, leaderboard sync."""

from __future__ import annotations

import asyncio

import pytest

from gamehub.games.schemas import SessionOutcome
from gamehub.leaderboard.service import GLOBAL_BOARD, get_leaderboard
from gamehub.progress.schemas import GameProgress
from gamehub.progress.service import (
    ProgressNotFoundError,
    UnknownGameError,
    complete_level,
    end_game,
    get_user_progress,
    initialize_user_progress,
    update_user_progress,
)
from gamehub.store.memory_store import MemoryDocumentStore

pytestmark = pytest.mark.asyncio

NS = "progress-test"


async def _init(store: MemoryDocumentStore, user_id: str = "u1", name: str = "Ada"):
    return await initialize_user_progress(store, user_id, name, NS)


async def test_missing_user_is_none(store: MemoryDocumentStore) -> None:
    assert await get_user_progress(store, "ghost", NS) is None


async def test_initialize_creates_all_games(store: MemoryDocumentStore) -> None:
    """A new record holds all four games."""
    progress = await _init(store)
    assert progress.player_name == "Ada"
    assert set(progress.games) == {"higher-lower", "quick-count", "sequence-sprint", "memory-match"}
    assert (await get_user_progress(store, "u1", NS)) == progress


async def test_initialize_is_idempotent(store: MemoryDocumentStore) -> None:
    """Re-initializing never overwrites existing progress."""
    first = await _init(store)
    await complete_level(store, "u1", "quick-count", SessionOutcome(time_ms=3_000), NS)
    again = await _init(store, name="Someone Else")
    assert again.player_name == "Ada"
    assert again.created_at == first.created_at
    assert again.games["quick-count"].current_level == 2


async def test_complete_level_scores_at_current_level(store: MemoryDocumentStore) -> None:
    """The round is scored at the level being played, not the next one."""
    await _init(store)
    progress, result = await complete_level(
        store, "u1", "sequence-sprint", SessionOutcome(time_ms=10_000), NS,
    )
    assert result.score == 100 + 20 + 10  # level 1
    game = progress.games["sequence-sprint"]
    assert game.current_level == 2
    assert game.best_level == 1
    assert game.total_score == result.score
    assert game.best_time == 10_000
    assert game.best_accuracy == 100.0
    assert progress.last_updated is not None

    _, second = await complete_level(store, "u1", "sequence-sprint", SessionOutcome(time_ms=10_000), NS)
    assert second.score == 100 + 20 + 20  # level 2


async def test_complete_level_updates_both_boards(store: MemoryDocumentStore) -> None:
    """Completing a level refreshes the game board and the global board."""
    await _init(store)
    await complete_level(store, "u1", "memory-match", SessionOutcome(time_ms=20_000, attempts=6), NS)

    board = await get_leaderboard(store, "memory-match", NS)
    entry = board["players"][0]
    assert entry["user_id"] == "u1"
    assert entry["player_name"] == "Ada"
    assert entry["best_level"] == 1
    assert entry["best_time"] == 20_000
    assert entry["best_attempts"] == 6

    global_board = await get_leaderboard(store, GLOBAL_BOARD, NS)
    global_entry = global_board["players"][0]
    assert global_entry["user_id"] == "u1"
    assert global_entry["total_levels"] == 4
    assert global_entry["raw_score"] == entry["total_score"]


async def test_lost_round_cannot_complete(store: MemoryDocumentStore) -> None:
    await _init(store)
    with pytest.raises(ValueError, match="lost round"):
        await complete_level(store, "u1", "quick-count", SessionOutcome(won=False, time_ms=1_000), NS)


async def test_unknown_game(store: MemoryDocumentStore) -> None:
    """Unknown game ids are a lookup failure, not a bad request."""
    await _init(store)
    with pytest.raises(UnknownGameError, match="Unknown game: snake"):
        await complete_level(store, "u1", "snake", SessionOutcome(time_ms=1_000), NS)
    with pytest.raises(UnknownGameError):
        await end_game(store, "u1", "snake", NS)


async def test_complete_without_record(store: MemoryDocumentStore) -> None:
    """No record means no leaderboard writes either."""
    with pytest.raises(ProgressNotFoundError):
        await complete_level(store, "ghost", "quick-count", SessionOutcome(time_ms=1_000), NS)
    assert await get_leaderboard(store, "quick-count", NS) == {"players": [], "updated_at": None}


async def test_game_over_resets_level_keeps_bests(store: MemoryDocumentStore) -> None:
    await _init(store)
    for _ in range(3):
        await complete_level(store, "u1", "higher-lower", SessionOutcome(time_ms=5_000, attempts=3), NS)
    progress = await end_game(store, "u1", "higher-lower", NS)
    game = progress.games["higher-lower"]
    assert game.current_level == 1
    assert game.best_level == 3
    assert game.best_attempts == 3
    assert game.total_score > 0


async def test_update_user_progress_replaces_game(store: MemoryDocumentStore) -> None:
    """Replacing one game re-ranks the player on both boards."""
    await _init(store)
    progress = await update_user_progress(
        store, "u1", "quick-count", GameProgress(current_level=40, best_level=40, total_score=9_000), NS,
    )
    assert progress.games["quick-count"].best_level == 40
    board = await get_leaderboard(store, "quick-count", NS)
    assert board["players"][0]["best_level"] == 40

    global_entry = (await get_leaderboard(store, GLOBAL_BOARD, NS))["players"][0]
    assert global_entry["total_levels"] == 43
    assert global_entry["average_level"] == 11  # 43 / 4 rounded half up


async def test_concurrent_players_all_ranked(store: MemoryDocumentStore) -> None:
    users = [f"u{i}" for i in range(6)]
    for user_id in users:
        await _init(store, user_id, user_id.upper())

    await asyncio.gather(
        *(complete_level(store, u, "quick-count", SessionOutcome(time_ms=2_000), NS) for u in users),
    )
    board = await get_leaderboard(store, "quick-count", NS)
    assert {p["user_id"] for p in board["players"]} == set(users)
    global_board = await get_leaderboard(store, GLOBAL_BOARD, NS)
    assert {p["user_id"] for p in global_board["players"]} == set(users)
