"""Leaderboard service — per-game top 10 and the weighted global top 10.

Each update is a single atomic read-modify-write on the board document
``{players: [...], updated_at}``. The global entry is recomputed from the
player's four game records on every update, never patched.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from gamehub.config import get_settings
from gamehub.games.constants import GAME_IDS
from gamehub.leaderboard.ranking import compute_global_entry, merge_entry, merge_global_entry
from gamehub.leaderboard.schemas import GlobalPlayerData, LeaderboardEntry
from gamehub.store.base import Document, DocumentStore, leaderboard_key

logger = logging.getLogger(__name__)

GLOBAL_BOARD = "global"


def build_leaderboard_key(board: str, namespace: str | None = None) -> str:
    """Build the store key for a game board or the global board."""
    if board != GLOBAL_BOARD and board not in GAME_IDS:
        msg = f"Unknown leaderboard: {board}"
        raise ValueError(msg)
    return leaderboard_key(namespace or get_settings().store_namespace, board)


def _players(doc: Document | None) -> list[dict[str, Any]]:
    if not doc:
        return []
    return list(doc.get("players") or [])


async def get_leaderboard(
    store: DocumentStore, board: str, namespace: str | None = None,
) -> Document:
    """Read a board document; a missing board is an empty one."""
    doc = await store.get(build_leaderboard_key(board, namespace))
    return {"players": _players(doc), "updated_at": doc.get("updated_at") if doc else None}


async def update_leaderboard(
    store: DocumentStore,
    game_id: str,
    player_data: dict[str, Any],
    namespace: str | None = None,
) -> list[dict[str, Any]]:
    """Merge a player's best stats into the game's board and persist the top 10."""
    key = build_leaderboard_key(game_id, namespace)
    now = datetime.now(timezone.utc)
    entry = LeaderboardEntry.model_validate({**player_data, "updated_at": now}).model_dump(
        mode="json", exclude_none=True,
    )

    def mutate(doc: Document | None) -> Document:
        return {
            "players": merge_entry(game_id, _players(doc), entry),
            "updated_at": now.isoformat(),
        }

    doc = await store.update(key, mutate)
    logger.info("Leaderboard %s updated for user %s (%d players)", game_id, entry["user_id"], len(doc["players"]))
    return doc["players"]


async def update_global_leaderboard(
    store: DocumentStore,
    player_data: dict[str, Any],
    namespace: str | None = None,
) -> list[dict[str, Any]]:
    """Recompute the player's weighted global entry and persist the global top 10."""
    player = GlobalPlayerData.model_validate(player_data)
    key = build_leaderboard_key(GLOBAL_BOARD, namespace)
    now = datetime.now(timezone.utc)

    entry = compute_global_entry(
        player.user_id,
        player.player_name,
        [game.model_dump() for game in player.games.values()],
    )
    entry["updated_at"] = now.isoformat()

    def mutate(doc: Document | None) -> Document:
        return {
            "players": merge_global_entry(_players(doc), entry),
            "updated_at": now.isoformat(),
        }

    doc = await store.update(key, mutate)
    logger.info(
        "Global leaderboard updated for user %s (weighted score %d)",
        player.user_id, entry["total_score"],
    )
    return doc["players"]
