"""Leaderboard ranking — merge, sort, trim. ZERO I/O.

Per-game boards are ranked by best_level DESC, then a game-specific metric
(only when both entries have it), then total_score DESC.
The global board is ranked by weighted score DESC, then games_completed DESC,
then average_level DESC.
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Any

from gamehub.games.constants import GAME_IDS, HIGHER_LOWER, MAX_LEVEL, MEMORY_MATCH, QUICK_COUNT, SEQUENCE_SPRINT

LEADERBOARD_CAPACITY = 10

LEVEL_WEIGHT = 10
SCORE_WEIGHT = 1
COMPLETION_BONUS = 1000

# game_id -> (metric, higher_is_better)
SECONDARY_METRICS: dict[str, tuple[str, bool]] = {
    HIGHER_LOWER: ("best_attempts", False),
    QUICK_COUNT: ("best_time", False),
    MEMORY_MATCH: ("best_time", False),
    SEQUENCE_SPRINT: ("best_accuracy", True),
}


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_entries(game_id: str, a: dict[str, Any], b: dict[str, Any]) -> int:
    """Negative when ``a`` ranks above ``b``."""
    if a["best_level"] != b["best_level"]:
        return _sign(b["best_level"] - a["best_level"])

    secondary = SECONDARY_METRICS.get(game_id)
    if secondary is not None:
        metric, higher_is_better = secondary
        a_value, b_value = a.get(metric), b.get(metric)
        if a_value is not None and b_value is not None and a_value != b_value:
            diff = b_value - a_value if higher_is_better else a_value - b_value
            return _sign(diff)

    return _sign(b.get("total_score", 0) - a.get("total_score", 0))


def rank_entries(game_id: str, entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return sorted(entries, key=cmp_to_key(lambda a, b: compare_entries(game_id, a, b)))


def merge_entry(
    game_id: str,
    entries: list[dict[str, Any]],
    entry: dict[str, Any],
    capacity: int = LEADERBOARD_CAPACITY,
) -> list[dict[str, Any]]:
    """Replace the player's previous entry, re-rank, keep the top ``capacity``."""
    merged = [e for e in entries if e["user_id"] != entry["user_id"]]
    merged.append(entry)
    return rank_entries(game_id, merged)[:capacity]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() is banker's)."""
    return math.floor(value + 0.5)


def compute_weighted_score(total_levels: int, raw_score: int, games_completed: int) -> int:
    return total_levels * LEVEL_WEIGHT + raw_score * SCORE_WEIGHT + games_completed * COMPLETION_BONUS


def compute_global_entry(
    user_id: str,
    player_name: str,
    games: list[dict[str, Any]],
) -> dict[str, Any]:
    """Aggregate a player's per-game progress into one global entry.

    Input: the player's GameProgress dicts (best_level, total_score), one per
    game. The average is always taken over every game, played or not.
    Output: dict with weighted total_score, average_level, games_completed,
    plus the unweighted raw_score and total_levels.
    """
    raw_score = sum(g["total_score"] for g in games)
    total_levels = sum(g["best_level"] for g in games)
    games_completed = sum(1 for g in games if g["best_level"] >= MAX_LEVEL)
    average_level = round_half_up(total_levels / len(GAME_IDS))

    return {
        "user_id": user_id,
        "player_name": player_name,
        "total_score": compute_weighted_score(total_levels, raw_score, games_completed),
        "average_level": average_level,
        "games_completed": games_completed,
        "raw_score": raw_score,
        "total_levels": total_levels,
    }


def rank_global_entries(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    def sort_key(e: dict[str, Any]) -> tuple[int, int, int]:
        return (-e["total_score"], -e["games_completed"], -e["average_level"])

    return sorted(entries, key=sort_key)


def merge_global_entry(
    entries: list[dict[str, Any]],
    entry: dict[str, Any],
    capacity: int = LEADERBOARD_CAPACITY,
) -> list[dict[str, Any]]:
    merged = [e for e in entries if e["user_id"] != entry["user_id"]]
    merged.append(entry)
    return rank_global_entries(merged)[:capacity]
