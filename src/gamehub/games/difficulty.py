"""Per-level difficulty curves for the four games.

Every curve is clamp-guarded, so any level >= 1 produces a valid config.
Levels above MAX_LEVEL are not expected but do not fail.
These values MUST stay in sync with the game clients.
"""

from __future__ import annotations

import math

from gamehub.games.constants import HIGHER_LOWER, MEMORY_MATCH, QUICK_COUNT, SEQUENCE_SPRINT
from gamehub.games.schemas import (
    DifficultyConfig,
    GridSize,
    HigherLowerConfig,
    MemoryMatchConfig,
    QuickCountConfig,
    SequenceSprintConfig,
)

# Largest integer the game clients represent exactly; the guess range stops growing here
HIGHER_LOWER_RANGE_CAP = 2**53 - 1

# (minimum level, rows, cols); the last breakpoint holds for all higher levels
MEMORY_MATCH_GRIDS: list[tuple[int, int, int]] = [
    (1, 3, 4),
    (4, 4, 4),
    (8, 4, 5),
    (12, 5, 4),
    (16, 5, 5),
    (20, 5, 6),
    (24, 6, 5),
    (28, 6, 6),
    (30, 6, 7),
    (32, 7, 6),
    (35, 7, 7),
    (40, 8, 8),
]


def get_higher_lower_difficulty(level: int) -> HigherLowerConfig:
    """Range grows 8% per level while the attempt budget shrinks every 7 levels."""
    try:
        max_range = min(HIGHER_LOWER_RANGE_CAP, math.floor(100 * math.pow(1.08, level - 1)))
    except OverflowError:
        max_range = HIGHER_LOWER_RANGE_CAP
    return HigherLowerConfig(
        level=level,
        min_range=1,
        max_range=max_range,
        max_attempts=max(3, 15 - level // 7),
        proximity_threshold=max(3, math.floor(max_range * 0.08)),
    )


def get_quick_count_difficulty(level: int) -> QuickCountConfig:
    return QuickCountConfig(
        level=level,
        shape_count=5 + math.floor(level * 0.7),
        display_time=max(400, 5000 - (level - 1) * 60),
        color_variety=min(16, 4 + level // 6),
        size_variation=min(1.0, level * 0.01),
        overlap_probability=min(0.8, level * 0.008),
    )


def get_sequence_sprint_difficulty(level: int) -> SequenceSprintConfig:
    return SequenceSprintConfig(
        level=level,
        sequence_length=min(10, 4 + level // 15),
        complexity=min(1000, 2 + level // 5),
        number_range=min(2000, 20 + level * 15),
        pattern_difficulty=min(20, 2 + level // 15),
    )


def get_memory_match_grid(level: int) -> GridSize:
    """Pick the largest grid whose breakpoint the level has reached."""
    _, rows, cols = MEMORY_MATCH_GRIDS[0]
    for min_level, grid_rows, grid_cols in MEMORY_MATCH_GRIDS:
        if level >= min_level:
            rows, cols = grid_rows, grid_cols
    return GridSize(rows=rows, cols=cols)


def get_memory_match_difficulty(level: int) -> MemoryMatchConfig:
    grid = get_memory_match_grid(level)
    return MemoryMatchConfig(
        level=level,
        grid_size=grid,
        pair_count=(grid.rows * grid.cols) // 2,
        reveal_time=max(800, 7000 - (level - 1) * 80),
        card_similarity=min(0.9, level * 0.009),
    )


_DIFFICULTY_CURVES = {
    HIGHER_LOWER: get_higher_lower_difficulty,
    QUICK_COUNT: get_quick_count_difficulty,
    SEQUENCE_SPRINT: get_sequence_sprint_difficulty,
    MEMORY_MATCH: get_memory_match_difficulty,
}


def get_difficulty_config(game_id: str, level: int) -> DifficultyConfig:
    """Get the difficulty config for any game. Unknown games get ``{level}`` only."""
    curve = _DIFFICULTY_CURVES.get(game_id)
    if curve is None:
        return DifficultyConfig(level=level)
    return curve(level)
