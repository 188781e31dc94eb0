"""Game identifiers and level bounds."""

from __future__ import annotations

HIGHER_LOWER = "higher-lower"
QUICK_COUNT = "quick-count"
SEQUENCE_SPRINT = "sequence-sprint"
MEMORY_MATCH = "memory-match"

GAME_IDS: tuple[str, ...] = (HIGHER_LOWER, QUICK_COUNT, SEQUENCE_SPRINT, MEMORY_MATCH)

MIN_LEVEL = 1
MAX_LEVEL = 100
