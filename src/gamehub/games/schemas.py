"""Pydantic schemas for difficulty configs, sequence patterns and session scoring."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# --- Difficulty ---


class DifficultyConfig(BaseModel):
    """Parameter bundle for one level. Unknown games get only ``level``."""

    model_config = ConfigDict(frozen=True)

    level: int


class HigherLowerConfig(DifficultyConfig):
    min_range: int
    max_range: int
    max_attempts: int
    proximity_threshold: int


class QuickCountConfig(DifficultyConfig):
    shape_count: int
    display_time: int  # ms
    color_variety: int
    size_variation: float
    overlap_probability: float


class SequenceSprintConfig(DifficultyConfig):
    sequence_length: int
    complexity: int
    number_range: int
    pattern_difficulty: int


class GridSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int
    cols: int


class MemoryMatchConfig(DifficultyConfig):
    grid_size: GridSize
    pair_count: int
    reveal_time: int  # ms
    card_similarity: float


# --- Sequence patterns ---


class Pattern(BaseModel):
    """A sequence puzzle and its continuation."""

    model_config = ConfigDict(frozen=True)

    numbers: tuple[int, ...]
    answer: int
    description: str
    type: str


class PatternResponse(Pattern):
    level: int
    hint: str


class HintResponse(BaseModel):
    type: str
    hint: str


# --- Sessions ---


class SessionOutcome(BaseModel):
    """What the client reports when a round ends."""

    won: bool = True
    time_ms: int = Field(..., ge=0)
    attempts: int = Field(1, ge=1)  # guesses (higher-lower) or moves (memory-match)


class SessionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    accuracy: float
    attempts: int
    time_ms: int


class GuessRequest(BaseModel):
    level: int = Field(..., ge=1)
    guess: int
    target: int


class GuessFeedback(BaseModel):
    direction: str  # correct | higher | lower
    proximity: str
    message: str
