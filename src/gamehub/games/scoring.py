"""Session scoring and Higher-or-Lower guess feedback.

A lost round always scores zero. Scores are floored to whole points.
"""

from __future__ import annotations

import math

from gamehub.games.constants import HIGHER_LOWER, MEMORY_MATCH, QUICK_COUNT, SEQUENCE_SPRINT
from gamehub.games.difficulty import get_higher_lower_difficulty, get_memory_match_difficulty
from gamehub.games.schemas import GuessFeedback, SessionOutcome, SessionResult

DEFAULT_PROXIMITY_THRESHOLD = 50

# (multiple of the threshold, label), checked in order
PROXIMITY_TIERS: list[tuple[float, str]] = [
    (0.1, "Burning hot!"),
    (0.3, "Very warm!"),
    (0.6, "Getting warmer..."),
    (1.0, "Warm"),
    (2.0, "Cool"),
    (4.0, "Cold"),
]
FREEZING = "Freezing!"


def _lost(outcome: SessionOutcome) -> SessionResult:
    return SessionResult(score=0, accuracy=0.0, attempts=outcome.attempts, time_ms=outcome.time_ms)


def score_higher_lower(outcome: SessionOutcome, max_attempts: int) -> SessionResult:
    """Fewer guesses and a faster win (under 60s) both add points."""
    if not outcome.won:
        return _lost(outcome)
    accuracy = max(0.0, (max_attempts - outcome.attempts + 1) / max_attempts * 100)
    time_bonus = max(0, 60_000 - outcome.time_ms) / 1000
    return SessionResult(
        score=math.floor(100 + time_bonus + accuracy),
        accuracy=accuracy,
        attempts=outcome.attempts,
        time_ms=outcome.time_ms,
    )


def score_quick_count(outcome: SessionOutcome, level: int) -> SessionResult:
    if not outcome.won:
        return _lost(outcome)
    time_bonus = max(0, 10_000 - outcome.time_ms) / 100
    return SessionResult(
        score=math.floor(100 + time_bonus + level * 5),
        accuracy=100.0,
        attempts=outcome.attempts,
        time_ms=outcome.time_ms,
    )


def score_sequence_sprint(outcome: SessionOutcome, level: int) -> SessionResult:
    if not outcome.won:
        return _lost(outcome)
    time_bonus = max(0, 30_000 - outcome.time_ms) / 1000
    return SessionResult(
        score=math.floor(100 + time_bonus + level * 10),
        accuracy=100.0,
        attempts=outcome.attempts,
        time_ms=outcome.time_ms,
    )


def score_memory_match(outcome: SessionOutcome, pairs: int) -> SessionResult:
    """Accuracy is pairs per move; the score never drops below 100 for a win."""
    if not outcome.won:
        return _lost(outcome)
    accuracy = min(100.0, pairs / outcome.attempts * 100)
    return SessionResult(
        score=max(100, math.floor(accuracy + (60 - outcome.time_ms / 1000))),
        accuracy=accuracy,
        attempts=outcome.attempts,
        time_ms=outcome.time_ms,
    )


def score_session(game_id: str, level: int, outcome: SessionOutcome) -> SessionResult:
    """Score a finished round of ``game_id`` played at ``level``."""
    if game_id == HIGHER_LOWER:
        return score_higher_lower(outcome, get_higher_lower_difficulty(level).max_attempts)
    if game_id == QUICK_COUNT:
        return score_quick_count(outcome, level)
    if game_id == SEQUENCE_SPRINT:
        return score_sequence_sprint(outcome, level)
    if game_id == MEMORY_MATCH:
        return score_memory_match(outcome, get_memory_match_difficulty(level).pair_count)
    msg = f"Unknown game: {game_id}"
    raise ValueError(msg)


def proximity_label(distance: int, threshold: int | None) -> str:
    if not threshold:
        threshold = DEFAULT_PROXIMITY_THRESHOLD
    for multiple, label in PROXIMITY_TIERS:
        if distance <= threshold * multiple:
            return label
    return FREEZING


def guess_feedback(guess: int, target: int, threshold: int | None) -> GuessFeedback:
    """Direction plus how close a Higher-or-Lower guess landed."""
    if guess == target:
        return GuessFeedback(direction="correct", proximity="", message="Correct! You got it!")
    direction = "higher" if guess < target else "lower"
    proximity = proximity_label(abs(guess - target), threshold)
    return GuessFeedback(
        direction=direction,
        proximity=proximity,
        message=f"{direction.capitalize()}! {proximity}",
    )
