"""Score-driven difficulty ladder controlling the tick interval."""

from __future__ import annotations

from typing import NamedTuple


class DifficultyStep(NamedTuple):
    """A rung of the ladder: level number and tick interval."""

    level: int
    interval_ms: int


# (minimum score, step), ascending by score.
DIFFICULTY_LADDER: tuple[tuple[int, DifficultyStep], ...] = (
    (0, DifficultyStep(1, 100)),
    (50, DifficultyStep(2, 85)),
    (100, DifficultyStep(3, 70)),
    (150, DifficultyStep(4, 60)),
    (200, DifficultyStep(5, 50)),
    (250, DifficultyStep(6, 45)),
    (300, DifficultyStep(7, 40)),
    (350, DifficultyStep(8, 40)),
    (400, DifficultyStep(9, 40)),
    (500, DifficultyStep(10, 40)),
)

MAX_LEVEL = DIFFICULTY_LADDER[-1][1].level


def level_for(score: int) -> DifficultyStep:
    """Return the highest step whose score threshold is at most *score*."""
    if score < 0:
        raise ValueError("score must be non-negative.")
    for threshold, step in reversed(DIFFICULTY_LADDER):
        if score >= threshold:
            return step
    return DIFFICULTY_LADDER[0][1]
