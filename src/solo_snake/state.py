"""Mutable game-state aggregate and its read-only snapshot."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from solo_snake.config import INITIAL_INTERVAL_MS
from solo_snake.grid import Cell, Grid
from solo_snake.snake import Direction, Snake


class GamePhase(str, enum.Enum):
    """Lifecycle phases derived from the state flags."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


@dataclass
class GameState:
    """Everything that changes during one game.

    Owned by :class:`~solo_snake.engine.GameEngine`; helper functions
    receive it by reference and never keep a copy between ticks.
    """

    snake: Snake
    food: Cell | None = None
    direction: Direction = Direction.RIGHT
    pending_direction: Direction = Direction.RIGHT
    score: int = 0
    level: int = 1
    interval_ms: int = INITIAL_INTERVAL_MS
    running: bool = False
    over: bool = False
    paused: bool = False
    victory: bool = False
    last_tick_ms: float | None = None
    ticks: int = 0

    @classmethod
    def initial(cls, grid: Grid) -> GameState:
        """Fresh state: one segment at the grid center, heading right."""
        return cls(snake=Snake.at(grid.center))

    @property
    def phase(self) -> GamePhase:
        if self.over:
            return GamePhase.OVER
        if not self.running:
            return GamePhase.NOT_STARTED
        if self.paused:
            return GamePhase.PAUSED
        return GamePhase.RUNNING

    def snapshot(self, timestamp_ms: float | None = None) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            food=self.food,
            direction=self.direction,
            score=self.score,
            level=self.level,
            interval_ms=self.interval_ms,
            phase=self.phase,
            victory=self.victory,
            ticks=self.ticks,
            timestamp_ms=timestamp_ms,
        )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a :class:`GameState` handed to render sinks."""

    snake: tuple[Cell, ...]
    food: Cell | None
    direction: Direction
    score: int
    level: int
    interval_ms: int
    phase: GamePhase
    victory: bool = False
    ticks: int = 0
    timestamp_ms: float | None = None

    def to_dict(self) -> dict:
        """Serialize to JSON-friendly primitives."""
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "direction": list(self.direction.value),
            "score": self.score,
            "level": self.level,
            "interval_ms": self.interval_ms,
            "phase": self.phase.value,
            "victory": self.victory,
            "ticks": self.ticks,
            "timestamp_ms": self.timestamp_ms,
        }
