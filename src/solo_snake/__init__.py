"""Solo Snake — single-player snake game engine."""

from solo_snake.config import GameConfig
from solo_snake.difficulty import DifficultyStep, level_for
from solo_snake.engine import GameEngine, GameListener, TickResult
from solo_snake.grid import Grid
from solo_snake.snake import Direction, Snake
from solo_snake.state import GamePhase, GameState, Snapshot

__all__ = [
    "DifficultyStep",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameListener",
    "GamePhase",
    "GameState",
    "Grid",
    "Snake",
    "Snapshot",
    "TickResult",
    "level_for",
]
