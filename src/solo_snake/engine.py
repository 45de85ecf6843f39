"""Frame-driven game engine composing grid, snake, food and difficulty logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from solo_snake.collision import food_collision, self_collision, wall_collision
from solo_snake.config import SCORE_PER_FOOD, GameConfig
from solo_snake.controls import Command, buffer_direction, map_command, map_key
from solo_snake.difficulty import level_for
from solo_snake.food import FoodSpawner
from solo_snake.grid import Grid
from solo_snake.snake import Direction
from solo_snake.state import GamePhase, GameState, Snapshot

logger = logging.getLogger(__name__)


class TickResult(enum.Enum):
    """Outcome of a single simulation step."""

    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"
    VICTORY = "victory"
    IDLE = "idle"


class GameListener:
    """Presentation hooks called by the engine.

    Every method is a no-op; subclasses override the ones they care about.
    The engine never reads anything back from a listener.
    """

    def on_score(self, score: int, level: int) -> None:
        pass

    def on_game_over(self, final_score: int, victory: bool) -> None:
        pass

    def on_pause(self, paused: bool) -> None:
        pass

    def on_reset(self) -> None:
        pass

    def on_start(self) -> None:
        pass

    def on_render(self, snapshot: Snapshot) -> None:
        pass


class GameEngine:
    """Single-player snake engine.

    The engine owns the grid, the food spawner and the :class:`GameState`.
    All mutation goes through :meth:`frame`, :meth:`tick` and the input
    entry points (:meth:`handle_key`, :meth:`set_direction`, :meth:`start`,
    :meth:`toggle_pause`), so there is a single writer per game.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        listener: GameListener | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.spawner = FoodSpawner(self.grid, rng=self.rng)
        self.listener = listener if listener is not None else GameListener()
        self.reset()

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    # --- lifecycle ---

    def reset(self) -> None:
        """Replace the state with a fresh, not-yet-started game."""
        self.state = GameState.initial(self.grid)
        self.spawner.spawn(self.state)
        logger.debug("New game on %dx%d grid.", self.grid.width, self.grid.height)
        self.listener.on_reset()
        self.listener.on_score(self.state.score, self.state.level)

    def start(self) -> bool:
        """Start a new game, or reset and start one that is over."""
        if self.state.over:
            self.reset()
        if self.state.running:
            return False
        self.state.running = True
        self.listener.on_start()
        return True

    def toggle_pause(self) -> bool:
        """Flip the paused flag. No-op unless a game is running."""
        if self.state.over or not self.state.running:
            return False
        self.state.paused = not self.state.paused
        self.listener.on_pause(self.state.paused)
        return True

    # --- input ---

    def set_direction(self, direction: Direction) -> bool:
        """Buffer a direction change for the next tick."""
        return buffer_direction(self.state, direction)

    def handle_key(self, token: str) -> bool:
        """Apply a key token. Unknown tokens are ignored.

        Returns whether the token changed anything.
        """
        direction = map_key(token)
        if direction is not None:
            return self.set_direction(direction)
        command = map_command(token)
        if command is Command.START:
            return self.start()
        if command is Command.PAUSE:
            return self.toggle_pause()
        return False

    # --- simulation ---

    def frame(self, timestamp_ms: float) -> bool:
        """Run one render frame; tick if a full interval has elapsed.

        Returns whether a tick fired.
        """
        state = self.state
        if state.last_tick_ms is None:
            state.last_tick_ms = timestamp_ms

        fired = False
        elapsed = timestamp_ms - state.last_tick_ms
        if elapsed >= state.interval_ms and state.phase == GamePhase.RUNNING:
            self.tick()
            state.last_tick_ms = timestamp_ms
            fired = True

        self.listener.on_render(state.snapshot(timestamp_ms))
        return fired

    def tick(self) -> TickResult:
        """Advance the snake by one cell.

        Does nothing and returns ``IDLE`` unless the game is running.
        """
        state = self.state
        if state.phase is not GamePhase.RUNNING:
            return TickResult.IDLE
        state.direction = state.pending_direction
        new_head = state.snake.next_head(state.direction)
        state.ticks += 1

        if wall_collision(self.grid, new_head) or self_collision(state.snake, new_head):
            self._end_game(victory=False)
            return TickResult.COLLIDED

        ate = food_collision(state.food, new_head)
        state.snake.advance(new_head, grew=ate)
        if not ate:
            return TickResult.MOVED

        self._collect_food()
        if state.over:
            return TickResult.VICTORY
        return TickResult.ATE

    def snapshot(self, timestamp_ms: float | None = None) -> Snapshot:
        return self.state.snapshot(timestamp_ms)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "grid": self.grid.to_dict(),
            **self.state.snapshot().to_dict(),
        }

    def _collect_food(self) -> None:
        state = self.state
        state.score += SCORE_PER_FOOD
        step = level_for(state.score)
        state.level, state.interval_ms = step.level, step.interval_ms
        self.listener.on_score(state.score, state.level)

        if not self.spawner.spawn(state):
            state.food = None
            self._end_game(victory=True)

    def _end_game(self, victory: bool) -> None:
        """Stop the game and report the final score."""
        state = self.state
        state.over = True
        state.running = False
        state.paused = False
        state.victory = victory
        if victory:
            logger.info("Board filled at tick %d with score %d.", state.ticks, state.score)
        else:
            logger.info("Snake died at tick %d with score %d.", state.ticks, state.score)
        self.listener.on_game_over(state.score, victory)
