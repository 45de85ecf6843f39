"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from solo_snake.grid import Cell, Grid
    from solo_snake.state import GameState

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a random free cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Random draws are capped at ``width * height + 1``; once the cap is hit
    the remaining free cells are scanned directly, so a full board is the
    only way :meth:`spawn` can fail.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def max_attempts(self) -> int:
        return self.grid.cell_count + 1

    def draw(self) -> Cell:
        """Draw one uniformly random cell, occupied or not."""
        x = int(self.rng.integers(self.grid.width))
        y = int(self.rng.integers(self.grid.height))
        return x, y

    def spawn(self, state: GameState) -> bool:
        """Put new food on a cell the snake does not cover.

        Returns ``False`` and leaves ``state.food`` untouched when the
        board is full.
        """
        occupied = set(state.snake.body)
        for _ in range(self.max_attempts):
            cell = self.draw()
            if cell not in occupied:
                state.food = cell
                return True

        empty = self.grid.empty_cells(occupied)
        if not empty:
            logger.info("Board full at length %d; no cell left for food.", len(occupied))
            return False

        logger.debug(
            "Random draws exhausted with %d free cells; picking directly.",
            len(empty),
        )
        state.food = empty[int(self.rng.integers(len(empty)))]
        return True
