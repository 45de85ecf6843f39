"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from solo_snake.config import GRID_HEIGHT, GRID_WIDTH, MIN_GRID_SIZE

Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes used when rasterizing a board."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Fixed-size board with bounds checking.

    Cells are ``(x, y)`` pairs with ``0 <= x < width`` and ``0 <= y < height``.
    The grid holds no occupancy of its own; :meth:`rasterize` paints a
    snake and food onto a fresh NumPy array indexed ``[y, x]``.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least {MIN_GRID_SIZE}×{MIN_GRID_SIZE}.",
            )
        self.width = width
        self.height = height

    @property
    def center(self) -> Cell:
        return self.width // 2, self.height // 2

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def rasterize(
        self, snake: Iterable[Cell], food: Cell | None = None,
    ) -> np.ndarray:
        """Return an ``(height, width)`` array of :class:`CellType` codes."""
        cells = np.full((self.height, self.width), CellType.EMPTY, dtype=np.int8)
        if food is not None and self.in_bounds(food):
            cells[food[1], food[0]] = CellType.FOOD
        for i, (x, y) in enumerate(snake):
            if self.in_bounds((x, y)):
                cells[y, x] = CellType.HEAD if i == 0 else CellType.SNAKE
        return cells

    def empty_cells(self, snake: Iterable[Cell]) -> list[Cell]:
        """Return every cell not covered by *snake*, row by row."""
        cells = self.rasterize(snake)
        ys, xs = np.where(cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
