"""Collision predicates evaluated against a candidate head cell."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solo_snake.grid import Cell, Grid
    from solo_snake.snake import Snake


def wall_collision(grid: Grid, cell: Cell) -> bool:
    """True when *cell* lies outside the grid."""
    return not grid.in_bounds(cell)


def self_collision(snake: Snake, cell: Cell) -> bool:
    """True when *cell* hits the body behind the current head.

    Checked before the new head is prepended, so the tail cell counts as
    occupied even though it would be vacated this tick.
    """
    return any(seg == cell for i, seg in enumerate(snake.body) if i > 0)


def food_collision(food: Cell | None, cell: Cell) -> bool:
    return food is not None and cell == food
