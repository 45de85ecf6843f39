"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from solo_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downward.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other: Direction) -> bool:
        """True when *other* is the component-wise negation of this direction."""
        return self.dx == -other.dx and self.dy == -other.dy


class Snake:
    """A snake represented as an ordered deque of ``(x, y)`` body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.body: deque[Cell] = deque(tuple(c) for c in cells)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def at(cls, cell: Cell) -> Snake:
        """Create a single-segment snake."""
        return cls([cell])

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        x, y = self.head
        return x + direction.dx, y + direction.dy

    def advance(self, new_head: Cell, grew: bool = False) -> Cell | None:
        """Prepend *new_head*, dropping the tail unless the snake *grew*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grew:
            return None
        return self.body.pop()

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body
