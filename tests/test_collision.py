"""Tests for the collision predicates."""

import pytest

from solo_snake.collision import food_collision, self_collision, wall_collision
from solo_snake.grid import Grid
from solo_snake.snake import Direction, Snake


class TestWallCollision:
    @pytest.mark.parametrize("cell", [(0, 0), (39, 0), (0, 29), (39, 29), (20, 15)])
    def test_inside(self, cell):
        assert not wall_collision(Grid(), cell)

    @pytest.mark.parametrize("cell", [(-1, 10), (40, 10), (10, -1), (10, 30)])
    def test_outside(self, cell):
        assert wall_collision(Grid(), cell)


class TestSelfCollision:
    def test_single_segment_never_collides(self):
        snake = Snake.at((5, 5))
        for direction in Direction:
            assert not self_collision(snake, snake.next_head(direction))
        assert not self_collision(snake, (5, 5))

    def test_square_loop(self):
        snake = Snake([(10, 10), (11, 10), (11, 11), (10, 11)])
        assert self_collision(snake, (10, 11))  # tail
        assert self_collision(snake, (11, 10))  # neck
        assert not self_collision(snake, (9, 10))
        assert not self_collision(snake, (10, 9))

    def test_tail_cell_counts_as_occupied(self):
        snake = Snake([(1, 0), (1, 1), (0, 1), (0, 0)])
        assert self_collision(snake, snake.next_head(Direction.LEFT))

    def test_interior_segment(self):
        # U shape: head at (0, 0), body runs down, across, and up to (2, 0).
        snake = Snake([(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)])
        assert not self_collision(snake, snake.next_head(Direction.RIGHT))
        snake = Snake([(1, 1), (1, 2), (2, 2), (2, 1), (2, 0)])
        assert self_collision(snake, snake.next_head(Direction.RIGHT))

    @pytest.mark.parametrize("direction", list(Direction))
    def test_matches_body_membership(self, direction):
        snake = Snake([(5, 5), (5, 6), (4, 6), (4, 5), (4, 4), (5, 4), (6, 4)])
        cell = snake.next_head(direction)
        assert self_collision(snake, cell) == (cell in list(snake.body)[1:])


class TestFoodCollision:
    def test_hit(self):
        assert food_collision((3, 4), (3, 4))

    def test_miss(self):
        assert not food_collision((3, 4), (4, 3))

    def test_no_food(self):
        assert not food_collision(None, (0, 0))
