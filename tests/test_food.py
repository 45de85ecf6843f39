"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from solo_snake.food import FoodSpawner
from solo_snake.grid import Grid
from solo_snake.snake import Snake
from solo_snake.state import GameState


def _all_cells(grid: Grid) -> list[tuple[int, int]]:
    return [(x, y) for y in range(grid.height) for x in range(grid.width)]


class _CountingSpawner(FoodSpawner):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.draws = 0

    def draw(self):
        self.draws += 1
        return super().draw()


class TestFoodSpawning:
    def test_spawn_on_free_cell(self):
        grid = Grid(width=10, height=10)
        state = GameState.initial(grid)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(42))
        assert spawner.spawn(state)
        assert state.food is not None
        assert grid.in_bounds(state.food)
        assert not state.snake.occupies(state.food)

    def test_spawn_deterministic(self):
        """Same seed produces the same food cell."""
        assert self._spawn_with_seed(42) == self._spawn_with_seed(42)

    def test_spawn_different_seeds(self):
        cells = {self._spawn_with_seed(seed) for seed in range(10)}
        assert len(cells) > 1

    @pytest.mark.parametrize("seed", range(5))
    def test_never_on_snake_up_to_near_full(self, seed):
        grid = Grid(width=6, height=6)
        rng = np.random.default_rng(seed)
        cells = _all_cells(grid)
        for length in range(1, grid.cell_count):
            order = rng.permutation(len(cells))
            body = [cells[i] for i in order[:length]]
            state = GameState(snake=Snake(body))
            spawner = FoodSpawner(grid, rng=rng)
            assert spawner.spawn(state)
            assert state.food not in body

    def test_single_free_cell_is_found(self):
        grid = Grid(width=4, height=4)
        cells = _all_cells(grid)
        state = GameState(snake=Snake(cells[1:]))
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        assert spawner.spawn(state)
        assert state.food == cells[0]

    def test_full_board_reports_failure(self):
        grid = Grid(width=4, height=4)
        state = GameState(snake=Snake(_all_cells(grid)), food=(9, 9))
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        assert not spawner.spawn(state)
        assert state.food == (9, 9)

    def test_draws_are_bounded(self):
        grid = Grid(width=4, height=4)
        state = GameState(snake=Snake(_all_cells(grid)))
        spawner = _CountingSpawner(grid, rng=np.random.default_rng(0))
        spawner.spawn(state)
        assert spawner.max_attempts == 17
        assert spawner.draws == 17

    def test_draw_is_uniform_over_grid(self):
        grid = Grid(width=4, height=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(3))
        seen = {spawner.draw() for _ in range(2_000)}
        assert seen == set(_all_cells(grid))

    @staticmethod
    def _spawn_with_seed(seed: int) -> tuple[int, int]:
        grid = Grid(width=10, height=10)
        state = GameState.initial(grid)
        FoodSpawner(grid, rng=np.random.default_rng(seed)).spawn(state)
        return state.food
