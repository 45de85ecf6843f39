"""Tests for key mapping and direction buffering."""

import pytest

from solo_snake.controls import Command, buffer_direction, map_command, map_key
from solo_snake.grid import Grid
from solo_snake.snake import Direction
from solo_snake.state import GameState


@pytest.fixture()
def state():
    return GameState.initial(Grid())


class TestMapKey:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("ArrowDown", Direction.DOWN),
            ("ArrowLeft", Direction.LEFT),
            ("ArrowRight", Direction.RIGHT),
            ("w", Direction.UP),
            ("W", Direction.UP),
            ("a", Direction.LEFT),
            ("A", Direction.LEFT),
            ("s", Direction.DOWN),
            ("S", Direction.DOWN),
            ("d", Direction.RIGHT),
            ("D", Direction.RIGHT),
        ],
    )
    def test_recognized(self, token, expected):
        assert map_key(token) is expected

    @pytest.mark.parametrize("token", ["x", "Enter", "arrowup", "", " ", "p", "Escape", "ww"])
    def test_unrecognized(self, token):
        assert map_key(token) is None


class TestMapCommand:
    def test_space_starts(self):
        assert map_command(" ") is Command.START

    @pytest.mark.parametrize("token", ["p", "P", "Escape"])
    def test_pause_keys(self, token):
        assert map_command(token) is Command.PAUSE

    @pytest.mark.parametrize("token", ["ArrowUp", "q", "escape", "Space"])
    def test_other_keys(self, token):
        assert map_command(token) is None


class TestBufferDirection:
    @pytest.mark.parametrize("committed", list(Direction))
    def test_reversal_rejected(self, state, committed):
        state.direction = committed
        state.pending_direction = committed
        assert not buffer_direction(state, committed.opposite)
        assert state.pending_direction is committed

    @pytest.mark.parametrize("committed", list(Direction))
    def test_perpendicular_accepted(self, state, committed):
        perpendicular = [
            d for d in Direction if d not in (committed, committed.opposite)
        ]
        assert len(perpendicular) == 2
        for d in perpendicular:
            state.direction = committed
            state.pending_direction = committed
            assert buffer_direction(state, d)
            assert state.pending_direction is d

    def test_checked_against_committed_not_pending(self, state):
        # Moving right: up is buffered, then left must still be refused.
        assert buffer_direction(state, Direction.UP)
        assert not buffer_direction(state, Direction.LEFT)
        assert state.pending_direction is Direction.UP

    def test_last_valid_input_wins(self, state):
        buffer_direction(state, Direction.UP)
        buffer_direction(state, Direction.DOWN)
        assert state.pending_direction is Direction.DOWN
        assert state.direction is Direction.RIGHT
