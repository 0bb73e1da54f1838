"""Tests for snake movement, growth, collision and steering."""

from collections import deque

import pytest

from snake_game.geometry import Board
from snake_game.models import Direction, MoveResult
from snake_game.snake import Snake

BOARD = Board(10, 10)


def make_snake(cells, direction):
    snake = Snake(cells[0], direction)
    snake.segments = deque(cells)
    return snake


class TestSnakeBasics:
    """Tests for construction and accessors."""

    def test_starts_with_single_cell(self):
        snake = Snake((5, 5))
        assert snake.cells == [(5, 5)]
        assert snake.head == snake.tail == (5, 5)
        assert snake.direction is Direction.RIGHT
        assert len(snake) == 1

    def test_membership(self):
        snake = make_snake([(2, 2), (1, 2)], Direction.RIGHT)
        assert (1, 2) in snake
        assert (3, 2) not in snake


class TestMove:
    """Tests for Snake.move."""

    @pytest.mark.parametrize("direction,expected", [
        (Direction.UP, (5, 4)),
        (Direction.DOWN, (5, 6)),
        (Direction.LEFT, (4, 5)),
        (Direction.RIGHT, (6, 5)),
    ])
    def test_advances_one_cell(self, direction, expected):
        snake = Snake((5, 5), direction)
        assert snake.move(BOARD, food=(0, 0)) is MoveResult.ADVANCED
        assert snake.cells == [expected]

    def test_advance_keeps_length(self):
        snake = make_snake([(5, 5), (4, 5), (3, 5)], Direction.RIGHT)
        assert snake.move(BOARD, food=(0, 0)) is MoveResult.ADVANCED
        assert snake.cells == [(6, 5), (5, 5), (4, 5)]

    def test_grows_onto_food(self):
        """Eating keeps the tail, so length grows by one."""
        snake = Snake((5, 5), Direction.RIGHT)
        assert snake.move(BOARD, food=(6, 5)) is MoveResult.GREW
        assert snake.cells == [(6, 5), (5, 5)]

    def test_explicit_direction_overrides_buffer(self):
        snake = Snake((5, 5), Direction.RIGHT)
        snake.move(BOARD, food=None, direction=Direction.DOWN)
        assert snake.head == (5, 6)
        assert snake.direction is Direction.DOWN

    @pytest.mark.parametrize("start,direction", [
        ((0, 3), Direction.LEFT),
        ((9, 3), Direction.RIGHT),
        ((4, 0), Direction.UP),
        ((4, 9), Direction.DOWN),
    ])
    def test_leaving_the_board_collides(self, start, direction):
        snake = Snake(start, direction)
        assert snake.move(BOARD, food=None) is MoveResult.COLLIDED
        assert snake.cells == [start]

    def test_head_may_follow_tail(self):
        """The tail cell is vacated this tick, so moving into it is safe."""
        snake = make_snake([(1, 0), (0, 0), (0, 1), (1, 1)], Direction.RIGHT)
        result = snake.move(BOARD, food=None, direction=Direction.DOWN)
        assert result is MoveResult.ADVANCED
        assert snake.cells == [(1, 1), (1, 0), (0, 0), (0, 1)]

    def test_hitting_body_collides_and_leaves_body_untouched(self):
        cells = [(1, 0), (0, 0), (0, 1), (1, 1), (2, 1)]
        snake = make_snake(cells, Direction.RIGHT)
        assert snake.move(BOARD, food=None, direction=Direction.DOWN) is MoveResult.COLLIDED
        assert snake.cells == cells


class TestSteer:
    """Tests for buffered steering and the reversal guard."""

    def test_turn_takes_effect_on_next_move(self):
        snake = Snake((5, 5), Direction.RIGHT)
        assert snake.steer(Direction.UP)
        assert snake.direction is Direction.RIGHT
        snake.move(BOARD, food=None)
        assert snake.head == (5, 4)
        assert snake.direction is Direction.UP

    def test_reversal_is_rejected(self):
        snake = make_snake([(5, 5), (4, 5)], Direction.RIGHT)
        assert not snake.steer(Direction.LEFT)
        assert snake.move(BOARD, food=None) is MoveResult.ADVANCED
        assert snake.head == (6, 5)

    def test_guard_checks_direction_of_travel(self):
        """UP then LEFT within one tick: LEFT still opposes travel, so UP stays."""
        snake = Snake((5, 5), Direction.RIGHT)
        snake.steer(Direction.UP)
        assert not snake.steer(Direction.LEFT)
        assert snake.pending_direction is Direction.UP

    def test_last_accepted_input_wins(self):
        snake = Snake((5, 5), Direction.RIGHT)
        snake.steer(Direction.UP)
        snake.steer(Direction.DOWN)
        snake.move(BOARD, food=None)
        assert snake.head == (5, 6)


class TestDirection:
    """Tests for the Direction enum."""

    @pytest.mark.parametrize("direction,opposite", [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ])
    def test_opposites(self, direction, opposite):
        assert direction.opposite is opposite

    def test_step(self):
        assert Direction.UP.step((3, 3)) == (3, 2)
