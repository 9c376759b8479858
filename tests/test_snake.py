"""Tests for the Snake module."""

import pytest

from snake_arcade.snake import Direction, Snake


class TestDirection:
    def test_deltas(self):
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)
        assert Direction.RIGHT.delta == (1, 0)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite is not direction
        assert direction.opposite.opposite is direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_cancels_delta(self, direction):
        dx, dy = direction.delta
        ox, oy = direction.opposite.delta
        assert (dx + ox, dy + oy) == (0, 0)


class TestSnakeInit:
    def test_from_head(self):
        snake = Snake.from_head((10, 10))
        assert list(snake.body) == [(10, 10), (9, 10)]
        assert snake.current_direction is Direction.RIGHT
        assert snake.queued_direction is Direction.RIGHT

    def test_from_head_extends_opposite_to_direction(self):
        snake = Snake.from_head((5, 5), Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 2"):
            Snake([(0, 0)])

    def test_len(self):
        assert len(Snake([(5, 5), (4, 5), (3, 5)])) == 3


class TestSnakeDirection:
    def test_queue_valid_direction(self):
        snake = Snake.from_head((5, 5))
        assert snake.queue_direction(Direction.UP)
        assert snake.queued_direction is Direction.UP
        assert snake.current_direction is Direction.RIGHT

    @pytest.mark.parametrize("heading", list(Direction))
    def test_reversal_leaves_queue_unchanged(self, heading):
        snake = Snake.from_head((5, 5), heading)
        assert not snake.queue_direction(heading.opposite)
        assert snake.queued_direction is heading

    def test_reversal_checked_against_current_heading(self):
        snake = Snake.from_head((5, 5), Direction.RIGHT)
        snake.queue_direction(Direction.UP)
        # LEFT would be legal after UP, but UP has not been committed yet.
        assert not snake.queue_direction(Direction.LEFT)
        assert snake.queued_direction is Direction.UP

    def test_commit_direction(self):
        snake = Snake.from_head((5, 5))
        snake.queue_direction(Direction.DOWN)
        assert snake.commit_direction() is Direction.DOWN
        assert snake.current_direction is Direction.DOWN


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake.from_head((5, 5), Direction.RIGHT)
        assert snake.next_head() == (6, 5)

    def test_next_head_ignores_queue_until_commit(self):
        snake = Snake.from_head((5, 5), Direction.RIGHT)
        snake.queue_direction(Direction.UP)
        assert snake.next_head() == (6, 5)
        snake.commit_direction()
        assert snake.next_head() == (5, 4)

    def test_advance_without_growth(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        vacated = snake.advance((6, 5))
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5)]
        assert vacated == (3, 5)

    def test_advance_with_growth(self):
        snake = Snake([(5, 5), (4, 5)])
        vacated = snake.advance((6, 5), grow=True)
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5)]
        assert vacated is None


class TestSnakeCollision:
    def test_occupies(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.occupies(5, 5)
        assert snake.occupies(3, 5)
        assert not snake.occupies(0, 0)


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake.from_head((5, 5))
        snake.queue_direction(Direction.DOWN)
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [4, 5]]
        assert d["current_direction"] == "RIGHT"
        assert d["queued_direction"] == "DOWN"
