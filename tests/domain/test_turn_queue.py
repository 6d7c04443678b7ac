"""Tests for lightcycle.domain.turn_queue module."""

from __future__ import annotations

import pytest

from lightcycle.domain.geometry import Direction, Turn
from lightcycle.domain.turn_queue import TurnQueue


class TestEnqueue:
    def test_turn_is_relative_to_live_direction(self) -> None:
        queue = TurnQueue([1])
        assert queue.enqueue(1, Turn.LEFT, Direction.UP) == Direction.LEFT
        assert queue.pending(1) == (Direction.LEFT,)

    def test_turn_is_relative_to_last_pending(self) -> None:
        queue = TurnQueue([1])
        queue.enqueue(1, Turn.RIGHT, Direction.UP)
        assert queue.enqueue(1, Turn.RIGHT, Direction.UP) == Direction.DOWN
        assert queue.pending(1) == (Direction.RIGHT, Direction.DOWN)

    def test_left_then_right_queues_a_jog(self) -> None:
        queue = TurnQueue([1])
        queue.enqueue(1, Turn.LEFT, Direction.RIGHT)
        queue.enqueue(1, Turn.RIGHT, Direction.RIGHT)
        assert queue.pending(1) == (Direction.UP, Direction.RIGHT)

    def test_every_accepted_turn_changes_facing(self) -> None:
        for current in Direction:
            for turn in Turn:
                queue = TurnQueue([1])
                queued = queue.enqueue(1, turn, current)
                assert queued is not None and queued != current

    def test_full_queue_drops_requests(self) -> None:
        queue = TurnQueue([1])
        for _ in range(3):
            assert queue.enqueue(1, Turn.RIGHT, Direction.UP) is not None
        assert queue.enqueue(1, Turn.RIGHT, Direction.UP) is None
        assert queue.enqueue(1, Turn.LEFT, Direction.UP) is None
        assert len(queue.pending(1)) == 3

    def test_custom_capacity(self) -> None:
        queue = TurnQueue([1], capacity=1)
        queue.enqueue(1, Turn.LEFT, Direction.UP)
        assert queue.enqueue(1, Turn.LEFT, Direction.UP) is None

    def test_queues_are_per_agent(self) -> None:
        queue = TurnQueue([1, 2])
        queue.enqueue(1, Turn.LEFT, Direction.UP)
        assert queue.pending(2) == ()

    def test_unknown_agent_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown agent id"):
            TurnQueue([1]).enqueue(9, Turn.LEFT, Direction.UP)


class TestDequeue:
    def test_fifo_order(self) -> None:
        queue = TurnQueue([1])
        queue.enqueue(1, Turn.RIGHT, Direction.UP)
        queue.enqueue(1, Turn.RIGHT, Direction.UP)
        assert queue.dequeue(1) == Direction.RIGHT
        assert queue.dequeue(1) == Direction.DOWN
        assert queue.dequeue(1) is None

    def test_dequeue_frees_capacity(self) -> None:
        queue = TurnQueue([1])
        for _ in range(3):
            queue.enqueue(1, Turn.LEFT, Direction.UP)
        queue.dequeue(1)
        assert queue.enqueue(1, Turn.LEFT, Direction.UP) is not None

    def test_clear_empties_every_queue(self) -> None:
        queue = TurnQueue([1, 2])
        queue.enqueue(1, Turn.LEFT, Direction.UP)
        queue.enqueue(2, Turn.LEFT, Direction.UP)
        queue.clear()
        assert queue.pending(1) == () and queue.pending(2) == ()
