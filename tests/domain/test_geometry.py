"""Tests for lightcycle.domain.geometry module."""

from __future__ import annotations

import pytest

from lightcycle.domain.geometry import Arena, Coordinate, Direction, Turn, advance


class TestDirection:
    def test_ordinals_are_cyclic_clockwise(self) -> None:
        assert [d.value for d in Direction] == [0, 1, 2, 3]
        assert Direction.UP.turned_right() == Direction.RIGHT
        assert Direction.LEFT.turned_right() == Direction.UP

    def test_left_turn_wraps(self) -> None:
        assert Direction.UP.turned_left() == Direction.LEFT
        assert Direction.RIGHT.turned_left() == Direction.UP

    @pytest.mark.parametrize("direction", list(Direction))
    def test_left_then_right_is_identity(self, direction: Direction) -> None:
        assert direction.turned(Turn.LEFT).turned(Turn.RIGHT) == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_four_right_turns_return_home(self, direction: Direction) -> None:
        d = direction
        for _ in range(4):
            d = d.turned(Turn.RIGHT)
        assert d == direction


class TestAdvance:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, Coordinate(5, 4)),
            (Direction.DOWN, Coordinate(5, 6)),
            (Direction.LEFT, Coordinate(4, 5)),
            (Direction.RIGHT, Coordinate(6, 5)),
        ],
    )
    def test_single_step(self, direction: Direction, expected: Coordinate) -> None:
        assert advance(Coordinate(5, 5), direction) == expected

    def test_no_bounds_checking(self) -> None:
        assert advance(Coordinate(0, 0), Direction.UP) == Coordinate(0, -1)


class TestArena:
    def test_contains_edges(self) -> None:
        arena = Arena(10, 8)
        assert arena.contains(Coordinate(0, 0))
        assert arena.contains(Coordinate(9, 7))
        assert not arena.contains(Coordinate(10, 0))
        assert not arena.contains(Coordinate(0, 8))
        assert not arena.contains(Coordinate(-1, 3))

    def test_contains_accepts_plain_tuples(self) -> None:
        assert Arena(3, 3).contains((1, 2))

    def test_corner_has_two_neighbors(self) -> None:
        assert sorted(Arena(5, 5).neighbors(Coordinate(0, 0))) == [
            Coordinate(0, 1),
            Coordinate(1, 0),
        ]

    def test_single_cell_has_no_neighbors(self) -> None:
        assert Arena(1, 1).neighbors(Coordinate(0, 0)) == []

    def test_rejects_empty_arena(self) -> None:
        with pytest.raises(ValueError):
            Arena(0, 5)
