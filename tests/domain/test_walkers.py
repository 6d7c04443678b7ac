"""Tests for lightcycle.domain.walkers module."""

from __future__ import annotations

from random import Random

import pytest

from lightcycle.domain.agents import Walker
from lightcycle.domain.geometry import Arena, Coordinate
from lightcycle.domain.walkers import WalkerController


class TestWalkerStep:
    def test_waits_for_cadence(self) -> None:
        controller = WalkerController(Random(0), cadence=2)
        walker = Walker(walker_id=0, position=Coordinate(5, 5))
        controller.step(walker, Arena(10, 10))
        assert walker.position == Coordinate(5, 5)
        assert walker.move_timer == 1

    def test_moves_one_orthogonal_cell_on_cadence(self) -> None:
        controller = WalkerController(Random(0), cadence=2)
        walker = Walker(walker_id=0, position=Coordinate(5, 5), move_timer=1)
        controller.step(walker, Arena(10, 10))
        assert walker.move_timer == 0
        dx = abs(walker.position.x - 5)
        dy = abs(walker.position.y - 5)
        assert dx + dy == 1

    def test_stays_in_bounds(self) -> None:
        arena = Arena(3, 2)
        controller = WalkerController(Random(3), cadence=1)
        walker = Walker(walker_id=0, position=Coordinate(0, 0))
        for _ in range(200):
            controller.step(walker, arena)
            assert arena.contains(walker.position)

    def test_single_cell_arena_keeps_position(self) -> None:
        controller = WalkerController(Random(0), cadence=1)
        walker = Walker(walker_id=0, position=Coordinate(0, 0))
        controller.step(walker, Arena(1, 1))
        assert walker.position == Coordinate(0, 0)
        assert walker.move_timer == 0

    def test_visits_every_neighbor_over_time(self) -> None:
        controller = WalkerController(Random(1), cadence=1)
        seen = set()
        for _ in range(100):
            walker = Walker(walker_id=0, position=Coordinate(2, 2))
            controller.step(walker, Arena(5, 5))
            seen.add(walker.position)
        assert seen == {Coordinate(1, 2), Coordinate(3, 2), Coordinate(2, 1), Coordinate(2, 3)}

    def test_rejects_zero_cadence(self) -> None:
        with pytest.raises(ValueError):
            WalkerController(Random(0), cadence=0)


class TestWalkerSpawn:
    def test_spawn_respects_clearance(self) -> None:
        controller = WalkerController(Random(0), cadence=2)
        starts = [Coordinate(10, 20), Coordinate(50, 20)]
        walkers = controller.spawn(50, Arena(60, 40), starts, clearance=5)
        assert len(walkers) == 50
        for walker in walkers:
            assert all(abs(walker.position.x - s.x) > 5 for s in starts)
            assert 0 <= walker.position.y < 40
            assert 0 <= walker.move_timer < 2

    def test_ids_are_sequential(self) -> None:
        walkers = WalkerController(Random(0)).spawn(3, Arena(30, 5), [Coordinate(0, 0)])
        assert [w.walker_id for w in walkers] == [0, 1, 2]

    def test_zero_walkers_needs_no_columns(self) -> None:
        walkers = WalkerController(Random(0)).spawn(0, Arena(5, 5), [Coordinate(2, 2)])
        assert walkers == []

    def test_no_valid_column_raises(self) -> None:
        with pytest.raises(ValueError, match="clearance"):
            WalkerController(Random(0)).spawn(1, Arena(5, 5), [Coordinate(2, 2)])
