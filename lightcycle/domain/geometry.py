"""Grid geometry: coordinates, facings, turns, arena bounds and movement.

Direction ordinals are cyclic: ``(d + 1) % 4`` turns right and
``(d + 3) % 4`` turns left. Turn handling throughout the engine relies on
this encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple


class Coordinate(NamedTuple):
    """Integer grid cell ``(x, y)``; y grows downwards."""

    x: int
    y: int


class Turn(Enum):
    """Relative turn request submitted by a controller."""

    LEFT = "left"
    RIGHT = "right"


class Direction(IntEnum):
    """Absolute facing of an agent."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turned_left(self) -> Direction:
        return Direction((self + 3) % 4)

    def turned_right(self) -> Direction:
        return Direction((self + 1) % 4)

    def turned(self, turn: Turn) -> Direction:
        """Return the facing after applying a relative turn."""
        if turn is Turn.LEFT:
            return self.turned_left()
        return self.turned_right()


# Unit steps per facing (screen coordinates: UP decreases y)
STEP_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


def advance(pos: Coordinate, direction: Direction) -> Coordinate:
    """Return the cell one step from ``pos`` along ``direction``.

    No bounds checking: a head that leaves the grid is reported by the
    collision check on the tick it leaves.
    """
    dx, dy = STEP_VECTORS[direction]
    return Coordinate(pos.x + dx, pos.y + dy)


@dataclass(frozen=True)
class Arena:
    """Immutable rectangular grid bounds."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("arena dimensions must be >= 1x1")

    def contains(self, pos: Coordinate | tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, pos: Coordinate) -> list[Coordinate]:
        """Return in-bounds orthogonal neighbours (right, left, down, up order)."""
        candidates = (
            Coordinate(pos.x + 1, pos.y),
            Coordinate(pos.x - 1, pos.y),
            Coordinate(pos.x, pos.y + 1),
            Coordinate(pos.x, pos.y - 1),
        )
        return [c for c in candidates if self.contains(c)]
