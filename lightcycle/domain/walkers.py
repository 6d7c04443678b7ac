"""Random-walk motion and spawning for walker hazards.

Walkers are ghosts: they ignore trails and only stay inside the arena.
"""

from __future__ import annotations

from collections.abc import Sequence
from random import Random

from lightcycle.config.constants import WALKER_MOVE_CADENCE, WALKER_SPAWN_CLEARANCE
from lightcycle.domain.agents import Walker
from lightcycle.domain.geometry import Arena, Coordinate


class WalkerController:
    """Moves walkers one cell every ``cadence`` ticks."""

    def __init__(self, rng: Random | None = None, cadence: int = WALKER_MOVE_CADENCE) -> None:
        if cadence < 1:
            raise ValueError("cadence must be >= 1")
        self._rng = rng if rng is not None else Random()
        self.cadence = cadence

    def step(self, walker: Walker, arena: Arena) -> None:
        walker.move_timer += 1
        if walker.move_timer < self.cadence:
            return
        walker.move_timer = 0
        options = arena.neighbors(walker.position)
        if options:
            walker.position = self._rng.choice(options)

    def spawn(
        self,
        count: int,
        arena: Arena,
        starts: Sequence[Coordinate],
        clearance: int = WALKER_SPAWN_CLEARANCE,
    ) -> list[Walker]:
        """Create ``count`` walkers horizontally clear of every start cell.

        Columns within ``clearance`` of any start x are excluded; the row is
        unconstrained. Each walker starts with a random move timer so the pool
        does not move in lockstep.
        """
        if count < 0:
            raise ValueError("count must be >= 0")
        columns = [
            x for x in range(arena.width) if all(abs(x - s.x) > clearance for s in starts)
        ]
        if count and not columns:
            raise ValueError("no column satisfies the walker spawn clearance")
        walkers: list[Walker] = []
        for walker_id in range(count):
            pos = Coordinate(self._rng.choice(columns), self._rng.randrange(arena.height))
            walkers.append(
                Walker(
                    walker_id=walker_id,
                    position=pos,
                    move_timer=self._rng.randrange(self.cadence),
                )
            )
        return walkers
