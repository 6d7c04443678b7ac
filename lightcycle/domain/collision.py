"""Wall and trail collision checks for a candidate head position.

Walker overlap and head-to-head overlap need the whole match context and are
resolved by the match engine, not here.
"""

from __future__ import annotations

from collections.abc import Iterable

from lightcycle.domain.agents import Agent
from lightcycle.domain.geometry import Arena, Coordinate


def hits_wall(candidate: Coordinate, arena: Arena) -> bool:
    return not arena.contains(candidate)


def hits_trail(candidate: Coordinate, agents: Iterable[Agent]) -> bool:
    """True if ``candidate`` lies on any agent's trail, its own included.

    Uses each agent's trail set, so the cost per agent is O(1) regardless of
    trail length.
    """
    return any(candidate in agent.trail_cells for agent in agents)


def collides(candidate: Coordinate, arena: Arena, agents: Iterable[Agent]) -> bool:
    """Return True if a head at ``candidate`` crashes into a wall or a trail."""
    if hits_wall(candidate, arena):
        return True
    return hits_trail(candidate, agents)
