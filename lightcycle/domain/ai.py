"""Greedy open-space AI for light cycles.

For each of straight/left/right the controller measures how much free space
is reachable from the resulting cell with a capped breadth-first flood fill
and picks the roomiest non-lethal move. Candidate order is shuffled first, so
ties are broken at random rather than always favouring one side.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from random import Random

import numpy as np

from lightcycle.config.constants import FLOOD_FILL_CAP_FACTOR, FLOOD_FILL_DEPTH
from lightcycle.domain.agents import Agent
from lightcycle.domain.geometry import Arena, Coordinate, Direction, advance


def obstacle_mask(arena: Arena, agents: Sequence[Agent]) -> np.ndarray:
    """Boolean ``(height, width)`` grid marking every trail cell and head.

    Off-grid heads (agents that just crashed into a wall) are skipped.
    """
    mask = np.zeros((arena.height, arena.width), dtype=bool)
    for agent in agents:
        for cell in agent.trail:
            mask[cell.y, cell.x] = True
        if arena.contains(agent.head):
            mask[agent.head.y, agent.head.x] = True
    return mask


def flood_fill_count(start: Coordinate, arena: Arena, blocked: np.ndarray, cap: int) -> int:
    """Count free cells reachable from ``start``, visiting at most ``cap``.

    ``start`` itself counts as the first visited cell. ``blocked`` is not
    modified.
    """
    visited = np.zeros_like(blocked)
    visited[start.y, start.x] = True
    queue = deque([start])
    count = 0
    while queue and count < cap:
        current = queue.popleft()
        count += 1
        for nxt in arena.neighbors(current):
            if blocked[nxt.y, nxt.x] or visited[nxt.y, nxt.x]:
                continue
            visited[nxt.y, nxt.x] = True
            queue.append(nxt)
    return count


class AIController:
    """Flood-fill move selector with randomized tie-breaking."""

    def __init__(
        self,
        rng: Random | None = None,
        cap: int = FLOOD_FILL_DEPTH * FLOOD_FILL_CAP_FACTOR,
    ) -> None:
        if cap < 1:
            raise ValueError("cap must be >= 1")
        self._rng = rng if rng is not None else Random()
        self.cap = cap

    def candidate_moves(self, agent: Agent) -> list[Direction]:
        """Straight, left and right relative to the current facing."""
        return [agent.direction, agent.direction.turned_left(), agent.direction.turned_right()]

    def decide(self, agent: Agent, agents: Sequence[Agent], arena: Arena) -> Direction:
        """Return the facing to apply this tick.

        Falls back to straight ahead when every candidate is lethal.
        """
        blocked = obstacle_mask(arena, agents)
        candidates = self.candidate_moves(agent)
        self._rng.shuffle(candidates)

        best = agent.direction
        max_space = -1
        for direction in candidates:
            nxt = advance(agent.head, direction)
            if not arena.contains(nxt) or blocked[nxt.y, nxt.x]:
                continue
            space = flood_fill_count(nxt, arena, blocked, self.cap)
            if space > max_space:
                max_space = space
                best = direction
        return best
