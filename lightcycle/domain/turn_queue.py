"""Per-agent bounded buffer of pending facings.

Input can arrive faster than the simulation ticks. Turns are resolved into
absolute directions at enqueue time (relative to the last pending facing) and
consumed one per tick, so at most one direction change is applied per agent
per tick and lag cannot build up beyond the capacity.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from lightcycle.config.constants import TURN_QUEUE_CAPACITY
from lightcycle.domain.geometry import Direction, Turn


class TurnQueue:
    """Mapping from agent id to a small FIFO of pending directions."""

    def __init__(self, agent_ids: Iterable[int] = (), capacity: int = TURN_QUEUE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._queues: dict[int, deque[Direction]] = {}
        for agent_id in agent_ids:
            self.register(agent_id)

    def register(self, agent_id: int) -> None:
        self._queues.setdefault(agent_id, deque())

    def _queue(self, agent_id: int) -> deque[Direction]:
        try:
            return self._queues[agent_id]
        except KeyError:
            raise ValueError(f"unknown agent id: {agent_id}") from None

    def pending(self, agent_id: int) -> tuple[Direction, ...]:
        return tuple(self._queue(agent_id))

    def enqueue(self, agent_id: int, turn: Turn, current: Direction) -> Direction | None:
        """Queue ``turn`` for ``agent_id``; return the queued facing.

        ``current`` is the agent's live facing, used when nothing is pending.
        A turn always rotates the facing by a quarter, so every accepted
        request changes it. Returns None (and queues nothing) when the queue
        is full.
        """
        queue = self._queue(agent_id)
        if len(queue) >= self.capacity:
            return None
        last = queue[-1] if queue else current
        new_direction = last.turned(turn)
        queue.append(new_direction)
        return new_direction

    def dequeue(self, agent_id: int) -> Direction | None:
        queue = self._queue(agent_id)
        return queue.popleft() if queue else None

    def clear(self) -> None:
        for queue in self._queues.values():
            queue.clear()
