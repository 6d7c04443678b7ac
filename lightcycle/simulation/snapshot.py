"""Immutable per-tick views of the match for renderers and HUDs.

The engine's entities are mutable and owned by the engine; presentation code
reads these frozen copies instead of holding references across ticks.
"""

from __future__ import annotations

from dataclasses import dataclass

from lightcycle.config.types import MatchStatus
from lightcycle.domain.agents import Agent, Walker
from lightcycle.domain.geometry import Coordinate, Direction


@dataclass(frozen=True)
class AgentView:
    agent_id: int
    name: str
    color: str
    head: Coordinate
    direction: Direction
    trail: tuple[Coordinate, ...]
    is_dead: bool
    score: int

    @classmethod
    def of(cls, agent: Agent) -> AgentView:
        return cls(
            agent_id=agent.agent_id,
            name=agent.name,
            color=agent.color,
            head=agent.head,
            direction=agent.direction,
            trail=tuple(agent.trail),
            is_dead=agent.is_dead,
            score=agent.score,
        )


@dataclass(frozen=True)
class WalkerView:
    walker_id: int
    position: Coordinate

    @classmethod
    def of(cls, walker: Walker) -> WalkerView:
        return cls(walker_id=walker.walker_id, position=walker.position)


@dataclass(frozen=True)
class ArenaSnapshot:
    """Full match state at one tick boundary."""

    tick: int
    status: MatchStatus
    winner: int | str | None
    width: int
    height: int
    agents: tuple[AgentView, ...]
    walkers: tuple[WalkerView, ...]
    scores: tuple[tuple[int, int], ...]  # (agent_id, score) in roster order
