"""Mutable match entities: light-cycle agents and roaming walkers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from lightcycle.domain.geometry import Coordinate, Direction

if TYPE_CHECKING:
    from lightcycle.config.types import AgentSpec


class ControllerKind(Enum):
    """Who steers an agent."""

    HUMAN = "human"
    AI = "ai"


@dataclass
class Agent:
    """A light cycle: head, ever-growing trail and facing.

    ``trail_cells`` mirrors ``trail`` as a set so trail membership is O(1);
    always extend the trail through :meth:`push_head`.
    """

    agent_id: int
    name: str
    head: Coordinate
    direction: Direction
    color: str = "#ffffff"
    controller: ControllerKind = ControllerKind.HUMAN
    score: int = 0
    is_dead: bool = False
    trail: list[Coordinate] = field(default_factory=list)
    trail_cells: set[Coordinate] = field(default_factory=set, repr=False)

    @classmethod
    def from_spec(cls, spec: AgentSpec, score: int = 0) -> Agent:
        """Fresh agent at its start cell with an empty trail."""
        return cls(
            agent_id=spec.agent_id,
            name=spec.name,
            head=spec.start,
            direction=spec.direction,
            color=spec.color,
            controller=spec.controller,
            score=score,
        )

    @property
    def is_ai(self) -> bool:
        return self.controller is ControllerKind.AI

    @property
    def alive(self) -> bool:
        return not self.is_dead

    def push_head(self, new_head: Coordinate) -> None:
        """Append the current head to the trail and move to ``new_head``."""
        self.trail.append(self.head)
        self.trail_cells.add(self.head)
        self.head = new_head


@dataclass
class Walker:
    """Roaming hazard. Never dies; lethal to agents sharing its cell."""

    walker_id: int
    position: Coordinate
    move_timer: int = 0
