"""Domain layer: grid geometry, entities, collision, AI, walkers, input queue."""

from lightcycle.domain.agents import Agent, ControllerKind, Walker
from lightcycle.domain.ai import AIController, flood_fill_count, obstacle_mask
from lightcycle.domain.collision import collides
from lightcycle.domain.geometry import Arena, Coordinate, Direction, Turn, advance
from lightcycle.domain.turn_queue import TurnQueue
from lightcycle.domain.walkers import WalkerController

__all__ = [
    "AIController",
    "Agent",
    "Arena",
    "ControllerKind",
    "Coordinate",
    "Direction",
    "Turn",
    "TurnQueue",
    "Walker",
    "WalkerController",
    "advance",
    "collides",
    "flood_fill_count",
    "obstacle_mask",
]
