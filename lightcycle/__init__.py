"""Grid light-cycle arena: simulation and decision engine."""

from lightcycle.config import GameMode, MatchConfig, MatchStatus
from lightcycle.domain import Coordinate, Direction, Turn
from lightcycle.simulation import EventKind, MatchEngine, TickScheduler

__all__ = [
    "Coordinate",
    "Direction",
    "EventKind",
    "GameMode",
    "MatchConfig",
    "MatchEngine",
    "MatchStatus",
    "TickScheduler",
    "Turn",
]
