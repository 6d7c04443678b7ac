"""Simulation layer: match engine, tick scheduling, events and snapshots."""

from lightcycle.simulation.engine import MatchEngine, TickReport
from lightcycle.simulation.events import EventBus, EventKind, MatchEvent
from lightcycle.simulation.scheduler import TickScheduler
from lightcycle.simulation.snapshot import AgentView, ArenaSnapshot, WalkerView

__all__ = [
    "AgentView",
    "ArenaSnapshot",
    "EventBus",
    "EventKind",
    "MatchEngine",
    "MatchEvent",
    "TickReport",
    "TickScheduler",
    "WalkerView",
]
