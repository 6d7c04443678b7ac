"""Configuration layer: constants and typed config dataclasses."""

from lightcycle.config.constants import (
    FLOOD_FILL_CAP_FACTOR,
    FLOOD_FILL_DEPTH,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_MATCH_TICKS,
    TICK_INTERVAL_MS,
    TURN_QUEUE_CAPACITY,
    WALKER_COUNT,
    WALKER_MOVE_CADENCE,
    WALKER_SPAWN_CLEARANCE,
    WINNER_DRAW,
)
from lightcycle.config.types import (
    AgentSpec,
    ControllerKind,
    GameMode,
    MatchConfig,
    MatchStatus,
    default_roster,
)

__all__ = [
    "AgentSpec",
    "ControllerKind",
    "FLOOD_FILL_CAP_FACTOR",
    "FLOOD_FILL_DEPTH",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GameMode",
    "MAX_MATCH_TICKS",
    "MatchConfig",
    "MatchStatus",
    "TICK_INTERVAL_MS",
    "TURN_QUEUE_CAPACITY",
    "WALKER_COUNT",
    "WALKER_MOVE_CADENCE",
    "WALKER_SPAWN_CLEARANCE",
    "WINNER_DRAW",
    "default_roster",
]
