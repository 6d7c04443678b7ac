"""Centralized arena and match constants.

All tunable numbers shared across the engine are defined here. They are the
defaults of :class:`lightcycle.config.types.MatchConfig`; consuming modules
should read them from a config instance rather than importing them directly.
"""

from __future__ import annotations

from typing import Final

GRID_WIDTH = 60
"""Default grid width in cells."""

GRID_HEIGHT = 40
"""Default grid height in cells."""

TICK_INTERVAL_MS = 80
"""Minimum wall-clock interval between two simulation ticks."""

WALKER_COUNT = 5
"""Number of roaming hazards spawned per match."""

WALKER_MOVE_CADENCE = 2
"""Walkers move once every this many simulation ticks."""

WALKER_SPAWN_CLEARANCE = 5
"""Walkers spawn strictly more than this many columns from every start x."""

TURN_QUEUE_CAPACITY = 3
"""Maximum number of pending turns buffered per agent."""

FLOOD_FILL_DEPTH = 20
"""AI look-ahead depth; the flood fill visits at most depth * factor cells."""

FLOOD_FILL_CAP_FACTOR = 5
"""Multiplier turning FLOOD_FILL_DEPTH into the visited-cell cap."""

P1_START: Final[tuple[int, int]] = (10, 20)
"""Player one start cell on the default grid."""

P2_START: Final[tuple[int, int]] = (50, 20)
"""Player two start cell on the default grid."""

P1_COLOR = "#00f3ff"
"""Player one trail color (cosmetic)."""

P2_COLOR = "#ff003c"
"""Player two trail color (cosmetic)."""

WINNER_DRAW: Final = "DRAW"
"""Winner marker for a match where no agent survived."""

MAX_MATCH_TICKS = 10_000
"""Safety cap on ticks per headless match."""
