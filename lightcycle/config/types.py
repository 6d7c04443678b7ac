"""Configuration dataclasses and enums for matches and sessions.

All frozen dataclasses that parameterise a match live here. Validation runs
in ``__post_init__`` so an invalid configuration fails at construction
rather than mid-match.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum

from lightcycle.config.constants import (
    FLOOD_FILL_CAP_FACTOR,
    FLOOD_FILL_DEPTH,
    GRID_HEIGHT,
    GRID_WIDTH,
    P1_COLOR,
    P1_START,
    P2_COLOR,
    P2_START,
    TICK_INTERVAL_MS,
    TURN_QUEUE_CAPACITY,
    WALKER_COUNT,
    WALKER_MOVE_CADENCE,
    WALKER_SPAWN_CLEARANCE,
)
from lightcycle.domain.agents import ControllerKind
from lightcycle.domain.geometry import Coordinate, Direction

__all__ = [
    "AgentSpec",
    "ControllerKind",
    "GameMode",
    "MatchConfig",
    "MatchStatus",
    "default_roster",
]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class MatchStatus(Enum):
    """Match state machine states. PAUSED is reserved and never entered."""

    MENU = "MENU"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


class GameMode(Enum):
    """Session mode: player versus CPU or player versus player."""

    PVE = "PVE"
    PVP = "PVP"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AgentSpec:
    """Start-of-match description of one agent."""

    agent_id: int
    name: str
    start: Coordinate
    direction: Direction
    color: str = "#ffffff"
    controller: ControllerKind = ControllerKind.HUMAN

    def __post_init__(self) -> None:
        # Accept plain tuples/ints from JSON-like sources
        object.__setattr__(self, "start", Coordinate(*self.start))
        object.__setattr__(self, "direction", Direction(self.direction))
        object.__setattr__(self, "controller", ControllerKind(self.controller))

    @classmethod
    def from_dict(cls, raw: Mapping[str, object]) -> AgentSpec:
        """Build an AgentSpec from a JSON-compatible mapping.

        Raises ValueError for a missing required key or a malformed value.
        """
        if not isinstance(raw, Mapping):
            raise ValueError("each agent entry must be a mapping")
        missing = [key for key in ("agent_id", "start", "direction") if key not in raw]
        if missing:
            raise ValueError(f"agent entry missing {', '.join(missing)}")

        agent_id = raw["agent_id"]
        if isinstance(agent_id, bool) or not isinstance(agent_id, int):
            raise ValueError("agent_id must be an integer value")

        direction_raw = raw["direction"]
        try:
            direction = (
                Direction[direction_raw.upper()]
                if isinstance(direction_raw, str)
                else Direction(direction_raw)
            )
        except (KeyError, TypeError, ValueError) as exc:
            valid = ", ".join(d.name for d in Direction)
            raise ValueError(f"direction must be one of {valid}") from exc

        start = raw["start"]
        if (
            not isinstance(start, (list, tuple))
            or len(start) != 2
            or any(isinstance(v, bool) or not isinstance(v, int) for v in start)
        ):
            raise ValueError(f"start of agent {agent_id} must be an [x, y] pair")

        try:
            controller = ControllerKind(raw.get("controller", ControllerKind.HUMAN.value))
        except ValueError as exc:
            valid = ", ".join(c.value for c in ControllerKind)
            raise ValueError(f"controller must be one of {valid}") from exc

        return cls(
            agent_id=agent_id,
            name=str(raw.get("name", f"Player {agent_id}")),
            start=Coordinate(*start),
            direction=direction,
            color=str(raw.get("color", "#ffffff")),
            controller=controller,
        )


def default_roster(mode: GameMode = GameMode.PVE) -> tuple[AgentSpec, ...]:
    """Two-agent roster of the classic game; player 2 is the CPU in PVE."""
    p2_is_cpu = mode == GameMode.PVE
    return (
        AgentSpec(
            agent_id=1,
            name="Player 1",
            start=Coordinate(*P1_START),
            direction=Direction.RIGHT,
            color=P1_COLOR,
            controller=ControllerKind.HUMAN,
        ),
        AgentSpec(
            agent_id=2,
            name="CPU" if p2_is_cpu else "Player 2",
            start=Coordinate(*P2_START),
            direction=Direction.LEFT,
            color=P2_COLOR,
            controller=ControllerKind.AI if p2_is_cpu else ControllerKind.HUMAN,
        ),
    )


@dataclass(frozen=True)
class MatchConfig:
    """Arena, pacing, hazard and roster parameters for one session."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    tick_interval_ms: int = TICK_INTERVAL_MS
    walker_count: int = WALKER_COUNT
    walker_move_cadence: int = WALKER_MOVE_CADENCE
    walker_spawn_clearance: int = WALKER_SPAWN_CLEARANCE
    turn_queue_capacity: int = TURN_QUEUE_CAPACITY
    flood_fill_depth: int = FLOOD_FILL_DEPTH
    flood_fill_cap_factor: int = FLOOD_FILL_CAP_FACTOR
    agents: tuple[AgentSpec, ...] = field(default_factory=default_roster)

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1x1")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be >= 1")
        if self.walker_count < 0:
            raise ValueError("walker_count must be >= 0")
        if self.walker_move_cadence < 1:
            raise ValueError("walker_move_cadence must be >= 1")
        if self.walker_spawn_clearance < 0:
            raise ValueError("walker_spawn_clearance must be >= 0")
        if self.turn_queue_capacity < 1:
            raise ValueError("turn_queue_capacity must be >= 1")
        if self.flood_fill_depth < 1 or self.flood_fill_cap_factor < 1:
            raise ValueError("flood fill depth and cap factor must be >= 1")
        if not self.agents:
            raise ValueError("agents must contain at least one AgentSpec")
        ids = [spec.agent_id for spec in self.agents]
        if len(set(ids)) != len(ids):
            raise ValueError("agent ids must be unique")
        for spec in self.agents:
            x, y = spec.start
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise ValueError(f"start {tuple(spec.start)} of agent {spec.agent_id} is off-grid")
        if self.walker_count > 0 and not self.walker_spawn_columns():
            raise ValueError("no column satisfies walker_spawn_clearance for the given starts")

    @property
    def flood_fill_cap(self) -> int:
        """Maximum number of cells the AI flood fill visits."""
        return self.flood_fill_depth * self.flood_fill_cap_factor

    def walker_spawn_columns(self) -> list[int]:
        """Columns far enough (horizontally) from every agent start."""
        starts_x = [spec.start.x for spec in self.agents]
        return [
            x
            for x in range(self.grid_width)
            if all(abs(x - sx) > self.walker_spawn_clearance for sx in starts_x)
        ]

    @classmethod
    def for_mode(cls, mode: GameMode, **overrides: object) -> MatchConfig:
        """Default config with the classic roster for ``mode``."""
        return cls(agents=default_roster(mode), **overrides)  # type: ignore[arg-type]

    def with_mode(self, mode: GameMode) -> MatchConfig:
        """Copy of this config with the roster replaced by ``mode``'s roster."""
        return replace(self, agents=default_roster(mode))

    @classmethod
    def from_dict(cls, raw: Mapping[str, object]) -> MatchConfig:
        """Build a MatchConfig from a JSON-compatible mapping.

        Unknown keys are rejected. ``agents`` may be a list of agent mappings;
        ``mode`` (``"PVE"``/``"PVP"``) selects the classic roster instead.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known - {"mode"}
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
        if "mode" in raw and "agents" in raw:
            raise ValueError("mode and agents cannot both be given")

        kwargs: dict[str, object] = {k: v for k, v in raw.items() if k in known}
        if "agents" in raw:
            agents_raw = raw["agents"]
            if not isinstance(agents_raw, list):
                raise ValueError("agents must be a list")
            kwargs["agents"] = tuple(AgentSpec.from_dict(a) for a in agents_raw)
        elif "mode" in raw:
            try:
                mode = GameMode(str(raw["mode"]).upper())
            except ValueError as exc:
                valid = ", ".join(m.value for m in GameMode)
                raise ValueError(f"mode must be one of {valid}") from exc
            kwargs["agents"] = default_roster(mode)
        for key, value in kwargs.items():
            if key != "agents" and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"{key} must be an integer value")
        return cls(**kwargs)  # type: ignore[arg-type]
