"""Fixed-timestep gate over a variable-rate frame callback.

The host calls :meth:`TickScheduler.frame` once per display refresh. A
simulation step is admitted only when at least ``interval_ms`` has elapsed
since the last admitted step; the render callback runs on every frame.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from lightcycle.config.constants import TICK_INTERVAL_MS

if TYPE_CHECKING:
    from lightcycle.simulation.engine import MatchEngine


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TickScheduler:
    """Admit at most one simulation step per ``interval_ms``."""

    def __init__(
        self,
        step: Callable[[], object],
        interval_ms: float = TICK_INTERVAL_MS,
        render: Callable[[], object] | None = None,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        self._step = step
        self._render = render
        self._clock = clock
        self.interval_ms = interval_ms
        self.last_tick_ms: float | None = None
        self.ticks_admitted = 0

    @classmethod
    def for_engine(
        cls,
        engine: MatchEngine,
        render: Callable[[], object] | None = None,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> TickScheduler:
        """Drive ``engine.tick`` at the engine config's ``tick_interval_ms``."""
        return cls(
            engine.tick, interval_ms=engine.config.tick_interval_ms, render=render, clock=clock
        )

    def reset(self) -> None:
        """Forget the last tick time; the next frame admits a step."""
        self.last_tick_ms = None

    def frame(self, now_ms: float | None = None) -> bool:
        """Process one display frame. Returns True if a step was admitted."""
        now = self._clock() if now_ms is None else now_ms
        admitted = self.last_tick_ms is None or now - self.last_tick_ms >= self.interval_ms
        if admitted:
            self.last_tick_ms = now
            self.ticks_admitted += 1
            self._step()
        if self._render is not None:
            self._render()
        return admitted
