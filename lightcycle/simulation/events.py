"""Gameplay events and a synchronous publish/subscribe bus.

The engine performs no I/O. Sound and animation layers subscribe to the bus
and react to turns, crashes and match boundaries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """AGENT_TURNED fires for accepted input turns and for AI course changes."""

    MATCH_STARTED = "match_started"
    AGENT_TURNED = "agent_turned"
    COLLISION = "collision"
    MATCH_ENDED = "match_ended"


@dataclass(frozen=True)
class MatchEvent:
    """One gameplay event.

    ``agent_ids`` lists the agents involved (the turning agent, or every
    agent that died in a collision tick). ``winner`` is set on MATCH_ENDED
    only.
    """

    kind: EventKind
    tick: int
    agent_ids: tuple[int, ...] = ()
    winner: int | str | None = None


Subscriber = Callable[[MatchEvent], None]


class EventBus:
    """Ordered fan-out of events to subscribers."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; return a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, event: MatchEvent) -> None:
        logger.debug("event %s tick=%d agents=%s", event.kind.value, event.tick, event.agent_ids)
        for callback in list(self._subscribers):
            callback(event)
