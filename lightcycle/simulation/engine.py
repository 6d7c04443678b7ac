"""Match engine: owns every entity and advances the match one tick at a time.

Tick order (fixed):

1. apply one queued turn per living agent, or the AI decision for AI agents
2. step every walker
3. push each living head one cell forward, leaving the old head on the trail
4. collect deaths for all living agents without early exit: wall/trail,
   walker overlap, head-to-head
5. apply the collected deaths
6. resolve the terminal state and score

Deaths are applied only after every agent has been checked, so two agents
crashing on the same tick both die and the match is a draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random

from lightcycle.config.constants import WINNER_DRAW
from lightcycle.config.types import GameMode, MatchConfig, MatchStatus
from lightcycle.domain.agents import Agent, Walker
from lightcycle.domain.ai import AIController
from lightcycle.domain.collision import collides
from lightcycle.domain.geometry import Arena, Turn, advance
from lightcycle.domain.turn_queue import TurnQueue
from lightcycle.domain.walkers import WalkerController
from lightcycle.simulation.events import EventBus, EventKind, MatchEvent
from lightcycle.simulation.snapshot import AgentView, ArenaSnapshot, WalkerView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickReport:
    """Outcome of one admitted tick."""

    tick: int
    deaths: tuple[int, ...]
    status: MatchStatus
    winner: int | str | None


class MatchEngine:
    """Single-owner simulation of one session of matches.

    Scores live on the engine and carry over between matches; agents and
    walkers are rebuilt on every :meth:`start_match`. Pass a seeded
    ``random.Random`` to make AI tie-breaks and walker motion reproducible.
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        rng: Random | None = None,
        events: EventBus | None = None,
    ) -> None:
        self.config = config or MatchConfig()
        self.arena = Arena(self.config.grid_width, self.config.grid_height)
        self.rng = rng if rng is not None else Random()
        self.events = events or EventBus()
        self.ai = AIController(self.rng, cap=self.config.flood_fill_cap)
        self.walker_controller = WalkerController(self.rng, cadence=self.config.walker_move_cadence)
        self.status = MatchStatus.MENU
        self.winner: int | str | None = None
        self.tick_count = 0
        self.agents: list[Agent] = []
        self.walkers: list[Walker] = []
        self.scores: dict[int, int] = {}
        self.turn_queue: TurnQueue
        self._load_roster()

    def _load_roster(self) -> None:
        self.scores = {spec.agent_id: 0 for spec in self.config.agents}
        self.turn_queue = TurnQueue(self.scores, capacity=self.config.turn_queue_capacity)
        self.agents = []
        self.walkers = []

    # ------------------------------------------------------------------
    # Session / state machine
    # ------------------------------------------------------------------

    def start_match(self) -> None:
        """Begin a fresh match (MENU or GAME_OVER -> PLAYING)."""
        if self.status == MatchStatus.PLAYING:
            raise RuntimeError("a match is already in progress; abort it first")
        self.agents = [
            Agent.from_spec(spec, score=self.scores[spec.agent_id]) for spec in self.config.agents
        ]
        self.walkers = self.walker_controller.spawn(
            self.config.walker_count,
            self.arena,
            [spec.start for spec in self.config.agents],
            clearance=self.config.walker_spawn_clearance,
        )
        self.turn_queue.clear()
        self.tick_count = 0
        self.winner = None
        self.status = MatchStatus.PLAYING
        logger.info(
            "match started: %dx%d, %d agents, %d walkers",
            self.arena.width,
            self.arena.height,
            len(self.agents),
            len(self.walkers),
        )
        self.events.publish(
            MatchEvent(
                kind=EventKind.MATCH_STARTED,
                tick=0,
                agent_ids=tuple(a.agent_id for a in self.agents),
            )
        )

    def return_to_menu(self) -> None:
        """Abort or leave the current match; takes effect at a tick boundary."""
        if self.status == MatchStatus.PLAYING:
            logger.info("match aborted at tick %d", self.tick_count)
        self.turn_queue.clear()
        self.winner = None
        self.status = MatchStatus.MENU

    def change_mode(self, mode: GameMode) -> None:
        """Switch the roster to ``mode``'s classic line-up and reset scores."""
        if self.status == MatchStatus.PLAYING:
            raise RuntimeError("cannot change mode while a match is in progress")
        self.config = self.config.with_mode(mode)
        self._load_roster()
        logger.info("mode changed to %s; scores reset", mode.value)

    def reset_scores(self) -> None:
        for agent_id in self.scores:
            self.scores[agent_id] = 0
        for agent in self.agents:
            agent.score = 0

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def agent(self, agent_id: int) -> Agent:
        for agent in self.agents:
            if agent.agent_id == agent_id:
                return agent
        raise ValueError(f"unknown agent id: {agent_id}")

    def submit_turn(self, agent_id: int, turn: Turn) -> bool:
        """Queue a relative turn. Returns False when the request is dropped."""
        if agent_id not in self.scores:
            raise ValueError(f"unknown agent id: {agent_id}")
        if self.status != MatchStatus.PLAYING:
            logger.debug("turn for agent %d ignored: status %s", agent_id, self.status.value)
            return False
        agent = self.agent(agent_id)
        if agent.is_dead:
            return False
        queued = self.turn_queue.enqueue(agent_id, turn, agent.direction)
        if queued is None:
            logger.debug("turn for agent %d dropped (queue full)", agent_id)
            return False
        self.events.publish(
            MatchEvent(kind=EventKind.AGENT_TURNED, tick=self.tick_count, agent_ids=(agent_id,))
        )
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> TickReport | None:
        """Advance the match by one step; no-op (None) unless PLAYING."""
        if self.status != MatchStatus.PLAYING:
            logger.debug("tick ignored: status %s", self.status.value)
            return None

        self.tick_count += 1
        living = [agent for agent in self.agents if agent.alive]

        for agent in living:
            queued = self.turn_queue.dequeue(agent.agent_id)
            if queued is not None:
                agent.direction = queued
            elif agent.is_ai:
                decided = self.ai.decide(agent, self.agents, self.arena)
                if decided != agent.direction:
                    agent.direction = decided
                    self.events.publish(
                        MatchEvent(
                            kind=EventKind.AGENT_TURNED,
                            tick=self.tick_count,
                            agent_ids=(agent.agent_id,),
                        )
                    )

        for walker in self.walkers:
            self.walker_controller.step(walker, self.arena)

        for agent in living:
            agent.push_head(advance(agent.head, agent.direction))

        deaths = self._collect_deaths(living)
        for agent in living:
            if agent.agent_id in deaths:
                agent.is_dead = True
                logger.debug(
                    "agent %d died at %s on tick %d", agent.agent_id, agent.head, self.tick_count
                )

        dead_ids = tuple(a.agent_id for a in living if a.agent_id in deaths)
        if dead_ids:
            self.events.publish(
                MatchEvent(kind=EventKind.COLLISION, tick=self.tick_count, agent_ids=dead_ids)
            )
        self._resolve_terminal_state()
        return TickReport(
            tick=self.tick_count, deaths=dead_ids, status=self.status, winner=self.winner
        )

    def _collect_deaths(self, living: list[Agent]) -> set[int]:
        hazard_cells = {walker.position for walker in self.walkers}
        deaths: set[int] = set()
        for agent in living:
            if collides(agent.head, self.arena, self.agents):
                deaths.add(agent.agent_id)
            if agent.head in hazard_cells:
                deaths.add(agent.agent_id)
            for other in living:
                if other is not agent and other.head == agent.head:
                    deaths.add(agent.agent_id)
                    deaths.add(other.agent_id)
        return deaths

    def _resolve_terminal_state(self) -> None:
        alive = [agent for agent in self.agents if agent.alive]
        # A solo run cannot be decided by "last one standing"
        survivors_to_win = 1 if len(self.agents) > 1 else 0
        if len(alive) == 0:
            self.winner = WINNER_DRAW
        elif len(alive) == survivors_to_win:
            champion = alive[0]
            champion.score += 1
            self.scores[champion.agent_id] = champion.score
            self.winner = champion.agent_id
        else:
            return
        self.status = MatchStatus.GAME_OVER
        logger.info("match over at tick %d: winner=%s", self.tick_count, self.winner)
        self.events.publish(
            MatchEvent(
                kind=EventKind.MATCH_ENDED,
                tick=self.tick_count,
                agent_ids=tuple(a.agent_id for a in alive),
                winner=self.winner,
            )
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def alive_agents(self) -> list[Agent]:
        return [agent for agent in self.agents if agent.alive]

    def snapshot(self) -> ArenaSnapshot:
        return ArenaSnapshot(
            tick=self.tick_count,
            status=self.status,
            winner=self.winner,
            width=self.arena.width,
            height=self.arena.height,
            agents=tuple(AgentView.of(a) for a in self.agents),
            walkers=tuple(WalkerView.of(w) for w in self.walkers),
            scores=tuple(self.scores.items()),
        )
