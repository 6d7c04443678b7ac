"""CLI entrypoint for headless AI-versus-AI tournaments.

Plays seeded matches back to back without a scheduler or renderer and prints
a JSON summary of the results. Supports ``--config path/to/config.json``;
CLI arguments override config-file values, which override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections import Counter
from dataclasses import dataclass, replace
from pathlib import Path
from random import Random

import numpy as np

from lightcycle.config.constants import MAX_MATCH_TICKS, WINNER_DRAW
from lightcycle.config.types import ControllerKind, MatchConfig, MatchStatus
from lightcycle.simulation.engine import MatchEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRecord:
    """Result of one headless match."""

    seed: int
    ticks: int
    winner: int | str | None
    completed: bool


def all_ai(config: MatchConfig) -> MatchConfig:
    """Copy of ``config`` with every agent handed to the AI."""
    agents = tuple(replace(spec, controller=ControllerKind.AI) for spec in config.agents)
    return replace(config, agents=agents)


def play_match(config: MatchConfig, seed: int, max_ticks: int = MAX_MATCH_TICKS) -> MatchRecord:
    """Play one match to completion or until ``max_ticks`` is reached."""
    if max_ticks < 1:
        raise ValueError("max_ticks must be >= 1")
    engine = MatchEngine(config, rng=Random(seed))
    engine.start_match()
    while engine.status == MatchStatus.PLAYING and engine.tick_count < max_ticks:
        engine.tick()
    completed = engine.status == MatchStatus.GAME_OVER
    if not completed:
        logger.warning("match seed=%d hit the %d tick cap", seed, max_ticks)
        engine.return_to_menu()
    return MatchRecord(
        seed=seed, ticks=engine.tick_count, winner=engine.winner, completed=completed
    )


def run_tournament(
    config: MatchConfig,
    n_matches: int,
    seed_start: int = 0,
    max_ticks: int = MAX_MATCH_TICKS,
) -> list[MatchRecord]:
    """Play ``n_matches`` matches seeded ``seed_start, seed_start + 1, ...``."""
    if n_matches < 1:
        raise ValueError("n_matches must be >= 1")
    records = []
    for i in range(n_matches):
        record = play_match(config, seed=seed_start + i, max_ticks=max_ticks)
        logger.info(
            "match %d/%d seed=%d ticks=%d winner=%s",
            i + 1,
            n_matches,
            record.seed,
            record.ticks,
            record.winner,
        )
        records.append(record)
    return records


def summarize(records: list[MatchRecord], config: MatchConfig) -> dict[str, object]:
    """Aggregate win counts and match-length statistics."""
    completed = [r for r in records if r.completed]
    winners = Counter(r.winner for r in completed)
    ticks = np.array([r.ticks for r in completed], dtype=float)
    if ticks.size:
        length = {
            "mean": float(np.mean(ticks)),
            "median": float(np.median(ticks)),
            "p90": float(np.percentile(ticks, 90)),
            "max": int(ticks.max()),
        }
    else:
        length = {"mean": 0.0, "median": 0.0, "p90": 0.0, "max": 0}
    return {
        "matches": len(records),
        "grid": f"{config.grid_width}x{config.grid_height}",
        "walkers": config.walker_count,
        "wins": {str(spec.agent_id): winners.get(spec.agent_id, 0) for spec in config.agents},
        "draws": winners.get(WINNER_DRAW, 0),
        "aborted": len(records) - len(completed),
        "match_ticks": length,
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    raw = cli_val if cli_val is not None else file_cfg.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{key} must be an integer value")
    return raw


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run headless AI-vs-AI light-cycle matches")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--matches", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None)
    parser.add_argument("--grid-width", type=int, default=None)
    parser.add_argument("--grid-height", type=int, default=None)
    parser.add_argument("--walkers", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tournament execution."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")

    run_keys = {"matches", "seed", "max_ticks"}
    try:
        n_matches = _get_int(args.matches, "matches", file_cfg, 10)
        seed = _get_int(args.seed, "seed", file_cfg, 0)
        max_ticks = _get_int(args.max_ticks, "max_ticks", file_cfg, MAX_MATCH_TICKS)
        match_cfg: dict[str, object] = {k: v for k, v in file_cfg.items() if k not in run_keys}
        for cli_val, key in (
            (args.grid_width, "grid_width"),
            (args.grid_height, "grid_height"),
            (args.walkers, "walker_count"),
        ):
            if cli_val is not None:
                match_cfg[key] = cli_val
        config = all_ai(MatchConfig.from_dict(match_cfg))
        records = run_tournament(config, n_matches, seed_start=seed, max_ticks=max_ticks)
    except ValueError as exc:
        parser.error(str(exc))

    print(json.dumps(summarize(records, config), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
