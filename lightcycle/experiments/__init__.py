"""Headless experiment runners built on the match engine."""

from lightcycle.experiments.tournament import (
    MatchRecord,
    all_ai,
    play_match,
    run_tournament,
    summarize,
)

__all__ = [
    "MatchRecord",
    "all_ai",
    "play_match",
    "run_tournament",
    "summarize",
]
