"""Monte Carlo benchmark: many games per layout, ranked by balance."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from fish_river_simulator.engine.game_engine import GameEngine
from fish_river_simulator.simulation.layouts import layout_fingerprint
from fish_river_simulator.simulation.telemetry import OutcomeTally

if TYPE_CHECKING:
    from fish_river_simulator.core.types import FishColor
    from fish_river_simulator.engine.board import Layout
    from fish_river_simulator.engine.game_engine import TrialResult


def run_trial(layout: Layout, rng: random.Random) -> TrialResult:
    """Play one game from `layout` to its end."""
    return GameEngine.from_layout(layout, rng).run_game()


def layout_rng(seed: int, layout_index: int) -> random.Random:
    """Independent, reproducible stream per layout of a sweep."""
    return random.Random(f"{seed}/{layout_index}")


@dataclass(frozen=True, slots=True)
class BenchResult:
    fingerprint: str
    layout: dict[FishColor, int]
    trials: int

    boat_wins: int
    boat_pct: float
    boat_rounds: float

    fish_wins: int
    fish_pct: float
    fish_rounds: float

    ties: int
    tie_pct: float
    tie_rounds: float

    @classmethod
    def from_tally(cls, layout: Layout, tally: OutcomeTally) -> BenchResult:
        boat = tally.get("BoatWin")
        fish = tally.get("FishWin")
        tie = tally.get("Tie")
        return cls(
            fingerprint=layout_fingerprint(layout),
            layout=dict(layout),
            trials=tally.total,
            boat_wins=boat.count,
            boat_pct=tally.percentage("BoatWin"),
            boat_rounds=boat.average_rounds,
            fish_wins=fish.count,
            fish_pct=tally.percentage("FishWin"),
            fish_rounds=fish.average_rounds,
            ties=tie.count,
            tie_pct=tally.percentage("Tie"),
            tie_rounds=tie.average_rounds,
        )

    @property
    def balance_delta(self) -> float:
        """Distance between boat and fish win rates; 0 is perfectly balanced."""
        return abs(self.boat_pct - self.fish_pct)


def benchmark_layout(
    layout: Layout,
    layout_index: int = 0,
    *,
    trials: int,
    seed: int = 0,
) -> BenchResult:
    rng = layout_rng(seed, layout_index)
    tally = OutcomeTally()
    for _ in range(trials):
        tally.record(run_trial(layout, rng))
    return BenchResult.from_tally(layout, tally)


def iter_sweep(
    layouts: Sequence[Layout],
    *,
    trials: int,
    seed: int = 0,
    workers: int = 1,
) -> Iterator[BenchResult]:
    """Benchmark every layout, yielding results in input order."""
    job = partial(benchmark_layout, trials=trials, seed=seed)
    indices = range(len(layouts))

    if workers <= 1:
        yield from map(job, layouts, indices)
        return

    with ProcessPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(job, layouts, indices)


def rank_results(results: Iterable[BenchResult]) -> list[BenchResult]:
    """Most balanced layouts first."""
    return sorted(results, key=lambda r: r.balance_delta)


def run_sweep(
    layouts: Sequence[Layout],
    *,
    trials: int,
    seed: int = 0,
    workers: int = 1,
) -> list[BenchResult]:
    return rank_results(iter_sweep(layouts, trials=trials, seed=seed, workers=workers))


def format_result(result: BenchResult) -> str:
    return (
        f"{result.fingerprint} | "
        f"B: {result.boat_wins:5} ({result.boat_pct:6.2f}%, R: {result.boat_rounds:5.2f}) | "
        f"F: {result.fish_wins:5} ({result.fish_pct:6.2f}%, R: {result.fish_rounds:5.2f}) | "
        f"T: {result.ties:5} ({result.tie_pct:6.2f}%, R: {result.tie_rounds:5.2f})"
    )


def format_report(results: Iterable[BenchResult]) -> str:
    return "\n".join(format_result(r) for r in results)
