"""Command-line interface for benchmark sweeps and watching single games."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import cappa
import msgspec
from rich.console import Console
from tqdm import tqdm

from fish_river_simulator.engine.board import LAYOUT_DEFINITIONS
from fish_river_simulator.engine.game_engine import GameEngine
from fish_river_simulator.engine.logging import configure_logging, silence_engine_logs
from fish_river_simulator.engine.rendering import render_board
from fish_river_simulator.simulation.benchmark import (
    format_report,
    iter_sweep,
    rank_results,
)
from fish_river_simulator.simulation.config import BenchmarkConfig
from fish_river_simulator.simulation.layouts import dedupe_layouts, generate_layouts

console = Console()


@dataclass
class Bench:
    """Sweep starting layouts and rank them by how balanced the game is."""

    config: Annotated[Path | None, cappa.Arg(long=True)] = None
    """Path to TOML configuration file"""

    trials: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: games simulated per layout"""

    seed: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: base seed of the sweep"""

    workers: Annotated[int | None, cappa.Arg(long=True)] = None
    """Override: number of worker processes"""

    default_only: Annotated[bool, cappa.Arg(long=True)] = False
    """Benchmark only the standard starting layout"""

    def __call__(self) -> int:
        silence_engine_logs()

        if self.config is not None and not self.config.exists():
            print(f"Error: Config file not found: {self.config}", file=sys.stderr)
            return 1

        try:
            config = (
                BenchmarkConfig.from_toml(str(self.config))
                if self.config is not None
                else BenchmarkConfig()
            )
            # CLI overrides
            config = config.with_overrides(
                trials_per_layout=self.trials,
                seed=self.seed,
                workers=self.workers,
            )
        except msgspec.ValidationError as e:
            print(f"Error: Invalid configuration: {e}", file=sys.stderr)
            return 1

        trials = config.trials_per_layout
        seed = config.seed
        workers = config.workers

        if self.default_only:
            layouts = [LAYOUT_DEFINITIONS["standard"]()]
        else:
            layouts = dedupe_layouts(generate_layouts(config.start_slots))

        print(f"Layouts: {len(layouts)}")
        print(f"Trials per layout: {trials}")
        print(f"Seed: {seed}")
        print(f"Workers: {workers}")
        print()

        results = iter_sweep(layouts, trials=trials, seed=seed, workers=workers)
        collected = list(
            tqdm(results, total=len(layouts), desc="Benchmarking", unit="layout"),
        )

        report = format_report(rank_results(collected))
        console.print(report, highlight=False, soft_wrap=True)

        return 0


@dataclass
class Watch:
    """Play the standard layout round by round."""

    seed: Annotated[int | None, cappa.Arg(long=True)] = None
    """Seed for the die; random when omitted"""

    delay: Annotated[float, cappa.Arg(long=True)] = 0.25
    """Pause between rounds in seconds"""

    def __call__(self) -> int:
        configure_logging()

        engine = GameEngine.from_layout(
            LAYOUT_DEFINITIONS["standard"](),
            random.Random(self.seed),
        )
        console.print(render_board(engine.state))

        while engine.tick() == "Undecided":
            console.print(render_board(engine.state))
            time.sleep(self.delay)

        console.print(f"Winner: {engine.outcome}")
        return 0


@dataclass
class FishRiver:
    """Fish race simulator."""

    command: cappa.Subcommands[Bench | Watch]


def main():
    """Entry point for CLI."""
    return cappa.invoke(FishRiver)


if __name__ == "__main__":
    sys.exit(main())
