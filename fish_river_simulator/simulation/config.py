"""Configuration schema for benchmark sweeps using msgspec."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import msgspec

from fish_river_simulator.engine.board import FIRST_START_SLOT, LAST_START_SLOT

PositiveInt = Annotated[int, msgspec.Meta(ge=1)]
StartSlot = Annotated[int, msgspec.Meta(ge=FIRST_START_SLOT, le=LAST_START_SLOT)]


class BenchmarkConfig(msgspec.Struct, forbid_unknown_fields=True):
    """
    TOML-backed configuration for a layout sweep.

    Only run parameters live here; the game rules themselves are fixed.
    """

    # Games simulated per distinct layout
    trials_per_layout: PositiveInt = 100_000

    # Base seed; every layout derives its own stream from it
    seed: int = 0

    # Worker processes; 1 runs everything in-process
    workers: PositiveInt = 1

    # Range of starting slots each fish is swept over
    min_slot: StartSlot = FIRST_START_SLOT
    max_slot: StartSlot = LAST_START_SLOT

    def __post_init__(self) -> None:
        if self.min_slot > self.max_slot:
            raise ValueError(
                f"min_slot ({self.min_slot}) must not exceed max_slot ({self.max_slot})",
            )

    @classmethod
    def from_toml(cls, path: str) -> BenchmarkConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def with_overrides(self, **overrides: int | None) -> BenchmarkConfig:
        """Apply command-line overrides, validated like the TOML fields."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        merged = msgspec.structs.replace(self, **changes)
        return msgspec.convert(msgspec.to_builtins(merged), type=type(self))

    @property
    def start_slots(self) -> range:
        return range(self.min_slot, self.max_slot + 1)
