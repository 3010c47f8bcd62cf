from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fish_river_simulator.core.types import Outcome
    from fish_river_simulator.engine.game_engine import TrialResult


@dataclass(slots=True)
class OutcomeStats:
    count: int = 0
    round_sum: int = 0

    @property
    def average_rounds(self) -> float:
        # An outcome that never happened averages to 0
        return self.round_sum / max(self.count, 1)


@dataclass(slots=True)
class OutcomeTally:
    """Accumulates finished trials per outcome."""

    stats: dict[Outcome, OutcomeStats] = field(default_factory=dict)

    def record(self, result: TrialResult) -> None:
        stats = self.stats.setdefault(result.outcome, OutcomeStats())
        stats.count += 1
        stats.round_sum += result.rounds

    def get(self, outcome: Outcome) -> OutcomeStats:
        return self.stats.get(outcome, OutcomeStats())

    @property
    def total(self) -> int:
        return sum(s.count for s in self.stats.values())

    def percentage(self, outcome: Outcome) -> float:
        return self.get(outcome).count / self.total * 100

