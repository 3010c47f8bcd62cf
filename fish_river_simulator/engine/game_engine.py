from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from fish_river_simulator.core.state import LogContext
from fish_river_simulator.core.types import TERMINAL_OUTCOMES
from fish_river_simulator.engine import ENGINE_ID_COUNTER
from fish_river_simulator.engine.board import build_state
from fish_river_simulator.engine.dice import roll_die
from fish_river_simulator.engine.flow import check_for_winner
from fish_river_simulator.engine.movement import resolve_roll

if TYPE_CHECKING:
    import random

    from fish_river_simulator.core.state import GameState
    from fish_river_simulator.core.types import Outcome
    from fish_river_simulator.engine.board import Layout

logger = logging.getLogger("fish_river")


class TrialResult(NamedTuple):
    outcome: Outcome
    rounds: int


def _new_log_context() -> LogContext:
    return LogContext(
        engine_id=next(ENGINE_ID_COUNTER),
    )


@dataclass
class GameEngine:
    state: GameState
    rng: random.Random
    log_context: LogContext = field(default_factory=_new_log_context)

    @classmethod
    def from_layout(cls, layout: Layout, rng: random.Random) -> GameEngine:
        return cls(build_state(layout), rng)

    # ---------- Main Loop ----------

    def tick(self) -> Outcome:
        """Play one round unless the game is already decided."""
        outcome = check_for_winner(self.state)
        if outcome in TERMINAL_OUTCOMES:
            return outcome

        face = roll_die(self.rng)
        self.state.last_roll = face
        self.state.round += 1
        self.log_context.new_round(face)
        self.log_info("Rolled %s", face)

        resolve_roll(self, face)
        return "Undecided"

    def run_game(self) -> TrialResult:
        while (outcome := self.tick()) == "Undecided":
            pass
        self.log_info("Game over: %s after %d rounds", outcome, self.state.round)
        return TrialResult(outcome, self.state.round)

    @property
    def outcome(self) -> Outcome:
        return check_for_winner(self.state)

    # ---------- Logging ----------

    def log_info(self, msg: str, *args: object) -> None:
        if logger.isEnabledFor(logging.INFO):
            logger.info(msg, *args, extra={"log_context": self.log_context})
