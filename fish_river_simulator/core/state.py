from dataclasses import dataclass, field

from fish_river_simulator.core.school import School
from fish_river_simulator.core.types import FISH_COLORS, DieFace, FishColor

RIVER_LENGTH = 13
OCEAN_SLOT = RIVER_LENGTH - 1


@dataclass(slots=True)
class LogContext:
    """Per-engine logging state."""

    engine_id: int
    total_round: int = 0
    round_log_count: int = 0
    last_roll_repr: str = "_"

    def new_round(self, last_roll: DieFace) -> None:
        self.total_round += 1
        self.round_log_count = 0
        self.last_roll_repr = last_roll

    def inc_log_count(self) -> None:
        self.round_log_count += 1


@dataclass(slots=True)
class GameState:
    river: list[School]
    in_play: School = field(default_factory=lambda: School.of(*FISH_COLORS))
    free: School = field(default_factory=School)
    caught: School = field(default_factory=School)
    boat_position: int = 0
    round: int = 0
    last_roll: DieFace | None = None

    def locate(self, color: FishColor) -> int | None:
        """River slot holding `color`, or None once it is free or caught."""
        for idx, school in enumerate(self.river):
            if school.has(color):
                return idx
        return None
