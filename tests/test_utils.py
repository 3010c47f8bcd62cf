from unittest.mock import MagicMock

from fish_river_simulator.core.school import School
from fish_river_simulator.core.state import RIVER_LENGTH, GameState, LogContext
from fish_river_simulator.core.types import DIE_FACES, DieFace, FishColor
from fish_river_simulator.engine import ENGINE_ID_COUNTER
from fish_river_simulator.engine.game_engine import GameEngine


def build_custom_state(
    placements: dict[FishColor, int],
    *,
    boat_position: int = 0,
    free: tuple[FishColor, ...] = (),
    caught: tuple[FishColor, ...] = (),
) -> GameState:
    """Any mid-game position; fish not placed must be passed as free or caught."""
    river = [School() for _ in range(RIVER_LENGTH)]
    for color, slot in placements.items():
        river[slot].add(color)
    return GameState(
        river=river,
        in_play=School.of(*placements),
        free=School.of(*free),
        caught=School.of(*caught),
        boat_position=boat_position,
    )


class GameScenario:
    """
    A reusable harness that wraps the GameEngine for testing.
    """

    def __init__(
        self,
        placements: dict[FishColor, int],
        dice_rolls: list[DieFace] | None = None,
        *,
        boat_position: int = 0,
        free: tuple[FishColor, ...] = (),
        caught: tuple[FishColor, ...] = (),
    ):
        self.state: GameState = build_custom_state(
            placements,
            boat_position=boat_position,
            free=free,
            caught=caught,
        )

        # Mock the RNG
        self.mock_rng: MagicMock = MagicMock()

        engine_id = next(ENGINE_ID_COUNTER)
        self.engine: GameEngine = GameEngine(
            self.state,
            self.mock_rng,
            log_context=LogContext(
                engine_id=engine_id,
            ),
        )

        if dice_rolls:
            self.set_dice_rolls(dice_rolls)

    def set_dice_rolls(self, rolls: list[DieFace]):
        """Script the die faces (e.g., ["Blue", "Red"])."""
        self.mock_rng.randint.side_effect = [DIE_FACES.index(r) for r in rolls]

    def tick(self):
        return self.engine.tick()

    def slot_of(self, color: FishColor) -> int | None:
        return self.state.locate(color)


def state_hash(state: GameState) -> int:
    """Hash of everything a move can change."""
    return hash(
        (
            tuple(tuple(school) for school in state.river),
            tuple(state.in_play),
            tuple(state.free),
            tuple(state.caught),
            state.boat_position,
            state.round,
        ),
    )
