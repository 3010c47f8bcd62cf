from __future__ import annotations

from typing import TYPE_CHECKING

from fish_river_simulator.core.state import OCEAN_SLOT

if TYPE_CHECKING:
    from fish_river_simulator.core.state import GameState
    from fish_river_simulator.core.types import Outcome

WINNING_COUNT = 3
TIE_COUNT = 2


def check_for_winner(state: GameState) -> Outcome:
    """Decide the game from the pool sizes and the boat position alone."""
    free = len(state.free)
    caught = len(state.caught)

    # Boat reached the ocean: whoever has more fish wins
    if state.boat_position == OCEAN_SLOT:
        if free == caught:
            return "Tie"
        return "FishWin" if free > caught else "BoatWin"

    if free >= WINNING_COUNT:
        return "FishWin"
    if caught >= WINNING_COUNT:
        return "BoatWin"
    if free == TIE_COUNT and caught == TIE_COUNT:
        return "Tie"
    return "Undecided"
