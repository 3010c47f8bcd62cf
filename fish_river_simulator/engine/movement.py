from __future__ import annotations

from typing import TYPE_CHECKING

from fish_river_simulator.core.state import OCEAN_SLOT
from fish_river_simulator.core.types import FISH_COLORS

if TYPE_CHECKING:
    from fish_river_simulator.core.types import DieFace, FishColor
    from fish_river_simulator.engine.game_engine import GameEngine


def resolve_roll(engine: GameEngine, face: DieFace):
    """Apply exactly one move for a rolled face."""
    state = engine.state

    # Neutral faces never name a fish, they always move the boat
    if face not in FISH_COLORS:
        move_boat(engine)
        return

    # 1. Fish is still swimming: it moves itself
    if state.in_play.has(face):
        move_fish(engine, face)
        return

    # 2. Fish already escaped: the rearmost fish swims instead
    if state.free.has(face):
        substitute = rearmost_fish(engine)
        if substitute is not None:
            engine.log_info("%s is Free, %s swims instead", face, substitute)
            move_fish(engine, substitute)
            return

    # 3. Fish already caught
    move_boat(engine)


def rearmost_fish(engine: GameEngine) -> FishColor | None:
    """First fish by slot order, then by color priority within the slot."""
    for school in engine.state.river:
        if (color := school.first()) is not None:
            return color
    return None


def move_fish(engine: GameEngine, color: FishColor):
    state = engine.state
    start = state.boat_position + 1

    # Only the stretch ahead of the boat is searched
    for idx in range(start, OCEAN_SLOT):
        if state.river[idx].has(color):
            state.river[idx].remove(color)
            state.river[idx + 1].add(color)
            engine.log_info("Move: %s %d->%d", color, idx, idx + 1)
            break

    # Reaching the ocean sets the fish free
    if (escaped := state.river[OCEAN_SLOT].extract_first()) is not None:
        state.in_play.remove(escaped)
        state.free.add(escaped)
        engine.log_info("%s is Free!", escaped)


def move_boat(engine: GameEngine):
    state = engine.state
    state.boat_position += 1
    engine.log_info(
        "Boat: %d->%d", state.boat_position - 1, state.boat_position
    )

    school = state.river[state.boat_position]
    while (color := school.extract_first()) is not None:
        state.in_play.remove(color)
        state.caught.add(color)
        engine.log_info("%s is Caught!!!", color)
