from collections.abc import Callable, Mapping

from fish_river_simulator.core.errors import InvalidLayoutError
from fish_river_simulator.core.school import School
from fish_river_simulator.core.state import OCEAN_SLOT, RIVER_LENGTH, GameState
from fish_river_simulator.core.types import FISH_COLORS, FishColor, LayoutName

# Starting slot per fish color
type Layout = Mapping[FishColor, int]

FIRST_START_SLOT = 1
LAST_START_SLOT = OCEAN_SLOT - 1


def validate_layout(layout: Layout) -> None:
    missing = [c for c in FISH_COLORS if c not in layout]
    if missing:
        raise InvalidLayoutError(f"Layout is missing fish: {', '.join(missing)}")

    unknown = [c for c in layout if c not in FISH_COLORS]
    if unknown:
        raise InvalidLayoutError(f"Layout has unknown fish: {unknown!r}")

    for color, slot in layout.items():
        if not FIRST_START_SLOT <= slot <= LAST_START_SLOT:
            raise InvalidLayoutError(
                f"{color} starts on slot {slot}, "
                f"expected {FIRST_START_SLOT}..{LAST_START_SLOT}",
            )


def build_river(layout: Layout) -> list[School]:
    validate_layout(layout)
    river = [School() for _ in range(RIVER_LENGTH)]
    for color, slot in layout.items():
        river[slot].add(color)
    return river


def build_state(layout: Layout) -> GameState:
    return GameState(river=build_river(layout))


def standard_layout() -> dict[FishColor, int]:
    return {"Blue": 6, "Orange": 6, "Yellow": 6, "Pink": 7}


LAYOUT_DEFINITIONS: dict[LayoutName, Callable[[], Layout]] = {
    "standard": standard_layout,
}
