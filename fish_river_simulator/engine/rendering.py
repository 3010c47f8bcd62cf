from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from fish_river_simulator.core.types import FISH_COLORS
from fish_river_simulator.engine.logging import FISH_STYLE

if TYPE_CHECKING:
    from fish_river_simulator.core.state import GameState


def render_board(state: GameState) -> Text:
    """Boat row on top, then one row per fish: `x` where it swims, `=` elsewhere."""
    last_roll = state.last_roll if state.last_roll is not None else "Not rolled yet"

    text = Text()
    text.append(f"Round {state.round}: ")
    text.append(last_roll, style=FISH_STYLE.get(last_roll, "reverse"))
    text.append("\n")
    slots = range(len(state.river))
    text.append("".join("v" if i == state.boat_position else "_" for i in slots))
    for color in FISH_COLORS:
        row = "".join("x" if school.has(color) else "=" for school in state.river)
        text.append("\n")
        text.append(row, style=FISH_STYLE[color])

    text.append("\n")
    text.append(f"Free: {', '.join(state.free) or '-'}  ")
    text.append(f"Caught: {', '.join(state.caught) or '-'}")
    return text
