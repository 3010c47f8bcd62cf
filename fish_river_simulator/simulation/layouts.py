"""Enumeration and coarse de-duplication of starting layouts."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from fish_river_simulator.engine.board import (
    FIRST_START_SLOT,
    LAST_START_SLOT,
    build_river,
)

if TYPE_CHECKING:
    from fish_river_simulator.core.school import School
    from fish_river_simulator.core.types import FishColor
    from fish_river_simulator.engine.board import Layout

# Nesting order of the sweep, outermost first. Dedup keeps the first
# layout generated per fingerprint, so this order picks the representatives.
SWEEP_ORDER: tuple[FishColor, ...] = ("Blue", "Yellow", "Pink", "Orange")

DEFAULT_START_SLOTS = range(FIRST_START_SLOT, LAST_START_SLOT + 1)


def generate_layouts(
    slots: Iterable[int] = DEFAULT_START_SLOTS,
) -> Iterator[dict[FishColor, int]]:
    """Every assignment of a starting slot to each fish, independently."""
    slots = tuple(slots)
    for positions in itertools.product(slots, repeat=len(SWEEP_ORDER)):
        yield dict(zip(SWEEP_ORDER, positions, strict=True))


def river_fingerprint(river: list[School]) -> str:
    """Fish count per slot over the whole river, e.g. ``0000003100000``."""
    return "".join(str(len(school)) for school in river)


def layout_fingerprint(layout: Layout) -> str:
    return river_fingerprint(build_river(layout))


def dedupe_layouts(layouts: Iterable[Layout]) -> list[Layout]:
    """
    Keep one layout per fingerprint, sorted by fingerprint.

    The fingerprint ignores which color sits where, so layouts that only
    differ by a permutation of colors count as the same one.
    """
    seen: dict[str, Layout] = {}
    for layout in layouts:
        _ = seen.setdefault(layout_fingerprint(layout), layout)
    return [seen[fingerprint] for fingerprint in sorted(seen)]
