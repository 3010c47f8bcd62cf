from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import override

from fish_river_simulator.core.errors import InvalidFishColorError
from fish_river_simulator.core.types import FISH_COLORS, FishColor

_FISH_INDEX: dict[str, int] = {color: i for i, color in enumerate(FISH_COLORS)}


def _index_of(color: object) -> int:
    # Neutral faces and the "not rolled" sentinel never belong in a School.
    try:
        return _FISH_INDEX[color]  # pyright: ignore[reportArgumentType]
    except (KeyError, TypeError):
        raise InvalidFishColorError(f"Not a fish color: {color!r}") from None


@dataclass(slots=True)
class School:
    """
    At most one fish per color, e.g. a single river slot or one of the pools.

    Membership is binary per color. Iteration and `first()` always follow the
    fixed color priority, never insertion order.
    """

    _present: list[bool] = field(default_factory=lambda: [False] * len(FISH_COLORS))

    @classmethod
    def of(cls, *colors: FishColor) -> School:
        school = cls()
        for color in colors:
            school.add(color)
        return school

    def has(self, color: FishColor) -> bool:
        return self._present[_index_of(color)]

    def add(self, color: FishColor) -> None:
        self._present[_index_of(color)] = True

    def remove(self, color: FishColor) -> None:
        self._present[_index_of(color)] = False

    def first(self) -> FishColor | None:
        for color, present in zip(FISH_COLORS, self._present, strict=True):
            if present:
                return color
        return None

    def extract_first(self) -> FishColor | None:
        color = self.first()
        if color is not None:
            self.remove(color)
        return color

    def __iter__(self) -> Iterator[FishColor]:
        return (c for c, present in zip(FISH_COLORS, self._present) if present)

    def __len__(self) -> int:
        return sum(self._present)

    def __bool__(self) -> bool:
        return any(self._present)

    @override
    def __repr__(self) -> str:
        return f"School({', '.join(self)})"
