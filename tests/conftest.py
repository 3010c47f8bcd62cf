from typing import Callable

import pytest

from fish_river_simulator.core.types import DieFace, FishColor
from tests.test_utils import GameScenario


@pytest.fixture
def scenario() -> Callable[..., GameScenario]:
    """Factory fixture to create scenarios."""

    def _builder(
        placements: dict[FishColor, int],
        dice_rolls: list[DieFace] | None = None,
        **kwargs,
    ) -> GameScenario:
        return GameScenario(placements, dice_rolls, **kwargs)

    return _builder
