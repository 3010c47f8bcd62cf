import pytest

from fish_river_simulator.core.state import OCEAN_SLOT
from fish_river_simulator.engine.flow import check_for_winner
from tests.test_utils import build_custom_state


@pytest.mark.parametrize(
    ("free", "caught", "expected"),
    [
        ((), (), "Tie"),
        (("Blue",), (), "FishWin"),
        (("Blue",), ("Pink",), "Tie"),
        ((), ("Pink",), "BoatWin"),
        (("Blue",), ("Pink", "Orange"), "BoatWin"),
    ],
)
def test_boat_at_the_ocean_compares_pools(free, caught, expected):
    placed = {
        c: 11
        for c in ("Blue", "Orange", "Yellow", "Pink")
        if c not in free and c not in caught
    }
    state = build_custom_state(
        placed, boat_position=OCEAN_SLOT, free=free, caught=caught
    )
    assert check_for_winner(state) == expected


def test_three_free_fish_win():
    state = build_custom_state(
        {"Pink": 8}, boat_position=3, free=("Blue", "Orange", "Yellow")
    )
    assert check_for_winner(state) == "FishWin"


def test_three_caught_fish_win_for_the_boat():
    state = build_custom_state(
        {"Pink": 8}, boat_position=3, caught=("Blue", "Orange", "Yellow")
    )
    assert check_for_winner(state) == "BoatWin"


def test_two_and_two_is_a_tie():
    state = build_custom_state(
        {}, boat_position=3, free=("Blue", "Pink"), caught=("Orange", "Yellow")
    )
    assert check_for_winner(state) == "Tie"


@pytest.mark.parametrize(
    ("free", "caught"),
    [
        ((), ()),
        (("Blue",), ()),
        (("Blue", "Orange"), ()),
        (("Blue", "Orange"), ("Yellow",)),
        ((), ("Yellow", "Pink")),
        (("Blue",), ("Yellow", "Pink")),
    ],
)
def test_undecided_below_thresholds(free, caught):
    placed = {
        c: 9
        for c in ("Blue", "Orange", "Yellow", "Pink")
        if c not in free and c not in caught
    }
    state = build_custom_state(placed, boat_position=2, free=free, caught=caught)
    assert check_for_winner(state) == "Undecided"
