from typing import Literal, get_args

FishColor = Literal[
    "Blue",
    "Orange",
    "Yellow",
    "Pink",
]
NeutralFace = Literal[
    "Red",
    "Green",
]
DieFace = FishColor | NeutralFace

Outcome = Literal[
    "Undecided",
    "FishWin",
    "BoatWin",
    "Tie",
]

LayoutName = Literal["standard"]

# Priority order: first present fish moves or gets caught first
FISH_COLORS: tuple[FishColor, ...] = get_args(FishColor)
NEUTRAL_FACES: tuple[NeutralFace, ...] = get_args(NeutralFace)
DIE_FACES: tuple[DieFace, ...] = FISH_COLORS + NEUTRAL_FACES

TERMINAL_OUTCOMES: frozenset[Outcome] = frozenset({"FishWin", "BoatWin", "Tie"})
