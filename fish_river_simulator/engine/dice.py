import random

from fish_river_simulator.core.types import DIE_FACES, DieFace


def roll_die(rng: random.Random) -> DieFace:
    """Four fish colors and two neutral faces, 1/6 each."""
    return DIE_FACES[rng.randint(0, len(DIE_FACES) - 1)]
