import numpy as np
import pytest

from src.core.cube import Cube


@pytest.fixture
def rng():
    """Seeded generator so tie-breaks and random cubes are repeatable."""
    return np.random.default_rng(1234)


def mixed_faces(first_face):
    """
    Grid whose face 0 is ``first_face``; faces 1..5 cycle colors 1..5 so
    none of them holds more than two stickers of one color.
    """
    grid = [list(first_face)]
    for k in range(1, 6):
        grid.append([1 + (i + k) % 5 for i in range(9)])
    return grid


@pytest.fixture
def up_uniform_cube():
    return Cube(mixed_faces([0] * 9))
