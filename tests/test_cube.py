import numpy as np
import pytest

from src.core.cube import COLOR_TO_BGR, Color, Cube, Face, random_cube


def test_solved_cube():
    cube = Cube()
    assert cube.is_balanced()
    assert all(cube.is_face_uniform(f) for f in Face)
    assert cube.state_string() == "W" * 9 + "Y" * 9 + "R" * 9 + "O" * 9 + "B" * 9 + "G" * 9


def test_random_cubes_are_color_balanced(rng):
    for _ in range(1000):
        counts = random_cube(rng).color_counts()
        assert counts == {c: 9 for c in Color}


def test_same_seed_same_cube():
    a = random_cube(np.random.default_rng(99))
    b = random_cube(np.random.default_rng(99))
    assert a == b


def test_face_grid_is_row_major(up_uniform_cube):
    grid = up_uniform_cube.face_grid(Face.DOWN)
    flat = [c for row in grid for c in row]
    assert flat == [Color(int(v)) for v in up_uniform_cube.faces[Face.DOWN]]
    assert grid[1][2] == Color(int(up_uniform_cube.faces[Face.DOWN, 5]))


def test_copy_is_independent(rng):
    cube = random_cube(rng)
    other = cube.copy()
    other.faces[0, 0] = (other.faces[0, 0] + 1) % 6
    assert other != cube


@pytest.mark.parametrize("bad", [
    np.zeros((6, 8)),
    np.zeros((5, 9)),
    np.full((6, 9), 6),
    np.full((6, 9), -1),
])
def test_bad_grids_rejected(bad):
    with pytest.raises(ValueError):
        Cube(bad)


def test_every_color_has_a_display_color():
    assert set(COLOR_TO_BGR) == set(Color)
