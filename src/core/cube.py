"""
魔方状态模块：6面 × 9贴纸的颜色网格（面内按行优先编号，4 为中心块）
"""
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


N_FACES = 6
STICKERS_PER_FACE = 9
N_COLORS = 6
# every color appears this many times on a well-formed cube
COLOR_QUOTA = 9
CENTER = 4


class Face(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    FRONT = 4
    BACK = 5


class Color(IntEnum):
    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    BLUE = 4
    GREEN = 5


FACE_LETTERS: Dict[Face, str] = {
    Face.UP: 'U', Face.DOWN: 'D', Face.LEFT: 'L',
    Face.RIGHT: 'R', Face.FRONT: 'F', Face.BACK: 'B',
}

COLOR_LETTERS: Dict[Color, str] = {
    Color.WHITE: 'W', Color.YELLOW: 'Y', Color.RED: 'R',
    Color.ORANGE: 'O', Color.BLUE: 'B', Color.GREEN: 'G',
}

# BGR, for OpenCV drawing
COLOR_TO_BGR: Dict[Color, Tuple[int, int, int]] = {
    Color.WHITE: (255, 255, 255),
    Color.YELLOW: (0, 255, 255),
    Color.RED: (0, 0, 255),
    Color.ORANGE: (0, 128, 255),
    Color.BLUE: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
}


class Cube:
    """54-sticker cube. ``faces[face, index]`` holds a Color value."""

    def __init__(self, faces: Optional[np.ndarray] = None):
        if faces is None:
            # solved: face f is painted with color f
            grid = np.repeat(np.arange(N_FACES, dtype=np.int8), STICKERS_PER_FACE).reshape(N_FACES, STICKERS_PER_FACE)
        else:
            grid = np.array(faces, dtype=np.int64)
            if grid.shape != (N_FACES, STICKERS_PER_FACE):
                raise ValueError(f"cube grid must be {N_FACES}x{STICKERS_PER_FACE}, got {grid.shape}")
            if grid.min() < 0 or grid.max() >= N_COLORS:
                raise ValueError("cube grid holds a value that is not a color")
            grid = grid.astype(np.int8)
        self.faces = grid

    @classmethod
    def from_flat(cls, stickers: np.ndarray) -> 'Cube':
        """Wrap an already-valid flat 54-array without re-checking it."""
        cube = cls.__new__(cls)
        cube.faces = np.asarray(stickers, dtype=np.int8).reshape(N_FACES, STICKERS_PER_FACE)
        return cube

    def copy(self) -> 'Cube':
        return Cube.from_flat(self.faces.reshape(-1).copy())

    def flat(self) -> np.ndarray:
        return self.faces.reshape(-1)

    def face_grid(self, face: Face) -> List[List[Color]]:
        """3x3 colors of one face, rows top to bottom."""
        return [[Color(int(c)) for c in row] for row in self.faces[face].reshape(3, 3)]

    def color_counts(self) -> Dict[Color, int]:
        counts = np.bincount(self.faces.reshape(-1), minlength=N_COLORS)
        return {color: int(counts[color]) for color in Color}

    def is_balanced(self) -> bool:
        """True if each of the 6 colors appears exactly 9 times."""
        return all(n == COLOR_QUOTA for n in self.color_counts().values())

    def is_face_uniform(self, face: Face) -> bool:
        row = self.faces[face]
        return bool(np.all(row == row[0]))

    def has_uniform_face(self) -> bool:
        return any(self.is_face_uniform(face) for face in Face)

    def state_string(self) -> str:
        """54 color letters, faces in U, D, L, R, F, B order."""
        return ''.join(COLOR_LETTERS[Color(int(c))] for c in self.faces.reshape(-1))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return bool(np.array_equal(self.faces, other.faces))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Cube({self.state_string()})"


def random_cube(rng: np.random.Generator) -> Cube:
    """
    Fill the 54 cells one by one with random colors, redrawing whenever the
    drawn color already has its 9 stickers. The result is color-balanced but
    usually not reachable from a solved cube by face turns.
    """
    counts = np.zeros(N_COLORS, dtype=np.int64)
    grid = np.empty((N_FACES, STICKERS_PER_FACE), dtype=np.int8)
    for f in range(N_FACES):
        for i in range(STICKERS_PER_FACE):
            c = int(rng.integers(0, N_COLORS))
            while counts[c] == COLOR_QUOTA:
                c = int(rng.integers(0, N_COLORS))
            grid[f, i] = c
            counts[c] += 1
    return Cube.from_flat(grid)
