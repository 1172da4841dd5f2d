"""
启发函数模块
- h: 以"最接近纯色"的一面估计剩余步数（引导选步）
- heuristic_all_faces: 与中心块不一致的贴纸数 / 12（仅用于日志）
"""
import numpy as np

from .cube import Cube, Face, N_COLORS, STICKERS_PER_FACE, CENTER

_NON_CENTER = [i for i in range(STICKERS_PER_FACE) if i != CENTER]


def face_max_counts(cube: Cube) -> np.ndarray:
    """Per face, how many stickers share that face's most common color."""
    return np.array([np.bincount(row, minlength=N_COLORS).max() for row in cube.faces])


def closest_to_uniform_face(cube: Cube) -> Face:
    # argmax returns the first face on ties
    return Face(int(np.argmax(face_max_counts(cube))))


def remaining_stickers(cube: Cube, face: Face) -> int:
    return STICKERS_PER_FACE - int(np.bincount(cube.faces[face], minlength=N_COLORS).max())


def h(cube: Cube) -> int:
    """
    Guidance heuristic used by the solver.

    remaining = 9 - max color count on the closest-to-uniform face,
    h = remaining // 3 + remaining % 3, so h is in {0, 1, 2, 3} and h == 0
    exactly when some face is a single color. Not admissible.
    """
    t = remaining_stickers(cube, closest_to_uniform_face(cube))
    return t // 3 + t % 3


def heuristic_all_faces(cube: Cube) -> int:
    """Stickers differing from their face center, summed over faces, // 12."""
    centers = cube.faces[:, CENTER:CENTER + 1]
    mismatches = int(np.count_nonzero(cube.faces[:, _NON_CENTER] != centers))
    # one turn touches about 12 stickers
    return mismatches // 12
