"""
转动模块：18 种面转动 → 54 贴纸置换表 + 步长代价
每个基本转动（顺时针 90°）= 本面 3x3 旋转 + 相邻四面三贴纸条带循环
"""
import re
from enum import IntEnum
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .cube import Cube, Face, N_FACES, STICKERS_PER_FACE, CENTER

N_STICKERS = N_FACES * STICKERS_PER_FACE


class Turn(IntEnum):
    CW = 0      # clockwise quarter turn
    CCW = 1     # counter-clockwise quarter turn
    HALF = 2    # two clockwise quarter turns


class Move(IntEnum):
    U = 0
    U_PRIME = 1
    U2 = 2
    D = 3
    D_PRIME = 4
    D2 = 5
    L = 6
    L_PRIME = 7
    L2 = 8
    R = 9
    R_PRIME = 10
    R2 = 11
    F = 12
    F_PRIME = 13
    F2 = 14
    B = 15
    B_PRIME = 16
    B2 = 17

    @property
    def face(self) -> Face:
        return Face(self.value // 3)

    @property
    def turn(self) -> Turn:
        return Turn(self.value % 3)

    @property
    def notation(self) -> str:
        return MOVE_NAMES[self]

    def __str__(self) -> str:
        return MOVE_NAMES[self]


MOVE_NAMES: Dict[Move, str] = {
    Move.U: "U", Move.U_PRIME: "U'", Move.U2: "U2",
    Move.D: "D", Move.D_PRIME: "D'", Move.D2: "D2",
    Move.L: "L", Move.L_PRIME: "L'", Move.L2: "L2",
    Move.R: "R", Move.R_PRIME: "R'", Move.R2: "R2",
    Move.F: "F", Move.F_PRIME: "F'", Move.F2: "F2",
    Move.B: "B", Move.B_PRIME: "B'", Move.B2: "B2",
}
NAME_TO_MOVE: Dict[str, Move] = {name: m for m, name in MOVE_NAMES.items()}

# fixed catalog, enumeration order
ALL_MOVES: Tuple[Move, ...] = tuple(Move)

TURN_COST: Dict[Turn, int] = {Turn.CW: 1, Turn.CCW: 1, Turn.HALF: 2}

# Clockwise 3x3 rotation, format: new[i] = old[FACE_CW[i]]
FACE_CW = (6, 3, 0, 7, 4, 1, 8, 5, 2)

# Strip cycle per clockwise turn: the strip on A moves to B, B to C, C to D, D to A.
# Index order inside a strip matters: the k-th sticker of A lands on the k-th of B.
Strip = Tuple[Face, Tuple[int, int, int]]
EDGE_CYCLES: Dict[Face, Tuple[Strip, Strip, Strip, Strip]] = {
    Face.UP: (
        (Face.FRONT, (0, 1, 2)), (Face.RIGHT, (0, 1, 2)),
        (Face.BACK, (0, 1, 2)), (Face.LEFT, (0, 1, 2)),
    ),
    Face.DOWN: (
        (Face.FRONT, (6, 7, 8)), (Face.LEFT, (6, 7, 8)),
        (Face.BACK, (6, 7, 8)), (Face.RIGHT, (6, 7, 8)),
    ),
    Face.LEFT: (
        (Face.UP, (0, 3, 6)), (Face.BACK, (8, 5, 2)),
        (Face.DOWN, (0, 3, 6)), (Face.FRONT, (0, 3, 6)),
    ),
    Face.RIGHT: (
        (Face.UP, (2, 5, 8)), (Face.FRONT, (2, 5, 8)),
        (Face.DOWN, (2, 5, 8)), (Face.BACK, (6, 3, 0)),
    ),
    Face.FRONT: (
        (Face.UP, (6, 7, 8)), (Face.LEFT, (8, 5, 2)),
        (Face.DOWN, (2, 1, 0)), (Face.RIGHT, (0, 3, 6)),
    ),
    Face.BACK: (
        (Face.UP, (0, 1, 2)), (Face.RIGHT, (2, 5, 8)),
        (Face.DOWN, (8, 7, 6)), (Face.LEFT, (6, 3, 0)),
    ),
}


def _cell(face: Face, index: int) -> int:
    return int(face) * STICKERS_PER_FACE + index


def _quarter_perm(face: Face) -> np.ndarray:
    """Gather permutation of one clockwise quarter turn: new = old[perm]."""
    perm = np.arange(N_STICKERS)
    for i, src in enumerate(FACE_CW):
        perm[_cell(face, i)] = _cell(face, src)
    cycle = EDGE_CYCLES[face]
    for k in range(4):
        src_face, src_idx = cycle[k]
        dst_face, dst_idx = cycle[(k + 1) % 4]
        for s, d in zip(src_idx, dst_idx):
            perm[_cell(dst_face, d)] = _cell(src_face, s)
    return perm


def _inverse(perm: np.ndarray) -> np.ndarray:
    return np.argsort(perm)


def _build_permutations() -> Dict[Move, np.ndarray]:
    perms: Dict[Move, np.ndarray] = {}
    for move in Move:
        cw = _quarter_perm(move.face)
        if move.turn is Turn.CW:
            perms[move] = cw
        elif move.turn is Turn.CCW:
            perms[move] = _inverse(cw)
        elif move.turn is Turn.HALF:
            perms[move] = cw[cw]
        else:
            raise RuntimeError(f"unhandled turn {move.turn!r}")
        perms[move].setflags(write=False)
    return perms


PERMUTATIONS: Dict[Move, np.ndarray] = _build_permutations()


def permute(stickers: np.ndarray, move: Move) -> np.ndarray:
    """Apply a move to any flat 54-array (colors, labels, indices)."""
    return np.asarray(stickers).reshape(-1)[PERMUTATIONS[move]]


def apply_move(cube: Cube, move: Move) -> Cube:
    """Return the cube after one move; the input cube is left untouched."""
    return Cube.from_flat(permute(cube.flat(), move))


def apply_moves(cube: Cube, moves: Iterable[Move]) -> Cube:
    for move in moves:
        cube = apply_move(cube, move)
    return cube


def move_cost(move: Move) -> int:
    """Quarter turns cost 1, half turns cost 2."""
    return TURN_COST[move.turn]


def parse_moves(text: str) -> List[Move]:
    """Parse a sequence such as "R U R' F2" (spaces or commas)."""
    moves = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if token not in NAME_TO_MOVE:
            raise ValueError(f"unknown move '{token}'")
        moves.append(NAME_TO_MOVE[token])
    return moves


def format_moves(moves: Sequence[Move]) -> str:
    return ' '.join(MOVE_NAMES[m] for m in moves)


def _power(perm: np.ndarray, n: int) -> np.ndarray:
    out = np.arange(N_STICKERS)
    for _ in range(n):
        out = out[perm]
    return out


def validate_move_table(perms: Dict[Move, np.ndarray] = PERMUTATIONS) -> None:
    """
    Group checks on the compiled table. Raises RuntimeError on the first
    move that fails.
    """
    identity = np.arange(N_STICKERS)
    missing = set(Move) - set(perms)
    if missing:
        raise RuntimeError(f"no permutation for {sorted(MOVE_NAMES[m] for m in missing)}")
    if set(TURN_COST) != set(Turn):
        raise RuntimeError("turn cost table is incomplete")
    for move in Move:
        perm = perms[move]
        name = MOVE_NAMES[move]
        if perm.shape != (N_STICKERS,) or not np.array_equal(np.sort(perm), identity):
            raise RuntimeError(f"{name} is not a permutation of {N_STICKERS} stickers")
        for face in Face:
            if perm[_cell(face, CENTER)] != _cell(face, CENTER):
                raise RuntimeError(f"{name} moves the center of {face.name}")
        order = 2 if move.turn is Turn.HALF else 4
        if not np.array_equal(_power(perm, order), identity):
            raise RuntimeError(f"{name}^{order} is not the identity")
        if order == 4 and np.array_equal(perm, identity):
            raise RuntimeError(f"{name} does not move anything")
    for face in Face:
        cw = perms[Move(int(face) * 3 + Turn.CW)]
        ccw = perms[Move(int(face) * 3 + Turn.CCW)]
        half = perms[Move(int(face) * 3 + Turn.HALF)]
        if not np.array_equal(cw[ccw], identity):
            raise RuntimeError(f"{MOVE_NAMES[Move(int(face) * 3)]} and its prime do not cancel")
        if not np.array_equal(half, cw[cw]):
            raise RuntimeError(f"{MOVE_NAMES[Move(int(face) * 3 + 2)]} differs from two quarter turns")


validate_move_table()
