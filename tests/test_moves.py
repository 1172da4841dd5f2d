import numpy as np
import pytest

from src.core.cube import Cube, Face, random_cube
from src.core.moves import (
    ALL_MOVES, EDGE_CYCLES, MOVE_NAMES, PERMUTATIONS, Move, Turn,
    apply_move, apply_moves, format_moves, move_cost, parse_moves, permute, validate_move_table,
)

U, D, L, R, F, B = Face.UP, Face.DOWN, Face.LEFT, Face.RIGHT, Face.FRONT, Face.BACK

# Strip cycles written out per move, primes tabulated on their own:
# the strip on the first face lands on the second, and so on around.
EXPECTED_CYCLES = {
    Move.U: [(F, (0, 1, 2)), (R, (0, 1, 2)), (B, (0, 1, 2)), (L, (0, 1, 2))],
    Move.U_PRIME: [(F, (0, 1, 2)), (L, (0, 1, 2)), (B, (0, 1, 2)), (R, (0, 1, 2))],
    Move.D: [(F, (6, 7, 8)), (L, (6, 7, 8)), (B, (6, 7, 8)), (R, (6, 7, 8))],
    Move.D_PRIME: [(F, (6, 7, 8)), (R, (6, 7, 8)), (B, (6, 7, 8)), (L, (6, 7, 8))],
    Move.F: [(U, (6, 7, 8)), (L, (8, 5, 2)), (D, (2, 1, 0)), (R, (0, 3, 6))],
    Move.F_PRIME: [(U, (6, 7, 8)), (R, (0, 3, 6)), (D, (2, 1, 0)), (L, (8, 5, 2))],
    Move.B: [(U, (0, 1, 2)), (R, (2, 5, 8)), (D, (8, 7, 6)), (L, (6, 3, 0))],
    Move.B_PRIME: [(U, (0, 1, 2)), (L, (6, 3, 0)), (D, (8, 7, 6)), (R, (2, 5, 8))],
    Move.L: [(U, (0, 3, 6)), (B, (8, 5, 2)), (D, (0, 3, 6)), (F, (0, 3, 6))],
    Move.L_PRIME: [(U, (0, 3, 6)), (F, (0, 3, 6)), (D, (0, 3, 6)), (B, (8, 5, 2))],
    Move.R: [(U, (2, 5, 8)), (F, (2, 5, 8)), (D, (2, 5, 8)), (B, (6, 3, 0))],
    Move.R_PRIME: [(U, (2, 5, 8)), (B, (6, 3, 0)), (D, (2, 5, 8)), (F, (2, 5, 8))],
}

FACE_CW = [6, 3, 0, 7, 4, 1, 8, 5, 2]
FACE_CCW = [2, 5, 8, 1, 4, 7, 0, 3, 6]

QUARTERS = [m for m in ALL_MOVES if m.turn is not Turn.HALF]
HALVES = [m for m in ALL_MOVES if m.turn is Turn.HALF]


def cell(face, i):
    return int(face) * 9 + i


@pytest.mark.parametrize("move", sorted(EXPECTED_CYCLES))
def test_strip_cycle_matches_table(move):
    labels = np.arange(54)
    out = permute(labels, move)
    cycle = EXPECTED_CYCLES[move]
    for k in range(4):
        src_face, src_idx = cycle[k]
        dst_face, dst_idx = cycle[(k + 1) % 4]
        for s, d in zip(src_idx, dst_idx):
            assert out[cell(dst_face, d)] == cell(src_face, s)


@pytest.mark.parametrize("move", QUARTERS)
def test_face_rotation(move):
    out = permute(np.arange(54), move)
    src = FACE_CW if move.turn is Turn.CW else FACE_CCW
    for i in range(9):
        assert out[cell(move.face, i)] == cell(move.face, src[i])


@pytest.mark.parametrize("move", QUARTERS)
def test_only_turned_face_and_strips_move(move):
    out = permute(np.arange(54), move)
    touched = {cell(move.face, i) for i in range(9) if i != 4}
    for face, idx in EXPECTED_CYCLES[move]:
        touched.update(cell(face, i) for i in idx)
    moved = {i for i in range(54) if out[i] != i}
    assert moved == touched
    assert len(moved) == 20


@pytest.mark.parametrize("move", QUARTERS)
def test_quarter_turn_four_times_is_identity(move, rng):
    cube = random_cube(rng)
    assert apply_moves(cube, [move] * 4) == cube


@pytest.mark.parametrize("move", HALVES)
def test_half_turn_twice_is_identity(move, rng):
    cube = random_cube(rng)
    assert apply_moves(cube, [move, move]) == cube


@pytest.mark.parametrize("face", list(Face))
def test_clockwise_then_prime_cancels(face, rng):
    cube = random_cube(rng)
    cw = Move(int(face) * 3)
    ccw = Move(int(face) * 3 + 1)
    assert apply_moves(cube, [cw, ccw]) == cube
    assert apply_moves(cube, [ccw, cw]) == cube


@pytest.mark.parametrize("face", list(Face))
def test_half_turn_is_two_quarters(face, rng):
    cube = random_cube(rng)
    cw = Move(int(face) * 3)
    half = Move(int(face) * 3 + 2)
    assert apply_move(cube, half) == apply_moves(cube, [cw, cw])


def test_four_up_turns_restore_every_cell(rng):
    cube = random_cube(rng)
    before = cube.flat().copy()
    for _ in range(4):
        cube = apply_move(cube, Move.U)
    assert np.array_equal(cube.flat(), before)


def test_apply_move_does_not_touch_input(rng):
    cube = random_cube(rng)
    before = cube.copy()
    apply_move(cube, Move.F)
    assert cube == before


def test_counts_survive_long_sequences(rng):
    cube = random_cube(rng)
    for m in rng.integers(0, 18, size=300):
        cube = apply_move(cube, Move(int(m)))
        assert cube.is_balanced()


def test_solved_cube_turns_keep_turned_face_uniform():
    for move in ALL_MOVES:
        out = apply_move(Cube(), move)
        assert out.is_face_uniform(move.face)
        assert out.is_balanced()


def test_move_cost():
    assert [move_cost(m) for m in HALVES] == [2] * 6
    assert [move_cost(m) for m in QUARTERS] == [1] * 12


def test_catalog_order_and_names():
    assert len(ALL_MOVES) == 18
    assert format_moves(ALL_MOVES) == "U U' U2 D D' D2 L L' L2 R R' R2 F F' F2 B B' B2"
    assert Move.R_PRIME.face is Face.RIGHT
    assert Move.R_PRIME.turn is Turn.CCW
    assert str(Move.B2) == "B2"


def test_parse_moves():
    assert parse_moves("R U R' F2") == [Move.R, Move.U, Move.R_PRIME, Move.F2]
    assert parse_moves(" U,D'  B2 ") == [Move.U, Move.D_PRIME, Move.B2]
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("R X")


def test_table_validates():
    validate_move_table()


def test_broken_table_is_rejected():
    broken = dict(PERMUTATIONS)
    perm = broken[Move.F].copy()
    perm[0] = perm[1]
    broken[Move.F] = perm
    with pytest.raises(RuntimeError):
        validate_move_table(broken)


def test_missing_move_is_rejected():
    broken = {m: p for m, p in PERMUTATIONS.items() if m is not Move.B2}
    with pytest.raises(RuntimeError, match="B2"):
        validate_move_table(broken)


def test_names_cover_every_move():
    assert set(MOVE_NAMES) == set(Move)


def test_edge_cycles_cover_each_face():
    assert set(EDGE_CYCLES) == set(Face)
    for face, strips in EDGE_CYCLES.items():
        neighbours = [f for f, _ in strips]
        assert len(set(neighbours)) == 4
        assert face not in neighbours
        # the opposite face never takes part in the turn
        assert Face(int(face) ^ 1) not in neighbours
