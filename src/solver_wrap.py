from typing import List, Sequence

import numpy as np

from .core.heuristic import h, heuristic_all_faces
from .core.moves import ALL_MOVES, Move, Turn
from .core.solver import OnePlySolver, StepRecord, format_step_record
from .cube_state import CubeState


FACE_NAMES = {'U': 'Up', 'D': 'Down', 'L': 'Left', 'R': 'Right', 'F': 'Front', 'B': 'Back'}


def move_to_text(move: Move) -> str:
    face = FACE_NAMES[move.notation[0]]
    if move.turn is Turn.CCW:
        return f"{face} face counter-clockwise 90°"
    if move.turn is Turn.HALF:
        return f"{face} face 180°"
    return f"{face} face clockwise 90°"


class Solver:
    """Friendly wrapper around OnePlySolver that keeps the move history."""

    def __init__(self, rng: np.random.Generator, moves: Sequence[Move] = ALL_MOVES):
        self._solver = OnePlySolver(moves, rng=rng)
        self.history: List[StepRecord] = []

    def step(self, state: CubeState) -> StepRecord:
        record = self._solver.step(state.cursor)
        self.history.append(record)
        return record

    def moves_played(self) -> List[Move]:
        return [r.move for r in self.history]

    def summary(self, state: CubeState) -> str:
        return (f"{len(self.history)} plies, g={state.cost}, h={h(state.cube)}, "
                f"diag={heuristic_all_faces(state.cube)}, uniform face: {state.cube.has_uniform_face()}")

    def reset(self):
        self.history = []

    @staticmethod
    def describe(record: StepRecord) -> str:
        return format_step_record(record)
