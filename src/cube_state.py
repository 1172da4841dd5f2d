from typing import Dict, List, Optional

import numpy as np

from .core.cube import FACE_LETTERS, Color, Cube, random_cube
from .core.moves import Move, apply_moves, parse_moves
from .core.solver import SolverCursor


FACE_BY_LETTER = {letter: face for face, letter in FACE_LETTERS.items()}


class CubeState:
    """High-level cube state: owns the solver cursor (cube + cumulative cost)."""

    def __init__(self, rng: np.random.Generator, cube: Optional[Cube] = None):
        self.rng = rng
        self.cursor = SolverCursor(cube if cube is not None else random_cube(rng))

    @property
    def cube(self) -> Cube:
        return self.cursor.cube

    @property
    def cost(self) -> int:
        return self.cursor.cost

    def reset(self):
        """New random cube, cost back to 0."""
        self.cursor.cube = random_cube(self.rng)
        self.cursor.cost = 0

    def scramble(self, moves_text: str) -> List[Move]:
        """Apply a move sequence to the cube without charging cost."""
        moves = parse_moves(moves_text)
        self.cursor.cube = apply_moves(self.cursor.cube, moves)
        return moves

    def get_face_colors(self, face_label: str) -> Optional[List[List[Color]]]:
        """3x3 colors of one face by letter (U, D, L, R, F, B), None if unknown."""
        if face_label not in FACE_BY_LETTER:
            return None
        return self.cube.face_grid(FACE_BY_LETTER[face_label])

    def is_counts_valid(self) -> bool:
        return self.cube.is_balanced()

    def counts(self) -> Dict[str, int]:
        return {c.name: n for c, n in self.cube.color_counts().items()}

    def build_state_string(self) -> str:
        return self.cube.state_string()
