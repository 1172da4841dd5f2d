"""
求解器模块：单层 f = g + h 贪心选步（随机打破平局）
注意：不是完整 A*，没有 open/closed 表，也不保证收敛到还原状态
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .cube import Cube
from .heuristic import h, heuristic_all_faces
from .moves import ALL_MOVES, Move, apply_move, move_cost


@dataclass
class SolverCursor:
    """当前魔方 + 累计代价 g（每次 step 整体替换）"""
    cube: Cube
    cost: int = 0


@dataclass(frozen=True)
class Candidate:
    move: Move
    cube: Cube
    g: int
    f: int


@dataclass(frozen=True)
class StepRecord:
    """
    One committed ply.

    Attributes:
        move: chosen move
        diagnostic: heuristic_all_faces of the new cube
        cost: cumulative cost after the move
        f: f-score of the chosen candidate
        ties: number of candidates that shared the minimum f
    """
    move: Move
    diagnostic: int
    cost: int
    f: int
    ties: int


def f_score(cube: Cube, g: int) -> int:
    return g + h(cube)


def format_step_record(record: StepRecord) -> str:
    return f"Solver chose: {record.move.notation} (h={record.diagnostic}, g={record.cost})"


class OnePlySolver:
    """单层选步器"""

    def __init__(self, moves: Sequence[Move] = ALL_MOVES, rng: Optional[np.random.Generator] = None):
        """
        Args:
            moves: 候选转动表（非空，按此顺序评估）
            rng: 随机源；与构造魔方共用同一个生成器即可复现
        """
        moves = tuple(moves)
        if not moves:
            raise ValueError("move catalog is empty")
        self.moves = moves
        self.rng = rng if rng is not None else np.random.default_rng()

    def evaluate(self, cursor: SolverCursor) -> List[Candidate]:
        """Score every move from the cursor, one candidate per move, in catalog order."""
        candidates = []
        for m in self.moves:
            cube = apply_move(cursor.cube, m)
            g = cursor.cost + move_cost(m)
            candidates.append(Candidate(m, cube, g, f_score(cube, g)))
        return candidates

    @staticmethod
    def best_indices(candidates: Sequence[Candidate]) -> List[int]:
        best_f = None
        best: List[int] = []
        for i, c in enumerate(candidates):
            if best_f is None or c.f < best_f:
                best_f = c.f
                best = [i]
            elif c.f == best_f:
                best.append(i)
        return best

    def step(self, cursor: SolverCursor) -> StepRecord:
        """
        评估全部候选，在最小 f 的候选中均匀随机选一个并写回 cursor
        Returns:
            StepRecord（由调用方决定是否打印）
        """
        candidates = self.evaluate(cursor)
        best = self.best_indices(candidates)
        if len(best) == 1:
            chosen = candidates[best[0]]
        else:
            chosen = candidates[best[int(self.rng.integers(len(best)))]]

        cursor.cube = chosen.cube
        cursor.cost = chosen.g
        return StepRecord(
            move=chosen.move,
            diagnostic=heuristic_all_faces(cursor.cube),
            cost=cursor.cost,
            f=chosen.f,
            ties=len(best),
        )
