from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from hopscotch.core import BoardSnapshot, BoardState, Move, apply_move, enumerate_legal_moves

from .reachability import connectivity_score


@dataclass
class EvaluatorConfig:
    mobility_weight: float = 10.0
    connectivity_weight: float = 20.0
    area_weight: float = 30.0
    position_weight: float = 10.0
    lookahead_weight: float = 15.0
    dead_end_score: float = -1000.0
    lookahead_depth: int = 3
    lookahead_beam: int = 3
    lookahead_immediate: float = 0.1
    lookahead_decay: float = 0.7
    late_position_value: float = 0.5
    midgame_position_factor: float = 0.7


@dataclass
class MoveScore:
    move: Move
    mobility: float = 0.0
    connectivity: float = 0.0
    area: float = 0.0
    position: float = 0.0
    lookahead: float = 0.0
    total: float = 0.0
    dead_end: bool = False


class MoveEvaluator:
    """Scores candidate moves by simulating them on a snapshot.

    The total is the sum of five weighted terms: mobility after the move,
    connectivity of the remaining board, how much of each quadrant is still
    live, closeness to the centre (early game only) and a short beam
    lookahead. A move that leaves no legal reply gets ``dead_end_score``.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None) -> None:
        self.config = config or EvaluatorConfig()

    def score(self, state: BoardState, move: Move, *, moves_made: int = 0) -> float:
        return self.evaluate(state, move, moves_made=moves_made).total

    def evaluate(self, state: BoardState, move: Move, *, moves_made: int = 0) -> MoveScore:
        cfg = self.config
        simulation = BoardSnapshot.from_state(state)
        apply_move(simulation, move)

        future_moves = enumerate_legal_moves(simulation)
        if not future_moves:
            return MoveScore(move=move, total=cfg.dead_end_score, dead_end=True)

        result = MoveScore(
            move=move,
            mobility=len(future_moves) * cfg.mobility_weight,
            connectivity=connectivity_score(simulation) * cfg.connectivity_weight,
            area=area_control(simulation) * cfg.area_weight,
            position=self._position_value(move, simulation.size, moves_made) * cfg.position_weight,
            lookahead=self.future_potential(simulation, cfg.lookahead_depth) * cfg.lookahead_weight,
        )
        result.total = result.mobility + result.connectivity + result.area + result.position + result.lookahead
        return result

    # ------------------------------------------------------------------
    def future_potential(self, snapshot: BoardSnapshot, depth: int) -> float:
        if depth <= 0:
            return 0.0
        candidates = self._ranked_children(snapshot)
        if not candidates:
            return 0.0

        cfg = self.config
        best = 0.0
        for child, mobility in candidates[: cfg.lookahead_beam]:
            value = mobility * cfg.lookahead_immediate
            value += self.future_potential(child, depth - 1) * cfg.lookahead_decay
            best = max(best, value)
        return best

    def _ranked_children(self, snapshot: BoardSnapshot) -> List[Tuple[BoardSnapshot, int]]:
        children: List[Tuple[BoardSnapshot, int]] = []
        for move in enumerate_legal_moves(snapshot):
            child = apply_move(snapshot.copy(), move)
            children.append((child, len(enumerate_legal_moves(child))))
        # sorted() is stable, so equal mobility keeps generation order.
        return sorted(children, key=lambda entry: -entry[1])

    def _position_value(self, move: Move, size: int, moves_made: int) -> float:
        cfg = self.config
        if moves_made >= 2 * size:
            return cfg.late_position_value

        centre = size // 2
        distance = abs(move.row - centre) + abs(move.col - centre)
        normalised = 1.0 - distance / (2 * size)
        if moves_made < size:
            return normalised
        return normalised * cfg.midgame_position_factor


def area_control(state: BoardState) -> float:
    """Average fraction of live cells over the four quadrants.

    Quadrants split at ``size // 2``; on odd boards the lower and right
    quadrants take the extra row and column.
    """
    size = state.size
    half = size // 2
    bounds = (
        (0, 0, half, half),
        (0, half, half, size),
        (half, 0, size, half),
        (half, half, size, size),
    )
    total = 0.0
    for r0, c0, r1, c1 in bounds:
        cells = (r1 - r0) * (c1 - c0)
        if cells == 0:
            continue
        live = cells - int(state.erased[r0:r1, c0:c1].sum())
        total += live / cells
    return total / 4.0
