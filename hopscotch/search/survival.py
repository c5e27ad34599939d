from __future__ import annotations

from hopscotch.core import BoardSnapshot, BoardState, Move, apply_move, enumerate_legal_moves

DEFAULT_MAX_DEPTH = 8


class SurvivalSearch:
    """Depth-limited exhaustive search for the longest forced run of moves.

    The candidate move itself counts as depth 1. Search stops as soon as any
    line reaches ``max_depth``, which cannot change the reported maximum.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1.")
        self.max_depth = max_depth
        self.nodes_visited = 0

    def survival_depth(self, state: BoardState, move: Move) -> int:
        simulation = apply_move(BoardSnapshot.from_state(state), move)
        return self._search(simulation, 1)

    def _search(self, snapshot: BoardSnapshot, depth: int) -> int:
        self.nodes_visited += 1
        if depth >= self.max_depth:
            return depth
        next_moves = enumerate_legal_moves(snapshot)
        if not next_moves:
            return depth

        deepest = depth
        for move in next_moves:
            child = apply_move(snapshot.copy(), move)
            deepest = max(deepest, self._search(child, depth + 1))
            if deepest >= self.max_depth:
                break
        return deepest
