from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional

from hopscotch.core import GameBoard, Move
from hopscotch.search import DEFAULT_MAX_DEPTH, EvaluatorConfig, MoveEvaluator, SurvivalSearch

logger = logging.getLogger(__name__)


@dataclass
class PolicyConfig:
    endgame_threshold: float = 0.5
    survival_depth: int = DEFAULT_MAX_DEPTH
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "PolicyConfig":
        data = dict(data or {})
        evaluator_data = data.pop("evaluator", None) or {}
        _reject_unknown_keys(cls, data, "policy")
        _reject_unknown_keys(EvaluatorConfig, evaluator_data, "evaluator")
        return cls(evaluator=EvaluatorConfig(**evaluator_data), **data)


def _reject_unknown_keys(config_cls, data: Dict, section: str) -> None:
    known = {f.name for f in fields(config_cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown {section} config keys: {', '.join(unknown)}")


class DecisionPolicy:
    """Chooses the next jump for a single game.

    Before half of the board has been visited, moves are ranked by
    :class:`MoveEvaluator`; afterwards by :class:`SurvivalSearch`. The visited
    count is tracked abstractly (one cell per chosen move) rather than read
    back from the board. One instance per game.
    """

    def __init__(self, size: int, config: Optional[PolicyConfig] = None) -> None:
        self.size = size
        self.config = config or PolicyConfig()
        self.evaluator = MoveEvaluator(self.config.evaluator)
        self.survival = SurvivalSearch(self.config.survival_depth)
        self.moves_made = 0
        self.cells_visited = 1

    @classmethod
    def for_board(cls, board: GameBoard, config: Optional[PolicyConfig] = None) -> "DecisionPolicy":
        return cls(board.size, config)

    @property
    def visited_fraction(self) -> float:
        return self.cells_visited / (self.size * self.size)

    @property
    def in_endgame(self) -> bool:
        return self.visited_fraction >= self.config.endgame_threshold

    def select_move(self, board: GameBoard) -> Optional[Move]:
        """Return the move to play next, or ``None`` when the game is over."""
        legal = board.legal_moves()
        if not legal:
            return None

        if len(legal) == 1:
            choice = legal[0]
        elif self.in_endgame:
            choice = self._select_by_survival(board, legal)
        else:
            choice = self._select_by_evaluation(board, legal)

        logger.debug(
            "move %d: %s from %d candidates (%s)",
            self.moves_made + 1,
            choice.target,
            len(legal),
            "endgame" if self.in_endgame else "midgame",
        )
        self.cells_visited += 1
        self.moves_made += 1
        return choice

    # ------------------------------------------------------------------
    def _select_by_evaluation(self, board: GameBoard, legal: List[Move]) -> Move:
        state = board.snapshot()
        best_move = legal[0]
        best_score = float("-inf")
        for move in legal:
            score = self.evaluator.score(state, move, moves_made=self.moves_made)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move

    def _select_by_survival(self, board: GameBoard, legal: List[Move]) -> Move:
        state = board.snapshot()
        nodes_before = self.survival.nodes_visited
        best_move = legal[0]
        best_depth = -1
        for move in legal:
            depth = self.survival.survival_depth(state, move)
            if depth > best_depth:
                best_depth = depth
                best_move = move
        logger.debug(
            "survival search: depth %d for %s, %d nodes",
            best_depth,
            best_move.target,
            self.survival.nodes_visited - nodes_before,
        )
        return best_move
