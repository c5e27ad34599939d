from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Union

from hopscotch.core import GameBoard, Move, Position
from hopscotch.io import BoardLayout, LayoutError, load_layout
from hopscotch.policy import DecisionPolicy, PolicyConfig

logger = logging.getLogger(__name__)

PolicyFactory = Callable[[GameBoard], DecisionPolicy]


@dataclass
class GameRecord:
    name: Optional[str]
    size: int
    score: int
    moves: int
    erased_cells: int
    path: List[Position] = field(default_factory=list)
    failed: bool = False

    @classmethod
    def unreadable(cls, name: Optional[str]) -> "GameRecord":
        return cls(name=name, size=0, score=0, moves=0, erased_cells=0, failed=True)

    @property
    def percentage_visited(self) -> float:
        if self.failed:
            return 0.0
        return 100.0 * self.erased_cells / (self.size * self.size)


@dataclass
class EvaluationResult:
    games_played: int
    average_score: float
    average_percentage: float
    min_percentage: float
    max_percentage: float
    records: List[GameRecord] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "games_played": self.games_played,
            "average_score": self.average_score,
            "average_percentage": self.average_percentage,
            "min_percentage": self.min_percentage,
            "max_percentage": self.max_percentage,
            "boards": [
                {
                    "name": record.name,
                    "size": record.size,
                    "score": record.score,
                    "percentage_visited": record.percentage_visited,
                    "failed": record.failed,
                }
                for record in self.records
            ],
        }


def default_policy_factory(config: Optional[PolicyConfig] = None) -> PolicyFactory:
    def factory(board: GameBoard) -> DecisionPolicy:
        return DecisionPolicy.for_board(board, config)

    return factory


def play_game(
    board: GameBoard,
    policy: DecisionPolicy,
    *,
    name: Optional[str] = None,
    on_move: Optional[Callable[[GameBoard, Move], None]] = None,
) -> GameRecord:
    """Let ``policy`` play ``board`` to the end. Mutates ``board``."""
    path: List[Position] = [board.position]
    while True:
        move = policy.select_move(board)
        if move is None:
            break
        board.play(move)
        path.append(move.target)
        if on_move is not None:
            on_move(board, move)

    return GameRecord(
        name=name,
        size=board.size,
        score=board.score,
        moves=len(path) - 1,
        erased_cells=board.erased_count(),
        path=path,
    )


def evaluate_layouts(
    layouts: Iterable[BoardLayout],
    policy_factory: Optional[PolicyFactory] = None,
) -> EvaluationResult:
    policy_factory = policy_factory or default_policy_factory()
    return summarise([_play_layout(layout, policy_factory) for layout in layouts])


def run_benchmark(
    paths: Sequence[Union[str, Path]],
    policy_factory: Optional[PolicyFactory] = None,
) -> EvaluationResult:
    """Play every layout file.

    Missing files are skipped. A file that exists but cannot be parsed still
    counts as a played board with 0% visited.
    """
    policy_factory = policy_factory or default_policy_factory()
    records: List[GameRecord] = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            logger.warning("Board file not found: %s", path)
            continue
        try:
            layout = load_layout(path)
        except LayoutError as exc:
            logger.warning("Scoring %s as 0%%: %s", path, exc)
            records.append(GameRecord.unreadable(path.name))
            continue
        records.append(_play_layout(layout, policy_factory))
    return summarise(records)


def _play_layout(layout: BoardLayout, policy_factory: PolicyFactory) -> GameRecord:
    board = layout.to_board()
    record = play_game(board, policy_factory(board), name=layout.name)
    logger.info("%s: score %d, %.2f%% visited", layout.name or "board", record.score, record.percentage_visited)
    return record


def summarise(records: Sequence[GameRecord]) -> EvaluationResult:
    if not records:
        return EvaluationResult(0, 0.0, 0.0, 0.0, 0.0, [])
    percentages = [record.percentage_visited for record in records]
    return EvaluationResult(
        games_played=len(records),
        average_score=sum(record.score for record in records) / len(records),
        average_percentage=sum(percentages) / len(percentages),
        min_percentage=min(percentages),
        max_percentage=max(percentages),
        records=list(records),
    )
