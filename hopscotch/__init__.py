"""Jump-and-erase board engine and search-based player."""

from . import core, env, evaluation, io, policy, search
from .core import BoardSnapshot, BoardState, GameBoard, IllegalMove, Move
from .env import JumpEraseEnv
from .evaluation import EvaluationResult, GameRecord, evaluate_layouts, play_game, run_benchmark
from .io import BoardLayout, LayoutError, load_layout, parse_layout
from .policy import DecisionPolicy, PolicyConfig
from .search import EvaluatorConfig, MoveEvaluator, SurvivalSearch

__all__ = [
    "core",
    "env",
    "evaluation",
    "io",
    "policy",
    "search",
    "BoardSnapshot",
    "BoardState",
    "GameBoard",
    "IllegalMove",
    "Move",
    "JumpEraseEnv",
    "EvaluationResult",
    "GameRecord",
    "evaluate_layouts",
    "play_game",
    "run_benchmark",
    "BoardLayout",
    "LayoutError",
    "load_layout",
    "parse_layout",
    "DecisionPolicy",
    "PolicyConfig",
    "EvaluatorConfig",
    "MoveEvaluator",
    "SurvivalSearch",
]
