"""Lookahead utilities: reachability, move evaluation and survival search."""

from .reachability import MAX_REACH_STEP, connectivity_score, count_isolated_cells, reachable_mask
from .evaluator import EvaluatorConfig, MoveEvaluator, MoveScore, area_control
from .survival import DEFAULT_MAX_DEPTH, SurvivalSearch

__all__ = [
    "MAX_REACH_STEP",
    "connectivity_score",
    "count_isolated_cells",
    "reachable_mask",
    "EvaluatorConfig",
    "MoveEvaluator",
    "MoveScore",
    "area_control",
    "DEFAULT_MAX_DEPTH",
    "SurvivalSearch",
]
