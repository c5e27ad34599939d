"""Playing boards to completion and aggregating results."""

from .match import (
    EvaluationResult,
    GameRecord,
    default_policy_factory,
    evaluate_layouts,
    play_game,
    run_benchmark,
    summarise,
)

__all__ = [
    "EvaluationResult",
    "GameRecord",
    "default_policy_factory",
    "evaluate_layouts",
    "play_game",
    "run_benchmark",
    "summarise",
]
