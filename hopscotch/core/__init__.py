"""Core game logic for the jump-and-erase board."""

from .state import BoardSnapshot, BoardState, IllegalMove, Move, Position
from .board import GameBoard
from .rules import (
    DIRECTION_NAMES,
    DIRECTIONS,
    apply_move,
    enumerate_legal_moves,
    has_legal_move,
    in_bounds,
    is_legal_move,
    jump_target,
)

__all__ = [
    "BoardState",
    "BoardSnapshot",
    "GameBoard",
    "IllegalMove",
    "Move",
    "Position",
    "DIRECTIONS",
    "DIRECTION_NAMES",
    "apply_move",
    "enumerate_legal_moves",
    "has_legal_move",
    "in_bounds",
    "is_legal_move",
    "jump_target",
]
