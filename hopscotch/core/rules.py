from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .state import BoardState, IllegalMove, Move, Position

# N, S, W, E, NW, NE, SW, SE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)
DIRECTION_NAMES: Tuple[str, ...] = ("N", "S", "W", "E", "NW", "NE", "SW", "SE")


def in_bounds(size: int, row: int, col: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def jump_target(state: BoardState, direction_index: int) -> Optional[Position]:
    """Return the landing cell of a jump in the given direction, or ``None``."""
    size = state.size
    row, col = state.position
    dr, dc = DIRECTIONS[direction_index]

    first_row, first_col = row + dr, col + dc
    if not in_bounds(size, first_row, first_col) or state.erased[first_row, first_col]:
        return None

    # The jump distance comes from the first cell, not the current one.
    step = int(state.grid[first_row, first_col])
    target_row, target_col = row + dr * step, col + dc * step
    if not in_bounds(size, target_row, target_col) or state.erased[target_row, target_col]:
        return None

    if not _path_clear(state, (row, col), (target_row, target_col), dr, dc):
        return None
    return (target_row, target_col)


def enumerate_legal_moves(state: BoardState) -> List[Move]:
    legal: List[Move] = []
    for direction_index in range(len(DIRECTIONS)):
        target = jump_target(state, direction_index)
        if target is not None:
            legal.append(Move(*target))
    return legal


def is_legal_move(state: BoardState, move: Move) -> bool:
    return move in enumerate_legal_moves(state)


def has_legal_move(state: BoardState) -> bool:
    return any(jump_target(state, idx) is not None for idx in range(len(DIRECTIONS)))


def apply_move(state: BoardState, move: Move) -> BoardState:
    """Erase the jump path and move the token. Mutates ``state`` in place."""
    if not is_legal_move(state, move):
        raise IllegalMove(f"{move.target} is not a legal jump from {state.position}.")

    row, col = state.position
    dr = int(np.sign(move.row - row))
    dc = int(np.sign(move.col - col))
    while (row, col) != move.target:
        row += dr
        col += dc
        state.erased[row, col] = True
        state.grid[row, col] = 0

    state.position = move.target
    return state


def _path_clear(state: BoardState, origin: Position, target: Position, dr: int, dc: int) -> bool:
    size = state.size
    r, c = origin[0] + dr, origin[1] + dc
    while (r, c) != target:
        if not in_bounds(size, r, c) or state.erased[r, c]:
            return False
        r += dr
        c += dc
    return True
