from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np

from .rules import apply_move, enumerate_legal_moves, has_legal_move, is_legal_move
from .state import BoardSnapshot, BoardState, BoolArray, GridArray, IllegalMove, Move, Position

GridLike = Union[GridArray, Sequence[Sequence[int]]]


class GameBoard:
    """The live board of a game: grid, erased cells, token position and score.

    The starting cell is erased on construction regardless of its loaded
    value, and the starting placement counts as the first point of score.
    """

    def __init__(self, grid: GridLike, start: Position) -> None:
        values = np.array(grid, dtype=np.int32)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f"Board grid must be square, got shape {values.shape}.")
        if values.shape[0] == 0:
            raise ValueError("Board grid must not be empty.")
        if np.any(values < 0):
            raise ValueError("Jump values must be non-negative.")
        start_row, start_col = int(start[0]), int(start[1])
        size = values.shape[0]
        if not (0 <= start_row < size and 0 <= start_col < size):
            raise ValueError(f"Start position {start} is outside a {size}x{size} board.")

        erased = np.zeros_like(values, dtype=bool)
        erased[start_row, start_col] = True
        values[start_row, start_col] = 0

        self._state = BoardState(grid=values, erased=erased, position=(start_row, start_col))
        self._score = 1

    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._state.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def is_game_over(self) -> bool:
        return not has_legal_move(self._state)

    def value_at(self, row: int, col: int) -> int:
        return self._state.value_at(row, col)

    def is_erased(self, row: int, col: int) -> bool:
        return self._state.is_erased(row, col)

    def erased_count(self) -> int:
        return self._state.erased_count()

    def erased_mask(self) -> BoolArray:
        mask = self._state.erased.copy()
        mask.flags.writeable = False
        return mask

    def grid_values(self) -> GridArray:
        values = self._state.grid.copy()
        values.flags.writeable = False
        return values

    def legal_moves(self) -> List[Move]:
        return enumerate_legal_moves(self._state)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot.from_state(self._state)

    # ------------------------------------------------------------------
    def apply_move(self, move: Move) -> bool:
        """Apply ``move`` if it is legal. Returns ``False`` and leaves the board untouched otherwise."""
        if not is_legal_move(self._state, move):
            return False
        apply_move(self._state, move)
        self._score += 1
        return True

    def play(self, move: Move) -> None:
        if not self.apply_move(move):
            raise IllegalMove(f"{move.target} is not a legal jump from {self.position}.")

    def __repr__(self) -> str:
        return f"GameBoard(score={self._score}, {self._state!r})"
