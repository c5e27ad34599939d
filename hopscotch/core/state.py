from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

GridArray = NDArray[np.int32]
BoolArray = NDArray[np.bool_]

# Convenient tuple alias used across modules
Position = Tuple[int, int]


class IllegalMove(ValueError):
    """Raised when a move is applied that is not currently a legal jump."""


@dataclass(frozen=True)
class Move:
    row: int
    col: int

    @property
    def target(self) -> Position:
        return (self.row, self.col)


@dataclass(eq=False)
class BoardState:
    grid: GridArray  # shape (N, N), dtype=np.int32, jump values, 0 once erased
    erased: BoolArray  # shape (N, N), dtype=bool
    position: Position

    @property
    def size(self) -> int:
        return int(self.grid.shape[0])

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    def value_at(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def is_erased(self, row: int, col: int) -> bool:
        return bool(self.erased[row, col])

    def erased_count(self) -> int:
        return int(np.count_nonzero(self.erased))

    def __repr__(self) -> str:
        rows = []
        for r in range(self.size):
            cells = []
            for c in range(self.size):
                if (r, c) == self.position:
                    cells.append("*")
                elif self.erased[r, c]:
                    cells.append(".")
                else:
                    cells.append(str(int(self.grid[r, c])))
            rows.append(" ".join(cells))
        return f"{type(self).__name__}(size={self.size}, position={self.position})\n" + "\n".join(rows)


@dataclass(eq=False, repr=False)
class BoardSnapshot(BoardState):
    """Independent copy of a board used for lookahead.

    A snapshot never shares storage with the board it was taken from, so
    mutating it through :func:`hopscotch.core.rules.apply_move` is always safe.
    """

    @classmethod
    def from_state(cls, state: BoardState) -> "BoardSnapshot":
        return cls(
            grid=state.grid.copy(),
            erased=state.erased.copy(),
            position=state.position,
        )

    def copy(self) -> "BoardSnapshot":
        return BoardSnapshot.from_state(self)
