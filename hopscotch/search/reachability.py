from __future__ import annotations

from collections import deque
from typing import Deque, Optional

import numpy as np

from hopscotch.core import DIRECTIONS, BoardState, Position

# Jump lengths tried from every cell. Grid values above this bound are not
# followed, so boards with larger values are under-approximated.
MAX_REACH_STEP = 9


def reachable_mask(state: BoardState, origin: Optional[Position] = None) -> np.ndarray:
    """Flood fill from ``origin`` trying every direction and every step length.

    Unlike the jump rule, the step length is not read from the board and the
    cells jumped over are not inspected; only the landing cell must be unerased.
    """
    size = state.size
    start = state.position if origin is None else origin
    reached = np.zeros((size, size), dtype=bool)
    reached[start] = True
    queue: Deque[Position] = deque([start])

    while queue:
        row, col = queue.popleft()
        for dr, dc in DIRECTIONS:
            for step in range(1, MAX_REACH_STEP + 1):
                r, c = row + dr * step, col + dc * step
                if not (0 <= r < size and 0 <= c < size):
                    break
                if reached[r, c] or state.erased[r, c]:
                    continue
                reached[r, c] = True
                queue.append((r, c))
    return reached


def count_isolated_cells(state: BoardState, origin: Optional[Position] = None) -> int:
    """Number of unerased cells the flood fill from ``origin`` never reaches."""
    reached = reachable_mask(state, origin)
    return int(np.count_nonzero(~state.erased & ~reached))


def connectivity_score(state: BoardState, origin: Optional[Position] = None) -> float:
    """1.0 when every live cell is reachable, lower as islands appear."""
    return 1.0 - count_isolated_cells(state, origin) / state.total_cells
