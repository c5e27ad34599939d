"""Board layout files.

A layout is plain text: the board size ``N`` on the first line, the starting
``row col`` (0-indexed) on the second, then ``N`` rows of ``N``
whitespace-separated non-negative jump values::

    4
    0 0
    1 1 1 1
    1 2 1 1
    1 1 3 1
    1 1 1 1
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from hopscotch.core import GameBoard, Position
from hopscotch.core.state import GridArray


class LayoutError(ValueError):
    """Raised for malformed layout text."""


@dataclass
class BoardLayout:
    size: int
    grid: GridArray
    start: Position
    name: Optional[str] = None

    def to_board(self) -> GameBoard:
        return GameBoard(self.grid, self.start)


def parse_layout(text: str, *, name: Optional[str] = None) -> BoardLayout:
    # Blank lines are skipped but keep their place in the line numbering.
    lines = [(no, line.strip()) for no, line in enumerate(text.splitlines(), 1) if line.strip()]
    if len(lines) < 2:
        raise LayoutError("Layout needs a size line and a start line.")

    size_no, size_line = lines[0]
    size = _parse_ints(size_line, 1, line_no=size_no)[0]
    if size <= 0:
        raise LayoutError(f"line {size_no}: board size must be positive, got {size}.")
    start_no, start_line = lines[1]
    start_row, start_col = _parse_ints(start_line, 2, line_no=start_no)
    if not (0 <= start_row < size and 0 <= start_col < size):
        raise LayoutError(f"line {start_no}: start ({start_row}, {start_col}) is outside a {size}x{size} board.")

    rows = lines[2:]
    if len(rows) != size:
        raise LayoutError(f"Expected {size} grid rows, found {len(rows)}.")

    grid = np.zeros((size, size), dtype=np.int32)
    for index, (line_no, line) in enumerate(rows):
        values = _parse_ints(line, size, line_no=line_no)
        if any(v < 0 for v in values):
            raise LayoutError(f"line {line_no}: jump values must be non-negative.")
        grid[index, :] = values
    return BoardLayout(size=size, grid=grid, start=(start_row, start_col), name=name)


def load_layout(path: Union[str, Path]) -> BoardLayout:
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise LayoutError(f"Layout file {path} is empty.")
    return parse_layout(text, name=path.name)


def format_layout(layout: BoardLayout) -> str:
    lines = [str(layout.size), f"{layout.start[0]} {layout.start[1]}"]
    for row in layout.grid:
        lines.append(" ".join(str(int(v)) for v in row))
    return "\n".join(lines) + "\n"


def save_layout(layout: BoardLayout, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_layout(layout), encoding="utf-8")


def random_layout(
    size: int,
    rng: Optional[np.random.Generator] = None,
    *,
    max_value: int = 9,
    start: Optional[Position] = None,
) -> BoardLayout:
    if size <= 0:
        raise ValueError("size must be positive.")
    rng = rng or np.random.default_rng()
    grid = rng.integers(1, max_value + 1, size=(size, size)).astype(np.int32)
    if start is None:
        start = (int(rng.integers(size)), int(rng.integers(size)))
    return BoardLayout(size=size, grid=grid, start=start)


def _parse_ints(line: str, expected: int, *, line_no: int) -> List[int]:
    tokens = line.split()
    if len(tokens) != expected:
        raise LayoutError(f"line {line_no}: expected {expected} integers, found {len(tokens)}.")
    try:
        return [int(token) for token in tokens]
    except ValueError as exc:
        raise LayoutError(f"line {line_no}: non-numeric value in {line!r}.") from exc
