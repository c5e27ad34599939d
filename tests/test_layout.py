import numpy as np
import pytest

from hopscotch.io import LayoutError, format_layout, load_layout, parse_layout, random_layout, save_layout

SAMPLE = """4
1 2
1 2 3 4
2 3 4 1
3 4 1 2
4 1 2 3
"""


def test_parse_layout() -> None:
    layout = parse_layout(SAMPLE)
    assert layout.size == 4
    assert layout.start == (1, 2)
    assert layout.grid.dtype == np.int32
    assert layout.grid[3].tolist() == [4, 1, 2, 3]


def test_board_from_layout_erases_start() -> None:
    layout = parse_layout(SAMPLE)
    board = layout.to_board()
    assert board.value_at(1, 2) == 0
    assert board.is_erased(1, 2)
    # the layout itself is not modified
    assert layout.grid[1, 2] == 4


def test_load_and_save_layout(tmp_path) -> None:
    path = tmp_path / "boards" / "board_4x4_1.dat"
    save_layout(parse_layout(SAMPLE), path)
    layout = load_layout(path)
    assert layout.name == "board_4x4_1.dat"
    assert format_layout(layout) == SAMPLE


@pytest.mark.parametrize(
    "text",
    [
        "",
        "3\n",
        "3\n0\n1 1 1\n1 1 1\n1 1 1\n",
        "3\n0 5\n1 1 1\n1 1 1\n1 1 1\n",
        "3\n0 0\n1 1 1\n1 1 1\n",
        "3\n0 0\n1 1 1\n1 x 1\n1 1 1\n",
        "3\n0 0\n1 1 1\n1 1\n1 1 1\n",
        "3\n0 0\n1 1 1\n1 -1 1\n1 1 1\n",
        "0\n0 0\n",
        "3\n0 0\n1 1 1\n1 1 1 1\n1 1 1\n",
        "3\n0 0\n1 1 1\n1 1 1\n1 1 1\n1 1 1\n",
        "3\n0 0 1\n1 1 1\n1 1 1\n1 1 1\n",
    ],
)
def test_malformed_layouts(text: str) -> None:
    with pytest.raises(LayoutError):
        parse_layout(text)


def test_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.dat"
    path.write_text("")
    with pytest.raises(LayoutError):
        load_layout(path)


def test_random_layout_is_seeded() -> None:
    a = random_layout(6, np.random.default_rng(9))
    b = random_layout(6, np.random.default_rng(9))
    assert np.array_equal(a.grid, b.grid)
    assert a.start == b.start
    assert a.grid.min() >= 1
    assert a.grid.max() <= 9


def test_error_line_counts_blank_lines() -> None:
    text = "3\n\n0 0\n\n1 1 1\n1 x 1\n1 1 1\n"
    with pytest.raises(LayoutError, match="line 6"):
        parse_layout(text)

    layout = parse_layout("3\n\n0 0\n\n1 1 1\n1 2 1\n1 1 1\n")
    assert layout.grid[1, 1] == 2
