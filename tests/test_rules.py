import numpy as np
import pytest

from hopscotch.core import (
    BoardSnapshot,
    GameBoard,
    IllegalMove,
    Move,
    apply_move,
    enumerate_legal_moves,
)
from hopscotch.io import random_layout


def ones_board(size: int = 4, start=(0, 0)) -> GameBoard:
    return GameBoard(np.ones((size, size), dtype=np.int32), start)


def dead_end_board() -> GameBoard:
    grid = [
        [5, 1, 0],
        [0, 0, 0],
        [0, 0, 0],
    ]
    return GameBoard(grid, (0, 0))


def test_start_cell_is_erased_and_zeroed() -> None:
    board = GameBoard([[1, 2], [3, 4]], (1, 0))
    assert board.is_erased(1, 0)
    assert board.value_at(1, 0) == 0
    assert board.score == 1
    assert board.erased_count() == 1


def test_corner_start_on_ones_has_three_moves() -> None:
    board = ones_board()
    assert board.legal_moves() == [Move(1, 0), Move(0, 1), Move(1, 1)]


def test_step_is_read_from_first_cell() -> None:
    grid = np.ones((5, 5), dtype=np.int32)
    grid[0, 1] = 3
    grid[0, 0] = 9
    board = GameBoard(grid, (0, 0))
    assert Move(0, 3) in board.legal_moves()
    assert Move(0, 1) not in board.legal_moves()


def test_apply_move_erases_path_only() -> None:
    grid = np.ones((5, 5), dtype=np.int32)
    grid[0, 1] = 3
    board = GameBoard(grid, (0, 0))
    before = board.erased_mask().copy()

    assert board.apply_move(Move(0, 3))

    for col in (1, 2, 3):
        assert board.is_erased(0, col)
        assert board.value_at(0, col) == 0
    changed = board.erased_mask() != before
    assert set(zip(*np.nonzero(changed))) == {(0, 1), (0, 2), (0, 3)}
    assert board.position == (0, 3)
    assert board.score == 2


def test_blocked_path_is_not_legal() -> None:
    grid = np.ones((5, 5), dtype=np.int32)
    grid[0, 1] = 3
    state = GameBoard(grid, (0, 0)).snapshot()
    state.erased[0, 2] = True

    assert Move(0, 3) not in enumerate_legal_moves(state)


def test_zero_step_and_out_of_bounds_are_not_moves() -> None:
    zeros = GameBoard(np.zeros((3, 3), dtype=np.int32), (1, 1))
    assert zeros.legal_moves() == []

    far = GameBoard(np.full((3, 3), 5, dtype=np.int32), (1, 1))
    assert far.legal_moves() == []
    assert far.is_game_over


def test_illegal_move_leaves_board_unchanged() -> None:
    board = ones_board()
    snapshot_before = board.snapshot()

    assert not board.apply_move(Move(3, 3))
    assert board.score == 1
    assert board.position == (0, 0)
    assert np.array_equal(board.erased_mask(), snapshot_before.erased)

    with pytest.raises(IllegalMove):
        board.play(Move(0, 0))


def test_rules_apply_move_raises_on_illegal_target() -> None:
    state = ones_board().snapshot()
    with pytest.raises(IllegalMove):
        apply_move(state, Move(2, 2))
    assert state.position == (0, 0)
    assert state.erased_count() == 1


def test_legal_moves_are_idempotent() -> None:
    board = random_layout(7, np.random.default_rng(3)).to_board()
    assert board.legal_moves() == board.legal_moves()


def test_game_over_after_last_move() -> None:
    board = dead_end_board()
    assert board.legal_moves() == [Move(0, 1)]
    assert not board.is_game_over

    board.play(Move(0, 1))

    assert board.legal_moves() == []
    assert board.is_game_over
    for move in (Move(0, 2), Move(1, 1), Move(0, 0)):
        assert not board.apply_move(move)
    assert board.score == 2


def test_generated_moves_never_cross_erased_cells() -> None:
    board = random_layout(8, np.random.default_rng(11)).to_board()
    while not board.is_game_over:
        row, col = board.position
        for move in board.legal_moves():
            dr = np.sign(move.row - row)
            dc = np.sign(move.col - col)
            r, c = row + dr, col + dc
            while True:
                assert not board.is_erased(r, c)
                if (r, c) == move.target:
                    break
                r += dr
                c += dc
        board.play(board.legal_moves()[-1])


def test_snapshot_is_independent() -> None:
    board = ones_board()
    snapshot = board.snapshot()
    assert isinstance(snapshot, BoardSnapshot)

    apply_move(snapshot, Move(1, 1))
    assert board.position == (0, 0)
    assert not board.is_erased(1, 1)

    sibling = snapshot.copy()
    apply_move(sibling, enumerate_legal_moves(sibling)[0])
    assert snapshot.erased_count() == 2
    assert sibling.erased_count() == 3


def test_erased_mask_is_read_only() -> None:
    board = ones_board()
    mask = board.erased_mask()
    with pytest.raises(ValueError):
        mask[0, 1] = True


def test_non_square_grid_is_rejected() -> None:
    with pytest.raises(ValueError):
        GameBoard([[1, 2, 3], [4, 5, 6]], (0, 0))
    with pytest.raises(ValueError):
        GameBoard([[1, 1], [1, 1]], (2, 0))
