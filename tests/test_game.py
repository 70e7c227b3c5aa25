import pytest

from tictactoe.game import (
    EMPTY,
    O,
    WIN_LINES,
    X,
    Difficulty,
    empty_cells,
    has_won,
    is_full,
    is_legal_board,
    is_terminal,
    opponent,
    side_to_move,
)


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_has_won_each_line(line, mark):
    board = [EMPTY] * 9
    for i in line:
        board[i] = mark
    assert has_won(board, mark)
    assert not has_won(board, opponent(mark))


def test_win_lines_cover_rows_cols_diagonals():
    assert len(WIN_LINES) == 8
    assert len(set(WIN_LINES)) == 8
    assert (0, 4, 8) in WIN_LINES and (2, 4, 6) in WIN_LINES


def test_has_won_needs_three_of_same_mark():
    board = [X, X, O, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]
    assert not has_won(board, X)
    assert not has_won(board, O)


def test_empty_cells_ascending(empty_board):
    assert empty_cells(empty_board) == list(range(9))
    board = [X, EMPTY, O, EMPTY, X, EMPTY, O, EMPTY, EMPTY]
    assert empty_cells(board) == [1, 3, 5, 7, 8]


def test_is_full():
    full = [X, O, X, X, O, O, O, X, X]
    assert is_full(full)
    assert empty_cells(full) == []
    assert not is_full(full[:8] + [EMPTY])


def test_is_terminal():
    assert is_terminal([EMPTY] * 9) == (False, 0)
    assert is_terminal([X, X, X, O, O, EMPTY, EMPTY, EMPTY, EMPTY]) == (True, X)
    assert is_terminal([X, O, X, X, O, O, O, X, X]) == (True, 0)


def test_side_to_move_and_legality():
    assert side_to_move([EMPTY] * 9) == X
    assert side_to_move([X] + [EMPTY] * 8) == O
    assert is_legal_board([X, O] + [EMPTY] * 7)
    assert not is_legal_board([O] + [EMPTY] * 8)
    assert not is_legal_board([X, X, X, O, O, O, EMPTY, EMPTY, EMPTY])


def test_difficulty_from_name():
    assert Difficulty.from_name("medium") is Difficulty.MEDIUM
    assert Difficulty.from_name(" HARD ") is Difficulty.HARD
    with pytest.raises(ValueError):
        Difficulty.from_name("impossible")
