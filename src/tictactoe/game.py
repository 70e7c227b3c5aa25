"""
TicTacToe board model.

Board representation: list[int] of length 9, row-major
  - 0: empty
  - +1: X
  - -1: O

  0 | 1 | 2
  3 | 4 | 5
  6 | 7 | 8

Marks are +1 (X) or -1 (O); the opponent of a mark is its negation.
Functions here never check board shape - a board that is not 9 cells long
is a caller bug.
"""

from enum import IntEnum
from typing import List, Tuple

EMPTY = 0
X = +1
O = -1

# Winning lines (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


class Difficulty(IntEnum):
    """CPU skill level."""
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None


def opponent(mark: int) -> int:
    return -mark


def is_full(board: List[int]) -> bool:
    """True iff no cell is empty."""
    return EMPTY not in board


def empty_cells(board: List[int]) -> List[int]:
    """Return indices of empty cells in ascending order."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def has_won(board: List[int], mark: int) -> bool:
    """True iff any win line is filled with ``mark``."""
    for a, b, c in WIN_LINES:
        if board[a] == mark and board[b] == mark and board[c] == mark:
            return True
    return False


def winners_set(board: List[int]) -> set:
    """Return set of winners (+1, -1, or both if illegal)."""
    wins = set()
    for a, b, c in WIN_LINES:
        s = board[a] + board[b] + board[c]
        if s == 3:
            wins.add(X)
        elif s == -3:
            wins.add(O)
    return wins


def is_terminal(board: List[int]) -> Tuple[bool, int]:
    """
    Check if board is terminal.

    Returns:
        (is_terminal, winner) where winner is +1/-1/0
    """
    wset = winners_set(board)
    if len(wset) >= 2:
        # Both sides completed a line; only reachable on hand-built boards
        return True, 0
    if len(wset) == 1:
        return True, next(iter(wset))
    if is_full(board):
        return True, 0
    return False, 0


def side_to_move(board: List[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt = board.count(X)
    o_cnt = board.count(O)
    return X if x_cnt == o_cnt else O


def is_legal_board(board: List[int]) -> bool:
    """Check that the board can arise from X-first alternating play."""
    x_cnt = board.count(X)
    o_cnt = board.count(O)

    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        return False

    if len(winners_set(board)) >= 2:
        return False

    return True
