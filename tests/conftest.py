import pytest

from tictactoe.game import EMPTY, O, X


@pytest.fixture
def empty_board():
    return [EMPTY] * 9


@pytest.fixture
def fork_trap_board():
    """O to move; either free corner lets X fork."""
    return [
        EMPTY, EMPTY, X,
        EMPTY, O, EMPTY,
        X, EMPTY, EMPTY,
    ]
