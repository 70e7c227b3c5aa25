from tictactoe.game import EMPTY, O, X, is_terminal
from tictactoe.solver import cache_size, clear_cache, iter_all_legal_nonterminal_states, solve


def test_empty_board_is_a_draw_from_every_cell(empty_board):
    value, best = solve(empty_board, X)
    assert value == 0
    assert best == list(range(9))


def test_solve_finds_win_and_block():
    board = [X, X, EMPTY, O, O, EMPTY, EMPTY, EMPTY, EMPTY]
    value, best = solve(board, X)
    assert value == 1
    assert 2 in best

    value, best = solve(board, O)
    assert value == 1
    assert 5 in best


def test_cache_fills_and_clears():
    clear_cache()
    assert cache_size() == 0
    solve([X, EMPTY, EMPTY, EMPTY, O, EMPTY, EMPTY, EMPTY, EMPTY], X)
    assert cache_size() > 0
    clear_cache()
    assert cache_size() == 0


def test_all_nonterminal_states():
    states = list(iter_all_legal_nonterminal_states())
    assert len(states) == 4520
    for board, player in states:
        assert not is_terminal(board)[0]
        assert player == (X if board.count(X) == board.count(O) else O)
