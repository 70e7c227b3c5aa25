"""
Exact TicTacToe solver with caching.

Win/draw/loss ground truth for checking the CPU's choices. Unlike the
search engine it copies boards, memoizes every position and reports all
optimal moves rather than one.
"""

from typing import Dict, Iterator, List, Tuple

from .game import EMPTY, O, X, empty_cells, is_legal_board, is_terminal


# Cache: (board_tuple, player) -> (value, best_moves_tuple)
_SOLVE_CACHE: Dict[Tuple[Tuple[int, ...], int], Tuple[int, Tuple[int, ...]]] = {}


def solve(board: List[int], player: int) -> Tuple[int, List[int]]:
    """
    Compute game value and optimal moves from current state.

    Args:
        board: Current board state
        player: Side to move (+1 or -1)

    Returns:
        (value, best_moves) where:
        - value: +1 (win), 0 (draw), -1 (loss) from the side to move
        - best_moves: list of actions achieving that value
    """
    key = (tuple(board), player)
    if key in _SOLVE_CACHE:
        v, best = _SOLVE_CACHE[key]
        return v, list(best)

    done, winner = is_terminal(board)
    if done:
        if winner == 0:
            v = 0
        elif winner == player:
            v = +1
        else:
            v = -1
        _SOLVE_CACHE[key] = (v, tuple())
        return v, []

    best_v = -2
    best_moves: List[int] = []

    for action in empty_cells(board):
        next_board = board[:]
        next_board[action] = player
        child_v, _ = solve(next_board, -player)
        v_here = -child_v  # Negate for opponent's perspective

        if v_here > best_v:
            best_v = v_here
            best_moves = [action]
        elif v_here == best_v:
            best_moves.append(action)

    _SOLVE_CACHE[key] = (best_v, tuple(best_moves))
    return best_v, best_moves


def clear_cache():
    """Clear solver cache."""
    _SOLVE_CACHE.clear()


def cache_size() -> int:
    """Return current cache size."""
    return len(_SOLVE_CACHE)


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[List[int], int]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, side_to_move) tuples, 4520 in total.
    """
    digit_to_cell = (EMPTY, X, O)
    for n in range(3**9):
        # Decode base-3 representation
        x = n
        board = [EMPTY] * 9
        for i in range(9):
            board[i] = digit_to_cell[x % 3]
            x //= 3

        if not is_legal_board(board):
            continue

        done, _ = is_terminal(board)
        if done:
            continue

        player = X if board.count(X) == board.count(O) else O
        yield board, player
