"""
TicTacToe against a minimax CPU opponent.

The CPU searches the game tree with depth-adjusted minimax; difficulty
controls how deep it looks (Easy: random, Medium: two plies, Hard: full).
"""

from .game import (
    EMPTY,
    X,
    O,
    WIN_LINES,
    Difficulty,
    opponent,
    is_full,
    empty_cells,
    has_won,
    is_terminal,
    side_to_move,
)
from .minimax import evaluate, select_move
from .solver import solve, iter_all_legal_nonterminal_states
from .render import render_board
from .session import GameConfig, GameResult, InvalidMoveError, play_game, parse_move, outcome
from .eval import (
    cpu_agent,
    random_agent,
    play_match,
    eval_head_to_head,
    eval_solver_agreement,
)

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "WIN_LINES",
    "Difficulty",
    "opponent",
    "is_full",
    "empty_cells",
    "has_won",
    "is_terminal",
    "side_to_move",
    "evaluate",
    "select_move",
    "solve",
    "iter_all_legal_nonterminal_states",
    "render_board",
    "GameConfig",
    "GameResult",
    "InvalidMoveError",
    "play_game",
    "parse_move",
    "outcome",
    "cpu_agent",
    "random_agent",
    "play_match",
    "eval_head_to_head",
    "eval_solver_agreement",
]
