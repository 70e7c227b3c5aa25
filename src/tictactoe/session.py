"""
Interactive game loop: a human against the CPU, or two humans.

All terminal I/O goes through injectable ``input_fn`` / ``output_fn`` /
``sleep_fn`` so the loop can be driven from tests.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .game import EMPTY, O, X, Difficulty, has_won, is_full, opponent
from .minimax import select_move
from .render import SYMBOLS, emit, instructions, render_board

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit")
HINT_WORDS = ("h", "hint")


class InvalidMoveError(ValueError):
    """Raised when a typed move is not a free cell 1-9."""


@dataclass
class GameConfig:
    """Game configuration."""

    # CPU strength
    difficulty: Difficulty = Difficulty.HARD

    # Mark for the human (the other one goes to the CPU)
    human_mark: int = X

    # Both marks entered at the prompt, no CPU
    two_player: bool = False

    # Mark that moves first; None draws it at random
    first: Optional[int] = None

    # Pause before the CPU plays (seconds)
    cpu_delay: float = 1.0

    # Seeds first-player draw and Easy moves
    seed: Optional[int] = None


@dataclass
class GameResult:
    """Final state of a game."""
    winner: Optional[int]  # +1/-1, 0 for tie, None if quit
    board: List[int]
    quit: bool = False


def parse_mark(text: str) -> int:
    """Parse a symbol choice: 1/x for X, 2/o for O."""
    t = text.strip().lower()
    if t in ("1", "x"):
        return X
    if t in ("2", "o"):
        return O
    raise ValueError("Invalid input. Please enter <1> to be X or <2> to be O ...")


def parse_move(text: str, board: List[int]) -> int:
    """
    Parse a 1-based cell number into a board index.

    Raises:
        InvalidMoveError: not a number 1-9, or the cell is taken
    """
    t = text.strip()
    if len(t) != 1 or t not in "123456789":
        raise InvalidMoveError("Invalid input. Enter a number between 1 - 9 ...")
    idx = int(t) - 1
    if board[idx] != EMPTY:
        raise InvalidMoveError("This grid is taken. Choose an empty one.")
    return idx


def outcome(board: List[int]) -> Optional[int]:
    """Winner mark, 0 for a tie, None while the game is still on."""
    if has_won(board, X):
        return X
    if has_won(board, O):
        return O
    if is_full(board):
        return 0
    return None


def hint(board: List[int], mark: int) -> int:
    """Best move for ``mark`` according to the full-depth search."""
    return select_move(board, mark, mark, Difficulty.HARD)


def _announce(winner: int, config: GameConfig) -> str:
    if winner == 0:
        return "--- TIE ---\n"
    if config.two_player:
        return f"--- {SYMBOLS[winner]} WINS ---\n"
    if winner == config.human_mark:
        return "--- YOU WIN ---\n"
    return "--- YOU LOSE ---\n"


def _read(input_fn: Callable[[str], str], prompt: str) -> Optional[str]:
    try:
        return input_fn(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


def play_game(
    config: GameConfig,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[..., None] = print,
    sleep_fn: Callable[[float], None] = time.sleep,
) -> GameResult:
    """
    Run one game to completion or until the human quits.

    Returns:
        GameResult with the final board
    """
    rng = np.random.default_rng(config.seed)
    human = config.human_mark
    cpu = opponent(human)

    def show(lines, align=False):
        emit(lines, output_fn, align=align, sleep_fn=sleep_fn)

    board = [EMPTY] * 9
    turn = config.first if config.first is not None else (X if rng.random() < 0.5 else O)

    show(instructions(), align=True)
    show(render_board(board))

    while True:
        winner = outcome(board)
        if winner is not None:
            show(["\n", _announce(winner, config)])
            logger.debug("game over winner=%+d board=%s", winner, board)
            return GameResult(winner=winner, board=board)

        if config.two_player or turn == human:
            label = f"{SYMBOLS[turn]}'s TURN" if config.two_player else "YOUR TURN"
            show(["\n", f"--- {label} ---\n"])
            text = _read(input_fn, "Choose a spot => ")
            if text is None or text.strip().lower() in QUIT_WORDS:
                return GameResult(winner=None, board=board, quit=True)

            if text.strip().lower() in HINT_WORDS:
                output_fn(f"Hint: try cell {hint(board, turn) + 1}\n")
                continue

            try:
                idx = parse_move(text, board)
            except InvalidMoveError as e:
                output_fn(f"{e}\n")
                show(render_board(board))
                continue
            board[idx] = turn
        else:
            show(["\n", "--- COMPUTER's TURN ---\n"])
            if config.cpu_delay > 0:
                sleep_fn(config.cpu_delay)
            idx = select_move(board, human, cpu, config.difficulty, rng)
            board[idx] = cpu
            logger.debug("cpu %s played %d", config.difficulty.name, idx)

        turn = opponent(turn)
        output_fn("\n")
        show(render_board(board))
