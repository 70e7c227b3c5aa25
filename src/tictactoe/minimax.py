"""
Depth-adjusted minimax search for the CPU opponent.

Scores are taken from the viewpoint of a fixed ``player`` mark, whichever
side is moving:
  - ``10 - depth``: player has a completed line
  - ``depth - 10``: opponent has a completed line
  - ``0``: tie (or Medium's cutoff)

Shallower wins score higher and distant losses score closer to zero, so the
search prefers the fastest win and the slowest loss.

The board is searched in place. Every mark placed while exploring a branch
is cleared before that branch returns, so callers get their board back
unchanged and no copies are made per node.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from .game import EMPTY, Difficulty, empty_cells, has_won

logger = logging.getLogger(__name__)

WIN_SCORE = 10

# Outside [-WIN_SCORE, WIN_SCORE] so the first candidate always replaces it
SEED_SCORE = 100

# Deepest node Medium still expands
MEDIUM_MAX_DEPTH = 1


def evaluate(
    board: List[int],
    depth: int,
    player: int,
    mover: int,
    difficulty: Difficulty,
) -> int:
    """
    Score ``board`` for ``player`` with ``mover`` to place the next mark.

    Medium stops expanding below depth 1: nodes deeper than that score 0
    unless they are already won or full. That gives a two-ply lookahead
    which sees immediate threats and nothing further.

    Args:
        board: 9-cell board, mutated during the search and restored
        depth: 0 at the root call, +1 per ply
        player: mark scores are computed for (the maximizer)
        mover: mark placed at this node
        difficulty: MEDIUM enables the depth cutoff; anything else searches fully

    Returns:
        Score in [-10, 10]
    """
    spots = empty_cells(board)

    if has_won(board, player):
        return WIN_SCORE - depth
    if has_won(board, -player):
        return depth - WIN_SCORE
    if not spots:
        return 0

    scores: List[int] = []

    if difficulty != Difficulty.MEDIUM or depth <= MEDIUM_MAX_DEPTH:
        for m in spots:
            board[m] = mover
            try:
                scores.append(evaluate(board, depth + 1, player, -mover, difficulty))
            finally:
                board[m] = EMPTY

    if not scores:
        return 0
    return max(scores) if mover == player else min(scores)


def select_move(
    board: List[int],
    player: int,
    mover: int,
    difficulty: Difficulty,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Pick the cell ``mover`` should take.

    When ``mover == player`` the highest score wins, otherwise the lowest.
    Ties go to the later cell (``>=`` / ``<=`` while scanning upwards), so
    the result is deterministic for Medium and Hard.

    The board must have at least one empty cell and no winner; this is not
    checked.

    Args:
        board: 9-cell board, restored before returning
        player: mark scores are computed for
        mover: mark whose move is requested
        difficulty: EASY picks uniformly at random, MEDIUM/HARD search
        rng: numpy generator for EASY; a fresh unseeded one if omitted

    Returns:
        Board index 0-8
    """
    if difficulty == Difficulty.EASY:
        if rng is None:
            rng = np.random.default_rng()
        return int(rng.choice(empty_cells(board)))

    maximizing = mover == player
    best = -SEED_SCORE if maximizing else SEED_SCORE
    move = -1
    scored: Dict[int, int] = {}

    for i in empty_cells(board):
        board[i] = mover
        try:
            score = evaluate(board, 0, player, -mover, difficulty)
        finally:
            board[i] = EMPTY
        scored[i] = score

        if maximizing:
            if score >= best:
                move = i
                best = score
        else:
            if score <= best:
                move = i
                best = score

    logger.debug(
        "select_move %s mover=%+d player=%+d scores=%s -> %d",
        Difficulty(difficulty).name, mover, player, scored, move,
    )
    return move
