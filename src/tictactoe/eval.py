"""
Evaluation functions.

Plays the CPU against random and CPU opponents, and measures how often its
choices are optimal according to the exact solver.
"""

import logging
from typing import Callable, Dict, List, Optional

import numpy as np
from tqdm.auto import tqdm, trange

from .game import EMPTY, O, X, Difficulty, empty_cells, is_terminal
from .minimax import select_move
from .solver import iter_all_legal_nonterminal_states, solve

logger = logging.getLogger(__name__)

# (board, mark to play) -> board index
Agent = Callable[[List[int], int], int]


def cpu_agent(difficulty: Difficulty, rng: Optional[np.random.Generator] = None) -> Agent:
    """
    CPU player at ``difficulty``.

    Scores are taken from the opponent's side, as in the game where the
    human is the scoring player and the CPU minimizes.
    """
    if rng is None:
        rng = np.random.default_rng()

    def agent(board: List[int], mark: int) -> int:
        return select_move(board, -mark, mark, difficulty, rng)

    return agent


def random_agent(rng: Optional[np.random.Generator] = None) -> Agent:
    """Uniformly random legal moves."""
    if rng is None:
        rng = np.random.default_rng()

    def agent(board: List[int], mark: int) -> int:
        return int(rng.choice(empty_cells(board)))

    return agent


def play_match(x_agent: Agent, o_agent: Agent, board: Optional[List[int]] = None) -> int:
    """
    Play one game to the end (X moves first from an empty board).

    Args:
        board: Optional starting position (copied); side to move is X unless
            the mark counts say otherwise

    Returns:
        Winner: +1 (X), -1 (O) or 0 (draw)
    """
    board = [EMPTY] * 9 if board is None else board[:]
    player = X if board.count(X) == board.count(O) else O

    while True:
        done, winner = is_terminal(board)
        if done:
            return winner

        agent = x_agent if player == X else o_agent
        action = agent(board, player)
        board[action] = player
        player = -player


def eval_head_to_head(
    agent: Agent,
    opponent: Agent,
    games: int = 100,
    progress: bool = True,
) -> Dict[str, float]:
    """
    Evaluate ``agent`` against ``opponent``, alternating who plays X.

    Returns:
        Dict with 'games', 'agent_w', 'agent_d', 'agent_l'
    """
    wins = draws = losses = 0

    for g in trange(games, desc="games", disable=not progress, leave=False):
        agent_side = X if (g % 2 == 0) else O
        if agent_side == X:
            winner = play_match(agent, opponent)
        else:
            winner = play_match(opponent, agent)

        if winner == 0:
            draws += 1
        elif winner == agent_side:
            wins += 1
        else:
            losses += 1
        logger.debug("game %d agent=%+d winner=%+d", g, agent_side, winner)

    total = max(wins + draws + losses, 1)
    return {
        "games": wins + draws + losses,
        "agent_w": wins / total,
        "agent_d": draws / total,
        "agent_l": losses / total,
    }


def eval_solver_agreement(
    difficulty: Difficulty,
    max_empty: int = 9,
    progress: bool = True,
) -> Dict[str, float]:
    """
    Check the CPU's move against the exact solver on every legal position.

    A move counts as optimal when it keeps the game-theoretic outcome
    (win/draw/loss) of the position. Only positions with at most
    ``max_empty`` empty cells are visited; full-depth search from the
    emptiest positions is the slow part.

    Returns:
        Dict with 'n_states', 'optimal_rate', 'n_suboptimal'
    """
    states = [
        (b, p) for b, p in iter_all_legal_nonterminal_states()
        if b.count(EMPTY) <= max_empty
    ]

    optimal = 0
    for board, player in tqdm(states, desc="states", disable=not progress, leave=False):
        _, best_moves = solve(board, player)
        move = select_move(board, player, player, difficulty)
        if move in best_moves:
            optimal += 1
        else:
            logger.debug("suboptimal %s board=%s move=%d best=%s",
                         difficulty.name, board, move, best_moves)

    n = len(states)
    return {
        "n_states": n,
        "optimal_rate": optimal / n if n else float("nan"),
        "n_suboptimal": n - optimal,
    }
