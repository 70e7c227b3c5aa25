import numpy as np
import pytest

from tictactoe.eval import (
    cpu_agent,
    eval_head_to_head,
    eval_solver_agreement,
    play_match,
    random_agent,
)
from tictactoe.game import EMPTY, O, X, Difficulty


def test_random_match_ends():
    rng = np.random.default_rng(3)
    for _ in range(20):
        assert play_match(random_agent(rng), random_agent(rng)) in (X, O, 0)


def test_play_match_from_position_copies_board():
    board = [X, X, EMPTY, O, O, EMPTY, EMPTY, EMPTY, EMPTY]
    before = list(board)
    winner = play_match(cpu_agent(Difficulty.MEDIUM), cpu_agent(Difficulty.MEDIUM), board)
    assert winner == X
    assert board == before


@pytest.mark.parametrize("seed", range(5))
def test_hard_never_loses_to_random_as_o(seed):
    rng = np.random.default_rng(seed)
    winner = play_match(random_agent(rng), cpu_agent(Difficulty.HARD, rng))
    assert winner != X


def test_head_to_head_rates():
    rng = np.random.default_rng(0)
    res = eval_head_to_head(
        cpu_agent(Difficulty.MEDIUM, rng), random_agent(rng), games=6, progress=False
    )
    assert res["games"] == 6
    assert res["agent_w"] + res["agent_d"] + res["agent_l"] == pytest.approx(1.0)


def test_hard_agrees_with_solver_on_late_positions():
    res = eval_solver_agreement(Difficulty.HARD, max_empty=5, progress=False)
    assert res["n_states"] > 0
    assert res["optimal_rate"] == 1.0
    assert res["n_suboptimal"] == 0


def test_medium_is_beatable():
    res = eval_solver_agreement(Difficulty.MEDIUM, max_empty=6, progress=False)
    assert res["n_suboptimal"] >= 1
    assert res["optimal_rate"] < 1.0
