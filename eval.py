#!/usr/bin/env python3
"""
Evaluate the CPU opponent.

Usage:
    python eval.py --difficulty medium --opponent random --games 200
    python eval.py --difficulty hard --agreement --max-empty 7
    python eval.py --difficulty medium --agreement --out runs/medium.json
"""

import sys
import json
import logging
import argparse
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import numpy as np

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import (
    Difficulty,
    cpu_agent,
    random_agent,
    eval_head_to_head,
    eval_solver_agreement,
)


@dataclass
class ArenaConfig:
    """Evaluation configuration."""

    # CPU under test
    difficulty: str = "hard"

    # Opponent: random or a CPU difficulty
    opponent: str = "random"

    # Head-to-head games (sides alternate)
    games: int = 100

    # Also sweep all legal positions against the exact solver
    agreement: bool = False
    max_empty: int = 9

    # Random seed
    seed: int = 0

    # Write config + results here as JSON
    out: Optional[str] = None


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe CPU")
    parser.add_argument("--difficulty", type=str.lower, choices=["easy", "medium", "hard"],
                        default="hard", help="CPU difficulty under test")
    parser.add_argument("--opponent", type=str.lower, choices=["random", "easy", "medium", "hard"],
                        default="random", help="Opponent")
    parser.add_argument("--games", type=int, default=100, help="Number of games")
    parser.add_argument("--agreement", action="store_true", help="Compare with exact solver")
    parser.add_argument("--max-empty", type=int, default=9, help="Agreement: max empty cells")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--out", type=str, default=None, help="JSON output path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ArenaConfig(
        difficulty=args.difficulty,
        opponent=args.opponent,
        games=args.games,
        agreement=args.agreement,
        max_empty=args.max_empty,
        seed=args.seed,
        out=args.out,
    )

    rng = np.random.default_rng(config.seed)
    difficulty = Difficulty.from_name(config.difficulty)
    agent = cpu_agent(difficulty, rng)
    if config.opponent == "random":
        opponent = random_agent(rng)
    else:
        opponent = cpu_agent(Difficulty.from_name(config.opponent), rng)

    results = {}

    print("\n=== Evaluation ===")
    if config.games > 0:
        print(f"\n{difficulty.name} vs {config.opponent} ({config.games} games)...")
        h2h = eval_head_to_head(agent, opponent, games=config.games)
        print(f"  Wins:   {h2h['agent_w']:.2%}")
        print(f"  Draws:  {h2h['agent_d']:.2%}")
        print(f"  Losses: {h2h['agent_l']:.2%}")
        results["head_to_head"] = h2h

    if config.agreement:
        print(f"\nSolver Agreement (<= {config.max_empty} empty cells)...")
        ag = eval_solver_agreement(difficulty, max_empty=config.max_empty)
        print(f"  States:     {ag['n_states']}")
        print(f"  Optimal:    {ag['optimal_rate']:.2%}")
        print(f"  Suboptimal: {ag['n_suboptimal']}")
        results["agreement"] = ag

    if config.out:
        out_path = Path(config.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump({"config": asdict(config), "results": results}, f, indent=2)
        print(f"\n✓ Results saved to {out_path}")


if __name__ == "__main__":
    main()
