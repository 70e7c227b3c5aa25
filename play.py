#!/usr/bin/env python3
"""
Play TicTacToe in the terminal.

Usage:
    python play.py
    python play.py --mark O --difficulty medium
    python play.py --two-player
"""

import sys
import logging
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import Difficulty, GameConfig, X, O, play_game
from tictactoe.session import parse_mark


MARKS = {"X": X, "O": O}


def choose_mark() -> int:
    """Ask for a symbol until a valid one is given."""
    while True:
        print()
        try:
            text = input("Choose Symbol (<1> for X, <2> for O) => ")
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted")
            sys.exit(0)
        try:
            return parse_mark(text)
        except ValueError as e:
            print(e)


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.add_argument("--mark", type=str.upper, choices=sorted(MARKS), default=None,
                        help="Your symbol (asked if omitted)")
    parser.add_argument("--difficulty", type=str.lower, choices=["easy", "medium", "hard"],
                        default="hard", help="CPU difficulty")
    parser.add_argument("--two-player", action="store_true", help="Two humans, no CPU")
    parser.add_argument("--first", type=str.upper, choices=["X", "O", "RANDOM"],
                        default="RANDOM", help="Who moves first")
    parser.add_argument("--delay", type=float, default=1.0, help="Pause before CPU moves (s)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search details")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.two_player:
        human = X
    elif args.mark is not None:
        human = MARKS[args.mark]
    else:
        human = choose_mark()

    config = GameConfig(
        difficulty=Difficulty.from_name(args.difficulty),
        human_mark=human,
        two_player=args.two_player,
        first=MARKS.get(args.first),
        cpu_delay=args.delay,
        seed=args.seed,
    )

    result = play_game(config)
    if result.quit:
        print("\nGame aborted")


if __name__ == "__main__":
    main()
