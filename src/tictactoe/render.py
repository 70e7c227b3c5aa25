"""
Terminal rendering: boxed board, help panel, centred output.
"""

import shutil
import time
from typing import Callable, List, Optional

from .game import EMPTY, O, X

SYMBOLS = {EMPTY: " ", X: "X", O: "O"}

DEFAULT_WIDTH = 80

RULE = "+-----------+\n"


def render_board(board: List[int]) -> List[str]:
    """
    Render board as a list of lines (each ending in a newline).

    Example for [1, -1, 1, -1, -1, 0, 0, 1, 0]:
        +-----------+
        | X | O | X |
        +-----------+
        | O | O |   |
        +-----------+
        |   | X |   |
        +-----------+
    """
    lines = [RULE]
    for r in range(3):
        cells = " | ".join(SYMBOLS[board[r * 3 + c]] for c in range(3))
        lines.append(f"| {cells} |\n")
        lines.append(RULE)
    return lines


def instructions() -> List[str]:
    """Help panel shown before the first move."""
    return [
        "=================================================================\n",
        "|  +-----------+  | Cells are numbered as shown on the left.    |\n",
        "|  | 1 | 2 | 3 |  |                                             |\n",
        "|  +-----------+  | Enter the number of a cell on your turn.    |\n",
        "|  | 4 | 5 | 6 |  | Enter <h> for a hint, <q> to quit.          |\n",
        "|  +-----------+  |                                             |\n",
        "|  | 7 | 8 | 9 |  |                                             |\n",
        "|  +-----------+  |                                             |\n",
        "=================================================================\n",
    ]


def terminal_width() -> int:
    width = shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns
    return width if width > 0 else DEFAULT_WIDTH


def center(lines: List[str], width: Optional[int] = None, align: bool = False) -> List[str]:
    """
    Left-pad lines so they sit in the middle of the terminal.

    With ``align`` every line gets the padding computed for the first one,
    which keeps multi-line panels square.
    """
    if width is None:
        width = terminal_width()
    if not lines:
        return []
    fixed = max((width - len(lines[0].rstrip("\n"))) // 2, 0)
    out = []
    for line in lines:
        pad = fixed if align else max((width - len(line.rstrip("\n"))) // 2, 0)
        out.append(" " * pad + line)
    return out


def emit(
    lines: List[str],
    output_fn: Callable[..., None] = print,
    delay: float = 0.0,
    align: bool = False,
    sleep_fn: Callable[[float], None] = time.sleep,
    width: Optional[int] = None,
):
    """Write centred lines through ``output_fn``, pausing ``delay`` s after each."""
    for line in center(lines, width=width, align=align):
        output_fn(line, end="")
        if delay > 0:
            sleep_fn(delay)
