from tictactoe.game import EMPTY, O, X
from tictactoe.render import center, emit, instructions, render_board


def test_render_board():
    lines = render_board([X, O, X, O, O, EMPTY, EMPTY, X, EMPTY])
    assert lines == [
        "+-----------+\n",
        "| X | O | X |\n",
        "+-----------+\n",
        "| O | O |   |\n",
        "+-----------+\n",
        "|   | X |   |\n",
        "+-----------+\n",
    ]


def test_instructions_box_is_square():
    lines = instructions()
    assert len({len(line) for line in lines}) == 1


def test_center():
    assert center(["abcd\n"], width=10) == ["   abcd\n"]
    assert center(["abcd\n", "ab\n"], width=10) == ["   abcd\n", "    ab\n"]
    assert center(["abcd\n", "ab\n"], width=10, align=True) == ["   abcd\n", "   ab\n"]
    assert center(["too long for it\n"], width=4) == ["too long for it\n"]


def test_emit_pauses_between_lines():
    out, sleeps = [], []
    emit(["a\n", "b\n"], lambda s, end="\n": out.append(s + end),
         delay=0.5, sleep_fn=sleeps.append, width=5)
    assert out == ["  a\n", "  b\n"]
    assert sleeps == [0.5, 0.5]
