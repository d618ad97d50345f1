"""Tests for the console helpers."""

import pytest

import console
from engine.game_state import Board


def test_render_empty_board():
    expected = "\n".join([
        "",
        "   0   1   2",
        "0    |   |   ",
        "  ---+---+---",
        "1    |   |   ",
        "  ---+---+---",
        "2    |   |   ",
        "",
    ])
    assert console.render_board(Board()) == expected


def test_render_board_with_marks():
    rendered = console.render_board(Board.from_rows(["XO ", " X ", "  O"]))
    lines = rendered.splitlines()
    assert lines[2] == "0  X | O |   "
    assert lines[4] == "1    | X |   "
    assert lines[6] == "2    |   | O "


def test_banner():
    text = console.banner()
    assert "Tic-Tac-Toe (Python with AI)" in text
    assert "You are X, computer is O." in text
    assert "Enter moves as: row col" in text
    assert text.splitlines()[0] == "=" * 30


@pytest.mark.parametrize("text, expected", [
    ("1 2", (1, 2)),
    ("  0   0  ", (0, 0)),
    ("2,1", (2, 1)),
    ("5 -1", (5, -1)),
    ("", None),
    ("1", None),
    ("1 2 3", None),
    ("a b", None),
    ("1.5 2", None),
])
def test_parse_move(text, expected):
    assert console.parse_move(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("y", True),
    ("Y", True),
    (" n\n", False),
    ("N", False),
    ("yes", None),
    ("", None),
])
def test_parse_yes_no(text, expected):
    assert console.parse_yes_no(text) == expected
