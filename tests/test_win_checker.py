"""Tests for outcome evaluation."""

import pytest

from engine.game_state import Board, Mark, WINNING_LINES
from engine.win_checker import Outcome, WinChecker


@pytest.fixture
def checker():
    return WinChecker()


@pytest.mark.parametrize("rows, outcome, score", [
    (["OOO", "XX ", "X  "], Outcome.COMPUTER_WINS, 10),
    (["XXX", "OO ", "   "], Outcome.PLAYER_WINS, -10),
    (["XOX", "XOO", "OXX"], Outcome.DRAW, 0),
    (["XO ", "   ", "   "], Outcome.NO_WINNER_YET, 0),
    (["   ", "   ", "   "], Outcome.NO_WINNER_YET, 0),
])
def test_evaluate_and_score(checker, rows, outcome, score):
    board = Board.from_rows(rows)
    assert checker.evaluate(board) == outcome
    assert checker.score(board) == score


def test_win_on_last_cell_is_not_a_draw(checker):
    board = Board.from_rows(["XOX", "OXO", "OXX"])
    assert board.is_full()
    assert checker.evaluate(board) == Outcome.PLAYER_WINS
    assert not checker.check_draw(board)


def test_full_board_without_line_is_a_draw(checker):
    # X: (0,0) (0,2) (1,0) (2,1) (2,2); O: (0,1) (1,1) (1,2) (2,0)
    board = Board()
    sequence = [(0, 0), (1, 1), (0, 2), (0, 1), (2, 1), (1, 2), (1, 0), (2, 0), (2, 2)]
    mark = Mark.PLAYER
    for row, col in sequence:
        assert checker.evaluate(board) == Outcome.NO_WINNER_YET
        assert board.place(row, col, mark)
        mark = mark.opposite()

    assert board.is_full()
    assert checker.check_draw(board)
    assert checker.evaluate(board) == Outcome.DRAW


def test_get_winning_line(checker):
    board = Board.from_rows(["X O", "XO ", "X  "])
    assert checker.get_winning_line(board) == [(0, 0), (1, 0), (2, 0)]
    assert checker.check_winner(board) == Mark.PLAYER


def test_outcome_is_terminal():
    assert not Outcome.NO_WINNER_YET.is_terminal
    assert Outcome.DRAW.is_terminal
    assert Outcome.PLAYER_WINS.is_terminal
    assert Outcome.COMPUTER_WINS.is_terminal


def _line_owners(board):
    owners = set()
    for line in WINNING_LINES:
        marks = {board.get(r, c) for r, c in line}
        if len(marks) == 1 and Mark.EMPTY not in marks:
            owners.add(marks.pop())
    return owners


def test_reachable_boards_never_have_two_winners():
    """Walk every position reachable with alternating turns, human first."""
    board = Board()
    seen = set()

    def walk(mark):
        key = board.grid.tobytes()
        if key in seen:
            return
        seen.add(key)

        owners = _line_owners(board)
        assert len(owners) <= 1
        if owners:
            assert board.winner() in owners
            return
        if board.is_full():
            return

        for row, col in board.empty_cells():
            board.place(row, col, mark)
            walk(mark.opposite())
            board.retract(row, col)

    walk(Mark.PLAYER)

    # 5478 distinct legal positions in TicTacToe
    assert len(seen) == 5478
    assert board == Board()
