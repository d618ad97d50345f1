"""
Win checker for console TicTacToe.
Turns a board into a game outcome and a minimax base score.
"""

from enum import Enum
from typing import List, Optional, Tuple

from .config import GameConfig
from .game_state import Board, Mark


class Outcome(Enum):
    """Where a game stands. Always recomputed from the board."""
    NO_WINNER_YET = "no_winner_yet"
    PLAYER_WINS = "player_wins"
    COMPUTER_WINS = "computer_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.NO_WINNER_YET


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same side in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return board.winner()

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def evaluate(self, board: Board) -> Outcome:
        """
        Work out the outcome of a board.

        Args:
            board: The board to inspect.

        Returns:
            COMPUTER_WINS / PLAYER_WINS if a line is complete,
            DRAW if the board is full, NO_WINNER_YET otherwise.
        """
        winner = self.check_winner(board)

        if winner == Mark.COMPUTER:
            return Outcome.COMPUTER_WINS
        elif winner == Mark.PLAYER:
            return Outcome.PLAYER_WINS
        elif board.is_full():
            return Outcome.DRAW

        return Outcome.NO_WINNER_YET

    def score(self, board: Board) -> int:
        """
        Base score of a board from the computer's point of view.

        Returns:
            +WIN_SCORE for a computer line, -WIN_SCORE for a player line,
            DRAW_SCORE otherwise (including unfinished boards).
        """
        winner = self.check_winner(board)

        if winner == Mark.COMPUTER:
            return GameConfig.WIN_SCORE
        elif winner == Mark.PLAYER:
            return -GameConfig.WIN_SCORE

        return GameConfig.DRAW_SCORE

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        return board.winning_line()
