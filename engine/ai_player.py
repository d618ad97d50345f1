"""
AI player for console TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging

from .game_state import Board, Mark, Move
from .minimax import Minimax


class GameOverError(RuntimeError):
    """Raised when a move is requested on a board that is already decided."""


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, minimax: Minimax = None):
        """
        Initialize the AI player.

        Args:
            minimax: Search engine to use. A fresh one if not provided.
        """
        self.player = Mark.COMPUTER
        self.minimax = minimax or Minimax()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Move:
        """
        Get the best move for the computer.

        Every empty cell is tried in row-major order; the first cell with
        the strictly highest score wins, so ties go to the earliest cell.
        The board is restored before returning.

        Args:
            board: Current board. The computer must be the side to move.

        Returns:
            The chosen (row, col).

        Raises:
            GameOverError: the board is full or already has a winner.
        """
        if board.winner() is not None or board.is_full():
            raise GameOverError("No move to make: the game is already over")

        self.minimax.nodes_visited = 0

        best_score = None
        best_move = None

        for move in board.empty_cells():
            # Try this move
            board.place(move.row, move.col, self.player)

            # Evaluate with minimax, the player replies next
            score = self.minimax.search(board, is_maximizing=False, depth=0)

            board.retract(move.row, move.col)

            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        self.moves_evaluated = self.minimax.nodes_visited
        logging.debug(
            f"AI evaluated {self.moves_evaluated} positions. "
            f"Best move: ({best_move.row}, {best_move.col}) (score: {best_score})"
        )

        return best_move
