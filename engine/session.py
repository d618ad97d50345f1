"""
Game session for console TicTacToe.
The four calls a front end needs: reset, human move, computer move, outcome.
"""

import logging
from typing import List, Tuple

from .game_state import Board, Mark, Move
from .move_validator import MoveValidator, PlaceResult
from .win_checker import Outcome, WinChecker
from .ai_player import AIPlayer


class GameSession:
    """
    One game session: owns the board and the move history.

    Game flow:
    1. Human (X) moves with apply_human_move()
    2. The front end checks current_outcome()
    3. Computer (O) moves with computer_turn()
    4. Repeat until someone wins or it's a draw, then reset_board()
    """

    def __init__(self, ai: AIPlayer = None):
        self.board = Board()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = ai or AIPlayer()

        # Move history for the current round
        self.moves: List[Tuple[Mark, Move]] = []

    def reset_board(self):
        """Clear the board for a new round."""
        self.board.reset()
        self.moves.clear()
        logging.debug("Board reset")

    def apply_human_move(self, row: int, col: int) -> PlaceResult:
        """
        Place the human's mark.

        Turn order is the caller's job. A move out of turn or after the
        round is decided is still placed, with a warning logged.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            SUCCESS, or OUT_OF_RANGE / ALREADY_OCCUPIED with the board untouched.
        """
        validation = self.validator.validate_move(self.board, row, col)
        if not validation.is_valid:
            logging.debug(f"Rejected human move ({row}, {col}): {validation.result.value}")
            return validation.result

        if self.is_over():
            logging.warning(f"Human move ({row}, {col}) after the round ended")
        elif self.board.count(Mark.PLAYER) > self.board.count(Mark.COMPUTER):
            logging.warning(f"Human move ({row}, {col}) out of turn")

        self.board.place(row, col, Mark.PLAYER)
        self.moves.append((Mark.PLAYER, Move(row, col)))
        logging.debug(f"Human placed {Mark.PLAYER.symbol} at ({row}, {col})")
        return PlaceResult.SUCCESS

    def computer_turn(self) -> Move:
        """
        Pick the computer's best move and play it.

        Returns:
            The cell the computer took.
        """
        move = self.ai.get_best_move(self.board)
        self.board.place(move.row, move.col, Mark.COMPUTER)
        self.moves.append((Mark.COMPUTER, move))
        logging.debug(f"Computer placed {Mark.COMPUTER.symbol} at ({move.row}, {move.col})")
        return move

    def current_outcome(self) -> Outcome:
        """Outcome of the board as it stands now."""
        return self.win_checker.evaluate(self.board)

    def is_over(self) -> bool:
        return self.current_outcome().is_terminal
