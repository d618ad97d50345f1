"""
Move validator for console TicTacToe.
Classifies a requested placement before it touches the board.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board


class PlaceResult(Enum):
    """Result tag for a requested placement."""
    SUCCESS = "success"
    ALREADY_OCCUPIED = "already_occupied"
    OUT_OF_RANGE = "out_of_range"

    @property
    def ok(self) -> bool:
        return self is PlaceResult.SUCCESS

    @property
    def message(self) -> Optional[str]:
        """What to tell the player, or None for SUCCESS."""
        return _MESSAGES.get(self)


_MESSAGES = {
    PlaceResult.OUT_OF_RANGE: GameConfig.OUT_OF_RANGE,
    PlaceResult.ALREADY_OCCUPIED: GameConfig.CELL_TAKEN,
}


@dataclass
class ValidationResult:
    """Result of move validation."""
    result: PlaceResult

    @property
    def is_valid(self) -> bool:
        return self.result.ok

    @property
    def error_message(self) -> Optional[str]:
        return self.result.message


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board (0-2)
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place a mark (0-2).
            col: Column to place a mark (0-2).

        Returns:
            ValidationResult with the result tag and a message for the player.
        """
        # Check if row/col are in valid range
        if not GameConfig.in_range(row, col):
            return ValidationResult(result=PlaceResult.OUT_OF_RANGE)

        # Check if cell is empty
        if not board.is_empty_cell(row, col):
            return ValidationResult(result=PlaceResult.ALREADY_OCCUPIED)

        return ValidationResult(result=PlaceResult.SUCCESS)
