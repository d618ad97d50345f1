"""
Engine module for console TicTacToe.
Handles the board, outcomes, the minimax search and the AI opponent.
"""

from .config import GameConfig
from .game_state import Board, Mark, Move
from .win_checker import Outcome, WinChecker
from .move_validator import MoveValidator, PlaceResult, ValidationResult
from .minimax import Minimax
from .ai_player import AIPlayer, GameOverError
from .session import GameSession

__version__ = "1.0.0"
