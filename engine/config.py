"""
Game configuration for console TicTacToe.
Board dimensions, scoring constants and the text shown to the player.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; everything else is presentation.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # ==================== SCORING ====================
    # Base magnitude of a decided game before depth adjustment
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== SYMBOLS ====================
    PLAYER_SYMBOL = "X"
    COMPUTER_SYMBOL = "O"
    EMPTY_SYMBOL = " "

    # ==================== MESSAGES ====================
    TITLE = "Tic-Tac-Toe (Python with AI)"
    BANNER_WIDTH = 30

    MOVE_PROMPT = "Your move (row col): "
    REPLAY_PROMPT = "Play again? (y/n): "

    INVALID_INPUT = "Invalid input, please enter two numbers."
    OUT_OF_RANGE = "Row and column must be between 0 and 2."
    CELL_TAKEN = "That cell is taken, pick another one."
    INVALID_REPLAY = "Please enter 'y' or 'n'."

    THINKING = "Computer is thinking..."
    PLAYER_WINS = "You win!"
    COMPUTER_WINS = "Computer wins."
    DRAW = "It's a draw."
    GOODBYE = "Thanks for playing!"

    @classmethod
    def in_range(cls, row: int, col: int) -> bool:
        """Check that (row, col) lies on the board."""
        return 0 <= row < cls.BOARD_SIZE and 0 <= col < cls.BOARD_SIZE
