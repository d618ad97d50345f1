"""
Minimax search for console TicTacToe.
Scores a position by playing out every continuation to the end.
"""

from .config import GameConfig
from .game_state import CELLS, Board, Mark
from .win_checker import WinChecker


class Minimax:
    """
    Full-depth minimax over a shared board.

    The computer maximizes and the player minimizes. Every hypothetical
    mark is placed on the board passed in and retracted before the next
    one is tried, so the board is back in its original state when
    search() returns.

    Wins are worth WIN_SCORE minus the ply depth and losses -WIN_SCORE
    plus the depth, so quicker wins and slower losses score higher.
    """

    def __init__(self, win_checker: WinChecker = None):
        self.win_checker = win_checker or WinChecker()

        # Positions visited since the last reset (for debugging)
        self.nodes_visited = 0

    def search(self, board: Board, is_maximizing: bool, depth: int) -> int:
        """
        Score the board with `is_maximizing` telling whose turn it is.

        Args:
            board: Board to search. Borrowed, restored before returning.
            is_maximizing: True if the computer moves next.
            depth: Plies already played since the root.

        Returns:
            The depth-adjusted minimax value.
        """
        self.nodes_visited += 1

        score = self.win_checker.score(board)
        if score == GameConfig.WIN_SCORE:
            return score - depth
        if score == -GameConfig.WIN_SCORE:
            return score + depth

        if board.is_full():
            return GameConfig.DRAW_SCORE

        mark = Mark.COMPUTER if is_maximizing else Mark.PLAYER
        best = None

        for row, col in CELLS:
            if board.grid.item(row, col) != Mark.EMPTY:
                continue

            board.place(row, col, mark)
            value = self.search(board, not is_maximizing, depth + 1)
            board.retract(row, col)

            if best is None:
                best = value
            elif is_maximizing:
                best = max(best, value)
            else:
                best = min(best, value)

        return best
