"""
Console helpers for TicTacToe.
Drawing the board and reading what the player types.
"""

from typing import Optional, Tuple

from engine.config import GameConfig
from engine.game_state import Board


def banner() -> str:
    """The title block shown once at start-up."""
    rule = "=" * GameConfig.BANNER_WIDTH
    return "\n".join([
        rule,
        GameConfig.TITLE.center(GameConfig.BANNER_WIDTH).rstrip(),
        rule,
        "",
        f"You are {GameConfig.PLAYER_SYMBOL}, computer is {GameConfig.COMPUTER_SYMBOL}.",
        "Enter moves as: row col",
        "",
    ])


def render_board(board: Board) -> str:
    """
    Draw the board with row and column labels.

    Example:
           0   1   2
        0  X | O |
          ---+---+---
        1    | X |
          ---+---+---
        2    |   | O
    """
    size = GameConfig.BOARD_SIZE
    header = "   " + "   ".join(str(col) for col in range(size))
    lines = ["", header]

    for row, marks in enumerate(board.rows()):
        cells = "|".join(f" {mark.symbol} " for mark in marks)
        lines.append(f"{row} {cells}")
        if row < size - 1:
            lines.append("  " + "+".join(["---"] * size))

    lines.append("")
    return "\n".join(lines)


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Read "row col" from a line of input.

    Commas are accepted as separators too ("1,2"). Range is not checked
    here; that is the session's job.

    Returns:
        (row, col), or None if the line is not exactly two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None

    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def parse_yes_no(text: str) -> Optional[bool]:
    """True for y/Y, False for n/N, None for anything else."""
    answer = text.strip()
    if answer in ("y", "Y"):
        return True
    if answer in ("n", "N"):
        return False
    return None
