"""
Board state for console TicTacToe.
Tracks which mark occupies each of the nine cells.
"""

from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Mark(IntEnum):
    """What can occupy a cell."""
    EMPTY = 0
    PLAYER = 1
    COMPUTER = 2

    def opposite(self) -> "Mark":
        """Get the mark of the other side."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.COMPUTER if self == Mark.PLAYER else Mark.PLAYER

    @property
    def symbol(self) -> str:
        """Character used to draw this mark."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """
        Parse a drawn character back into a mark.

        Besides the configured symbols, ".", "_" and "-" also read as
        EMPTY, so boards passed to Board.from_rows() can be written
        without significant trailing spaces ("X.." rather than "X  ").
        Lowercase symbols are accepted.
        """
        for mark, char in _SYMBOLS.items():
            if symbol.upper() == char:
                return mark
        if symbol in (".", "_", "-"):
            return cls.EMPTY
        raise ValueError(f"Unknown board symbol: {symbol!r}")


_SYMBOLS = {
    Mark.EMPTY: GameConfig.EMPTY_SYMBOL,
    Mark.PLAYER: GameConfig.PLAYER_SYMBOL,
    Mark.COMPUTER: GameConfig.COMPUTER_SYMBOL,
}


@dataclass(frozen=True)
class Move:
    """
    A cell on the board.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)

    def __iter__(self) -> Iterator[int]:
        # Lets callers write `row, col = move`
        return iter((self.row, self.col))


# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]

# Every cell, row-major
CELLS = [(row, col) for row in range(GameConfig.BOARD_SIZE) for col in range(GameConfig.BOARD_SIZE)]


def _empty_grid() -> np.ndarray:
    size = GameConfig.BOARD_SIZE
    return np.full((size, size), Mark.EMPTY, dtype=np.int8)


@dataclass(eq=False)
class Board:
    """
    The 3x3 TicTacToe board.

    Cells hold Mark values in a row-major int8 array. The board is mutated
    in place: real moves and the search's hypothetical moves both go
    through place(), and the search undoes its own with retract().
    """

    grid: np.ndarray = field(default_factory=_empty_grid)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "Board":
        """
        Build a board from three rows.

        Each row is either a string of symbols ("XO ", "X.O") or a
        sequence of Mark values.

        Args:
            rows: The three rows, top to bottom.

        Returns:
            A new Board.
        """
        board = cls()
        if len(rows) != GameConfig.BOARD_SIZE:
            raise ValueError(f"Expected {GameConfig.BOARD_SIZE} rows, got {len(rows)}")

        for row, cells in enumerate(rows):
            if len(cells) != GameConfig.BOARD_SIZE:
                raise ValueError(f"Row {row} has {len(cells)} cells")
            for col, cell in enumerate(cells):
                mark = Mark.from_symbol(cell) if isinstance(cell, str) else Mark(cell)
                board.grid[row, col] = mark
        return board

    def reset(self):
        """Clear every cell for a new round."""
        self.grid.fill(Mark.EMPTY)

    def get(self, row: int, col: int) -> Mark:
        """Get the mark in a cell."""
        self._check_range(row, col)
        return Mark(int(self.grid[row, col]))

    def is_empty_cell(self, row: int, col: int) -> bool:
        """
        Check if a cell is empty.

        The caller validates coordinates first; an out-of-range cell
        raises IndexError instead of wrapping around.
        """
        self._check_range(row, col)
        return bool(self.grid[row, col] == Mark.EMPTY)

    def place(self, row: int, col: int, mark: Mark) -> bool:
        """
        Put a mark in a cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: PLAYER or COMPUTER.

        Returns:
            True if the mark was placed, False if the cell is off the
            board, already occupied, or the mark is EMPTY (the board is
            left unchanged).
        """
        if mark == Mark.EMPTY:
            return False
        if not GameConfig.in_range(row, col):
            return False
        if self.grid.item(row, col) != Mark.EMPTY:
            return False

        self.grid[row, col] = mark
        return True

    def retract(self, row: int, col: int):
        """Empty a cell. Only used to undo a successful place()."""
        self.grid[row, col] = Mark.EMPTY

    def is_full(self) -> bool:
        """True if no cell is empty."""
        # EMPTY is 0, so a full board has no zero cell
        return bool(self.grid.all())

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            Moves in row-major order.
        """
        return [Move(row, col) for row, col in CELLS if self.grid.item(row, col) == Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        """How many cells hold the given mark."""
        return int(np.count_nonzero(self.grid == mark))

    def _first_complete_line(self) -> Optional[List[Tuple[int, int]]]:
        item = self.grid.item
        for line in WINNING_LINES:
            (r0, c0), (r1, c1), (r2, c2) = line
            first = item(r0, c0)
            if first != Mark.EMPTY and first == item(r1, c1) == item(r2, c2):
                return line
        return None

    def winner(self) -> Optional[Mark]:
        """
        Find the mark that completed a line.

        Rows are checked first, then columns, then diagonals; the first
        complete line decides.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self._first_complete_line()
        if line is None:
            return None

        row, col = line[0]
        return Mark(self.grid.item(row, col))

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Get the first completed line as (row, col) cells, or None."""
        return self._first_complete_line()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(grid=self.grid.copy())

    def rows(self) -> List[List[Mark]]:
        """The board as nested lists of marks."""
        return [[Mark(int(cell)) for cell in row] for row in self.grid]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return "\n".join("".join(mark.symbol for mark in row) for row in self.rows())

    @staticmethod
    def _check_range(row: int, col: int):
        if not GameConfig.in_range(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
