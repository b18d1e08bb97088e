"""
board.py - Board representation for Gomoku

This module implements the Board class, a fixed-size square grid of cells that
are either empty or occupied by a player. The board only offers bounds-checked
reads and writes; move legality and win detection live in rules.py.
"""

import numbers
from typing import List, Optional, Sequence

import numpy as np

from gomoku.debug import debug
from gomoku.errors import InvalidSizeError, OutOfBoundsError
from gomoku.utils import BOARD_SIZE, EMPTY, is_valid_position, render_board_ascii


def _is_index(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Board:
    """
    Represents a square Gomoku board.

    Cells hold None when empty or the integer id of the player occupying them.
    The side length is fixed at creation and never changes.
    """

    def __init__(self, size: int = BOARD_SIZE):
        """
        Initialize an empty board.

        Args:
            size: Side length of the board

        Raises:
            InvalidSizeError: if size is not a positive integer
        """
        if not _is_index(size) or size < 1:
            raise InvalidSizeError(f"Board size must be a positive integer, got {size!r}")

        debug.debug(f"Initializing new {size}x{size} Board", "board")
        self._size = int(size)
        self.grid = np.full((self._size, self._size), EMPTY, dtype=int)

    @classmethod
    def create(cls, size: int = BOARD_SIZE) -> 'Board':
        """Create an empty board of the given size."""
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> 'Board':
        """
        Build a board from nested rows of cell states.

        Args:
            rows: Square nested sequence of None (empty) or player ids

        Returns:
            A board holding the given cells
        """
        board = cls(len(rows))
        for row, cells in enumerate(rows):
            if len(cells) != board.size:
                raise InvalidSizeError(f"Row {row} has {len(cells)} cells, expected {board.size}")
            for col, value in enumerate(cells):
                board.set(row, col, value)
        return board

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) are integers addressing a cell of this board."""
        if not all(_is_index(value) for value in (row, col)):
            return False
        return is_valid_position(row, col, self._size)

    def _check_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"Position ({row}, {col}) is outside a {self._size}x{self._size} board")

    def get(self, row: int, col: int) -> Optional[int]:
        """
        Get the state of one cell.

        Returns:
            None if the cell is empty, otherwise the occupying player id

        Raises:
            OutOfBoundsError: if the position is outside the board
        """
        self._check_bounds(row, col)
        value = int(self.grid[row, col])
        return None if value == EMPTY else value

    def set(self, row: int, col: int, value: Optional[int]):
        """
        Overwrite one cell unconditionally.

        Occupancy is not checked here, callers validate the move first.

        Args:
            value: Player id to place, or None to clear the cell

        Raises:
            OutOfBoundsError: if the position is outside the board
            ValueError: if value is a negative player id
        """
        self._check_bounds(row, col)
        if value is None:
            self.grid[row, col] = EMPTY
            return
        if value < 0:
            raise ValueError(f"Player id must be non-negative, got {value}")

        debug.trace(f"Setting ({row}, {col}) to player {value}", "board")
        self.grid[row, col] = value

    def empty_count(self) -> int:
        """Number of cells that are still empty."""
        return int(np.count_nonzero(self.grid == EMPTY))

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board(self._size)
        new_board.grid = self.grid.copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array with EMPTY for empty cells and player ids elsewhere
        """
        return self.grid.copy()

    def to_rows(self) -> List[List[Optional[int]]]:
        """Board cells as nested lists, row-major."""
        return [[self.get(row, col) for col in range(self._size)] for row in range(self._size)]

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
