"""
utils.py - Utility functions and constants for the Gomoku implementation

This module provides common constants, enumerations, and helper functions
used throughout the game: direction vectors for run scanning, parsing of
typed coordinates, and the ASCII board renderer.
"""

import re
from enum import Enum, auto
from typing import NamedTuple, Tuple

import numpy as np

from gomoku.errors import MalformedInputError, OutOfBoundsError

# Game constants
BOARD_SIZE = 15
WIN_LENGTH = 5  # Number of pieces in a row to win
NUM_PLAYERS = 2
EMPTY = -1  # Grid value of an unoccupied cell

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class Position(NamedTuple):
    """A (row, col) coordinate on the board."""
    row: int
    col: int


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Row decreasing, column increasing
    DIAGONAL_DOWN = auto()  # Row increasing, column increasing


# Direction vectors (row, col). Iteration order is the scan order used by the win detector.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def is_valid_position(row: int, col: int, size: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        size: Side length of the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < size and 0 <= col < size


def step(position: Tuple[int, int], direction: Direction, count: int = 1) -> Position:
    """Move `count` steps from `position` along `direction`."""
    dr, dc = DIRECTION_VECTORS[direction]
    return Position(position[0] + dr * count, position[1] + dc * count)


def _parse_position_part(token: str, board_size: int) -> int:
    # ASCII digits with an optional sign
    if not _INTEGER_TOKEN.fullmatch(token):
        raise MalformedInputError("Not an integer")
    value = int(token)

    if value < 0:
        raise OutOfBoundsError("Negative")
    if value >= board_size:
        raise OutOfBoundsError("Too large")
    return value


def parse_position(text: str, board_size: int) -> Position:
    """
    Parse a typed move of the form "row col".

    Args:
        text: Raw input line
        board_size: Side length of the board the move is meant for

    Returns:
        The parsed position

    Raises:
        MalformedInputError: if the text is not two integer tokens
        OutOfBoundsError: if either coordinate is outside [0, board_size)
    """
    parts = text.split()
    if len(parts) != 2:
        raise MalformedInputError("Not 2 parts")
    return Position(_parse_position_part(parts[0], board_size),
                    _parse_position_part(parts[1], board_size))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    The header lists two-digit column numbers and every row starts with its
    two-digit index. Empty cells are blank, occupied cells show the player id.

    Args:
        grid: The game grid

    Returns:
        ASCII representation of the board
    """
    size = grid.shape[0]
    lines = ["   " + "".join(f"{col:02} " for col in range(size))]

    for row in range(size):
        line = f"{row:02} "
        for cell in grid[row]:
            line += " " if cell == EMPTY else str(int(cell))
            line += "  "
        lines.append(line)

    return "\n".join(lines) + "\n"
