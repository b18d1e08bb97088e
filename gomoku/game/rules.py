"""
rules.py - Move validation and win/tie detection for Gomoku

A player wins with WIN_LENGTH consecutive pieces in any of the four
directions. Detection scans every cell as a candidate run start and, for each
direction, extracts a fixed-length run. Slots that fall off the board are
padded with empty cells, so a run crossing an edge can never win.
"""

from typing import List, Optional, Sequence

from gomoku.debug import debug
from gomoku.errors import OutOfBoundsError
from gomoku.game.board import Board
from gomoku.utils import DIRECTION_VECTORS, WIN_LENGTH, Direction, Position, step


def is_available(board: Board, position: Position) -> bool:
    """
    Check if a move is legal.

    Args:
        board: The game board
        position: Candidate (row, col)

    Returns:
        True if the cell is empty, False if it is taken

    Raises:
        OutOfBoundsError: if the position is outside the board
    """
    row, col = position
    if not board.in_bounds(row, col):
        raise OutOfBoundsError(f"Position ({row}, {col}) is outside a {board.size}x{board.size} board")
    return board.get(row, col) is None


def get_available_positions(board: Board) -> List[Position]:
    """Empty positions in row-major order."""
    return [Position(row, col)
            for row in range(board.size)
            for col in range(board.size)
            if board.get(row, col) is None]


def run_positions(row: int, col: int, direction: Direction, length: int = WIN_LENGTH) -> List[Position]:
    """Positions of a run of `length` cells starting at (row, col), whether on the board or not."""
    return [step((row, col), direction, i) for i in range(length)]


def extract_run(board: Board, row: int, col: int, direction: Direction,
                length: int = WIN_LENGTH) -> List[Optional[int]]:
    """
    Extract the cells of a run starting at (row, col).

    Args:
        board: The game board
        row: Row of the first cell
        col: Column of the first cell
        direction: Direction to step in
        length: Number of cells to extract

    Returns:
        Cell states along the run, with None for empty cells and for
        positions that fall outside the board
    """
    return [board.get(r, c) if board.in_bounds(r, c) else None
            for r, c in run_positions(row, col, direction, length)]


def run_winner(run: Sequence[Optional[int]]) -> Optional[int]:
    """
    Judge a single run.

    Returns:
        The player id if every cell of the run belongs to that player, else None
    """
    if not run or run[0] is None:
        return None
    first = run[0]
    if all(cell == first for cell in run[1:]):
        return first
    return None


def find_winning_run(board: Board) -> Optional[List[Position]]:
    """
    Find the first winning run on the board.

    Origins are scanned in row-major order and, at each origin, directions in
    the order horizontal, vertical, diagonal-up, diagonal-down.

    Returns:
        Positions of the winning run, or None if nobody has won
    """
    for row in range(board.size):
        for col in range(board.size):
            if board.get(row, col) is None:
                continue
            for direction in DIRECTION_VECTORS:
                if run_winner(extract_run(board, row, col, direction)) is not None:
                    debug.trace(f"Winning run at ({row}, {col}) going {direction.name}", "rules")
                    return run_positions(row, col, direction)
    return None


def get_winner(board: Board) -> Optional[int]:
    """
    Get the winner of the board.

    Returns:
        Player id of the first winning run found, or None
    """
    debug.start_timer("win_check")
    line = find_winning_run(board)
    debug.end_timer("win_check", "rules")
    if line is None:
        return None
    return board.get(*line[0])


def get_winning_line(board: Board) -> List[Position]:
    """
    Get the positions of the winning line.

    Returns:
        List of (row, col) positions forming the winning line, or empty list if no win
    """
    return find_winning_run(board) or []


def is_tie(board: Board) -> bool:
    """
    Check if every cell is occupied.

    This does not look for a winner; callers check get_winner first, since a
    full board with a winning run is a win.
    """
    return board.empty_count() == 0
