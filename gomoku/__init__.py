"""
gomoku - Gomoku (five in a row) game implementation

This package provides a text-based N-in-a-row game: a square board,
move validation, win and tie detection, a turn controller, and a
command-line interface for playing and inspecting positions.
"""

# Version number
__version__ = '0.1.0'
