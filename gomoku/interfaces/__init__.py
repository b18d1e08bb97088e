"""
gomoku.interfaces - User interfaces for Gomoku

This package contains the command-line interface for playing games
and inspecting board positions.
"""

# Don't import anything here to avoid circular imports
__all__ = []
