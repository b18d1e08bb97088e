"""
gomoku.game - Core game mechanics for Gomoku

This package contains the board representation, the move and win rules,
and the turn controller that drives a game to its end.
"""

from gomoku.game.board import Board
from gomoku.game.controller import GameController, ScriptedMoveSource
from gomoku.game.rules import get_winner, is_available, is_tie

__all__ = ['Board', 'GameController', 'ScriptedMoveSource', 'get_winner', 'is_available', 'is_tie']
