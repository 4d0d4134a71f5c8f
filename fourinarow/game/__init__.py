"""
fourinarow.game - Core game mechanics

This package contains the board representation and the game engine that
sequences turns and detects wins and ties.
"""

from fourinarow.game.board import Board, create_board
from fourinarow.game.rules import (Game, MoveKind, IgnoreReason, Ignored, Placed, Won,
                                   Tied, new_game, drop_piece, is_active)

__all__ = ['Board', 'create_board', 'Game', 'MoveKind', 'IgnoreReason', 'Ignored',
           'Placed', 'Won', 'Tied', 'new_game', 'drop_piece', 'is_active']
