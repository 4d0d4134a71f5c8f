"""
fourinarow - Two-player four-in-a-row game engine

This package provides the board model, turn sequencing and win/tie detection
for a column-drop game, plus a small terminal front end built on top of it.
"""

# Version number
__version__ = '0.1.0'

from fourinarow.utils import Player, GameStatus
from fourinarow.game import (Board, Game, MoveKind, IgnoreReason, Ignored, Placed,
                             Won, Tied, new_game, drop_piece, is_active)

__all__ = ['Player', 'GameStatus', 'Board', 'Game', 'MoveKind', 'IgnoreReason',
           'Ignored', 'Placed', 'Won', 'Tied', 'new_game', 'drop_piece', 'is_active']
