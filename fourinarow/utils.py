"""
utils.py - Constants, shared value types and helpers for the four-in-a-row engine

This module provides the default board dimensions, the direction vectors used
by win detection, the immutable Player value, the GameStatus enumeration and
an ASCII renderer for board grids.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a line to win


@dataclass(frozen=True)
class Player:
    """
    An immutable player identity.

    Players are compared by value and never mutated after creation. The
    engine only needs equality, so any other hashable value works too.
    """
    name: str
    color: str = ""

    def __str__(self):
        return self.name


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing the directions a line can extend in."""
    HORIZONTAL = auto()     # Rightward
    VERTICAL = auto()       # Downward
    DIAGONAL_DOWN = auto()  # Down-right
    DIAGONAL_UP = auto()    # Down-left (anti-diagonal)


# Direction vectors (row, col) for each direction, in probe order
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


def player_symbol(player: Any) -> str:
    """
    Get the single character used to draw a player's piece.

    Args:
        player: The occupant of a cell, or None for an empty cell

    Returns:
        A one-character string
    """
    if player is None:
        return " "
    label = str(player)
    return label[0].upper() if label else "?"


def _symbol_for(cell: Any, symbols: Optional[Dict[Any, str]]) -> str:
    if cell is not None and symbols and cell in symbols:
        return symbols[cell]
    return player_symbol(cell)


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[Any, str]] = None) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell occupants (None for empty)
        symbols: Optional mapping from occupant to the character drawn for it;
            occupants not in the mapping fall back to player_symbol

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    result = [border]
    for row in range(rows):
        cells = [_symbol_for(grid[row, col], symbols) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so wide boards stay aligned
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
