"""
board.py - Board representation for the four-in-a-row engine

This module implements the Board class, which owns the grid of cell occupants
and resolves where a piece dropped into a column lands. It knows nothing about
turns or winning; occupants are opaque player values.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from fourinarow.debug import debug
from fourinarow.utils import ROWS, COLS, render_board_ascii


class Board:
    """
    A fixed-size grid of height rows by width columns.

    Row 0 is the top of the board and row ``height - 1`` the bottom. Each
    cell holds None when empty or the player occupying it. Cells are never
    emptied once occupied.
    """

    def __init__(self, height: int = ROWS, width: int = COLS):
        """
        Initialize an empty board.

        Boards smaller than 4x4 are allowed; they simply can never be won.

        Raises:
            ValueError: If either dimension is not positive
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        debug.debug(f"Initializing new {height}x{width} Board", "board")
        self.height = height
        self.width = width
        self.grid = np.full((height, width), None, dtype=object)

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= row < self.height and 0 <= column < self.width

    def cell(self, row: int, column: int) -> Any:
        """Get the occupant of a cell, or None if it is empty."""
        return self.grid[row, column]

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would settle in.

        Scans from the bottom row upward and does not modify the board.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row index, or None if the column is full
            (or outside the board)
        """
        if not 0 <= column < self.width:
            debug.trace(f"Column {column} is off the board", "board")
            return None

        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] is None:
                return row

        debug.trace(f"Column {column} is full", "board")
        return None

    def occupy(self, row: int, column: int, player: Any) -> None:
        """
        Mark a cell as occupied by a player.

        The caller must have obtained ``row`` from find_landing_row, so the
        cell is empty and supported from below.
        """
        debug.trace(f"Placing {player} at ({row}, {column})", "board")
        self.grid[row, column] = player

    def is_full(self) -> bool:
        """Check if every cell on the board is occupied."""
        return all(cell is not None for cell in self.grid.flat)

    def filled_count(self) -> int:
        """Number of occupied cells."""
        return sum(cell is not None for cell in self.grid.flat)

    def valid_columns(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(self.width) if self.grid[0, col] is None]

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Presentation code reads from this copy and never touches the
        board's own grid.
        """
        return self.grid.copy()

    def render(self, symbols: Optional[Dict[Any, str]] = None) -> str:
        """Render the board as ASCII art, optionally with a character per occupant."""
        return render_board_ascii(self.grid, symbols)

    def __str__(self) -> str:
        return self.render()


def create_board(height: int = ROWS, width: int = COLS) -> Board:
    """Create an empty board of the given size."""
    return Board(height, width)
