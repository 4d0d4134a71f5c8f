"""
rules.py - Turn sequencing and win/tie detection for the four-in-a-row engine

This module provides:
1. The MoveResult values returned for every move request
2. The Game class, which owns the turn state of one session
3. The functional API (new_game, drop_piece, is_active) used by front ends
"""

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from fourinarow.debug import debug
from fourinarow.game.board import Board
from fourinarow.utils import ROWS, COLS, CONNECT_N, DIRECTION_VECTORS, GameStatus

Coord = Tuple[int, int]


class MoveKind(Enum):
    IGNORED = "ignored"
    PLACED = "placed"
    WON = "won"
    TIED = "tied"


class IgnoreReason(Enum):
    """Why a move request was a no-op. Informational only."""
    COLUMN_FULL = "column_full"
    OUT_OF_RANGE = "out_of_range"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Ignored:
    column: int
    reason: IgnoreReason
    kind: MoveKind = field(default=MoveKind.IGNORED, init=False)


@dataclass(frozen=True)
class Placed:
    row: int
    column: int
    player: Any
    next_player: Any
    kind: MoveKind = field(default=MoveKind.PLACED, init=False)


@dataclass(frozen=True)
class Won:
    row: int
    column: int
    player: Any
    kind: MoveKind = field(default=MoveKind.WON, init=False)


@dataclass(frozen=True)
class Tied:
    row: int
    column: int
    player: Any
    kind: MoveKind = field(default=MoveKind.TIED, init=False)


MoveResult = Union[Ignored, Placed, Won, Tied]


class Game:
    """
    One two-player game session.

    The game starts in progress with the first player to move. It is only
    changed through drop_piece, and once won or tied it never changes again.
    Starting over means creating a new Game, not resetting this one.
    """

    def __init__(self, player1: Any, player2: Any, height: int = ROWS, width: int = COLS):
        """
        Initialize a new game.

        Args:
            player1: The player who moves first
            player2: The other player
            height: Number of rows on the board
            width: Number of columns on the board

        Raises:
            ValueError: If a player is None (the empty-cell marker), the two
                players are equal, or the board size is invalid
        """
        if player1 is None or player2 is None:
            raise ValueError("None cannot be a player; it marks empty cells")
        if player1 == player2:
            raise ValueError(f"Players must be distinct, got {player1!r} twice")

        debug.debug(f"Initializing Game: {player1} vs {player2} on {height}x{width}", "game")
        self.board = Board(height, width)
        self.players = (player1, player2)
        self.current_player = player1
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Any] = None
        self.moves: List[Tuple[int, int, Any]] = []

    @property
    def active(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def last_move(self) -> Optional[Coord]:
        if not self.moves:
            return None
        row, column, _ = self.moves[-1]
        return row, column

    def other_player(self, player: Any) -> Any:
        """Get the opponent of one of this game's players."""
        return self.players[1] if player == self.players[0] else self.players[0]

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop a piece for the current player.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            Ignored if nothing changed, otherwise Placed, Won or Tied
        """
        if not self.active:
            debug.debug(f"Ignoring move in column {column}: game is over ({self.status.name})", "game")
            return Ignored(column, IgnoreReason.GAME_OVER)

        if not isinstance(column, numbers.Integral):
            debug.debug(f"Ignoring move: column {column!r} is not an integer", "game")
            return Ignored(column, IgnoreReason.OUT_OF_RANGE)

        row = self.board.find_landing_row(column)
        if row is None:
            reason = (IgnoreReason.COLUMN_FULL if 0 <= column < self.board.width
                      else IgnoreReason.OUT_OF_RANGE)
            debug.debug(f"Ignoring move in column {column}: {reason.value}", "game")
            return Ignored(column, reason)

        player = self.current_player
        self.board.occupy(row, column, player)
        self.moves.append((row, column, player))
        debug.debug(f"{player} dropped into column {column}, landed on row {row}", "game")

        debug.start_timer("win_check")
        won = self.check_for_win(player)
        debug.end_timer("win_check", "game")

        if won:
            self.status = GameStatus.WON
            self.winner = player
            debug.info(f"{player} wins after move at ({row}, {column})", "game")
            return Won(row, column, player)

        if self.board.is_full():
            self.status = GameStatus.TIED
            debug.info("Game ends in a tie", "game")
            return Tied(row, column, player)

        self.current_player = self.other_player(player)
        return Placed(row, column, player, self.current_player)

    def _line(self, row: int, column: int, dr: int, dc: int) -> List[Coord]:
        return [(row + i * dr, column + i * dc) for i in range(CONNECT_N)]

    def _is_winning_line(self, cells: List[Coord], player: Any) -> bool:
        # All cells on the board and all owned by the player
        return all(
            self.board.in_bounds(r, c) and self.board.cell(r, c) == player
            for r, c in cells
        )

    def _find_line(self, player: Any) -> List[Coord]:
        """Scan every cell for a line of the player's pieces starting there."""
        for row in range(self.board.height):
            for column in range(self.board.width):
                for dr, dc in DIRECTION_VECTORS.values():
                    cells = self._line(row, column, dr, dc)
                    if self._is_winning_line(cells, player):
                        return cells
        return []

    def check_for_win(self, player: Any) -> bool:
        """
        Check the whole board for four in a row belonging to a player.

        Every cell is tried as the start of a rightward, downward,
        down-right and down-left line. The scan stops at the first hit.
        """
        return bool(self._find_line(player))

    def winning_line(self) -> List[Coord]:
        """
        Get the positions of a winning line if the game has been won.

        Returns:
            Four (row, column) positions, or an empty list if there is no winner
        """
        if self.winner is None:
            return []
        return self._find_line(self.winner)

    def end_message(self) -> Optional[str]:
        """
        The announcement for a finished game, or None while it is in progress.

        The winner is announced by str(player), which for Player is its name,
        not its color.
        """
        if self.status == GameStatus.WON:
            return f"Player {self.winner} won!"
        if self.status == GameStatus.TIED:
            return "Tie!"
        return None

    def symbols(self) -> Dict[Any, str]:
        """Characters drawn for each player, X for the first and O for the second."""
        return {self.players[0]: "X", self.players[1]: "O"}

    def render(self) -> str:
        return self.board.render(self.symbols())


def new_game(player1: Any, player2: Any, height: int = ROWS, width: int = COLS) -> Game:
    """Start a fresh game; player1 moves first."""
    return Game(player1, player2, height, width)


def drop_piece(game: Game, column: int) -> MoveResult:
    """Attempt a move for the game's current player."""
    return game.drop_piece(column)


def is_active(game: Game) -> bool:
    """Whether the game still accepts moves."""
    return game.active
