"""
cli.py - Command-line front end for the four-in-a-row engine

This module provides a hot-seat terminal game for two people and a replay
command that applies a scripted list of moves. It only talks to the engine
through new_game / drop_piece and the results they return.
"""

import argparse
import sys
from typing import Callable, List, Optional

from fourinarow.debug import debug, DebugLevel
from fourinarow.game.rules import Game, MoveKind, IgnoreReason, MoveResult, new_game
from fourinarow.utils import ROWS, COLS, Player

QUIT = "q"
RESTART = "r"

IGNORE_MESSAGES = {
    IgnoreReason.COLUMN_FULL: "Column {column} is full.",
    IgnoreReason.OUT_OF_RANGE: "Column {column} is not on the board.",
    IgnoreReason.GAME_OVER: "The game is already over.",
}


def parse_moves(moves_str: str) -> List[int]:
    """
    Parse a comma-separated move list such as "3,3,4".

    Raises:
        ValueError: If any entry is not an integer
    """
    moves = []
    for part in moves_str.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            moves.append(int(part))
        except ValueError:
            raise ValueError(f"Invalid column '{part}' in move list") from None
    return moves


class SimpleCLI:
    """Simple command-line interface for playing and replaying games."""

    def __init__(self, input_fn: Callable[[str], str] = input):
        """
        Initialize the CLI.

        Args:
            input_fn: Function used to read a line from the user
        """
        self.input_fn = input_fn
        self.args = None
        self.game: Optional[Game] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Four-in-a-row for two players')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        def add_game_options(sub):
            sub.add_argument('--height', type=int, default=ROWS, help='Number of rows')
            sub.add_argument('--width', type=int, default=COLS, help='Number of columns')
            sub.add_argument('--p1', default='Red', help='Name of the first player')
            sub.add_argument('--p2', default='Yellow', help='Name of the second player')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        add_game_options(play_parser)

        replay_parser = subparsers.add_parser('replay', help='Apply a scripted list of moves')
        add_game_options(replay_parser)
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated columns, e.g. 3,3,4,4')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments and apply the logging options."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI; returns a process exit status."""
        if self.args is None:
            self.parse_args(argv)

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay()

        self.build_parser().print_help()
        return 1

    def start_game(self) -> Game:
        """Create a fresh game, discarding any previous one."""
        players = (Player(self.args.p1, 'red'), Player(self.args.p2, 'yellow'))
        self.game = new_game(players[0], players[1], self.args.height, self.args.width)
        debug.debug(f"Started new {self.args.height}x{self.args.width} game", "cli")
        print(", ".join(f"{p} plays {s}" for p, s in self.game.symbols().items()))
        return self.game

    def report(self, result: MoveResult) -> None:
        """Print what a move did."""
        if result.kind == MoveKind.IGNORED:
            print(IGNORE_MESSAGES[result.reason].format(column=result.column))
            return

        print(self.game.render())
        if result.kind == MoveKind.PLACED:
            print(f"{result.player} played column {result.column}. {result.next_player} to move.")
        else:
            line = self.game.winning_line()
            if line:
                print("Winning line: " + " ".join(f"({r},{c})" for r, c in line))
            print(self.game.end_message())

    def play_game(self) -> int:
        """Play a hot-seat game until it ends or the user quits."""
        try:
            self.start_game()
        except ValueError as e:
            print(f"Cannot start game: {e}")
            return 1

        print(f"Enter a column number (0-{self.game.board.width - 1}) to drop a piece.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        print(self.game.render())

        while self.game.active:
            try:
                user_input = self.input_fn(f"{self.game.current_player}'s move: ").strip().lower()
            except EOFError:
                print()
                return 0

            if user_input == QUIT:
                print("Quitting game.")
                return 0
            if user_input == RESTART:
                self.start_game()
                print("Game restarted.")
                print(self.game.render())
                continue

            try:
                column = int(user_input)
            except ValueError:
                print("Invalid input. Please enter a column number or command.")
                continue

            self.report(self.game.drop_piece(column))

        return 0

    def replay(self) -> int:
        """Apply the moves given on the command line and show each result."""
        try:
            moves = parse_moves(self.args.moves)
            self.start_game()
        except ValueError as e:
            print(f"Error: {e}")
            return 1

        for column in moves:
            if not self.game.active:
                debug.warning(f"Ignoring remaining moves after game end: {column}", "cli")
                break
            self.report(self.game.drop_piece(column))

        if self.game.active:
            print(f"Game still in progress; {self.game.current_player} to move.")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
