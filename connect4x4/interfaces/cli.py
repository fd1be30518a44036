"""
cli.py - Command-line interface for the 4x4 Connect Four game

This module lets two people share a terminal: each turn the current player
types a column number, and the board is redrawn after every accepted move.
"""

import argparse
import sys
from typing import List, Optional

from connect4x4.debug import debug, DebugLevel
from connect4x4.game.rules import ConnectFourGame, REASON_COLUMN_FULL, REASON_GAME_OVER
from connect4x4.utils import Winner

# Commands recognised at the move prompt
QUIT = "q"
RESTART = "r"

BELL = "\a"


class SimpleCLI:
    """Two-player command-line interface for Connect Four."""

    def __init__(self, game: Optional[ConnectFourGame] = None):
        """Initialize the CLI."""
        self.game = game or ConnectFourGame()
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four (4x4) in the terminal')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--once', action='store_true',
                            help='Exit after one game instead of offering a rematch')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG, console=True)

    def run(self) -> None:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        while True:
            finished = self.play_game()
            if not finished or self.args.once or not self.ask_play_again():
                break
            self.game.reset()

        print("Goodbye!")

    def play_game(self) -> bool:
        """
        Play one game until it ends or a player quits.

        Returns:
            True if the game reached a win or tie, False if a player quit
        """
        last_col = self.game.cols - 1
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{last_col}) to drop a token.")
        print(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        print(self.game.render())

        while not self.game.is_game_over():
            player = self.game.get_current_player()
            try:
                command = input(f"Player {player.number} ({player}), your move: ").strip().lower()
            except EOFError:
                command = QUIT

            if command == QUIT:
                print("Quitting game.")
                return False

            if command == RESTART:
                self.game.reset()
                print("Game restarted.")
                print(self.game.render())
                continue

            try:
                column = int(command)
            except ValueError:
                print(f"Invalid input '{command}'. Enter a column number (0-{last_col}), "
                      f"'{QUIT}' or '{RESTART}'.")
                continue

            self.handle_move(column)

        self.announce_result()
        return True

    def handle_move(self, column: int) -> bool:
        """
        Try to drop a token and report the outcome.

        Returns:
            True if the token was placed
        """
        # The reason has to be read before the attempt; a rejected drop leaves no trace
        reason = self.game.rejection_reason(column)
        if self.game.drop_token(column):
            print(self.game.render())
            return True

        sys.stdout.write(BELL)
        print(self.describe_rejection(column, reason))
        return False

    def describe_rejection(self, column: int, reason: Optional[str]) -> str:
        """Turn an engine rejection reason into a message for the player."""
        if reason == REASON_GAME_OVER:
            return "The game is over. Press 'r' to start a new one."
        if reason == REASON_COLUMN_FULL:
            return f"Column {column} is full. Choose another column."
        return f"Column must be between 0 and {self.game.cols - 1}."

    def announce_result(self) -> None:
        """Print the outcome of a finished game."""
        print("Game over!")
        winner = self.game.get_winner()
        if winner == Winner.TIE:
            print("It's a Tie!")
        else:
            print(f"Player {winner.player.number} wins!")

    def ask_play_again(self) -> bool:
        try:
            answer = input("Play again? [y/N]: ").strip().lower()
        except EOFError:
            return False
        return answer in ("y", "yes")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    cli.run()


if __name__ == "__main__":
    main()
