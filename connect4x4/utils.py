"""
utils.py - Constants, enumerations and helpers for the 4x4 Connect Four game

This module provides the fixed board constants, the player and result
enumerations, direction vectors used by line detection, and the ASCII
renderer shared by the engine and the text interface.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants
ROWS = 4
COLS = 4
WIN_LENGTH = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def number(self) -> int:
        """Player number as shown to users (1 or 2)."""
        return self.value

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class Winner(Enum):
    """
    Enumeration representing the outcome of a game.

    NONE means the game is still in progress; TIE means the board filled up
    without a winning line.
    """
    NONE = auto()
    PLAYER_ONE = auto()
    PLAYER_TWO = auto()
    TIE = auto()

    @classmethod
    def for_player(cls, player: Player) -> 'Winner':
        """Map a player to the matching winning outcome."""
        if player == Player.ONE:
            return cls.PLAYER_ONE
        if player == Player.TWO:
            return cls.PLAYER_TWO
        raise ValueError(f"No winning outcome for {player!r}")

    @property
    def player(self) -> Player:
        """The winning player, or Player.EMPTY for NONE and TIE."""
        if self == Winner.PLAYER_ONE:
            return Player.ONE
        if self == Winner.PLAYER_TWO:
            return Player.TWO
        return Player.EMPTY

    def is_game_over(self) -> bool:
        """Check if this outcome ends the game."""
        return self != Winner.NONE


class Direction(Enum):
    """Enumeration representing the four line axes checked for a win."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right
    DIAGONAL_UP = auto()    # Bottom-left to top-right


# Direction vectors (row, col) for each axis; the opposite sub-direction is
# the negated vector
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of Player values, row 0 at the top

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    lines = [border]
    for row in range(rows):
        cells = [str(Player(int(value))) for value in grid[row]]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col) for col in range(cols)) + "|")

    return "\n".join(lines)
