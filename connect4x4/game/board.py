"""
board.py - Board representation for the 4x4 Connect Four game

This module implements the Board class: a fixed-size grid of cells that
supports gravity drops and counting same-owner runs through a cell. Turn
order and game outcome are managed by the engine in rules.py.
"""

import numpy as np
from typing import List, Optional, Tuple

from connect4x4.config import DEFAULT_CONFIG, GameConfig
from connect4x4.debug import debug
from connect4x4.utils import Player, render_board_ascii


class Board:
    """
    Represents the Connect Four grid.

    Row 0 is the top row; tokens settle in the highest-numbered empty row of
    their column.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize an empty board."""
        self.config = config or DEFAULT_CONFIG
        self.rows = self.config.rows
        self.cols = self.config.cols
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def clear(self) -> None:
        """Empty every cell."""
        debug.trace("Clearing board", "board")
        self.grid.fill(Player.EMPTY.value)

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.config)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_column_full(self, column: int) -> bool:
        """Check whether the top cell of a column is occupied."""
        return self.grid[0, column] != Player.EMPTY.value

    def is_full(self) -> bool:
        return not np.any(self.grid == Player.EMPTY.value)

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find the row a token dropped into this column would land in.

        Scans from the bottom row upward.

        Returns:
            Row index, or None if the column is full
        """
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """Put a token for player at (row, column)."""
        self.grid[row, column] = player.value

    def token_at(self, row: int, column: int) -> Player:
        """
        Get the owner of a cell.

        Raises:
            IndexError: if (row, column) is outside the board
        """
        if not self.is_valid_position(row, column):
            raise IndexError(f"Position ({row}, {column}) is outside the {self.rows}x{self.cols} board")
        return Player(int(self.grid[row, column]))

    def count_filled(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self.grid))

    def _walk(self, row: int, col: int, dr: int, dc: int, value: int, limit: int) -> List[Tuple[int, int]]:
        # Cells owned by value stepping away from (row, col), at most limit of them
        cells = []
        r, c = row + dr, col + dc
        while len(cells) < limit and self.is_valid_position(r, c) and self.grid[r, c] == value:
            cells.append((r, c))
            r += dr
            c += dc
        return cells

    def line_through(self, row: int, col: int, dr: int, dc: int,
                     limit: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Collect the run of same-owner cells through (row, col) along an axis.

        The run starts with (row, col) itself and extends in the (dr, dc)
        direction, then in the opposite one. Each extension stops at the board
        edge, at an empty or opponent cell, or once the run holds limit cells.

        Args:
            row: Row of the starting cell
            col: Column of the starting cell
            dr: Row step of the axis
            dc: Column step of the axis
            limit: Stop once the run reaches this length (None for no limit)

        Returns:
            List of (row, col) positions in the run, starting cell first
        """
        value = self.grid[row, col]
        if value == Player.EMPTY.value:
            return []

        if limit is None:
            limit = max(self.rows, self.cols)

        run = [(row, col)]
        run += self._walk(row, col, dr, dc, value, limit - len(run))
        run += self._walk(row, col, -dr, -dc, value, limit - len(run))
        return run

    def get_state(self) -> np.ndarray:
        """
        Get the current board contents.

        Returns:
            A copy of the grid as a 2D numpy array of Player values
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
