"""
config.py - Configuration for the Connect Four game and its interfaces

GameConfig carries the board dimensions and win length into the engine;
DisplayConfig carries the sizes and colors used by the pygame interface.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from connect4x4.utils import ROWS, COLS, WIN_LENGTH

Color = Tuple[int, int, int]

# Environment variable holding the default log level for run.py
DEBUG_LEVEL_ENV = "CONNECT4X4_DEBUG_LEVEL"
DEFAULT_DEBUG_LEVEL = "warning"


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions and win length for one game."""
    rows: int = ROWS
    cols: int = COLS
    win_length: int = WIN_LENGTH

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board must have at least one row and column, got {self.rows}x{self.cols}")
        if self.win_length < 1:
            raise ValueError(f"Win length must be positive, got {self.win_length}")
        if self.win_length > max(self.rows, self.cols):
            raise ValueError(
                f"Win length {self.win_length} cannot fit on a {self.rows}x{self.cols} board")

    @property
    def cells(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols


DEFAULT_CONFIG = GameConfig()


def hex_color(value: int) -> Color:
    """Convert a 0xRRGGBB integer into an (r, g, b) tuple."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass(frozen=True)
class DisplayConfig:
    """Layout and colors for the graphical interface."""
    cell_size: int = 90
    header_height: int = 40
    gap: int = 5
    margin: int = 10
    min_width: int = 640
    status_height: int = 50
    footer_height: int = 90
    button_size: Tuple[int, int] = (120, 40)
    flash_ms: int = 300
    fps: int = 30

    background: Color = (255, 255, 255)
    board: Color = hex_color(0x1E88E5)
    player_one: Color = hex_color(0xE53935)  # Red
    player_two: Color = hex_color(0x1976D2)  # Blue
    empty: Color = hex_color(0xFAFAFA)
    grid: Color = hex_color(0x1565C0)
    header: Color = hex_color(0x0D47A1)
    header_text: Color = (255, 255, 255)
    error: Color = (120, 120, 120)
    tie_text: Color = (128, 128, 128)
    info_text: Color = (128, 128, 128)
    button: Color = hex_color(0x4CAF50)
    button_hover: Color = hex_color(0x45A049)
    winning_outline: Color = (255, 193, 7)


def default_debug_level() -> str:
    """Log level name taken from the environment, falling back to the default."""
    return os.environ.get(DEBUG_LEVEL_ENV, DEFAULT_DEBUG_LEVEL)
