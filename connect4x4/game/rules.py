"""
rules.py - Game engine and Gymnasium environment for the 4x4 Connect Four game

This module provides:
1. ConnectFourGame, the engine that owns the board and turn state, validates
   and applies moves and detects wins and ties
2. ConnectFourEnv, a gymnasium-compatible adapter that drives the engine one
   column choice at a time
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, List, Optional, Tuple, Union

from connect4x4.config import GameConfig
from connect4x4.debug import debug
from connect4x4.game.board import Board
from connect4x4.utils import DIRECTION_VECTORS, Player, Winner

# Reasons a move can be rejected, as returned by rejection_reason()
REASON_GAME_OVER = "game over"
REASON_OUT_OF_RANGE = "out of range"
REASON_COLUMN_FULL = "column full"


class ConnectFourGame:
    """
    Connect Four game engine.

    Holds the single source of truth for the board and turn state. Invalid
    moves are reported through the False return of drop_token and never
    change any state.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize a new game with an empty board and player one to move."""
        debug.debug("Initializing ConnectFourGame", "engine")
        self.board = Board(config)
        self.config = self.board.config
        self.reset()

    def reset(self) -> None:
        """Reset the board and game state to their initial values."""
        debug.debug("Resetting game", "engine")
        self.board.clear()
        self.current_player = Player.ONE
        self.winner = Winner.NONE
        self.game_over = False
        self.moves_count = 0
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def win_length(self) -> int:
        return self.config.win_length

    def rejection_reason(self, column: Any) -> Optional[str]:
        """
        Explain why dropping into a column would be rejected.

        Args:
            column: Column index (0-indexed)

        Returns:
            None if the move is legal, otherwise one of REASON_GAME_OVER,
            REASON_OUT_OF_RANGE or REASON_COLUMN_FULL
        """
        if self.game_over:
            return REASON_GAME_OVER

        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return REASON_OUT_OF_RANGE

        if not (0 <= column < self.cols):
            return REASON_OUT_OF_RANGE

        if self.board.is_column_full(column):
            return REASON_COLUMN_FULL

        return None

    def is_valid_move(self, column: Any) -> bool:
        """Check if dropping a token into this column would succeed."""
        return self.rejection_reason(column) is None

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that can still take a token.

        Returns:
            List of valid column indices (empty once the game is over)
        """
        if self.game_over:
            return []
        return [col for col in range(self.cols) if not self.board.is_column_full(col)]

    def drop_token(self, column: Any) -> bool:
        """
        Drop the current player's token into a column.

        Args:
            column: Column index (0-indexed)

        Returns:
            True if the token was placed, False if the move was rejected
        """
        reason = self.rejection_reason(column)
        if reason is not None:
            debug.debug(f"Rejected move in column {column!r}: {reason}", "engine")
            return False

        column = int(column)
        row = self.board.lowest_empty_row(column)
        mover = self.current_player

        self.board.place(row, column, mover)
        self.moves_count += 1
        self.last_move = (row, column)
        debug.trace(f"Player {mover.number} placed a token at ({row}, {column})", "engine")

        self._check_game_state(row, column)

        if not self.game_over:
            self.current_player = mover.other()

        return True

    def _check_game_state(self, row: int, col: int) -> None:
        """Update winner and game_over after a token landed at (row, col)."""
        debug.start_timer("win_check")
        won = self._check_win(row, col)
        debug.end_timer("win_check", "engine")

        if won:
            self.game_over = True
            self.winner = Winner.for_player(self.current_player)
            debug.info(f"Player {self.current_player.number} wins after move at ({row}, {col})", "engine")
        elif self.moves_count == self.config.cells:
            self.game_over = True
            self.winner = Winner.TIE
            debug.info("Game ends in a tie", "engine")

    def _check_win(self, row: int, col: int) -> bool:
        """Check the four axes through the last placed token for a winning run."""
        for dr, dc in DIRECTION_VECTORS.values():
            run = self.board.line_through(row, col, dr, dc, limit=self.win_length)
            if len(run) >= self.win_length:
                return True
        return False

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning line if the game is won.

        Returns:
            List of (row, col) positions forming the line, or an empty list
            if nobody has won
        """
        if self.winner not in (Winner.PLAYER_ONE, Winner.PLAYER_TWO) or self.last_move is None:
            return []

        row, col = self.last_move
        for dr, dc in DIRECTION_VECTORS.values():
            run = self.board.line_through(row, col, dr, dc)
            if len(run) >= self.win_length:
                return sorted(run)
        return []

    def get_current_player(self) -> Player:
        return self.current_player

    def is_game_over(self) -> bool:
        return self.game_over

    def get_winner(self) -> Winner:
        """
        Get the outcome of the game.

        Returns:
            Winner.NONE while the game is in progress, otherwise the winning
            player's outcome or Winner.TIE
        """
        return self.winner

    def get_board(self) -> np.ndarray:
        """Get a snapshot of the board contents as Player values."""
        return self.board.get_state()

    def get_token(self, row: int, col: int) -> Player:
        """Get the token at a position."""
        return self.board.token_at(row, col)

    def get_last_move(self) -> Optional[Tuple[int, int]]:
        return self.last_move

    def render(self) -> str:
        """Render the game as a string."""
        return self.board.render()

    def __str__(self) -> str:
        return self.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step drops a token for whichever player is to move; rewards are
    given from the point of view of the player who made the move.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    CELL_PIXELS = 50

    def __init__(self, render_mode: Optional[str] = None, config: Optional[GameConfig] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            config: Board configuration passed to the engine
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.game = ConnectFourGame(config)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.game.cols)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.game.rows, self.game.cols), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a token into the column given by action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.game.drop_token(action):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        winner = self.game.get_winner()
        terminated = winner.is_game_over()
        if winner == Winner.TIE:
            reward = self.reward_draw
        elif terminated:
            reward = self.reward_win
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            Rendered frame depending on render_mode
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.game.render()

        if self.render_mode == "human":
            print(self.game.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        size = self.CELL_PIXELS
        rows, cols = self.game.rows, self.game.cols
        frame = np.zeros((rows * size, cols * size, 3), dtype=np.uint8)
        frame[:, :] = [0, 0, 128]

        # Disc mask for a single cell, reused for every position
        yy, xx = np.mgrid[0:size, 0:size]
        centre = size // 2
        disc = (yy - centre) ** 2 + (xx - centre) ** 2 <= (size * 2 // 5) ** 2

        colors = {
            Player.EMPTY.value: [0, 0, 0],
            Player.ONE.value: [229, 57, 53],
            Player.TWO.value: [25, 118, 210],
        }
        grid = self.game.get_board()
        for row in range(rows):
            for col in range(cols):
                cell = frame[row * size:(row + 1) * size, col * size:(col + 1) * size]
                cell[disc] = colors[int(grid[row, col])]

        return frame

    def _get_observation(self) -> np.ndarray:
        return self.game.get_board()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.get_current_player().value,
            'winner': self.game.get_winner().name,
            'moves_made': self.game.moves_count,
            'winning_line': self.game.get_winning_line(),
            'last_move': self.game.get_last_move(),
        }

    def close(self):
        pass
