"""
connect4x4.game - Core game mechanics for the 4x4 Connect Four game

This package contains the board representation and the game engine,
plus a Gymnasium environment wrapping the engine.
"""

from connect4x4.game.board import Board
from connect4x4.game.rules import ConnectFourGame, ConnectFourEnv

__all__ = ['Board', 'ConnectFourGame', 'ConnectFourEnv']
