"""
connect4x4 - Two-player Connect Four on a 4x4 board

This package provides the game engine (board, move validation, turn
management, win and tie detection) together with a pygame window, a
terminal interface and a Gymnasium environment that drive it.
"""

# Version number
__version__ = '0.1.0'
