"""
connect4x4.interfaces - User interfaces for the Connect Four game

This package contains the interfaces that translate user input into
engine calls: a pygame window and a terminal CLI.
"""

# Don't import anything here; the GUI pulls in pygame
__all__ = []
