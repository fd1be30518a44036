"""Shared fixtures for the test suite."""

import os

# Force headless pygame before any test imports it
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from connect4x4.game.rules import ConnectFourGame


@pytest.fixture
def game():
    """Provide a fresh engine with the default 4x4 configuration."""
    return ConnectFourGame()
