"""Tests for configuration, logging and the run.py entry point."""

import logging

import pytest

import run
from connect4x4.config import (
    DEBUG_LEVEL_ENV,
    DEFAULT_CONFIG,
    DisplayConfig,
    GameConfig,
    default_debug_level,
    hex_color,
)
from connect4x4.debug import LOGGER_NAME, DebugLevel, DebugManager
from connect4x4.utils import Player, Winner

from .game_sequences import HORIZONTAL_WIN


class TestGameConfig:

    def test_defaults(self):
        assert (DEFAULT_CONFIG.rows, DEFAULT_CONFIG.cols, DEFAULT_CONFIG.win_length) == (4, 4, 4)
        assert DEFAULT_CONFIG.cells == 16

    @pytest.mark.parametrize("rows, cols, win_length", [
        (0, 4, 4),
        (4, -1, 4),
        (4, 4, 0),
        (3, 3, 4),
    ])
    def test_invalid_configs(self, rows, cols, win_length):
        with pytest.raises(ValueError):
            GameConfig(rows=rows, cols=cols, win_length=win_length)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.rows = 6


def test_display_colors():
    display = DisplayConfig()
    assert hex_color(0xE53935) == (229, 57, 53)
    assert display.player_one == (229, 57, 53)
    assert display.player_two == (25, 118, 210)


def test_default_debug_level_from_environment(monkeypatch):
    monkeypatch.delenv(DEBUG_LEVEL_ENV, raising=False)
    assert default_debug_level() == "warning"
    monkeypatch.setenv(DEBUG_LEVEL_ENV, "debug")
    assert default_debug_level() == "debug"


class TestEnums:

    def test_player_other(self):
        assert Player.ONE.other() == Player.TWO
        assert Player.TWO.other() == Player.ONE
        assert Player.EMPTY.other() == Player.EMPTY

    def test_winner_for_player(self):
        assert Winner.for_player(Player.ONE) == Winner.PLAYER_ONE
        assert Winner.for_player(Player.TWO).player == Player.TWO
        assert Winner.TIE.player == Player.EMPTY
        with pytest.raises(ValueError):
            Winner.for_player(Player.EMPTY)

    def test_game_over_outcomes(self):
        assert not Winner.NONE.is_game_over()
        assert all(w.is_game_over() for w in (Winner.PLAYER_ONE, Winner.PLAYER_TWO, Winner.TIE))


@pytest.fixture
def manager():
    manager = DebugManager()
    yield manager
    manager.configure(level=DebugLevel.WARNING, console=False, log_file="", components=[])


class TestDebugManager:

    def test_level_parsing(self):
        assert DebugLevel.from_string(" Trace ") == DebugLevel.TRACE
        with pytest.raises(ValueError):
            DebugLevel.from_string("loud")

    def test_filters_by_level(self, manager, caplog):
        manager.configure(level=DebugLevel.INFO)
        manager.debug("hidden", "engine")
        manager.info("shown", "engine")
        messages = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]
        assert messages == ["[engine] shown"]

    def test_filters_by_component(self, manager, caplog):
        manager.configure(level=DebugLevel.DEBUG, components=["gui"])
        manager.debug("engine message", "engine")
        manager.debug("gui message", "gui")
        messages = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]
        assert messages == ["[gui] gui message"]

    def test_none_silences_everything(self, manager, caplog):
        manager.configure(level=DebugLevel.NONE)
        manager.error("nothing")
        assert not [r for r in caplog.records if r.name == LOGGER_NAME]

    def test_log_file(self, manager, tmp_path):
        path = tmp_path / "game.log"
        manager.configure(level=DebugLevel.INFO, log_file=str(path))
        manager.info("written", "cli")
        manager.configure(log_file="")
        assert "[cli] written" in path.read_text()

    def test_timer(self, manager):
        assert manager.end_timer("missing") is None
        manager.start_timer("t")
        assert manager.end_timer("t") >= 0.0

    def test_engine_logs_win(self, caplog, game):
        from connect4x4.debug import debug
        debug.configure(level=DebugLevel.INFO)
        try:
            for col in HORIZONTAL_WIN:
                game.drop_token(col)
        finally:
            debug.configure(level=DebugLevel.WARNING)
        assert any("Player 1 wins" in r.getMessage() for r in caplog.records)

    def test_set_from_string(self, manager):
        manager.set_from_string("debug")
        assert manager.level == DebugLevel.DEBUG
        manager.set_from_string("bogus")
        assert manager.level == DebugLevel.DEBUG
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG


class TestRunEntryPoint:

    def test_parser_defaults(self, monkeypatch):
        monkeypatch.delenv(DEBUG_LEVEL_ENV, raising=False)
        args = run.build_parser().parse_args([])
        assert args.mode == "gui"
        assert args.debug_level == "warning"

    def test_cli_mode(self, monkeypatch, capsys):
        answers = [str(col) for col in HORIZONTAL_WIN]
        monkeypatch.setattr("builtins.input", lambda prompt="": answers.pop(0))
        assert run.main(["cli", "--once", "--debug-level", "none"]) == 0
        assert "Player 1 wins!" in capsys.readouterr().out

    def test_bad_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(DEBUG_LEVEL_ENV, "loud")
        with pytest.raises(SystemExit):
            run.main(["cli"])
