"""Tests for the Board grid: gravity, bounds and line collection."""

import numpy as np
import pytest

from connect4x4.config import GameConfig
from connect4x4.game.board import Board
from connect4x4.utils import DIRECTION_VECTORS, Direction, Player


@pytest.fixture
def board():
    return Board()


class TestBoard:

    def test_empty_board(self, board):
        assert board.grid.shape == (4, 4)
        assert board.grid.dtype == np.int8
        assert board.count_filled() == 0
        assert not board.is_full()

    def test_lowest_empty_row(self, board):
        assert board.lowest_empty_row(1) == 3
        board.place(3, 1, Player.ONE)
        board.place(2, 1, Player.TWO)
        assert board.lowest_empty_row(1) == 1

    def test_lowest_empty_row_full_column(self, board):
        for row in range(4):
            board.place(row, 0, Player.ONE)
        assert board.lowest_empty_row(0) is None
        assert board.is_column_full(0)

    def test_token_at(self, board):
        board.place(3, 2, Player.TWO)
        assert board.token_at(3, 2) == Player.TWO
        assert board.token_at(0, 0) == Player.EMPTY

    def test_token_at_rejects_negative_index(self, board):
        # numpy would otherwise wrap around to the last row
        with pytest.raises(IndexError):
            board.token_at(-1, 0)

    def test_copy_is_independent(self, board):
        board.place(3, 0, Player.ONE)
        clone = board.copy()
        clone.place(2, 0, Player.TWO)
        assert board.token_at(2, 0) == Player.EMPTY
        assert clone.token_at(3, 0) == Player.ONE

    def test_clear(self, board):
        board.place(3, 0, Player.ONE)
        board.clear()
        assert board.count_filled() == 0

    def test_is_full(self):
        board = Board(GameConfig(rows=1, cols=2, win_length=1))
        board.place(0, 0, Player.ONE)
        assert not board.is_full()
        board.place(0, 1, Player.TWO)
        assert board.is_full()


class TestLineThrough:

    def test_empty_cell_has_no_line(self, board):
        dr, dc = DIRECTION_VECTORS[Direction.HORIZONTAL]
        assert board.line_through(3, 0, dr, dc) == []

    def test_extends_both_ways(self, board):
        for col in range(4):
            board.place(3, col, Player.ONE)
        dr, dc = DIRECTION_VECTORS[Direction.HORIZONTAL]
        run = board.line_through(3, 1, dr, dc)
        assert sorted(run) == [(3, 0), (3, 1), (3, 2), (3, 3)]
        assert run[0] == (3, 1)

    def test_stops_at_opponent(self, board):
        board.place(3, 0, Player.ONE)
        board.place(3, 1, Player.ONE)
        board.place(3, 2, Player.TWO)
        board.place(3, 3, Player.ONE)
        dr, dc = DIRECTION_VECTORS[Direction.HORIZONTAL]
        assert sorted(board.line_through(3, 0, dr, dc)) == [(3, 0), (3, 1)]

    def test_stops_at_limit(self, board):
        for row in range(4):
            board.place(row, 2, Player.TWO)
        dr, dc = DIRECTION_VECTORS[Direction.VERTICAL]
        assert len(board.line_through(3, 2, dr, dc, limit=2)) == 2
        assert len(board.line_through(1, 2, dr, dc, limit=3)) == 3

    def test_diagonals(self, board):
        for i in range(4):
            board.place(i, i, Player.ONE)
        board.place(3, 0, Player.TWO)
        board.place(0, 3, Player.TWO)
        dr, dc = DIRECTION_VECTORS[Direction.DIAGONAL_DOWN]
        assert len(board.line_through(2, 2, dr, dc)) == 4
        dr, dc = DIRECTION_VECTORS[Direction.DIAGONAL_UP]
        assert board.line_through(3, 0, dr, dc) == [(3, 0)]


def test_render_marks_players(board):
    board.place(3, 0, Player.ONE)
    board.place(3, 3, Player.TWO)
    lines = str(board).splitlines()
    assert lines[0] == "|-------|"
    assert lines[4] == "|X     O|"
