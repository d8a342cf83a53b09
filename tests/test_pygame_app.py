"""Geometry helpers of the pygame front-end."""

import pytest

pytest.importorskip("pygame")

from samurai_tactics.client import pygame_app  # noqa: E402
from samurai_tactics.game.board import BOARD_COLS, BOARD_ROWS  # noqa: E402


def test_cell_at_maps_every_cell_center():
    size = pygame_app.DEFAULT_CELL_SIZE
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLS):
            center = pygame_app.cell_rect(row, col, size).center
            assert pygame_app.cell_at(center, size) == (row, col)


def test_cell_at_outside_board_and_in_gaps():
    size = 50
    first = pygame_app.cell_rect(0, 0, size)

    assert pygame_app.cell_at((0, 0), size) is None
    assert pygame_app.cell_at((first.right + pygame_app.GAP // 2, first.centery), size) is None


def test_window_fits_board_and_panel():
    size = 64
    width, height = pygame_app.window_size(size)
    last = pygame_app.cell_rect(BOARD_ROWS - 1, BOARD_COLS - 1, size)

    assert last.right < width
    assert last.bottom + pygame_app.PANEL_HEIGHT <= height
