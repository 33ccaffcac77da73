"""Screen geometry, board dimensions and shared small types."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 800

# The board includes a one-cell empty border on every side.
GAME_ROW = 11
GAME_COLUMN = 18

FPS = 60
FRAME_DELAY = 1000 // FPS

# Rectangles are (x, y, width, height).
PLAY_RECT = (500, 450, 200, 100)
MAIN_MENU_RECT = (500, 600, 200, 100)

NEW_RECT = (1050, 50, 100, 50)
PAUSE_RECT = (1050, 125, 100, 50)
MENU_RECT = (1050, 200, 100, 50)

CHANCE_RECT = (1050, 400, 100, 75)

# Tile grid placement on screen.
BOARD_LEFT = 184
BOARD_TOP = 140
ICON_SIZE = 52

# Each of the tile kinds appears this many times on a fresh board.
TILE_KINDS = 24
TILE_COPIES = 6

# Seconds allowed per level; the time bar has one segment per second.
TIME_LIMIT = 420


@dataclass(frozen=True, order=True)
class Coordinate:
    """A board cell given as (row, column)."""

    x: int
    y: int