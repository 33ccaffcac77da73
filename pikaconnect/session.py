"""One level being played: the board, the selection, chances and the clock."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Callable, Optional, Tuple

from .board import Board
from .constants import (
    BOARD_LEFT,
    BOARD_TOP,
    GAME_COLUMN,
    GAME_ROW,
    ICON_SIZE,
    TIME_LIMIT,
    Coordinate,
)
from .timer import Timer

LEVELS = range(1, 8)


class Selection(Enum):
    """What a click on a board cell did."""

    IGNORED = auto()
    FIRST = auto()
    CANCELLED = auto()
    MATCHED = auto()
    MISMATCHED = auto()


def cell_at(px: int, py: int) -> Tuple[int, int]:
    """Board cell (row, column) under screen point (px, py).

    Offsets are truncated toward zero, so points just above or left of the
    grid map onto its first row or column.
    """
    return 1 + int((py - BOARD_TOP) / ICON_SIZE), 1 + int((px - BOARD_LEFT) / ICON_SIZE)


class Session:
    """State of a level in play.

    ``chances`` is the number carried over from the previous level; the
    session starts with one more. A fresh board is dealt unless one is given.
    """

    def __init__(
        self,
        level: int,
        chances: int = 0,
        *,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown level: {level}")
        self.level = level
        self._rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else Board.new(self._rng)
        self.chances = chances + 1
        self.selected: Optional[Coordinate] = None
        self.timer = Timer(clock)
        self.timer.start()

    def click_cell(self, x: int, y: int) -> Selection:
        """Select, deselect or try to match the tile at (x, y)."""
        if not (0 <= x < GAME_ROW - 1 and 0 <= y < GAME_COLUMN - 1) or self.board[x, y] == 0:
            return Selection.IGNORED

        cell = Coordinate(x, y)
        if self.selected == cell:
            self.selected = None
            return Selection.CANCELLED
        if self.selected is None:
            self.selected = cell
            return Selection.FIRST

        first, self.selected = self.selected, None
        if not self.board.find_way(first.x, first.y, x, y):
            return Selection.MISMATCHED
        self._remove(first.x, first.y, x, y)
        return Selection.MATCHED

    def _remove(self, xa: int, ya: int, xb: int, yb: int) -> None:
        self.board.remove(self.level, xa, ya, xb, yb)
        if not self.board.is_complete() and not self.board.has_move():
            self.chances -= 1
            while not self.board.has_move():
                self.board.shuffle(self._rng)

    def time_left(self) -> int:
        """Whole seconds remaining on the level clock."""
        return TIME_LIMIT - self.timer.ticks() // 1000

    def pause(self) -> None:
        self.timer.pause()

    def unpause(self) -> None:
        self.timer.unpause()

    def is_complete(self) -> bool:
        return self.board.is_complete()