"""Removal of a matched pair and the per-level tile movement that follows."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .constants import GAME_COLUMN

Board = List[List[int]]
Cell = Tuple[int, int]

# Columns below this index form the left half of the board for levels 6 and 7.
_SPLIT = GAME_COLUMN // 2


def _fall_down(board: Board, x: int, y: int) -> None:
    """Cells above (x, y) drop one row, filling the hole."""
    above = [row[y] for row in board[:x]]
    for row, value in zip(board[1 : x + 1], above):
        row[y] = value


def _rise_up(board: Board, x: int, y: int) -> None:
    """Cells below (x, y) rise one row, filling the hole."""
    below = [row[y] for row in board[x + 1 :]]
    for row, value in zip(board[x:-1], below):
        row[y] = value


def _slide_right(board: Board, x: int, y: int) -> None:
    """Cells left of (x, y) move one column right."""
    row = board[x]
    row[1 : y + 1] = row[:y]


def _slide_left(board: Board, x: int, y: int) -> None:
    """Cells right of (x, y) move one column left."""
    row = board[x]
    row[y:-1] = row[y + 1 :]


def _split_outward(board: Board, x: int, y: int) -> None:
    """Each half closes its hole away from the centre line."""
    row = board[x]
    if y < _SPLIT:
        row[y : _SPLIT - 1] = row[y + 1 : _SPLIT]
        row[_SPLIT - 1] = 0
    else:
        row[_SPLIT + 1 : y + 1] = row[_SPLIT:y]
        row[_SPLIT] = 0


def _split_inward(board: Board, x: int, y: int) -> None:
    """Each half closes its hole toward the centre line."""
    row = board[x]
    if y < _SPLIT:
        row[1 : y + 1] = row[:y]
    else:
        row[y:-1] = row[y + 1 :]
        row[-1] = 0


# For each level: how one hole is closed, and the order in which two holes on
# the same line must be processed so the second hole is still where expected.
_RULES: Dict[int, Tuple[Callable[[Board, int, int], None], Callable[[Cell], int]]] = {
    2: (_fall_down, lambda cell: cell[0]),
    3: (_rise_up, lambda cell: -cell[0]),
    4: (_slide_right, lambda cell: cell[1]),
    5: (_slide_left, lambda cell: -cell[1]),
    6: (_split_outward, lambda cell: -cell[1] if cell[1] < _SPLIT else cell[1]),
    7: (_split_inward, lambda cell: cell[1] if cell[1] < _SPLIT else -cell[1]),
}


def remove_pair(board: Board, level: int, xa: int, ya: int, xb: int, yb: int) -> None:
    """Remove tiles (xa, ya) and (xb, yb) from ``board`` in place.

    Level 1 just empties both cells; levels 2 to 7 also move the remaining
    tiles to close the holes. Raises ValueError for any other level.
    """
    if level == 1:
        board[xa][ya] = 0
        board[xb][yb] = 0
        return
    try:
        close_hole, order = _RULES[level]
    except KeyError:
        raise ValueError(f"unknown level: {level}") from None
    for x, y in sorted([(xa, ya), (xb, yb)], key=order):
        close_hole(board, x, y)