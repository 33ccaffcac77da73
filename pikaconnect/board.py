"""The tile grid and the rules for connecting two tiles."""

from __future__ import annotations

import random
from collections import defaultdict
from itertools import combinations
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .constants import GAME_COLUMN, GAME_ROW, TILE_COPIES, TILE_KINDS
from .gravity import remove_pair

Cell = Tuple[int, int]


def _interior() -> Iterator[Cell]:
    """Every playable cell, row by row, skipping the empty border."""
    for x in range(1, GAME_ROW - 1):
        for y in range(1, GAME_COLUMN - 1):
            yield x, y


def _span(line: Sequence[int], pos: int) -> Tuple[int, int]:
    """Lowest and highest index reachable from ``pos`` over empty cells."""
    lo = pos
    while lo > 0 and line[lo - 1] == 0:
        lo -= 1
    hi = pos
    while hi < len(line) - 1 and line[hi + 1] == 0:
        hi += 1
    return lo, hi


class Board:
    """A GAME_ROW x GAME_COLUMN grid of tile kinds, 0 meaning empty."""

    def __init__(self, cells: Optional[Iterable[Iterable[int]]] = None) -> None:
        if cells is None:
            rows = [[0] * GAME_COLUMN for _ in range(GAME_ROW)]
        else:
            rows = [list(row) for row in cells]
        if len(rows) != GAME_ROW or any(len(row) != GAME_COLUMN for row in rows):
            raise ValueError(f"board must be {GAME_ROW} rows of {GAME_COLUMN} cells")
        self.cells: List[List[int]] = rows

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> "Board":
        """A freshly dealt board: every tile kind appears TILE_COPIES times."""
        rng = rng if rng is not None else random.Random()
        values = [kind for kind in range(1, TILE_KINDS + 1) for _ in range(TILE_COPIES)]
        rng.shuffle(values)
        board = cls()
        for (x, y), value in zip(_interior(), values):
            board.cells[x][y] = value
        return board

    def __getitem__(self, cell: Cell) -> int:
        x, y = cell
        return self.cells[x][y]

    def __setitem__(self, cell: Cell, value: int) -> None:
        x, y = cell
        self.cells[x][y] = value

    def check_x(self, xa: int, ya: int, xb: int, yb: int) -> bool:
        """Whether the tiles join by going vertically, across one row, then vertically."""
        lo_a, hi_a = _span([row[ya] for row in self.cells], xa)
        lo_b, hi_b = _span([row[yb] for row in self.cells], xb)
        lo, hi = max(lo_a, lo_b), min(hi_a, hi_b)
        if lo > hi:
            return False
        if ya == yb:
            return True
        left, right = sorted((ya, yb))
        return any(
            all(value == 0 for value in self.cells[i][left + 1 : right])
            for i in range(lo, hi + 1)
        )

    def check_y(self, xa: int, ya: int, xb: int, yb: int) -> bool:
        """Whether the tiles join by going horizontally, down one column, then horizontally."""
        lo_a, hi_a = _span(self.cells[xa], ya)
        lo_b, hi_b = _span(self.cells[xb], yb)
        lo, hi = max(lo_a, lo_b), min(hi_a, hi_b)
        if lo > hi:
            return False
        if xa == xb:
            return True
        top, bottom = sorted((xa, xb))
        return any(
            all(self.cells[j][i] == 0 for j in range(top + 1, bottom))
            for i in range(lo, hi + 1)
        )

    def find_way(self, xa: int, ya: int, xb: int, yb: int) -> bool:
        """Whether the two tiles match and can be connected."""
        if self.cells[xa][ya] != self.cells[xb][yb]:
            return False
        return self.check_x(xa, ya, xb, yb) or self.check_y(xa, ya, xb, yb)

    def has_move(self) -> bool:
        """Whether any pair of tiles on the board can be removed."""
        groups: Dict[int, List[Cell]] = defaultdict(list)
        for cell in _interior():
            if self[cell]:
                groups[self[cell]].append(cell)
        return any(
            self.find_way(*a, *b)
            for cells in groups.values()
            for a, b in combinations(cells, 2)
        )

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Rearrange the remaining tiles among the occupied cells."""
        rng = rng if rng is not None else random.Random()
        occupied = [cell for cell in _interior() if self[cell]]
        values = [self[cell] for cell in occupied]
        rng.shuffle(values)
        for cell, value in zip(occupied, values):
            self[cell] = value

    def is_complete(self) -> bool:
        """Whether every tile has been removed."""
        return all(self[cell] == 0 for cell in _interior())

    def remove(self, level: int, xa: int, ya: int, xb: int, yb: int) -> None:
        """Remove a pair and move the other tiles as the level dictates."""
        remove_pair(self.cells, level, xa, ya, xb, yb)