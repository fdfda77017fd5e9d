"""Cursor movement over the board of letter tiles."""

from __future__ import annotations

from enum import Enum

ROWS = 6
COLS = 5


class Direction(Enum):
    """An arrow-key direction as a (row, column) offset."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def opposite(self) -> Direction:
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


def _inside(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def step(row: int, col: int, direction: Direction) -> tuple[int, int]:
    """Return the tile reached by moving one step; stay put at the edge."""
    if not _inside(row, col):
        raise ValueError(f"position ({row}, {col}) is outside the board")
    d_row, d_col = direction.value
    new_row, new_col = row + d_row, col + d_col
    if _inside(new_row, new_col):
        return new_row, new_col
    return row, col