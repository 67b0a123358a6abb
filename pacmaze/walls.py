"""Checks that a map is enclosed by walls and fits on screen."""

from __future__ import annotations

from typing import Sequence

WALL = "1"
MAX_ROWS = 40
MAX_LINES = 20


class WindowTooLargeError(ValueError):
    """The map is larger than the window allows."""


def _require_rows(grid: Sequence[str]) -> None:
    if not grid:
        raise ValueError("empty map")


def _all_wall(row: str) -> bool:
    return all(cell == WALL for cell in row)


def check_upper_wall(grid: Sequence[str]) -> bool:
    """Return True if the first row is made only of walls."""
    _require_rows(grid)
    return _all_wall(grid[0])


def check_lower_wall(grid: Sequence[str]) -> bool:
    """Return True if the last row is made only of walls."""
    _require_rows(grid)
    return _all_wall(grid[-1])


def check_left_wall(grid: Sequence[str]) -> bool:
    """Return True if every row above the last starts with a wall."""
    _require_rows(grid)
    return all(row[:1] == WALL for row in grid[:-1])


def check_right_wall(grid: Sequence[str]) -> bool:
    """Return True if every row above the last has a wall in the last column.

    The column is taken from the width of the first row.
    """
    _require_rows(grid)
    width = len(grid[0])
    if width == 0:
        return len(grid) == 1
    end = width - 1
    return all(len(row) > end and row[end] == WALL for row in grid[:-1])


def is_closed(grid: Sequence[str]) -> bool:
    """Return True if the map is surrounded by walls on all four sides."""
    return (
        check_upper_wall(grid)
        and check_lower_wall(grid)
        and check_left_wall(grid)
        and check_right_wall(grid)
    )


def check_window(lines: int, rows: int) -> None:
    """Raise WindowTooLargeError if the map exceeds the window limits."""
    if rows > MAX_ROWS or lines > MAX_LINES:
        raise WindowTooLargeError("SO_LONG my friend :)")