"""Box collision tests between the player and tiles on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

TILE = 64
_WALL_MARGIN_X = 4
_WALL_MARGIN_Y = 2
_COLLECT_MARGIN = 10


@dataclass
class Instance:
    """A drawn copy of a sprite at a pixel position."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


def _overlaps(x: int, y: int, other: Instance, margin_x: int, margin_y: int) -> bool:
    width = TILE - margin_x
    height = TILE - margin_y
    return (
        x < other.x + width
        and x + width > other.x
        and y < other.y + height
        and y + height > other.y
    )


def collision_check(x: int, y: int, instances: Sequence[Instance]) -> bool:
    """Return True if a tile at ``(x, y)`` touches none of ``instances``."""
    return not any(
        _overlaps(x, y, other, _WALL_MARGIN_X, _WALL_MARGIN_Y) for other in instances
    )


def collision_collect(x: int, y: int, instances: Sequence[Instance]) -> int | None:
    """Return the index of the first instance picked up at ``(x, y)``, or None."""
    return next(
        (
            index
            for index, other in enumerate(instances)
            if _overlaps(x, y, other, _COLLECT_MARGIN, _COLLECT_MARGIN)
        ),
        None,
    )