"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

import io
from collections import Counter
from dataclasses import dataclass
from itertools import chain
from os import PathLike
from typing import Iterable, NamedTuple, Sequence

from pacmaze.lines import iter_lines
from pacmaze.walls import WindowTooLargeError, check_window, is_closed

EXTENSION = ".ber"
EMPTY = "0"
WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"
MAX_ENEMIES = 3

_BASE_CELLS = frozenset({EMPTY, WALL, COLLECTIBLE, EXIT, PLAYER})


class MapError(ValueError):
    """The map file is missing or does not describe a playable map."""


class _Counts(NamedTuple):
    collectibles: int
    exits: int
    players: int
    enemies: int
    wrong_chars: bool


@dataclass(frozen=True)
class MapInfo:
    """A validated map: its rows, the player's start and what it holds."""

    grid: tuple[str, ...]
    player: tuple[int, int]
    collectibles: int
    exits: int
    enemies: int = 0

    @property
    def lines(self) -> int:
        """Number of rows in the map."""
        return len(self.grid)

    @property
    def rows(self) -> int:
        """Number of cells in each row."""
        return len(self.grid[0]) if self.grid else 0


def has_ber_extension(filename: str | PathLike[str]) -> bool:
    """Return True if the file name ends with ``.ber``."""
    return str(filename).endswith(EXTENSION)


def count_characters(lines: Iterable[str], with_enemies: bool) -> _Counts:
    """Count the special cells of a map and note any unknown character.

    Enemies (``X``) are only valid when ``with_enemies`` is true; otherwise
    they count as wrong characters.
    """
    counts = Counter(chain.from_iterable(lines))
    allowed = _BASE_CELLS | {ENEMY} if with_enemies else _BASE_CELLS
    return _Counts(
        collectibles=counts[COLLECTIBLE],
        exits=counts[EXIT],
        players=counts[PLAYER],
        enemies=counts[ENEMY] if with_enemies else 0,
        wrong_chars=any(cell not in allowed for cell in counts),
    )


def _check_counts(counts: _Counts, with_enemies: bool) -> None:
    if counts.collectibles <= 0:
        raise MapError("Invalid number of collectibles.")
    if counts.exits != 1:
        raise MapError(
            "Invalid number of exit." if with_enemies else "Invalid number of exits."
        )
    if counts.players != 1:
        raise MapError(
            "Invalid number of player." if with_enemies else "Invalid number of players."
        )
    if with_enemies and not 1 <= counts.enemies <= MAX_ENEMIES:
        raise MapError("Invalid number of enemy.")
    if counts.wrong_chars:
        raise MapError("Invalid character.")


def find_player(lines: Iterable[str]) -> tuple[int, int] | None:
    """Return the ``(x, y)`` of the player, or None if there is none.

    When several rows hold a player the last such row wins, and within a
    row the first player is taken.
    """
    found = None
    for y, line in enumerate(lines):
        x = line.find(PLAYER)
        if x != -1:
            found = (x, y)
    return found


def reachable_targets(
    grid: Sequence[str], start: tuple[int, int], with_enemies: bool
) -> int:
    """Count the collectibles and exits reachable from ``start``.

    Movement is in four directions; walls block, and so do enemies when
    ``with_enemies`` is true.
    """
    blocked = {WALL, ENEMY} if with_enemies else {WALL}
    height = len(grid)
    width = len(grid[0]) if grid else 0
    seen: set[tuple[int, int]] = set()
    stack = [start]
    found = 0
    while stack:
        x, y = stack.pop()
        if not (0 <= y < height and 0 <= x < width and x < len(grid[y])):
            continue
        if (x, y) in seen or grid[y][x] in blocked:
            continue
        seen.add((x, y))
        if grid[y][x] in (EXIT, COLLECTIBLE):
            found += 1
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return found


def parse_map(text: str, with_enemies: bool) -> MapInfo:
    """Validate the text of a map and return its description.

    Raises MapError with the reason when the map is not playable.
    """
    grid: list[str] = []
    for line in iter_lines(io.StringIO(text)):
        if grid and len(line) != len(grid[0]):
            raise MapError("No rectangular.")
        grid.append(line)
    rows = len(grid[0]) if grid else 0
    try:
        check_window(len(grid), rows)
    except WindowTooLargeError as exc:
        raise MapError(str(exc)) from exc
    counts = count_characters(grid, with_enemies)
    _check_counts(counts, with_enemies)
    player = find_player(grid)
    if player is None:
        raise MapError("Invalid number of players.")
    if not is_closed(grid):
        raise MapError("Not surrounded by walls.")
    if reachable_targets(grid, player, with_enemies) != counts.exits + counts.collectibles:
        raise MapError("Map path is not valid.")
    return MapInfo(
        grid=tuple(grid),
        player=player,
        collectibles=counts.collectibles,
        exits=counts.exits,
        enemies=counts.enemies,
    )


def load_map(path: str | PathLike[str], with_enemies: bool) -> MapInfo:
    """Read, validate and describe the map stored at ``path``."""
    if not has_ber_extension(path):
        raise MapError("Bad extension.")
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError("File open fail") from exc
    return parse_map(data.decode("latin-1"), with_enemies)