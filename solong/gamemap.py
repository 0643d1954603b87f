"""Loading and validating game maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike

from .errors import InvalidCharError, InvalidMapError
from .lines import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "N"
TILES = frozenset("01PECN")

Position = tuple[int, int]

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def load_map(path: str | PathLike[str]) -> list[str]:
    """Read the rows of a map file, without their newlines.

    Raises :class:`InvalidFileError` if the file cannot be read and
    :class:`InvalidMapError` if it is empty or ends with a newline (the
    last row sets the width, so a newline there breaks the right wall).
    """
    lines = read_lines(path)
    if not lines or lines[-1].endswith("\n"):
        raise InvalidMapError()
    return [line.removesuffix("\n") for line in lines]


def check_limits(rows: Sequence[str]) -> tuple[int, int]:
    """Check that the map is a rectangle enclosed by walls.

    The width is that of the last row. Returns ``(height, width)``;
    raises :class:`InvalidMapError` otherwise.
    """
    if not rows or not rows[-1]:
        raise InvalidMapError()
    width = len(rows[-1])
    if any(len(row) != width for row in rows):
        raise InvalidMapError()
    if set(rows[0]) != {WALL} or set(rows[-1]) != {WALL}:
        raise InvalidMapError()
    if any(row[0] != WALL or row[-1] != WALL for row in rows):
        raise InvalidMapError()
    return len(rows), width


def count_tiles(rows: Sequence[str]) -> Counter[str]:
    """Return how often each tile occurs; raise on an unknown tile."""
    counts: Counter[str] = Counter()
    for row in rows:
        counts.update(row)
    if not set(counts) <= TILES:
        raise InvalidCharError()
    return counts


def find_player(rows: Sequence[str]) -> Position:
    """Return ``(row, column)`` of the last player tile in reading order."""
    found = [
        (r, c)
        for r, row in enumerate(rows)
        for c, tile in enumerate(row)
        if tile == PLAYER
    ]
    if not found:
        raise InvalidCharError()
    return found[-1]


def _tile(rows: Sequence[str], pos: Position) -> str | None:
    r, c = pos
    if 0 <= r < len(rows) and 0 <= c < len(rows[r]):
        return rows[r][c]
    return None


def check_path(rows: Sequence[str], start: Position) -> frozenset[Position]:
    """Check that every collectible and the exit can be reached from ``start``.

    Walls and enemies block the way, and so does the exit: it only needs
    to be next to a reachable cell. Returns the cells that can be walked
    on; raises :class:`InvalidMapError` if a target is out of reach.
    """
    reached = {start}
    exits: set[Position] = set()
    stack = [start]
    while stack:
        r, c = stack.pop()
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            tile = _tile(rows, nxt)
            if tile == EXIT:
                exits.add(nxt)
            elif tile is not None and tile not in (WALL, ENEMY) and nxt not in reached:
                reached.add(nxt)
                stack.append(nxt)
    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if tile == COLLECTIBLE and (r, c) not in reached:
                raise InvalidMapError()
            if tile == EXIT and (r, c) not in exits:
                raise InvalidMapError()
    return frozenset(reached)


def validate_map(rows: Sequence[str]) -> Position:
    """Run every map check and return the player's start position."""
    check_limits(rows)
    counts = count_tiles(rows)
    if counts[PLAYER] != 1 or counts[EXIT] != 1:
        raise InvalidCharError()
    if counts[COLLECTIBLE] < 1:
        raise InvalidCharError()
    start = find_player(rows)
    check_path(rows, start)
    return start


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's start and the collectible count."""

    rows: tuple[str, ...]
    player: Position
    collectibles: int

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> GameMap:
        """Load and validate the map stored at ``path``."""
        rows = load_map(path)
        player = validate_map(rows)
        return cls(
            rows=tuple(rows),
            player=player,
            collectibles=count_tiles(rows)[COLLECTIBLE],
        )