"""Player movement and keyboard handling."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .gamemap import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap, Position, find_player

ESCAPE_KEY = 53

WIN = "win"
CAUGHT = "caught"
QUIT = "quit"


class Direction(Enum):
    """A direction of movement; the value is the index of its player sprite."""

    DOWN = 0
    UP = 1
    RIGHT = 2
    LEFT = 3

    @property
    def step(self) -> Position:
        """The ``(row, column)`` offset of one step in this direction."""
        return _STEPS[self]


_STEPS: dict[Direction, Position] = {
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}

KEY_BINDINGS: dict[int, Direction] = {
    0: Direction.LEFT,
    123: Direction.LEFT,
    1: Direction.DOWN,
    125: Direction.DOWN,
    2: Direction.RIGHT,
    124: Direction.RIGHT,
    13: Direction.UP,
    126: Direction.UP,
}


class GameOver(Exception):
    """The game has ended; ``reason`` is ``"win"``, ``"caught"`` or ``"quit"``."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class Game:
    """The state of a running game: the board, the player and the move count."""

    def __init__(
        self,
        rows: Sequence[str],
        player: Position | None = None,
        collectibles: int | None = None,
    ) -> None:
        self._grid = [list(row) for row in rows]
        self.position: Position = find_player(rows) if player is None else player
        if collectibles is None:
            collectibles = sum(row.count(COLLECTIBLE) for row in rows)
        self.collectibles = collectibles
        self.count = 0
        self.facing = Direction.DOWN

    @classmethod
    def from_map(cls, game_map: GameMap) -> Game:
        """Start a game on a validated map."""
        return cls(game_map.rows, game_map.player, game_map.collectibles)

    @property
    def rows(self) -> tuple[str, ...]:
        """The current board, one string per row."""
        return tuple("".join(row) for row in self._grid)

    def tile(self, row: int, col: int) -> str:
        """Return the tile at ``row``, ``col``."""
        return self._grid[row][col]

    def move(self, direction: Direction) -> bool:
        """Try to step in ``direction``; return whether the player moved.

        Raises :class:`GameOver` when the player walks into an enemy or
        reaches the exit with every collectible taken.
        """
        self.facing = direction
        row, col = self.position
        drow, dcol = direction.step
        target_pos = (row + drow, col + dcol)
        target = self._grid[target_pos[0]][target_pos[1]]
        if target == EXIT:
            if self.collectibles == 0:
                raise GameOver(WIN)
            return False
        if target == WALL:
            return False
        if target == ENEMY:
            raise GameOver(CAUGHT)
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self._grid[row][col] = FLOOR
        self._grid[target_pos[0]][target_pos[1]] = PLAYER
        self.position = target_pos
        self.count += 1
        return True

    def handle_key(self, keycode: int) -> bool:
        """Act on a key press; return whether the player moved.

        Escape raises :class:`GameOver`; unbound keys do nothing.
        """
        if keycode == ESCAPE_KEY:
            raise GameOver(QUIT)
        direction = KEY_BINDINGS.get(keycode)
        if direction is None:
            return False
        return self.move(direction)