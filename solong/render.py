"""Drawing the board with its textures, and the game's entry point."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from os import PathLike

import pygame

from .animation import TreeAnimation, moves_label
from .errors import SoLongError, check_arg
from .game import Direction, Game, GameOver
from .gamemap import COLLECTIBLE, ENEMY, EXIT, PLAYER, WALL, GameMap
from .xpm import load_xpm

TILE_SIZE = 128
TITLE = "so_long_bonus"
LABEL_POSITION = (90, 95)
LABEL_COLOR = (255, 255, 255)

TREE_NO_APPLE = "textures/NoAppleTree.xpm"
TREE_APPLE = "textures/AppleTree.xpm"
TREE_MIDDLE = "textures/MiddleAppleTree.xpm"
PLAYER_FRONT = "textures/Charizard-front.xpm"
PLAYER_BACK = "textures/Charizard-back.xpm"
PLAYER_RIGHT = "textures/Charizard-right.xpm"
PLAYER_LEFT = "textures/Charizard-left.xpm"
DOG_COMING = "textures/dogcoming.xpm"
DOG_EATING = "textures/dogeating.xpm"
DOG_GOING = "textures/doggoing.xpm"
GRASS = "textures/Grass.xpm"
POKEBALL = "textures/Poké_Ball_EP.xpm"
TEAM_ROCKET = "textures/TeamRocket.xpm"
POKEMON_CENTER = "textures/CentroPokemon.xpm"

TREE_TEXTURES: tuple[str, ...] = (
    TREE_NO_APPLE,
    TREE_MIDDLE,
    TREE_APPLE,
    DOG_COMING,
    DOG_EATING,
    DOG_GOING,
    TREE_NO_APPLE,
)

PLAYER_TEXTURES: dict[Direction, str] = {
    Direction.DOWN: PLAYER_FRONT,
    Direction.UP: PLAYER_BACK,
    Direction.RIGHT: PLAYER_RIGHT,
    Direction.LEFT: PLAYER_LEFT,
}

_STATIC_TEXTURES = {
    COLLECTIBLE: POKEBALL,
    EXIT: POKEMON_CENTER,
    ENEMY: TEAM_ROCKET,
}

ALL_TEXTURES: tuple[str, ...] = tuple(
    dict.fromkeys(
        (*PLAYER_TEXTURES.values(), *TREE_TEXTURES, TEAM_ROCKET, GRASS, POKEBALL, POKEMON_CENTER)
    )
)

_KEYCODES = {
    pygame.K_a: 0,
    pygame.K_s: 1,
    pygame.K_d: 2,
    pygame.K_w: 13,
    pygame.K_ESCAPE: 53,
    pygame.K_LEFT: 123,
    pygame.K_RIGHT: 124,
    pygame.K_DOWN: 125,
    pygame.K_UP: 126,
}


def texture_for(tile: str, facing: Direction, frame: int) -> tuple[str, ...]:
    """Return the textures drawn for ``tile``, bottom layer first.

    Grass is always drawn; walls show tree ``frame``, the player the
    sprite for ``facing``, and the other special tiles their own image.
    """
    layers = [GRASS]
    if tile == WALL:
        layers.append(TREE_TEXTURES[frame])
    elif tile == PLAYER:
        layers.append(PLAYER_TEXTURES[facing])
    elif tile in _STATIC_TEXTURES:
        layers.append(_STATIC_TEXTURES[tile])
    return tuple(layers)


def _surface_from_xpm(path: str | PathLike[str]) -> pygame.Surface:
    image = load_xpm(path)
    buffer = bytearray()
    for value in image.pixels:
        if value & 0xFF000000:
            buffer += b"\x00\x00\x00\x00"
        else:
            buffer += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF))
    return pygame.image.frombuffer(bytes(buffer), (image.width, image.height), "RGBA").copy()


def load_textures(paths: Sequence[str] = ALL_TEXTURES) -> dict[str, pygame.Surface]:
    """Load every texture that can be read; unreadable ones are left out."""
    textures: dict[str, pygame.Surface] = {}
    for path in paths:
        try:
            textures[path] = _surface_from_xpm(path)
        except (OSError, ValueError):
            continue
    return textures


class Renderer:
    """Draws a game onto a surface, one tile of ``TILE_SIZE`` pixels at a time."""

    def __init__(
        self,
        game: Game,
        surface: pygame.Surface,
        textures: Mapping[str, pygame.Surface],
        font: pygame.font.Font | None = None,
        animation: TreeAnimation | None = None,
    ) -> None:
        self.game = game
        self.surface = surface
        self.textures = textures
        self.font = font
        self.animation = animation if animation is not None else TreeAnimation()

    def draw(self) -> str:
        """Draw the whole board and the move counter; return the counter text.

        The tree animation advances once for every tile drawn.
        """
        self.surface.fill((0, 0, 0))
        for r, row in enumerate(self.game.rows):
            for c, tile in enumerate(row):
                frame = self.animation.tick()
                for key in texture_for(tile, self.game.facing, frame):
                    texture = self.textures.get(key)
                    if texture is not None:
                        self.surface.blit(texture, (c * TILE_SIZE, r * TILE_SIZE))
        label = moves_label(self.game.count)
        if self.font is not None:
            self.surface.blit(self.font.render(label, True, LABEL_COLOR), LABEL_POSITION)
        return label


def _make_font() -> pygame.font.Font | None:
    try:
        pygame.font.init()
        return pygame.font.Font(None, 24)
    except (pygame.error, OSError):
        return None


def _run(game: Game) -> None:
    height = len(game.rows) * TILE_SIZE
    width = len(game.rows[0]) * TILE_SIZE
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(TITLE)
    renderer = Renderer(game, screen, load_textures(), _make_font())
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    keycode = _KEYCODES.get(event.key)
                    if keycode is not None:
                        game.handle_key(keycode)
            renderer.draw()
            pygame.display.flip()
    except GameOver:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single command-line argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arg(["solong", *args])
        game_map = GameMap.from_file(path)
    except SoLongError as exc:
        print(exc)
        return 1
    pygame.init()
    try:
        _run(Game.from_map(game_map))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())