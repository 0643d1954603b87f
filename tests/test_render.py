import pygame
import pytest

from solong.animation import TreeAnimation
from solong.game import Direction, Game
from solong.render import (
    GRASS,
    PLAYER_TEXTURES,
    POKEBALL,
    POKEMON_CENTER,
    TEAM_ROCKET,
    TILE_SIZE,
    TREE_TEXTURES,
    Renderer,
    main,
    texture_for,
)

GREEN = (0, 200, 0, 255)
BROWN = (120, 60, 10, 255)
RED = (220, 0, 0, 255)
BLUE = (0, 0, 220, 255)


def _solid(colour):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(colour)
    return surface


@pytest.fixture
def board():
    return Game(["1111", "1PC1", "1E01", "1111"])


@pytest.fixture
def textures():
    return {
        GRASS: _solid(GREEN),
        TREE_TEXTURES[0]: _solid(BROWN),
        PLAYER_TEXTURES[Direction.DOWN]: _solid(RED),
        POKEBALL: _solid(BLUE),
    }


def test_texture_for_floor_is_grass_only():
    assert texture_for("0", Direction.DOWN, 0) == (GRASS,)


def test_texture_for_wall_uses_frame():
    for frame, tree in enumerate(TREE_TEXTURES):
        assert texture_for("1", Direction.UP, frame) == (GRASS, tree)


def test_texture_for_player_follows_facing():
    assert texture_for("P", Direction.LEFT, 3) == (GRASS, "textures/Charizard-left.xpm")
    assert texture_for("P", Direction.DOWN, 0) == (GRASS, "textures/Charizard-front.xpm")


def test_texture_for_special_tiles():
    assert texture_for("C", Direction.DOWN, 0)[-1] == POKEBALL
    assert texture_for("E", Direction.DOWN, 0)[-1] == POKEMON_CENTER
    assert texture_for("N", Direction.DOWN, 0)[-1] == TEAM_ROCKET


def test_draw_places_tiles(board, textures):
    surface = pygame.Surface((4 * TILE_SIZE, 4 * TILE_SIZE))
    label = Renderer(board, surface, textures).draw()
    assert label == "Movements:0"
    assert surface.get_at((5, 5)) == BROWN
    assert surface.get_at((TILE_SIZE + 5, TILE_SIZE + 5)) == RED
    assert surface.get_at((2 * TILE_SIZE + 5, TILE_SIZE + 5)) == BLUE
    # The exit texture is missing, so only grass shows there.
    assert surface.get_at((TILE_SIZE + 5, 2 * TILE_SIZE + 5)) == GREEN


def test_draw_ticks_animation_once_per_tile(board, textures):
    surface = pygame.Surface((4 * TILE_SIZE, 4 * TILE_SIZE))
    animation = TreeAnimation()
    renderer = Renderer(board, surface, textures, animation=animation)
    renderer.draw()
    renderer.draw()
    assert animation.anim == 2 * sum(len(row) for row in board.rows)


def test_draw_after_move_updates_label(board, textures):
    surface = pygame.Surface((4 * TILE_SIZE, 4 * TILE_SIZE))
    assert board.move(Direction.RIGHT)
    label = Renderer(board, surface, textures).draw()
    assert label == "Movements:1"
    assert surface.get_at((TILE_SIZE + 5, TILE_SIZE + 5)) == GREEN
    assert surface.get_at((2 * TILE_SIZE + 5, TILE_SIZE + 5)) == GREEN


def test_main_rejects_missing_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.strip() == "Error, invalid argument"


def test_main_rejects_wrong_suffix(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out.strip() == "Error, invalid argument"


def test_main_reports_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out.strip() == "Error, invalid fd"


def test_main_reports_invalid_map(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n1P0E1\n10C01")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.strip() == "Error, invalid map"