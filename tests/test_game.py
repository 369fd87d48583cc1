from collections import defaultdict
from unittest import mock

import pygame
import pytest

from tilewalk.characters import STEP
from tilewalk.game import build_scene, main
from tilewalk.nature import TILE_SIZE
from tilewalk.sprites import TextureLoadError

GRASS = (0, 180, 0)
WATER = (0, 0, 200)
ROCK = (90, 90, 90)
SOLDIER = (200, 10, 10)


def _save(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def assets(tmp_path):
    _save(tmp_path / "grass2.png", (TILE_SIZE, TILE_SIZE), GRASS)
    _save(tmp_path / "water7.png", (TILE_SIZE, TILE_SIZE), WATER)
    _save(tmp_path / "rock2.png", (40, 40), ROCK)
    _save(tmp_path / "avtandila.png", (50, 60), SOLDIER)
    return tmp_path


def _keys(*pressed):
    return defaultdict(bool, {key: True for key in pressed})


def test_build_scene_layout(assets):
    scene = build_scene(assets, (992, 800))
    assert len(scene.grass) == 208
    assert len(scene.water) == 3 * 5
    rights = [tile.sprite.global_bounds().right for tile in scene.grass]
    bottoms = [tile.sprite.global_bounds().bottom for tile in scene.grass]
    assert max(rights) >= 992 and max(bottoms) >= 800
    assert scene.rock.sprite.position == (500, 500)
    assert (scene.soldier.start_x, scene.soldier.start_y) == (100, 250)
    assert scene.soldier.sprite.scale == (2.0, 2.0)


def test_build_scene_missing_assets(tmp_path):
    with pytest.raises(TextureLoadError):
        build_scene(tmp_path)


def test_handle_keys_moves_left(assets):
    scene = build_scene(assets)
    start = scene.soldier.start_x
    scene.handle_keys(_keys(pygame.K_a))
    assert scene.soldier.start_x == start - STEP


def test_handle_keys_moves_right_and_down(assets):
    scene = build_scene(assets)
    start_x, start_y = scene.soldier.start_x, scene.soldier.start_y
    scene.handle_keys(_keys(pygame.K_d, pygame.K_s))
    assert (scene.soldier.start_x, scene.soldier.start_y) == (start_x + STEP, start_y + STEP)


def test_handle_keys_moves_up(assets):
    scene = build_scene(assets)
    start_y = scene.soldier.start_y
    scene.handle_keys(_keys(pygame.K_w))
    assert scene.soldier.start_y == start_y - STEP


def test_opposite_keys_cancel(assets):
    scene = build_scene(assets)
    start = (scene.soldier.start_x, scene.soldier.start_y)
    scene.handle_keys(_keys(pygame.K_a, pygame.K_d))
    assert (scene.soldier.start_x, scene.soldier.start_y) == start


def test_no_keys_no_movement(assets):
    scene = build_scene(assets)
    start = (scene.soldier.start_x, scene.soldier.start_y)
    scene.handle_keys(_keys())
    assert (scene.soldier.start_x, scene.soldier.start_y) == start


def test_draw_layers(assets):
    scene = build_scene(assets)
    surface = pygame.Surface((992, 800))
    scene.draw(surface)
    assert surface.get_at((10, 10))[:3] == WATER
    assert surface.get_at((700, 100))[:3] == GRASS
    assert surface.get_at((510, 510))[:3] == ROCK
    assert surface.get_at((150, 300))[:3] == SOLDIER


def test_main_exits_on_quit(assets, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--assets", str(assets)]) == 0


def test_main_missing_assets(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with pytest.raises(TextureLoadError):
        main(["--assets", str(tmp_path)])