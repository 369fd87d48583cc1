"""The playable scene and the window loop that runs it."""

from __future__ import annotations

import argparse
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

import pygame

from tilewalk.characters import Human
from tilewalk.nature import TILE_SIZE, GrassGroup, Rock, WaterGroup

MOVE_DELAY = 0.03
WINDOW_SIZE = (992, 800)
BACKGROUND = (105, 255, 255)
WINDOW_TITLE = "tilewalk"

KeyState = Union[Sequence[bool], Mapping[int, bool]]


@dataclass
class Scene:
    """Everything on screen: the ground, the water, a rock and the soldier."""

    window_size: tuple[int, int]
    grass: GrassGroup
    water: WaterGroup
    rock: Rock
    soldier: Human

    def handle_keys(self, pressed: KeyState) -> None:
        """Move the soldier for each of the W, A, S, D keys held down."""
        if pressed[pygame.K_a]:
            self.soldier.move_left(self.rock, self.water)
        if pressed[pygame.K_d]:
            self.soldier.move_right(self.rock, self.water, self.window_size)
        if pressed[pygame.K_s]:
            self.soldier.move_down(self.rock, self.water, self.window_size)
        if pressed[pygame.K_w]:
            self.soldier.move_up(self.rock, self.water)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND)
        self.grass.draw(surface)
        self.water.draw(surface)
        self.rock.draw(surface)
        self.soldier.draw(surface)


def build_scene(
    asset_dir: str | PathLike[str], window_size: tuple[int, int] = WINDOW_SIZE
) -> Scene:
    """Load the assets from ``asset_dir`` and lay out the scene."""
    assets = Path(asset_dir)
    width, height = window_size
    grass = GrassGroup(
        assets / "grass2.png", 0, 0, height // TILE_SIZE + 1, width // TILE_SIZE + 1
    )
    water = WaterGroup(assets / "water7.png", 0, 0, 3, 5)
    rock = Rock(assets / "rock2.png", 500, 500)
    soldier = Human(assets / "avtandila.png", 100, 250)
    soldier.set_scale(2.0, 2.0)
    return Scene(tuple(window_size), grass, water, rock, soldier)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tilewalk", description="Walk a soldier around a map.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        scene = build_scene(args.assets, WINDOW_SIZE)
        clock = pygame.time.Clock()
        last_move = time.monotonic()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            now = time.monotonic()
            if now - last_move > MOVE_DELAY:
                scene.handle_keys(pygame.key.get_pressed())
                last_move = now
            scene.draw(screen)
            pygame.display.flip()
            clock.tick(240)
    finally:
        pygame.quit()
    return 0