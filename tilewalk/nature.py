"""Scenery: grass and water tiles, tile groups and rocks."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

import pygame

from tilewalk.geometry import CircleHitbox, FloatRect
from tilewalk.sprites import Sprite, load_texture

TILE_SIZE = 64
TILES_X = 1000 // TILE_SIZE
TILES_Y = 800 // TILE_SIZE

_LOAD_ERROR = "Couldn't load a nature object."


class NatureObject:
    """A piece of scenery drawn from a texture at a fixed position."""

    def __init__(self, texture_path: str | PathLike[str], start_x: float, start_y: float) -> None:
        self.texture = load_texture(texture_path, _LOAD_ERROR)
        self.start_x = int(start_x)
        self.start_y = int(start_y)
        self.sprite = Sprite(self.texture, position=(self.start_x, self.start_y))

    def collision_box(self) -> FloatRect:
        """The rectangle that blocks movement."""
        return self.sprite.global_bounds()

    def collision_circle(self) -> CircleHitbox:
        """The circular hitbox; empty for objects without one."""
        return CircleHitbox(0, 0, 0)

    def draw(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)


class Grass(NatureObject):
    """A single grass tile."""


class Water(NatureObject):
    """A single water tile."""


class _TileGroup:
    """A rectangular block of identical tiles laid out row by row."""

    tile_type: type[NatureObject] = NatureObject

    def __init__(
        self,
        texture_path: str | PathLike[str],
        start_x: float,
        start_y: float,
        rows_to_span: int,
        cols_to_span: int,
    ) -> None:
        self.tiles = [
            self.tile_type(texture_path, start_x + col * TILE_SIZE, start_y + row * TILE_SIZE)
            for row in range(rows_to_span)
            for col in range(cols_to_span)
        ]

    def __iter__(self) -> Iterator[NatureObject]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def draw(self, surface: pygame.Surface) -> None:
        for tile in self.tiles:
            tile.draw(surface)


class GrassGroup(_TileGroup):
    """A block of grass tiles."""

    tile_type = Grass

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class WaterGroup(_TileGroup):
    """A block of water tiles."""

    tile_type = Water

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class Rock(NatureObject):
    """A rock with a round hitbox slightly below its sprite's centre."""

    def _center(self) -> tuple[float, float]:
        bounds = self.sprite.global_bounds()
        x, y = self.sprite.position
        return x + bounds.width / 2, y + bounds.height / 2 + 1.1

    def collision_box(self) -> FloatRect:
        diameter = self.sprite.global_bounds().width * 0.5
        radius = diameter / 2
        center_x, center_y = self._center()
        return FloatRect(center_x - radius, center_y - radius, diameter, diameter)

    def collision_circle(self) -> CircleHitbox:
        diameter = self.sprite.global_bounds().width * 0.6
        center_x, center_y = self._center()
        return CircleHitbox(center_x, center_y, diameter / 2)