"""Characters: the base entity, the player-controlled human and NPCs."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

import pygame

from tilewalk.geometry import FloatRect, circle_intersects_rect
from tilewalk.nature import NatureObject, Rock, Water
from tilewalk.sprites import Sprite, load_texture

STEP = 10

_LOAD_ERROR = "Couldn't load texture."


class Entity:
    """A character drawn from a texture at a position."""

    def __init__(self, texture_path: str | PathLike[str], start_x: float, start_y: float) -> None:
        self.texture = load_texture(texture_path, _LOAD_ERROR)
        self.start_x = int(start_x)
        self.start_y = int(start_y)
        self.sprite = Sprite(self.texture, position=(self.start_x, self.start_y))

    def collision_box(self) -> FloatRect:
        """The rectangle that blocks movement."""
        return self.sprite.global_bounds()

    def draw(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)


class Human(Entity):
    """A walking character that is stopped by rocks, water and the window edge."""

    def collision_box(self) -> FloatRect:
        bounds = self.sprite.global_bounds()
        return FloatRect(
            bounds.left + 22,
            bounds.top + 20,
            bounds.width - 66,
            bounds.height - 65,
        )

    def leg_hitbox(self) -> FloatRect:
        """A fixed-size box around the character's legs."""
        box = self.collision_box()
        return FloatRect(box.left + 14.0, box.top + 65.0, 37.0, 35.0)

    def is_colliding(
        self,
        offset_x: float,
        offset_y: float,
        rock: Rock,
        water_blocks: Iterable[NatureObject],
        water: Water | None = None,
    ) -> bool:
        """Whether moving by the offset would run into the rock or any water."""
        next_bounds = self.collision_box().moved(offset_x, offset_y)
        legs = self.leg_hitbox().moved(offset_x, offset_y)

        circle = rock.collision_circle()
        if any(
            circle_intersects_rect(circle.center_x, circle.center_y, circle.radius, box)
            for box in (next_bounds, legs)
        ):
            return True
        if water is not None and next_bounds.intersects(water.sprite.global_bounds()):
            return True
        return any(next_bounds.intersects(tile.sprite.global_bounds()) for tile in water_blocks)

    def _place(self) -> None:
        self.sprite.position = (self.start_x, self.start_y)

    def move_left(
        self, rock: Rock, water_blocks: Iterable[NatureObject], water: Water | None = None
    ) -> None:
        if self.start_x > 0 and not self.is_colliding(-STEP, 0, rock, water_blocks, water):
            self.start_x -= STEP
            self._place()

    def move_right(
        self,
        rock: Rock,
        water_blocks: Iterable[NatureObject],
        window_size: tuple[int, int],
        water: Water | None = None,
    ) -> None:
        right_edge = window_size[0]
        own_right = self.sprite.position[0] + self.sprite.global_bounds().width
        if own_right <= right_edge and not self.is_colliding(STEP, 0, rock, water_blocks, water):
            self.start_x += STEP
            self._place()

    def move_down(
        self,
        rock: Rock,
        water_blocks: Iterable[NatureObject],
        window_size: tuple[int, int],
        water: Water | None = None,
    ) -> None:
        bottom_edge = window_size[1]
        own_bottom = self.sprite.position[1] + self.sprite.global_bounds().height
        if own_bottom <= bottom_edge and not self.is_colliding(0, STEP, rock, water_blocks, water):
            self.start_y += STEP
            self._place()

    def move_up(
        self, rock: Rock, water_blocks: Iterable[NatureObject], water: Water | None = None
    ) -> None:
        if self.start_y > 0 and not self.is_colliding(0, -STEP, rock, water_blocks, water):
            self.start_y -= STEP
            self._place()

    def set_scale(self, scale_x: float, scale_y: float) -> None:
        self.sprite.scale = (scale_x, scale_y)


class NPC(Entity):
    """A non-player character."""