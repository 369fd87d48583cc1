"""Textures and positioned, scalable sprites."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

import pygame

from tilewalk.geometry import FloatRect


class TextureLoadError(RuntimeError):
    """Raised when an image file cannot be loaded as a texture."""


def load_texture(path: str | PathLike[str], message: str) -> pygame.Surface:
    """Load an image file, raising TextureLoadError with ``message`` on failure."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise TextureLoadError(message) from exc


@dataclass
class Sprite:
    """A texture drawn at a position with a scale factor."""

    texture: pygame.Surface
    position: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)

    def global_bounds(self) -> FloatRect:
        """The area the sprite covers on screen."""
        width, height = self.texture.get_size()
        x, y = self.position
        scale_x, scale_y = self.scale
        scaled_w = width * scale_x
        scaled_h = height * scale_y
        return FloatRect(
            x + min(0.0, scaled_w),
            y + min(0.0, scaled_h),
            abs(scaled_w),
            abs(scaled_h),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the sprite onto ``surface``."""
        image = self.texture
        scale_x, scale_y = self.scale
        if (scale_x, scale_y) != (1, 1):
            bounds = self.global_bounds()
            size = (round(bounds.width), round(bounds.height))
            image = pygame.transform.scale(image, size)
            if scale_x < 0 or scale_y < 0:
                image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        bounds = self.global_bounds()
        surface.blit(image, (round(bounds.left), round(bounds.top)))