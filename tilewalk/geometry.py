"""Rectangles, circular hitboxes and the collision tests between them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _normalized(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y), allowing negative sizes."""
        return (
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def intersects(self, other: FloatRect) -> bool:
        """Whether the two rectangles overlap by a non-zero area."""
        a_left, a_top, a_right, a_bottom = self._normalized()
        b_left, b_top, b_right, b_bottom = other._normalized()
        inter_left = max(a_left, b_left)
        inter_top = max(a_top, b_top)
        inter_right = min(a_right, b_right)
        inter_bottom = min(a_bottom, b_bottom)
        return inter_left < inter_right and inter_top < inter_bottom

    def moved(self, dx: float, dy: float) -> FloatRect:
        """Return a copy of the rectangle shifted by (dx, dy)."""
        return FloatRect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True)
class CircleHitbox:
    """A circular collision area."""

    center_x: float
    center_y: float
    radius: float


def circle_intersects_rect(cx: float, cy: float, radius: float, rect: FloatRect) -> bool:
    """Whether a circle strictly overlaps a rectangle."""
    closest_x = min(max(cx, rect.left), rect.left + rect.width)
    closest_y = min(max(cy, rect.top), rect.top + rect.height)
    distance_x = cx - closest_x
    distance_y = cy - closest_y
    return distance_x * distance_x + distance_y * distance_y < radius * radius