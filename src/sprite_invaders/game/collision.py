"""Axis-aligned bounding box collision test."""

from .sprite import Sprite


def collides(a: Sprite, b: Sprite) -> bool:
    """
    Check whether two sprites overlap.

    Each rectangle is built from the sprite's own position and size. Only a
    strictly positive overlap on both axes counts, so touching edges do not
    collide.
    """
    a_left, a_top, a_right, a_bottom = a.bounds
    b_left, b_top, b_right, b_bottom = b.bounds
    overlap_x = min(a_right, b_right) - max(a_left, b_left)
    overlap_y = min(a_bottom, b_bottom) - max(a_top, b_top)
    return overlap_x > 0 and overlap_y > 0
