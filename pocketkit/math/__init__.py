"""Math utilities."""

from .vector2 import Vector2, Vector2d, Vector2f, Vector2i, Vector2l, Vector2u, Vector2ul

__all__ = [
    "Vector2",
    "Vector2f",
    "Vector2d",
    "Vector2i",
    "Vector2u",
    "Vector2l",
    "Vector2ul",
]
