"""Float32 2D vector math."""

from .math import Vector2f

__all__ = ["Vector2f"]
