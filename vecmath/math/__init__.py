"""Math utilities for 2D vectors."""

from .transforms import clockwise_angle, rotate_components, round_to_precision
from .vector2f import Vector2f

__all__ = [
    "Vector2f",
    "clockwise_angle",
    "rotate_components",
    "round_to_precision",
]
