"""Angle and rotation helpers in degrees, clockwise positive."""

from __future__ import annotations

from math import atan2, pi

import numpy as np

from . import float32

DEG_PER_RAD = 180.0 / pi
RAD_PER_DEG = pi / 180.0


def heading_deg(x: float, y: float) -> float:
    """Counterclockwise angle of (x, y) from the +x axis, in degrees."""
    return DEG_PER_RAD * atan2(y, x)


def clockwise_angle(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    """Clockwise angle in degrees from one direction to another.

    The raw difference is rounded to float32 before the sign test; a negative
    result is wrapped by adding 360. NaN inputs give NaN.
    """
    angle = float32.f32(heading_deg(from_x, from_y) - heading_deg(to_x, to_y))
    if angle != abs(angle):
        return float32.add(360.0, angle)
    return angle


def round_to_precision(value: float, precision: int) -> float:
    """Round value to precision decimal digits, ties toward +inf.

    Non-finite values are returned unchanged.
    """
    with float32.ieee():
        scale = np.power(10.0, precision)
        rounded = np.floor(np.float64(value) * scale + 0.5) / scale
    return float32.f32(rounded)


def rotate_components(x: float, y: float, degrees: float, precision: int) -> tuple[float, float]:
    """Rotate (x, y) about the origin by degrees, clockwise for positive values.

    Each result is rounded to ``precision`` decimal digits to drop the noise
    left by repeated rotations.
    """
    radians = float32.sub(360.0, degrees) * RAD_PER_DEG
    with float32.ieee():
        cos_a = float(np.cos(radians))
        sin_a = float(np.sin(radians))
    new_x = float32.f32(x * cos_a - y * sin_a)
    new_y = float32.f32(x * sin_a + y * cos_a)
    return round_to_precision(new_x, precision), round_to_precision(new_y, precision)
