"""Single precision (float32) storage and arithmetic helpers.

Components are kept as plain Python floats whose values are exactly
representable in IEEE-754 binary32. Arithmetic runs on numpy float32 scalars
so that division by zero, overflow and invalid operations produce inf/NaN
instead of raising the way Python floats do.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import numpy as np


@contextmanager
def ieee() -> Iterator[None]:
    """Silence numpy floating point warnings; results follow IEEE-754."""
    with np.errstate(all="ignore"):
        yield


def f32(value: float) -> float:
    """Round value to the nearest float32 and return it as a Python float."""
    with ieee():
        return float(np.float32(value))


def add(a: float, b: float) -> float:
    with ieee():
        return float(np.float32(a) + np.float32(b))


def sub(a: float, b: float) -> float:
    with ieee():
        return float(np.float32(a) - np.float32(b))


def mul(a: float, b: float) -> float:
    with ieee():
        return float(np.float32(a) * np.float32(b))


def div(a: float, b: float) -> float:
    with ieee():
        return float(np.float32(a) / np.float32(b))


def sqrt(value: float) -> float:
    """Square root in double precision; NaN for negative or NaN input."""
    with ieee():
        return float(np.sqrt(np.float64(value)))


def to_text(value: float) -> str:
    """Default float32 text form, e.g. ``1.0``, ``0.1``, ``nan``, ``inf``."""
    return str(np.float32(value))
