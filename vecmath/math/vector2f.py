"""2D vector value type with float32 components."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real

from vecmath import config

from . import float32
from .transforms import clockwise_angle, rotate_components


def _clamp(value: float, low: float, high: float) -> float:
    # Upper bound is tested first, so low > high always yields high.
    if value > high:
        return high
    if value < low:
        return low
    return value


def _distance(ax: float, ay: float, bx: float, by: float) -> float:
    dx = float32.sub(ax, bx)
    dy = float32.sub(ay, by)
    total = float32.add(float32.mul(dx, dx), float32.mul(dy, dy))
    return float32.f32(float32.sqrt(abs(total)))


@dataclass(eq=False)
class Vector2f:
    """Mutable 2D vector for positions, directions and rotations.

    Components are stored with float32 precision. Methods come in pairs where
    it matters: ``normalize``/``rotate``/``restrict`` change the vector in
    place, ``normalized``/``rotated``/``restricted`` return a new one.
    Numeric failures (zero length, division by zero) give inf/NaN components
    instead of raising.

    ``precision`` is the number of decimal digits kept after a rotation.
    """

    x: float
    y: float
    precision: int = field(default_factory=lambda: config.DEFAULT_PRECISION, repr=False)

    def __post_init__(self) -> None:
        self.x = float32.f32(self.x)
        self.y = float32.f32(self.y)

    # Named directions. Each call returns a fresh vector, so callers may
    # mutate the result freely.
    @classmethod
    def zero(cls) -> "Vector2f":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector2f":
        return cls(1.0, 1.0)

    @classmethod
    def negative_one(cls) -> "Vector2f":
        return cls(-1.0, -1.0)

    @classmethod
    def up(cls) -> "Vector2f":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vector2f":
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> "Vector2f":
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector2f":
        return cls(1.0, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.equals(other)

    def equals(self, other: "Vector2f") -> bool:
        """Exact component comparison; NaN never equals NaN."""
        if not isinstance(other, Vector2f):
            return False
        return self.x == other.x and self.y == other.y

    def debug_string(self) -> str:
        return f"x: {float32.to_text(self.x)}, y: {float32.to_text(self.y)}"

    def print_debug_string(self) -> None:
        print(self.debug_string())

    def set(self, x: float, y: float) -> None:
        self.x = float32.f32(x)
        self.y = float32.f32(y)

    def set_to(self, other: "Vector2f") -> None:
        self.set(other.x, other.y)

    def copy(self) -> "Vector2f":
        return Vector2f(self.x, self.y, self.precision)

    def magnitude(self) -> float:
        return float32.f32(float32.sqrt(self.x * self.x + self.y * self.y))

    def set_magnitude(self, mag: float) -> None:
        """Scale in place so the length becomes ``mag``, keeping the direction.

        A negative ``mag`` flips the direction. A zero-length vector ends up
        with NaN components.
        """
        factor = float32.div(mag, self.magnitude())
        self.set(float32.mul(factor, self.x), float32.mul(factor, self.y))

    def normalize(self) -> None:
        self.set(*self._unit_components())

    def normalized(self) -> "Vector2f":
        x, y = self._unit_components()
        return Vector2f(x, y, self.precision)

    def _unit_components(self) -> tuple[float, float]:
        inverse = float32.div(1.0, self.magnitude())
        return float32.mul(inverse, self.x), float32.mul(inverse, self.y)

    def restrict(self, min_x: float, max_x: float, min_y: float, max_y: float) -> None:
        """Clamp x into [min_x, max_x] and y into [min_y, max_y] in place.

        Each component is checked against its maximum before its minimum.
        """
        self.set(_clamp(self.x, min_x, max_x), _clamp(self.y, min_y, max_y))

    def restricted(self, min_x: float, max_x: float, min_y: float, max_y: float) -> "Vector2f":
        """Return a clamped copy; see :meth:`restrict`.

        With ``config.RESTRICTED_Y_FROM_X`` set, the y result is clamped from
        the x component instead of y.
        """
        source_y = self.x if config.RESTRICTED_Y_FROM_X else self.y
        return Vector2f(_clamp(self.x, min_x, max_x), _clamp(source_y, min_y, max_y), self.precision)

    def absolute_angle(self) -> float:
        """Clockwise angle in degrees from up (0, 1) to this vector, in [0, 360)."""
        return clockwise_angle(0.0, 1.0, self.x, self.y)

    def rotate(self, degrees: float) -> None:
        """Rotate in place about the origin, clockwise for positive degrees."""
        self.set(*rotate_components(self.x, self.y, degrees, self.precision))

    def rotated(self, degrees: float) -> "Vector2f":
        x, y = rotate_components(self.x, self.y, degrees, self.precision)
        return Vector2f(x, y, self.precision)

    def distance_to(self, target: "Vector2f") -> float:
        return _distance(self.x, self.y, target.x, target.y)

    def move_towards(self, target: "Vector2f", distance: float) -> None:
        """Move ``distance`` along the straight line towards ``target``.

        Moving towards the vector's own position gives NaN components.
        """
        movement = Vector2f(float32.sub(target.x, self.x), float32.sub(target.y, self.y))
        movement.normalize()
        movement.set_magnitude(distance)
        self.add(movement)

    def add(self, other: "Vector2f | float") -> None:
        ox, oy = _operand(other)
        self.set(float32.add(self.x, ox), float32.add(self.y, oy))

    def subt(self, other: "Vector2f | float") -> None:
        ox, oy = _operand(other)
        self.set(float32.sub(self.x, ox), float32.sub(self.y, oy))

    def mult(self, other: "Vector2f | float") -> None:
        ox, oy = _operand(other)
        self.set(float32.mul(self.x, ox), float32.mul(self.y, oy))

    def div(self, other: "Vector2f | float") -> None:
        """Divide in place; dividing by zero gives inf or NaN components."""
        ox, oy = _operand(other)
        self.set(float32.div(self.x, ox), float32.div(self.y, oy))

    @staticmethod
    def angle(from_: "Vector2f", to: "Vector2f") -> float:
        """Clockwise angle in degrees from ``from_`` to ``to``, in [0, 360).

        Reflex angles are returned as is rather than as negative values.
        """
        return clockwise_angle(from_.x, from_.y, to.x, to.y)

    @staticmethod
    def distance(a: "Vector2f", b: "Vector2f") -> float:
        return _distance(a.x, a.y, b.x, b.y)

    @staticmethod
    def dot_product(a: "Vector2f", b: "Vector2f") -> float:
        return float32.add(float32.mul(a.x, b.x), float32.mul(a.y, b.y))

    @staticmethod
    def cross_product(a: "Vector2f", b: "Vector2f") -> float:
        """2D cross product (perpendicular dot product) returning a scalar."""
        return float32.sub(float32.mul(a.x, b.y), float32.mul(a.y, b.x))

    @staticmethod
    def lerp(a: "Vector2f", b: "Vector2f", t: float) -> "Vector2f":
        """Linear interpolation ``a + (b - a) * t``.

        ``t`` is not clamped; values outside [0, 1] extrapolate.
        """
        return Vector2f(
            float32.add(a.x, float32.mul(float32.sub(b.x, a.x), t)),
            float32.add(a.y, float32.mul(float32.sub(b.y, a.y), t)),
            a.precision,
        )


def _operand(other: Vector2f | float) -> tuple[float, float]:
    if isinstance(other, Vector2f):
        return other.x, other.y
    if isinstance(other, Real):
        value = float(other)
        return value, value
    raise TypeError(f"Unsupported operand for Vector2f: {type(other).__name__}")
