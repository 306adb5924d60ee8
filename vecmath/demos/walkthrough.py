"""Print the result of every Vector2f operation for one input vector."""

from __future__ import annotations

import argparse
from typing import Sequence

from vecmath import config
from vecmath.math.vector2f import Vector2f


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk through Vector2f operations (math-only).")
    parser.add_argument("--x", type=float, default=config.DEFAULT_DEMO_X, help="x component")
    parser.add_argument("--y", type=float, default=config.DEFAULT_DEMO_Y, help="y component")
    parser.add_argument("--degrees", type=float, default=config.DEFAULT_DEMO_DEGREES, help="clockwise rotation")
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal digits kept after rotation (defaults to config.DEFAULT_PRECISION).",
    )
    return parser.parse_args(argv)


def walkthrough_lines(vec: Vector2f, degrees: float) -> list[str]:
    up = Vector2f.up()
    right = Vector2f.right()
    return [
        f"vector: {vec.debug_string()}",
        f"magnitude: {vec.magnitude()}",
        f"normalized: {vec.normalized().debug_string()}",
        f"rotated({degrees}): {vec.rotated(degrees).debug_string()}",
        f"absolute_angle: {vec.absolute_angle()}",
        f"restricted(unit box): {vec.restricted(-1.0, 1.0, -1.0, 1.0).debug_string()}",
        f"distance_to(origin): {vec.distance_to(Vector2f.zero())}",
        f"dot_product(up): {Vector2f.dot_product(vec, up)}",
        f"cross_product(right): {Vector2f.cross_product(right, vec)}",
        f"lerp(origin, 0.5): {Vector2f.lerp(Vector2f.zero(), vec, 0.5).debug_string()}",
    ]


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    vec = Vector2f(args.x, args.y)
    if args.precision is not None:
        vec.precision = args.precision
    for line in walkthrough_lines(vec, args.degrees):
        print(line)


if __name__ == "__main__":
    main()
