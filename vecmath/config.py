"""Default configuration values for vecmath."""

from __future__ import annotations

# Decimal digits kept after a rotation.
DEFAULT_PRECISION = 10

# When True, Vector2f.restricted() clamps y starting from the x component,
# reproducing an old copy of the library. Vector2f.restrict() is unaffected.
RESTRICTED_Y_FROM_X = False

DEFAULT_DEMO_X = 3.0
DEFAULT_DEMO_Y = 4.0
DEFAULT_DEMO_DEGREES = 90.0
