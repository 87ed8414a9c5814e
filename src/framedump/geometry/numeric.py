"""
Numeric Helpers
===============

Small numeric primitives shared by the geometry modules.

Invariants:
    - Angles are normalized to [0, 360) before any trigonometry
    - Extents used as divisors are never below MIN_EXTENT
    - Rounding to significant digits never turns a finite value non-finite
"""

import math
from typing import Final, Tuple

import numpy as np


# Smallest pixel extent used as a divisor
MIN_EXTENT: Final[float] = 1.0

# Significant digits kept when cleaning binary floating point noise
DEFAULT_SIGNIFICANT_DIGITS: Final[int] = 10


def normalize_angle(degrees: float) -> float:
    """
    Normalize an angle to [0, 360).

    Non-finite angles normalize to 0 (no rotation).

    Examples:
        >>> normalize_angle(-90.0)
        270.0
        >>> normalize_angle(720.0)
        0.0
    """
    if not math.isfinite(degrees):
        return 0.0
    normalized = degrees % 360.0
    # -1e-17 % 360 rounds to exactly 360.0
    if normalized >= 360.0:
        normalized = 0.0
    return normalized


def safe_extent(value: float) -> float:
    """Return value, or MIN_EXTENT when it is non-finite or below MIN_EXTENT."""
    if not math.isfinite(value) or value < MIN_EXTENT:
        return MIN_EXTENT
    return value


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Limit value to [min_value, max_value]."""
    return max(min_value, min(value, max_value))


def round_significant(value: float, digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> float:
    """
    Round to a number of significant decimal digits.

    Strips binary floating point noise such as 0.30000000000000004.

    Examples:
        >>> round_significant(0.1 + 0.2)
        0.3
        >>> round_significant(0.0)
        0.0
    """
    if value == 0 or not math.isfinite(value):
        return value
    rounded = float(f"{value:.{digits}g}")
    # Normalize negative zero
    return rounded + 0.0


def rotate_about(
    xs: np.ndarray,
    ys: np.ndarray,
    pivot: Tuple[float, float],
    degrees: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rotate coordinates about a pivot in pixel space.

    Positive angles turn clockwise on screen, since y grows downward.
    An angle that normalizes to exactly 0 returns the inputs untouched.

    Args:
        xs: X coordinates
        ys: Y coordinates
        pivot: (x, y) rotation center in the same space
        degrees: Rotation angle in degrees

    Returns:
        Tuple of rotated (xs, ys)
    """
    angle = normalize_angle(degrees)
    if angle == 0.0:
        return xs, ys

    theta = math.radians(angle)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)

    px, py = pivot
    dx = xs - px
    dy = ys - py

    return px + dx * cos_t - dy * sin_t, py + dx * sin_t + dy * cos_t
