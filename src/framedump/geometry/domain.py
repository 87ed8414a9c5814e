"""
Domain Classification
=====================

Decides the plotting mode and initial domain of a data set.

Classification uses FIXED domains rather than ranges fitted to the data,
so frames loaded from different files share a comparable scale and the
cross-frame transform stays well-behaved when dumping between them:

    all x, y >= 0   ->  FIRST  {0, 5000, 0, 5000}
    any x or y < 0  ->  ALL    {-2500, 2500, -2500, 2500}

fit_domain() and pad_domain() provide the data-fitted alternative used
when a caller wants axes that hug the data.
"""

import logging
import math
from typing import Final, Iterable, List, Tuple

from framedump.models.geometry import Domain, Point, QuadrantMode


logger = logging.getLogger(__name__)


FIRST_QUADRANT_DOMAIN: Final[Domain] = Domain(
    x_min=0.0, x_max=5000.0, y_min=0.0, y_max=5000.0
)

FOUR_QUADRANT_DOMAIN: Final[Domain] = Domain(
    x_min=-2500.0, x_max=2500.0, y_min=-2500.0, y_max=2500.0
)


def _finite_coordinates(points: Iterable[Point]) -> Tuple[List[float], List[float]]:
    xs: List[float] = []
    ys: List[float] = []
    for point in points:
        if math.isfinite(point.x) and math.isfinite(point.y):
            xs.append(point.x)
            ys.append(point.y)
    return xs, ys


def classify_domain(points: Iterable[Point]) -> Tuple[QuadrantMode, Domain]:
    """
    Classify a point set into a plotting mode and fixed domain.

    Args:
        points: Points already filtered by sanitize_points()

    Returns:
        Tuple of (mode, domain). An empty set falls back to
        (FIRST, {0, 5000, 0, 5000}).
    """
    xs, ys = _finite_coordinates(points)

    if not xs:
        logger.debug("No points to classify, using first-quadrant fallback")
        return QuadrantMode.FIRST, FIRST_QUADRANT_DOMAIN

    if min(xs) < 0 or min(ys) < 0:
        mode, domain = QuadrantMode.ALL, FOUR_QUADRANT_DOMAIN
    else:
        mode, domain = QuadrantMode.FIRST, FIRST_QUADRANT_DOMAIN

    logger.debug(
        f"Classified {len(xs)} points: mode={mode.value}, "
        f"x=[{min(xs)}, {max(xs)}], y=[{min(ys)}, {max(ys)}]"
    )
    return mode, domain


def repair_domain(x_min: float, x_max: float, y_min: float, y_max: float) -> Domain:
    """
    Build a Domain, repairing degenerate axes.

    Any axis with max <= min gets max = min + 1.
    """
    return Domain(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)


def round_domain_bound(value: float, is_min: bool) -> float:
    """
    Round a bound outward to a multiple of its power of ten.

    Examples:
        >>> round_domain_bound(4321.0, is_min=False)
        5000.0
        >>> round_domain_bound(-37.0, is_min=True)
        -40.0
        >>> round_domain_bound(0.0, is_min=True)
        0.0
    """
    if value == 0:
        return 0.0

    magnitude = 10 ** math.floor(math.log10(abs(value)))
    if is_min:
        return float(math.floor(value / magnitude) * magnitude)
    return float(math.ceil(value / magnitude) * magnitude)


def fit_domain(points: Iterable[Point]) -> Domain:
    """
    Fit a domain to the data with rounded bounds.

    First-quadrant data keeps both minimums at 0. Four-quadrant data
    rounds every bound outward.

    Args:
        points: Points already filtered by sanitize_points()

    Returns:
        Data-fitted Domain, or the first-quadrant fallback when empty
    """
    xs, ys = _finite_coordinates(points)
    if not xs:
        return FIRST_QUADRANT_DOMAIN

    x_lo, x_hi = min(xs), max(xs)
    y_lo, y_hi = min(ys), max(ys)

    if x_lo < 0 or y_lo < 0:
        return repair_domain(
            round_domain_bound(x_lo, is_min=True),
            round_domain_bound(x_hi, is_min=False),
            round_domain_bound(y_lo, is_min=True),
            round_domain_bound(y_hi, is_min=False),
        )

    return repair_domain(
        0.0,
        round_domain_bound(x_hi, is_min=False),
        0.0,
        round_domain_bound(y_hi, is_min=False),
    )


def pad_domain(domain: Domain, fraction: float = 0.05) -> Domain:
    """
    Widen each axis by a fraction of its span on both sides.

    Keeps points from sitting exactly on the plot edge.
    """
    x_pad = domain.x_span * fraction
    y_pad = domain.y_span * fraction
    return repair_domain(
        domain.x_min - x_pad,
        domain.x_max + x_pad,
        domain.y_min - y_pad,
        domain.y_max + y_pad,
    )
