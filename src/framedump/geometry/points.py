"""
Point Validation
================

The explicit validation pass run on raw data before any geometry.

Raw rows may be Point models or plain mappings (e.g. parsed CSV rows
with "x"/"y" keys and extra columns). Rows whose x or y is missing,
non-numeric or non-finite are discarded here, so the classifier and
the transformer can assume clean input.

Example:
    from framedump.geometry import sanitize_points

    points = sanitize_points([
        {"x": 10, "y": 20, "label": "a"},
        {"x": "n/a", "y": 5},
    ])
    # -> [Point(x=10.0, y=20.0, metadata={"label": "a"})]
"""

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from framedump.models.geometry import Point


logger = logging.getLogger(__name__)


RawPoint = Union[Point, Mapping[str, Any]]


def _coerce_float(value: Any) -> Optional[float]:
    """Convert to a finite float, or None."""
    if isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def is_finite_point(point: Point) -> bool:
    """Check that both coordinates of a point are finite."""
    return math.isfinite(point.x) and math.isfinite(point.y)


def sanitize_points(rows: Iterable[RawPoint]) -> List[Point]:
    """
    Build clean Points from raw rows, dropping invalid ones.

    Mapping keys other than "x" and "y" become metadata.

    Args:
        rows: Point models or mappings with "x" and "y"

    Returns:
        New list containing only points with finite coordinates
    """
    clean: List[Point] = []
    dropped = 0

    for row in rows:
        if isinstance(row, Point):
            if is_finite_point(row):
                clean.append(row)
            else:
                dropped += 1
            continue

        x = _coerce_float(row.get("x"))
        y = _coerce_float(row.get("y"))
        if x is None or y is None:
            dropped += 1
            continue

        metadata = {k: v for k, v in row.items() if k not in ("x", "y")}
        clean.append(Point(x=x, y=y, metadata=metadata))

    if dropped:
        logger.warning(f"Discarded {dropped} invalid point(s), kept {len(clean)}")

    return clean
