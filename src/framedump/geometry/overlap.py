"""
Overlap Detection
=================

Finds the frames lying beneath a frame, as candidate dump targets.

The test uses UNROTATED bounding boxes on purpose: it is a cheap proxy
for "visually behind me", not an exact geometric predicate.
"""

import logging
from typing import Iterable, List

from framedump.models.geometry import Frame, Rectangle


logger = logging.getLogger(__name__)


def rectangles_intersect(a: Rectangle, b: Rectangle) -> bool:
    """
    Axis-aligned rectangle intersection (edges touching do not count).

    Symmetric: rectangles_intersect(a, b) == rectangles_intersect(b, a).
    """
    return (
        a.left < b.right
        and a.right > b.left
        and a.top < b.bottom
        and a.bottom > b.top
    )


def detect_overlaps(query: Frame, candidates: Iterable[Frame]) -> List[str]:
    """
    Return ids of candidate frames beneath and overlapping the query frame.

    Args:
        query: The frame being dragged or dumped from
        candidates: Other frames; an entry with the query's id is skipped

    Returns:
        Ids of frames with lower z_order whose bounds intersect the query's
    """
    query_bounds = query.bounds
    overlapping: List[str] = []

    for candidate in candidates:
        if candidate.id == query.id:
            continue
        if candidate.z_order >= query.z_order:
            continue
        if rectangles_intersect(query_bounds, candidate.bounds):
            overlapping.append(candidate.id)

    logger.debug(f"Frame {query.id} overlaps {len(overlapping)} lower frame(s)")
    return overlapping
