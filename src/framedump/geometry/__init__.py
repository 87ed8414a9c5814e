"""
Geometry Module
===============

The transformation engine behind dumping points between frames.

Components:
    - domain: Plotting mode and domain classification
    - ticks: Axis tick values
    - layout: Interior plot rectangle of a frame
    - overlap: Frames beneath a frame
    - transform: Point transformation between frames
    - points: Validation pass for raw points

Every function here is pure: inputs are read, never mutated, and
nothing is cached between calls.
"""

from framedump.geometry.domain import (
    FIRST_QUADRANT_DOMAIN,
    FOUR_QUADRANT_DOMAIN,
    classify_domain,
    fit_domain,
    pad_domain,
    repair_domain,
)
from framedump.geometry.layout import compute_plot_rectangle, frame_center, rotation_pivot
from framedump.geometry.overlap import detect_overlaps, rectangles_intersect
from framedump.geometry.points import is_finite_point, sanitize_points
from framedump.geometry.ticks import format_tick, generate_nice_ticks, generate_ticks
from framedump.geometry.transform import dump_points, transform_points

__all__ = [
    "FIRST_QUADRANT_DOMAIN",
    "FOUR_QUADRANT_DOMAIN",
    "classify_domain",
    "fit_domain",
    "pad_domain",
    "repair_domain",
    "generate_ticks",
    "generate_nice_ticks",
    "format_tick",
    "compute_plot_rectangle",
    "frame_center",
    "rotation_pivot",
    "detect_overlaps",
    "rectangles_intersect",
    "sanitize_points",
    "is_finite_point",
    "transform_points",
    "dump_points",
]
