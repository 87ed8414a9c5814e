"""
Data Models
===========

Pydantic models and trace records for framedump.

This module re-exports all data models for convenient access.

Models:
    Geometry:
        - Point: Data point with opaque metadata
        - Domain: Non-degenerate data range of a frame
        - Position, Size: Canvas placement of a frame
        - Frame: Positioned, sized, rotated scatter-plot view
        - Rectangle, PlotRectangle: Pixel rectangles
        - LayoutMargins, ChromeOffsets: Layout constants
        - QuadrantMode: FIRST or ALL

    Trace:
        - PointTrace: Intermediate values of one transformed point
        - TransformSummary: Per-call transform counters
"""

from framedump.models.geometry import (
    ChromeOffsets,
    Domain,
    Frame,
    LayoutMargins,
    PlotRectangle,
    Point,
    Position,
    QuadrantMode,
    Rectangle,
    Size,
)
from framedump.models.trace import PointTrace, TransformSummary

__all__ = [
    # Geometry
    "QuadrantMode",
    "Point",
    "Domain",
    "Position",
    "Size",
    "Rectangle",
    "PlotRectangle",
    "LayoutMargins",
    "ChromeOffsets",
    "Frame",
    # Trace
    "PointTrace",
    "TransformSummary",
]
