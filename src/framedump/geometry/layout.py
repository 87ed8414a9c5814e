"""
Frame Layout
============

Interior plot rectangle and rotation pivot of a frame.

A frame's pixel box contains, from the outside in:
    border -> container padding -> header bar (top only) -> axis gutters
    -> plot area

Formulas:
    left   = margins.left + padding + border
    top    = margins.top + padding + border + header
    width  = size.width  - margins.left - margins.right  - 2 * (padding + border)
    height = size.height - margins.top  - margins.bottom - 2 * (padding + border) - header

When the caller has a real measured plot rectangle (e.g. read back from
the rendered chart) it replaces the estimate, provided it is usable.
"""

import logging
import math
from typing import Optional, Tuple

from framedump.geometry.numeric import safe_extent
from framedump.models.geometry import (
    ChromeOffsets,
    Frame,
    LayoutMargins,
    PlotRectangle,
    Rectangle,
    Size,
)


logger = logging.getLogger(__name__)


DEFAULT_MARGINS = LayoutMargins()
DEFAULT_CHROME = ChromeOffsets()


def _is_usable_measurement(measured: Optional[Rectangle]) -> bool:
    if measured is None:
        return False
    values = (measured.left, measured.top, measured.width, measured.height)
    if not all(math.isfinite(v) for v in values):
        return False
    return measured.width > 0 and measured.height > 0


def compute_plot_rectangle(
    frame_size: Size,
    measured: Optional[Rectangle] = None,
    margins: Optional[LayoutMargins] = None,
    chrome: Optional[ChromeOffsets] = None,
) -> PlotRectangle:
    """
    Compute the interior plot rectangle of a frame.

    Never raises. Width and height are always >= 1.

    Args:
        frame_size: Declared pixel size of the frame
        measured: Optional real plot rectangle in frame-local pixels
        margins: Axis gutters (defaults to LayoutMargins())
        chrome: Frame chrome offsets (defaults to ChromeOffsets())

    Returns:
        PlotRectangle in frame-local pixels
    """
    if _is_usable_measurement(measured):
        return PlotRectangle(
            left=measured.left,
            top=measured.top,
            width=safe_extent(measured.width),
            height=safe_extent(measured.height),
        )

    if measured is not None:
        logger.debug(f"Ignoring unusable plot measurement {measured}, using estimate")

    margins = margins or DEFAULT_MARGINS
    chrome = chrome or DEFAULT_CHROME

    inset = chrome.container_padding + chrome.border_width

    width = frame_size.width - margins.left - margins.right - 2 * inset
    height = (
        frame_size.height
        - margins.top
        - margins.bottom
        - 2 * inset
        - chrome.header_height
    )

    return PlotRectangle(
        left=margins.left + inset,
        top=margins.top + inset + chrome.header_height,
        width=safe_extent(width),
        height=safe_extent(height),
    )


def frame_center(frame: Frame) -> Tuple[float, float]:
    """Geometric center of a frame in frame-local pixels."""
    return frame.size.width / 2.0, frame.size.height / 2.0


def rotation_pivot(frame: Frame) -> Tuple[float, float]:
    """
    Rotation pivot of a frame in frame-local pixels.

    Uses the rotation_center override (canvas space) when present,
    otherwise the frame center.
    """
    if frame.rotation_center is None:
        return frame_center(frame)
    return (
        frame.rotation_center.x - frame.position.x,
        frame.rotation_center.y - frame.position.y,
    )
