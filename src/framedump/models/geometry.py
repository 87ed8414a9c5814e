"""
Geometry Models
===============

This module defines the value types shared by every geometry operation.

Design Philosophy:
    Frames, domains and points are SNAPSHOTS handed in by the caller.
    The core never owns, caches or mutates them. All "maybe present"
    fields are resolved here, during model validation, so the algorithms
    downstream can run without defensive checks.

Supported Types:
    - Point: data-space coordinate plus opaque metadata
    - Domain: rectangular range of data values (always non-degenerate)
    - Position / Size: canvas-space placement of a frame
    - Frame: one positioned, sized and rotated scatter-plot view
    - Rectangle / PlotRectangle: pixel rectangles
    - LayoutMargins / ChromeOffsets: fixed layout constants

Coordinate Spaces:
    DATA SPACE   x grows rightward, y grows UPWARD (domain units)
    LOCAL SPACE  pixels from a frame's top-left corner, y grows DOWNWARD
    CANVAS SPACE pixels from the canvas origin, y grows DOWNWARD

Example Frame:
    {
        "id": "scatter_a",
        "position": {"x": 100, "y": 100},
        "size": {"width": 600, "height": 650},
        "rotation_degrees": 0,
        "domain": {"x_min": 0, "x_max": 5000, "y_min": 0, "y_max": 5000},
        "z_order": 3
    }
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


logger = logging.getLogger(__name__)


class QuadrantMode(str, Enum):
    """
    Plotting mode of a data set.

    Attributes:
        FIRST: All coordinates are non-negative
        ALL: At least one coordinate is negative (four quadrants)
    """

    FIRST = "first"
    ALL = "all"


class Point(BaseModel):
    """
    Data point in a frame's domain.

    Attributes:
        x: Horizontal data value
        y: Vertical data value (grows upward)
        metadata: Opaque key/value map (provenance, extra CSV columns)
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Horizontal data value")
    y: float = Field(..., description="Vertical data value")
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Opaque metadata carried through transforms",
    )


class Domain(BaseModel):
    """
    Rectangular range of data values shown by a frame's axes.

    Invariant: x_max > x_min and y_max > y_min. Degenerate input is
    repaired on construction by nudging the max to min + 1, or to
    the next representable float where min + 1 rounds back to min.

    Attributes:
        x_min, x_max: Horizontal range
        y_min, y_max: Vertical range
    """

    model_config = ConfigDict(frozen=True)

    x_min: float = Field(default=0.0, description="Lower horizontal bound")
    x_max: float = Field(default=5000.0, description="Upper horizontal bound")
    y_min: float = Field(default=0.0, description="Lower vertical bound")
    y_max: float = Field(default=5000.0, description="Upper vertical bound")

    @model_validator(mode="before")
    @classmethod
    def repair_degenerate_bounds(cls, data: Any) -> Any:
        """Replace max <= min with min + 1 on either axis."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for axis in ("x", "y"):
            lo_key, hi_key = f"{axis}_min", f"{axis}_max"
            try:
                lo = float(data.get(lo_key, cls.model_fields[lo_key].default))
                hi = float(data.get(hi_key, cls.model_fields[hi_key].default))
            except (TypeError, ValueError):
                # Leave it to field validation to report
                continue
            if not hi > lo:
                repaired = max(lo + 1.0, math.nextafter(lo, math.inf))
                logger.warning(
                    f"Degenerate domain on {axis}: [{lo}, {hi}], "
                    f"using {axis}_max={repaired!r}"
                )
                data[hi_key] = repaired
        return data

    @property
    def x_span(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_span(self) -> float:
        return self.y_max - self.y_min


class Position(BaseModel):
    """Canvas-space pixel coordinate (y grows downward)."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.0, description="Pixels from the canvas left edge")
    y: float = Field(default=0.0, description="Pixels from the canvas top edge")


class Size(BaseModel):
    """Declared pixel size of a frame."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., ge=0, description="Frame width in pixels")
    height: float = Field(..., ge=0, description="Frame height in pixels")


class Rectangle(BaseModel):
    """
    Axis-aligned pixel rectangle.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        width: Horizontal extent
        height: Vertical extent
    """

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="X of the left edge")
    top: float = Field(..., description="Y of the top edge")
    width: float = Field(..., description="Horizontal extent in pixels")
    height: float = Field(..., description="Vertical extent in pixels")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


class PlotRectangle(Rectangle):
    """
    Interior plot area of a frame, in frame-local pixels.

    Data-space (0, 0)-(1, 1) after normalization maps onto this
    rectangle. Derived per call and never cached.
    """


class LayoutMargins(BaseModel):
    """Axis gutters around the plot area (pixels)."""

    model_config = ConfigDict(frozen=True)

    top: float = Field(default=20.0, ge=0, description="Top gutter")
    right: float = Field(default=20.0, ge=0, description="Right gutter")
    bottom: float = Field(default=30.0, ge=0, description="Bottom gutter (x axis)")
    left: float = Field(default=50.0, ge=0, description="Left gutter (y axis)")


class ChromeOffsets(BaseModel):
    """
    Frame chrome surrounding the chart widget (pixels).

    Padding and border apply on every side; the header bar sits
    above the chart only.
    """

    model_config = ConfigDict(frozen=True)

    container_padding: float = Field(default=4.0, ge=0, description="Inner padding")
    border_width: float = Field(default=1.0, ge=0, description="Border width")
    header_height: float = Field(default=32.0, ge=0, description="Title bar height")


class Frame(BaseModel):
    """
    One independently positioned, sized and rotated scatter-plot view.

    Frames belong to the caller's registry. The core only reads them.

    Attributes:
        id: Opaque identifier supplied by the caller
        position: Top-left corner before rotation (canvas space)
        size: Declared pixel size
        rotation_degrees: Clockwise rotation in pixel space
        domain: Data range shown by the frame's axes
        z_order: Stacking order (higher is drawn on top)
        rotation_center: Optional pivot override (canvas space)
        color: Render color of the frame's native points
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque frame identifier")
    position: Position = Field(default_factory=Position)
    size: Size = Field(..., description="Declared pixel size")
    rotation_degrees: float = Field(default=0.0, description="Rotation in degrees")
    domain: Domain = Field(default_factory=Domain)
    z_order: int = Field(default=0, description="Stacking order")
    rotation_center: Optional[Position] = Field(
        default=None,
        description="Pivot override in canvas space (defaults to frame center)",
    )
    color: Optional[str] = Field(
        default=None,
        description="Render color of this frame's points",
    )

    @property
    def bounds(self) -> Rectangle:
        """Unrotated bounding box in canvas space."""
        return Rectangle(
            left=self.position.x,
            top=self.position.y,
            width=self.size.width,
            height=self.size.height,
        )
