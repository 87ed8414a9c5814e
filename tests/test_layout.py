"""
Layout Tests
============

Tests for plot rectangle computation and rotation pivots.
"""

import pytest

from framedump.geometry.layout import compute_plot_rectangle, frame_center, rotation_pivot
from framedump.models.geometry import (
    ChromeOffsets,
    Frame,
    LayoutMargins,
    Position,
    Rectangle,
    Size,
)


NO_CHROME = ChromeOffsets(container_padding=0, border_width=0, header_height=0)


class TestComputePlotRectangle:
    """Tests for compute_plot_rectangle."""

    def test_default_estimate(self):
        """Defaults subtract gutters, padding, border and header."""
        rect = compute_plot_rectangle(Size(width=500, height=400))

        assert rect.left == 55
        assert rect.top == 57
        assert rect.width == 420
        assert rect.height == 308

    def test_margins_only(self):
        """Without chrome the rectangle is the size minus the gutters."""
        rect = compute_plot_rectangle(
            Size(width=600, height=650),
            margins=LayoutMargins(top=20, right=20, bottom=30, left=50),
            chrome=NO_CHROME,
        )

        assert (rect.left, rect.top) == (50, 20)
        assert (rect.width, rect.height) == (530, 600)

    def test_tiny_frame_is_clamped(self):
        """A frame smaller than its gutters still gets a 1 px plot area."""
        rect = compute_plot_rectangle(Size(width=10, height=0))

        assert rect.width == 1
        assert rect.height == 1

    def test_measurement_replaces_estimate(self):
        """A valid measured rectangle is used as is."""
        measured = Rectangle(left=60, top=45, width=400.5, height=300.25)

        rect = compute_plot_rectangle(Size(width=500, height=400), measured)

        assert (rect.left, rect.top, rect.width, rect.height) == (60, 45, 400.5, 300.25)

    @pytest.mark.parametrize(
        "measured",
        [
            Rectangle(left=0, top=0, width=0, height=100),
            Rectangle(left=0, top=0, width=100, height=-5),
            Rectangle(left=float("nan"), top=0, width=100, height=100),
        ],
    )
    def test_invalid_measurement_falls_back(self, measured):
        """Zero, negative or non-finite measurements use the estimate."""
        rect = compute_plot_rectangle(Size(width=500, height=400), measured)

        assert rect == compute_plot_rectangle(Size(width=500, height=400))

    def test_small_measurement_is_clamped(self):
        """A measured extent below 1 px is raised to 1."""
        measured = Rectangle(left=5, top=5, width=0.25, height=0.5)
        rect = compute_plot_rectangle(Size(width=500, height=400), measured)

        assert (rect.width, rect.height) == (1, 1)


class TestRotationPivot:
    """Tests for frame centers and rotation pivots."""

    def test_center_is_local(self):
        frame = Frame(id="f", position=Position(x=300, y=200), size=Size(width=500, height=400))
        assert frame_center(frame) == (250, 200)
        assert rotation_pivot(frame) == (250, 200)

    def test_override_is_converted_to_local(self):
        """A canvas-space rotation center becomes frame-local."""
        frame = Frame(
            id="f",
            position=Position(x=300, y=200),
            size=Size(width=500, height=400),
            rotation_center=Position(x=310, y=260),
        )
        assert rotation_pivot(frame) == (10, 60)
