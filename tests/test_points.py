"""
Point Validation Tests
======================

Tests for the raw point validation pass.
"""

from framedump.geometry.points import is_finite_point, sanitize_points
from framedump.models.geometry import Point


class TestSanitizePoints:
    """Tests for sanitize_points."""

    def test_mappings_become_points(self):
        result = sanitize_points([{"x": "12.5", "y": 3, "label": "a", "weight": 2}])

        assert result == [Point(x=12.5, y=3.0, metadata={"label": "a", "weight": 2})]

    def test_invalid_rows_dropped(self):
        rows = [
            {"x": 1, "y": 2},
            {"x": None, "y": 2},
            {"x": "abc", "y": 2},
            {"x": float("nan"), "y": 2},
            {"x": 1, "y": float("-inf")},
            {"x": True, "y": 2},
            {"y": 5},
        ]

        result = sanitize_points(rows)

        assert [(p.x, p.y) for p in result] == [(1.0, 2.0)]

    def test_point_models_pass_through(self):
        good = Point(x=1, y=2, metadata={"k": "v"})
        bad = Point(x=float("inf"), y=0)

        result = sanitize_points([good, bad])

        assert result == [good]

    def test_empty(self):
        assert sanitize_points([]) == []

    def test_is_finite_point(self):
        assert is_finite_point(Point(x=0, y=-1))
        assert not is_finite_point(Point(x=float("nan"), y=0))
