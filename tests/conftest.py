"""
Test Configuration
==================

Pytest fixtures and test configuration for framedump.
"""

import pytest


@pytest.fixture
def base_domain():
    """Provide the first-quadrant domain {0, 5000, 0, 5000}."""
    from framedump.models.geometry import Domain

    return Domain(x_min=0, x_max=5000, y_min=0, y_max=5000)


@pytest.fixture
def base_frame(base_domain):
    """Provide an unrotated 500x400 frame at the canvas origin."""
    from framedump.models.geometry import Frame, Position, Size

    return Frame(
        id="source",
        position=Position(x=0, y=0),
        size=Size(width=500, height=400),
        rotation_degrees=0,
        domain=base_domain,
        z_order=2,
        color="#3b82f6",
    )


@pytest.fixture
def centered_rect():
    """
    Provide a measured plot rectangle centered in a 500x400 frame.

    Its center coincides with the frame center (250, 200), so rotations
    about the frame center map the plot area onto itself.
    """
    from framedump.models.geometry import Rectangle

    return Rectangle(left=50, top=0, width=400, height=400)


@pytest.fixture
def sample_points():
    """Provide a few points inside the first-quadrant domain."""
    from framedump.models.geometry import Point

    return [
        Point(x=2500, y=2500),
        Point(x=0, y=2500, metadata={"label": "left"}),
        Point(x=1234.5, y=4321.0),
        Point(x=5000, y=0),
    ]


@pytest.fixture
def sample_scene():
    """Provide a sample scene definition for testing."""
    return {
        "scene_id": "test_scene",
        "frames": [
            {
                "id": "top",
                "position": {"x": 100, "y": 100},
                "size": {"width": 500, "height": 400},
                "rotation_degrees": 0,
                "z_order": 5,
                "color": "#ef4444",
                "points": [
                    {"x": 100, "y": 200, "label": "a"},
                    {"x": -50, "y": 10},
                    {"x": "bad", "y": 3},
                ],
            },
            {
                "id": "bottom",
                "position": {"x": 300, "y": 250},
                "size": {"width": 600, "height": 650},
                "rotation_degrees": 45,
                "z_order": 1,
                "points": [{"x": 10, "y": 20}],
            },
        ],
    }
