"""
framedump
=========

Geometric transformation engine for multi-frame scatter-plot canvases.

A canvas holds several independent scatter-plot frames, each with its own
position, pixel size, rotation and data domain. This package provides the
pure computations behind moving ("dumping") points from one frame into
another so they keep their on-screen position.

Components:
    - geometry: domain classification, ticks, plot layout, overlap
      detection, point transformation
    - models: pydantic value types (Point, Domain, Frame, PlotRectangle)
    - observability: optional transform trace observers
    - scene: JSON canvas snapshots for scripts
    - config: YAML/environment settings and logging setup

Example:
    from framedump.geometry import classify_domain, dump_points

    mode, domain = classify_domain(points)
    moved = dump_points(points, source_frame, target_frame)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
