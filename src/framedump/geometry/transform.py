"""
Point Transformation
====================

Carries points from one frame's domain into another's, preserving each
point's visual position on the canvas.

This is what makes dumping points between independently moved,
resized and rotated frames visually coherent.

Pipeline (per point, vectorized over the batch):
    1. Normalize against the source domain, inverting y
    2. Place inside the source plot rectangle (frame-local pixels)
    3. Rotate by the source angle about the source pivot
    4. Add the source position           -> canvas pixels
    5. Subtract the target position      -> target-local pixels
    6. Rotate by -target angle about the target pivot
    7. Normalize against the target plot rectangle
    8. Denormalize into the target domain, inverting y back
    9. Clamp into the target domain

Rotation Sense:
    Pixel space has y growing downward, so a positive angle turns
    clockwise on screen, matching how frames are drawn.

Numeric Rules:
    - Angles are normalized to [0, 360); exactly 0 skips the rotation
    - Zero-extent plot rectangles are treated as 1 px
    - Points with non-finite input are dropped, never raised
    - Finite points that overflow mid-pipeline are recomputed with capped
      normalized coordinates and end up pinned to the domain boundary
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from framedump.geometry.layout import compute_plot_rectangle, rotation_pivot
from framedump.geometry.numeric import normalize_angle, rotate_about, safe_extent
from framedump.models.geometry import (
    ChromeOffsets,
    Domain,
    Frame,
    LayoutMargins,
    PlotRectangle,
    Point,
    Rectangle,
)
from framedump.models.trace import PointTrace, TransformSummary
from framedump.observability.trace import TransformObserver


logger = logging.getLogger(__name__)


# Metadata keys attached to every transformed point
ORIGINAL_X_KEY = "original_x"
ORIGINAL_Y_KEY = "original_y"
ORIGINAL_COLOR_KEY = "original_color"
IS_DUMPED_KEY = "is_dumped"
SOURCE_FRAME_KEY = "source_frame"

# Normalized coordinates are capped here when a finite point overflows,
# so rotation never computes inf - inf
OVERFLOW_NORMALIZED_LIMIT = 1e150


def _pair(xs: np.ndarray, ys: np.ndarray, i: int) -> tuple:
    return float(xs[i]), float(ys[i])


def _notify(observer: TransformObserver, method: str, payload: Any) -> None:
    """Call an observer hook; failures are logged and ignored."""
    try:
        getattr(observer, method)(payload)
    except Exception as e:
        logger.warning(f"Transform observer {method} failed: {e}")


def transform_points(
    points: Sequence[Point],
    source_domain: Domain,
    target_domain: Domain,
    source_frame: Frame,
    target_frame: Frame,
    *,
    source_measured: Optional[Rectangle] = None,
    target_measured: Optional[Rectangle] = None,
    margins: Optional[LayoutMargins] = None,
    chrome: Optional[ChromeOffsets] = None,
    source_ref: Optional[str] = None,
    observer: Optional[TransformObserver] = None,
) -> List[Point]:
    """
    Re-express points from the source frame in the target frame's domain.

    The input sequence is never modified; new Points are returned.

    Args:
        points: Points in source_domain coordinates
        source_domain: Data range the points are expressed in
        target_domain: Data range to express them in
        source_frame: Frame the points are currently drawn in
        target_frame: Frame receiving the points
        source_measured: Optional real plot rectangle of the source frame
        target_measured: Optional real plot rectangle of the target frame
        margins: Axis gutters used for both frames
        chrome: Frame chrome offsets used for both frames
        source_ref: Provenance reference (defaults to source_frame.id)
        observer: Optional diagnostic sink receiving per-point traces

    Returns:
        Transformed points, clamped into target_domain, in input order
        minus any dropped non-finite points
    """
    points = list(points)
    source_ref = source_ref if source_ref is not None else source_frame.id

    source_rect = compute_plot_rectangle(source_frame.size, source_measured, margins, chrome)
    target_rect = compute_plot_rectangle(target_frame.size, target_measured, margins, chrome)

    source_angle = normalize_angle(source_frame.rotation_degrees)
    target_angle = normalize_angle(target_frame.rotation_degrees)

    if not points:
        if observer is not None:
            _notify(observer, "on_complete", TransformSummary(
                source_frame=source_ref,
                target_frame=target_frame.id,
                input_count=0,
                output_count=0,
                dropped_count=0,
                clamped_count=0,
                source_rotation=source_angle,
                target_rotation=target_angle,
            ))
        return []

    xs = np.array([p.x for p in points], dtype=np.float64)
    ys = np.array([p.y for p in points], dtype=np.float64)

    with np.errstate(all="ignore"):
        result = _run_pipeline(
            xs, ys,
            source_domain, target_domain,
            source_frame, target_frame,
            source_rect, target_rect,
            source_angle, target_angle,
        )

    valid = np.isfinite(xs) & np.isfinite(ys)
    overflow = valid & ~(
        np.isfinite(result["unclamped_x"]) & np.isfinite(result["unclamped_y"])
    )

    if overflow.any():
        logger.debug(
            f"Recomputing {int(np.sum(overflow))} overflowing point(s) "
            f"with normalized limit {OVERFLOW_NORMALIZED_LIMIT}"
        )
        with np.errstate(all="ignore"):
            retry = _run_pipeline(
                xs[overflow], ys[overflow],
                source_domain, target_domain,
                source_frame, target_frame,
                source_rect, target_rect,
                source_angle, target_angle,
                normalized_limit=OVERFLOW_NORMALIZED_LIMIT,
            )
        for key, values in retry.items():
            result[key][overflow] = values

        # Only reachable with domains whose span itself overflows
        result["unclamped_x"] = np.where(
            np.isnan(result["unclamped_x"]), target_domain.x_min, result["unclamped_x"]
        )
        result["unclamped_y"] = np.where(
            np.isnan(result["unclamped_y"]), target_domain.y_min, result["unclamped_y"]
        )

    out_x = np.clip(result["unclamped_x"], target_domain.x_min, target_domain.x_max)
    out_y = np.clip(result["unclamped_y"], target_domain.y_min, target_domain.y_max)
    clamped = valid & ((out_x != result["unclamped_x"]) | (out_y != result["unclamped_y"]))

    transformed: List[Point] = []
    traced = 0
    trace_limit = getattr(observer, "trace_limit", 0) if observer is not None else 0

    for i, point in enumerate(points):
        if not valid[i]:
            continue

        new_x, new_y = float(out_x[i]), float(out_y[i])
        transformed.append(
            Point(
                x=new_x,
                y=new_y,
                metadata=_provenance(point, source_frame, source_ref),
            )
        )

        if traced < trace_limit:
            _notify(observer, "on_trace", _build_trace(i, xs, ys, result, new_x, new_y))
            traced += 1

    dropped = len(points) - len(transformed)
    if dropped:
        logger.warning(
            f"Dropped {dropped} non-finite point(s) transforming "
            f"{source_ref} -> {target_frame.id}"
        )

    summary = TransformSummary(
        source_frame=source_ref,
        target_frame=target_frame.id,
        input_count=len(points),
        output_count=len(transformed),
        dropped_count=dropped,
        clamped_count=int(np.sum(clamped)),
        source_rotation=source_angle,
        target_rotation=target_angle,
    )
    logger.debug(f"Transformed points: {summary!r}")

    if observer is not None:
        _notify(observer, "on_complete", summary)

    return transformed


def _run_pipeline(
    xs: np.ndarray,
    ys: np.ndarray,
    source_domain: Domain,
    target_domain: Domain,
    source_frame: Frame,
    target_frame: Frame,
    source_rect: PlotRectangle,
    target_rect: PlotRectangle,
    source_angle: float,
    target_angle: float,
    normalized_limit: Optional[float] = None,
) -> Dict[str, np.ndarray]:
    """
    Run steps 1-8 over whole coordinate arrays, keeping every stage.

    With normalized_limit set, step 1 output is clipped to
    [-limit, limit] so the later stages stay finite.
    """
    stages: Dict[str, np.ndarray] = {}

    # 1. Source-domain normalization, y inverted
    norm_x = (xs - source_domain.x_min) / source_domain.x_span
    norm_y = 1.0 - (ys - source_domain.y_min) / source_domain.y_span
    if normalized_limit is not None:
        norm_x = np.clip(norm_x, -normalized_limit, normalized_limit)
        norm_y = np.clip(norm_y, -normalized_limit, normalized_limit)
    stages["normalized_x"], stages["normalized_y"] = norm_x, norm_y

    # 2. Source plot rectangle, frame-local pixels
    local_x = source_rect.left + norm_x * safe_extent(source_rect.width)
    local_y = source_rect.top + norm_y * safe_extent(source_rect.height)
    stages["source_local_x"], stages["source_local_y"] = local_x, local_y

    # 3. Source rotation
    rot_x, rot_y = rotate_about(local_x, local_y, rotation_pivot(source_frame), source_angle)
    stages["source_rotated_x"], stages["source_rotated_y"] = rot_x, rot_y

    # 4. Canvas pixels
    abs_x = rot_x + source_frame.position.x
    abs_y = rot_y + source_frame.position.y
    stages["absolute_x"], stages["absolute_y"] = abs_x, abs_y

    # 5. Target-local pixels
    rel_x = abs_x - target_frame.position.x
    rel_y = abs_y - target_frame.position.y
    stages["target_relative_x"], stages["target_relative_y"] = rel_x, rel_y

    # 6. Undo target rotation
    unrot_x, unrot_y = rotate_about(rel_x, rel_y, rotation_pivot(target_frame), -target_angle)
    stages["target_unrotated_x"], stages["target_unrotated_y"] = unrot_x, unrot_y

    # 7. Target plot rectangle normalization
    tnorm_x = (unrot_x - target_rect.left) / safe_extent(target_rect.width)
    tnorm_y = (unrot_y - target_rect.top) / safe_extent(target_rect.height)
    stages["target_normalized_x"], stages["target_normalized_y"] = tnorm_x, tnorm_y

    # 8. Target domain, y inverted back
    stages["unclamped_x"] = target_domain.x_min + tnorm_x * target_domain.x_span
    stages["unclamped_y"] = target_domain.y_max - tnorm_y * target_domain.y_span

    return stages


def _provenance(point: Point, source_frame: Frame, source_ref: str) -> Dict[str, Any]:
    metadata = dict(point.metadata)
    metadata[ORIGINAL_X_KEY] = point.x
    metadata[ORIGINAL_Y_KEY] = point.y
    metadata[ORIGINAL_COLOR_KEY] = point.metadata.get(ORIGINAL_COLOR_KEY, source_frame.color)
    metadata[IS_DUMPED_KEY] = True
    metadata[SOURCE_FRAME_KEY] = source_ref
    return metadata


def _build_trace(
    i: int,
    xs: np.ndarray,
    ys: np.ndarray,
    stages: Dict[str, np.ndarray],
    new_x: float,
    new_y: float,
) -> PointTrace:
    def stage(name: str) -> tuple:
        return _pair(stages[f"{name}_x"], stages[f"{name}_y"], i)

    return PointTrace(
        index=i,
        original=_pair(xs, ys, i),
        normalized=stage("normalized"),
        source_local=stage("source_local"),
        source_rotated=stage("source_rotated"),
        absolute=stage("absolute"),
        target_relative=stage("target_relative"),
        target_unrotated=stage("target_unrotated"),
        target_normalized=stage("target_normalized"),
        unclamped=stage("unclamped"),
        result=(new_x, new_y),
    )


def dump_points(
    points: Iterable[Point],
    source_frame: Frame,
    target_frame: Frame,
    **kwargs: Any,
) -> List[Point]:
    """
    Transform points between two frames using each frame's own domain.

    Keyword arguments are passed through to transform_points().
    """
    return transform_points(
        list(points),
        source_frame.domain,
        target_frame.domain,
        source_frame,
        target_frame,
        **kwargs,
    )
