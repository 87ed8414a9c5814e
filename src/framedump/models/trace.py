"""
Transform Trace Models
======================

Records describing a single transform call, for debugging only.

These are produced ONLY when an observer is attached to a transform.
Nothing in the geometry code reads them back.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


Pair = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class PointTrace:
    """
    Intermediate values of one point through the transform pipeline.

    Attributes:
        index: Position of the point in the input batch
        original: Input data coordinate
        normalized: Step 1, source-domain [0, 1] position (y inverted)
        source_local: Step 2, pixel position inside the source frame
        source_rotated: Step 3, after the source frame's rotation
        absolute: Step 4, canvas position
        target_relative: Step 5, relative to the target frame's origin
        target_unrotated: Step 6, after undoing the target rotation
        target_normalized: Step 7, target-rectangle [0, 1] position
        unclamped: Step 8, target-domain coordinate before clamping
        result: Step 9, final clamped coordinate
    """

    index: int
    original: Pair
    normalized: Pair
    source_local: Pair
    source_rotated: Pair
    absolute: Pair
    target_relative: Pair
    target_unrotated: Pair
    target_normalized: Pair
    unclamped: Pair
    result: Pair

    @property
    def clamped(self) -> bool:
        """Whether step 9 pinned the point to the target boundary."""
        return self.unclamped != self.result

    def to_dict(self) -> Dict[str, Any]:
        """Export as dictionary for logging/serialization."""
        data = asdict(self)
        data["clamped"] = self.clamped
        return data


@dataclass(frozen=True, slots=True)
class TransformSummary:
    """
    Per-call summary handed to observers once the batch is done.

    Attributes:
        source_frame: Reference of the source frame
        target_frame: Reference of the target frame
        input_count: Points received
        output_count: Points returned
        dropped_count: Points skipped for non-finite values
        clamped_count: Points pinned to the target boundary
        source_rotation: Normalized source angle (degrees)
        target_rotation: Normalized target angle (degrees)
    """

    source_frame: Optional[str]
    target_frame: Optional[str]
    input_count: int
    output_count: int
    dropped_count: int
    clamped_count: int
    source_rotation: float
    target_rotation: float

    def __repr__(self) -> str:
        return (
            f"TransformSummary({self.source_frame} -> {self.target_frame}, "
            f"in={self.input_count}, out={self.output_count}, "
            f"dropped={self.dropped_count}, clamped={self.clamped_count})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export as dictionary for logging/serialization."""
        return asdict(self)
