"""
Scene Loading
=============

Loads a canvas snapshot (frames and their points) from a JSON file.

The scene file is a convenience input for scripts and tests. The
geometry core itself never loads or stores frames.

Example scene:
    {
        "scene_id": "demo",
        "frames": [
            {
                "id": "a",
                "position": {"x": 0, "y": 0},
                "size": {"width": 500, "height": 400},
                "rotation_degrees": 30,
                "z_order": 2,
                "color": "#3b82f6",
                "points": [{"x": 100, "y": 200}]
            }
        ]
    }

A frame without a "domain" gets one from classify_domain() over its
points.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from framedump.geometry.domain import classify_domain
from framedump.geometry.points import sanitize_points
from framedump.models.geometry import Frame, Point


logger = logging.getLogger(__name__)


class FrameEntry(BaseModel):
    """A frame together with its native points."""

    frame: Frame
    points: List[Point] = Field(default_factory=list)


class SceneDefinition(BaseModel):
    """
    Complete canvas snapshot.

    Attributes:
        scene_id: Identifier of the snapshot
        entries: Frames with their points, keyed by frame id
    """

    scene_id: str = Field(default="scene", description="Snapshot identifier")
    entries: Dict[str, FrameEntry] = Field(default_factory=dict)

    @property
    def frames(self) -> List[Frame]:
        return [entry.frame for entry in self.entries.values()]


def parse_scene(data: Dict[str, Any]) -> SceneDefinition:
    """
    Build a SceneDefinition from decoded JSON.

    Raw points go through sanitize_points(); frames lacking a domain are
    classified from their points.

    Raises:
        pydantic.ValidationError: If a frame definition is invalid
    """
    entries: Dict[str, FrameEntry] = {}

    for raw in data.get("frames", []):
        raw = dict(raw)
        points = sanitize_points(raw.pop("points", []))
        if "domain" not in raw:
            mode, domain = classify_domain(points)
            raw["domain"] = domain
            logger.debug(f"Frame {raw.get('id')}: classified as {mode.value}")

        frame = Frame.model_validate(raw)
        if frame.id in entries:
            logger.warning(f"Duplicate frame id {frame.id}, keeping the last one")
        entries[frame.id] = FrameEntry(frame=frame, points=points)

    return SceneDefinition(scene_id=data.get("scene_id", "scene"), entries=entries)


class SceneManager:
    """
    Loader for scene snapshot files.

    Attributes:
        scene: Loaded scene definition
        _is_loaded: Whether a scene has been loaded
    """

    def __init__(self) -> None:
        """Initialize an empty scene manager."""
        self.scene: Optional[SceneDefinition] = None
        self._is_loaded: bool = False

    def load_from_file(self, path: str) -> None:
        """
        Load a scene from a JSON file.

        Args:
            path: Path to the scene JSON file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the JSON is invalid
        """
        file_path = Path(path)

        if not file_path.exists():
            raise FileNotFoundError(f"Scene file not found: {path}")

        logger.info(f"Loading scene from: {path}")

        with open(file_path, "r") as f:
            data = json.load(f)

        self.scene = parse_scene(data)
        self._is_loaded = True

        logger.info(
            f"Loaded scene: id={self.scene.scene_id}, "
            f"frames={len(self.scene.entries)}"
        )

    def get_entry(self, frame_id: str) -> Optional[FrameEntry]:
        """
        Get a frame and its points by id.

        Returns:
            FrameEntry if found, None otherwise
        """
        if not self._is_loaded or self.scene is None:
            return None
        return self.scene.entries.get(frame_id)

    def get_frames(self) -> List[Frame]:
        """All frames of the loaded scene (empty when nothing is loaded)."""
        if not self._is_loaded or self.scene is None:
            return []
        return self.scene.frames
