#!/usr/bin/env python3
"""
Point Dump Script
=================

Standalone script to dump points between two frames of a scene file.

This script:
    1. Loads a scene snapshot (frames + points) from JSON
    2. Lists frames beneath the source frame (dump candidates)
    3. Transforms the source frame's points into the target frame
    4. Prints the resulting points and target axis ticks as JSON

Prerequisites:
    - Install the package: pip install -e .

Usage:
    python scripts/dump_points.py --scene scene.json --source a --target b
    python scripts/dump_points.py --scene scene.json --source a --target b --trace
"""

import argparse
import json
import logging
import sys
from typing import Optional

from framedump.config import load_config, setup_logging
from framedump.geometry import detect_overlaps, dump_points, generate_ticks
from framedump.scene import SceneManager


logger = logging.getLogger(__name__)


def run_dump(
    scene_path: str,
    source_id: str,
    target_id: str,
    config_path: Optional[str] = None,
    trace: bool = False,
) -> dict:
    """
    Run one dump between two frames.

    Args:
        scene_path: Path to the scene JSON file
        source_id: Id of the frame to dump from
        target_id: Id of the frame to dump into
        config_path: Optional config.yaml path
        trace: Force transform tracing on

    Returns:
        Result dict with candidates, points and ticks
    """
    settings = load_config(config_path)
    if trace:
        settings.trace.enabled = True
    setup_logging(settings)

    manager = SceneManager()
    manager.load_from_file(scene_path)

    source = manager.get_entry(source_id)
    target = manager.get_entry(target_id)
    if source is None or target is None:
        raise KeyError(
            f"Frame not found: source={source_id} ({source is not None}), "
            f"target={target_id} ({target is not None})"
        )

    candidates = detect_overlaps(source.frame, manager.get_frames())
    logger.info(f"Dump candidates beneath {source_id}: {candidates}")
    if target_id not in candidates:
        logger.warning(f"Target {target_id} is not beneath {source_id}, dumping anyway")

    moved = dump_points(
        source.points,
        source.frame,
        target.frame,
        margins=settings.layout.margins,
        chrome=settings.layout.chrome,
        observer=settings.build_observer(),
    )
    logger.info(f"Dumped {len(moved)} of {len(source.points)} points into {target_id}")

    domain = target.frame.domain
    intervals = settings.ticks.default_interval_count
    digits = settings.ticks.significant_digits

    return {
        "source": source_id,
        "target": target_id,
        "candidates": candidates,
        "points": [p.model_dump() for p in moved],
        "ticks": {
            "x": generate_ticks(domain.x_min, domain.x_max, intervals, digits),
            "y": generate_ticks(domain.y_min, domain.y_max, intervals, digits),
        },
    }


def main():
    parser = argparse.ArgumentParser(
        description="Dump points from one frame of a scene into another"
    )
    parser.add_argument("--scene", type=str, required=True, help="Scene JSON file")
    parser.add_argument("--source", type=str, required=True, help="Source frame id")
    parser.add_argument("--target", type=str, required=True, help="Target frame id")
    parser.add_argument("--config", type=str, default=None, help="config.yaml path")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Write transform-debug-*.json trace files",
    )

    args = parser.parse_args()

    try:
        result = run_dump(
            scene_path=args.scene,
            source_id=args.source,
            target_id=args.target,
            config_path=args.config,
            trace=args.trace,
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        logger.error(f"Dump failed: {e}")
        sys.exit(1)

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
