"""
Transform Tracing
=================

Optional observers receiving intermediate values of transform calls.

DESIGN RULES:
    - Observers never influence transform results
    - Zero cost when no observer is attached
    - A failing observer is logged and ignored, never raised

Observers:
    - TraceCollector: keeps the most recent per-call records in memory
    - JsonTraceSink: writes each record to a JSON file, keeping in
      memory only the records it failed to write
"""

import json
import logging
import time
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Deque, Dict, List, Protocol

from framedump.models.trace import PointTrace, TransformSummary


logger = logging.getLogger(__name__)


class TransformObserver(Protocol):
    """
    Protocol for transform diagnostic sinks.

    Attributes:
        trace_limit: Number of leading points per call to trace
    """

    trace_limit: int

    def on_trace(self, trace: PointTrace) -> None:
        """Receive the trace of one point."""
        ...

    def on_complete(self, summary: TransformSummary) -> None:
        """Receive the summary once the batch is finished."""
        ...


class TraceCollector:
    """
    In-memory trace observer.

    Traces of the call in progress are buffered until on_complete(),
    which files them under one record together with the summary.

    Example:
        collector = TraceCollector(trace_limit=3)
        transform_points(points, ..., observer=collector)
        record = collector.records[-1]
        print(record["summary"], len(record["traces"]))
    """

    def __init__(self, trace_limit: int = 5, max_records: int = 100) -> None:
        """
        Initialize collector.

        Args:
            trace_limit: Number of leading points per call to trace
            max_records: Number of most recent records kept; older ones
                are discarded
        """
        if trace_limit < 0:
            raise ValueError("trace_limit must be non-negative")
        if max_records < 1:
            raise ValueError("max_records must be at least 1")

        self.trace_limit = trace_limit
        self.max_records = max_records
        self.records: Deque[Dict[str, Any]] = deque(maxlen=max_records)
        self._pending: List[PointTrace] = []

    def on_trace(self, trace: PointTrace) -> None:
        self._pending.append(trace)

    def on_complete(self, summary: TransformSummary) -> None:
        record = {
            "timestamp": time.time(),
            "summary": summary.to_dict(),
            "traces": [t.to_dict() for t in self._pending],
        }
        self._pending = []
        self.records.append(record)

    def clear(self) -> None:
        """Drop all collected records."""
        self.records.clear()
        self._pending = []


class JsonTraceSink(TraceCollector):
    """
    Trace observer that writes one JSON file per transform call.

    Files are named transform-debug-<UTC timestamp>.json. Write
    failures are logged; the transform is never affected.
    """

    def __init__(
        self,
        output_dir: str = "./logs",
        trace_limit: int = 5,
        max_records: int = 100,
    ) -> None:
        """
        Initialize sink.

        Args:
            output_dir: Directory for trace files (created on demand)
            trace_limit: Number of leading points per call to trace
            max_records: Bound on unwritten records and remembered paths
        """
        super().__init__(trace_limit=trace_limit, max_records=max_records)
        self.output_dir = Path(output_dir)
        self.written: Deque[Path] = deque(maxlen=max_records)
        logger.info(f"JsonTraceSink writing to: {self.output_dir}")

    def on_complete(self, summary: TransformSummary) -> None:
        super().on_complete(summary)
        record = self.records[-1]

        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%fZ")
        path = self.output_dir / f"transform-debug-{stamp}.json"

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(record, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write transform trace to {path}: {e}")
            return

        # Written records live on disk only
        self.records.pop()
        self.written.append(path)
        logger.debug(f"Transform trace saved: {path}")
