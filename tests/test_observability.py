"""
Observability Tests
===================

Tests for transform trace observers.
"""

import json
import logging

import pytest

from framedump.geometry.transform import transform_points
from framedump.models.geometry import Point
from framedump.observability import JsonTraceSink, TraceCollector


class ExplodingObserver:
    """Observer whose hooks always fail."""

    trace_limit = 3

    def on_trace(self, trace):
        raise RuntimeError("sink offline")

    def on_complete(self, summary):
        raise RuntimeError("sink offline")


class TestTraceCollector:
    """Tests for the in-memory collector."""

    def test_collects_limited_traces(self, sample_points, base_frame, base_domain):
        collector = TraceCollector(trace_limit=2)

        transform_points(sample_points, base_domain, base_domain, base_frame, base_frame, observer=collector)

        assert len(collector.records) == 1
        record = collector.records[0]
        assert len(record["traces"]) == 2
        assert record["summary"]["input_count"] == 4
        assert record["summary"]["output_count"] == 4
        assert record["summary"]["target_frame"] == "source"

    def test_trace_values(self, base_frame, base_domain):
        """Intermediate values follow the pipeline for a 90 degree source."""
        collector = TraceCollector(trace_limit=1)
        source = base_frame.model_copy(update={"rotation_degrees": 90})

        transform_points([Point(x=0, y=2500)], base_domain, base_domain, source, base_frame, observer=collector)

        trace = collector.records[0]["traces"][0]
        assert trace["normalized"] == pytest.approx((0.0, 0.5))
        assert trace["source_local"] == pytest.approx((55.0, 211.0))
        assert trace["source_rotated"] == pytest.approx((239.0, 5.0))
        assert trace["absolute"] == pytest.approx((239.0, 5.0))
        assert trace["result"][1] == pytest.approx(5000.0)
        assert trace["unclamped"][1] > 5000.0
        assert trace["clamped"] is True
        assert collector.records[0]["summary"]["clamped_count"] == 1

    def test_dropped_points_counted(self, base_frame, base_domain):
        collector = TraceCollector()
        points = [Point(x=float("nan"), y=0), Point(x=1, y=1)]

        transform_points(points, base_domain, base_domain, base_frame, base_frame, observer=collector)

        summary = collector.records[0]["summary"]
        assert summary["dropped_count"] == 1
        assert collector.records[0]["traces"][0]["index"] == 1

    def test_empty_batch_still_completes(self, base_frame, base_domain):
        collector = TraceCollector()
        transform_points([], base_domain, base_domain, base_frame, base_frame, observer=collector)

        assert collector.records[0]["summary"]["input_count"] == 0

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            TraceCollector(trace_limit=-1)

    def test_clear(self, sample_points, base_frame, base_domain):
        collector = TraceCollector()
        transform_points(sample_points, base_domain, base_domain, base_frame, base_frame, observer=collector)
        collector.clear()

        assert len(collector.records) == 0


class TestObserverIsolation:
    """The transform behaves the same with or without observers."""

    def test_failing_observer_is_ignored(self, sample_points, base_frame, base_domain, caplog):
        plain = transform_points(sample_points, base_domain, base_domain, base_frame, base_frame)

        with caplog.at_level(logging.WARNING):
            observed = transform_points(
                sample_points, base_domain, base_domain, base_frame, base_frame,
                observer=ExplodingObserver(),
            )

        assert [p.model_dump() for p in observed] == [p.model_dump() for p in plain]
        assert "sink offline" in caplog.text

    def test_collector_does_not_change_results(self, sample_points, base_frame, base_domain):
        source = base_frame.model_copy(update={"rotation_degrees": 37})
        plain = transform_points(sample_points, base_domain, base_domain, source, base_frame)
        observed = transform_points(
            sample_points, base_domain, base_domain, source, base_frame,
            observer=TraceCollector(trace_limit=10),
        )

        assert [(p.x, p.y) for p in plain] == [(p.x, p.y) for p in observed]


class TestJsonTraceSink:
    """Tests for the JSON file sink."""

    def test_writes_trace_file(self, tmp_path, sample_points, base_frame, base_domain):
        sink = JsonTraceSink(output_dir=str(tmp_path / "logs"), trace_limit=2)

        transform_points(sample_points, base_domain, base_domain, base_frame, base_frame, observer=sink)

        assert len(sink.written) == 1
        path = sink.written[0]
        assert path.name.startswith("transform-debug-")
        data = json.loads(path.read_text())
        assert data["summary"]["output_count"] == 4
        assert len(data["traces"]) == 2

    def test_unwritable_directory_is_logged(self, tmp_path, sample_points, base_frame, base_domain, caplog):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        sink = JsonTraceSink(output_dir=str(blocker), trace_limit=1)

        with caplog.at_level(logging.WARNING):
            result = transform_points(
                sample_points, base_domain, base_domain, base_frame, base_frame, observer=sink,
            )

        assert len(result) == 4
        assert len(sink.written) == 0
        assert len(sink.records) == 1
        assert "Could not write transform trace" in caplog.text

    def test_written_records_are_released(self, tmp_path, sample_points, base_frame, base_domain):
        """Records that reached disk are not kept in memory."""
        sink = JsonTraceSink(output_dir=str(tmp_path / "logs"), trace_limit=1)

        for _ in range(3):
            transform_points(sample_points, base_domain, base_domain, base_frame, base_frame, observer=sink)

        assert len(sink.records) == 0
        assert len(sink.written) == 3


class TestRecordBounds:
    """Tests for the in-memory record limit."""

    def test_oldest_records_discarded(self, base_frame, base_domain):
        collector = TraceCollector(trace_limit=0, max_records=2)

        for count in (1, 2, 3):
            points = [Point(x=i, y=i) for i in range(count)]
            transform_points(points, base_domain, base_domain, base_frame, base_frame, observer=collector)

        assert len(collector.records) == 2
        assert [r["summary"]["input_count"] for r in collector.records] == [2, 3]

    def test_invalid_max_records_rejected(self):
        with pytest.raises(ValueError):
            TraceCollector(max_records=0)
