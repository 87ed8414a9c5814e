"""
Observability Module
====================

Diagnostic tracing for framedump transforms.

This module provides:
    - TransformObserver: Protocol for trace sinks
    - TraceCollector: In-memory per-call trace records
    - JsonTraceSink: Trace records written as JSON files

DESIGN RULES:
    - Does NOT influence transform results
    - Zero cost when no observer is attached
"""

from framedump.observability.trace import (
    JsonTraceSink,
    TraceCollector,
    TransformObserver,
)


__all__ = [
    "TransformObserver",
    "TraceCollector",
    "JsonTraceSink",
]
