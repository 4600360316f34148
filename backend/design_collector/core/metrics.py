"""Prometheus metrics instrumentation."""

from __future__ import annotations

from fastapi import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

SUBMISSIONS = Counter(
    "dcol_submissions_total",
    "Snapshot submissions by outcome",
    labelnames=("outcome",),
    registry=REGISTRY,
)

GENERATOR_FAILURES = Counter(
    "dcol_generator_failures_total",
    "Text generator calls that fell back to snapshot-only fields",
    registry=REGISTRY,
)

GENERATOR_LATENCY = Histogram(
    "dcol_generator_latency_seconds",
    "Wall time of text generator calls",
    registry=REGISTRY,
)

EXTRACTION_DURATION = Histogram(
    "dcol_extraction_duration_seconds",
    "Page capture and extraction duration",
    labelnames=("status",),
    registry=REGISTRY,
)

STORED_RECORDS = Gauge(
    "dcol_stored_records",
    "Number of records in the design table",
    registry=REGISTRY,
)


def metrics_response() -> Response:
    """Return Prometheus metrics as an HTTP response."""
    payload = generate_latest(REGISTRY)
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)


__all__ = [
    "REGISTRY",
    "SUBMISSIONS",
    "GENERATOR_FAILURES",
    "GENERATOR_LATENCY",
    "EXTRACTION_DURATION",
    "STORED_RECORDS",
    "metrics_response",
]
