"""Telemetry package - OpenTelemetry metric instruments."""

from .metrics import construction_total, record_construction, violation_total

__all__ = [
    "construction_total",
    "record_construction",
    "violation_total",
]
