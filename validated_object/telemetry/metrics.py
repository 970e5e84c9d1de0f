# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for validated objects."""

from __future__ import annotations

from typing import Sequence

from .runtime import meter

construction_total = meter.create_counter(
    name="validated_object.construction.total",
    description="Counts construction attempts, tagged by type and outcome.",
    unit="1",
)

violation_total = meter.create_counter(
    name="validated_object.violation.total",
    description="Counts attribute constraint violations, tagged by type and attribute.",
    unit="1",
)


def record_construction(type_name: str, violated_attributes: Sequence[str]) -> None:
    """Record one construction attempt and each attribute that failed."""

    outcome = "invalid" if violated_attributes else "valid"
    construction_total.add(1, {"type": type_name, "outcome": outcome})
    for attribute in violated_attributes:
        violation_total.add(1, {"type": type_name, "attribute": attribute})


__all__ = [
    "construction_total",
    "record_construction",
    "violation_total",
]
