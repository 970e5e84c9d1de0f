# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by the metric instruments.

Without a configured SDK the OpenTelemetry API hands out no-op instruments.
"""

from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("validated_object")

__all__ = ["meter"]
