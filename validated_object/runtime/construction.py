# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Construction routine: validate every declared field, then assign or raise."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..config import get_settings
from ..exceptions import UnknownAttributeError, ValidationError
from ..fields import FieldRegistry, declared_values
from ..telemetry import record_construction
from ..validation import (
    ConstraintEvaluator,
    ValidationResult,
    ValidationViolation,
    get_constraint_evaluator,
    humanize,
)

logger = logging.getLogger(__name__)


def validate_fields(
    registry: FieldRegistry,
    values: Mapping[str, Any],
    *,
    evaluator: Optional[ConstraintEvaluator] = None,
) -> ValidationResult:
    """Evaluate each field in declaration order.

    A ``None`` value on an ``allow_nil`` field passes without reaching the
    evaluator.
    """

    evaluator = evaluator or get_constraint_evaluator()
    result = ValidationResult()

    for name, field in registry.items():
        value = values.get(name)
        if value is None and field.allow_nil:
            continue

        message = evaluator.evaluate(field.constraint, value, humanize(name))
        if message:
            result.add(
                ValidationViolation(
                    attribute=name,
                    constraint=field.constraint,
                    actual=value,
                    message=message,
                )
            )

    return result


def format_validation_reason(type_name: str, validation: ValidationResult) -> str:
    """Produce a multi-line summary of a failed validation for logs."""

    lines = [f"Validation failed for {type_name}:"]
    for violation in validation.violations:
        lines.append(f" - {violation.message}")
    return "\n".join(lines)


def construct(
    registry: FieldRegistry,
    instance: Any,
    attributes: Mapping[str, Any],
    *,
    evaluator: Optional[ConstraintEvaluator] = None,
) -> Any:
    """Validate *attributes* against *registry* and assign them to *instance*.

    Nothing is assigned unless every field passes. On failure a single
    :class:`ValidationError` carries all the diagnostics.
    """

    type_name = type(instance).__name__

    unknown = [str(key) for key in attributes if key not in registry]
    if unknown:
        logger.debug("Rejected unknown attributes for %s: %s", type_name, unknown)
        raise UnknownAttributeError(type_name, unknown)

    values = declared_values(registry, attributes)
    validation = validate_fields(registry, values, evaluator=evaluator)
    record_construction(type_name, [v.attribute for v in validation.violations])

    if not validation.valid:
        level = logging.WARNING if get_settings().log_violations else logging.DEBUG
        logger.log(level, "%s", format_validation_reason(type_name, validation))
        raise ValidationError(type_name, validation.violations)

    for name, value in values.items():
        instance.__dict__[name] = value
    return instance


__all__ = [
    "construct",
    "format_validation_reason",
    "validate_fields",
]
