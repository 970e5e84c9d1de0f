"""Validation package - constraint evaluation and result types.

This package checks values against type constraints and renders the
diagnostics. No transformation happens here: values are accepted or
rejected, never converted.
"""

from .base import ValidationResult, ValidationViolation
from .constraints import ConstraintEvaluator, evaluate, get_constraint_evaluator
from .naming import humanize, render_constraint, render_literal, type_name, value_type_name

__all__ = [
    "ConstraintEvaluator",
    "ValidationResult",
    "ValidationViolation",
    "evaluate",
    "get_constraint_evaluator",
    "humanize",
    "render_constraint",
    "render_literal",
    "type_name",
    "value_type_name",
]
