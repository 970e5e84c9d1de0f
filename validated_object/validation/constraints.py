# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Constraint evaluation.

``ConstraintEvaluator.evaluate`` checks one value against one constraint and
returns ``None`` when it passes or a diagnostic string when it does not. A
mismatch is an ordinary return value, never an exception.

Diagnostics read ``"<Label> is a <Actual>, not a <Expected>"``; the label is
the humanized attribute name supplied by the caller::

    >>> evaluator = ConstraintEvaluator()
    >>> evaluator.evaluate(SimpleType(float), "2", "Diameter")
    'Diameter is a String, not a Float'
    >>> evaluator.evaluate(Union((SimpleType(str), SimpleType(int))), 3.14, "Id")
    'Id is a Float, not one of String, Integer'
"""

from __future__ import annotations

import logging
from typing import Any, Final, List, Optional

from ..config import get_settings, parse_union_array_policy
from ..model import ArrayOf, Boolean, Constraint, LiteralSet, SimpleType, Union
from .naming import render_constraint, render_literal, type_name, value_type_name

logger = logging.getLogger(__name__)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _matches_type(target: type, value: Any) -> bool:
    if target is Boolean or target is bool:
        return isinstance(value, bool)
    # bool subclasses int but True is not an integer here
    if target is int and isinstance(value, bool):
        return False
    if target is list or target is tuple:
        return _is_array(value)
    return isinstance(value, target)


def _literal_equal(value: Any, literal: Any) -> bool:
    # same type required so that True never equals the literal 1
    return value is literal or (type(value) is type(literal) and value == literal)


class ConstraintEvaluator:
    """Evaluate values against type constraints.

    ``union_array_policy`` decides how an array that fails a union holding
    ``ArrayOf`` branches is described (``"element"`` or ``"generic"``); when
    omitted the process settings decide.
    """

    def __init__(self, union_array_policy: Optional[str] = None):
        if union_array_policy is not None:
            union_array_policy = parse_union_array_policy(union_array_policy)
        self._union_array_policy = union_array_policy

    @property
    def union_array_policy(self) -> str:
        if self._union_array_policy is not None:
            return self._union_array_policy
        return get_settings().union_array_messages

    # ------------------------------------------------------------------
    # Pass/fail
    # ------------------------------------------------------------------

    def matches(self, constraint: Constraint, value: Any) -> bool:
        if isinstance(constraint, SimpleType):
            return _matches_type(constraint.target, value)
        if isinstance(constraint, LiteralSet):
            return any(_literal_equal(value, literal) for literal in constraint.values)
        if isinstance(constraint, ArrayOf):
            return _is_array(value) and not self.offending_indexes(constraint.element, value)
        if isinstance(constraint, Union):
            outcomes = [self.matches(branch, value) for branch in constraint.branches]
            return any(outcomes)
        raise TypeError(f"Unsupported constraint: {constraint!r}")

    def offending_indexes(self, element: Constraint, values: Any) -> List[int]:
        """Indexes of the members of *values* that do not match *element*."""

        return [index for index, item in enumerate(values) if not self.matches(element, item)]

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def evaluate(self, constraint: Constraint, value: Any, label: str) -> Optional[str]:
        """Return ``None`` if *value* satisfies *constraint*, else a diagnostic."""

        if isinstance(constraint, SimpleType):
            if _matches_type(constraint.target, value):
                return None
            return f"{label} is a {value_type_name(value)}, not a {type_name(constraint.target)}"

        if isinstance(constraint, LiteralSet):
            if self.matches(constraint, value):
                return None
            allowed = ", ".join(render_literal(v) for v in constraint.values)
            return f"{label} is a {value_type_name(value)}, not one of {allowed}"

        if isinstance(constraint, ArrayOf):
            return self._evaluate_array(constraint, value, label)

        if isinstance(constraint, Union):
            return self._evaluate_union(constraint, value, label)

        raise TypeError(f"Unsupported constraint: {constraint!r}")

    def _evaluate_array(self, constraint: ArrayOf, value: Any, label: str) -> Optional[str]:
        if not _is_array(value):
            return f"{label} is a {value_type_name(value)}, not a Array"

        offending = self.offending_indexes(constraint.element, value)
        if not offending:
            return None

        element_name = render_constraint(constraint.element)
        logger.debug(
            "%s: element(s) at index %s do not match %s",
            label,
            ", ".join(str(i) for i in offending),
            element_name,
        )
        return f"{label} Array contains non-{element_name} elements"

    def _evaluate_union(self, constraint: Union, value: Any, label: str) -> Optional[str]:
        # Every branch is evaluated so the failure can name all alternatives.
        outcomes = [self.evaluate(branch, value, label) for branch in constraint.branches]
        if any(outcome is None for outcome in outcomes):
            return None

        if len(constraint.branches) == 1:
            return _as_alternative(outcomes[0], label, value)

        if self.union_array_policy == "element" and _is_array(value):
            branch = _first_array_branch(constraint.branches)
            if branch is not None:
                return f"{label} Array contains non-{render_constraint(branch.element)} elements"

        names = ", ".join(render_constraint(branch) for branch in constraint.branches)
        return f"{label} is a {value_type_name(value)}, not one of {names}"


def _first_array_branch(branches) -> Optional[ArrayOf]:
    # nested unions are searched in declared order
    for branch in branches:
        if isinstance(branch, ArrayOf):
            return branch
        if isinstance(branch, Union):
            found = _first_array_branch(branch.branches)
            if found is not None:
                return found
    return None


def _as_alternative(message: str, label: str, value: Any) -> str:
    prefix = f"{label} is a {value_type_name(value)}, not a "
    if message.startswith(prefix):
        return f"{label} is a {value_type_name(value)}, not one of {message[len(prefix):]}"
    return message


_EVALUATOR: Final[ConstraintEvaluator] = ConstraintEvaluator()


def get_constraint_evaluator() -> ConstraintEvaluator:
    """Return the process-wide evaluator instance."""

    return _EVALUATOR


def evaluate(constraint: Constraint, value: Any, label: str) -> Optional[str]:
    """Evaluate with the process-wide evaluator."""

    return _EVALUATOR.evaluate(constraint, value, label)


__all__ = [
    "ConstraintEvaluator",
    "evaluate",
    "get_constraint_evaluator",
]
