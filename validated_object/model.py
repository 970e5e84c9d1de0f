# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Type constraint model and builder.

A constraint describes the acceptable values of one attribute. There are
four variants:

- ``SimpleType(str)``: the value is an instance of the class.
- ``LiteralSet(("active", "inactive"))``: the value equals one of the literals.
- ``ArrayOf(SimpleType(str))``: the value is a list/tuple of matching members.
- ``Union((SimpleType(str), SimpleType(int)))``: any branch matches.

Constraints are frozen dataclasses built once, when the owning class is
declared, and shared by every evaluation afterwards.

The builder functions promote the shorthand used in declarations::

    union(str, int)              # Union(SimpleType(str), SimpleType(int))
    union(dict, [dict])          # Union(SimpleType(dict), ArrayOf(SimpleType(dict)))
    union("active", "inactive")  # Union(LiteralSet(("active", "inactive")))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

from .exceptions import ConstraintDefinitionError


class Boolean:
    """Pseudo-type matching only ``True`` and ``False``.

    ``SimpleType(Boolean)`` never matches ``1``, ``0``, ``None`` or any other
    truthy/falsy value.
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError("Boolean is a marker type and cannot be instantiated")


class Constraint:
    """Base class of the constraint variants."""

    __slots__ = ()


@dataclass(frozen=True)
class SimpleType(Constraint):
    target: type


@dataclass(frozen=True)
class LiteralSet(Constraint):
    values: Tuple[Any, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True)
class ArrayOf(Constraint):
    element: Constraint


@dataclass(frozen=True)
class Union(Constraint):
    branches: Tuple[Constraint, ...]

    def __post_init__(self):
        if not self.branches:
            raise ConstraintDefinitionError("union requires at least one type")
        object.__setattr__(self, "branches", tuple(self.branches))


def make_simple_type(target: Any) -> SimpleType:
    if not isinstance(target, type):
        raise ConstraintDefinitionError(f"Type constraint requires a class, got {target!r}")
    return SimpleType(target)


def make_literal_set(*values: Any) -> LiteralSet:
    if not values:
        raise ConstraintDefinitionError("literal set requires at least one value")
    return LiteralSet(tuple(values))


def make_array_of(spec: Any) -> ArrayOf:
    return ArrayOf(coerce_constraint(spec))


def coerce_constraint(spec: Any) -> Constraint:
    """Promote a single declaration shorthand to a constraint.

    Accepts a constraint (returned as is), a class (``SimpleType``) or a
    one-element list (``ArrayOf`` of the promoted element).
    """

    if isinstance(spec, Constraint):
        return spec
    if isinstance(spec, type):
        return make_simple_type(spec)
    if isinstance(spec, list):
        if len(spec) != 1:
            raise ConstraintDefinitionError(
                f"Array shorthand takes exactly one element type, got {len(spec)}"
            )
        return make_array_of(spec[0])
    raise ConstraintDefinitionError(f"Cannot build a type constraint from {spec!r}")


def _is_shorthand(spec: Any) -> bool:
    return isinstance(spec, (Constraint, type, list))


def make_union(*specs: Any) -> Union:
    """Build a union from classes, ``[Class]`` lists, constraints and literals.

    Consecutive literal values (enum members, strings, numbers...) collapse
    into one ``LiteralSet`` branch positioned where the run started.
    """

    if not specs:
        raise ConstraintDefinitionError("union requires at least one type")

    branches: List[Constraint] = []
    literals: List[Any] = []
    for spec in specs:
        if _is_shorthand(spec):
            if literals:
                branches.append(make_literal_set(*literals))
                literals = []
            branches.append(coerce_constraint(spec))
        else:
            literals.append(spec)
    if literals:
        branches.append(make_literal_set(*literals))

    return Union(tuple(branches))


union = make_union


__all__ = [
    "ArrayOf",
    "Boolean",
    "Constraint",
    "LiteralSet",
    "SimpleType",
    "Union",
    "coerce_constraint",
    "make_array_of",
    "make_literal_set",
    "make_simple_type",
    "make_union",
    "union",
]
