# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Human-readable names for types, literals and constraints used in diagnostics."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..model import ArrayOf, Boolean, Constraint, LiteralSet, SimpleType, Union

_DISPLAY_NAMES: Dict[type, str] = {
    str: "String",
    int: "Integer",
    float: "Float",
    bool: "Boolean",
    Boolean: "Boolean",
    list: "Array",
    tuple: "Array",
    dict: "Hash",
    set: "Set",
    frozenset: "Set",
    bytes: "Bytes",
    type(None): "Nil",
}


def type_name(cls: type) -> str:
    return _DISPLAY_NAMES.get(cls) or getattr(cls, "__name__", repr(cls))


def value_type_name(value: Any) -> str:
    return type_name(type(value))


def render_literal(value: Any) -> str:
    """Render a literal with its symbolic prefix: ``Status.ACTIVE`` or ``:active``."""

    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, str):
        return f":{value}"
    return repr(value)


def render_constraint(constraint: Constraint) -> str:
    if isinstance(constraint, SimpleType):
        return type_name(constraint.target)
    if isinstance(constraint, LiteralSet):
        return ", ".join(render_literal(v) for v in constraint.values)
    if isinstance(constraint, ArrayOf):
        return f"Array of {render_constraint(constraint.element)}"
    if isinstance(constraint, Union):
        return " or ".join(render_constraint(b) for b in constraint.branches)
    raise TypeError(f"Unsupported constraint: {constraint!r}")


def humanize(attribute: str) -> str:
    """``"first_name"`` -> ``"First name"``."""

    text = attribute.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


__all__ = [
    "humanize",
    "render_constraint",
    "render_literal",
    "type_name",
    "value_type_name",
]
