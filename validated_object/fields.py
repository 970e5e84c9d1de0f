# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Field declarations and the per-class field registry.

A :class:`Field` binds an attribute name to a constraint and an
``allow_nil`` flag. It is also a read-only descriptor: instances expose the
validated value but refuse assignment.

Declaration shorthands::

    class Post(ValidatedObject):
        id = validated_attr(int)
        comments = validated_attr([Comment], allow_nil=True)
        tags = validates_attr(list, element_type=str, allow_nil=True)
        status = validated_attr(union("draft", "published"))
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import ConstraintDefinitionError
from .model import Constraint, coerce_constraint, make_array_of

logger = logging.getLogger(__name__)


class Field:
    """A declared attribute: constraint, ``allow_nil`` flag and read-only accessor."""

    def __init__(self, constraint: Constraint, *, allow_nil: bool = False):
        if not isinstance(constraint, Constraint):
            raise ConstraintDefinitionError(f"Field requires a constraint, got {constraint!r}")
        self.constraint = constraint
        self.allow_nil = bool(allow_nil)
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(
            f"'{type(instance).__name__}' attribute '{self.name}' is read-only"
        )

    def __delete__(self, instance: Any) -> None:
        raise AttributeError(
            f"'{type(instance).__name__}' attribute '{self.name}' is read-only"
        )

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, constraint={self.constraint!r}, allow_nil={self.allow_nil!r})"


class FieldRegistry(Mapping[str, Field]):
    """Ordered, read-only mapping of attribute name to :class:`Field`.

    A name declared twice keeps its first position and its latest field.
    """

    def __init__(self, fields: Iterable[Tuple[str, Field]] = ()):
        ordered: Dict[str, Field] = {}
        for name, field in fields:
            ordered[name] = field
        self._fields = MappingProxyType(ordered)

    @classmethod
    def for_class(cls, klass: type) -> "FieldRegistry":
        """Collect the fields of *klass*, base classes first."""

        collected = []
        for base in reversed(klass.__mro__):
            for name, value in vars(base).items():
                if isinstance(value, Field):
                    collected.append((name, value))
        registry = cls(collected)
        logger.debug("Registered fields for %s: %s", klass.__name__, ", ".join(registry))
        return registry

    def __getitem__(self, name: str) -> Field:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldRegistry({list(self._fields)!r})"


def validated_attr(type_spec: Any, *, allow_nil: bool = False) -> Field:
    """Declare a validated, read-only attribute.

    *type_spec* is a class, a one-element list (``[Comment]``) or a built
    constraint such as ``union(str, int)``.
    """

    return Field(coerce_constraint(type_spec), allow_nil=allow_nil)


def validates_attr(
    type_spec: Any,
    *,
    element_type: Any = None,
    allow_nil: bool = False,
) -> Field:
    """Like :func:`validated_attr`, also accepting the verbose array form.

    ``validates_attr(list, element_type=Comment)`` is the same declaration
    as ``validated_attr([Comment])``.
    """

    if element_type is None:
        return validated_attr(type_spec, allow_nil=allow_nil)
    if type_spec not in (list, tuple):
        raise ConstraintDefinitionError(
            f"element_type requires an array type (list or tuple), got {type_spec!r}"
        )
    return Field(make_array_of(element_type), allow_nil=allow_nil)


def declared_values(registry: Mapping[str, Field], attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Value of every declared field in declaration order; absent ones are ``None``."""

    return {name: attributes.get(name) for name in registry}


__all__ = [
    "Field",
    "FieldRegistry",
    "declared_values",
    "validated_attr",
    "validates_attr",
]
