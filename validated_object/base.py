# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Base class for plain data objects validated on construction."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional

from .exceptions import MalformedInputError
from .fields import Field, FieldRegistry, declared_values, validates_attr
from .runtime import construct, validate_fields
from .validation import ValidationResult, value_type_name

logger = logging.getLogger(__name__)


class ValidatedObject:
    """A data object whose declared attributes are checked on construction.

    Example:
        ```python
        class Apple(ValidatedObject):
            diameter = validated_attr(float)
            variety = validated_attr(str, allow_nil=True)

        Apple(diameter=4.0).diameter        # 4.0
        Apple({"diameter": "2"})            # ValidationError:
                                            # Diameter is a String, not a Float
        ```

    Every violated attribute contributes one diagnostic to the single
    :class:`~validated_object.exceptions.ValidationError`; a non-mapping
    argument raises :class:`~validated_object.exceptions.MalformedInputError`
    and undeclared keys raise
    :class:`~validated_object.exceptions.UnknownAttributeError`.
    """

    __validated_fields__: ClassVar[FieldRegistry] = FieldRegistry()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.__validated_fields__ = FieldRegistry.for_class(cls)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, /, **kwargs: Any):
        type_name = type(self).__name__
        if attributes is None:
            attributes = {}
        elif not isinstance(attributes, Mapping):
            raise MalformedInputError(type_name, value_type_name(attributes))

        construct(type(self).__validated_fields__, self, {**attributes, **kwargs})

    # ------------------------------------------------------------------
    # Declarations added after the class body
    # ------------------------------------------------------------------

    @classmethod
    def validates(
        cls,
        name: str,
        type_spec: Any,
        *,
        element_type: Any = None,
        allow_nil: bool = False,
    ) -> Field:
        """Declare (or redeclare) attribute *name* on an existing class."""

        field = validates_attr(type_spec, element_type=element_type, allow_nil=allow_nil)
        setattr(cls, name, field)
        field.__set_name__(cls, name)
        cls._refresh_registry()
        logger.debug("Declared %s.%s as %r", cls.__name__, name, field.constraint)
        return field

    validated = validates

    @classmethod
    def _refresh_registry(cls) -> None:
        cls.__validated_fields__ = FieldRegistry.for_class(cls)
        for subclass in cls.__subclasses__():
            subclass._refresh_registry()

    @classmethod
    def fields(cls) -> FieldRegistry:
        return cls.__validated_fields__

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """Re-run validation against the current attribute values."""

        return validate_fields(type(self).__validated_fields__, self.__dict__)

    @property
    def valid(self) -> bool:
        return self.validate().valid

    def to_dict(self) -> Dict[str, Any]:
        return declared_values(type(self).__validated_fields__, self.__dict__)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        attributes = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({attributes})"


__all__ = ["ValidatedObject"]
