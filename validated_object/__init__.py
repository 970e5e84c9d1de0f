"""Declarative, construction-time validation for plain data objects.

.. code-block:: python

    from validated_object import ValidatedObject, validated_attr, union

    class Post(ValidatedObject):
        id = validated_attr(union(str, int))
        tags = validated_attr([str], allow_nil=True)

    Post(id=3.14)
    # ValidationError: Id is a Float, not one of String, Integer
"""

from .base import ValidatedObject
from .config import Settings, get_settings, reset_settings
from .exceptions import (
    ConfigurationError,
    ConstraintDefinitionError,
    MalformedInputError,
    UnknownAttributeError,
    ValidatedObjectError,
    ValidationError,
)
from .fields import Field, FieldRegistry, validated_attr, validates_attr
from .model import (
    ArrayOf,
    Boolean,
    Constraint,
    LiteralSet,
    SimpleType,
    Union,
    coerce_constraint,
    make_array_of,
    make_literal_set,
    make_simple_type,
    make_union,
    union,
)
from .runtime import construct, validate_fields
from .validation import ConstraintEvaluator, ValidationResult, ValidationViolation, evaluate

__version__ = "0.1.0"

__all__ = [
    "ArrayOf",
    "Boolean",
    "ConfigurationError",
    "Constraint",
    "ConstraintDefinitionError",
    "ConstraintEvaluator",
    "Field",
    "FieldRegistry",
    "LiteralSet",
    "MalformedInputError",
    "Settings",
    "SimpleType",
    "Union",
    "UnknownAttributeError",
    "ValidatedObject",
    "ValidatedObjectError",
    "ValidationError",
    "ValidationResult",
    "ValidationViolation",
    "coerce_constraint",
    "construct",
    "evaluate",
    "get_settings",
    "make_array_of",
    "make_literal_set",
    "make_simple_type",
    "make_union",
    "reset_settings",
    "union",
    "validate_fields",
    "validated_attr",
    "validates_attr",
]
