# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for validated objects.

Build-time problems (a malformed declaration) surface as
:class:`ConfigurationError` subclasses while the class body executes.
Construction problems surface as :class:`MalformedInputError`,
:class:`UnknownAttributeError` or :class:`ValidationError`, each of which
also derives from the matching builtin so callers can catch ``TypeError`` /
``AttributeError`` / ``ValueError`` without importing this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .validation.base import ValidationViolation


class ValidatedObjectError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ValidatedObjectError):
    """Raised when settings or declarations are invalid."""


class ConstraintDefinitionError(ConfigurationError):
    """Raised when a type constraint cannot be built from its declaration."""


class MalformedInputError(ValidatedObjectError, TypeError):
    """Raised when a constructor does not receive a mapping of attributes."""

    def __init__(self, type_name: str, received: str):
        self.type_name = type_name
        self.received = received
        super().__init__(f"{type_name} expects a mapping of attributes, got {received}")


class UnknownAttributeError(ValidatedObjectError, AttributeError):
    """Raised when a constructor receives attributes that were never declared."""

    def __init__(self, type_name: str, attributes: Sequence[str]):
        self.type_name = type_name
        self.attributes = list(attributes)
        names = ", ".join(self.attributes)
        super().__init__(f"{type_name} has no declared attribute(s): {names}")


class ValidationError(ValidatedObjectError, ValueError):
    """Raised once per construction attempt when any field fails validation.

    ``message`` is every field diagnostic joined by ``"; "`` in declaration
    order; ``violations`` keeps the structured form.
    """

    def __init__(self, type_name: str, violations: Sequence["ValidationViolation"]):
        self.type_name = type_name
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))


__all__ = [
    "ConfigurationError",
    "ConstraintDefinitionError",
    "MalformedInputError",
    "UnknownAttributeError",
    "ValidatedObjectError",
    "ValidationError",
]
