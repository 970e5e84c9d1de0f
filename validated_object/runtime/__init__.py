"""Runtime helpers for constructing validated objects."""

from .construction import construct, format_validation_reason, validate_fields

__all__ = [
    "construct",
    "format_validation_reason",
    "validate_fields",
]
