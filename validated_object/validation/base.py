# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by the evaluator and the construction routine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from ..model import Constraint


@dataclass(frozen=True)
class ValidationViolation:
    """One attribute that failed its constraint."""

    attribute: str
    constraint: Constraint
    actual: Any
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating every declared field of one object."""

    valid: bool = True
    violations: List[ValidationViolation] = field(default_factory=list)

    def add(self, violation: ValidationViolation) -> None:
        self.valid = False
        self.violations.append(violation)

    def merge(self, other: "ValidationResult") -> None:
        for violation in other.violations:
            self.add(violation)
        self.valid = self.valid and other.valid

    @property
    def message(self) -> str:
        """Every diagnostic joined by ``"; "`` in the order they were added."""

        return "; ".join(v.message for v in self.violations)


__all__ = ["ValidationResult", "ValidationViolation"]
