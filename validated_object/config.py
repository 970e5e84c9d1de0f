# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

UNION_ARRAY_MESSAGES_ENV = "VALIDATED_OBJECT_UNION_ARRAY_MESSAGES"
LOG_VIOLATIONS_ENV = "VALIDATED_OBJECT_LOG_VIOLATIONS"

# "element": an array that fails a union with array branches is reported by
# the element type of the first array branch.
# "generic": always list every branch ("is a Array, not one of ...").
UNION_ARRAY_POLICIES = ("element", "generic")
DEFAULT_UNION_ARRAY_POLICY = "element"


@dataclass(frozen=True)
class Settings:
    union_array_messages: str = DEFAULT_UNION_ARRAY_POLICY
    log_violations: bool = False


def parse_union_array_policy(value: Optional[str]) -> str:
    """Normalise a union/array message policy name, rejecting unknown ones."""

    if value is None or not value.strip():
        return DEFAULT_UNION_ARRAY_POLICY
    policy = value.strip().lower()
    if policy not in UNION_ARRAY_POLICIES:
        raise ConfigurationError(
            f"Unknown union array message policy '{value}'; "
            f"expected one of {', '.join(UNION_ARRAY_POLICIES)}"
        )
    return policy


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() not in ("", "0", "false", "no")


def load_settings() -> Settings:
    """Read settings from the process environment."""

    settings = Settings(
        union_array_messages=parse_union_array_policy(os.getenv(UNION_ARRAY_MESSAGES_ENV)),
        log_violations=_env_flag(LOG_VIOLATIONS_ENV),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""

    return load_settings()


def reset_settings() -> None:
    """Forget cached settings so the next access re-reads the environment."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_UNION_ARRAY_POLICY",
    "LOG_VIOLATIONS_ENV",
    "Settings",
    "UNION_ARRAY_MESSAGES_ENV",
    "UNION_ARRAY_POLICIES",
    "get_settings",
    "load_settings",
    "parse_union_array_policy",
    "reset_settings",
]
