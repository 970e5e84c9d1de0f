"""Pytest fixtures for the validated_object test-suite.

Settings are read from the environment and cached process-wide, so every
test starts from a clean environment and an empty cache.
"""
from __future__ import annotations

import pytest

from validated_object.config import LOG_VIOLATIONS_ENV, UNION_ARRAY_MESSAGES_ENV, reset_settings
from validated_object.validation import ConstraintEvaluator


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):  # noqa: D401
    """Drop configuration env vars and the cached settings around each test."""
    monkeypatch.delenv(UNION_ARRAY_MESSAGES_ENV, raising=False)
    monkeypatch.delenv(LOG_VIOLATIONS_ENV, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def evaluator() -> ConstraintEvaluator:
    return ConstraintEvaluator()


@pytest.fixture()
def generic_evaluator() -> ConstraintEvaluator:
    return ConstraintEvaluator(union_array_policy="generic")
