"""Shared test fixtures for parse-listeners."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest


class RecordingListener:
    """Test listener that appends every call to a shared log."""

    def __init__(self, name: str, log: list[tuple[Any, ...]]) -> None:
        self.name = name
        self.log = log

    def syntax_error(self, *args: Any) -> None:
        self.log.append((self.name, "syntax_error", args))

    def report_ambiguity(self, *args: Any) -> None:
        self.log.append((self.name, "report_ambiguity", args))

    def report_attempting_full_context(self, *args: Any) -> None:
        self.log.append((self.name, "report_attempting_full_context", args))

    def report_context_sensitivity(self, *args: Any) -> None:
        self.log.append((self.name, "report_context_sensitivity", args))


class FailingListener(RecordingListener):
    """Listener whose syntax_error raises after recording the call."""

    def syntax_error(self, *args: Any) -> None:
        super().syntax_error(*args)
        raise RuntimeError("Intentional failure")


@pytest.fixture
def call_log() -> list[tuple[Any, ...]]:
    return []


@pytest.fixture
def make_recorder(call_log):
    def _make(name: str) -> RecordingListener:
        return RecordingListener(name, call_log)

    return _make


@pytest.fixture
def make_failing(call_log):
    def _make(name: str) -> FailingListener:
        return FailingListener(name, call_log)

    return _make


@pytest.fixture
def recognizer() -> MagicMock:
    """An opaque recognizer handle."""
    return MagicMock(name="recognizer")


@pytest.fixture
def decision_state() -> MagicMock:
    return MagicMock(name="decision_state")


@pytest.fixture
def configs() -> MagicMock:
    return MagicMock(name="configs")
