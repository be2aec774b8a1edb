"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


class RecordingListener:
    """Value change listener remembering every notification."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any, Any]] = []

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self.calls.append((prop, old_value, new_value))

    @property
    def values(self) -> list[tuple[Any, Any]]:
        """(old, new) pairs, without the property."""
        return [(old, new) for _, old, new in self.calls]


class RecordingResultHandler:
    """Result handler remembering every result."""

    def __init__(self) -> None:
        self.results: list[Any] = []

    def handle_result(self, result: Any) -> None:
        self.results.append(result)


@pytest.fixture
def listener() -> RecordingListener:
    """Fresh recording value change listener."""
    return RecordingListener()


@pytest.fixture
def make_listener():
    """Factory for additional recording listeners."""
    return RecordingListener


@pytest.fixture
def result_handler() -> RecordingResultHandler:
    """Fresh recording result handler."""
    return RecordingResultHandler()


@pytest.fixture
def make_result_handler():
    """Factory for additional recording result handlers."""
    return RecordingResultHandler
