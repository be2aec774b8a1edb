"""Simple value-holding properties."""

from __future__ import annotations

from typing import TypeVar

from .base import AbstractReadableProperty

T = TypeVar("T")


class SimpleProperty(AbstractReadableProperty[T]):
    """
    Readable and writable property holding a single value.

    ``set_value()`` is ignored while this property is notifying its listeners.
    That makes binding cycles converge: if A is bound to B and B back to A,
    setting A updates B, whose attempt to set A again is dropped.

    Usage:
        name = SimpleProperty("")
        name.add_value_change_listener(listener)
        name.set_value("Alice")  # listener.value_changed(name, "", "Alice")
    """

    def __init__(self, value: T | None = None):
        super().__init__()
        self._value = value

    def get_value(self) -> T | None:
        return self._value

    def set_value(self, value: T | None) -> None:
        if self.notifying_listeners:
            return

        old_value = self._value
        self._value = value
        self.maybe_notify_listeners(old_value, value)

    def __repr__(self) -> str:
        return f"SimpleProperty({self._value!r})"


class ConstantProperty(AbstractReadableProperty[T]):
    """Read-only property whose value never changes, so it never notifies."""

    def __init__(self, value: T | None = None):
        super().__init__()
        self._value = value

    def get_value(self) -> T | None:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantProperty({self._value!r})"
