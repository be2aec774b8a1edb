"""
Observable property protocols and base implementation.

A property holds a single value and notifies its value change listeners with
``(property, old, new)`` whenever the value actually changes. "Actually" uses
null/NaN-aware equality, see ``common.equality.values_equal``.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from ..common.equality import values_equal

T = TypeVar("T")


@runtime_checkable
class ValueChangeListener(Protocol):
    """Callback interface for property value changes."""

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        ...


@runtime_checkable
class ReadableProperty(Protocol):
    """Property whose value can be read and observed."""

    def get_value(self) -> Any:
        ...

    def add_value_change_listener(self, listener: ValueChangeListener) -> None:
        ...

    def remove_value_change_listener(self, listener: ValueChangeListener) -> None:
        ...


@runtime_checkable
class WritableProperty(Protocol):
    """Property whose value can be set."""

    def set_value(self, value: Any) -> None:
        ...


@runtime_checkable
class ReadableWritableProperty(ReadableProperty, WritableProperty, Protocol):
    """Property that can be read, observed and set."""


class AbstractReadableProperty(Generic[T]):
    """
    Listener bookkeeping shared by all readable properties.

    Subclasses implement ``get_value()`` and call ``maybe_notify_listeners()``
    after their value changed.

    Notification iterates a snapshot of the listener list, so listeners may
    add or remove listeners (including themselves) while being notified.

    Inhibition:
        Setting ``inhibited`` to True buffers notifications. When it is set
        back to False, listeners receive a single notification from the value
        before inhibition to the last buffered value, provided at least one
        change was buffered and the two values differ.

    Usage:
        prop.inhibited = True
        prop.set_value(1)
        prop.set_value(2)
        prop.inhibited = False  # listeners see one change, to 2
    """

    def __init__(self) -> None:
        self._listeners: list[ValueChangeListener] = []
        self._inhibited = False
        self._inhibit_count = 0
        self._value_before_inhibition: T | None = None
        self._last_inhibited_value: T | None = None
        self._notifying_listeners = False

    def get_value(self) -> T | None:
        raise NotImplementedError

    @property
    def value_change_listeners(self) -> tuple[ValueChangeListener, ...]:
        """Registered listeners, in notification order."""
        return tuple(self._listeners)

    def add_value_change_listener(self, listener: ValueChangeListener) -> None:
        self._listeners.append(listener)

    def remove_value_change_listener(self, listener: ValueChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def inhibited(self) -> bool:
        return self._inhibited

    @inhibited.setter
    def inhibited(self, inhibited: bool) -> None:
        was_inhibited = self._inhibited
        if inhibited and not was_inhibited:
            self._value_before_inhibition = self.get_value()
        self._inhibited = inhibited

        if was_inhibited and not inhibited:
            buffered = self._inhibit_count
            self._inhibit_count = 0
            if buffered > 0:
                self.maybe_notify_listeners(self._value_before_inhibition, self._last_inhibited_value)

    @property
    def notifying_listeners(self) -> bool:
        """True while listeners are being notified of a change."""
        return self._notifying_listeners

    def maybe_notify_listeners(self, old_value: T | None, new_value: T | None) -> None:
        """Notify listeners if the two values differ (or buffer the change if inhibited)."""
        if values_equal(old_value, new_value):
            return

        if self._inhibited:
            self._inhibit_count += 1
            self._last_inhibited_value = new_value
        else:
            self._notify_listeners(old_value, new_value)

    def _notify_listeners(self, old_value: T | None, new_value: T | None) -> None:
        listeners = list(self._listeners)
        was_notifying = self._notifying_listeners
        self._notifying_listeners = True
        try:
            for listener in listeners:
                listener.value_changed(self, old_value, new_value)
        finally:
            self._notifying_listeners = was_notifying

    def dispose(self) -> None:
        """Detach all listeners."""
        self._listeners.clear()
