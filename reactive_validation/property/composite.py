"""
Composite properties.

- CompositeReadableProperty exposes the ordered list of its sub-property values
- CompositeWritableProperty broadcasts every value it receives to its sub-properties
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..common.disposable import dispose_all
from ..common.equality import values_equal
from .base import AbstractReadableProperty, ReadableProperty, WritableProperty


class CompositeReadableProperty(AbstractReadableProperty[list[Any]]):
    """
    Readable property whose value is the list of its sub-properties' values.

    Any change of a sub-property triggers a full recompute into a new list
    and a single notification against the previous list. Adding, removing and
    clearing sub-properties also recompute.

    Args:
        properties: Initial sub-properties, in order.
        deep_dispose: Whether dispose() also disposes the sub-properties.

    Usage:
        a, b = SimpleProperty(1), SimpleProperty(2)
        both = CompositeReadableProperty([a, b])
        both.get_value()  # [1, 2]
        a.set_value(5)    # one notification: [1, 2] -> [5, 2]
    """

    def __init__(self, properties: Iterable[ReadableProperty] = (), deep_dispose: bool = True):
        super().__init__()
        self._properties: list[ReadableProperty] = []
        self._values: list[Any] = []
        self.deep_dispose = deep_dispose
        for prop in properties:
            self.add_property(prop)

    @property
    def properties(self) -> list[ReadableProperty]:
        """Copy of the sub-property list."""
        return list(self._properties)

    def get_value(self) -> list[Any]:
        return self._values

    def add_property(self, prop: ReadableProperty) -> None:
        prop.add_value_change_listener(self)
        self._properties.append(prop)
        self._update_from_properties()

    def remove_property(self, prop: ReadableProperty) -> None:
        prop.remove_value_change_listener(self)
        if prop in self._properties:
            self._properties.remove(prop)
        self._update_from_properties()

    def clear(self) -> None:
        for prop in self._properties:
            prop.remove_value_change_listener(self)
        self._properties.clear()
        self._update_from_properties()

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        if not values_equal(old_value, new_value):
            self._update_from_properties()

    def _update_from_properties(self) -> None:
        old_values = self._values
        self._values = [prop.get_value() for prop in self._properties]
        self.maybe_notify_listeners(old_values, self._values)

    def dispose(self) -> None:
        super().dispose()
        for prop in self._properties:
            prop.remove_value_change_listener(self)
        if self.deep_dispose:
            dispose_all(self._properties)
        self._properties.clear()

    def __repr__(self) -> str:
        return f"CompositeReadableProperty({self._values!r})"


class CompositeWritableProperty:
    """
    Writable property forwarding every value to all of its sub-properties.

    The last value set is retained and applied to sub-properties added later.
    Removing a sub-property leaves its value as it is.

    Args:
        properties: Initial sub-properties, in order.
        value: Initial value, applied to the initial sub-properties when given.
        deep_dispose: Whether dispose() also disposes the sub-properties.
    """

    def __init__(
        self,
        properties: Iterable[WritableProperty] = (),
        value: Any = None,
        deep_dispose: bool = False,
    ):
        self._properties: list[WritableProperty] = list(properties)
        self._value = value
        self.deep_dispose = deep_dispose
        if self._properties:
            self.set_value(value)

    @property
    def properties(self) -> list[WritableProperty]:
        """Copy of the sub-property list."""
        return list(self._properties)

    @property
    def value(self) -> Any:
        """Last value set."""
        return self._value

    def add_property(self, prop: WritableProperty) -> None:
        self._properties.append(prop)
        prop.set_value(self._value)

    def remove_property(self, prop: WritableProperty) -> None:
        if prop in self._properties:
            self._properties.remove(prop)

    def clear(self) -> None:
        self._properties.clear()

    def set_value(self, value: Any) -> None:
        self._value = value
        for prop in list(self._properties):
            prop.set_value(value)

    def dispose(self) -> None:
        if self.deep_dispose:
            dispose_all(self._properties)
        self._properties.clear()
