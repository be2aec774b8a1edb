"""
Observable list, set and map properties.

Unlike single-value properties, collection properties tell their listeners
which items changed:
- lists report added, replaced and removed items together with the index of
  the first affected item
- sets report added and removed items
- maps report added, changed and removed entries

Bulk operations (``extend``, ``update``, ``clear``, ...) send a single event.
Items passed to listeners are immutable copies: tuples for lists, frozensets
for sets and read-only mappings for maps.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence, MutableSet, Sequence, Set
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from ..common.equality import values_equal
from ..common.errors import DisposedError


@runtime_checkable
class ListValueChangeListener(Protocol):
    """Callback interface for item changes of a list property."""

    def values_added(self, list_property: Any, start_index: int, new_items: tuple[Any, ...]) -> None:
        ...

    def values_changed(
        self, list_property: Any, start_index: int, old_items: tuple[Any, ...], new_items: tuple[Any, ...]
    ) -> None:
        ...

    def values_removed(self, list_property: Any, start_index: int, old_items: tuple[Any, ...]) -> None:
        ...


@runtime_checkable
class SetValueChangeListener(Protocol):
    """Callback interface for item changes of a set property."""

    def values_added(self, set_property: Any, new_items: frozenset[Any]) -> None:
        ...

    def values_removed(self, set_property: Any, old_items: frozenset[Any]) -> None:
        ...


@runtime_checkable
class MapValueChangeListener(Protocol):
    """Callback interface for entry changes of a map property."""

    def values_added(self, map_property: Any, new_values: Mapping[Any, Any]) -> None:
        ...

    def values_changed(self, map_property: Any, old_values: Mapping[Any, Any], new_values: Mapping[Any, Any]) -> None:
        ...

    def values_removed(self, map_property: Any, old_values: Mapping[Any, Any]) -> None:
        ...


class _CollectionListenerSupport:
    """Listener list shared by the collection property bases."""

    def __init__(self) -> None:
        self._listeners: list[Any] = []

    @property
    def value_change_listeners(self) -> tuple[Any, ...]:
        """Registered listeners, in notification order."""
        return tuple(self._listeners)

    def add_value_change_listener(self, listener: Any) -> None:
        self._listeners.append(listener)

    def remove_value_change_listener(self, listener: Any) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire(self, callback: str, *args: Any) -> None:
        for listener in list(self._listeners):
            getattr(listener, callback)(self, *args)

    def dispose(self) -> None:
        """Detach all listeners."""
        self._listeners.clear()

    # Properties are observable objects: identity equality, hashable
    __eq__ = object.__eq__
    __hash__ = object.__hash__


class AbstractReadableListProperty(_CollectionListenerSupport, Sequence):
    """
    Read-only sequence notifying ListValueChangeListeners.

    Subclasses implement ``__getitem__`` and ``__len__`` and call the
    ``_notify_*`` methods after they changed.
    """

    def _notify_added(self, start_index: int, new_items: tuple[Any, ...]) -> None:
        self._fire("values_added", start_index, new_items)

    def _notify_changed(self, start_index: int, old_items: tuple[Any, ...], new_items: tuple[Any, ...]) -> None:
        self._fire("values_changed", start_index, old_items, new_items)

    def _notify_removed(self, start_index: int, old_items: tuple[Any, ...]) -> None:
        self._fire("values_removed", start_index, old_items)

    def as_read_only(self) -> tuple[Any, ...]:
        """Copy of the items."""
        return tuple(self)


class AbstractReadableSetProperty(_CollectionListenerSupport, Set):
    """Read-only set notifying SetValueChangeListeners."""

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def _notify_added(self, new_items: frozenset[Any]) -> None:
        self._fire("values_added", new_items)

    def _notify_removed(self, old_items: frozenset[Any]) -> None:
        self._fire("values_removed", old_items)

    def as_read_only(self) -> frozenset[Any]:
        """Copy of the items."""
        return frozenset(self)


class AbstractReadableMapProperty(_CollectionListenerSupport, Mapping):
    """Read-only mapping notifying MapValueChangeListeners."""

    def _notify_added(self, new_values: dict[Any, Any]) -> None:
        self._fire("values_added", MappingProxyType(new_values))

    def _notify_changed(self, old_values: dict[Any, Any], new_values: dict[Any, Any]) -> None:
        self._fire("values_changed", MappingProxyType(old_values), MappingProxyType(new_values))

    def _notify_removed(self, old_values: dict[Any, Any]) -> None:
        self._fire("values_removed", MappingProxyType(old_values))

    def as_read_only(self) -> Mapping[Any, Any]:
        """Read-only copy of the entries."""
        return MappingProxyType(dict(self.items()))


class SimpleListProperty(AbstractReadableListProperty, MutableSequence):
    """
    Observable list.

    Replacing an item with an equal one (see ``values_equal``) does not
    notify. Slices can be read but not assigned or deleted.

    Usage:
        names = SimpleListProperty(["a"])
        names.add_value_change_listener(listener)
        names.append("b")   # listener.values_added(names, 1, ("b",))
        names[0] = "z"      # listener.values_changed(names, 0, ("a",), ("z",))
        names.clear()       # listener.values_removed(names, 0, ("z", "b"))
    """

    def __init__(self, items: Iterable[Any] = ()):
        super().__init__()
        self._items: list[Any] = list(items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __setitem__(self, index, item) -> None:
        if isinstance(index, slice):
            raise TypeError("SimpleListProperty does not support slice assignment")
        index = range(len(self._items))[index]
        old_item = self._items[index]
        self._items[index] = item
        if not values_equal(old_item, item):
            self._notify_changed(index, (old_item,), (item,))

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            raise TypeError("SimpleListProperty does not support slice deletion")
        index = range(len(self._items))[index]
        old_item = self._items.pop(index)
        self._notify_removed(index, (old_item,))

    def insert(self, index: int, item: Any) -> None:
        # Same clamping as list.insert
        size = len(self._items)
        if index < 0:
            index = max(size + index, 0)
        index = min(index, size)
        self._items.insert(index, item)
        self._notify_added(index, (item,))

    def extend(self, items: Iterable[Any]) -> None:
        new_items = tuple(items)
        if new_items:
            start_index = len(self._items)
            self._items.extend(new_items)
            self._notify_added(start_index, new_items)

    def clear(self) -> None:
        if self._items:
            old_items = tuple(self._items)
            self._items.clear()
            self._notify_removed(0, old_items)

    def __repr__(self) -> str:
        return f"SimpleListProperty({self._items!r})"


class SimpleSetProperty(AbstractReadableSetProperty, MutableSet):
    """
    Observable set.

    Adding an item already present or discarding a missing one does not
    notify.

    Usage:
        tags = SimpleSetProperty()
        tags.add_value_change_listener(listener)
        tags.update({"x", "y"})  # listener.values_added(tags, frozenset({"x", "y"}))
        tags.discard("x")        # listener.values_removed(tags, frozenset({"x"}))
    """

    def __init__(self, items: Iterable[Any] = ()):
        super().__init__()
        self._items: set[Any] = set(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Any) -> None:
        if item not in self._items:
            self._items.add(item)
            self._notify_added(frozenset((item,)))

    def discard(self, item: Any) -> None:
        if item in self._items:
            self._items.remove(item)
            self._notify_removed(frozenset((item,)))

    def update(self, items: Iterable[Any]) -> None:
        added = frozenset(items) - self._items
        if added:
            self._items |= added
            self._notify_added(added)

    def difference_update(self, items: Iterable[Any]) -> None:
        removed = self._items & frozenset(items)
        if removed:
            self._items -= removed
            self._notify_removed(frozenset(removed))

    def intersection_update(self, items: Iterable[Any]) -> None:
        removed = self._items - frozenset(items)
        if removed:
            self._items -= removed
            self._notify_removed(frozenset(removed))

    def clear(self) -> None:
        if self._items:
            old_items = frozenset(self._items)
            self._items.clear()
            self._notify_removed(old_items)

    def __repr__(self) -> str:
        return f"SimpleSetProperty({self._items!r})"


class SimpleMapProperty(AbstractReadableMapProperty, MutableMapping):
    """
    Observable mapping.

    Setting a new key notifies ``values_added``, replacing the value of an
    existing key with a different one notifies ``values_changed`` and deleting
    a key notifies ``values_removed``. ``update()`` sends at most one added
    and one changed event.

    Usage:
        limits = SimpleMapProperty({"max": 10})
        limits.add_value_change_listener(listener)
        limits["max"] = 20   # listener.values_changed(limits, {"max": 10}, {"max": 20})
        del limits["max"]    # listener.values_removed(limits, {"max": 20})
    """

    def __init__(self, entries: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()):
        super().__init__()
        self._entries: dict[Any, Any] = dict(entries)

    def __getitem__(self, key: Any) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __setitem__(self, key: Any, value: Any) -> None:
        if key in self._entries:
            old_value = self._entries[key]
            self._entries[key] = value
            if not values_equal(old_value, value):
                self._notify_changed({key: old_value}, {key: value})
        else:
            self._entries[key] = value
            self._notify_added({key: value})

    def __delitem__(self, key: Any) -> None:
        old_value = self._entries.pop(key)
        self._notify_removed({key: old_value})

    def update(self, other: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = (), /, **kwargs: Any) -> None:
        added: dict[Any, Any] = {}
        changed_old: dict[Any, Any] = {}
        changed_new: dict[Any, Any] = {}
        for key, value in {**dict(other), **kwargs}.items():
            if key in self._entries:
                old_value = self._entries[key]
                self._entries[key] = value
                if not values_equal(old_value, value):
                    changed_old[key] = old_value
                    changed_new[key] = value
            else:
                self._entries[key] = value
                added[key] = value

        if added:
            self._notify_added(added)
        if changed_new:
            self._notify_changed(changed_old, changed_new)

    def clear(self) -> None:
        if self._entries:
            old_entries = dict(self._entries)
            self._entries.clear()
            self._notify_removed(old_entries)

    def __repr__(self) -> str:
        return f"SimpleMapProperty({self._entries!r})"


class ReadOnlyListPropertyWrapper(AbstractReadableListProperty):
    """
    Read-only view of a list property, forwarding its events as its own.

    Raises:
        DisposedError: From read operations once the wrapper has been disposed.
    """

    def __init__(self, wrapped_property: AbstractReadableListProperty):
        super().__init__()
        self._wrapped_property: AbstractReadableListProperty | None = wrapped_property
        wrapped_property.add_value_change_listener(self)

    @property
    def wrapped_property(self) -> AbstractReadableListProperty:
        if self._wrapped_property is None:
            raise DisposedError(f"{type(self).__name__} has been disposed")
        return self._wrapped_property

    def __getitem__(self, index):
        return self.wrapped_property[index]

    def __len__(self) -> int:
        return len(self.wrapped_property)

    def values_added(self, list_property: Any, start_index: int, new_items: tuple[Any, ...]) -> None:
        self._notify_added(start_index, new_items)

    def values_changed(
        self, list_property: Any, start_index: int, old_items: tuple[Any, ...], new_items: tuple[Any, ...]
    ) -> None:
        self._notify_changed(start_index, old_items, new_items)

    def values_removed(self, list_property: Any, start_index: int, old_items: tuple[Any, ...]) -> None:
        self._notify_removed(start_index, old_items)

    def dispose(self) -> None:
        super().dispose()
        if self._wrapped_property is not None:
            self._wrapped_property.remove_value_change_listener(self)
            self._wrapped_property = None


class ReadOnlySetPropertyWrapper(AbstractReadableSetProperty):
    """Read-only view of a set property, forwarding its events as its own."""

    def __init__(self, wrapped_property: AbstractReadableSetProperty):
        super().__init__()
        self._wrapped_property: AbstractReadableSetProperty | None = wrapped_property
        wrapped_property.add_value_change_listener(self)

    @property
    def wrapped_property(self) -> AbstractReadableSetProperty:
        if self._wrapped_property is None:
            raise DisposedError(f"{type(self).__name__} has been disposed")
        return self._wrapped_property

    def __contains__(self, item: object) -> bool:
        return item in self.wrapped_property

    def __iter__(self) -> Iterator[Any]:
        return iter(self.wrapped_property)

    def __len__(self) -> int:
        return len(self.wrapped_property)

    def values_added(self, set_property: Any, new_items: frozenset[Any]) -> None:
        self._notify_added(new_items)

    def values_removed(self, set_property: Any, old_items: frozenset[Any]) -> None:
        self._notify_removed(old_items)

    def dispose(self) -> None:
        super().dispose()
        if self._wrapped_property is not None:
            self._wrapped_property.remove_value_change_listener(self)
            self._wrapped_property = None


class ReadOnlyMapPropertyWrapper(AbstractReadableMapProperty):
    """Read-only view of a map property, forwarding its events as its own."""

    def __init__(self, wrapped_property: AbstractReadableMapProperty):
        super().__init__()
        self._wrapped_property: AbstractReadableMapProperty | None = wrapped_property
        wrapped_property.add_value_change_listener(self)

    @property
    def wrapped_property(self) -> AbstractReadableMapProperty:
        if self._wrapped_property is None:
            raise DisposedError(f"{type(self).__name__} has been disposed")
        return self._wrapped_property

    def __getitem__(self, key: Any) -> Any:
        return self.wrapped_property[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.wrapped_property)

    def __len__(self) -> int:
        return len(self.wrapped_property)

    def values_added(self, map_property: Any, new_values: Mapping[Any, Any]) -> None:
        self._notify_added(dict(new_values))

    def values_changed(self, map_property: Any, old_values: Mapping[Any, Any], new_values: Mapping[Any, Any]) -> None:
        self._notify_changed(dict(old_values), dict(new_values))

    def values_removed(self, map_property: Any, old_values: Mapping[Any, Any]) -> None:
        self._notify_removed(dict(old_values))

    def dispose(self) -> None:
        super().dispose()
        if self._wrapped_property is not None:
            self._wrapped_property.remove_value_change_listener(self)
            self._wrapped_property = None
