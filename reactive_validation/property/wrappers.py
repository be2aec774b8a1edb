"""
Property wrappers restricting or adapting access to another property.

- ReadOnlyPropertyWrapper hides ``set_value()``
- WriteOnlyPropertyWrapper hides reading and observing
- NegateBooleanPropertyWrapper exposes the negation of a boolean property
"""

from __future__ import annotations

from typing import Any

from ..common.disposable import dispose_if_disposable
from ..common.errors import DisposedError
from ..transform.transformers import NegateBooleanTransformer
from .base import AbstractReadableProperty, ReadableProperty, WritableProperty


class AbstractReadablePropertyWrapper(AbstractReadableProperty[Any]):
    """
    Readable property that follows another (wrapped) readable property.

    Args:
        wrapped_property: Property to follow.
        deep_dispose: Whether dispose() also disposes the wrapped property.

    Raises:
        DisposedError: From get_value() once the wrapper has been disposed.
    """

    def __init__(self, wrapped_property: ReadableProperty, deep_dispose: bool = True):
        super().__init__()
        self._wrapped_property: ReadableProperty | None = wrapped_property
        self.deep_dispose = deep_dispose
        wrapped_property.add_value_change_listener(self)

    @property
    def wrapped_property(self) -> ReadableProperty:
        if self._wrapped_property is None:
            raise DisposedError(f"{type(self).__name__} has been disposed")
        return self._wrapped_property

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        raise NotImplementedError

    def dispose(self) -> None:
        super().dispose()
        if self._wrapped_property is not None:
            self._wrapped_property.remove_value_change_listener(self)
            if self.deep_dispose:
                dispose_if_disposable(self._wrapped_property)
            self._wrapped_property = None


class ReadOnlyPropertyWrapper(AbstractReadablePropertyWrapper):
    """
    Read-only view of a property.

    Usage:
        internal = SimpleProperty(0)
        public = ReadOnlyPropertyWrapper(internal)
        internal.set_value(1)  # public listeners are notified
    """

    def get_value(self) -> Any:
        return self.wrapped_property.get_value()

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self.maybe_notify_listeners(old_value, new_value)


class NegateBooleanPropertyWrapper(AbstractReadablePropertyWrapper):
    """
    Readable view whose value is the boolean negation of the wrapped property.

    Args:
        wrapped_property: Boolean property to negate.
        none_negation: Value exposed when the wrapped value is None.
        deep_dispose: Whether dispose() also disposes the wrapped property.
    """

    def __init__(
        self,
        wrapped_property: ReadableProperty,
        none_negation: bool | None = NegateBooleanTransformer.DEFAULT_NONE_NEGATION,
        deep_dispose: bool = True,
    ):
        self._transformer = NegateBooleanTransformer(none_negation)
        super().__init__(wrapped_property, deep_dispose=deep_dispose)

    def get_value(self) -> bool | None:
        return self._transformer.transform(self.wrapped_property.get_value())

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self.maybe_notify_listeners(
            self._transformer.transform(old_value),
            self._transformer.transform(new_value),
        )


class WriteOnlyPropertyWrapper:
    """
    Write-only view of a property.

    Args:
        wrapped_property: Property receiving the values.
        deep_dispose: Whether dispose() also disposes the wrapped property.
    """

    def __init__(self, wrapped_property: WritableProperty, deep_dispose: bool = True):
        self._wrapped_property: WritableProperty | None = wrapped_property
        self.deep_dispose = deep_dispose

    def set_value(self, value: Any) -> None:
        if self._wrapped_property is None:
            raise DisposedError("WriteOnlyPropertyWrapper has been disposed")
        self._wrapped_property.set_value(value)

    def dispose(self) -> None:
        if self._wrapped_property is not None and self.deep_dispose:
            dispose_if_disposable(self._wrapped_property)
        self._wrapped_property = None
