"""
Data provider protocol and stock providers.

A data provider is a pull-based value source. The validator calls
``get_data()`` once per provider per firing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ..common.disposable import dispose_all, dispose_if_disposable
from ..property.base import ReadableProperty
from ..transform.base import Transformer, as_transformer


@runtime_checkable
class DataProvider(Protocol):
    """Pull-based source of a value to be validated."""

    def get_data(self) -> Any:
        ...


class CallableDataProvider:
    """
    Adapt a zero-argument callable to the DataProvider protocol.

    Usage:
        provider = CallableDataProvider(lambda: form["email"])
    """

    def __init__(self, func: Callable[[], Any]):
        self._func = func

    def get_data(self) -> Any:
        return self._func()


class ConstantDataProvider:
    """Always provide the same value."""

    def __init__(self, data: Any):
        self._data = data

    def get_data(self) -> Any:
        return self._data


class PropertyValueProvider:
    """
    Provide the current value of a readable property.

    Args:
        prop: Property to read.
        deep_dispose: Whether dispose() also disposes the property.
    """

    def __init__(self, prop: ReadableProperty, deep_dispose: bool = False):
        self._property = prop
        self.deep_dispose = deep_dispose

    @property
    def observed_property(self) -> ReadableProperty:
        return self._property

    def get_data(self) -> Any:
        return self._property.get_value()

    def dispose(self) -> None:
        if self.deep_dispose:
            dispose_if_disposable(self._property)


class TransformedDataProvider:
    """
    Data provider passing another provider's data through a transformer.

    Disposing it disposes the wrapped provider and the transformer if they
    are disposable.
    """

    def __init__(
        self,
        wrapped_data_provider: DataProvider,
        transformer: Transformer[Any, Any] | Callable[[Any], Any] | None = None,
    ):
        self._wrapped_data_provider = wrapped_data_provider
        self._transformer = as_transformer(transformer)

    def get_data(self) -> Any:
        return self._transformer.transform(self._wrapped_data_provider.get_data())

    def dispose(self) -> None:
        dispose_if_disposable(self._wrapped_data_provider)
        dispose_if_disposable(self._transformer)


class ListCompositeDataProvider:
    """
    Provide the list of the data of several providers, in order.

    Usage:
        both = ListCompositeDataProvider(password_provider, confirmation_provider)
        both.get_data()  # ["secret", "secret"]
    """

    def __init__(self, *data_providers: DataProvider, deep_dispose: bool = True):
        self._data_providers: list[DataProvider] = list(data_providers)
        self.deep_dispose = deep_dispose

    @property
    def data_providers(self) -> tuple[DataProvider, ...]:
        return tuple(self._data_providers)

    def add_data_provider(self, data_provider: DataProvider) -> None:
        self._data_providers.append(data_provider)

    def remove_data_provider(self, data_provider: DataProvider) -> None:
        if data_provider in self._data_providers:
            self._data_providers.remove(data_provider)

    def get_data(self) -> list[Any]:
        return [data_provider.get_data() for data_provider in self._data_providers]

    def dispose(self) -> None:
        if self.deep_dispose:
            dispose_all(self._data_providers)
        self._data_providers.clear()


def as_data_provider(data_provider: DataProvider | Callable[[], Any]) -> DataProvider:
    """Wrap plain callables in a CallableDataProvider; return providers unchanged."""
    if isinstance(data_provider, DataProvider):
        return data_provider
    if callable(data_provider):
        return CallableDataProvider(data_provider)
    raise TypeError(f"Not a data provider: {data_provider!r}")
