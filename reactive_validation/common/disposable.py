"""
Disposal capability.

Components release listeners and other resources through ``dispose()``.
Whether something can be disposed is checked at runtime against the
``Disposable`` protocol, so collaborators opt in simply by defining the method.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Disposable(Protocol):
    """Anything that can release its resources."""

    def dispose(self) -> None:
        """Release listeners and resources held by this object."""
        ...


@runtime_checkable
class DeepDisposable(Disposable, Protocol):
    """
    Disposable aggregate that may also dispose what it aggregates.

    When ``deep_dispose`` is True, ``dispose()`` cascades to the aggregated
    components that are themselves disposable.
    """

    deep_dispose: bool


def dispose_if_disposable(component: Any) -> bool:
    """
    Dispose a component if it implements the Disposable capability.

    Args:
        component: Any object, possibly None.

    Returns:
        True if ``dispose()`` was called.
    """
    if component is not None and isinstance(component, Disposable):
        component.dispose()
        return True
    return False


def dispose_all(components: Iterable[Any]) -> None:
    """
    Dispose every disposable component, in iteration order.

    An exception raised by one component propagates immediately and the
    remaining components are left untouched.
    """
    for component in list(components):
        dispose_if_disposable(component)


class CompositeDisposable:
    """
    Groups several disposables so they can be released together.

    Usage:
        disposables = CompositeDisposable(bond, trigger)
        disposables.add_disposable(wrapper)
        disposables.dispose()  # disposes all three, then forgets them
    """

    def __init__(self, *disposables: Disposable, deep_dispose: bool = True):
        self._disposables: list[Disposable] = []
        self.deep_dispose = deep_dispose
        for disposable in disposables:
            self.add_disposable(disposable)

    @property
    def disposables(self) -> tuple[Disposable, ...]:
        """Registered disposables, in registration order."""
        return tuple(self._disposables)

    def add_disposable(self, disposable: Disposable | None) -> None:
        """Register a disposable. None and duplicates are ignored."""
        if disposable is not None and disposable not in self._disposables:
            self._disposables.append(disposable)

    def remove_disposable(self, disposable: Disposable | None) -> None:
        """Forget a disposable without disposing it."""
        if disposable in self._disposables:
            self._disposables.remove(disposable)

    def clear(self) -> None:
        """Forget all disposables without disposing them."""
        self._disposables.clear()

    def dispose(self) -> None:
        """Dispose all registered disposables (if deep) and forget them."""
        if self.deep_dispose:
            dispose_all(self._disposables)
        self._disposables.clear()

    def __len__(self) -> int:
        return len(self._disposables)
