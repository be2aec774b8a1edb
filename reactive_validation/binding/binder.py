"""
Fluent helper for creating bonds.

Usage:
    Binder.from_(age).transform(lambda a: a >= 18).to(is_adult)
    Binder.from_(first, last).transform(" ".join).to(full_name)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..property.base import ReadableProperty, WritableProperty
from ..transform.base import ChainedTransformer, Transformer
from .bond import Bond


class SingleMasterBinding:
    """
    Binding from one master, not yet attached to a slave.

    Bindings are immutable: ``transform()`` returns a new binding.
    """

    def __init__(self, master: ReadableProperty, transformer: ChainedTransformer | None = None):
        self._master = master
        self._transformer = transformer if transformer is not None else ChainedTransformer()

    def transform(self, transformer: Transformer[Any, Any] | Callable[[Any], Any]) -> SingleMasterBinding:
        return SingleMasterBinding(self._master, self._transformer.chain(transformer))

    def to(self, slave: WritableProperty | Sequence[WritableProperty], *more_slaves: WritableProperty) -> Bond:
        """Create the bond to one or more slaves."""
        return Bond(self._master, self._transformer, _collect_slaves(slave, more_slaves))


class MultipleMasterBinding:
    """
    Binding from several masters, not yet attached to a slave.

    The slave receives the list of master values (through the transformers),
    recomputed whenever any master changes.
    """

    def __init__(self, masters: Sequence[ReadableProperty], transformer: ChainedTransformer | None = None):
        self._masters = list(masters)
        self._transformer = transformer if transformer is not None else ChainedTransformer()

    def transform(self, transformer: Transformer[Any, Any] | Callable[[Any], Any]) -> MultipleMasterBinding:
        return MultipleMasterBinding(self._masters, self._transformer.chain(transformer))

    def to(self, slave: WritableProperty | Sequence[WritableProperty], *more_slaves: WritableProperty) -> Bond:
        """Create the bond to one or more slaves."""
        return Bond(self._masters, self._transformer, _collect_slaves(slave, more_slaves))


def _collect_slaves(
    slave: WritableProperty | Sequence[WritableProperty],
    more_slaves: tuple[WritableProperty, ...],
) -> WritableProperty | list[WritableProperty]:
    if isinstance(slave, WritableProperty):
        if not more_slaves:
            return slave
        return [slave, *more_slaves]
    return [*slave, *more_slaves]


class Binder:
    """Entry point of the fluent binding API."""

    @staticmethod
    def from_(master: ReadableProperty, *more_masters: ReadableProperty) -> SingleMasterBinding | MultipleMasterBinding:
        """
        Start a binding.

        Args:
            master: Master property.
            *more_masters: Further masters. With more than one master, the
                slave receives the list of master values.

        Returns:
            SingleMasterBinding for one master, MultipleMasterBinding otherwise.
        """
        if more_masters:
            return MultipleMasterBinding([master, *more_masters])
        return SingleMasterBinding(master)
