"""Bond: one-way binding from a master property to one or more slaves."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ..common.disposable import dispose_if_disposable
from ..property.base import ReadableProperty, WritableProperty
from ..property.composite import CompositeReadableProperty, CompositeWritableProperty
from ..transform.base import ChainedTransformer, Transformer, as_transformer

logger = logging.getLogger(__name__)

TransformerLike = Transformer[Any, Any] | Callable[[Any], Any]


class _MasterAdapter:
    """Listener registered on the master; pushes every change to the slave."""

    def __init__(self, bond: Bond):
        self._bond = bond

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self._bond.push(new_value)


class Bond:
    """
    Keep one or more slave properties in sync with a master property.

    On construction the slave receives ``transformer.transform(master.get_value())``;
    afterwards it receives the transformed new value on every master change.
    The value is pushed even if it is unchanged after transformation; the
    slave's own equality check suppresses redundant notifications.

    Args:
        master: Readable property to follow, or a sequence of readable
            properties. For a sequence the bond follows a
            CompositeReadableProperty over them (the list of their values);
            that composite is owned by the bond and released on dispose(),
            which leaves the masters alone unless deep_dispose is set.
        transformer: None (identity), a transformer or callable, or a sequence
            of them applied in order.
        slave: Writable property, or a sequence of writable properties which
            are then wrapped in a CompositeWritableProperty.
        deep_dispose: Whether dispose() also disposes the master, the
            transformer and the slave when they are disposable.

    Usage:
        celsius = SimpleProperty(0.0)
        fahrenheit = SimpleProperty()
        bond = Bond(celsius, lambda c: c * 9 / 5 + 32, fahrenheit)
        celsius.set_value(100.0)  # fahrenheit.get_value() == 212.0
        bond.dispose()
    """

    def __init__(
        self,
        master: ReadableProperty | Sequence[ReadableProperty],
        transformer: TransformerLike | Sequence[TransformerLike] | None,
        slave: WritableProperty | Sequence[WritableProperty],
        deep_dispose: bool = False,
    ):
        self._owned_master: CompositeReadableProperty | None = None
        if isinstance(master, ReadableProperty):
            self._master = master
        else:
            self._owned_master = CompositeReadableProperty(master, deep_dispose=deep_dispose)
            self._master = self._owned_master

        self._transformer = self._to_transformer(transformer)
        self.deep_dispose = deep_dispose
        self._master_adapter = _MasterAdapter(self)

        if isinstance(slave, WritableProperty):
            self._slave: WritableProperty = slave
            self._master.add_value_change_listener(self._master_adapter)
            self.push(self._master.get_value())
        else:
            # Slaves are added once the composite holds the initial value
            composite = CompositeWritableProperty(deep_dispose=deep_dispose)
            self._slave = composite
            self._master.add_value_change_listener(self._master_adapter)
            self.push(self._master.get_value())
            for each_slave in slave:
                composite.add_property(each_slave)

    @staticmethod
    def _to_transformer(
        transformer: TransformerLike | Sequence[TransformerLike] | None,
    ) -> Transformer[Any, Any]:
        if isinstance(transformer, (list, tuple)):
            return ChainedTransformer(*transformer)
        return as_transformer(transformer)

    @property
    def master(self) -> ReadableProperty:
        return self._master

    @property
    def transformer(self) -> Transformer[Any, Any]:
        return self._transformer

    @property
    def slave(self) -> WritableProperty:
        return self._slave

    def push(self, master_value: Any) -> None:
        """Transform a master value and set it on the slave."""
        self._slave.set_value(self._transformer.transform(master_value))

    def dispose(self) -> None:
        self._master.remove_value_change_listener(self._master_adapter)
        if self._owned_master is not None:
            self._owned_master.dispose()
        if self.deep_dispose:
            if self._owned_master is None:
                dispose_if_disposable(self._master)
            dispose_if_disposable(self._transformer)
            dispose_if_disposable(self._slave)
        logger.debug(f"Bond disposed (deep={self.deep_dispose})")
