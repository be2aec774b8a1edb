"""
Registration and disposal shared by all validators.

A validator listens to its triggers and, whenever one fires, runs its data
providers, rules and result handlers. How they are combined is up to the
subclass (``process_trigger()``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..common.disposable import dispose_if_disposable
from ..dataprovider.providers import DataProvider, as_data_provider
from ..resulthandler.collector import ResultCollector
from ..resulthandler.handlers import ResultHandler, as_result_handler
from ..rule.base import Rule, as_rule
from ..trigger.base import Trigger, TriggerEvent

logger = logging.getLogger(__name__)


class _TriggerAdapter:
    """Trigger listener forwarding events of one trigger to the validator."""

    def __init__(self, validator: AbstractSimpleValidator, trigger: Trigger):
        self._validator = validator
        self._trigger = trigger

    def trigger_validation(self, event: TriggerEvent) -> None:
        self._validator.process_trigger(self._trigger)


class AbstractSimpleValidator:
    """
    Ordered collections of triggers, data providers, rules and result handlers.

    A trigger added several times is hooked only once and stays hooked until
    all of its occurrences are removed. Triggers are tracked by identity, so
    they need not be hashable.

    Data providers, rules and result handlers may be given as plain callables;
    they are wrapped in the matching adapter. Removing them then requires the
    adapter instance, available from the ``data_providers``, ``rules`` and
    ``result_handlers`` accessors.
    """

    def __init__(self) -> None:
        self._triggers: list[Trigger] = []
        self._trigger_adapters: dict[int, _TriggerAdapter] = {}
        self._data_providers: list[DataProvider] = []
        self._rules: list[Rule] = []
        self._result_handlers: list[ResultHandler] = []

    # ---- Triggers ----

    @property
    def triggers(self) -> tuple[Trigger, ...]:
        return tuple(self._triggers)

    def add_trigger(self, trigger: Trigger) -> None:
        self._triggers.append(trigger)
        if id(trigger) not in self._trigger_adapters:
            adapter = _TriggerAdapter(self, trigger)
            self._trigger_adapters[id(trigger)] = adapter
            trigger.add_trigger_listener(adapter)

    def remove_trigger(self, trigger: Trigger) -> None:
        positions = [i for i, registered in enumerate(self._triggers) if registered is trigger]
        if not positions:
            return
        del self._triggers[positions[0]]
        if len(positions) == 1:
            adapter = self._trigger_adapters.pop(id(trigger))
            trigger.remove_trigger_listener(adapter)

    # ---- Data providers ----

    @property
    def data_providers(self) -> tuple[DataProvider, ...]:
        return tuple(self._data_providers)

    def add_data_provider(self, data_provider: DataProvider | Callable[[], Any]) -> None:
        self._data_providers.append(as_data_provider(data_provider))

    def remove_data_provider(self, data_provider: DataProvider) -> None:
        if data_provider in self._data_providers:
            self._data_providers.remove(data_provider)

    # ---- Rules ----

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: Rule | Callable[[Any], Any]) -> None:
        self._rules.append(as_rule(rule))

    def remove_rule(self, rule: Rule) -> None:
        if rule in self._rules:
            self._rules.remove(rule)

    # ---- Result handlers ----

    @property
    def result_handlers(self) -> tuple[ResultHandler, ...]:
        return tuple(self._result_handlers)

    def add_result_handler(self, result_handler: ResultHandler | Callable[[Any], Any]) -> None:
        self._result_handlers.append(as_result_handler(result_handler))

    def remove_result_handler(self, result_handler: ResultHandler) -> None:
        if result_handler in self._result_handlers:
            self._result_handlers.remove(result_handler)

    # ---- Result collectors ----

    def add_result_collector(self, result_collector: ResultCollector) -> None:
        """Register a ResultCollector as both a trigger and a data provider."""
        self.add_trigger(result_collector)
        self.add_data_provider(result_collector)

    def remove_result_collector(self, result_collector: ResultCollector) -> None:
        self.remove_trigger(result_collector)
        self.remove_data_provider(result_collector)

    # ---- Processing ----

    def process_trigger(self, trigger: Trigger | None) -> None:
        """Run the pipeline for a firing of the given trigger."""
        raise NotImplementedError

    def trigger(self) -> None:
        """Run the pipeline now, as if a trigger had fired."""
        self.process_trigger(None)

    # ---- Disposal ----

    def dispose(self) -> None:
        """
        Detach from and dispose triggers, then dispose data providers, rules
        and result handlers, and forget them all.

        An exception raised while disposing a component propagates
        immediately; the remaining components are not disposed.
        """
        logger.info(
            f"Disposing {type(self).__name__}: {len(self._triggers)} triggers, "
            f"{len(self._data_providers)} data providers, {len(self._rules)} rules, "
            f"{len(self._result_handlers)} result handlers"
        )
        self._dispose_triggers()
        self._dispose_components(self._data_providers)
        self._dispose_components(self._rules)
        self._dispose_components(self._result_handlers)

    def _dispose_triggers(self) -> None:
        # A trigger registered several times is disposed once
        unique = {id(trigger): trigger for trigger in self._triggers}
        for trigger in unique.values():
            adapter = self._trigger_adapters.pop(id(trigger), None)
            if adapter is not None:
                trigger.remove_trigger_listener(adapter)
            dispose_if_disposable(trigger)
        self._triggers.clear()

    @staticmethod
    def _dispose_components(components: list[Any]) -> None:
        disposed: set[int] = set()
        for component in list(components):
            if id(component) not in disposed:
                disposed.add(id(component))
                dispose_if_disposable(component)
        components.clear()
