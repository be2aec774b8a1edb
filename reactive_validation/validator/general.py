"""
General validator - the configurable validation pipeline.

Per firing:
1. Read every data provider, transform each value (data provider output chain)
2. Map data provider outputs to rule input (SPLIT or JOIN), transform (rule input chain)
3. Run every rule, transform each result (rule output chain)
4. Map rule outputs to result handler input (SPLIT or JOIN), transform
   (result handler input chain)
5. Deliver to every result handler
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..common.disposable import dispose_all
from ..dataprovider.providers import DataProvider
from ..resulthandler.handlers import ResultHandler
from ..rule.base import Rule
from ..transform.base import Transformer, apply_transformers, as_transformer
from ..trigger.base import Trigger
from .base import AbstractSimpleValidator
from .models import MappingStrategy

logger = logging.getLogger(__name__)

TransformerLike = Transformer[Any, Any] | Callable[[Any], Any]


@dataclass(frozen=True)
class _Snapshot:
    """State of the validator captured when a firing starts."""

    data_providers: tuple[DataProvider, ...]
    rules: tuple[Rule, ...]
    result_handlers: tuple[ResultHandler, ...]
    data_provider_output_transformers: tuple[Transformer[Any, Any], ...]
    rule_input_transformers: tuple[Transformer[Any, Any], ...]
    rule_output_transformers: tuple[Transformer[Any, Any], ...]
    result_handler_input_transformers: tuple[Transformer[Any, Any], ...]
    data_provider_to_rule_mapping: Any
    rule_to_result_handler_mapping: Any


def _to_chain(transformers: Iterable[TransformerLike] | None) -> list[Transformer[Any, Any]]:
    if transformers is None:
        return []
    return [as_transformer(transformer) for transformer in transformers]


class GeneralValidator(AbstractSimpleValidator):
    """
    Validator with four transformer chains and two mapping strategies.

    The data provider to rule mapping decides whether each data provider runs
    the rules on its own (EACH_TO_EACH) or whether all data provider outputs
    are joined into one list given to each rule (ALL_TO_EACH). The rule to
    result handler mapping does the same for rule outputs and result handlers.

    With 2 data providers and 2 rules, each result handler receives:
    - EACH_TO_EACH / EACH_TO_EACH: 4 results
    - ALL_TO_EACH / EACH_TO_EACH: 2 results (one per rule, joined input)
    - EACH_TO_EACH / ALL_TO_EACH: 2 results (one per data provider, joined rule outputs)
    - ALL_TO_EACH / ALL_TO_EACH: 1 result

    Each firing works on a snapshot of the registered components and
    transformer chains taken when it starts. An unsupported mapping strategy
    is logged and the corresponding stage is skipped for that firing.

    Usage:
        validator = GeneralValidator()
        validator.add_trigger(PropertyValueChangeTrigger(email))
        validator.add_data_provider(PropertyValueProvider(email))
        validator.add_rule(lambda text: "@" in (text or ""))
        validator.add_result_handler(PropertyResultHandler(email_valid))
    """

    def __init__(
        self,
        data_provider_to_rule_mapping: MappingStrategy = MappingStrategy.EACH_TO_EACH,
        rule_to_result_handler_mapping: MappingStrategy = MappingStrategy.EACH_TO_EACH,
    ):
        super().__init__()
        self.data_provider_to_rule_mapping = data_provider_to_rule_mapping
        self.rule_to_result_handler_mapping = rule_to_result_handler_mapping
        self._data_provider_output_transformers: list[Transformer[Any, Any]] = []
        self._rule_input_transformers: list[Transformer[Any, Any]] = []
        self._rule_output_transformers: list[Transformer[Any, Any]] = []
        self._result_handler_input_transformers: list[Transformer[Any, Any]] = []

    # ---- Transformer chains ----

    @property
    def data_provider_output_transformers(self) -> tuple[Transformer[Any, Any], ...]:
        """Applied to the output of each data provider."""
        return tuple(self._data_provider_output_transformers)

    @data_provider_output_transformers.setter
    def data_provider_output_transformers(self, transformers: Iterable[TransformerLike] | None) -> None:
        self._data_provider_output_transformers = _to_chain(transformers)

    @property
    def rule_input_transformers(self) -> tuple[Transformer[Any, Any], ...]:
        """Applied to the mapped rule input (a single value, or the joined list)."""
        return tuple(self._rule_input_transformers)

    @rule_input_transformers.setter
    def rule_input_transformers(self, transformers: Iterable[TransformerLike] | None) -> None:
        self._rule_input_transformers = _to_chain(transformers)

    @property
    def rule_output_transformers(self) -> tuple[Transformer[Any, Any], ...]:
        """Applied to the output of each rule."""
        return tuple(self._rule_output_transformers)

    @rule_output_transformers.setter
    def rule_output_transformers(self, transformers: Iterable[TransformerLike] | None) -> None:
        self._rule_output_transformers = _to_chain(transformers)

    @property
    def result_handler_input_transformers(self) -> tuple[Transformer[Any, Any], ...]:
        """Applied to the mapped result handler input (a single value, or the joined list)."""
        return tuple(self._result_handler_input_transformers)

    @result_handler_input_transformers.setter
    def result_handler_input_transformers(self, transformers: Iterable[TransformerLike] | None) -> None:
        self._result_handler_input_transformers = _to_chain(transformers)

    # ---- Processing ----

    def process_trigger(self, trigger: Trigger | None) -> None:
        snapshot = _Snapshot(
            data_providers=tuple(self._data_providers),
            rules=tuple(self._rules),
            result_handlers=tuple(self._result_handlers),
            data_provider_output_transformers=tuple(self._data_provider_output_transformers),
            rule_input_transformers=tuple(self._rule_input_transformers),
            rule_output_transformers=tuple(self._rule_output_transformers),
            result_handler_input_transformers=tuple(self._result_handler_input_transformers),
            data_provider_to_rule_mapping=self.data_provider_to_rule_mapping,
            rule_to_result_handler_mapping=self.rule_to_result_handler_mapping,
        )
        logger.debug(
            f"Processing trigger {trigger!r}: {len(snapshot.data_providers)} data providers, "
            f"{len(snapshot.rules)} rules, {len(snapshot.result_handlers)} result handlers"
        )
        self._process_data_providers(snapshot)

    def _process_data_providers(self, snapshot: _Snapshot) -> None:
        mapping = snapshot.data_provider_to_rule_mapping

        if mapping == MappingStrategy.EACH_TO_EACH:
            for data_provider in snapshot.data_providers:
                output = apply_transformers(
                    data_provider.get_data(), snapshot.data_provider_output_transformers
                )
                rule_input = apply_transformers(output, snapshot.rule_input_transformers)
                self._process_rules(rule_input, snapshot)

        elif mapping == MappingStrategy.ALL_TO_EACH:
            outputs = [
                apply_transformers(data_provider.get_data(), snapshot.data_provider_output_transformers)
                for data_provider in snapshot.data_providers
            ]
            rule_input = apply_transformers(outputs, snapshot.rule_input_transformers)
            self._process_rules(rule_input, snapshot)

        else:
            logger.error(f"Unsupported MappingStrategy for data providers to rules: {mapping!r}")

    def _process_rules(self, rule_input: Any, snapshot: _Snapshot) -> None:
        mapping = snapshot.rule_to_result_handler_mapping

        if mapping == MappingStrategy.EACH_TO_EACH:
            for rule in snapshot.rules:
                output = apply_transformers(rule.validate(rule_input), snapshot.rule_output_transformers)
                result = apply_transformers(output, snapshot.result_handler_input_transformers)
                self._process_results(result, snapshot)

        elif mapping == MappingStrategy.ALL_TO_EACH:
            outputs = [
                apply_transformers(rule.validate(rule_input), snapshot.rule_output_transformers)
                for rule in snapshot.rules
            ]
            result = apply_transformers(outputs, snapshot.result_handler_input_transformers)
            self._process_results(result, snapshot)

        else:
            logger.error(f"Unsupported MappingStrategy for rules to result handlers: {mapping!r}")

    def _process_results(self, result: Any, snapshot: _Snapshot) -> None:
        for result_handler in snapshot.result_handlers:
            result_handler.handle_result(result)

    # ---- Disposal ----

    def dispose(self) -> None:
        """Dispose components as AbstractSimpleValidator does, then the disposable transformers."""
        super().dispose()
        for chain in (
            self._data_provider_output_transformers,
            self._rule_input_transformers,
            self._rule_output_transformers,
            self._result_handler_input_transformers,
        ):
            dispose_all(chain)
            chain.clear()
