"""Factory for creating configured validators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from .general import GeneralValidator
from .models import MappingStrategy

if TYPE_CHECKING:
    from ..config import ValidatorSettings
    from ..dataprovider.providers import DataProvider
    from ..resulthandler.handlers import ResultHandler
    from ..rule.base import Rule
    from ..transform.base import Transformer
    from ..trigger.base import Trigger

logger = logging.getLogger(__name__)


def create_validator(
    *,
    triggers: Iterable[Trigger] = (),
    data_providers: Iterable[DataProvider | Callable[[], Any]] = (),
    rules: Iterable[Rule | Callable[[Any], Any]] = (),
    result_handlers: Iterable[ResultHandler | Callable[[Any], Any]] = (),
    data_provider_output_transformers: Iterable[Transformer[Any, Any] | Callable[[Any], Any]] | None = None,
    rule_input_transformers: Iterable[Transformer[Any, Any] | Callable[[Any], Any]] | None = None,
    rule_output_transformers: Iterable[Transformer[Any, Any] | Callable[[Any], Any]] | None = None,
    result_handler_input_transformers: Iterable[Transformer[Any, Any] | Callable[[Any], Any]] | None = None,
    data_provider_to_rule_mapping: MappingStrategy | str | None = None,
    rule_to_result_handler_mapping: MappingStrategy | str | None = None,
    settings: ValidatorSettings | None = None,
) -> GeneralValidator:
    """
    Create a GeneralValidator with all components registered.

    Mapping strategies come from the explicit arguments if given, else from
    ``settings``, else default to EACH_TO_EACH. Strategy names are parsed
    with ``MappingStrategy.parse``.

    Args:
        triggers: Triggers to listen to.
        data_providers: Data providers (or zero-argument callables).
        rules: Rules (or one-argument callables).
        result_handlers: Result handlers (or one-argument callables).
        data_provider_output_transformers: Chain applied to each data provider output.
        rule_input_transformers: Chain applied to the rule input.
        rule_output_transformers: Chain applied to each rule output.
        result_handler_input_transformers: Chain applied to the result handler input.
        data_provider_to_rule_mapping: Stage A mapping strategy.
        rule_to_result_handler_mapping: Stage B mapping strategy.
        settings: Settings providing the default mapping strategies.

    Returns:
        Configured GeneralValidator; triggers are already hooked.

    Raises:
        UnsupportedMappingStrategyError: If a strategy name cannot be parsed.
    """
    if data_provider_to_rule_mapping is None:
        data_provider_to_rule_mapping = (
            settings.data_provider_to_rule_mapping if settings is not None else MappingStrategy.EACH_TO_EACH
        )
    if rule_to_result_handler_mapping is None:
        rule_to_result_handler_mapping = (
            settings.rule_to_result_handler_mapping if settings is not None else MappingStrategy.EACH_TO_EACH
        )

    validator = GeneralValidator(
        data_provider_to_rule_mapping=MappingStrategy.parse(data_provider_to_rule_mapping),
        rule_to_result_handler_mapping=MappingStrategy.parse(rule_to_result_handler_mapping),
    )
    validator.data_provider_output_transformers = data_provider_output_transformers
    validator.rule_input_transformers = rule_input_transformers
    validator.rule_output_transformers = rule_output_transformers
    validator.result_handler_input_transformers = result_handler_input_transformers

    for data_provider in data_providers:
        validator.add_data_provider(data_provider)
    for rule in rules:
        validator.add_rule(rule)
    for result_handler in result_handlers:
        validator.add_result_handler(result_handler)
    for trigger in triggers:
        validator.add_trigger(trigger)

    logger.info(
        f"Created validator: {len(validator.triggers)} triggers, "
        f"{len(validator.data_providers)} data providers, {len(validator.rules)} rules, "
        f"{len(validator.result_handlers)} result handlers "
        f"({validator.data_provider_to_rule_mapping.name}/{validator.rule_to_result_handler_mapping.name})"
    )
    return validator
