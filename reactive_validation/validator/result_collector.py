"""Validator combining the results of other validators."""

from __future__ import annotations

import logging

from ..trigger.base import Trigger
from .base import AbstractSimpleValidator

logger = logging.getLogger(__name__)


class ResultCollectorValidator(AbstractSimpleValidator):
    """
    Validator reading all its data providers into one list for each rule.

    Typically fed by ResultCollectors registered with
    ``add_result_collector()``, each holding the last result of another
    validator. Every rule receives the list of collected results and each rule
    result is delivered to every result handler.

    Usage:
        form_validator = ResultCollectorValidator()
        form_validator.add_result_collector(name_collector)
        form_validator.add_result_collector(email_collector)
        form_validator.add_rule(AndBooleanAggregator().transform)
        form_validator.add_result_handler(PropertyResultHandler(form_valid))
    """

    def process_trigger(self, trigger: Trigger | None) -> None:
        data_providers = tuple(self._data_providers)
        if not data_providers:
            logger.warning(f"No data providers in validator: {self!r}")
            return

        collected = [data_provider.get_data() for data_provider in data_providers]
        logger.debug(f"Collected {len(collected)} results from trigger {trigger!r}")

        result_handlers = tuple(self._result_handlers)
        for rule in tuple(self._rules):
            result = rule.validate(collected)
            for result_handler in result_handlers:
                result_handler.handle_result(result)
