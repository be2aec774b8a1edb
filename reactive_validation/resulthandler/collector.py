"""ResultCollector: chains the result of one validator into another."""

from __future__ import annotations

from typing import Any

from ..common.exception_handlers import ExceptionHandler
from ..trigger.base import AbstractTrigger, TriggerEvent


class ResultCollector(AbstractTrigger):
    """
    Result handler that is also a trigger and a data provider.

    Register it as a result handler of a first validator, and as trigger and
    data provider of a second one (``add_result_collector()``). Every result
    of the first validator is stored and fires the second validator, which
    reads the stored result through ``get_data()``.

    Usage:
        collector = ResultCollector()
        field_validator.add_result_handler(collector)
        form_validator.add_result_collector(collector)
    """

    def __init__(self, initial_result: Any = None, exception_handler: ExceptionHandler | None = None):
        super().__init__(exception_handler)
        self._last_result = initial_result

    @property
    def last_result(self) -> Any:
        return self._last_result

    def handle_result(self, result: Any) -> None:
        self._last_result = result
        self.fire_trigger_event(TriggerEvent(self))

    def get_data(self) -> Any:
        return self._last_result
