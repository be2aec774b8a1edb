"""
Result handler protocol and stock handlers.

Result handlers are the sinks of the pipeline. They are the only stage
expected to have side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ..common.disposable import dispose_all, dispose_if_disposable
from ..property.base import WritableProperty
from ..transform.base import Transformer, as_transformer

logger = logging.getLogger(__name__)


@runtime_checkable
class ResultHandler(Protocol):
    """Sink consuming validation results."""

    def handle_result(self, result: Any) -> None:
        ...


class CallableResultHandler:
    """Adapt a one-argument callable to the ResultHandler protocol."""

    def __init__(self, func: Callable[[Any], Any]):
        self._func = func

    def handle_result(self, result: Any) -> None:
        self._func(result)


class CompositeResultHandler:
    """
    Forward each result to several handlers, in registration order.

    Args:
        *result_handlers: Initial handlers.
        deep_dispose: Whether dispose() also disposes the handlers.
    """

    def __init__(self, *result_handlers: ResultHandler, deep_dispose: bool = True):
        self._result_handlers: list[ResultHandler] = list(result_handlers)
        self.deep_dispose = deep_dispose

    @property
    def result_handlers(self) -> tuple[ResultHandler, ...]:
        return tuple(self._result_handlers)

    def add_result_handler(self, result_handler: ResultHandler) -> None:
        self._result_handlers.append(result_handler)

    def remove_result_handler(self, result_handler: ResultHandler) -> None:
        if result_handler in self._result_handlers:
            self._result_handlers.remove(result_handler)

    def handle_result(self, result: Any) -> None:
        for result_handler in list(self._result_handlers):
            result_handler.handle_result(result)

    def dispose(self) -> None:
        if self.deep_dispose:
            dispose_all(self._result_handlers)
        self._result_handlers.clear()


class TransformedResultHandler:
    """Pass results through a transformer before handing them to another handler."""

    def __init__(
        self,
        wrapped_result_handler: ResultHandler,
        transformer: Transformer[Any, Any] | Callable[[Any], Any] | None = None,
    ):
        self._wrapped_result_handler = wrapped_result_handler
        self._transformer = as_transformer(transformer)

    def handle_result(self, result: Any) -> None:
        self._wrapped_result_handler.handle_result(self._transformer.transform(result))

    def dispose(self) -> None:
        dispose_if_disposable(self._wrapped_result_handler)
        dispose_if_disposable(self._transformer)


class PropertyResultHandler:
    """
    Write every result into a writable property.

    Useful to expose the validation state as an observable property, e.g. to
    enable a button through a Bond.

    Usage:
        form_valid = SimpleProperty(False)
        validator.add_result_handler(PropertyResultHandler(form_valid))
    """

    def __init__(self, prop: WritableProperty):
        self._property = prop

    def handle_result(self, result: Any) -> None:
        self._property.set_value(result)


class LoggingResultHandler:
    """
    Log every result.

    Args:
        name: Label used in the log message.
        log: Logger to write to. Defaults to this module's logger.
        level: Logging level used for the record.
    """

    def __init__(
        self,
        name: str = "result",
        log: logging.Logger | None = None,
        level: int = logging.INFO,
    ):
        self._name = name
        self._logger = log or logger
        self._level = level

    def handle_result(self, result: Any) -> None:
        self._logger.log(self._level, f"{self._name}: {result!r}")


def as_result_handler(result_handler: ResultHandler | Callable[[Any], Any]) -> ResultHandler:
    """Wrap plain callables in a CallableResultHandler; return handlers unchanged."""
    if isinstance(result_handler, ResultHandler):
        return result_handler
    if callable(result_handler):
        return CallableResultHandler(result_handler)
    raise TypeError(f"Not a result handler: {result_handler!r}")
