"""
Exception-handling policies for trigger delivery.

A trigger routes any exception raised by one of its listeners to its
exception handler. The default policy re-raises, which aborts delivery to the
remaining listeners. ``LogExceptionHandler`` logs and lets delivery continue.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from .disposable import dispose_all

logger = logging.getLogger(__name__)


@runtime_checkable
class ExceptionHandler(Protocol):
    """Policy deciding what happens to an exception raised by a listener."""

    def handle_exception(self, exc: Exception) -> None:
        """
        Handle an exception.

        Re-raising from here aborts the current delivery. Returning normally
        lets the caller continue.
        """
        ...


class RethrowExceptionHandler:
    """Fail-fast policy: re-raise the exception unchanged."""

    def handle_exception(self, exc: Exception) -> None:
        raise exc

    def __repr__(self) -> str:
        return "RethrowExceptionHandler()"


class LogExceptionHandler:
    """
    Log the exception (with traceback) and swallow it.

    Args:
        log: Logger to write to. Defaults to this module's logger.
        level: Logging level used for the record.
    """

    def __init__(self, log: logging.Logger | None = None, level: int = logging.ERROR):
        self._logger = log or logger
        self._level = level

    def handle_exception(self, exc: Exception) -> None:
        self._logger.log(
            self._level,
            f"Exception during trigger delivery: {exc!r}",
            exc_info=exc,
        )

    def __repr__(self) -> str:
        return f"LogExceptionHandler(level={logging.getLevelName(self._level)})"


class CompositeExceptionHandler:
    """
    Forward an exception to several handlers in registration order.

    If one of the handlers re-raises, the handlers after it are not called.

    Usage:
        handler = CompositeExceptionHandler(
            LogExceptionHandler(),
            RethrowExceptionHandler(),
        )
    """

    def __init__(self, *handlers: ExceptionHandler, deep_dispose: bool = True):
        self._handlers: list[ExceptionHandler] = list(handlers)
        self.deep_dispose = deep_dispose

    @property
    def handlers(self) -> tuple[ExceptionHandler, ...]:
        return tuple(self._handlers)

    def add_exception_handler(self, handler: ExceptionHandler) -> None:
        self._handlers.append(handler)

    def remove_exception_handler(self, handler: ExceptionHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def clear(self) -> None:
        self._handlers.clear()

    def handle_exception(self, exc: Exception) -> None:
        for handler in list(self._handlers):
            handler.handle_exception(exc)

    def dispose(self) -> None:
        if self.deep_dispose:
            dispose_all(self._handlers)
        self._handlers.clear()
