"""Stock value change listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class FunctionValueChangeListener:
    """
    Adapt a plain callable ``func(prop, old_value, new_value)`` to a listener.

    Two adapters wrapping the same callable compare equal, so a listener can
    be removed by wrapping the callable again.
    """

    def __init__(self, func: Callable[[Any, Any, Any], None]):
        self._func = func

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self._func(prop, old_value, new_value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FunctionValueChangeListener) and other._func == self._func

    def __hash__(self) -> int:
        return hash(self._func)


class LoggingValueChangeListener:
    """
    Log every value change.

    Args:
        name: Label used in the log message instead of the property repr.
        log: Logger to write to. Defaults to this module's logger.
        level: Logging level used for the record.
    """

    def __init__(
        self,
        name: str | None = None,
        log: logging.Logger | None = None,
        level: int = logging.INFO,
    ):
        self._name = name
        self._logger = log or logger
        self._level = level

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        label = self._name or repr(prop)
        self._logger.log(self._level, f"{label} changed: {old_value!r} -> {new_value!r}")
