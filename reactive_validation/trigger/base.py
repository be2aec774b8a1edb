"""
Trigger protocol and base implementation.

A trigger tells its listeners that validation should happen. The event only
identifies the trigger; data is pulled from data providers afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..common.disposable import dispose_all
from ..common.exception_handlers import ExceptionHandler, RethrowExceptionHandler


@dataclass(frozen=True)
class TriggerEvent:
    """Event fired by a trigger. Carries no pipeline data."""

    source: Any


@runtime_checkable
class TriggerListener(Protocol):
    """Receives trigger events."""

    def trigger_validation(self, event: TriggerEvent) -> None:
        ...


@runtime_checkable
class Trigger(Protocol):
    """Source of trigger events."""

    def add_trigger_listener(self, listener: TriggerListener) -> None:
        ...

    def remove_trigger_listener(self, listener: TriggerListener) -> None:
        ...


class AbstractTrigger:
    """
    Listener bookkeeping and delivery shared by all triggers.

    Listeners are invoked in registration order, iterating over a snapshot
    of the listener list. An exception raised by a listener is passed to the
    exception handler:
    - RethrowExceptionHandler (default) re-raises it; remaining listeners are skipped
    - LogExceptionHandler logs it; delivery continues with the next listener

    Args:
        exception_handler: Policy for listener exceptions. Defaults to
            RethrowExceptionHandler.
    """

    def __init__(self, exception_handler: ExceptionHandler | None = None):
        self._listeners: list[TriggerListener] = []
        self.exception_handler: ExceptionHandler = (
            exception_handler if exception_handler is not None else RethrowExceptionHandler()
        )

    @property
    def trigger_listeners(self) -> tuple[TriggerListener, ...]:
        """Registered listeners, in delivery order."""
        return tuple(self._listeners)

    def add_trigger_listener(self, listener: TriggerListener) -> None:
        self._listeners.append(listener)

    def remove_trigger_listener(self, listener: TriggerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def fire_trigger_event(self, event: TriggerEvent) -> None:
        """Deliver an event to every listener registered when delivery starts."""
        for listener in list(self._listeners):
            try:
                listener.trigger_validation(event)
            except Exception as e:
                self.exception_handler.handle_exception(e)

    def dispose(self) -> None:
        """Dispose disposable listeners and forget all listeners."""
        dispose_all(self._listeners)
        self._listeners.clear()
