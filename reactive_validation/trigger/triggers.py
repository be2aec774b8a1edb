"""Stock triggers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..common.errors import DisposedError
from ..common.exception_handlers import ExceptionHandler
from ..property.base import ReadableProperty
from .base import AbstractTrigger, Trigger, TriggerEvent


class ManualTrigger(AbstractTrigger):
    """
    Trigger fired explicitly by calling ``fire()``.

    Usage:
        submit = ManualTrigger()
        validator.add_trigger(submit)
        submit.fire()

    Raises:
        DisposedError: From fire() once the trigger has been disposed.
    """

    def __init__(self, exception_handler: ExceptionHandler | None = None):
        super().__init__(exception_handler)
        self._disposed = False

    def fire(self) -> None:
        if self._disposed:
            raise DisposedError("ManualTrigger has been disposed")
        self.fire_trigger_event(TriggerEvent(self))

    def dispose(self) -> None:
        super().dispose()
        self._disposed = True


class PropertyValueChangeTrigger(AbstractTrigger):
    """
    Trigger fired whenever a property notifies a value change.

    Args:
        prop: Property to observe.
        exception_handler: Policy for listener exceptions.
    """

    def __init__(self, prop: ReadableProperty, exception_handler: ExceptionHandler | None = None):
        super().__init__(exception_handler)
        self._property: ReadableProperty | None = prop
        prop.add_value_change_listener(self)

    @property
    def observed_property(self) -> ReadableProperty | None:
        return self._property

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self.fire_trigger_event(TriggerEvent(self))

    def dispose(self) -> None:
        super().dispose()
        if self._property is not None:
            self._property.remove_value_change_listener(self)
            self._property = None


class _TriggerForwarder:
    def __init__(self, composite: CompositeTrigger):
        self._composite = composite

    def trigger_validation(self, event: TriggerEvent) -> None:
        self._composite.fire_trigger_event(event)


class CompositeTrigger(AbstractTrigger):
    """
    Trigger forwarding the events of several other triggers.

    Events are forwarded unchanged, so their ``source`` is the original trigger.

    Usage:
        any_change = CompositeTrigger(
            PropertyValueChangeTrigger(first_name),
            PropertyValueChangeTrigger(last_name),
        )
    """

    def __init__(self, *triggers: Trigger, exception_handler: ExceptionHandler | None = None):
        super().__init__(exception_handler)
        self._forwarder = _TriggerForwarder(self)
        self._triggers: list[Trigger] = []
        for trigger in triggers:
            self.add_trigger(trigger)

    @property
    def triggers(self) -> tuple[Trigger, ...]:
        return tuple(self._triggers)

    def add_trigger(self, trigger: Trigger | None) -> None:
        if trigger is not None:
            trigger.add_trigger_listener(self._forwarder)
            self._triggers.append(trigger)

    def remove_trigger(self, trigger: Trigger | None) -> None:
        if trigger is not None and trigger in self._triggers:
            trigger.remove_trigger_listener(self._forwarder)
            self._triggers.remove(trigger)

    def dispose(self) -> None:
        super().dispose()
        for trigger in list(self._triggers):
            trigger.remove_trigger_listener(self._forwarder)
        self._triggers.clear()


@dataclass(frozen=True)
class PropertyChangeEvent:
    """Change of a named attribute of ``source``."""

    source: Any
    property_name: str
    old_value: Any = None
    new_value: Any = None


class _NamedPropertyForwarder:
    def __init__(self, trigger: PropertyChangeTrigger, property_name: str):
        self._trigger = trigger
        self._property_name = property_name

    def value_changed(self, prop: Any, old_value: Any, new_value: Any) -> None:
        self._trigger.property_change(PropertyChangeEvent(prop, self._property_name, old_value, new_value))


class PropertyChangeTrigger(AbstractTrigger):
    """
    Trigger fired by change events of named attributes.

    Objects publishing PropertyChangeEvents pass them to ``property_change()``.
    Only events for one of ``property_names`` fire the trigger; without names
    every event does. The source of the fired TriggerEvent is the object whose
    attribute changed.

    ``observe()`` publishes the value changes of a property under a name.

    Usage:
        trigger = PropertyChangeTrigger(["email"])
        trigger.observe("email", email)
        trigger.observe("nickname", nickname)
        email.set_value("a@b.c")  # fires
        nickname.set_value("ab")  # ignored
    """

    def __init__(
        self,
        property_names: Iterable[str] | None = None,
        exception_handler: ExceptionHandler | None = None,
    ):
        super().__init__(exception_handler)
        self.property_names: frozenset[str] | None = (
            frozenset(property_names) if property_names is not None else None
        )
        self._observed: list[tuple[ReadableProperty, _NamedPropertyForwarder]] = []

    def property_change(self, event: PropertyChangeEvent) -> None:
        if self.property_names is None or event.property_name in self.property_names:
            self.fire_trigger_event(TriggerEvent(event.source))

    def observe(self, property_name: str, prop: ReadableProperty) -> None:
        forwarder = _NamedPropertyForwarder(self, property_name)
        prop.add_value_change_listener(forwarder)
        self._observed.append((prop, forwarder))

    def dispose(self) -> None:
        super().dispose()
        for prop, forwarder in self._observed:
            prop.remove_value_change_listener(forwarder)
        self._observed.clear()
