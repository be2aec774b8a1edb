"""
Triggers: sources of "validate now" events.

This module provides:
- Trigger / TriggerListener protocols and the TriggerEvent dataclass
- AbstractTrigger with ordered delivery and a pluggable exception policy
- ManualTrigger, PropertyValueChangeTrigger and CompositeTrigger
- PropertyChangeTrigger for change events of named attributes

Usage:
    from reactive_validation.trigger import ManualTrigger

    trigger = ManualTrigger()
    trigger.add_trigger_listener(listener)
    trigger.fire()  # listener.trigger_validation(TriggerEvent(trigger))
"""

from .base import AbstractTrigger, Trigger, TriggerEvent, TriggerListener
from .triggers import (
    CompositeTrigger,
    ManualTrigger,
    PropertyChangeEvent,
    PropertyChangeTrigger,
    PropertyValueChangeTrigger,
)

__all__ = [
    # Protocols and event
    "Trigger",
    "TriggerListener",
    "TriggerEvent",
    # Triggers
    "AbstractTrigger",
    "ManualTrigger",
    "PropertyValueChangeTrigger",
    "CompositeTrigger",
    "PropertyChangeTrigger",
    "PropertyChangeEvent",
]
