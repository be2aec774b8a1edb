"""
Observable properties.

This module provides:
- ReadableProperty / WritableProperty protocols and ValueChangeListener
- AbstractReadableProperty with change detection, snapshot notification and inhibition
- SimpleProperty and ConstantProperty value cells
- Composite properties aggregating or broadcasting values
- Wrappers restricting or negating another property
- Stock listeners
- Observable list, set and map properties with item-level listeners

Usage:
    from reactive_validation.property import SimpleProperty, LoggingValueChangeListener

    age = SimpleProperty(0)
    age.add_value_change_listener(LoggingValueChangeListener("age"))
    age.set_value(42)  # logs "age changed: 0 -> 42"
    age.set_value(42)  # equal value, no notification
"""

from .base import (
    AbstractReadableProperty,
    ReadableProperty,
    ReadableWritableProperty,
    ValueChangeListener,
    WritableProperty,
)
from .collection import (
    AbstractReadableListProperty,
    AbstractReadableMapProperty,
    AbstractReadableSetProperty,
    ListValueChangeListener,
    MapValueChangeListener,
    ReadOnlyListPropertyWrapper,
    ReadOnlyMapPropertyWrapper,
    ReadOnlySetPropertyWrapper,
    SetValueChangeListener,
    SimpleListProperty,
    SimpleMapProperty,
    SimpleSetProperty,
)
from .composite import CompositeReadableProperty, CompositeWritableProperty
from .listeners import FunctionValueChangeListener, LoggingValueChangeListener
from .simple import ConstantProperty, SimpleProperty
from .wrappers import (
    AbstractReadablePropertyWrapper,
    NegateBooleanPropertyWrapper,
    ReadOnlyPropertyWrapper,
    WriteOnlyPropertyWrapper,
)

__all__ = [
    # Protocols
    "ValueChangeListener",
    "ReadableProperty",
    "WritableProperty",
    "ReadableWritableProperty",
    # Base
    "AbstractReadableProperty",
    # Properties
    "SimpleProperty",
    "ConstantProperty",
    "CompositeReadableProperty",
    "CompositeWritableProperty",
    # Wrappers
    "AbstractReadablePropertyWrapper",
    "ReadOnlyPropertyWrapper",
    "WriteOnlyPropertyWrapper",
    "NegateBooleanPropertyWrapper",
    # Listeners
    "FunctionValueChangeListener",
    "LoggingValueChangeListener",
    # Collection properties
    "ListValueChangeListener",
    "SetValueChangeListener",
    "MapValueChangeListener",
    "AbstractReadableListProperty",
    "AbstractReadableSetProperty",
    "AbstractReadableMapProperty",
    "SimpleListProperty",
    "SimpleSetProperty",
    "SimpleMapProperty",
    "ReadOnlyListPropertyWrapper",
    "ReadOnlySetPropertyWrapper",
    "ReadOnlyMapPropertyWrapper",
]
