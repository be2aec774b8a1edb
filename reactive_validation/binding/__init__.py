"""
Property binding.

This module provides:
- Bond: keeps slave properties in sync with a master property
- Binder: fluent API for creating bonds

Usage:
    from reactive_validation.binding import Binder

    bond = Binder.from_(text).transform(len).to(text_length)
    ...
    bond.dispose()
"""

from .binder import Binder, MultipleMasterBinding, SingleMasterBinding
from .bond import Bond

__all__ = [
    "Bond",
    "Binder",
    "SingleMasterBinding",
    "MultipleMasterBinding",
]
