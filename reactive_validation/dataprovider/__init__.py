"""
Data providers: pull-based value sources for the validator.

This module provides:
- DataProvider protocol
- Adapters for callables, constants and properties
- TransformedDataProvider and ListCompositeDataProvider

Usage:
    from reactive_validation.dataprovider import PropertyValueProvider

    validator.add_data_provider(PropertyValueProvider(email))
"""

from .providers import (
    CallableDataProvider,
    ConstantDataProvider,
    DataProvider,
    ListCompositeDataProvider,
    PropertyValueProvider,
    TransformedDataProvider,
    as_data_provider,
)

__all__ = [
    "DataProvider",
    "CallableDataProvider",
    "ConstantDataProvider",
    "PropertyValueProvider",
    "TransformedDataProvider",
    "ListCompositeDataProvider",
    "as_data_provider",
]
