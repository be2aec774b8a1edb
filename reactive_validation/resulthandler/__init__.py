"""
Result handlers: sinks consuming validation results.

This module provides:
- ResultHandler protocol and CallableResultHandler adapter
- Composite, transformed, property and logging handlers
- ResultCollector for chaining validators

Usage:
    from reactive_validation.resulthandler import LoggingResultHandler

    validator.add_result_handler(LoggingResultHandler("email valid"))
"""

from .collector import ResultCollector
from .handlers import (
    CallableResultHandler,
    CompositeResultHandler,
    LoggingResultHandler,
    PropertyResultHandler,
    ResultHandler,
    TransformedResultHandler,
    as_result_handler,
)

__all__ = [
    # Protocol and adapters
    "ResultHandler",
    "CallableResultHandler",
    "as_result_handler",
    # Handlers
    "CompositeResultHandler",
    "TransformedResultHandler",
    "PropertyResultHandler",
    "LoggingResultHandler",
    "ResultCollector",
]
