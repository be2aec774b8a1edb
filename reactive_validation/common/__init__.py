"""
Shared building blocks used across the pipeline and property layers.

This module provides:
- Disposal capability (Disposable, DeepDisposable, CompositeDisposable)
- Null/NaN-aware equality used for change detection
- Exception-handling policies for trigger delivery

Usage:
    from reactive_validation.common import values_equal, dispose_if_disposable

    if not values_equal(old, new):
        notify(old, new)
"""

from .disposable import (
    CompositeDisposable,
    DeepDisposable,
    Disposable,
    dispose_all,
    dispose_if_disposable,
)
from .equality import is_nan, values_equal
from .errors import CommonError, DisposedError
from .exception_handlers import (
    CompositeExceptionHandler,
    ExceptionHandler,
    LogExceptionHandler,
    RethrowExceptionHandler,
)

__all__ = [
    # Disposal
    "Disposable",
    "DeepDisposable",
    "CompositeDisposable",
    "dispose_if_disposable",
    "dispose_all",
    # Equality
    "values_equal",
    "is_nan",
    # Exception handling
    "ExceptionHandler",
    "RethrowExceptionHandler",
    "LogExceptionHandler",
    "CompositeExceptionHandler",
    # Errors
    "CommonError",
    "DisposedError",
]
