"""Custom exceptions for common module."""

from ..errors import ReactiveValidationError


class CommonError(ReactiveValidationError):
    """Base exception for errors raised by shared building blocks."""

    pass


class DisposedError(CommonError):
    """
    Raised when a component is used after it has been disposed.

    This can happen when:
    - A manual trigger is fired after dispose()
    - A property wrapper is read or written after dispose()
    """

    pass
