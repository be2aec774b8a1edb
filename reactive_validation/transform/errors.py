"""Custom exceptions for transform module."""

from ..errors import ReactiveValidationError


class TransformError(ReactiveValidationError):
    """Base exception for transformer errors."""

    pass


class CastError(TransformError):
    """
    Raised when a value cannot be passed on as the expected type.

    This can happen when:
    - A transformer chain produces a value of the wrong type
    - A data provider returns something a rule cannot consume
    """

    def __init__(self, message: str, value: object = None, expected: type | None = None):
        super().__init__(message)
        self.value = value
        self.expected = expected
