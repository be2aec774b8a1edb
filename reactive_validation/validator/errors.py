"""Custom exceptions for validator module."""

from ..errors import ReactiveValidationError


class ValidatorError(ReactiveValidationError):
    """Base exception for validator errors."""

    pass


class UnsupportedMappingStrategyError(ValidatorError):
    """
    Raised when a mapping strategy name cannot be parsed.

    This can happen when:
    - A settings file or environment variable holds a misspelled strategy
    - A command line argument names an unknown strategy

    Validators never raise this while processing a trigger; an unsupported
    strategy there is logged and the stage is skipped.
    """

    pass
