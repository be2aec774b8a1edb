"""Root exceptions for the reactive_validation package."""


class ReactiveValidationError(Exception):
    """Base exception for all errors raised by reactive_validation."""

    pass


class ConfigurationError(ReactiveValidationError):
    """
    Raised when validator settings cannot be loaded.

    This can happen when:
    - The settings file does not exist or is not valid YAML
    - The settings file contains unknown keys
    - A mapping strategy, exception policy or log level name is invalid
    """

    pass
