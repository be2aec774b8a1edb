"""
Reactive validation: observable properties feeding a trigger-driven validation pipeline.

This package contains:
- property / binding: observable value cells, bonds and composite properties
- trigger: sources of "validate now" events
- dataprovider / rule / resulthandler: the pipeline stages
- transform: transformers applied between stages
- validator: the orchestrators wiring it all together
- config: settings loading and logging setup

Usage:
    from reactive_validation import (
        GeneralValidator,
        PropertyResultHandler,
        PropertyValueChangeTrigger,
        PropertyValueProvider,
        SimpleProperty,
    )

    email = SimpleProperty("")
    email_valid = SimpleProperty(False)

    validator = GeneralValidator()
    validator.add_trigger(PropertyValueChangeTrigger(email))
    validator.add_data_provider(PropertyValueProvider(email))
    validator.add_rule(lambda text: "@" in text)
    validator.add_result_handler(PropertyResultHandler(email_valid))

    email.set_value("someone@example.com")  # email_valid becomes True
"""

from .binding import Binder, Bond
from .config import ValidatorSettings, load_settings, settings_from_env, setup_logging
from .dataprovider import CallableDataProvider, DataProvider, PropertyValueProvider
from .errors import ConfigurationError, ReactiveValidationError
from .property import (
    CompositeReadableProperty,
    CompositeWritableProperty,
    ReadableProperty,
    SimpleProperty,
    WritableProperty,
)
from .resulthandler import (
    CallableResultHandler,
    LoggingResultHandler,
    PropertyResultHandler,
    ResultCollector,
    ResultHandler,
)
from .rule import Rule, TransformerRule
from .transform import ChainedTransformer, Transformer
from .trigger import ManualTrigger, PropertyValueChangeTrigger, Trigger, TriggerEvent
from .validator import (
    GeneralValidator,
    MappingStrategy,
    ResultCollectorValidator,
    create_validator,
)

__all__ = [
    # Properties and binding
    "ReadableProperty",
    "WritableProperty",
    "SimpleProperty",
    "CompositeReadableProperty",
    "CompositeWritableProperty",
    "Bond",
    "Binder",
    # Triggers
    "Trigger",
    "TriggerEvent",
    "ManualTrigger",
    "PropertyValueChangeTrigger",
    # Pipeline stages
    "DataProvider",
    "CallableDataProvider",
    "PropertyValueProvider",
    "Rule",
    "TransformerRule",
    "ResultHandler",
    "CallableResultHandler",
    "PropertyResultHandler",
    "LoggingResultHandler",
    "ResultCollector",
    "Transformer",
    "ChainedTransformer",
    # Validators
    "MappingStrategy",
    "GeneralValidator",
    "ResultCollectorValidator",
    "create_validator",
    # Configuration
    "ValidatorSettings",
    "load_settings",
    "settings_from_env",
    "setup_logging",
    # Errors
    "ReactiveValidationError",
    "ConfigurationError",
]
