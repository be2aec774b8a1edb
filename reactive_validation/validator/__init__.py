"""
Validators: orchestrate triggers, data providers, rules and result handlers.

This module provides:
- MappingStrategy (EACH_TO_EACH / ALL_TO_EACH)
- AbstractSimpleValidator with registration and disposal
- GeneralValidator, the configurable pipeline with four transformer chains
- ResultCollectorValidator for combining the results of other validators
- create_validator() factory

Usage:
    from reactive_validation.validator import MappingStrategy, create_validator

    validator = create_validator(
        triggers=[PropertyValueChangeTrigger(password), PropertyValueChangeTrigger(confirmation)],
        data_providers=[PropertyValueProvider(password), PropertyValueProvider(confirmation)],
        rules=[lambda values: values[0] == values[1]],
        result_handlers=[PropertyResultHandler(passwords_match)],
        data_provider_to_rule_mapping=MappingStrategy.ALL_TO_EACH,
    )
"""

from .base import AbstractSimpleValidator
from .errors import UnsupportedMappingStrategyError, ValidatorError
from .factory import create_validator
from .general import GeneralValidator
from .models import MappingStrategy
from .result_collector import ResultCollectorValidator

__all__ = [
    # Models
    "MappingStrategy",
    # Validators
    "AbstractSimpleValidator",
    "GeneralValidator",
    "ResultCollectorValidator",
    # Factory
    "create_validator",
    # Errors
    "ValidatorError",
    "UnsupportedMappingStrategyError",
]
