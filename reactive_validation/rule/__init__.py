"""
Rules: validation functions run by the validator.

This module provides:
- Rule protocol and TransformerRule adapter for callables
- NegateBooleanRule and boolean composite rules
- Stock rules for strings, numbers and objects

Usage:
    from reactive_validation.rule import AndCompositeBooleanRule, StringLengthLessThanRule

    rule = AndCompositeBooleanRule(
        StringLengthLessThanRule(64),
        lambda text: "@" in text,
    )
"""

from .base import (
    AbstractCompositeRule,
    AndCompositeBooleanRule,
    NegateBooleanRule,
    OrCompositeBooleanRule,
    Rule,
    TransformerRule,
    as_rule,
)
from .rules import (
    EqualsRule,
    IllegalCharacterRule,
    IsParsableRule,
    NumberGreaterThanOrEqualToRule,
    NumberLessThanOrEqualToRule,
    StringLengthLessThanRule,
    StringRegexRule,
)

__all__ = [
    # Protocol and adapters
    "Rule",
    "TransformerRule",
    "as_rule",
    # Combinators
    "NegateBooleanRule",
    "AbstractCompositeRule",
    "AndCompositeBooleanRule",
    "OrCompositeBooleanRule",
    # Stock rules
    "EqualsRule",
    "NumberGreaterThanOrEqualToRule",
    "NumberLessThanOrEqualToRule",
    "StringLengthLessThanRule",
    "StringRegexRule",
    "IllegalCharacterRule",
    "IsParsableRule",
]
