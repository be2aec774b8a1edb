"""
Transformers: pure, chainable mapping functions.

This module provides:
- Transformer protocol and adapters for plain callables
- ChainedTransformer for composing transformers
- Stock transformers (constant, to-string, negation, equality, per-element, parse, format)
- Boolean aggregators for folding joined rule outputs

Usage:
    from reactive_validation.transform import ChainedTransformer, AndBooleanAggregator

    length_ok = ChainedTransformer(str.strip).chain(len).chain(lambda n: n <= 10)
    length_ok.transform("  hello  ")  # True

    AndBooleanAggregator().transform([True, False])  # False
"""

from .aggregators import AndBooleanAggregator, OrBooleanAggregator
from .base import (
    CastTransformer,
    ChainedTransformer,
    FunctionTransformer,
    IdentityTransformer,
    Transformer,
    apply_transformers,
    as_transformer,
)
from .errors import CastError, TransformError
from .transformers import (
    CollectionElementTransformer,
    ConstantTransformer,
    EqualsTransformer,
    FormatTransformer,
    NegateBooleanTransformer,
    NotEqualsTransformer,
    ParseTransformer,
    ToStringTransformer,
)

__all__ = [
    # Protocol and composition
    "Transformer",
    "ChainedTransformer",
    "FunctionTransformer",
    "IdentityTransformer",
    "CastTransformer",
    "as_transformer",
    "apply_transformers",
    # Stock transformers
    "ConstantTransformer",
    "ToStringTransformer",
    "NegateBooleanTransformer",
    "EqualsTransformer",
    "NotEqualsTransformer",
    "CollectionElementTransformer",
    "ParseTransformer",
    "FormatTransformer",
    # Aggregators
    "AndBooleanAggregator",
    "OrBooleanAggregator",
    # Errors
    "TransformError",
    "CastError",
]
