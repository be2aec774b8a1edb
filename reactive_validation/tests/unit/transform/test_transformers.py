"""Unit tests for transformers and chaining."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from reactive_validation.transform import (
    CastError,
    CastTransformer,
    ChainedTransformer,
    CollectionElementTransformer,
    ConstantTransformer,
    EqualsTransformer,
    FormatTransformer,
    FunctionTransformer,
    IdentityTransformer,
    NegateBooleanTransformer,
    NotEqualsTransformer,
    ParseTransformer,
    ToStringTransformer,
    Transformer,
    apply_transformers,
    as_transformer,
)


class TestAsTransformer:
    """Tests for as_transformer coercion."""

    def test_none_becomes_identity(self) -> None:
        """None gives an identity transformer."""
        transformer = as_transformer(None)

        assert isinstance(transformer, IdentityTransformer)
        assert transformer.transform("x") == "x"

    def test_transformer_returned_unchanged(self) -> None:
        """Objects with transform() are returned as-is."""
        transformer = ConstantTransformer(1)

        assert as_transformer(transformer) is transformer

    def test_callable_is_wrapped(self) -> None:
        """Plain callables are wrapped in a FunctionTransformer."""
        transformer = as_transformer(str.upper)

        assert isinstance(transformer, FunctionTransformer)
        assert isinstance(transformer, Transformer)
        assert transformer.transform("abc") == "ABC"

    def test_rejects_non_callables(self) -> None:
        """Anything else is a TypeError."""
        with pytest.raises(TypeError, match="Not a transformer"):
            as_transformer(42)


class TestChainedTransformer:
    """Tests for ChainedTransformer."""

    def test_applies_in_order(self) -> None:
        """Transformers run first to last."""
        chain = ChainedTransformer(str.strip, len)

        assert chain.transform("  abc ") == 3

    def test_chain_returns_new_instance(self) -> None:
        """chain() leaves the receiver unchanged."""
        base = ChainedTransformer(str.strip)
        extended = base.chain(len)

        assert extended is not base
        assert len(base) == 1
        assert len(extended) == 2
        assert base.transform(" a ") == "a"
        assert extended.transform(" a ") == 1

    def test_empty_chain_is_identity(self) -> None:
        """A chain without transformers returns its input."""
        assert ChainedTransformer().transform(5) == 5

    def test_none_entries_are_skipped(self) -> None:
        """None entries are ignored."""
        chain = ChainedTransformer(None, str.upper, None)

        assert len(chain) == 1

    def test_dispose_disposes_members(self) -> None:
        """Disposable members are disposed."""
        member = MagicMock()

        ChainedTransformer(member).dispose()

        member.dispose.assert_called_once()

    def test_apply_transformers_helper(self) -> None:
        """apply_transformers runs a plain sequence."""
        assert apply_transformers(2, [FunctionTransformer(lambda x: x + 1), FunctionTransformer(str)]) == "3"


class TestCastTransformer:
    """Tests for CastTransformer."""

    def test_passes_matching_type(self) -> None:
        """Instances of the expected type pass unchanged."""
        assert CastTransformer(int).transform(3) == 3

    def test_none_always_passes(self) -> None:
        """None is accepted for any expected type."""
        assert CastTransformer(int).transform(None) is None

    def test_wrong_type_raises(self) -> None:
        """Wrong types raise CastError carrying the value."""
        with pytest.raises(CastError, match="Cannot cast str") as exc_info:
            CastTransformer(int).transform("3")

        assert exc_info.value.value == "3"
        assert exc_info.value.expected is int


class TestStockTransformers:
    """Tests for the stock transformers."""

    def test_constant(self) -> None:
        """ConstantTransformer ignores its input."""
        assert ConstantTransformer("x").transform(123) == "x"

    def test_to_string(self) -> None:
        """ToStringTransformer uses str() or a format spec."""
        assert ToStringTransformer().transform(12) == "12"
        assert ToStringTransformer(".2f").transform(1.5) == "1.50"
        assert ToStringTransformer(none_value="-").transform(None) == "-"

    def test_negate_boolean(self) -> None:
        """NegateBooleanTransformer negates; None maps to True by default."""
        negate = NegateBooleanTransformer()

        assert negate.transform(True) is False
        assert negate.transform(False) is True
        assert negate.transform(None) is True
        assert NegateBooleanTransformer(none_negation=False).transform(None) is False

    def test_equals_and_not_equals(self) -> None:
        """Equality transformers use null/NaN-aware equality."""
        assert EqualsTransformer(float("nan")).transform(float("nan")) is True
        assert EqualsTransformer(None).transform(0) is False
        assert NotEqualsTransformer("a").transform("b") is True

    def test_collection_element(self) -> None:
        """CollectionElementTransformer maps each element into a list."""
        transformer = CollectionElementTransformer(str.upper)

        assert transformer.transform(("a", "b")) == ["A", "B"]
        assert transformer.transform(None) is None


class TestParseTransformer:
    """Tests for ParseTransformer."""

    def test_parses_valid_text(self) -> None:
        assert ParseTransformer(int).transform("42") == 42
        assert ParseTransformer(Decimal).transform("1.25") == Decimal("1.25")

    def test_invalid_text_gives_none(self) -> None:
        """Parse errors, None input and a missing parser give None."""
        assert ParseTransformer(int).transform("forty-two") is None
        assert ParseTransformer(Decimal).transform("1,25") is None
        assert ParseTransformer(int).transform(None) is None
        assert ParseTransformer(None).transform("42") is None

    def test_strict_parsing_rejects_trailing_text(self) -> None:
        assert ParseTransformer(float).transform("0.7dfg") is None

    def test_lenient_parsing_uses_longest_prefix(self) -> None:
        transformer = ParseTransformer(float, strict_parsing=False)

        assert transformer.transform("0.7dfg") == 0.7
        assert transformer.transform("dfg") is None
        assert transformer.transform("") is None

    def test_other_exceptions_propagate(self) -> None:
        parser = MagicMock(side_effect=KeyError("boom"))

        with pytest.raises(KeyError):
            ParseTransformer(parser).transform("x")


class TestFormatTransformer:
    """Tests for FormatTransformer."""

    def test_format_spec(self) -> None:
        assert FormatTransformer(".2f").transform(3.14159) == "3.14"

    def test_callable_formatter(self) -> None:
        assert FormatTransformer(lambda value: f"<{value}>").transform(1) == "<1>"

    def test_none_gives_none(self) -> None:
        assert FormatTransformer(".2f").transform(None) is None
        assert FormatTransformer(None).transform(3.0) is None
