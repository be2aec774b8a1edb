"""Stock transformers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from ..common.disposable import dispose_if_disposable
from ..common.equality import values_equal
from .base import Transformer, as_transformer


class ConstantTransformer:
    """Ignore the input and always return the same value."""

    def __init__(self, constant: Any):
        self._constant = constant

    def transform(self, value: Any) -> Any:
        return self._constant


class ToStringTransformer:
    """
    Convert the input to a string.

    Args:
        fmt: Optional format spec passed to ``format()``; ``str()`` is used if None.
        none_value: Result for a None input.
    """

    def __init__(self, fmt: str | None = None, none_value: str | None = None):
        self._fmt = fmt
        self._none_value = none_value

    def transform(self, value: Any) -> str | None:
        if value is None:
            return self._none_value
        if self._fmt is None:
            return str(value)
        return format(value, self._fmt)


class NegateBooleanTransformer:
    """
    Logical negation.

    Args:
        none_negation: Result for a None input (default True, i.e. "not None" is True).
    """

    DEFAULT_NONE_NEGATION = True

    def __init__(self, none_negation: bool | None = DEFAULT_NONE_NEGATION):
        self._none_negation = none_negation

    def transform(self, value: bool | None) -> bool | None:
        if value is None:
            return self._none_negation
        return not value


class EqualsTransformer:
    """Compare the input to a reference value with null/NaN-aware equality."""

    def __init__(self, reference: Any):
        self._reference = reference

    def transform(self, value: Any) -> bool:
        return values_equal(value, self._reference)


class NotEqualsTransformer(EqualsTransformer):
    """Negation of EqualsTransformer."""

    def transform(self, value: Any) -> bool:
        return not super().transform(value)


class CollectionElementTransformer:
    """
    Apply a transformer to every element of a collection.

    The result is always a list, in input iteration order. A None input gives None.
    """

    def __init__(self, element_transformer: Transformer[Any, Any] | Callable[[Any], Any] | None = None):
        self._element_transformer = as_transformer(element_transformer)

    def transform(self, value: Iterable[Any] | None) -> list[Any] | None:
        if value is None:
            return None
        return [self._element_transformer.transform(element) for element in value]

    def dispose(self) -> None:
        dispose_if_disposable(self._element_transformer)


PARSE_ERRORS = (ValueError, TypeError, ArithmeticError)
"""Exceptions a parser raises for text it cannot parse."""


class ParseTransformer:
    """
    Parse text with a parser callable such as ``int``, ``float`` or ``Decimal``.

    Text that cannot be parsed gives None instead of an exception, as does a
    None input or a missing parser. With ``strict_parsing`` disabled the
    longest parsable prefix is used, so ``"0.7dfg"`` parses as ``0.7``.

    Args:
        parser: Callable turning a string into a value, raising one of
            PARSE_ERRORS on invalid text.
        strict_parsing: Whether the whole text must be parsable.

    Usage:
        ParseTransformer(int).transform("42")                          # 42
        ParseTransformer(int).transform("42 apples")                   # None
        ParseTransformer(float, strict_parsing=False).transform("0.7dfg")  # 0.7
    """

    def __init__(self, parser: Callable[[str], Any] | None, strict_parsing: bool = True):
        self.parser = parser
        self.strict_parsing = strict_parsing

    def transform(self, value: str | None) -> Any:
        if value is None or self.parser is None:
            return None
        if self.strict_parsing:
            return self._parse(value)
        for end in range(len(value), 0, -1):
            parsed = self._parse(value[:end])
            if parsed is not None:
                return parsed
        return None

    def _parse(self, text: str) -> Any:
        try:
            return self.parser(text)
        except PARSE_ERRORS:
            return None


class FormatTransformer:
    """
    Format a value into text.

    Args:
        formatter: Either a format spec passed to ``format()`` (e.g. ``".2f"``)
            or a callable returning the text. A None formatter or a None input
            gives None.
    """

    def __init__(self, formatter: str | Callable[[Any], str] | None):
        self.formatter = formatter

    def transform(self, value: Any) -> str | None:
        if value is None or self.formatter is None:
            return None
        if isinstance(self.formatter, str):
            return format(value, self.formatter)
        return self.formatter(value)
