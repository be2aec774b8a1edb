"""
Transformer protocol and chaining.

A transformer is a pure function ``transform(input) -> output``. Transformers
compose with ``chain()``, which returns a new transformer feeding the output
of the first into the second.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from ..common.disposable import dispose_all
from .errors import CastError

InT = TypeVar("InT")
OutT = TypeVar("OutT")
I_contra = TypeVar("I_contra", contravariant=True)
O_co = TypeVar("O_co", covariant=True)


@runtime_checkable
class Transformer(Protocol[I_contra, O_co]):
    """Pure mapping from one value to another."""

    def transform(self, value: I_contra) -> O_co:
        ...


class FunctionTransformer(Generic[InT, OutT]):
    """
    Adapt a plain callable to the Transformer protocol.

    Usage:
        upper = FunctionTransformer(str.upper)
        upper.transform("abc")  # "ABC"
    """

    def __init__(self, func: Callable[[InT], OutT]):
        self._func = func

    def transform(self, value: InT) -> OutT:
        return self._func(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"FunctionTransformer({name})"


class IdentityTransformer(Generic[InT]):
    """Return the input unchanged."""

    def transform(self, value: InT) -> InT:
        return value

    def __repr__(self) -> str:
        return "IdentityTransformer()"


class CastTransformer(Generic[InT, OutT]):
    """
    Check that a value is an instance of the expected type and pass it on.

    None always passes, mirroring an unchecked cast.

    Args:
        expected_type: Type (or tuple of types) the value must be an instance of.
            If None, every value passes.

    Raises:
        CastError: From transform() when the value has the wrong type.
    """

    def __init__(self, expected_type: type | tuple[type, ...] | None = None):
        self._expected_type = expected_type

    def transform(self, value: InT) -> OutT:
        if (
            self._expected_type is not None
            and value is not None
            and not isinstance(value, self._expected_type)
        ):
            raise CastError(
                f"Cannot cast {type(value).__name__} to {self._expected_type}",
                value=value,
                expected=self._expected_type,
            )
        return value  # type: ignore[return-value]


def as_transformer(transformer: Transformer[Any, Any] | Callable[[Any], Any] | None) -> Transformer[Any, Any]:
    """
    Coerce a transformer-like object into a Transformer.

    - None becomes an IdentityTransformer
    - Objects with a ``transform`` method are returned as-is
    - Other callables are wrapped in a FunctionTransformer
    """
    if transformer is None:
        return IdentityTransformer()
    if isinstance(transformer, Transformer):
        return transformer
    if callable(transformer):
        return FunctionTransformer(transformer)
    raise TypeError(f"Not a transformer: {transformer!r}")


def apply_transformers(value: Any, transformers: Iterable[Transformer[Any, Any]]) -> Any:
    """Run a value through transformers in order and return the result."""
    for transformer in transformers:
        value = transformer.transform(value)
    return value


class ChainedTransformer(Generic[InT, OutT]):
    """
    Sequence of transformers applied one after the other.

    ``chain()`` does not modify the receiver; it returns a new
    ChainedTransformer with the extra transformer appended.

    Usage:
        to_length = ChainedTransformer(str.strip).chain(len)
        to_length.transform("  abc ")  # 3

    Disposing a chain disposes the disposable transformers it contains.
    """

    def __init__(self, *transformers: Transformer[Any, Any] | Callable[[Any], Any] | None):
        self._transformers: tuple[Transformer[Any, Any], ...] = tuple(
            as_transformer(t) for t in transformers if t is not None
        )

    @property
    def transformers(self) -> tuple[Transformer[Any, Any], ...]:
        return self._transformers

    def chain(self, transformer: Transformer[OutT, Any] | Callable[[OutT], Any]) -> ChainedTransformer[InT, Any]:
        """
        Return a new chain ending with the given transformer.

        Args:
            transformer: Transformer (or callable) consuming this chain's output

        Returns:
            New ChainedTransformer; this one is left unchanged.
        """
        return ChainedTransformer(*self._transformers, transformer)

    def transform(self, value: InT) -> OutT:
        return apply_transformers(value, self._transformers)

    def dispose(self) -> None:
        dispose_all(self._transformers)

    def __len__(self) -> int:
        return len(self._transformers)

    def __repr__(self) -> str:
        return f"ChainedTransformer({', '.join(repr(t) for t in self._transformers)})"
