"""
Rule protocol, adapters and composite rules.

A rule is a pure function ``validate(data) -> result``. Results are typically
booleans but any value works; result handlers decide what to do with it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from ..common.disposable import dispose_all, dispose_if_disposable
from ..transform.aggregators import AndBooleanAggregator, OrBooleanAggregator
from ..transform.base import Transformer, as_transformer
from ..transform.transformers import NegateBooleanTransformer


@runtime_checkable
class Rule(Protocol):
    """Validation function."""

    def validate(self, data: Any) -> Any:
        ...


class TransformerRule:
    """
    Rule delegating to a transformer or plain callable.

    Usage:
        not_empty = TransformerRule(lambda text: bool(text and text.strip()))
        not_empty.validate("  ")  # False
    """

    def __init__(self, transformer: Transformer[Any, Any] | Callable[[Any], Any]):
        self._transformer = as_transformer(transformer)

    def validate(self, data: Any) -> Any:
        return self._transformer.transform(data)

    def dispose(self) -> None:
        dispose_if_disposable(self._transformer)


class NegateBooleanRule:
    """
    Negate the boolean result of another rule.

    Args:
        wrapped_rule: Rule whose result is negated.
        none_result_negation: Result when the wrapped rule returns None.
    """

    def __init__(
        self,
        wrapped_rule: Rule | Callable[[Any], Any],
        none_result_negation: bool | None = NegateBooleanTransformer.DEFAULT_NONE_NEGATION,
    ):
        self._wrapped_rule = as_rule(wrapped_rule)
        self._negation = NegateBooleanTransformer(none_result_negation)

    def validate(self, data: Any) -> bool | None:
        return self._negation.transform(self._wrapped_rule.validate(data))

    def dispose(self) -> None:
        dispose_if_disposable(self._wrapped_rule)


class AbstractCompositeRule:
    """
    Rule made of several rules validating the same data.

    Subclasses combine the individual results in ``validate()``.
    Disposing it disposes the disposable sub-rules.
    """

    def __init__(self, *rules: Rule | Callable[[Any], Any]):
        self._rules: list[Rule] = [as_rule(rule) for rule in rules]

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: Rule | Callable[[Any], Any]) -> None:
        self._rules.append(as_rule(rule))

    def remove_rule(self, rule: Rule) -> None:
        if rule in self._rules:
            self._rules.remove(rule)

    def validate(self, data: Any) -> Any:
        raise NotImplementedError

    def dispose(self) -> None:
        dispose_all(self._rules)
        self._rules.clear()


class AndCompositeBooleanRule(AbstractCompositeRule):
    """True if every sub-rule returns True (True when there are no sub-rules)."""

    def __init__(self, *rules: Rule | Callable[[Any], Any]):
        super().__init__(*rules)
        self._aggregator = AndBooleanAggregator()

    def validate(self, data: Any) -> bool:
        return self._aggregator.transform([rule.validate(data) for rule in list(self._rules)])


class OrCompositeBooleanRule(AbstractCompositeRule):
    """True if at least one sub-rule returns True (False when there are no sub-rules)."""

    def __init__(self, *rules: Rule | Callable[[Any], Any]):
        super().__init__(*rules)
        self._aggregator = OrBooleanAggregator()

    def validate(self, data: Any) -> bool:
        return self._aggregator.transform([rule.validate(data) for rule in list(self._rules)])


def as_rule(rule: Rule | Callable[[Any], Any]) -> Rule:
    """Wrap plain callables in a TransformerRule; return rules unchanged."""
    if isinstance(rule, Rule):
        return rule
    if callable(rule):
        return TransformerRule(rule)
    raise TypeError(f"Not a rule: {rule!r}")
