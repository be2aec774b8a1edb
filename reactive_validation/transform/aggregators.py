"""
Boolean aggregators.

Aggregators are transformers that fold a collection of booleans into one.
They are the usual result-handler-input transformer when rule outputs are
joined (``MappingStrategy.ALL_TO_EACH``).
"""

from __future__ import annotations

from collections.abc import Iterable


class AndBooleanAggregator:
    """
    True only if every element is True.

    Args:
        empty_collection_value: Result for an empty (or None) collection.
        none_element_value: Value substituted for None elements. If None,
            None elements are ignored.
    """

    DEFAULT_EMPTY_COLLECTION_VALUE = True
    DEFAULT_NONE_ELEMENT_VALUE = False

    def __init__(
        self,
        empty_collection_value: bool = DEFAULT_EMPTY_COLLECTION_VALUE,
        none_element_value: bool | None = DEFAULT_NONE_ELEMENT_VALUE,
    ):
        self._empty_collection_value = empty_collection_value
        self._none_element_value = none_element_value

    def transform(self, value: Iterable[bool | None] | None) -> bool:
        elements = list(value) if value is not None else []
        if not elements:
            return self._empty_collection_value

        for element in elements:
            result = self._none_element_value if element is None else element
            if result is not None and not result:
                return False
        return True


class OrBooleanAggregator:
    """
    True if at least one element is True.

    Args:
        empty_collection_value: Result for an empty (or None) collection.
        none_element_value: Value substituted for None elements. If None,
            None elements are ignored.
    """

    DEFAULT_EMPTY_COLLECTION_VALUE = False
    DEFAULT_NONE_ELEMENT_VALUE = False

    def __init__(
        self,
        empty_collection_value: bool = DEFAULT_EMPTY_COLLECTION_VALUE,
        none_element_value: bool | None = DEFAULT_NONE_ELEMENT_VALUE,
    ):
        self._empty_collection_value = empty_collection_value
        self._none_element_value = none_element_value

    def transform(self, value: Iterable[bool | None] | None) -> bool:
        elements = list(value) if value is not None else []
        if not elements:
            return self._empty_collection_value

        for element in elements:
            result = self._none_element_value if element is None else element
            if result:
                return True
        return False
