"""Stock rules for common checks on strings, numbers and objects."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from ..common.equality import values_equal
from ..transform.transformers import PARSE_ERRORS


class EqualsRule:
    """True if the data equals the reference value (null/NaN-aware)."""

    def __init__(self, reference: Any = None):
        self.reference = reference

    def validate(self, data: Any) -> bool:
        return values_equal(data, self.reference)


class NumberGreaterThanOrEqualToRule:
    """
    True if the data is at least ``minimum``.

    None is smaller than every number: None data only passes a None minimum,
    and any data passes a None minimum.
    """

    def __init__(self, minimum: Any = None):
        self.minimum = minimum

    def validate(self, data: Any) -> bool:
        if self.minimum is None:
            return True
        if data is None:
            return False
        return data >= self.minimum


class NumberLessThanOrEqualToRule:
    """True if the data is at most ``maximum``. A None maximum accepts everything."""

    def __init__(self, maximum: Any = None):
        self.maximum = maximum

    def validate(self, data: Any) -> bool:
        if self.maximum is None:
            return True
        if data is None:
            return True
        return data <= self.maximum


class StringLengthLessThanRule:
    """
    True if the text is shorter than ``length_limit``.

    Args:
        length_limit: Exclusive upper bound on the length.
        trim: Whether surrounding whitespace is ignored.
    """

    def __init__(self, length_limit: int, trim: bool = False):
        self.length_limit = length_limit
        self.trim = trim

    def validate(self, data: str | None) -> bool:
        if data is None:
            return 0 < self.length_limit
        text = data.strip() if self.trim else data
        return len(text) < self.length_limit


class StringRegexRule:
    """True if the regular expression matches somewhere in the text. None never matches."""

    def __init__(self, pattern: str | re.Pattern[str]):
        self._pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, data: str | None) -> bool:
        if data is None:
            return False
        return self._pattern.search(data) is not None


class IllegalCharacterRule:
    """
    True if the text contains none of the illegal characters.

    Usage:
        rule = IllegalCharacterRule("<>&")
        rule.validate("a < b")  # False
    """

    def __init__(self, illegal_characters: str, trim: bool = False):
        self.illegal_characters = illegal_characters
        self.trim = trim

    def validate(self, data: str | None) -> bool:
        if data is None:
            return True
        text = data.strip() if self.trim else data
        return not any(char in self.illegal_characters for char in text)


class IsParsableRule:
    """
    True if the parser accepts the text.

    Without a parser every input is accepted. A parser raising one of
    ``PARSE_ERRORS`` rejects the text; any other exception propagates.

    Usage:
        rule = IsParsableRule(Decimal)
        rule.validate("12.50")  # True
        rule.validate("12,50")  # False
    """

    def __init__(self, parser: Callable[[str], Any] | None = None):
        self.parser = parser

    def validate(self, data: str | None) -> bool:
        if self.parser is None:
            return True
        try:
            self.parser(data)
        except PARSE_ERRORS:
            return False
        return True
