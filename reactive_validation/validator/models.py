"""Data models for validators."""

from __future__ import annotations

from enum import Enum

from .errors import UnsupportedMappingStrategyError


class MappingStrategy(Enum):
    """
    How the outputs of one pipeline stage are mapped to the inputs of the next.

    EACH_TO_EACH ("SPLIT"): every output runs the rest of the pipeline on its own.
    ALL_TO_EACH ("JOIN"): all outputs are collected into one list, which runs
    the rest of the pipeline once.
    """

    EACH_TO_EACH = "SPLIT"
    ALL_TO_EACH = "JOIN"

    @classmethod
    def parse(cls, value: MappingStrategy | str) -> MappingStrategy:
        """
        Parse a strategy from its name or its alias.

        Accepts ``"EACH_TO_EACH"``/``"SPLIT"`` and ``"ALL_TO_EACH"``/``"JOIN"``,
        case-insensitively.

        Raises:
            UnsupportedMappingStrategyError: If the value matches no strategy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
            for strategy in cls:
                if strategy.value == key:
                    return strategy
        raise UnsupportedMappingStrategyError(
            f"Unsupported mapping strategy: {value!r}. "
            f"Expected one of {[s.name for s in cls]} or {[s.value for s in cls]}"
        )
