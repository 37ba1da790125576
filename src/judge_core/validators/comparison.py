"""Comparison kinds used by ``numericality``, dispatched through a table."""

from __future__ import annotations

import operator
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class NumericComparison(str, Enum):
    """Numeric bounds, in the order their messages are reported."""

    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    EQUAL_TO = "equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"


_COMPARATORS: dict[NumericComparison, Callable[[float, float], bool]] = {
    NumericComparison.GREATER_THAN: operator.gt,
    NumericComparison.GREATER_THAN_OR_EQUAL_TO: operator.ge,
    NumericComparison.EQUAL_TO: operator.eq,
    NumericComparison.LESS_THAN: operator.lt,
    NumericComparison.LESS_THAN_OR_EQUAL_TO: operator.le,
}


def satisfies(comparison: NumericComparison, value: float, bound: float) -> bool:
    """Return whether ``value <comparison> bound`` holds."""
    return _COMPARATORS[comparison](value, bound)
