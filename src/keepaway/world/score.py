"""Business metric over final inspection counts."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "top_counts",
    "monkey_business",
]


def top_counts(counts: Iterable[int], n: int = 2) -> list[int]:
    """
    Return the ``n`` largest counts, largest first.

    Examples:
        >>> top_counts([101, 95, 7, 105])
        [105, 101]
    """
    return sorted(counts, reverse=True)[:n]


def monkey_business(counts: Iterable[int]) -> int:
    """
    Product of the two largest inspection counts.

    Callers must pass at least two counts.

    Examples:
        >>> monkey_business([101, 95, 7, 105])
        10605
    """
    return math.prod(top_counts(counts, 2))
