"""Null-filtering reducers shared by the scoring modules."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, TypeVar

T = TypeVar("T")


def mean(values: Iterable[Optional[float]]) -> Optional[float]:
    """Arithmetic mean of the non-None values, or None if there are none."""
    valid = [v for v in values if v is not None]
    if not valid:
        return None
    return sum(valid) / len(valid)


def mode(values: Iterable[Optional[T]]) -> Optional[T]:
    """Most common non-None value. Ties go to the value seen first."""
    counts: dict[T, int] = {}
    for value in values:
        if value is None:
            continue
        counts[value] = counts.get(value, 0) + 1

    result: Optional[T] = None
    best = 0
    # dicts keep first-insertion order, so a later tie never replaces result
    for value, count in counts.items():
        if count > best:
            best = count
            result = value
    return result


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 → 3), unlike the built-in round().

    The value is cut to 12 significant digits first, so a product like
    4.5 * 2 * 0.95 (stored as 8.549999...) rounds as the 8.55 it stands for.
    """
    exact = Decimal(f"{value:.12g}")
    return float(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def clamp(value: float, low: float = 0.0, high: float = 10.0) -> float:
    return max(low, min(high, value))
