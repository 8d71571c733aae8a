"""Ratio and rounding helpers shared by the aggregation modules.

Every rate goes through percentage(): Decimal division to 4 places half-up,
times 100, then 2 places half-up. Results are floats so DTOs stay plain.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable, Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Protocol, TypeVar

_RATIO_PLACES = Decimal("0.0001")
_CENT = Decimal("0.01")
_HUNDRED = Decimal(100)
_FLOAT_MAX = Decimal(sys.float_info.max)

NOT_SPECIFIED = "Not specified"
UNKNOWN = "Unknown"


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T")
R = TypeVar("R", bound=_HasId)
K = TypeVar("K", bound=Hashable)


def round_half_up(value: Decimal) -> float:
    """Round to 2 decimals, half away from zero."""
    with localcontext() as ctx:
        # quantize needs every integer digit plus two decimals in the context precision.
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def percentage(numerator: int, denominator: int) -> float:
    """numerator / denominator as a percentage; 0 when denominator <= 0."""
    if denominator <= 0:
        return 0.0
    ratio = (Decimal(numerator) / Decimal(denominator)).quantize(
        _RATIO_PLACES, rounding=ROUND_HALF_UP
    )
    return round_half_up(ratio * _HUNDRED)


def mean(values: Iterable[Decimal | int | float]) -> float:
    """Arithmetic mean rounded to 2 decimals; 0 for an empty iterable."""
    total = Decimal(0)
    count = 0
    for value in values:
        total += value if isinstance(value, Decimal) else Decimal(str(value))
        count += 1
    if count == 0:
        return 0.0
    return round_half_up(total / count)


def difference(current: float, previous: float) -> float:
    """Signed current - previous, rounded to 2 decimals."""
    return round_half_up(Decimal(str(current)) - Decimal(str(previous)))


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse a finite decimal; None for blank, malformed, NaN or infinite input.

    Values beyond the float range count as malformed, since results are floats.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or abs(value) > _FLOAT_MAX:
        return None
    return value


def clean_label(raw: str | None) -> str | None:
    """Trimmed text, or None when blank."""
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def index_by_id(records: Iterable[R]) -> dict[str, R]:
    """Map id -> record. Later duplicates win."""
    return {record.id: record for record in records}


def group_by(records: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group records by key, preserving first-seen key order and record order."""
    groups: dict[K, list[T]] = {}
    for record in records:
        groups.setdefault(key(record), []).append(record)
    return groups
