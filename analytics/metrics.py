"""Small numeric helpers shared by every analytics stage."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

import numpy as np

ONE_DECIMAL = Decimal("0.1")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round the exact stored value to one decimal place, ties away from zero.

    1.15 is stored as 1.1499... and gives 1.1; -12.25 is exact and gives -12.3.
    """
    rounded = float(Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP))
    # -0.0 -> 0.0
    return rounded + 0.0


def present_values(values: Iterable[Optional[float]]) -> List[float]:
    valid = []
    for value in values:
        if value is None:
            continue
        if isinstance(value, float) and math.isnan(value):
            continue
        valid.append(value)
    return valid


def mean_or_zero(values: Iterable[Optional[float]]) -> float:
    """Mean of the present, numeric values; 0.0 when there are none."""
    valid = present_values(values)
    return float(np.mean(valid)) if valid else 0.0


def metric_mean(records, key: str) -> float:
    return mean_or_zero(getattr(record, key) for record in records)


def safe_ratio(current: float, base: float) -> float:
    """Percent change of current over base; 0 when the base is not positive."""
    if base > 0:
        return (current - base) / base * 100
    return 0.0


def format_number(value) -> str:
    """Render a number for report text: 48.0 -> "48", 48.5 -> "48.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
