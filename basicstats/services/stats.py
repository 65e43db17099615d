"""Descriptive statistics over a finalized NumericBuffer."""
from __future__ import annotations

import math
from typing import Optional, Sequence

from basicstats.errors import EmptyInputError, UndefinedStatisticError, UnsortedInputError
from basicstats.services.buffer import NumericBuffer

__all__: list[str] = [
    "SQRT_TOLERANCE",
    "harmonic_mean",
    "mean",
    "median",
    "mode",
    "sqrt_approx",
    "stddev",
    "summarize",
]

SQRT_TOLERANCE = 1e-6


def _require_values(values: Sequence[float]) -> None:
    if len(values) == 0:
        raise EmptyInputError("at least one value is required")


def _require_sorted(values: Sequence[float]) -> None:
    if isinstance(values, NumericBuffer):
        if not values.finalized:
            raise UnsortedInputError("buffer must be sorted before computing this statistic")
        return
    if any(values[i] > values[i + 1] for i in range(len(values) - 1)):
        raise UnsortedInputError("values must be sorted ascending")


def sqrt_approx(value: float, tolerance: float = SQRT_TOLERANCE) -> float:
    """Babylonian square root.

    Starts from x = value, y = 1.0 and replaces x with the average of x and y
    and y with value / x until x - y <= tolerance. The update runs before the
    first test, so inputs below 1 (including 0) converge from above instead of
    coming back unchanged: a variance of 0.25 gives 0.5, not 0.25.
    """
    if value < 0:
        raise ValueError("cannot take the square root of a negative number")
    if not math.isfinite(value):
        return value
    x, y = value, 1.0
    while True:
        x = (x + y) / 2
        y = value / x
        if x - y <= tolerance:
            return x


def mean(values: Sequence[float]) -> float:
    _require_values(values)
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value of sorted input; mean of the two middle values for even length."""
    _require_values(values)
    _require_sorted(values)
    n = len(values)
    middle = n // 2
    if n % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2.0
    return values[middle]


def mode(values: Sequence[float]) -> float:
    """Value of the longest run of equal neighbours in sorted input.

    A run replaces the current mode only when it is strictly longer, so the
    earliest of several equally long runs wins. A run is compared when the
    next different value is seen; the trailing run is never compared.
    """
    _require_values(values)
    _require_sorted(values)
    result = values[0]
    max_count = current_count = 1
    for i in range(1, len(values)):
        if values[i] == values[i - 1]:
            current_count += 1
            continue
        if current_count > max_count:
            max_count = current_count
            result = values[i - 1]
        current_count = 1
    return result


def stddev(values: Sequence[float], mean_value: float) -> float:
    """Population standard deviation around ``mean_value``."""
    _require_values(values)
    sum_sq = 0.0
    for x in values:
        diff = x - mean_value
        # Large spreads overflow to inf here; ** 2 would raise OverflowError
        sum_sq += diff * diff
    return sqrt_approx(sum_sq / len(values))


def harmonic_mean(values: Sequence[float]) -> float:
    """Raises UndefinedStatisticError if any value is 0."""
    _require_values(values)
    if any(x == 0 for x in values):
        raise UndefinedStatisticError("harmonic mean is undefined when a value is 0")
    denominator = sum(1 / x for x in values)
    if denominator == 0:
        raise UndefinedStatisticError("harmonic mean is undefined when reciprocals sum to 0")
    return len(values) / denominator


def summarize(buffer: NumericBuffer) -> dict[str, float | int | None]:
    """
    Compute count, mean, median, mode, stddev, harmonic mean and unused capacity.
    Sorts the buffer first if it is still being built.
    Raises EmptyInputError if the buffer is empty. harmonic_mean is None when undefined.
    """
    _require_values(buffer)
    if not buffer.finalized:
        buffer.sort()
    avg = mean(buffer)
    try:
        hmean: Optional[float] = harmonic_mean(buffer)
    except UndefinedStatisticError:
        hmean = None
    return {
        "count": len(buffer),
        "mean": avg,
        "median": median(buffer),
        "mode": mode(buffer),
        "stddev": stddev(buffer, avg),
        "harmonic_mean": hmean,
        "unused_capacity": buffer.unused_capacity,
    }
