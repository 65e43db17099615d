"""Exception types raised by the buffer and the statistics engine."""
from __future__ import annotations

__all__: list[str] = [
    "BasicStatsError",
    "AllocationError",
    "BufferStateError",
    "EmptyInputError",
    "UnsortedInputError",
    "UndefinedStatisticError",
    "NonFiniteResultError",
]


class BasicStatsError(Exception):
    """Base class for all basicstats errors."""


class AllocationError(BasicStatsError, MemoryError):
    """Backing storage for a buffer could not be obtained."""


class BufferStateError(BasicStatsError, RuntimeError):
    """Operation not allowed once the buffer has been finalized."""


class EmptyInputError(BasicStatsError, ValueError):
    """A statistic was requested over zero values."""


class UnsortedInputError(BasicStatsError, ValueError):
    """An order-dependent statistic was requested over unsorted values."""


class UndefinedStatisticError(BasicStatsError, ValueError):
    """The statistic has no finite value for this input (e.g. harmonic mean with a zero)."""


class NonFiniteResultError(BasicStatsError, ValueError):
    """A statistic overflowed to inf or nan and cannot be reported as a number."""
