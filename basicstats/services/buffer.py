"""Growable numeric buffer with explicit capacity tracking."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator

from basicstats.config import INITIAL_CAPACITY
from basicstats.errors import AllocationError, BufferStateError

__all__: list[str] = [
    "NumericBuffer",
]

logger = logging.getLogger(__name__)


class NumericBuffer:
    """Append-only sequence of floats that doubles its storage when full.

    The buffer starts in the *building* state, where values may be appended.
    ``sort()`` moves it to the *finalized* state: values are ordered ascending
    and the buffer becomes read-only. Only the first ``len(buffer)`` slots
    hold valid values; the rest is spare capacity.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY) -> None:
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be greater than 0")
        self._slots = self._allocate(initial_capacity)
        self._length = 0
        self._finalized = False

    @staticmethod
    def _allocate(count: int) -> list[float]:
        try:
            return [0.0] * count
        except MemoryError as exc:
            raise AllocationError(f"could not allocate {count} slots") from exc

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def unused_capacity(self) -> int:
        return self.capacity - self._length

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _grow(self) -> None:
        # Doubling is the only resize policy; storage never shrinks
        old_capacity = self.capacity
        try:
            self._slots.extend(self._allocate(old_capacity))
        except MemoryError as exc:
            logger.error("Buffer growth to %d slots failed", 2 * old_capacity)
            if isinstance(exc, AllocationError):
                raise
            raise AllocationError(f"could not grow buffer to {2 * old_capacity} slots") from exc
        logger.debug("Buffer grown from %d to %d slots", old_capacity, self.capacity)

    def append(self, value: float) -> None:
        """Store ``value`` after the last element, doubling capacity first if full.

        Raises AllocationError if the larger storage cannot be obtained; the
        buffer keeps its previous contents in that case.
        """
        if self._finalized:
            raise BufferStateError("cannot append to a finalized buffer")
        if self._length == self.capacity:
            self._grow()
        self._slots[self._length] = float(value)
        self._length += 1

    def extend(self, values: Iterable[float]) -> None:
        for value in values:
            self.append(value)

    def sort(self) -> None:
        """Sort the stored values ascending and finalize the buffer.

        May be called exactly once.
        """
        if self._finalized:
            raise BufferStateError("buffer is already sorted")
        self._slots[: self._length] = sorted(self._slots[: self._length])
        self._finalized = True

    def to_list(self) -> list[float]:
        return self._slots[: self._length]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[float]:
        return iter(self._slots[: self._length])

    def __getitem__(self, index: int) -> float:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("buffer index out of range")
        return self._slots[index]

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return f"NumericBuffer(length={self._length}, capacity={self.capacity}, {state})"
