"""A growable FIFO queue stored in a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """FIFO queue over a ring buffer that grows when full.

    Growth: an empty buffer becomes 1 slot, up to 128 slots it doubles,
    beyond that it grows by half.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer: list[T | None] = [None] * capacity
        self._head = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        cap = len(self._buffer)
        for offset in range(self._count):
            yield self._buffer[(self._head + offset) % cap]  # type: ignore[misc]

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._buffer)

    def _relocate(self, new_capacity: int) -> None:
        items = list(self)
        self._buffer = items + [None] * (new_capacity - len(items))
        self._head = 0

    def _grow(self) -> None:
        cap = len(self._buffer)
        if cap == 0:
            new_cap = 1
        elif cap <= 128:
            new_cap = cap * 2
        else:
            new_cap = int(cap * 1.5)
        self._relocate(new_cap)

    def push(self, value: T) -> None:
        """Append *value* at the back, growing the buffer if it is full."""
        if self._count >= len(self._buffer):
            self._grow()
        self._buffer[(self._head + self._count) % len(self._buffer)] = value
        self._count += 1

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if not self._count:
            raise IndexError("front of an empty queue")
        return self._buffer[self._head]  # type: ignore[return-value]

    def pop(self) -> T:
        """Remove and return the item at the front."""
        if not self._count:
            raise IndexError("pop from an empty queue")
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % len(self._buffer)
        self._count -= 1
        return value  # type: ignore[return-value]

    def reserve(self, size: int) -> None:
        """Reallocate to exactly *size* slots, which must exceed the length."""
        if size <= self._count:
            raise ValueError("reserve size must be larger than the queue length")
        self._relocate(size)

    def clear(self) -> None:
        """Remove every item, keeping the capacity."""
        self._buffer = [None] * len(self._buffer)
        self._head = 0
        self._count = 0