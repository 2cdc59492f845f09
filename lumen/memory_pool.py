"""A thread-safe pool of reusable objects allocated in chunks."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class MemoryPool(Generic[T]):
    """Hands out objects made by *factory*, *chunk_size* at a time.

    Released objects are handed out again, most recently released first.
    """

    def __init__(self, factory: Callable[[], T], chunk_size: int = 1024) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._factory = factory
        self._chunk_size = chunk_size
        self._chunks: list[list[T]] = []
        self._owned: set[int] = set()
        self._free: list[T] = []
        self._free_ids: set[int] = set()
        self._lock = threading.Lock()
        self._expand()

    def _expand(self) -> None:
        chunk = [self._factory() for _ in range(self._chunk_size)]
        self._chunks.append(chunk)
        self._owned.update(id(element) for element in chunk)
        self._free.extend(chunk)
        self._free_ids.update(id(element) for element in chunk)

    def request(self) -> T:
        """Take a free element, allocating a new chunk when none is left."""
        with self._lock:
            if not self._free:
                self._expand()
            element = self._free.pop()
            self._free_ids.discard(id(element))
            return element

    def release(self, element: T) -> None:
        """Give *element* back to the pool."""
        with self._lock:
            key = id(element)
            if key not in self._owned:
                raise ValueError("element does not belong to this pool")
            if key in self._free_ids:
                raise ValueError("element is already free")
            self._free.append(element)
            self._free_ids.add(key)

    @property
    def free_count(self) -> int:
        """Number of elements ready to be handed out."""
        with self._lock:
            return len(self._free)

    @property
    def chunk_count(self) -> int:
        """Number of chunks allocated so far."""
        with self._lock:
            return len(self._chunks)