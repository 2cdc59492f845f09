"""A 16-byte globally unique identifier."""

from __future__ import annotations

import functools
import uuid

_MASK64 = (1 << 64) - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ZERO = bytes(16)


def hash_combine(first: int, second: int) -> int:
    """Combine two 64-bit values into one seed, folding *first* into *second*."""
    seed = second & _MASK64
    seed ^= (first + 0x9E3779B9 + (seed << 6) + (seed >> 2)) & _MASK64
    return seed & _MASK64


def _parse(text: str) -> bytes:
    """Parse hex text with optional dashes; anything malformed gives all zeros."""
    digits = text.replace("-", "")
    if len(digits) != 32 or not _HEX_DIGITS.issuperset(digits):
        return _ZERO
    return bytes.fromhex(digits)


@functools.total_ordering
class Guid:
    """A GUID/UUID value backed by 16 bytes.

    Built from 16 bytes, from a hex string (dashes ignored), or empty.
    An unparsable string yields the all-zero (invalid) GUID.
    """

    __slots__ = ("_bytes",)

    def __init__(self, value: bytes | bytearray | str | None = None) -> None:
        if value is None:
            self._bytes = _ZERO
        elif isinstance(value, str):
            self._bytes = _parse(value)
        elif isinstance(value, (bytes, bytearray)):
            if len(value) != 16:
                raise ValueError(f"a guid needs 16 bytes, got {len(value)}")
            self._bytes = bytes(value)
        else:
            raise TypeError(f"cannot build a guid from {type(value).__name__}")

    @property
    def bytes(self) -> bytes:
        """The underlying 16 bytes."""
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        h = self._bytes.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"

    def __repr__(self) -> str:
        return f"Guid('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other: Guid) -> bool:
        if not isinstance(other, Guid):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        low = int.from_bytes(self._bytes[:8], "little")
        high = int.from_bytes(self._bytes[8:], "little")
        return hash_combine(low, high)

    def is_valid(self) -> bool:
        """True unless every byte is zero."""
        return self._bytes != _ZERO

    def swap(self, other: Guid) -> None:
        """Exchange values with *other*."""
        self._bytes, other._bytes = other._bytes, self._bytes


def new_guid() -> Guid:
    """Generate a new random GUID."""
    return Guid(uuid.uuid4().bytes)