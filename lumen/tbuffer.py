"""A growable byte buffer holding packed values at aligned offsets."""

from __future__ import annotations

import re
import struct

_CODE = re.compile(r"\s*(\d*)([xcbB?hHiIlLqQnNefdspP])")


def _align(value: int, alignment: int) -> int:
    return (value + alignment - 1) & ~(alignment - 1)


def _alignment_of(fmt: str) -> int:
    """Natural alignment of a struct format, as the strictest field requires."""
    if not fmt:
        return 1
    if fmt[0] in "<>!=":
        return 1
    body = fmt[1:] if fmt[0] == "@" else fmt
    alignment = 1
    for match in _CODE.finditer(body):
        code = match.group(2)
        alignment = max(alignment, struct.calcsize("@c" + code) - struct.calcsize("@" + code))
    return alignment


class TBuffer:
    """Byte buffer of arbitrary packed data, written and read by struct formats.

    Values are placed at offsets aligned as a C compiler would align them.
    When full, the capacity grows by at least *min_expand_size* bytes.
    """

    def __init__(self, init_size: int = 256, min_expand_size: int = 4096) -> None:
        if init_size < 0 or min_expand_size < 0:
            raise ValueError("sizes must not be negative")
        self._init_size = init_size
        self._min_expand_size = min_expand_size
        self._size = 0
        self._data = bytearray(init_size)

    @property
    def size(self) -> int:
        """Number of bytes in use."""
        return self._size

    @property
    def capacity(self) -> int:
        """Number of bytes allocated."""
        return len(self._data)

    def clear(self) -> None:
        """Forget the contents, keeping the capacity."""
        self._size = 0

    def copy(self) -> TBuffer:
        """An independent copy with the same contents and settings."""
        other = TBuffer(self._init_size, self._min_expand_size)
        other._data = bytearray(self._data)
        other._size = self._size
        return other

    def _expand(self, size: int) -> None:
        self._data.extend(bytes(max(size, self._min_expand_size)))

    def push(self, fmt: str, *args) -> int:
        """Pack *args* by *fmt* at the next aligned offset; returns that offset."""
        alignment = _alignment_of(fmt)
        size = _align(struct.calcsize(fmt), alignment)
        start = _align(self._size, alignment)
        end = start + size
        while end > len(self._data):
            self._expand(size)
        struct.pack_into(fmt, self._data, start, *args)
        self._size = end
        return start

    def read(self, fmt: str, pos: int) -> tuple[tuple, int]:
        """Unpack by *fmt* at the aligned position at or after *pos*.

        Returns the unpacked values and the position for the next read.
        Reading past the written data raises IndexError.
        """
        alignment = _alignment_of(fmt)
        size = _align(struct.calcsize(fmt), alignment)
        read_pos = _align(pos, alignment)
        if pos < 0 or read_pos + struct.calcsize(fmt) > self._size:
            raise IndexError("read beyond the written data")
        values = struct.unpack_from(fmt, self._data, read_pos)
        return values, read_pos + size