"""Row-major 3x3 and 4x4 float matrices."""

from __future__ import annotations

from collections.abc import Iterable

from lumen.base_object import BaseObject, register_type
from lumen.vector import Vec3, Vec4


def _rows(values: Iterable[float] | None, size: int) -> list[list[float]]:
    if values is None:
        return [[0.0] * size for _ in range(size)]
    flat = [float(v) for v in values]
    if len(flat) != size * size:
        raise ValueError(f"expected {size * size} values, got {len(flat)}")
    return [flat[start:start + size] for start in range(0, size * size, size)]


def _matmul(a: list[list[float]], b: list[list[float]]) -> list[float]:
    columns = list(zip(*b))
    return [sum(x * y for x, y in zip(row, col)) for row in a for col in columns]


def _apply(rows: Iterable[list[float]], vec: Iterable[float]) -> list[float]:
    components = list(vec)
    return [sum(x * y for x, y in zip(row, components)) for row in rows]


def _identity_values(size: int, digit: float) -> list[float]:
    return [digit if r == c else 0.0 for r in range(size) for c in range(size)]


@register_type
class Mat3(BaseObject):
    """A 3x3 matrix, built from 9 row-major values or all zeros."""

    def __init__(self, values: Iterable[float] | None = None) -> None:
        self._data = _rows(values, 3)

    @classmethod
    def identity(cls, digit: float = 1.0) -> Mat3:
        """Diagonal matrix with *digit* on the diagonal."""
        return cls(_identity_values(3, digit))

    @classmethod
    def from_columns(cls, v0: Vec3, v1: Vec3, v2: Vec3) -> Mat3:
        """Matrix whose columns are *v0*, *v1* and *v2*."""
        return cls(component for row in zip(v0, v1, v2) for component in row)

    def __iter__(self):
        return (tuple(row) for row in self._data)

    def __mul__(self, other: Mat3 | Vec3) -> Mat3 | Vec3:
        if isinstance(other, Mat3):
            return Mat3(_matmul(self._data, other._data))
        if isinstance(other, Vec3):
            return Vec3(*_apply(self._data, other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat3({self._data!r})"

    def transpose(self) -> Mat3:
        """The transposed matrix."""
        return Mat3(v for col in zip(*self._data) for v in col)

    def at(self, row: int, col: int) -> float:
        """Element at *row*, *col*."""
        return self._data[row][col]

    def set_element(self, row: int, col: int, value: float) -> None:
        """Set the element at *row*, *col*."""
        self._data[row][col] = float(value)

    def clear(self) -> None:
        """Set every element to zero."""
        self._data = _rows(None, 3)


@register_type
class Mat4(BaseObject):
    """A 4x4 matrix, built from 16 row-major values or all zeros."""

    def __init__(self, values: Iterable[float] | None = None) -> None:
        self._data = _rows(values, 4)

    @classmethod
    def identity(cls, digit: float = 1.0) -> Mat4:
        """Diagonal matrix with *digit* on the diagonal."""
        return cls(_identity_values(4, digit))

    def __iter__(self):
        return (tuple(row) for row in self._data)

    def __mul__(self, other: Mat4 | Vec4 | Vec3) -> Mat4 | Vec4 | Vec3:
        if isinstance(other, Mat4):
            return Mat4(_matmul(self._data, other._data))
        if isinstance(other, Vec4):
            return Vec4(*_apply(self._data, other))
        if isinstance(other, Vec3):
            # Only the upper-left 3x3 block applies to a direction.
            return Vec3(*_apply((row[:3] for row in self._data[:3]), other))
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat4({self._data!r})"

    def homogeneous_inverse(self) -> Mat4:
        """Inverse of a rigid transform: transposed rotation and negated translation."""
        d = self._data
        rotation_t = [[d[c][r] for c in range(3)] for r in range(3)]
        translation = [d[0][3], d[1][3], d[2][3]]
        values: list[float] = []
        for row in rotation_t:
            offset = -sum(x * t for x, t in zip(row, translation))
            values.extend([*row, offset])
        values.extend([0.0, 0.0, 0.0, 1.0])
        return Mat4(values)

    def transpose(self) -> Mat4:
        """The transposed matrix."""
        return Mat4(v for col in zip(*self._data) for v in col)

    def translate(self, v: Vec3) -> Mat4:
        """Add *v* to the translation column in place; returns self."""
        for row, amount in zip(self._data, v):
            row[3] += amount
        return self

    def scale(self, v: Vec3) -> Mat4:
        """Multiply the first three diagonal elements by *v* in place; returns self."""
        for index, factor in enumerate(v):
            self._data[index][index] *= factor
        return self

    def at(self, row: int, col: int) -> float:
        """Element at *row*, *col*."""
        return self._data[row][col]

    def set_element(self, row: int, col: int, value: float) -> None:
        """Set the element at *row*, *col*."""
        self._data[row][col] = float(value)

    def clear(self) -> None:
        """Set every element to zero."""
        self._data = _rows(None, 4)