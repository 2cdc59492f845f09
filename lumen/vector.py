"""Two-, three- and four-component float vectors."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real

from lumen.base_object import BaseObject, register_type

_NORMALIZE_EPSILON = 1e-10


@register_type
@dataclass
class Vec2(BaseObject):
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, num: float) -> Vec2:
        if not isinstance(num, Real):
            return NotImplemented
        return Vec2(self.x * num, self.y * num)

    def __truediv__(self, num: float) -> Vec2:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        return Vec2(self.x * inv, self.y * inv)

    def __iadd__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, num: float) -> Vec2:
        if not isinstance(num, Real):
            return NotImplemented
        self.x *= num
        self.y *= num
        return self

    def __itruediv__(self, num: float) -> Vec2:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        self.x *= inv
        self.y *= inv
        return self

    def dot(self, other: Vec2) -> float:
        """Dot product with *other*."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        inv = 1 / self.length()
        return Vec2(self.x * inv, self.y * inv)


@register_type
@dataclass
class Vec3(BaseObject):
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, num: float) -> Vec3:
        """A vector with every component set to *num*."""
        return cls(num, num, num)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, num: float) -> Vec3:
        if not isinstance(num, Real):
            return NotImplemented
        return Vec3(self.x * num, self.y * num, self.z * num)

    def __truediv__(self, num: float) -> Vec3:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def __iadd__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, num: float) -> Vec3:
        if not isinstance(num, Real):
            return NotImplemented
        self.x *= num
        self.y *= num
        self.z *= num
        return self

    def __itruediv__(self, num: float) -> Vec3:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    def sqr_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.sqr_length())

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; a near-zero vector gives the zero vector."""
        length = self.length()
        if length < _NORMALIZE_EPSILON:
            return Vec3()
        inv = 1 / length
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def dot(self, other: Vec3) -> float:
        """Dot product with *other*."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product with *other*."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def element_product(self, other: Vec3) -> Vec3:
        """Component-wise product with *other*."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)


@register_type
@dataclass
class Vec4(BaseObject):
    """A 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec3(cls, v: Vec3, w: float = 1.0) -> Vec4:
        """Extend *v* with a fourth component *w* (1 by default)."""
        return cls(v.x, v.y, v.z, w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, num: float) -> Vec4:
        if not isinstance(num, Real):
            return NotImplemented
        return Vec4(self.x * num, self.y * num, self.z * num, self.w * num)

    def __truediv__(self, num: float) -> Vec4:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        return Vec4(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def __iadd__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __isub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def __imul__(self, num: float) -> Vec4:
        if not isinstance(num, Real):
            return NotImplemented
        self.x *= num
        self.y *= num
        self.z *= num
        self.w *= num
        return self

    def __itruediv__(self, num: float) -> Vec4:
        if not isinstance(num, Real):
            return NotImplemented
        inv = 1 / num
        self.x *= inv
        self.y *= inv
        self.z *= inv
        self.w *= inv
        return self

    def xyz(self) -> Vec3:
        """The first three components as a Vec3."""
        return Vec3(self.x, self.y, self.z)