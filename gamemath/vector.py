"""Two-, three- and four-component vectors used throughout the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence, Union


class _HasMatrix(Protocol):
    """Anything exposing a 4x4 row-major grid of numbers as ``m``."""

    m: Sequence[Sequence[float]]


def _clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)


@dataclass
class Vector2:
    """A 2D vector supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2()
        return Vector2(self.x / length, self.y / length)

    @staticmethod
    def lerp(v1: Vector2, v2: Vector2, t: float) -> Vector2:
        """Linear interpolation without clamping ``t``."""
        return Vector2(v1.x + (v2.x - v1.x) * t, v1.y + (v2.y - v1.y) * t)


@dataclass
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @staticmethod
    def add(v1: Vector3, v2: Vector3) -> Vector3:
        return Vector3(v1.x + v2.x, v1.y + v2.y, v1.z + v2.z)

    @staticmethod
    def subtract(v1: Vector3, v2: Vector3) -> Vector3:
        return Vector3(v1.x - v2.x, v1.y - v2.y, v1.z - v2.z)

    @staticmethod
    def multiply(scalar: float, v: Vector3) -> Vector3:
        return Vector3(v.x * scalar, v.y * scalar, v.z * scalar)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @staticmethod
    def dot(v1: Vector3, v2: Vector3) -> float:
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

    @staticmethod
    def cross(v1: Vector3, v2: Vector3) -> Vector3:
        return Vector3(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x,
        )

    @staticmethod
    def lerp(v1: Vector3, v2: Vector3, t: float) -> Vector3:
        """Linear interpolation with ``t`` clamped to [0, 1]."""
        t = _clamp01(t)
        return Vector3(
            v1.x + (v2.x - v1.x) * t,
            v1.y + (v2.y - v1.y) * t,
            v1.z + (v2.z - v1.z) * t,
        )

    def normalize(self) -> Vector3:
        """Unit vector in the same direction.

        Raises ValueError for the zero vector.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def transform(self, matrix: _HasMatrix) -> Vector3:
        """Transform as a point (w = 1) by a row-major 4x4 matrix, with perspective divide.

        Raises ValueError when the resulting w is zero.
        """
        m = matrix.m
        x = self.x * m[0][0] + self.y * m[1][0] + self.z * m[2][0] + m[3][0]
        y = self.x * m[0][1] + self.y * m[1][1] + self.z * m[2][1] + m[3][1]
        z = self.x * m[0][2] + self.y * m[1][2] + self.z * m[2][2] + m[3][2]
        w = self.x * m[0][3] + self.y * m[1][3] + self.z * m[2][3] + m[3][3]
        if w == 0.0:
            raise ValueError("transformed w component is zero")
        return Vector3(x / w, y / w, z / w)

    def __pos__(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)


Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)
Vector3.ZERO = Vector3(0.0, 0.0, 0.0)


@dataclass
class Vector4:
    """A 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)