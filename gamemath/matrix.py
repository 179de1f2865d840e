"""Row-major 3x3 and 4x4 matrices with the usual transform constructors.

Vectors are treated as row vectors, so a point is transformed as ``p * M`` and
transforms compose left to right: ``scale * rotate * translate``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from .vector import Vector3

_Rows = List[List[float]]


def _zeros(size: int) -> _Rows:
    return [[0.0] * size for _ in range(size)]


def _det3(rows: Sequence[Sequence[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@dataclass
class Matrix3x3:
    """A plain 3x3 grid of numbers, zero-initialised."""

    m: _Rows = field(default_factory=lambda: _zeros(3))


class Matrix4x4:
    """A 4x4 row-major matrix; a new matrix is all zeros unless rows are given."""

    __slots__ = ("m",)

    def __init__(self, m: Optional[Iterable[Iterable[float]]] = None) -> None:
        if m is None:
            self.m: _Rows = _zeros(4)
            return
        rows = [[float(value) for value in row] for row in m]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        self.m = rows

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self.m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.m == other.m

    def __repr__(self) -> str:
        return f"Matrix4x4({self.m!r})"

    def transpose(self) -> Matrix4x4:
        """Return the transposed matrix."""
        return Matrix4x4(zip(*self.m))

    @staticmethod
    def identity() -> Matrix4x4:
        result = Matrix4x4()
        for i in range(4):
            result.m[i][i] = 1.0
        return result

    @staticmethod
    def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
        """Matrix product ``m1 * m2``."""
        columns = list(zip(*m2.m))
        return Matrix4x4(
            [sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m
        )

    def __mul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4.multiply(self, other)

    @staticmethod
    def scale(scale: Vector3) -> Matrix4x4:
        result = Matrix4x4.identity()
        result.m[0][0] = scale.x
        result.m[1][1] = scale.y
        result.m[2][2] = scale.z
        return result

    @staticmethod
    def rotate_x(radian: float) -> Matrix4x4:
        result = Matrix4x4.identity()
        c, s = math.cos(radian), math.sin(radian)
        result.m[1][1] = c
        result.m[1][2] = s
        result.m[2][1] = -s
        result.m[2][2] = c
        return result

    @staticmethod
    def rotate_y(radian: float) -> Matrix4x4:
        result = Matrix4x4.identity()
        c, s = math.cos(radian), math.sin(radian)
        result.m[0][0] = c
        result.m[0][2] = -s
        result.m[2][0] = s
        result.m[2][2] = c
        return result

    @staticmethod
    def rotate_z(radian: float) -> Matrix4x4:
        result = Matrix4x4.identity()
        c, s = math.cos(radian), math.sin(radian)
        result.m[0][0] = c
        result.m[0][1] = s
        result.m[1][0] = -s
        result.m[1][1] = c
        return result

    @staticmethod
    def rotate(rotate: Vector3) -> Matrix4x4:
        """Euler rotation applied X, then Y, then Z."""
        return (
            Matrix4x4.rotate_x(rotate.x)
            * Matrix4x4.rotate_y(rotate.y)
            * Matrix4x4.rotate_z(rotate.z)
        )

    @staticmethod
    def translate(translate: Vector3) -> Matrix4x4:
        result = Matrix4x4.identity()
        result.m[3][0] = translate.x
        result.m[3][1] = translate.y
        result.m[3][2] = translate.z
        return result

    @staticmethod
    def normalize_rotation(matrix: Matrix4x4) -> Matrix4x4:
        """Copy of ``matrix`` whose diagonal holds the lengths of its first three columns."""
        result = Matrix4x4(matrix.m)
        for i in range(3):
            result.m[i][i] = Vector3(
                matrix.m[0][i], matrix.m[1][i], matrix.m[2][i]
            ).length()
        return result

    @staticmethod
    def look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4x4:
        """View matrix looking from ``eye`` towards ``target``."""
        z = target - eye
        x = Vector3.cross(up, z.normalize())
        y = Vector3.cross(z.normalize(), x.normalize())
        return Matrix4x4(
            [
                [x.x, y.x, z.x, 0.0],
                [x.y, y.y, z.y, 0.0],
                [x.z, y.z, z.z, 0.0],
                [-Vector3.dot(x, eye), -Vector3.dot(y, eye), -Vector3.dot(z, eye), 1.0],
            ]
        )

    @staticmethod
    def affine(scale: Vector3, rotate, translate: Vector3) -> Matrix4x4:
        """Scale, then rotate, then translate.

        ``rotate`` is either Euler angles as a Vector3 or a rotation object
        offering ``to_matrix()``, such as a quaternion.
        """
        to_matrix = getattr(rotate, "to_matrix", None)
        rotation = to_matrix() if callable(to_matrix) else Matrix4x4.rotate(rotate)
        return Matrix4x4.scale(scale) * rotation * Matrix4x4.translate(translate)

    @staticmethod
    def inverse(matrix: Matrix4x4) -> Matrix4x4:
        """Inverse via the adjugate; raises ValueError for a singular matrix."""
        m = matrix.m

        def cofactor(row: int, col: int) -> float:
            minor = [
                [m[r][c] for c in range(4) if c != col] for r in range(4) if r != row
            ]
            sign = -1.0 if (row + col) % 2 else 1.0
            return sign * _det3(minor)

        cofactors = [[cofactor(r, c) for c in range(4)] for r in range(4)]
        det = sum(m[0][c] * cofactors[0][c] for c in range(4))
        if det == 0.0:
            raise ValueError("matrix is singular and has no inverse")
        return Matrix4x4(
            [cofactors[c][r] / det for c in range(4)] for r in range(4)
        )

    @staticmethod
    def perspective_fov(
        fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float
    ) -> Matrix4x4:
        """Left-handed perspective projection mapping depth to [0, 1]."""
        result = Matrix4x4()
        tan_half = math.tan(fov_y / 2.0)
        result.m[0][0] = 1.0 / aspect_ratio * (1.0 / tan_half)
        result.m[1][1] = 1.0 / tan_half
        result.m[2][2] = far_clip / (far_clip - near_clip)
        result.m[2][3] = 1.0
        result.m[3][2] = -(near_clip * far_clip) / (far_clip - near_clip)
        return result

    @staticmethod
    def orthographic(
        left: float,
        top: float,
        right: float,
        bottom: float,
        near_clip: float,
        far_clip: float,
    ) -> Matrix4x4:
        """Orthographic projection mapping the box to [-1, 1]^2 x [0, 1]."""
        result = Matrix4x4.identity()
        result.m[0][0] = 2.0 / (right - left)
        result.m[1][1] = 2.0 / (top - bottom)
        result.m[2][2] = 1.0 / (far_clip - near_clip)
        result.m[3][0] = (left + right) / (left - right)
        result.m[3][1] = (top + bottom) / (bottom - top)
        result.m[3][2] = near_clip / (near_clip - far_clip)
        result.m[3][3] = 1.0
        return result

    @staticmethod
    def make_rotate_axis_angle(axis: Vector3, angle: float) -> Matrix4x4:
        """Rotation of ``angle`` radians about ``axis`` (normalised here)."""
        n = axis.normalize()
        x, y, z = n.x, n.y, n.z
        c, s = math.cos(angle), math.sin(angle)
        k = 1.0 - c
        return Matrix4x4(
            [
                [c + x * x * k, x * y * k + z * s, x * z * k - y * s, 0.0],
                [y * x * k - z * s, c + y * y * k, y * z * k + x * s, 0.0],
                [z * x * k + y * s, z * y * k - x * s, c + z * z * k, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @staticmethod
    def direction_to_direction(from_: Vector3, to: Vector3) -> Matrix4x4:
        """Rotation that turns direction ``from_`` onto direction ``to``."""
        from_norm = from_.normalize()
        to_norm = to.normalize()
        axis = Vector3.cross(from_norm, to_norm)

        if axis.length() < 1e-6:
            if Vector3.dot(from_norm, to_norm) > 0.9999:
                return Matrix4x4.identity()
            arbitrary = (
                Vector3(1.0, 0.0, 0.0)
                if abs(from_norm.x) < 0.1
                else Vector3(0.0, 1.0, 0.0)
            )
            axis = Vector3.cross(from_norm, arbitrary).normalize()
            return Matrix4x4.make_rotate_axis_angle(axis, math.pi)

        cos_theta = max(-1.0, min(1.0, Vector3.dot(from_norm, to_norm)))
        return Matrix4x4.make_rotate_axis_angle(axis.normalize(), math.acos(cos_theta))