"""Quaternions for representing and interpolating 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from .matrix import Matrix4x4
from .vector import Vector3

# Single-precision machine epsilon; below this distance from 1 two rotations
# are treated as parallel during spherical interpolation.
FLT_EPSILON = 1.1920929e-07


@dataclass
class Quaternion:
    """A quaternion ``x*i + y*j + z*k + w``; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @staticmethod
    def identity() -> Quaternion:
        return Quaternion(0.0, 0.0, 0.0, 1.0)

    def add_rotation(self, delta_rotation: Quaternion) -> None:
        """Compose ``delta_rotation`` onto this rotation in place and renormalise."""
        result = Quaternion.normalize(self * delta_rotation)
        self.x, self.y, self.z, self.w = result

    @staticmethod
    def conjugate(quaternion: Quaternion) -> Quaternion:
        return Quaternion(-quaternion.x, -quaternion.y, -quaternion.z, quaternion.w)

    @staticmethod
    def norm(quaternion: Quaternion) -> float:
        return math.sqrt(Quaternion.dot(quaternion, quaternion))

    @staticmethod
    def dot(q0: Quaternion, q1: Quaternion) -> float:
        return q0.x * q1.x + q0.y * q1.y + q0.z * q1.z + q0.w * q1.w

    @staticmethod
    def normalize(quaternion: Quaternion) -> Quaternion:
        """Unit quaternion; a zero quaternion is returned unchanged."""
        norm = Quaternion.norm(quaternion)
        if norm > 0.0:
            return Quaternion(
                quaternion.x / norm,
                quaternion.y / norm,
                quaternion.z / norm,
                quaternion.w / norm,
            )
        return Quaternion(*quaternion)

    @staticmethod
    def inverse(quaternion: Quaternion) -> Quaternion:
        """Multiplicative inverse; raises ValueError for the zero quaternion."""
        norm_sq = Quaternion.norm(quaternion) ** 2
        if norm_sq == 0.0:
            raise ValueError("the zero quaternion has no inverse")
        c = Quaternion.conjugate(quaternion)
        return Quaternion(c.x / norm_sq, c.y / norm_sq, c.z / norm_sq, c.w / norm_sq)

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about ``axis`` (normalised here)."""
        n = axis.normalize()
        half = angle / 2.0
        s = math.sin(half)
        return Quaternion(n.x * s, n.y * s, n.z * s, math.cos(half))

    @staticmethod
    def rotate_vector(vector: Vector3, quaternion: Quaternion) -> Vector3:
        """Rotate ``vector`` by ``quaternion`` as ``q * v * conj(q)``."""
        pure = Quaternion(vector.x, vector.y, vector.z, 0.0)
        rotated = quaternion * pure * Quaternion.conjugate(quaternion)
        return Vector3(rotated.x, rotated.y, rotated.z)

    @staticmethod
    def make_rotate_matrix(quaternion: Quaternion) -> Matrix4x4:
        """Row-major rotation matrix for row vectors."""
        x, y, z, w = quaternion
        return Matrix4x4(
            [
                [
                    w * w + x * x - y * y - z * z,
                    2.0 * (x * y + w * z),
                    2.0 * (x * z - w * y),
                    0.0,
                ],
                [
                    2.0 * (x * y - w * z),
                    w * w - x * x + y * y - z * z,
                    2.0 * (y * z + w * x),
                    0.0,
                ],
                [
                    2.0 * (x * z + w * y),
                    2.0 * (y * z - w * x),
                    w * w - x * x - y * y + z * z,
                    0.0,
                ],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def to_matrix(self) -> Matrix4x4:
        return Quaternion.make_rotate_matrix(self)

    @staticmethod
    def from_rotation_matrix(matrix: Matrix4x4) -> Quaternion:
        """Normalised quaternion read from the rotation part of ``matrix``.

        The element pairing assumes column-vector convention, so for a matrix
        built by :meth:`make_rotate_matrix` this yields the inverse rotation.
        """
        m = matrix.m
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            result = Quaternion(
                (m[2][1] - m[1][2]) / s,
                (m[0][2] - m[2][0]) / s,
                (m[1][0] - m[0][1]) / s,
                0.25 * s,
            )
        elif m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
            result = Quaternion(
                0.25 * s,
                (m[0][1] + m[1][0]) / s,
                (m[0][2] + m[2][0]) / s,
                (m[2][1] - m[1][2]) / s,
            )
        elif m[1][1] > m[2][2]:
            s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
            result = Quaternion(
                (m[0][1] + m[1][0]) / s,
                0.25 * s,
                (m[1][2] + m[2][1]) / s,
                (m[0][2] - m[2][0]) / s,
            )
        else:
            s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
            result = Quaternion(
                (m[0][2] + m[2][0]) / s,
                (m[1][2] + m[2][1]) / s,
                0.25 * s,
                (m[1][0] - m[0][1]) / s,
            )
        return Quaternion.normalize(result)

    @staticmethod
    def extract_yaw(quaternion: Quaternion) -> Quaternion:
        """Rotation about the Y axis matching where ``quaternion`` points +Z."""
        forward = Quaternion.rotate_vector(Vector3.UNIT_Z, quaternion)
        yaw = math.atan2(forward.x, forward.z)
        return Quaternion.from_axis_angle(Vector3.UNIT_Y, yaw)

    def slerp_toward(self, q1: Quaternion, t: float) -> None:
        """Spherically interpolate this quaternion towards ``q1`` in place."""
        start = Quaternion(*self)
        dot = Quaternion.dot(start, q1)
        if dot < 0.0:
            start = -start
            dot = -dot
        if dot >= 1.0 - FLT_EPSILON:
            result = start * (1.0 - t) + q1 * t
        else:
            theta = math.acos(dot)
            sin_theta = math.sin(theta)
            result = start * (math.sin((1.0 - t) * theta) / sin_theta) + q1 * (
                math.sin(t * theta) / sin_theta
            )
        self.x, self.y, self.z, self.w = result

    @staticmethod
    def lerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Normalised linear interpolation with ``t`` clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        return Quaternion.normalize(
            Quaternion(
                q0.x + (q1.x - q0.x) * t,
                q0.y + (q1.y - q0.y) * t,
                q0.z + (q1.z - q0.z) * t,
                q0.w + (q1.w - q0.w) * t,
            )
        )

    @staticmethod
    def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
        """Spherical linear interpolation along the shorter arc."""
        start = Quaternion(*q0)
        dot = Quaternion.dot(q0, q1)
        if dot < 0.0:
            start = -start
            dot = -dot
        if dot >= 1.0 - FLT_EPSILON:
            return Quaternion.normalize(start * (1.0 - t) + q1 * t)
        theta = math.acos(dot)
        sin_theta = math.sin(theta)
        scale0 = math.sin((1.0 - t) * theta) / sin_theta
        scale1 = math.sin(t * theta) / sin_theta
        return start * scale0 + q1 * scale1

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __mul__(self, other: Union[Quaternion, float]) -> Quaternion:
        if isinstance(other, Quaternion):
            x, y, z, w = self
            return Quaternion(
                y * other.z - z * other.y + other.w * x + w * other.x,
                z * other.x - x * other.z + other.w * y + w * other.y,
                x * other.y - y * other.x + other.w * z + w * other.z,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, (int, float)):
            return Quaternion(
                self.x * other, self.y * other, self.z * other, self.w * other
            )
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * scalar