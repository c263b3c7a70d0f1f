"""Quaternions used for rotations, their algebra and spherical interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from ytengine import vector as _vec
from ytengine.matrix import Matrix4x4
from ytengine.vector import Vector3

_SLERP_EPSILON = 0.0005


@dataclass(slots=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return multiply(self, other)


def multiply(lhs: Quaternion, rhs: Quaternion) -> Quaternion:
    """Return the Hamilton product ``lhs * rhs``."""
    q, r = lhs, rhs
    return Quaternion(
        x=q.y * r.z - q.z * r.y + r.w * q.x + q.w * r.x,
        y=q.z * r.x - q.x * r.z + r.w * q.y + q.w * r.y,
        z=q.x * r.y - q.y * r.x + r.w * q.z + q.w * r.z,
        w=q.w * r.w - q.x * r.x - q.y * r.y - q.z * r.z,
    )


def identity() -> Quaternion:
    """Return the identity quaternion."""
    return Quaternion(0.0, 0.0, 0.0, 1.0)


def conjugate(quaternion: Quaternion) -> Quaternion:
    """Return the conjugate ``(w, -v)``."""
    return Quaternion(-quaternion.x, -quaternion.y, -quaternion.z, quaternion.w)


def norm(quaternion: Quaternion) -> float:
    """Return the length of the quaternion."""
    return math.sqrt(sum(c * c for c in quaternion))


def normalize(quaternion: Quaternion) -> Quaternion:
    """Return a unit quaternion; the zero quaternion is returned unchanged."""
    size = norm(quaternion)
    if size == 0.0:
        return Quaternion(*quaternion)
    return Quaternion(*(c / size for c in quaternion))


def inverse(quaternion: Quaternion) -> Quaternion:
    """Return the inverse quaternion; raises ``ZeroDivisionError`` for zero."""
    t = norm(quaternion) ** 2
    if t == 0.0:
        raise ZeroDivisionError("the zero quaternion has no inverse")
    return Quaternion(*(c / t for c in conjugate(quaternion)))


def make_rotate_axis_angle(axis: Vector3, angle: float) -> Quaternion:
    """Return the quaternion rotating by ``angle`` radians about ``axis``."""
    n = _vec.normalize(axis)
    s = math.sin(angle / 2.0)
    return Quaternion(n.x * s, n.y * s, n.z * s, math.cos(angle / 2.0))


def rotate_vector(vector: Vector3, quaternion: Quaternion) -> Vector3:
    """Rotate ``vector`` by ``quaternion`` as ``q v q*``."""
    pure = Quaternion(vector.x, vector.y, vector.z, 0.0)
    result = multiply(quaternion, multiply(pure, conjugate(quaternion)))
    return Vector3(result.x, result.y, result.z)


def make_rotate_matrix(quaternion: Quaternion) -> Matrix4x4:
    """Return the row-vector rotation matrix of ``quaternion``."""
    x, y, z, w = quaternion
    return Matrix4x4([
        [w * w + x * x - y * y - z * z, 2.0 * (x * y + w * z), 2.0 * (x * z - w * y), 0.0],
        [2.0 * (x * y - w * z), w * w - x * x + y * y - z * z, 2.0 * (y * z + w * x), 0.0],
        [2.0 * (x * z + w * y), 2.0 * (y * z - w * x), w * w - x * x - y * y + z * z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def slerp(q0: Quaternion, q1: Quaternion, t: float) -> Quaternion:
    """Spherically interpolate between two rotations along the shorter arc."""
    d = sum(a * b for a, b in zip(q0, q1))
    if d < 0.0:
        q0 = -q0
        d = -d
    if d > 1.0 - _SLERP_EPSILON:
        return Quaternion(*((1.0 - t) * a + t * b for a, b in zip(q0, q1)))
    theta = math.acos(d)
    sin_theta = math.sin(theta)
    scale0 = math.sin((1.0 - t) * theta) / sin_theta
    scale1 = math.sin(t * theta) / sin_theta
    return Quaternion(*(scale0 * a + scale1 * b for a, b in zip(q0, q1)))