"""Two-, three- and four-component vectors and the vector arithmetic used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, overload


@dataclass(slots=True)
class Vector2:
    """A two-component vector, used for texture coordinates and stick positions."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(slots=True)
class Vector3:
    """A three-component vector supporting component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Multiply component-wise by another vector, or by a scalar."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vector3:
        """Divide by a scalar; dividing by zero yields the zero vector."""
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0.0:
            return Vector3()
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(slots=True)
class Vector4:
    """A four-component vector, used for colours and homogeneous positions."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def add(v1: Vector3, v2: Vector3) -> Vector3:
    """Return the sum of two vectors."""
    return v1 + v2


def subtract(v1: Vector3, v2: Vector3) -> Vector3:
    """Return ``v1 - v2``."""
    return v1 - v2


def clamp(t: float, minimum: float, maximum: float) -> float:
    """Limit ``t`` to the range ``[minimum, maximum]``."""
    if t < minimum:
        return minimum
    if t > maximum:
        return maximum
    return t


def dot(v1: Vector3, v2: Vector3) -> float:
    """Return the dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def length(v: Vector3) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector3) -> Vector3:
    """Return a unit vector in the direction of ``v``; the zero vector is returned unchanged."""
    size = length(v)
    if size == 0.0:
        return Vector3(v.x, v.y, v.z)
    return Vector3(v.x / size, v.y / size, v.z / size)


@overload
def lerp(start: float, end: float, t: float) -> float: ...


@overload
def lerp(start: Vector3, end: Vector3, t: float) -> Vector3: ...


def lerp(start, end, t):
    """Linearly interpolate between two scalars or two vectors."""
    if isinstance(start, Vector3):
        return Vector3(
            (1.0 - t) * start.x + t * end.x,
            (1.0 - t) * start.y + t * end.y,
            (1.0 - t) * start.z + t * end.z,
        )
    return (1.0 - t) * start + t * end


def slerp(v1: Vector3, v2: Vector3, t: float) -> Vector3:
    """Spherically interpolate from ``v1`` towards ``v2``; ``t`` is clamped to ``[0, 1]``."""
    new_t = clamp(t, 0.0, 1.0)
    cos_angle = clamp(dot(normalize(v1), normalize(v2)), -1.0, 1.0)
    theta = math.acos(cos_angle) * new_t
    relative = normalize((v2 - v1) * new_t)
    return v1 * math.cos(theta) + relative * math.sin(theta)


def cross(v1: Vector3, v2: Vector3) -> Vector3:
    """Return the cross product ``v1 x v2``."""
    return Vector3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def project(a: Vector3, b: Vector3) -> Vector3:
    """Project ``a`` onto the segment from the origin to ``b``.

    The projection parameter is clamped to ``[0, 1]``. Raises
    ``ZeroDivisionError`` when ``b`` is the zero vector.
    """
    length_b = length(b)
    t = dot(a, b) / (length_b * length_b)
    return b * clamp(t, 0.0, 1.0)