"""Collision shapes and intersection tests for boxes and points."""

from __future__ import annotations

from dataclasses import dataclass, field

from ytengine.matrix import Matrix4x4, identity, transform_point
from ytengine.vector import Vector3, dot


def _default_orientation() -> tuple[Vector3, Vector3, Vector3]:
    return (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))


@dataclass
class AABB:
    """An axis-aligned box from its near-bottom-left corner to its far-top-right corner."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


@dataclass
class OBB:
    """An oriented box: centre, three axes and half extents along them."""

    center: Vector3 = field(default_factory=Vector3)
    orientation: tuple[Vector3, Vector3, Vector3] = field(default_factory=_default_orientation)
    size: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        self.orientation = tuple(self.orientation)
        if len(self.orientation) != 3:
            raise ValueError("an OBB needs exactly three orientation axes")


@dataclass
class Sphere:
    """A sphere given by centre and radius."""

    center: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0


def is_collision_aabb_point(aabb: AABB, point: Vector3) -> bool:
    """Return whether ``point`` lies inside ``aabb``, boundary included."""
    return (
        aabb.min.x <= point.x <= aabb.max.x
        and aabb.min.y <= point.y <= aabb.max.y
        and aabb.min.z <= point.z <= aabb.max.z
    )


def _component_cross_axes(o1, o2) -> list[Vector3]:
    # Axes built component by component from pairs of orientation vectors.
    def combine(a1: Vector3, b2: Vector3, b1: Vector3, a2: Vector3) -> Vector3:
        return Vector3(
            a1.x * b2.x - b1.x * a2.x,
            a1.y * b2.y - b1.y * a2.y,
            a1.z * b2.z - b1.z * a2.z,
        )

    return [
        combine(o1[1], o2[2], o1[2], o2[1]),
        combine(o1[2], o2[0], o1[0], o2[2]),
        combine(o1[0], o2[1], o1[1], o2[0]),
    ]


def is_collision_obb(obb1: OBB, obb2: OBB) -> bool:
    """Return whether two oriented boxes overlap on every tested axis."""
    axes = [*obb1.orientation, *obb2.orientation, *_component_cross_axes(obb1.orientation, obb2.orientation)]
    return all(test_axis(axis, obb1, obb2) for axis in axes)


def test_axis(axis: Vector3, obb1: OBB, obb2: OBB) -> bool:
    """Return whether the projections of both boxes on ``axis`` overlap."""
    return projection_overlap(obb_projection(obb1, axis), obb_projection(obb2, axis))


test_axis.__test__ = False  # not a pytest test


def _corners(obb: OBB) -> list[Vector3]:
    o0, o1, o2 = obb.orientation
    corners = []
    for i in range(8):
        sx = 1.0 if i & 1 else -1.0
        sy = 1.0 if i & 2 else -1.0
        sz = 1.0 if i & 4 else -1.0
        a = sx * obb.size.x
        b = sy * obb.size.y
        c = sz * obb.size.z
        corners.append(Vector3(
            obb.center.x + o0.x * a + o1.x * b + o2.x * c,
            obb.center.y + o0.y * a + o1.y * b + o2.y * c,
            obb.center.z + o0.z * a + o1.z * b + o2.z * c,
        ))
    return corners


def obb_projection(obb: OBB, axis: Vector3) -> tuple[float, float]:
    """Return the ``(min, max)`` interval of the box's corners projected on ``axis``."""
    projections = [dot(corner, axis) for corner in _corners(obb)]
    return min(projections), max(projections)


def projection_overlap(projection1: tuple[float, float], projection2: tuple[float, float]) -> bool:
    """Return whether two closed intervals overlap."""
    return projection1[1] >= projection2[0] and projection2[1] >= projection1[0]


def get_x_axis(m: Matrix4x4) -> Vector3:
    """Return the first row of ``m`` as a vector."""
    return Vector3(m.m[0][0], m.m[0][1], m.m[0][2])


def get_y_axis(m: Matrix4x4) -> Vector3:
    """Return the second row of ``m`` as a vector."""
    return Vector3(m.m[1][0], m.m[1][1], m.m[1][2])


def get_z_axis(m: Matrix4x4) -> Vector3:
    """Return the third row of ``m`` as a vector."""
    return Vector3(m.m[2][0], m.m[2][1], m.m[2][2])


def get_orientations(m: Matrix4x4) -> tuple[Vector3, Vector3, Vector3]:
    """Return the three axes of ``m``."""
    return get_x_axis(m), get_y_axis(m), get_z_axis(m)


def separation_axis(axis: Vector3, obb1: OBB, obb2: OBB) -> bool:
    """Return whether ``axis`` separates the two boxes."""
    p1 = [dot(v, axis) for v in obb_vertices(obb1)]
    p2 = [dot(v, axis) for v in obb_vertices(obb2)]
    min1, max1 = min(p1), max(p1)
    min2, max2 = min(p2), max(p2)
    sum_span = (max1 - min1) + (max2 - min2)
    long_span = max(max1, max2) - min(min1, min2)
    return sum_span < long_span


def obb_vertices(obb: OBB) -> list[Vector3]:
    """Return the eight listed vertices of the box in world space."""
    s = obb.size
    local = [
        Vector3(s.x, s.y, s.z),
        Vector3(s.x, -s.y, -s.z),
        Vector3(s.x, -s.y, s.z),
        Vector3(-s.x, -s.y, s.z),
        Vector3(-s.x, s.y, -s.z),
        Vector3(s.x, s.y, -s.z),
        Vector3(s.x, s.y, s.z),
        Vector3(-s.x, s.y, s.z),
    ]
    rotation = rotation_from_orientation(obb.orientation)
    return [transform_point(v, rotation) + obb.center for v in local]


def rotation_from_orientation(orientation) -> Matrix4x4:
    """Return the rotation matrix whose first three rows are the given axes."""
    result = identity()
    for row, axis in zip(result.m, orientation):
        row[0], row[1], row[2] = axis.x, axis.y, axis.z
    return result