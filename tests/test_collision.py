import math

import pytest

from ytengine import collision as col
from ytengine.collision import AABB, OBB
from ytengine.matrix import identity, make_rotate_z_matrix
from ytengine.vector import Vector3


def _box(center, size=Vector3(1.0, 1.0, 1.0), orientation=None):
    if orientation is None:
        return OBB(center=center, size=size)
    return OBB(center=center, orientation=orientation, size=size)


@pytest.mark.parametrize(
    "point,expected",
    [
        (Vector3(0.5, 0.5, 0.5), True),
        (Vector3(1.0, 1.0, 1.0), True),
        (Vector3(0.0, 0.0, 0.0), True),
        (Vector3(1.5, 0.5, 0.5), False),
        (Vector3(0.5, -0.1, 0.5), False),
        (Vector3(0.5, 0.5, 2.0), False),
    ],
)
def test_aabb_point(point, expected):
    aabb = AABB(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))
    assert col.is_collision_aabb_point(aabb, point) is expected


def test_obb_overlapping_boxes_collide():
    assert col.is_collision_obb(_box(Vector3()), _box(Vector3(1.5, 0.0, 0.0))) is True


def test_obb_distant_boxes_do_not_collide():
    assert col.is_collision_obb(_box(Vector3()), _box(Vector3(5.0, 0.0, 0.0))) is False


def test_obb_collision_is_symmetric():
    a = _box(Vector3(), orientation=col.get_orientations(make_rotate_z_matrix(0.4)))
    b = _box(Vector3(1.8, 0.3, 0.0))
    assert col.is_collision_obb(a, b) == col.is_collision_obb(b, a)


def test_projection_of_axis_aligned_box():
    box = _box(Vector3(2.0, 0.0, 0.0), size=Vector3(0.5, 1.0, 1.0))
    assert col.obb_projection(box, Vector3(1.0, 0.0, 0.0)) == pytest.approx((1.5, 2.5))


def test_projection_overlap():
    assert col.projection_overlap((0.0, 1.0), (1.0, 2.0)) is True
    assert col.projection_overlap((0.0, 1.0), (1.1, 2.0)) is False
    assert col.projection_overlap((3.0, 4.0), (0.0, 2.0)) is False


def test_test_axis_matches_overlap():
    a = _box(Vector3())
    b = _box(Vector3(0.0, 3.0, 0.0))
    assert col.test_axis(Vector3(0.0, 1.0, 0.0), a, b) is False
    assert col.test_axis(Vector3(1.0, 0.0, 0.0), a, b) is True


def test_axes_of_identity():
    axes = col.get_orientations(identity())
    assert axes == (Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0))
    assert col.get_x_axis(identity()) == axes[0]


def test_rotation_from_orientation_round_trip():
    m = make_rotate_z_matrix(0.7)
    assert col.rotation_from_orientation(col.get_orientations(m)) == m


def test_obb_vertices_lie_on_box_corners():
    box = _box(Vector3(1.0, 2.0, 3.0), size=Vector3(0.5, 1.0, 2.0))
    vertices = col.obb_vertices(box)
    assert len(vertices) == 8
    for v in vertices:
        offset = v - box.center
        assert [abs(c) for c in offset] == pytest.approx([0.5, 1.0, 2.0])


def test_separation_axis():
    a = _box(Vector3())
    far = _box(Vector3(5.0, 0.0, 0.0))
    near = _box(Vector3(1.0, 0.0, 0.0))
    assert col.separation_axis(Vector3(1.0, 0.0, 0.0), a, far) is True
    assert col.separation_axis(Vector3(1.0, 0.0, 0.0), a, near) is False


def test_obb_needs_three_axes():
    with pytest.raises(ValueError):
        OBB(orientation=(Vector3(), Vector3()))


def test_rotated_box_still_detects_overlap():
    angle = math.pi / 4
    a = _box(Vector3(), orientation=col.get_orientations(make_rotate_z_matrix(angle)))
    assert col.is_collision_obb(a, _box(Vector3(0.5, 0.5, 0.0))) is True