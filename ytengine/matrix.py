"""4x4 matrices in row-vector convention and the transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ytengine.vector import Vector3

_SIZE = 4


def _zeros() -> list[list[float]]:
    return [[0.0] * _SIZE for _ in range(_SIZE)]


@dataclass
class Matrix4x4:
    """A 4x4 matrix stored as four rows of four floats."""

    m: list[list[float]] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        if len(self.m) != _SIZE or any(len(row) != _SIZE for row in self.m):
            raise ValueError("a Matrix4x4 needs four rows of four values")
        self.m = [[float(value) for value in row] for row in self.m]

    def __getitem__(self, row: int) -> list[float]:
        return self.m[row]

    def __matmul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return multiply(self, other)


def cot(theta: float) -> float:
    """Return the cotangent of ``theta``."""
    return 1.0 / math.tan(theta)


def identity() -> Matrix4x4:
    """Return the identity matrix."""
    return Matrix4x4([[1.0 if i == j else 0.0 for j in range(_SIZE)] for i in range(_SIZE)])


def multiply(m1: Matrix4x4, m2: Matrix4x4) -> Matrix4x4:
    """Return the matrix product ``m1 * m2``."""
    columns = list(zip(*m2.m))
    return Matrix4x4([[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m])


def make_scale_matrix(scale: Vector3) -> Matrix4x4:
    """Return a matrix scaling by the components of ``scale``."""
    return Matrix4x4([
        [scale.x, 0.0, 0.0, 0.0],
        [0.0, scale.y, 0.0, 0.0],
        [0.0, 0.0, scale.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_x_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the X axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, s, 0.0],
        [0.0, -s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_y_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Y axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([
        [c, 0.0, -s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_z_matrix(radian: float) -> Matrix4x4:
    """Return a rotation about the Z axis."""
    c, s = math.cos(radian), math.sin(radian)
    return Matrix4x4([
        [c, s, 0.0, 0.0],
        [-s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def make_rotate_xyz_matrix(radian_x: float, radian_y: float, radian_z: float) -> Matrix4x4:
    """Return the combined rotation X * (Y * Z)."""
    return multiply(
        make_rotate_x_matrix(radian_x),
        multiply(make_rotate_y_matrix(radian_y), make_rotate_z_matrix(radian_z)),
    )


def make_translate_matrix(translate: Vector3) -> Matrix4x4:
    """Return a matrix translating by ``translate``."""
    return Matrix4x4([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [translate.x, translate.y, translate.z, 1.0],
    ])


def make_affine_matrix(scale: Vector3, rotate: Vector3, translate: Vector3) -> Matrix4x4:
    """Return the scale-rotate-translate matrix S * (R * T)."""
    return multiply(
        make_scale_matrix(scale),
        multiply(make_rotate_xyz_matrix(rotate.x, rotate.y, rotate.z), make_translate_matrix(translate)),
    )


def _det3(rows: list[list[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(m: list[list[float]], row: int, col: int) -> float:
    return _det3([[v for j, v in enumerate(r) if j != col] for i, r in enumerate(m) if i != row])


def inverse(m: Matrix4x4) -> Matrix4x4:
    """Return the inverse matrix; raises ``ValueError`` if ``m`` is singular."""
    cofactors = [[(-1) ** (i + j) * _minor(m.m, i, j) for j in range(_SIZE)] for i in range(_SIZE)]
    determinant = sum(m.m[0][j] * cofactors[0][j] for j in range(_SIZE))
    if determinant == 0.0:
        raise ValueError("matrix is singular")
    return Matrix4x4([[cofactors[j][i] / determinant for j in range(_SIZE)] for i in range(_SIZE)])


def make_perspective_fov_matrix(fov_y: float, aspect_ratio: float, near_clip: float, far_clip: float) -> Matrix4x4:
    """Return a left-handed perspective projection matrix."""
    cot_half = cot(fov_y / 2.0)
    depth = far_clip - near_clip
    return Matrix4x4([
        [cot_half / aspect_ratio, 0.0, 0.0, 0.0],
        [0.0, cot_half, 0.0, 0.0],
        [0.0, 0.0, far_clip / depth, 1.0],
        [0.0, 0.0, -near_clip * far_clip / depth, 0.0],
    ])


def make_orthographic_matrix(
    left: float, top: float, right: float, bottom: float, near_clip: float, far_clip: float
) -> Matrix4x4:
    """Return the engine's orthographic projection matrix."""
    return Matrix4x4([
        [2.0 / (right - left), 0.0, 0.0, 0.0],
        [0.0, 2.0 / (top - bottom), 0.0, 0.0],
        [0.0, 0.0, 1.0 / far_clip - near_clip, 0.0],
        [
            (left + right) / (left - right),
            (top + bottom) / (bottom - top),
            near_clip / (near_clip - far_clip),
            1.0,
        ],
    ])


def transpose(m: Matrix4x4) -> Matrix4x4:
    """Return the transposed matrix."""
    return Matrix4x4([list(col) for col in zip(*m.m)])


def transform_point(vector: Vector3, matrix: Matrix4x4) -> Vector3:
    """Transform a point by ``matrix`` with perspective divide.

    Raises ``ValueError`` when the resulting w component is zero.
    """
    x, y, z = vector.x, vector.y, vector.z
    m = matrix.m
    rx = x * m[0][0] + y * m[1][0] + z * m[2][0] + m[3][0]
    ry = x * m[0][1] + y * m[1][1] + z * m[2][1] + m[3][1]
    rz = x * m[0][2] + y * m[1][2] + z * m[2][2] + m[3][2]
    w = x * m[0][3] + y * m[1][3] + z * m[2][3] + m[3][3]
    if w == 0.0:
        raise ValueError("transformed w component is zero")
    return Vector3(rx / w, ry / w, rz / w)