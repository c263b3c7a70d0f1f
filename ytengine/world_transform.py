"""Transform records and the world transform that composes scale, rotation and translation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ytengine.matrix import Matrix4x4, inverse, make_affine_matrix, multiply, transpose
from ytengine.quaternion import Quaternion, identity as quaternion_identity
from ytengine.vector import Vector3


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


@dataclass
class EulerTransform:
    """Scale, Euler rotation in radians, and translation."""

    scale: Vector3 = field(default_factory=_unit_scale)
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)


Transform = EulerTransform


@dataclass
class QuaternionTransform:
    """Scale, quaternion rotation, and translation."""

    scale: Vector3 = field(default_factory=_unit_scale)
    rotate: Quaternion = field(default_factory=quaternion_identity)
    translate: Vector3 = field(default_factory=Vector3)


@dataclass
class TransformationMatrix:
    """World-view-projection and world matrices for one object."""

    wvp: Matrix4x4 = field(default_factory=Matrix4x4)
    world: Matrix4x4 = field(default_factory=Matrix4x4)


@dataclass
class WorldTransformData:
    """The matrices a world transform publishes after each update."""

    world: Matrix4x4 = field(default_factory=Matrix4x4)
    normal: Matrix4x4 = field(default_factory=Matrix4x4)
    world_inverse_transpose: Matrix4x4 = field(default_factory=Matrix4x4)


@dataclass
class WorldTransform:
    """An object's placement in the world, optionally relative to a parent."""

    scale: Vector3 = field(default_factory=_unit_scale)
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)
    is_use_gltf: bool = False
    root_node_local_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    animation_local_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    parent: WorldTransform | None = None
    world_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    world_inverse_transpose_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    data: WorldTransformData = field(default_factory=WorldTransformData)

    def update(self, animation_local_matrix: Matrix4x4 | None = None) -> None:
        """Recompute the world matrices and publish them to ``data``.

        The inverse-transpose is taken of the local matrix, before the
        parent's world matrix is applied.
        """
        self.world_matrix = make_affine_matrix(self.scale, self.rotate, self.translate)
        self.world_inverse_transpose_matrix = transpose(inverse(self.world_matrix))
        if self.parent is not None:
            self.world_matrix = multiply(self.world_matrix, self.parent.world_matrix)
        if animation_local_matrix is not None:
            self.animation_local_matrix = animation_local_matrix
        self.data = WorldTransformData(
            world=self.world_matrix,
            normal=self.world_matrix,
            world_inverse_transpose=self.world_inverse_transpose_matrix,
        )

    def world_position(self) -> Vector3:
        """Return the translation part of the world matrix."""
        row = self.world_matrix.m[3]
        return Vector3(row[0], row[1], row[2])