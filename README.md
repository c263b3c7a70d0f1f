# ytengine

A small 3D math toolkit for games. It uses only the standard library.

It follows the row-vector convention. Points are rows, and a matrix is applied
on the right of the point. Rotations compose as X·(Y·Z). Affine matrices are
built as scale·(rotate·translate).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ytengine.vector`

The classes are `Vector2`, `Vector3` and `Vector4`. They are dataclasses whose
components default to zero, and all three can be iterated.

`Vector3` supports these operators:

- `+`, `-` and unary `-`.
- `*` with another vector, which works component by component, or with a
  scalar on either side.
- `/` by a scalar. Dividing by zero gives the zero vector.

The module also has these functions:

| Function | What it does |
| --- | --- |
| `add`, `subtract` | Sum and difference of two vectors. |
| `clamp(t, minimum, maximum)` | Limits `t` to the range. |
| `dot`, `cross` | Dot and cross products. |
| `length` | Length of a vector. |
| `normalize` | Unit vector. The zero vector is returned unchanged. |
| `lerp(start, end, t)` | Linear interpolation, for scalars or for `Vector3`. |
| `slerp(v1, v2, t)` | Spherical interpolation. `t` is clamped to [0, 1]. |
| `project(a, b)` | Projects `a` onto the segment from the origin to `b`. The parameter is clamped to [0, 1]. Raises `ZeroDivisionError` when `b` is zero. |

### `ytengine.matrix`

`Matrix4x4` holds four rows of four floats in `m`. Any other shape raises
`ValueError`. You can index it by row with `m[row]`, and `a @ b` multiplies two
matrices.

The module has these functions:

- `identity` and `multiply`.
- `make_scale_matrix`, `make_translate_matrix`, `make_rotate_x_matrix`,
  `make_rotate_y_matrix`, `make_rotate_z_matrix`, `make_rotate_xyz_matrix`
  and `make_affine_matrix`.
- `inverse`, which raises `ValueError` for a singular matrix.
- `transpose`.
- `make_perspective_fov_matrix`, which gives a left-handed projection, and
  `make_orthographic_matrix`.
- `transform_point`, which applies the matrix to a point and then divides by w.
  It raises `ValueError` when w is zero.
- `cot`, the cotangent.

`make_orthographic_matrix` sets its depth scale to `1 / far_clip - near_clip`.
That is the value the engine uses.

### `ytengine.quaternion`

`Quaternion(x, y, z, w)` supports unary `-` and `*`, which is the Hamilton
product.

The module has these functions:

- `multiply`, `identity`, `conjugate`, `norm` and `normalize`.
- `inverse`, which raises `ZeroDivisionError` for the zero quaternion.
- `make_rotate_axis_angle(axis, angle)`.
- `rotate_vector(vector, quaternion)`.
- `make_rotate_matrix`.
- `slerp(q0, q1, t)`. It takes the shorter arc, and it falls back to linear
  interpolation when the two quaternions are nearly equal.

### `ytengine.collision`

The shapes are `AABB(min, max)`, `OBB(center, orientation, size)` and
`Sphere(center, radius)`. An OBB's `orientation` is three axis vectors, and its
`size` is the half extents along those axes.

The tests and helpers are:

- `is_collision_aabb_point(aabb, point)`: is the point inside the box? Points
  on the boundary count as inside.
- `is_collision_obb(obb1, obb2)`: do the projections overlap on every tested
  axis? The axes tested are both boxes' axes plus three axes built from pairs
  of them.
- `test_axis`, `obb_projection` and `projection_overlap`: these are the
  projection steps that `is_collision_obb` uses.
- `separation_axis(axis, obb1, obb2)`: is `axis` a separating axis? It works on
  the vertices from `obb_vertices`.
- `obb_vertices(obb)`: the box's listed vertices in world space.
- `rotation_from_orientation(orientation)`: a matrix whose first three rows
  are the box's axes.
- `get_x_axis`, `get_y_axis`, `get_z_axis` and `get_orientations`: these read
  the first three rows of a matrix as vectors.

### `ytengine.world_transform`

The records are:

- `EulerTransform`, which is also available as `Transform`.
- `QuaternionTransform`.
- `TransformationMatrix`, holding `wvp` and `world`.
- `WorldTransformData`, holding `world`, `normal` and
  `world_inverse_transpose`.

`WorldTransform` has `scale`, `rotate` and `translate`, and an optional
`parent`. Calling `update()` does four things:

1. It builds the affine world matrix.
2. It computes the inverse-transpose of that local matrix.
3. It multiplies in the parent's world matrix, if there is a parent.
4. It publishes the results in `data`.

You can pass `update()` an animation-local matrix, and it is stored in
`animation_local_matrix`. `world_position()` returns the translation row of the
world matrix.

### `ytengine.global_variables`

`GlobalVariables(directory)` keeps named groups of items. The directory
defaults to `Resources/JsonFile/`, and each item is an `int`, a `float` or a
`Vector3`.

- `create_group(group_name)` creates a group.
- `set_value(group_name, key, value)` always sets the item, and creates the
  group if it does not exist.
- `add_item(group_name, key, value)` sets the item only if the key is new. The
  group must already exist.
- `get_int_value`, `get_float_value` and `get_vector3_value` read an item.
  They raise `KeyError` when the group or key is missing, and `TypeError` when
  the item holds a different type.
- `save_file(group_name)` writes `<directory>/<group_name>.json`, indented by
  four, and returns its path.
- `load_file(group_name)` reads one group back.
- `load_files()` loads every `.json` file in the directory. If the directory
  does not exist, it does nothing.

## Example

```python
import math
from ytengine.vector import Vector3
from ytengine import matrix, quaternion

m = matrix.make_affine_matrix(
    Vector3(1, 1, 1), Vector3(0, 0, math.pi / 2), Vector3(5, 0, 0)
)
p = matrix.transform_point(Vector3(1, 0, 0), m)   # about (5, 1, 0)

q = quaternion.make_rotate_axis_angle(Vector3(0, 0, 1), math.pi / 2)
v = quaternion.rotate_vector(Vector3(1, 0, 0), q)  # about (0, 1, 0)
```

Tuning values:

```python
from ytengine.global_variables import GlobalVariables
from ytengine.vector import Vector3

gv = GlobalVariables("Resources/JsonFile/")
gv.create_group("Player")
gv.add_item("Player", "speed", 2.5)
gv.add_item("Player", "offset", Vector3(0, 1, -3))
gv.save_file("Player")

other = GlobalVariables("Resources/JsonFile/")
other.load_files()
assert other.get_float_value("Player", "speed") == 2.5
```

## What it does not do

The package is math and data only. It does not:

- Draw anything, and it has no GPU buffers. `WorldTransform.update` only fills
  in the `data` record in memory.
- Read keyboard, mouse or gamepad input.
- Load models, textures or animation files.
- Provide an on-screen editor for the tuning values. You change them through
  `GlobalVariables` in code or by editing the JSON files.
- Provide a command-line tool.