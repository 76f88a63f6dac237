# forgemath

Small matrix and point types for graphics and game math. They have no
dependencies outside the standard library. Matrices are stored column-major,
so indexing a matrix gives you a column. Vectors are plain tuples of floats.

## Install

    pip install forgemath

## Contents

- `forgemath.mat3.Mat3` is a 3x3 matrix. It has:
  - `scaling` and the rotation constructors `rotation_x`, `rotation_y`,
    `rotation_z`, and `rotation` about an axis, which normalizes the axis first.
  - `determinant`, `minor`, `cofactor_matrix`, `adjoint`, `inverse`,
    `transpose`, `transpose_in_place` and `trace`.
  - the chainable helpers `scale`, `rotate_x`, `rotate_y`, `rotate_z` and
    `rotate`.
- `forgemath.mat4.Mat4` is a 4x4 homogeneous matrix. It has:
  - the constructors `translation`, `scaling`, `rotation_x`, `rotation_y`,
    `rotation_z`, `rotation` about an axis, `from_look_at` and `perspective`.
    `rotation` expects a unit axis.
  - `transform_point`, where w = 1, and `transform_direction`, where w = 0.
  - `minor`, which returns a `Mat3`, and `determinant`, `cofactor_matrix`,
    `adjoint`, `inverse`, `transpose`, `transpose_in_place` and `trace`.
  - the chainable helpers `translate`, `scale`, `rotate_x`, `rotate_y`,
    `rotate_z`, `rotate`, `look_at` and `p_project`.
- `forgemath.point2d.Point2D` is a 2D point (a dataclass with `x` and `y`).
  - Adding an `(x, y)` tuple moves the point. Subtracting a tuple also gives a
    new point.
  - Subtracting two points gives the vector between them as a tuple.
  - It also has `translate`, `translate_in_place`, `vector_to`, `midpoint`,
    `distance`, `lerp`, `magnitude`, `from_tuple`, `to_tuple`, `origin` and
    `one`.

Both matrix classes offer:

- `identity()` and `zero()`.
- `flip_x()`, `flip_y()` and `flip_z()`. `Mat4` also has `rh_to_lh()` and
  `y_up_to_z_up()`.
- `from_rows`, `from_cols` and `from_scalar`.
- `from_flat` / `to_flat` and `from_nested` / `to_nested`. These use
  column-major order.
- `row`, `rows`, `col`, `cols`, `set_row`, `set_col` and `set(row, col, value)`.
- `is_identity`, `is_zero` and `is_invertible`.

## Example

```python
import math
from forgemath.mat4 import Mat4

model = Mat4.identity().translate((1.0, 2.0, 3.0)).rotate_z(math.pi / 2)
print(model.transform_point((1.0, 0.0, 0.0)))

inv = model.inverse()          # None when the matrix is singular
print(inv.transform_point(model.transform_point((4.0, 5.0, 6.0))))
```

## Operators and errors

Matrices support these operators:

- `+`, `-` and unary `-`.
- `*` with a matrix, a scalar or a vector tuple. `Mat4` times a 3-tuple
  transforms it as a point.
- `/` by a scalar or by an invertible matrix.

Errors are reported as follows:

- Dividing by zero, or by a zero matrix, raises `ZeroDivisionError`.
- Dividing by any other singular matrix raises `ValueError`.
- Out-of-range row and column indices raise `IndexError`.
- `Mat4.perspective` raises `ValueError` in any of these cases:
  - a field of view, aspect ratio or near plane that is not positive;
  - a far plane that is not beyond the near plane.

## What is not included

- There is no 2x2 matrix type.
- There is no separate vector class. Vectors are tuples.

## Tests

    pip install -e .[test]
    pytest