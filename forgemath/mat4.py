"""A 4x4 matrix of floats stored column by column, for 3D transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Sequence

from forgemath.mat3 import Mat3

Vector3 = tuple[float, float, float]
Vector4 = tuple[float, float, float, float]

_SIZE = 4
_EPSILON = 1e-6
_DIV_ZERO = "Division by zero in Matrix4 division"


def _vec(values: Iterable[float], size: int = _SIZE) -> tuple[float, ...]:
    items = tuple(float(v) for v in values)
    if len(items) != size:
        raise ValueError(f"expected {size} components, got {len(items)}")
    return items


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _sub3(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Sequence[float], b: Sequence[float]) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(v: Sequence[float]) -> Vector3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        return (v[0], v[1], v[2])
    return (v[0] / length, v[1] / length, v[2] / length)


def _check_index(i: int, kind: str) -> None:
    if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < _SIZE:
        raise IndexError(f"{kind} index {i} out of bounds (0..{_SIZE})")


class Mat4:
    """A 4x4 matrix; indexing yields columns, vectors are tuples of floats."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        col0: Iterable[float] = (1.0, 0.0, 0.0, 0.0),
        col1: Iterable[float] = (0.0, 1.0, 0.0, 0.0),
        col2: Iterable[float] = (0.0, 0.0, 1.0, 0.0),
        col3: Iterable[float] = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        self._cols: list[Vector4] = [_vec(col0), _vec(col1), _vec(col2), _vec(col3)]  # type: ignore[list-item]

    # Constructors

    @classmethod
    def from_rows(cls, row1, row2, row3, row4) -> Mat4:
        return cls(*zip(_vec(row1), _vec(row2), _vec(row3), _vec(row4)))

    @classmethod
    def from_cols(cls, col1, col2, col3, col4) -> Mat4:
        return cls(col1, col2, col3, col4)

    @classmethod
    def from_mul(cls, one: Mat4, other: Mat4) -> Mat4:
        rows = one.rows()
        return cls(*(tuple(_dot(row, col) for row in rows) for col in other.cols()))

    @classmethod
    def from_scalar(cls, value: float) -> Mat4:
        return cls(*((value,) * _SIZE for _ in range(_SIZE)))

    @classmethod
    def from_flat(cls, values: Iterable[float]) -> Mat4:
        """Build from sixteen values in column-major order."""
        items = [float(v) for v in values]
        if len(items) != _SIZE * _SIZE:
            raise ValueError(f"expected {_SIZE * _SIZE} values, got {len(items)}")
        return cls(*(items[i : i + _SIZE] for i in range(0, _SIZE * _SIZE, _SIZE)))

    @classmethod
    def from_nested(cls, arr: Iterable[Iterable[float]]) -> Mat4:
        """Build from nested sequences indexed as arr[col][row]."""
        cols = [_vec(c) for c in arr]
        if len(cols) != _SIZE:
            raise ValueError(f"expected {_SIZE} columns, got {len(cols)}")
        return cls(*cols)

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @classmethod
    def zero(cls) -> Mat4:
        return cls.from_scalar(0.0)

    @classmethod
    def flip_x(cls) -> Mat4:
        return cls.scaling((-1.0, 1.0, 1.0))

    @classmethod
    def flip_y(cls) -> Mat4:
        return cls.scaling((1.0, -1.0, 1.0))

    @classmethod
    def flip_z(cls) -> Mat4:
        return cls.scaling((1.0, 1.0, -1.0))

    @classmethod
    def rh_to_lh(cls) -> Mat4:
        return cls.flip_z()

    @classmethod
    def y_up_to_z_up(cls) -> Mat4:
        return cls(
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 0.0, -1.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    # Transformation constructors

    @classmethod
    def translation(cls, translation: Iterable[float]) -> Mat4:
        tx, ty, tz = _vec(translation, 3)
        return cls(
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (tx, ty, tz, 1.0),
        )

    @classmethod
    def scaling(cls, scaling: Iterable[float]) -> Mat4:
        sx, sy, sz = _vec(scaling, 3)
        return cls(
            (sx, 0.0, 0.0, 0.0),
            (0.0, sy, 0.0, 0.0),
            (0.0, 0.0, sz, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (1.0, 0.0, 0.0, 0.0),
            (0.0, c, s, 0.0),
            (0.0, -s, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (c, 0.0, -s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls(
            (c, s, 0.0, 0.0),
            (-s, c, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def rotation(cls, axis: Iterable[float], angle: float) -> Mat4:
        """Rotation by angle radians about axis, which should be a unit vector."""
        x, y, z = _vec(axis, 3)
        c, s = math.cos(angle), math.sin(angle)
        t = 1.0 - c
        return cls(
            (c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0),
            (y * x * t - z * s, c + y * y * t, y * z * t + x * s, 0.0),
            (z * x * t + y * s, z * y * t - x * s, c + z * z * t, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def from_look_at(cls, eye, target, up) -> Mat4:
        eye, target, up = _vec(eye, 3), _vec(target, 3), _vec(up, 3)
        z_axis = _normalized(_sub3(eye, target))
        x_axis = _normalized(_cross(up, z_axis))
        y_axis = _cross(z_axis, x_axis)
        return cls(
            (*x_axis, 0.0),
            (*y_axis, 0.0),
            (*z_axis, 0.0),
            (-_dot(x_axis, eye), -_dot(y_axis, eye), -_dot(z_axis, eye), 1.0),
        )

    @classmethod
    def perspective(cls, fov_y: float, aspect: float, near: float, far: float) -> Mat4:
        """Perspective projection; fov_y in radians, aspect is width / height."""
        if not fov_y > 0.0:
            raise ValueError("Field of view must be positive")
        if not aspect > 0.0:
            raise ValueError("Aspect ratio must be positive")
        if not near > 0.0:
            raise ValueError("Near plane must be positive")
        if not far > near:
            raise ValueError("Far plane must be greater than near plane")

        f = 1.0 / math.tan(fov_y / 2.0)
        z_range = near - far
        a = (far + near) / z_range
        b = (2.0 * far * near) / z_range
        return cls(
            (f / aspect, 0.0, 0.0, 0.0),
            (0.0, f, 0.0, 0.0),
            (0.0, 0.0, a, b),
            (0.0, 0.0, -1.0, 0.0),
        )

    # Conversions

    def to_flat(self) -> tuple[float, ...]:
        """Return the sixteen values in column-major order."""
        return tuple(v for col in self._cols for v in col)

    def to_nested(self) -> tuple[Vector4, ...]:
        """Return the columns as nested tuples, indexed [col][row]."""
        return tuple(self._cols)

    # Accessors

    def cols(self) -> tuple[Vector4, ...]:
        return tuple(self._cols)

    def col(self, i: int) -> Vector4:
        _check_index(i, "Col")
        return self._cols[i]

    def rows(self) -> tuple[Vector4, ...]:
        return tuple(zip(*self._cols))  # type: ignore[return-value]

    def row(self, i: int) -> Vector4:
        _check_index(i, "Row")
        return tuple(col[i] for col in self._cols)  # type: ignore[return-value]

    def set_col(self, i: int, col: Iterable[float]) -> None:
        _check_index(i, "Col")
        self._cols[i] = _vec(col)  # type: ignore[assignment]

    def set_row(self, i: int, row: Iterable[float]) -> None:
        _check_index(i, "Row")
        for c, value in enumerate(_vec(row)):
            column = list(self._cols[c])
            column[i] = value
            self._cols[c] = tuple(column)  # type: ignore[assignment]

    def set(self, row: int, col: int, value: float) -> None:
        """Set the element at the given row and column."""
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"Index out of bounds for Matrix4: ({row}, {col})")
        column = list(self._cols[col])
        column[row] = float(value)
        self._cols[col] = tuple(column)  # type: ignore[assignment]

    def __getitem__(self, index: int) -> Vector4:
        _check_index(index, "Col")
        return self._cols[index]

    def __setitem__(self, index: int, value: Iterable[float]) -> None:
        self.set_col(index, value)

    def __iter__(self):
        return iter(self._cols)

    def __repr__(self) -> str:
        return "Mat4({!r}, {!r}, {!r}, {!r})".format(*self._cols)

    # Arithmetic

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._cols == other._cols

    def __add__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(*(tuple(x + y for x, y in zip(a, b)) for a, b in zip(self._cols, other._cols)))

    def __sub__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(*(tuple(x - y for x, y in zip(a, b)) for a, b in zip(self._cols, other._cols)))

    def _scaled(self, scalar: float) -> Mat4:
        return Mat4(*(tuple(v * scalar for v in c) for c in self._cols))

    def _apply(self, vec: Sequence[float]) -> Vector4:
        return tuple(_dot(row, vec) for row in self.rows())  # type: ignore[return-value]

    def __mul__(self, other):
        if isinstance(other, Mat4):
            return Mat4.from_mul(self, other)
        if isinstance(other, Real):
            return self._scaled(float(other))
        if isinstance(other, (tuple, list)):
            if len(other) == 3:
                return self.transform_point(other)
            return self._apply(_vec(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scaled(float(other))
        if isinstance(other, (tuple, list)):
            # A vector multiplied in place by a matrix becomes matrix * vector.
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Mat4):
            if other.is_zero():
                raise ZeroDivisionError(_DIV_ZERO)
            inverse = other.inverse()
            if inverse is None:
                raise ValueError("matrix is not invertible")
            return self * inverse
        if isinstance(other, Real):
            if other == 0:
                raise ZeroDivisionError(_DIV_ZERO)
            return Mat4(*(tuple(v / other for v in c) for c in self._cols))
        return NotImplemented

    def __neg__(self) -> Mat4:
        return Mat4(*(tuple(-v for v in c) for c in self._cols))

    # Matrix - vector operations

    def transform_point(self, point: Iterable[float]) -> Vector3:
        """Transform a point (w = 1), so translation applies."""
        x, y, z, _ = self._apply((*_vec(point, 3), 1.0))
        return (x, y, z)

    def transform_direction(self, direction: Iterable[float]) -> Vector3:
        """Transform a direction (w = 0), so translation is ignored."""
        x, y, z, _ = self._apply((*_vec(direction, 3), 0.0))
        return (x, y, z)

    # Matrix operations

    def minor(self, row: int, col: int) -> Mat3:
        """The 3x3 matrix left after removing row and col."""
        _check_index(row, "Row")
        _check_index(col, "Col")
        sub_rows = [
            tuple(self._cols[j][i] for j in range(_SIZE) if j != col)
            for i in range(_SIZE)
            if i != row
        ]
        return Mat3(*sub_rows)

    def determinant(self) -> float:
        row0 = self.row(0)
        return sum(
            (1.0 if j % 2 == 0 else -1.0) * row0[j] * self.minor(0, j).determinant()
            for j in range(_SIZE)
        )

    def cofactor_matrix(self) -> Mat4:
        cofactor = Mat4.zero()
        for i in range(_SIZE):
            for j in range(_SIZE):
                sign = 1.0 if (i + j) % 2 == 0 else -1.0
                cofactor.set(i, j, sign * self.minor(i, j).determinant())
        return cofactor

    def adjoint(self) -> Mat4:
        return self.cofactor_matrix().transpose()

    def inverse(self) -> Mat4 | None:
        """Return the inverse, or None when the matrix is singular."""
        det = self.determinant()
        if abs(det) < _EPSILON:
            return None
        return self.adjoint() / det

    def transpose(self) -> Mat4:
        return Mat4(*self.rows())

    def transpose_in_place(self) -> Mat4:
        self._cols = list(self.rows())
        return self

    def trace(self) -> float:
        return sum(self._cols[i][i] for i in range(_SIZE))

    def is_identity(self) -> bool:
        return self == Mat4.identity()

    def is_zero(self) -> bool:
        return all(v == 0.0 for col in self._cols for v in col)

    def is_invertible(self) -> bool:
        return abs(self.determinant()) > _EPSILON

    # Chainable composition

    def translate(self, translation: Iterable[float]) -> Mat4:
        return self * Mat4.translation(translation)

    def scale(self, scaling: Iterable[float]) -> Mat4:
        return self * Mat4.scaling(scaling)

    def rotate_x(self, angle: float) -> Mat4:
        return self * Mat4.rotation_x(angle)

    def rotate_y(self, angle: float) -> Mat4:
        return self * Mat4.rotation_y(angle)

    def rotate_z(self, angle: float) -> Mat4:
        return self * Mat4.rotation_z(angle)

    def rotate(self, axis: Iterable[float], angle: float) -> Mat4:
        return self * Mat4.rotation(axis, angle)

    def look_at(self, eye, target, up) -> Mat4:
        return self * Mat4.from_look_at(eye, target, up)

    def p_project(self, fov_y: float, aspect: float, near: float, far: float) -> Mat4:
        return self * Mat4.perspective(fov_y, aspect, near, far)