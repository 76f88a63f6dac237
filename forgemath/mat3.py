"""A 3x3 matrix of floats stored column by column."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Sequence

Vector3 = tuple[float, float, float]

_SIZE = 3
_EPSILON = 1e-6
_DIV_ZERO = "Division by zero in Mat3 division"


def _vec(values: Iterable[float]) -> Vector3:
    items = tuple(float(v) for v in values)
    if len(items) != _SIZE:
        raise ValueError(f"expected {_SIZE} components, got {len(items)}")
    return items  # type: ignore[return-value]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _normalized(v: Vector3) -> Vector3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        return v
    return (v[0] / length, v[1] / length, v[2] / length)


def _check_index(i: int, kind: str) -> None:
    if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < _SIZE:
        raise IndexError(f"{kind} index {i} out of bounds (0..{_SIZE})")


class Mat3:
    """A 3x3 matrix; indexing yields columns, vectors are (x, y, z) tuples."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        col0: Iterable[float] = (1.0, 0.0, 0.0),
        col1: Iterable[float] = (0.0, 1.0, 0.0),
        col2: Iterable[float] = (0.0, 0.0, 1.0),
    ) -> None:
        self._cols: list[Vector3] = [_vec(col0), _vec(col1), _vec(col2)]

    # Constructors

    @classmethod
    def from_rows(cls, row1: Iterable[float], row2: Iterable[float], row3: Iterable[float]) -> Mat3:
        return cls(*zip(_vec(row1), _vec(row2), _vec(row3)))

    @classmethod
    def from_cols(cls, col1: Iterable[float], col2: Iterable[float], col3: Iterable[float]) -> Mat3:
        return cls(col1, col2, col3)

    @classmethod
    def from_mul(cls, one: Mat3, other: Mat3) -> Mat3:
        rows = one.rows()
        return cls(*(tuple(_dot(row, col) for row in rows) for col in other.cols()))

    @classmethod
    def from_scalar(cls, value: float) -> Mat3:
        return cls((value,) * 3, (value,) * 3, (value,) * 3)

    @classmethod
    def from_flat(cls, values: Iterable[float]) -> Mat3:
        """Build from nine values in column-major order."""
        items = [float(v) for v in values]
        if len(items) != _SIZE * _SIZE:
            raise ValueError(f"expected {_SIZE * _SIZE} values, got {len(items)}")
        return cls(items[0:3], items[3:6], items[6:9])

    @classmethod
    def from_nested(cls, arr: Iterable[Iterable[float]]) -> Mat3:
        """Build from nested sequences indexed as arr[col][row]."""
        cols = [_vec(c) for c in arr]
        if len(cols) != _SIZE:
            raise ValueError(f"expected {_SIZE} columns, got {len(cols)}")
        return cls(*cols)

    @classmethod
    def identity(cls) -> Mat3:
        return cls((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))

    @classmethod
    def zero(cls) -> Mat3:
        return cls((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    @classmethod
    def flip_x(cls) -> Mat3:
        return cls((-1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))

    @classmethod
    def flip_y(cls) -> Mat3:
        return cls((1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, 1.0))

    @classmethod
    def flip_z(cls) -> Mat3:
        return cls((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, -1.0))

    # Transformation constructors

    @classmethod
    def scaling(cls, scaling: Iterable[float]) -> Mat3:
        sx, sy, sz = _vec(scaling)
        return cls((sx, 0.0, 0.0), (0.0, sy, 0.0), (0.0, 0.0, sz))

    @classmethod
    def rotation_x(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls((1.0, 0.0, 0.0), (0.0, c, s), (0.0, -s, c))

    @classmethod
    def rotation_y(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls((c, 0.0, -s), (0.0, 1.0, 0.0), (s, 0.0, c))

    @classmethod
    def rotation_z(cls, angle: float) -> Mat3:
        c, s = math.cos(angle), math.sin(angle)
        return cls((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))

    @classmethod
    def rotation(cls, axis: Iterable[float], angle: float) -> Mat3:
        """Rotation by angle radians about the (normalized) axis."""
        x, y, z = _normalized(_vec(axis))
        c, s = math.cos(angle), math.sin(angle)
        t = 1.0 - c
        return cls(
            (c + x * x * t, x * y * t + z * s, x * z * t - y * s),
            (y * x * t - z * s, c + y * y * t, y * z * t + x * s),
            (z * x * t + y * s, z * y * t - x * s, c + z * z * t),
        )

    # Conversions

    def to_flat(self) -> tuple[float, ...]:
        """Return the nine values in column-major order."""
        return tuple(v for col in self._cols for v in col)

    def to_nested(self) -> tuple[Vector3, ...]:
        """Return the columns as nested tuples, indexed [col][row]."""
        return tuple(self._cols)

    # Accessors

    def cols(self) -> tuple[Vector3, ...]:
        return tuple(self._cols)

    def col(self, i: int) -> Vector3:
        _check_index(i, "Col")
        return self._cols[i]

    def rows(self) -> tuple[Vector3, ...]:
        return tuple(zip(*self._cols))  # type: ignore[return-value]

    def row(self, i: int) -> Vector3:
        _check_index(i, "Row")
        return tuple(col[i] for col in self._cols)  # type: ignore[return-value]

    def set_col(self, i: int, col: Iterable[float]) -> None:
        _check_index(i, "Col")
        self._cols[i] = _vec(col)

    def set_row(self, i: int, row: Iterable[float]) -> None:
        _check_index(i, "Row")
        for c, value in enumerate(_vec(row)):
            column = list(self._cols[c])
            column[i] = value
            self._cols[c] = _vec(column)

    def set(self, row: int, col: int, value: float) -> None:
        """Set the element at the given row and column."""
        if not (0 <= row < _SIZE and 0 <= col < _SIZE):
            raise IndexError(f"Index out of bounds for Mat3: ({row}, {col})")
        column = list(self._cols[col])
        column[row] = float(value)
        self._cols[col] = _vec(column)

    def __getitem__(self, index: int) -> Vector3:
        _check_index(index, "Col")
        return self._cols[index]

    def __setitem__(self, index: int, value: Iterable[float]) -> None:
        self.set_col(index, value)

    def __iter__(self):
        return iter(self._cols)

    def __repr__(self) -> str:
        return "Mat3({!r}, {!r}, {!r})".format(*self._cols)

    # Arithmetic

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return self._cols == other._cols

    def __add__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(tuple(x + y for x, y in zip(a, b)) for a, b in zip(self._cols, other._cols)))

    def __sub__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(tuple(x - y for x, y in zip(a, b)) for a, b in zip(self._cols, other._cols)))

    def _scaled(self, scalar: float) -> Mat3:
        return Mat3(*(tuple(v * scalar for v in c) for c in self._cols))

    def __mul__(self, other):
        if isinstance(other, Mat3):
            return Mat3.from_mul(self, other)
        if isinstance(other, Real):
            return self._scaled(float(other))
        if isinstance(other, (tuple, list)):
            vec = _vec(other)
            return tuple(_dot(row, vec) for row in self.rows())
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scaled(float(other))
        if isinstance(other, (tuple, list)):
            # A vector multiplied in place by a matrix becomes matrix * vector.
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Mat3):
            if other.is_zero():
                raise ZeroDivisionError(_DIV_ZERO)
            inverse = other.inverse()
            if inverse is None:
                raise ValueError("matrix is not invertible")
            return self * inverse
        if isinstance(other, Real):
            if other == 0:
                raise ZeroDivisionError(_DIV_ZERO)
            return Mat3(*(tuple(v / other for v in c) for c in self._cols))
        return NotImplemented

    def __neg__(self) -> Mat3:
        return Mat3(*(tuple(-v for v in c) for c in self._cols))

    # Matrix operations

    def determinant(self) -> float:
        (a0, a1, a2), (b0, b1, b2), (c0, c1, c2) = self._cols
        return (
            a0 * (b1 * c2 - b2 * c1)
            - a1 * (b0 * c2 - b2 * c0)
            + a2 * (b0 * c1 - b1 * c0)
        )

    def minor(self, row: int, col: int) -> float:
        """Determinant of the 2x2 matrix left after removing row and col."""
        _check_index(row, "Row")
        _check_index(col, "Col")
        a, b, c, d = (
            self._cols[j][i]
            for i in range(_SIZE)
            if i != row
            for j in range(_SIZE)
            if j != col
        )
        return a * d - b * c

    def cofactor_matrix(self) -> Mat3:
        cofactor = Mat3.zero()
        for i in range(_SIZE):
            for j in range(_SIZE):
                sign = 1.0 if (i + j) % 2 == 0 else -1.0
                cofactor.set(i, j, sign * self.minor(i, j))
        return cofactor

    def adjoint(self) -> Mat3:
        return self.cofactor_matrix().transpose()

    def inverse(self) -> Mat3 | None:
        """Return the inverse, or None when the matrix is singular."""
        det = self.determinant()
        if abs(det) < _EPSILON:
            return None
        return self.adjoint() / det

    def transpose(self) -> Mat3:
        return Mat3(*self.rows())

    def transpose_in_place(self) -> Mat3:
        self._cols = list(self.rows())
        return self

    def trace(self) -> float:
        return self._cols[0][0] + self._cols[1][1] + self._cols[2][2]

    def is_identity(self) -> bool:
        return self == Mat3.identity()

    def is_zero(self) -> bool:
        return all(v == 0.0 for col in self._cols for v in col)

    def is_invertible(self) -> bool:
        return abs(self.determinant()) > _EPSILON

    # Chainable composition

    def scale(self, scaling: Iterable[float]) -> Mat3:
        return self * Mat3.scaling(scaling)

    def rotate_x(self, angle: float) -> Mat3:
        return self * Mat3.rotation_x(angle)

    def rotate_y(self, angle: float) -> Mat3:
        return self * Mat3.rotation_y(angle)

    def rotate_z(self, angle: float) -> Mat3:
        return self * Mat3.rotation_z(angle)

    def rotate(self, axis: Iterable[float], angle: float) -> Mat3:
        return self * Mat3.rotation(axis, angle)