import math

import pytest

from forgemath.mat3 import Mat3

PI = math.pi
ZERO = (0.0, 0.0, 0.0)


def _seq():
    return Mat3.from_cols((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))


def _singular():
    return Mat3.from_rows((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))


def test_constructors():
    assert Mat3() == Mat3.identity()
    from_rows = Mat3.from_rows((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    from_cols = Mat3.from_cols((1.0, 4.0, 7.0), (2.0, 5.0, 8.0), (3.0, 6.0, 9.0))
    assert from_rows == from_cols


def test_constants():
    identity = Mat3.identity()
    assert identity.to_nested() == ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    assert Mat3.zero().to_nested() == (ZERO, ZERO, ZERO)
    flip_x = Mat3.flip_x()
    assert flip_x.col(0) == (-1.0, 0.0, 0.0)
    assert flip_x.col(1) == (0.0, 1.0, 0.0)
    assert flip_x.col(2) == (0.0, 0.0, 1.0)
    assert Mat3.flip_z().col(2) == (0.0, 0.0, -1.0)


def test_transformation_constructors():
    scale = Mat3.scaling((2.0, 3.0, 4.0))
    expected = Mat3.from_cols((2.0, 0.0, 0.0), (0.0, 3.0, 0.0), (0.0, 0.0, 4.0))
    assert scale == expected

    x, y, z = Mat3.rotation_x(PI / 2.0) * (1.0, 1.0, 0.0)
    assert x == pytest.approx(1.0, abs=1e-6)
    assert y == pytest.approx(0.0, abs=1e-6)
    assert z == pytest.approx(1.0, abs=1e-6)

    x, y, z = Mat3.rotation_y(PI / 2.0) * (1.0, 0.0, 1.0)
    assert x == pytest.approx(1.0, abs=1e-6)
    assert y == pytest.approx(0.0, abs=1e-6)
    assert z == pytest.approx(-1.0, abs=1e-6)

    x, y, z = Mat3.rotation_z(PI / 2.0) * (1.0, 0.0, 1.0)
    assert x == pytest.approx(0.0, abs=1e-6)
    assert y == pytest.approx(1.0, abs=1e-6)
    assert z == pytest.approx(1.0, abs=1e-6)


def test_arbitrary_axis_rotation():
    angle = PI / 4.0
    result_axis = Mat3.rotation((0.0, 0.0, 1.0), angle) * (1.0, 0.0, 0.0)
    result_z = Mat3.rotation_z(angle) * (1.0, 0.0, 0.0)
    assert result_axis == pytest.approx(result_z, abs=1e-6)


def test_rotation_normalizes_axis():
    scaled = Mat3.rotation((0.0, 0.0, 5.0), PI / 3.0)
    unit = Mat3.rotation_z(PI / 3.0)
    assert scaled.to_flat() == pytest.approx(unit.to_flat(), abs=1e-9)


def test_conversions():
    mat = _seq()
    flat = mat.to_flat()
    expected = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    assert flat == expected
    assert Mat3.from_flat(expected) == mat

    nested = mat.to_nested()
    expected_2d = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    assert nested == expected_2d
    assert Mat3.from_nested(expected_2d) == mat

    assert Mat3(*mat.cols()) == mat

    expected_scalar = Mat3.from_cols((5.0, 5.0, 5.0), (5.0, 5.0, 5.0), (5.0, 5.0, 5.0))
    assert Mat3.from_scalar(5.0) == expected_scalar


def test_from_flat_wrong_length():
    with pytest.raises(ValueError):
        Mat3.from_flat([1.0, 2.0])


def test_accessors():
    mat = _seq()
    assert mat.col(0) == (1.0, 2.0, 3.0)
    assert mat.col(1) == (4.0, 5.0, 6.0)
    assert mat.col(2) == (7.0, 8.0, 9.0)
    assert mat.cols() == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))

    assert mat.row(0) == (1.0, 4.0, 7.0)
    assert mat.row(1) == (2.0, 5.0, 8.0)
    assert mat.row(2) == (3.0, 6.0, 9.0)
    assert mat.rows() == ((1.0, 4.0, 7.0), (2.0, 5.0, 8.0), (3.0, 6.0, 9.0))


def test_setters():
    mat = Mat3.zero()
    mat.set_col(0, (1.0, 2.0, 3.0))
    mat.set_col(1, (4.0, 5.0, 6.0))
    mat.set_col(2, (7.0, 8.0, 9.0))
    assert mat.col(0) == (1.0, 2.0, 3.0)
    assert mat.col(1) == (4.0, 5.0, 6.0)
    assert mat.col(2) == (7.0, 8.0, 9.0)

    mat2 = Mat3.zero()
    mat2.set_row(0, (1.0, 4.0, 7.0))
    mat2.set_row(1, (2.0, 5.0, 8.0))
    mat2.set_row(2, (3.0, 6.0, 9.0))
    assert mat == mat2

    mat3 = Mat3.zero()
    mat3.set(0, 0, 1.0)
    mat3.set(1, 1, 2.0)
    mat3.set(2, 2, 3.0)
    assert mat3.col(0)[0] == 1.0
    assert mat3.col(1)[1] == 2.0
    assert mat3.col(2)[2] == 3.0


def test_indexing():
    mat = _seq()
    assert mat[0] == (1.0, 2.0, 3.0)
    assert mat[1] == (4.0, 5.0, 6.0)
    assert mat[2] == (7.0, 8.0, 9.0)
    mat[0] = (10.0, 11.0, 12.0)
    assert mat[0] == (10.0, 11.0, 12.0)


def test_matrix_addition():
    a = _seq()
    b = Mat3.from_cols((9.0, 8.0, 7.0), (6.0, 5.0, 4.0), (3.0, 2.0, 1.0))
    expected = Mat3.from_scalar(10.0)
    assert a + b == expected
    a += b
    assert a == expected


def test_matrix_subtraction():
    a = Mat3.from_scalar(10.0)
    b = _seq()
    expected = Mat3.from_cols((9.0, 8.0, 7.0), (6.0, 5.0, 4.0), (3.0, 2.0, 1.0))
    assert a - b == expected
    a -= b
    assert a == expected


def test_matrix_multiplication():
    a = Mat3.from_rows((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    b = Mat3.from_rows((9.0, 8.0, 7.0), (6.0, 5.0, 4.0), (3.0, 2.0, 1.0))
    expected = Mat3.from_rows(
        (30.0, 24.0, 18.0), (84.0, 69.0, 54.0), (138.0, 114.0, 90.0)
    )
    assert a * b == expected
    assert a * Mat3.identity() == a
    a_mut = Mat3.from_cols(*a.cols())
    a_mut *= Mat3.identity()
    assert a_mut == a


def test_matrix_vector_multiplication():
    mat = Mat3.from_rows((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    vec = (1.0, 2.0, 3.0)
    assert mat * vec == (14.0, 32.0, 50.0)
    assert Mat3.identity() * vec == vec
    vec_mut = vec
    vec_mut *= Mat3.identity()
    assert vec_mut == vec


def test_scalar_multiplication():
    mat = _seq()
    expected = Mat3.from_cols((2.0, 4.0, 6.0), (8.0, 10.0, 12.0), (14.0, 16.0, 18.0))
    assert mat * 2.0 == expected
    assert 2.0 * mat == expected
    mat *= 2.0
    assert mat == expected


def test_scalar_division():
    mat = Mat3.from_cols((2.0, 4.0, 6.0), (8.0, 10.0, 12.0), (14.0, 16.0, 18.0))
    expected = _seq()
    assert mat / 2.0 == expected
    mat /= 2.0
    assert mat == expected


def test_scalar_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero in Mat3 division"):
        Mat3.identity() / 0.0


def test_matrix_division_by_zero_matrix():
    with pytest.raises(ZeroDivisionError, match="Division by zero in Mat3 division"):
        Mat3.identity() / Mat3.zero()


def test_matrix_division_by_singular_matrix():
    with pytest.raises(ValueError):
        Mat3.identity() / _singular()


def test_matrix_division():
    a = Mat3.identity()
    b = Mat3.scaling((2.0, 3.0, 4.0))
    b_inv = b.inverse()
    assert b_inv is not None
    result = a / b
    expected = a * b_inv
    assert result.to_flat() == pytest.approx(expected.to_flat(), abs=1e-6)


def test_negation():
    mat = Mat3.from_cols((1.0, -2.0, 3.0), (-4.0, 5.0, -6.0), (7.0, -8.0, 9.0))
    expected = Mat3.from_cols((-1.0, 2.0, -3.0), (4.0, -5.0, 6.0), (-7.0, 8.0, -9.0))
    assert -mat == expected


def test_determinant():
    assert Mat3.identity().determinant() == 1.0
    assert _singular().determinant() == 0.0
    mat2 = Mat3.from_rows((1.0, 0.0, 2.0), (0.0, 1.0, 3.0), (1.0, 2.0, 1.0))
    assert mat2.determinant() == -7.0


def test_minor():
    mat = _singular()
    assert mat.minor(0, 0) == -3.0
    assert mat.minor(1, 1) == -12.0


def test_minor_out_of_bounds():
    with pytest.raises(IndexError):
        Mat3.identity().minor(3, 0)


def test_cofactor_and_adjoint():
    mat = Mat3.from_rows((1.0, 0.0, 2.0), (0.0, 1.0, 3.0), (1.0, 2.0, 1.0))
    product = mat * mat.adjoint()
    assert product.to_flat() == pytest.approx((mat.determinant() * Mat3.identity()).to_flat())
    assert mat.cofactor_matrix().transpose() == mat.adjoint()


def test_transpose():
    mat = _singular()
    transposed = mat.transpose()
    expected = _seq()
    assert transposed == expected

    mat_mut = Mat3.from_cols(*mat.cols())
    returned = mat_mut.transpose_in_place()
    assert mat_mut == expected
    assert returned is mat_mut

    assert transposed.transpose() == mat


def test_inverse():
    assert Mat3.identity().inverse() == Mat3.identity()

    scale = Mat3.scaling((2.0, 3.0, 4.0))
    scale_inv = scale.inverse()
    expected_inv = Mat3.scaling((0.5, 1.0 / 3.0, 0.25))
    assert scale_inv.to_flat() == pytest.approx(expected_inv.to_flat(), abs=1e-6)

    result = scale * scale_inv
    assert result.to_flat() == pytest.approx(Mat3.identity().to_flat(), abs=1e-6)

    assert _singular().inverse() is None


def test_trace():
    assert _singular().trace() == 15.0
    assert Mat3.identity().trace() == 3.0
    assert Mat3.zero().trace() == 0.0


def test_utility_operations():
    assert Mat3.identity().is_identity()
    assert not Mat3.zero().is_identity()
    assert Mat3.zero().is_zero()
    assert not Mat3.identity().is_zero()
    assert Mat3.identity().is_invertible()
    assert not _singular().is_invertible()


def test_chainable_operations():
    result = Mat3.identity().scale((2.0, 2.0, 2.0)).rotate_z(PI / 2.0)
    x, y, z = result * (1.0, 0.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-6)
    assert y == pytest.approx(2.0, abs=1e-6)
    assert z == pytest.approx(0.0, abs=1e-6)


def test_rotate_helpers_match_constructors():
    base = Mat3.scaling((1.0, 2.0, 3.0))
    assert base.rotate_x(0.3) == base * Mat3.rotation_x(0.3)
    assert base.rotate_y(0.3) == base * Mat3.rotation_y(0.3)
    assert base.rotate((1.0, 1.0, 0.0), 0.3) == base * Mat3.rotation((1.0, 1.0, 0.0), 0.3)


def test_default():
    assert Mat3() == Mat3.identity()


def test_out_of_bounds_access():
    with pytest.raises(IndexError):
        Mat3.identity()[3]


def test_out_of_bounds_set():
    with pytest.raises(IndexError):
        Mat3.identity().set(3, 0, 1.0)


def test_out_of_bounds_row():
    with pytest.raises(IndexError):
        Mat3.identity().row(3)


def test_out_of_bounds_col_set():
    with pytest.raises(IndexError):
        Mat3.identity().set_col(3, ZERO)