"""
Tests for elementwise and linear operations: trace, transpose, add,
multiply, equality and hashing.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pymatrix import DimensionMismatchError, Matrix, NotSquareError, ValidationError


class TestSquareAndTrace:

    def test_is_square(self, basic_4x3, singular_3x3):
        assert not basic_4x3.is_square()
        assert singular_3x3.is_square()

    def test_trace(self, singular_3x3):
        assert singular_3x3.trace() == 15.0

    def test_trace_is_real_valued(self):
        assert Matrix([[0.5, 1], [1, 0.25]]).trace() == 0.75

    def test_trace_not_square(self, basic_4x3):
        with pytest.raises(NotSquareError, match="trace") as exc_info:
            basic_4x3.trace()
        assert exc_info.value.shape == (4, 3)


class TestTranspose:

    def test_transpose(self, basic_4x3):
        expected = Matrix([[1, 4, 7, 10], [2, 5, 8, 11], [3, 6, 9, 12]])
        assert basic_4x3.transpose() == expected

    def test_one_element(self):
        one = Matrix([[4]])
        assert one.transpose() == one

    def test_row_to_column(self):
        assert Matrix([1, 2, 3]).transpose().shape == (3, 1)

    def test_result_is_independent(self):
        row = Matrix([1, 2, 3])
        col = row.transpose()
        col.set_entry(1, 1, 9.0)
        assert row.get(1, 1) == 1.0


class TestAdd:

    def test_add(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[10, 20], [30, 40]])
        assert a.add(b) == Matrix([[11, 22], [33, 44]])

    def test_operator(self):
        a = Matrix([[1, 2]])
        assert a + a == Matrix([[2, 4]])

    def test_does_not_mutate(self):
        a = Matrix([[1, 2]])
        b = Matrix([[3, 4]])
        a.add(b)
        assert a == Matrix([[1, 2]])
        assert b == Matrix([[3, 4]])

    def test_shape_mismatch(self, basic_4x3):
        with pytest.raises(DimensionMismatchError, match="add") as exc_info:
            basic_4x3.add(basic_4x3.transpose())
        assert exc_info.value.left_shape == (4, 3)
        assert exc_info.value.right_shape == (3, 4)

    def test_operator_with_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix([[1]]) + 1


class TestMatrixProduct:

    def test_matrix_vector(self, basic_4x3):
        ones = Matrix([[1], [1], [1]])
        assert basic_4x3.multiply(ones) == Matrix([[6], [15], [24], [33]])

    def test_matmul_operator(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[0, 1], [1, 0]])
        assert a @ b == Matrix([[2, 1], [4, 3]])

    def test_product_is_real_valued(self):
        a = Matrix([[0.5, 0.25]])
        b = Matrix([[1], [1]])
        assert a.multiply(b).get(1, 1) == 0.75

    def test_identity_is_neutral(self, basic_4x3):
        assert basic_4x3 @ Matrix.identity(3) == basic_4x3
        assert Matrix.identity(4) @ basic_4x3 == basic_4x3

    def test_inner_dimension_mismatch(self, basic_4x3):
        with pytest.raises(DimensionMismatchError, match="multiply"):
            basic_4x3.multiply(basic_4x3)

    def test_star_between_matrices_unsupported(self):
        a = Matrix([[1]])
        with pytest.raises(TypeError):
            a * a


class TestScalarMultiply:

    def test_scale(self, basic_4x3):
        expected = Matrix([[3, 6, 9], [12, 15, 18], [21, 24, 27], [30, 33, 36]])
        assert basic_4x3.multiply(3) == expected

    def test_operators_both_sides(self, basic_4x3):
        assert basic_4x3 * 2 == 2 * basic_4x3 == basic_4x3 + basic_4x3

    def test_zero_gives_zero_matrix(self, basic_4x3):
        result = basic_4x3.multiply(0)
        assert result == Matrix.zeros(4, 3)
        assert not np.signbit(result.to_array()).any()

    def test_zero_with_infinite_entry(self):
        assert Matrix([[np.inf, 1.0]]).multiply(0) == Matrix.zeros(1, 2)

    def test_negation(self):
        assert -Matrix([[1, -2]]) == Matrix([[-1, 2]])

    def test_does_not_mutate(self, basic_4x3):
        basic_4x3.multiply(5)
        assert basic_4x3.get(1, 1) == 1.0

    def test_rejects_non_numeric(self, basic_4x3):
        with pytest.raises(ValidationError):
            basic_4x3.multiply("2")

    @pytest.mark.parametrize("other", ["2", None, [1, 2]])
    def test_star_with_non_number_is_type_error(self, basic_4x3, other):
        with pytest.raises(TypeError):
            basic_4x3 * other
        with pytest.raises(TypeError):
            other * basic_4x3

    def test_star_defers_to_other_operand(self, basic_4x3):
        class Tagged:
            def __rmul__(self, left):
                return "tagged"

        assert basic_4x3 * Tagged() == "tagged"


class TestEquality:

    def test_reflexive(self, basic_4x3):
        assert basic_4x3 == basic_4x3

    def test_symmetric(self, basic_4x3):
        other = basic_4x3.clone()
        assert basic_4x3 == other
        assert other == basic_4x3

    def test_dimension_mismatch_is_unequal(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])
        assert Matrix.zeros(0, 2) != Matrix.zeros(2, 0)

    def test_exact_no_tolerance(self):
        a = Matrix([[0.1 + 0.2]])
        b = Matrix([[0.3]])
        assert a != b
        assert a.is_close(b)

    def test_signed_zero_equal(self):
        assert Matrix([[-0.0]]) == Matrix([[0.0]])

    def test_not_equal_to_other_types(self):
        assert Matrix([[1]]) != [[1.0]]

    def test_is_close_shape_mismatch(self):
        assert not Matrix([[1, 2]]).is_close(Matrix([[1], [2]]))

    def test_is_close_custom_tolerance(self):
        a = Matrix([[1.0]])
        b = Matrix([[1.001]])
        assert not a.is_close(b)
        assert a.is_close(b, rtol=1e-2)


class TestHash:

    def test_equal_matrices_hash_equal(self, basic_4x3):
        assert hash(basic_4x3) == hash(basic_4x3.clone())

    def test_signed_zero_hash(self):
        assert hash(Matrix([[-0.0, 1.0]])) == hash(Matrix([[0.0, 1.0]]))

    def test_usable_in_set(self, basic_4x3):
        seen = {basic_4x3, basic_4x3.clone(), basic_4x3.transpose()}
        assert len(seen) == 2

    def test_hash_follows_contents(self):
        a = Matrix([[1.0, 2.0]])
        a.set_entry(1, 1, 5.0)
        assert_array_equal(a.to_array(), [[5.0, 2.0]])
        assert hash(a) == hash(Matrix([[5.0, 2.0]]))
