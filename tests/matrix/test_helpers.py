"""
Tests for fill() and clear().
"""

import pytest

from pymatrix import Matrix, ValidationError, clear, fill


class TestFill:

    def test_fill(self, basic_4x3):
        fill(basic_4x3, 2.5)
        assert basic_4x3 == Matrix.full(4, 3, 2.5)

    def test_shape_unchanged(self, basic_4x3):
        fill(basic_4x3, 0)
        assert basic_4x3.shape == (4, 3)

    def test_empty_matrix(self):
        m = Matrix.zeros(0, 3)
        fill(m, 1.0)
        assert m.shape == (0, 3)

    def test_rejects_non_matrix(self):
        with pytest.raises(TypeError):
            fill([[1, 2]], 0.0)

    def test_rejects_non_numeric_value(self, basic_4x3):
        with pytest.raises(ValidationError):
            fill(basic_4x3, "x")


class TestClear:

    def test_clear(self, basic_4x3):
        clear(basic_4x3)
        assert basic_4x3 == Matrix.zeros(4, 3)
