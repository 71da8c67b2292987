"""
Tests for Matrix construction.

Covers new(), from_values(), from_rows(), from_array() and random(),
plus the shape invariant every constructor must establish.
"""

import warnings
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix import DimensionMismatchError, Matrix, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Shape invariant
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("rows,cols", [(0, 0), (0, 3), (3, 0), (1, 1), (2, 5), (22, 43)])
class TestShapeInvariant:
    """dimensions() == (rows, cols) and there are rows * cols elements."""

    def test_new(self, rows, cols):
        m = Matrix.new(rows, cols, 0)
        assert m.dimensions() == (rows, cols)
        assert len(m.values) == rows * cols

    def test_from_values(self, rows, cols):
        m = Matrix.from_values(rows, cols, range(rows * cols))
        assert m.dimensions() == (rows, cols)
        assert m.values == tuple(range(rows * cols))

    def test_random(self, rows, cols, rng):
        m = Matrix.random(rows, cols, rng)
        assert m.dimensions() == (rows, cols)
        assert len(m.values) == rows * cols


# ═══════════════════════════════════════════════════════════════════════
# new / from_values
# ═══════════════════════════════════════════════════════════════════════


class TestNew:

    def test_filled_with_value(self):
        m = Matrix.new(3, 4, 1)
        assert m.values == (1,) * 12

    def test_equals_explicit_values(self):
        assert Matrix.new(2, 2, 0) == Matrix.from_values(2, 2, [0, 0, 0, 0])

    def test_float_dimension_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            Matrix.new(2.0, 2, 0)

    def test_mutable_fill_not_shared(self):
        m = Matrix.new(1, 2, [])
        m.index(0, 0).append(1)
        assert m.index(0, 1) == []

    def test_negative_dimension_rejected(self):
        with pytest.raises(DimensionMismatchError, match="rows"):
            Matrix.new(-1, 2, 0)
        with pytest.raises(DimensionMismatchError, match="cols"):
            Matrix.new(2, -1, 0)


class TestFromValues:

    def test_round_trips_through_index(self, wide):
        expected = [[1, 2, 3], [4, 5, 6]]
        for r in range(2):
            for c in range(3):
                assert wide.index(r, c) == expected[r][c]

    def test_wrong_length_rejected(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            Matrix.from_values(3, 3, [1])
        assert exc_info.value.expected == 9
        assert exc_info.value.actual == 1

    def test_too_many_values_rejected(self):
        with pytest.raises(DimensionMismatchError):
            Matrix.from_values(1, 2, [1, 2, 3])

    def test_input_is_copied(self):
        data = [1, 2, 3, 4]
        m = Matrix.from_values(2, 2, data)
        data[0] = 99
        assert m.index(0, 0) == 1

    def test_accepts_generator(self):
        m = Matrix.from_values(2, 2, (x * x for x in range(4)))
        assert m.values == (0, 1, 4, 9)

    def test_direct_construction_still_validates(self):
        with pytest.raises(DimensionMismatchError):
            Matrix(2, 2, [1, 2, 3])

    def test_direct_construction_copies_list(self):
        data = [1, 2, 3, 4]
        m = Matrix(2, 2, data)
        data[0] = 99
        assert m.index(0, 0) == 1

    def test_direct_construction_from_tuple_is_mutable(self):
        m = Matrix(2, 2, (1, 2, 3, 4))
        m.insert(0, 0, 5)
        assert m.values == (5, 2, 3, 4)

    def test_fractional_dimension_rejected(self):
        """1.5 * 2 == 3 must not sneak past the length check."""
        with pytest.raises(ValidationError, match="rows: expected integer"):
            Matrix.from_values(1.5, 2, [1, 2, 3])

    def test_numpy_integer_dimensions(self):
        m = Matrix.from_values(np.int64(2), np.int32(1), [1, 2])
        assert m.dimensions() == (2, 1)


# ═══════════════════════════════════════════════════════════════════════
# from_rows / from_array
# ═══════════════════════════════════════════════════════════════════════


class TestFromRows:

    def test_matches_from_values(self, wide):
        assert Matrix.from_rows([[1, 2, 3], [4, 5, 6]]) == wide

    def test_empty_is_zero_by_zero(self):
        assert Matrix.from_rows([]).dimensions() == (0, 0)

    def test_rows_of_empty_lists(self):
        assert Matrix.from_rows([[], []]).dimensions() == (2, 0)

    def test_ragged_rejected(self):
        with pytest.raises(DimensionMismatchError, match="ragged|row 1"):
            Matrix.from_rows([[1, 2], [3]])


class TestFromArray:

    def test_shape_and_values(self):
        m = Matrix.from_array(np.arange(6).reshape(2, 3))
        assert m == Matrix.from_values(2, 3, [0, 1, 2, 3, 4, 5])

    def test_elements_are_python_scalars(self):
        m = Matrix.from_array(np.eye(2))
        assert all(type(x) is float for x in m.values)

    def test_nested_list_accepted(self):
        assert Matrix.from_array([[1, 2], [3, 4]]).dimensions() == (2, 2)

    def test_1d_rejected(self):
        with pytest.raises(DimensionMismatchError, match="expected 2D"):
            Matrix.from_array(np.arange(4))


# ═══════════════════════════════════════════════════════════════════════
# random
# ═══════════════════════════════════════════════════════════════════════


class TestRandom:

    def test_values_in_unit_interval(self, rng):
        m = Matrix.random(10, 10, rng)
        assert all(0.0 <= x < 1.0 for x in m.values)

    def test_seed_is_reproducible(self):
        assert Matrix.random(3, 4, 123) == Matrix.random(3, 4, 123)

    def test_draws_fill_row_major(self):
        m = Matrix.random(2, 3, 42)
        expected = np.random.default_rng(42).random(6).tolist()
        assert list(m.values) == expected

    def test_generator_stream_advances(self, rng):
        a = Matrix.random(2, 2, rng)
        b = Matrix.random(2, 2, rng)
        assert a != b

    def test_unseeded_works(self):
        m = Matrix.random(2, 2)
        assert all(0.0 <= x < 1.0 for x in m.values)

    def test_fraction_dtype(self, rng):
        m = Matrix.random(2, 2, rng, dtype=Fraction)
        assert all(isinstance(x, Fraction) for x in m.values)
        assert all(0 <= x < 1 for x in m.values)

    def test_decimal_dtype(self, rng):
        m = Matrix.random(1, 3, rng, dtype=Decimal)
        assert all(isinstance(x, Decimal) for x in m.values)

    def test_numpy_dtype(self, rng):
        m = Matrix.random(2, 2, rng, dtype=np.float32)
        assert all(isinstance(x, np.float32) for x in m.values)

    def test_integer_dtype_warns(self, rng):
        with pytest.warns(RuntimeWarning, match="cannot represent"):
            m = Matrix.random(2, 2, rng, dtype=int)
        assert m.values == (0, 0, 0, 0)

    def test_float_dtype_does_not_warn(self, rng):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Matrix.random(2, 2, rng)

    def test_bad_rng_rejected(self):
        with pytest.raises(ValidationError, match="rng"):
            Matrix.random(2, 2, rng=1.5)

    def test_negative_seed_rejected(self):
        with pytest.raises(ValidationError, match="seed must be non-negative"):
            Matrix.random(2, 2, rng=-1)
