# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/matrix.py — construction and value semantics."""
import dataclasses

import numpy as np
import pytest

from matrix_calculator.domain.errors import ErrorKind, InvalidShape
from matrix_calculator.domain.matrix import Matrix


class TestConstruction:
    def test_zeros(self):
        m = Matrix.zeros(2, 3)
        assert m.shape == (2, 3)
        assert m.to_list() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    def test_zeros_rejects_non_positive(self):
        with pytest.raises(InvalidShape):
            Matrix.zeros(0, 3)
        with pytest.raises(InvalidShape):
            Matrix.zeros(2, -1)

    def test_zeros_rejects_non_integer(self):
        with pytest.raises(InvalidShape):
            Matrix.zeros(2.5, 2)

    def test_identity(self):
        assert Matrix.identity(3).to_list() == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]

    def test_from_rows_infers_shape(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.rows == 2
        assert m.cols == 3
        assert m[1, 2] == 6.0
        assert isinstance(m[0, 0], float)

    def test_from_numpy(self):
        arr = np.arange(6).reshape(2, 3)
        m = Matrix.from_rows(arr)
        assert m.shape == (2, 3)
        assert m.to_list() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_from_numpy_wrong_ndim(self):
        with pytest.raises(InvalidShape):
            Matrix.from_rows(np.zeros(3))

    def test_from_tuples(self):
        m = Matrix.from_rows(((1.0, 2.0), (3.0, 4.0)))
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]


class TestInvalidShape:
    @pytest.mark.parametrize("array", [
        [],
        [[]],
        [[1.0, 2.0], [3.0]],
        [1.0, 2.0],
        "12",
        [[1.0, "x"]],
        [[True, 0.0]],
        None,
    ])
    def test_rejected(self, array):
        with pytest.raises(InvalidShape) as exc_info:
            Matrix.from_rows(array)
        assert exc_info.value.kind is ErrorKind.INVALID_SHAPE

    def test_direct_construction_checks_shape(self):
        with pytest.raises(InvalidShape):
            Matrix(2, 2, ((1.0, 2.0),))

    def test_invalid_shape_is_value_error(self):
        with pytest.raises(ValueError):
            Matrix.from_rows([[1.0], [2.0, 3.0]])


class TestValueSemantics:
    def test_direct_construction_copies_list_data(self):
        source = [[1, 2], [3, 4]]
        m = Matrix(2, 2, source)
        source[0][0] = 99
        assert m.data == ((1.0, 2.0), (3.0, 4.0))
        assert isinstance(m.data[0], tuple)
        assert isinstance(m[0, 0], float)
        assert hash(m) == hash(Matrix.from_rows([[1, 2], [3, 4]]))

    def test_direct_construction_rejects_non_numeric(self):
        with pytest.raises(InvalidShape):
            Matrix(1, 1, [["x"]])

    def test_frozen(self):
        m = Matrix.identity(2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            m.rows = 3

    def test_input_not_aliased(self):
        source = [[1.0, 2.0], [3.0, 4.0]]
        m = Matrix.from_rows(source)
        source[0][0] = 99.0
        assert m[0, 0] == 1.0

    def test_to_list_is_copy(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        out = m.to_list()
        out[0][0] = 99.0
        assert m[0, 0] == 1.0

    def test_to_numpy_is_copy(self):
        m = Matrix.from_rows([[1.0, 2.0]])
        arr = m.to_numpy()
        arr[0, 0] = 99.0
        assert m[0, 0] == 1.0
        assert arr.dtype == np.float64

    def test_equality(self):
        assert Matrix.from_rows([[1, 0], [0, 1]]) == Matrix.identity(2)
        assert Matrix.zeros(1, 2) != Matrix.zeros(2, 1)

    def test_is_square(self):
        assert Matrix.identity(3).is_square
        assert not Matrix.zeros(2, 3).is_square
