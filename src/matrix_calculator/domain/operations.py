# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Matrix arithmetic engine.

Shape-checked addition, subtraction, multiplication, transpose, determinant
by cofactor (Laplace) expansion, adjugate and adjugate-based inverse. Every
function returns a new Matrix and leaves its operands untouched.

The determinant is evaluated recursively along the first row. This is O(n!)
and is the canonical algorithm; determinant_numpy is the fast alternative
for cross-checking and agrees up to rounding.
"""
import numpy as np

from .errors import DimensionMismatch, NotSquare, SingularMatrix
from .matrix import Matrix


def _require_same_shape(operation: str, a: Matrix, b: Matrix) -> None:
    if a.shape != b.shape:
        raise DimensionMismatch(operation, a.shape, b.shape)


def _require_square(operation: str, m: Matrix) -> None:
    if not m.is_square:
        raise NotSquare(operation, m.shape)


def add(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise sum of two matrices of equal shape."""
    _require_same_shape("add", a, b)
    return Matrix(a.rows, a.cols, tuple(
        tuple(x + y for x, y in zip(ra, rb))
        for ra, rb in zip(a.data, b.data)
    ))


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise difference a - b of two matrices of equal shape."""
    _require_same_shape("subtract", a, b)
    return Matrix(a.rows, a.cols, tuple(
        tuple(x - y for x, y in zip(ra, rb))
        for ra, rb in zip(a.data, b.data)
    ))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a (NxM) times b (MxK) -> NxK.

    Each entry is a running sum from 0.0 over k in index order.

    Raises:
        DimensionMismatch: If a.cols != b.rows.
    """
    if a.cols != b.rows:
        raise DimensionMismatch("multiply", a.shape, b.shape)
    result = []
    for i in range(a.rows):
        row = []
        for j in range(b.cols):
            s = 0.0
            for k in range(a.cols):
                s += a.data[i][k] * b.data[k][j]
            row.append(s)
        result.append(tuple(row))
    return Matrix(a.rows, b.cols, tuple(result))


def transpose(m: Matrix) -> Matrix:
    """Transpose m (NxM) -> MxN."""
    return Matrix(m.cols, m.rows, tuple(
        tuple(m.data[i][j] for i in range(m.rows))
        for j in range(m.cols)
    ))


def scalar_multiply(m: Matrix, scalar: float) -> Matrix:
    """Scale every entry of m by scalar."""
    return Matrix(m.rows, m.cols, tuple(
        tuple(x * scalar for x in row) for row in m.data
    ))


def minor(m: Matrix, row: int, col: int) -> Matrix:
    """
    Matrix formed by deleting the given row and column.

    Raises:
        IndexError: If row or col is out of range.
    """
    if not (0 <= row < m.rows and 0 <= col < m.cols):
        raise IndexError(f"minor ({row}, {col}) out of range for {m.rows}x{m.cols}")
    return Matrix(m.rows - 1, m.cols - 1, tuple(
        tuple(x for j, x in enumerate(r) if j != col)
        for i, r in enumerate(m.data) if i != row
    ))


def _cofactor_determinant(m: Matrix) -> float:
    n = m.rows
    if n == 1:
        return m.data[0][0]
    if n == 2:
        return m.data[0][0] * m.data[1][1] - m.data[0][1] * m.data[1][0]
    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * m.data[0][j] * _cofactor_determinant(minor(m, 0, j))
    return det


def determinant(m: Matrix) -> float:
    """
    Determinant by cofactor expansion along the first row.

    1x1 returns the entry, 2x2 uses ad - bc, larger matrices recurse on
    minors with alternating sign. No pivoting or row reduction.

    Raises:
        NotSquare: If m is not square.
    """
    _require_square("determinant", m)
    return _cofactor_determinant(m)


def determinant_numpy(m: Matrix) -> float:
    """Determinant via numpy.linalg.det (LU); same contract as determinant."""
    _require_square("determinant", m)
    return float(np.linalg.det(m.to_numpy()))


def adjugate(m: Matrix) -> Matrix:
    """
    Transpose of the cofactor matrix.

    The adjugate of a 1x1 matrix is [[1.0]].

    Raises:
        NotSquare: If m is not square.
    """
    _require_square("adjugate", m)
    n = m.rows
    if n == 1:
        return Matrix(1, 1, ((1.0,),))
    cofactors = Matrix(n, n, tuple(
        tuple(
            (1.0 if (i + j) % 2 == 0 else -1.0) * _cofactor_determinant(minor(m, i, j))
            for j in range(n)
        )
        for i in range(n)
    ))
    return transpose(cofactors)


def inverse(m: Matrix, tolerance: float = 0.0) -> Matrix:
    """
    Inverse via the adjugate scaled by 1/det.

    By default only an exact zero determinant is singular. A positive
    tolerance also rejects |det| <= tolerance.

    Raises:
        NotSquare: If m is not square.
        SingularMatrix: If the determinant is zero (or within tolerance).
        ValueError: If tolerance is negative.
    """
    if tolerance < 0.0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    _require_square("inverse", m)
    det = _cofactor_determinant(m)
    if det == 0.0 or (tolerance > 0.0 and abs(det) <= tolerance):
        raise SingularMatrix(det)
    if m.rows == 1:
        return Matrix(1, 1, ((1.0 / det,),))
    return scalar_multiply(adjugate(m), 1.0 / det)


def to_display_string(m: Matrix) -> str:
    """Two-decimal rendering: tab between entries, newline between rows."""
    return "\n".join(
        "\t".join(f"{x:.2f}" for x in row) for row in m.data
    )
