# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Immutable rectangular matrix value.

A Matrix owns a tuple-of-tuples of floats and never changes after
construction. Conversions to lists or NumPy arrays always hand out copies.

External dependency: numpy (array interop only).
"""
import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import InvalidShape

Rows = tuple[tuple[float, ...], ...]


def _as_float(value: Any, i: int, j: int) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidShape(
            f"entry ({i}, {j}) is not a number: {value!r}"
        )
    return float(value)


@dataclass(frozen=True)
class Matrix:
    """Rectangular matrix of floats with value semantics."""
    rows: int
    cols: int
    data: Rows

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise InvalidShape(
                f"matrix dimensions must be positive, got {self.rows}x{self.cols}"
            )
        try:
            data = tuple(tuple(float(x) for x in r) for r in self.data)
        except (TypeError, ValueError):
            raise InvalidShape("matrix data must be rows of numbers") from None
        object.__setattr__(self, 'data', data)
        if len(self.data) != self.rows or any(len(r) != self.cols for r in self.data):
            raise InvalidShape(
                f"data does not match declared shape {self.rows}x{self.cols}"
            )

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Create a zero-filled rows x cols matrix."""
        if isinstance(rows, bool) or isinstance(cols, bool) or not (
            isinstance(rows, numbers.Integral) and isinstance(cols, numbers.Integral)
        ):
            raise InvalidShape(f"dimensions must be integers, got {rows!r}x{cols!r}")
        if rows < 1 or cols < 1:
            raise InvalidShape(
                f"matrix dimensions must be positive, got {rows}x{cols}"
            )
        row = (0.0,) * int(cols)
        return cls(int(rows), int(cols), tuple(row for _ in range(int(rows))))

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Create an n x n identity matrix."""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise InvalidShape(f"identity size must be a positive integer, got {n!r}")
        return cls(
            int(n), int(n),
            tuple(
                tuple(1.0 if i == j else 0.0 for j in range(n))
                for i in range(n)
            ),
        )

    @classmethod
    def from_rows(cls, array: "Sequence[Sequence[float]] | np.ndarray") -> "Matrix":
        """
        Build a matrix from a rectangular nested sequence or 2-D array.

        Dimensions are inferred from the array. The input is copied.

        Raises:
            InvalidShape: If the array is empty, jagged, not two-dimensional,
                or holds a non-numeric entry.
        """
        if isinstance(array, Matrix):
            return array
        if isinstance(array, np.ndarray):
            if array.ndim != 2 or array.size == 0:
                raise InvalidShape(
                    f"expected a non-empty 2-D array, got shape {array.shape}"
                )
            if not (np.issubdtype(array.dtype, np.integer)
                    or np.issubdtype(array.dtype, np.floating)):
                raise InvalidShape(f"expected a numeric array, got dtype {array.dtype}")
            array = array.tolist()

        if isinstance(array, (str, bytes)) or not isinstance(array, Sequence):
            raise InvalidShape(f"expected a sequence of rows, got {type(array).__name__}")
        if len(array) == 0:
            raise InvalidShape("matrix must have at least one row")

        first = array[0]
        if isinstance(first, (str, bytes)) or not isinstance(first, Sequence):
            raise InvalidShape("matrix rows must be sequences")
        cols = len(first)
        if cols == 0:
            raise InvalidShape("matrix must have at least one column")

        data = []
        for i, row in enumerate(array):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise InvalidShape(f"row {i} is not a sequence")
            if len(row) != cols:
                raise InvalidShape(
                    f"jagged array: row {i} has {len(row)} entries, expected {cols}"
                )
            data.append(tuple(_as_float(v, i, j) for j, v in enumerate(row)))
        return cls(len(data), cols, tuple(data))

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.data[i][j]

    def to_list(self) -> list[list[float]]:
        """Return a mutable copy of the entries."""
        return [list(row) for row in self.data]

    def to_numpy(self) -> np.ndarray:
        """Return the entries as a new float64 array."""
        return np.array(self.data, dtype=float)
