# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error kinds raised by the matrix engine.

Every failure is a MatrixError (a ValueError) tagged with an ErrorKind so
callers can either catch the exception or match on the kind carried by a
CalculationResult.
"""
from enum import Enum


class ErrorKind(Enum):
    """Failure categories reported by the engine and the dispatcher."""
    DIMENSION_MISMATCH = "dimension_mismatch"
    NOT_SQUARE = "not_square"
    SINGULAR_MATRIX = "singular_matrix"
    INVALID_SHAPE = "invalid_shape"
    UNKNOWN_OPERATION = "unknown_operation"
    MISSING_OPERAND = "missing_operand"


class MatrixError(ValueError):
    """Base class for all engine failures."""
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DimensionMismatch(MatrixError):
    """Operand shapes are incompatible for add, subtract or multiply."""
    kind = ErrorKind.DIMENSION_MISMATCH

    def __init__(
        self,
        operation: str,
        left: tuple[int, int],
        right: tuple[int, int],
    ) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"cannot {operation} {left[0]}x{left[1]} and {right[0]}x{right[1]} matrices"
        )


class NotSquare(MatrixError):
    """Determinant, adjugate or inverse requested on a non-square matrix."""
    kind = ErrorKind.NOT_SQUARE

    def __init__(self, operation: str, shape: tuple[int, int]) -> None:
        self.operation = operation
        self.shape = shape
        super().__init__(
            f"{operation} requires a square matrix, got {shape[0]}x{shape[1]}"
        )


class SingularMatrix(MatrixError):
    """Inverse requested on a matrix whose determinant is zero."""
    kind = ErrorKind.SINGULAR_MATRIX

    def __init__(self, determinant: float) -> None:
        self.determinant = determinant
        super().__init__(f"matrix is singular (determinant = {determinant!r})")


class InvalidShape(MatrixError):
    """Matrix construction from an empty, jagged or non-numeric array."""
    kind = ErrorKind.INVALID_SHAPE


class UnknownOperation(MatrixError):
    """Operation name not recognised by the dispatcher."""
    kind = ErrorKind.UNKNOWN_OPERATION

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown operation: {name!r}")


class MissingOperand(MatrixError):
    """Binary operation requested without a second matrix."""
    kind = ErrorKind.MISSING_OPERAND

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a second matrix")
