# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Operation selector over the matrix engine.

Takes an operation name and raw rectangular arrays, runs the matching
engine function, and reports either the resulting matrix or a tagged
error kind. Domain failures never escape calculate() as exceptions.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum

from .errors import ErrorKind, MatrixError, MissingOperand, UnknownOperation
from .matrix import Matrix
from . import operations

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Operations offered by the calculator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DETERMINANT = "determinant"
    INVERSE = "inverse"
    TRANSPOSE = "transpose"

    @classmethod
    def parse(cls, name: "str | Operation") -> "Operation":
        """Look up an operation by value, case-insensitively."""
        if isinstance(name, Operation):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise UnknownOperation(str(name)) from None

    @property
    def needs_second_operand(self) -> bool:
        return self in (Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one calculation: a matrix on success, an error kind otherwise."""
    operation: str
    matrix: Matrix | None = None
    error: ErrorKind | None = None
    message: str | None = None
    exception: MatrixError | None = field(default=None, compare=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Matrix:
        """Return the matrix, or raise the error this result carries."""
        if self.exception is not None:
            raise self.exception
        return self.matrix


def _run(op: Operation, a: Matrix, b: Matrix | None, tolerance: float) -> Matrix:
    if op.needs_second_operand and b is None:
        raise MissingOperand(op.value)
    if op is Operation.ADD:
        return operations.add(a, b)
    if op is Operation.SUBTRACT:
        return operations.subtract(a, b)
    if op is Operation.MULTIPLY:
        return operations.multiply(a, b)
    if op is Operation.DETERMINANT:
        det = operations.determinant(a)
        return Matrix(1, 1, ((det,),))
    if op is Operation.INVERSE:
        return operations.inverse(a, tolerance=tolerance)
    return operations.transpose(a)


def calculate(
    operation: "str | Operation",
    a,
    b=None,
    tolerance: float = 0.0,
) -> CalculationResult:
    """
    Run one operation on raw arrays (or Matrix values).

    The second operand is required for add, subtract and multiply and is
    ignored otherwise. A determinant is reported as a 1x1 matrix.

    Args:
        operation: Operation name or Operation member.
        a: First operand, any rectangular numeric array.
        b: Second operand for binary operations.
        tolerance: Singularity tolerance passed to inverse (default exact zero).

    Returns:
        CalculationResult carrying the matrix or the error kind.
    """
    name = operation.value if isinstance(operation, Operation) else str(operation)
    try:
        op = Operation.parse(operation)
        name = op.value
        left = Matrix.from_rows(a)
        right = None
        if op.needs_second_operand and b is not None:
            right = Matrix.from_rows(b)
        result = _run(op, left, right, tolerance)
    except MatrixError as e:
        logger.debug("%s failed: %s", name, e)
        return CalculationResult(
            operation=name, error=e.kind, message=e.message, exception=e,
        )
    logger.debug("%s -> %dx%d", name, result.rows, result.cols)
    return CalculationResult(operation=name, matrix=result)
