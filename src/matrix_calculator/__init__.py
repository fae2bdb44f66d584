# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Matrix Calculator

Elementary matrix arithmetic over rectangular float matrices: addition,
subtraction, multiplication, transpose, determinant by cofactor expansion,
and adjugate-based inverse. Includes an operation dispatcher with tagged
results, display rounding, and JSON/CSV file adapters for the CLI.
"""

from matrix_calculator.domain.errors import (
    ErrorKind,
    MatrixError,
    DimensionMismatch,
    NotSquare,
    SingularMatrix,
    InvalidShape,
    UnknownOperation,
    MissingOperand,
)
from matrix_calculator.domain.matrix import Matrix
from matrix_calculator.domain.operations import (
    add,
    subtract,
    multiply,
    transpose,
    scalar_multiply,
    minor,
    determinant,
    determinant_numpy,
    adjugate,
    inverse,
    to_display_string,
)
from matrix_calculator.domain.calculation import (
    Operation,
    CalculationResult,
    calculate,
)
from matrix_calculator.domain.formatting import (
    DisplayConfig,
    display_value,
    present,
    render_table,
    error_text,
)

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "MatrixError",
    "DimensionMismatch",
    "NotSquare",
    "SingularMatrix",
    "InvalidShape",
    "UnknownOperation",
    "MissingOperand",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "transpose",
    "scalar_multiply",
    "minor",
    "determinant",
    "determinant_numpy",
    "adjugate",
    "inverse",
    "to_display_string",
    "Operation",
    "CalculationResult",
    "calculate",
    "DisplayConfig",
    "display_value",
    "present",
    "render_table",
    "error_text",
]
