# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for matrix input and result output.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from matrix_calculator.domain.calculation import CalculationResult

RawMatrix = list[list[float]]


@runtime_checkable
class MatrixReader(Protocol):
    """Port for reading operand matrices."""

    def read_operands(self, path: str) -> dict[str, RawMatrix]:
        """
        Read operands from a file.

        Returns:
            Mapping with key 'a' and, when present, 'b'.
        """
        ...


@runtime_checkable
class ResultWriter(Protocol):
    """Port for writing a calculation result."""

    def write_result(self, result: CalculationResult, path: str) -> None:
        """Write the result (matrix or error) to a file."""
        ...
