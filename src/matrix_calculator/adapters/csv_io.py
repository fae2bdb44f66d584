# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV matrix reader.

One matrix row per line, comma-separated. Blank or non-numeric cells are
read as 0.0, the same way an empty input field counts as zero.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
import math

from matrix_calculator.ports import MatrixReader, RawMatrix

logger = logging.getLogger(__name__)


def parse_cell(text: str) -> float | None:
    """
    Parse one cell, returning None when it is not a number.

    NaN is not a number here. Spelled-out infinities are accepted only as
    "Infinity" (optionally signed); "inf" and "nan" read as missing.
    Overflowing literals such as "1e400" still parse to infinity.
    """
    text = text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    if "inf" in text.lower() and text.lstrip("+-") != "Infinity":
        return None
    return value


class CsvMatrixReader(MatrixReader):
    """Reads a single matrix (operand 'a') from a CSV file."""

    def __init__(self, delimiter: str = ',') -> None:
        self._delimiter = delimiter

    def read_matrix(self, path: str) -> RawMatrix:
        rows: RawMatrix = []
        with open(path, newline='', encoding='utf-8') as f:
            for line_no, record in enumerate(csv.reader(f, delimiter=self._delimiter), 1):
                if not record or all(not cell.strip() for cell in record):
                    continue
                row = []
                for col_no, cell in enumerate(record, 1):
                    value = parse_cell(cell)
                    if value is None:
                        logger.warning(
                            "%s line %d column %d: %r is not a number, using 0",
                            path, line_no, col_no, cell,
                        )
                        value = 0.0
                    row.append(value)
                rows.append(row)
        return rows

    def read_operands(self, path: str) -> dict[str, RawMatrix]:
        return {'a': self.read_matrix(path)}
