# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapter implementations for file I/O.
"""
from matrix_calculator.adapters.json_io import JsonMatrixReader, JsonResultWriter
from matrix_calculator.adapters.csv_io import CsvMatrixReader


def reader_for(path: str):
    """Pick a MatrixReader by file extension (.csv, otherwise JSON)."""
    if path.lower().endswith('.csv'):
        return CsvMatrixReader()
    return JsonMatrixReader()


__all__ = [
    "JsonMatrixReader",
    "JsonResultWriter",
    "CsvMatrixReader",
    "reader_for",
]
