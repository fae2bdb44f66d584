# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON matrix file I/O adapter.

Reads operand matrices and writes calculation results in JSON format.
"""
import json
from typing import Any

from matrix_calculator.domain.calculation import CalculationResult
from matrix_calculator.domain.formatting import DisplayConfig, present
from matrix_calculator.ports import MatrixReader, ResultWriter, RawMatrix


class JsonMatrixReader(MatrixReader):
    """Reads operands from JSON: {"a": [[...]], "b": [[...]]} or a bare 2-D list."""

    def read_operands(self, path: str) -> dict[str, RawMatrix]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        return self.parse_operands(data)

    def parse_operands(self, data: Any) -> dict[str, RawMatrix]:
        if isinstance(data, list):
            return {'a': data}
        if not isinstance(data, dict):
            raise ValueError(
                f"Expected a JSON object or array of rows, got {type(data).__name__}"
            )
        if 'a' not in data:
            raise ValueError("JSON operand file has no 'a' matrix")
        operands = {'a': data['a']}
        if data.get('b') is not None:
            operands['b'] = data['b']
        return operands


class JsonResultWriter(ResultWriter):
    """Writes a CalculationResult to JSON, display-rounded unless config is None."""

    def __init__(self, config: DisplayConfig | None = DisplayConfig()) -> None:
        self._config = config

    def to_dict(self, result: CalculationResult) -> dict[str, Any]:
        if not result.ok:
            return {
                'operation': result.operation,
                'ok': False,
                'error': result.error.value,
                'message': result.message,
            }
        if self._config is None:
            values = result.matrix.to_list()
        else:
            values = present(result.matrix, self._config)
        return {
            'operation': result.operation,
            'ok': True,
            'rows': result.matrix.rows,
            'cols': result.matrix.cols,
            'result': values,
        }

    def write_result(self, result: CalculationResult, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(result), f, indent=2, ensure_ascii=False)
