# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the matrix calculator.

Usage:
    # Binary operations read A and B from separate files or one JSON file
    matrix-calculator add -a a.csv -b b.csv
    matrix-calculator multiply -a operands.json

    # Single-matrix operations ignore B
    matrix-calculator determinant -a a.json --cross-check
    matrix-calculator inverse -a a.csv --tolerance 1e-12

    # Write the result as JSON (display-rounded unless --raw)
    matrix-calculator transpose -a a.csv -o result.json --raw
"""
import argparse
import json
import logging
import sys

from matrix_calculator.adapters import JsonResultWriter, reader_for
from matrix_calculator.domain.calculation import (
    CalculationResult,
    Operation,
    calculate,
)
from matrix_calculator.domain.formatting import DisplayConfig, error_text, render_table
from matrix_calculator.domain.matrix import Matrix
from matrix_calculator.domain.operations import determinant_numpy
from matrix_calculator.logging_config import setup_logging

logger = logging.getLogger(__name__)


def load_operands(a_path: str, b_path: str | None = None) -> tuple[list, list | None]:
    """
    Read operand A (and B when given) from JSON or CSV files.

    A JSON file may carry both operands; an explicit B file takes precedence.
    """
    operands = reader_for(a_path).read_operands(a_path)
    a = operands['a']
    b = operands.get('b')
    if b_path is not None:
        b = reader_for(b_path).read_operands(b_path)['a']
    return a, b


def run(
    operation: str,
    a_path: str,
    b_path: str | None = None,
    tolerance: float = 0.0,
) -> CalculationResult:
    """Load operands and run one calculation."""
    a, b = load_operands(a_path, b_path)
    logger.info("Running %s on %s", operation, a_path)
    return calculate(operation, a, b, tolerance=tolerance)


def main():
    parser = argparse.ArgumentParser(
        description="Elementary matrix calculator (add, subtract, multiply, "
                    "determinant, inverse, transpose)"
    )
    parser.add_argument(
        'operation', choices=[op.value for op in Operation],
        help="Operation to perform"
    )
    parser.add_argument(
        '-a', '--matrix-a', required=True,
        help="Path to matrix A (.json or .csv); JSON may also hold matrix B"
    )
    parser.add_argument(
        '-b', '--matrix-b',
        help="Path to matrix B (.json or .csv), for add/subtract/multiply"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write the result as JSON to this path"
    )
    parser.add_argument(
        '--tolerance', type=float, default=0.0,
        help="Treat |det| <= tolerance as singular for inverse (default: exact zero)"
    )
    parser.add_argument(
        '--decimals', type=int, default=DisplayConfig.decimals,
        help=f"Decimal places shown (default: {DisplayConfig.decimals})"
    )
    parser.add_argument(
        '--raw', action='store_true', default=False,
        help="Write unrounded values to the JSON output"
    )
    parser.add_argument(
        '--cross-check', action='store_true', default=False,
        help="Also print the NumPy determinant (determinant only)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.verbose:
        setup_logging(logging.DEBUG)
    if args.tolerance < 0:
        parser.error("--tolerance must be non-negative")
    if args.decimals < 0:
        parser.error("--decimals must be non-negative")

    config = DisplayConfig(decimals=args.decimals)

    try:
        result = run(
            operation=args.operation,
            a_path=args.matrix_a,
            b_path=args.matrix_b,
            tolerance=args.tolerance,
        )

        if args.output:
            writer = JsonResultWriter(None if args.raw else config)
            writer.write_result(result, args.output)
            print(f"Wrote {result.operation} result to {args.output}")

        if not result.ok:
            print(f"Error: {error_text(result.error, result.message)}", file=sys.stderr)
            sys.exit(1)

        print(render_table(result.matrix, config))

        if args.cross_check and args.operation == Operation.DETERMINANT.value:
            a, _ = load_operands(args.matrix_a)
            print(f"numpy: {determinant_numpy(Matrix.from_rows(a))!r}")

    except FileNotFoundError as e:
        print(
            f"Error: Input file not found: {e.filename}\n"
            f"Expected a JSON or CSV file holding a rectangular array of numbers.",
            file=sys.stderr,
        )
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON input: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
