# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Result presentation.

Display rounding for computed matrices and user-facing text for error
kinds. The engine returns raw floats; rounding happens only here.
"""
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from .errors import ErrorKind
from .matrix import Matrix


@dataclass(frozen=True)
class DisplayConfig:
    """Presentation settings for computed values."""
    decimals: int = 6
    zero_snap: float = 1e-10


_ERROR_TEXT = {
    ErrorKind.DIMENSION_MISMATCH: "Matrix dimensions are not compatible for this operation",
    ErrorKind.NOT_SQUARE: "Matrix must be square for this operation",
    ErrorKind.SINGULAR_MATRIX: "Matrix is singular (determinant = 0), cannot compute inverse",
    ErrorKind.INVALID_SHAPE: "Matrix input must be a non-empty rectangular array of numbers",
    ErrorKind.UNKNOWN_OPERATION: "Operation not recognised",
    ErrorKind.MISSING_OPERAND: "This operation needs a second matrix",
}


def display_value(value: float, config: DisplayConfig = DisplayConfig()) -> float:
    """
    Snap near-zero noise to 0 and round to the configured decimals.

    Exact binary ties round away from zero (0.0078125 -> 0.007813), not
    to even as round() would.
    """
    if abs(value) < config.zero_snap:
        return 0.0
    if not math.isfinite(value):
        return value
    # 309 integer digits covers the float range
    context = Context(prec=309 + config.decimals)
    quantum = Decimal(1).scaleb(-config.decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    # -0.0 after rounding a tiny negative
    return float(rounded) + 0.0


def present(matrix: Matrix, config: DisplayConfig = DisplayConfig()) -> list[list[float]]:
    """Display values of every entry, as nested lists."""
    return [[display_value(x, config) for x in row] for row in matrix.data]


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_table(matrix: Matrix, config: DisplayConfig = DisplayConfig()) -> str:
    """Tab-separated rows of display values, integers shown without '.0'."""
    return "\n".join(
        "\t".join(_format_number(x) for x in row)
        for row in present(matrix, config)
    )


def error_text(kind: ErrorKind, detail: str | None = None) -> str:
    """Human-readable message for an error kind, with optional detail."""
    text = _ERROR_TEXT[kind]
    if detail:
        return f"{text}: {detail}"
    return text
