"""Dimension rules that map a sanitized string length to a matrix shape."""

from digit_matrix.core.config import settings
from digit_matrix.core.errors import DivideByZeroError
from digit_matrix.core.schemas import Dimensions, MatrixMode


def leading_digit(length: int) -> int:
    """Return the first digit of ``length`` written in base 10."""
    return int(str(length)[0])


def grid_dimensions(length: int) -> Dimensions:
    """Shape a string of ``length`` characters as ``leading_digit(length)`` rows."""
    rows = leading_digit(length)
    if rows == 0:
        raise DivideByZeroError(
            f"Length {length} has leading digit 0; columns are undefined."
        )
    return Dimensions(rows=rows, columns=length // rows)


def single_row_dimensions(length: int) -> Dimensions:
    return Dimensions(rows=1, columns=length)


def mode_for_length_filter(length_filter: int, threshold: int | None = None) -> MatrixMode:
    """Select the mode implied by a (non-negative) length filter."""
    limit = settings.single_row_threshold if threshold is None else threshold
    if length_filter == 0:
        return MatrixMode.default
    if length_filter <= limit:
        return MatrixMode.length_filter
    return MatrixMode.single_row


def resolve_dimensions(length: int, mode: MatrixMode, *, matched: bool = False) -> Dimensions:
    """Compute ``(rows, columns)`` for a sanitized string length.

    ``matched`` only applies to predicate mode, where it carries whether any
    caller predicate held for the item.
    """
    if length < 0:
        raise ValueError("length must be non-negative")

    if mode is MatrixMode.single_row:
        return single_row_dimensions(length)
    if mode is MatrixMode.predicate and matched:
        return single_row_dimensions(length)
    return grid_dimensions(length)
