"""Processing helpers for sanitizing strings and building digit matrices."""

from .digits import DigitSequence, extract_digits
from .dimensions import resolve_dimensions
from .pipeline import to_matrices, to_matrices_where
from .populator import populate_matrix
from .queries import (
    even_length,
    filter_numerics,
    hamming_distance,
    most_frequent,
    most_frequent_types,
    where_distance,
)
from .sanitizer import sanitize

__all__ = [
    "DigitSequence",
    "even_length",
    "extract_digits",
    "filter_numerics",
    "hamming_distance",
    "most_frequent",
    "most_frequent_types",
    "populate_matrix",
    "resolve_dimensions",
    "sanitize",
    "to_matrices",
    "to_matrices_where",
    "where_distance",
]
