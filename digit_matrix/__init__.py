"""Digit matrix pipeline and query helpers."""

from digit_matrix.processing import to_matrices, to_matrices_where

__all__ = ["to_matrices", "to_matrices_where"]
