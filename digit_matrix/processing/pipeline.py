"""Entry points that turn sequences of raw strings into digit matrices."""

from collections.abc import Callable, Iterable, Iterator

import numpy as np

from digit_matrix.core.errors import InvalidInputError
from digit_matrix.core.logging import get_logger
from digit_matrix.core.schemas import Dimensions, MatrixMode

from .digits import extract_digits
from .dimensions import mode_for_length_filter, resolve_dimensions
from .populator import populate_matrix
from .sanitizer import sanitize

logger = get_logger(__name__)

Predicate = Callable[[str], bool]


def _require_source(items: Iterable[str | None] | None) -> Iterable[str | None]:
    if items is None:
        raise InvalidInputError("items must not be None.")
    return items


def build_matrix(text: str, dimensions: Dimensions) -> np.ndarray:
    """Fill a matrix of ``dimensions`` from the digits of a sanitized string."""
    return populate_matrix(dimensions.rows, dimensions.columns, extract_digits(text))


def _iter_length_filtered(
    items: Iterable[str | None], length_filter: int, mode: MatrixMode
) -> Iterator[np.ndarray]:
    for idx, item in enumerate(items):
        text = sanitize(item)
        if mode is not MatrixMode.default and len(text) != length_filter:
            logger.debug(
                "pipeline.item.dropped",
                index=idx,
                length=len(text),
                length_filter=length_filter,
            )
            continue
        dimensions = resolve_dimensions(len(text), mode)
        yield build_matrix(text, dimensions)


def _iter_predicated(
    items: Iterable[str | None], predicates: tuple[Predicate, ...]
) -> Iterator[np.ndarray]:
    for item in items:
        text = sanitize(item)
        matched = any(predicate(text) for predicate in predicates)
        dimensions = resolve_dimensions(len(text), MatrixMode.predicate, matched=matched)
        yield build_matrix(text, dimensions)


def to_matrices(
    items: Iterable[str | None] | None, length_filter: int = 0
) -> Iterator[np.ndarray]:
    """Convert each item to an integer matrix of its digits.

    With ``length_filter == 0`` every item is shaped by the leading digit of
    its sanitized length. A non-zero filter keeps only items whose sanitized
    length equals it; above the single-row threshold survivors become
    ``1 x length`` matrices. Negative filters are taken by absolute value.

    The source is checked immediately, the matrices are produced lazily in
    input order.
    """
    source = _require_source(items)
    limit = abs(length_filter)
    mode = mode_for_length_filter(limit)
    logger.debug("pipeline.started", mode=mode.value, length_filter=limit)
    return _iter_length_filtered(source, limit, mode)


def to_matrices_where(
    items: Iterable[str | None] | None, *predicates: Predicate
) -> Iterator[np.ndarray]:
    """Convert every item, choosing its shape per item.

    Items for which any predicate holds become ``1 x length`` matrices, the
    rest use the leading-digit rule. Without predicates this is
    ``to_matrices(items)``.
    """
    source = _require_source(items)
    if not predicates:
        return to_matrices(source)
    logger.debug("pipeline.started", mode=MatrixMode.predicate.value, predicates=len(predicates))
    return _iter_predicated(source, predicates)
