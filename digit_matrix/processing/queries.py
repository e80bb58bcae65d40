"""Filtering and frequency helpers over plain iterables."""

import numbers
import sys
from collections import Counter, defaultdict
from collections.abc import Callable, Iterable, Iterator, Sized
from decimal import Decimal
from typing import Any, TypeVar

from digit_matrix.core.errors import InvalidInputError

T = TypeVar("T")
C = TypeVar("C", bound=Iterable[Any])

NUMERIC_TYPES = (numbers.Real, Decimal)


def is_numeric(value: Any) -> bool:
    """Return whether a value is a real number; bools are not numbers here.

    numpy scalars such as the ``int32`` cells of a digit matrix count as numbers.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, NUMERIC_TYPES)


def filter_numerics(
    source: Iterable[T], predicate: Callable[[T], bool] | None = None
) -> Iterator[T]:
    """Yield numeric values, optionally narrowed further by ``predicate``."""
    for item in source:
        if not is_numeric(item):
            continue
        if predicate is None or predicate(item):
            yield item


def _count(collection: Iterable[Any]) -> int:
    if isinstance(collection, Sized):
        return len(collection)
    return sum(1 for _ in collection)


def even_length(collections: Iterable[C] | None) -> Iterator[C]:
    """Yield the collections whose length is even.

    Collections without ``len()`` are counted by iterating them, which consumes
    one-shot iterators.
    """
    if collections is None:
        raise InvalidInputError("collections must not be None.")
    return (collection for collection in collections if _count(collection) % 2 == 0)


def hamming_distance(left: str, right: str) -> int:
    """Count differing positions; ``sys.maxsize`` when the lengths differ."""
    if len(left) != len(right):
        return sys.maxsize
    return sum(1 for lchar, rchar in zip(left, right) if lchar != rchar)


def where_distance(strings: Iterable[str], target: str, distance: int) -> Iterator[str]:
    """Yield the strings exactly ``distance`` substitutions away from ``target``."""
    return (text for text in strings if hamming_distance(text, target) == distance)


def most_frequent_types(source: Iterable[T]) -> list[T]:
    """Return every object whose type name occurs most often.

    Only class instances count: ``None``, strings, bools and numbers (numpy
    scalars included) are ignored. Ties between type names are all kept;
    objects come back grouped by type, groups in first-seen order.
    """
    groups: dict[str, list[T]] = defaultdict(list)
    for item in source:
        if item is None or isinstance(item, (str, numbers.Number)):
            continue
        groups[type(item).__name__].append(item)

    if not groups:
        return []

    top = max(len(members) for members in groups.values())
    winners = {name for name, members in groups.items() if len(members) == top}
    return [item for name, members in groups.items() if name in winners for item in members]


def most_frequent(source: Iterable[T]) -> T:
    """Return the most common value; the earliest seen wins a tie.

    Values are grouped by hash, so unhashable items such as lists are rejected.
    """
    try:
        counts = Counter(source)
    except TypeError as exc:
        raise InvalidInputError(f"Cannot count unhashable values: {exc}") from exc
    if not counts:
        raise InvalidInputError("Cannot select the most frequent value of an empty source.")
    return counts.most_common(1)[0][0]
