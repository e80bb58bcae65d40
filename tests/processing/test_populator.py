from concurrent.futures import Future
from types import SimpleNamespace
from typing import Any

import numpy as np
import pytest

from digit_matrix.core.errors import ResourceExhaustedError
from digit_matrix.processing import populator
from digit_matrix.processing.populator import populate_matrix, row_ranges


class _ReversingPool:
    """Runs row tasks in reverse submission order once all have been submitted."""

    def __init__(self, expected: int) -> None:
        self.expected = expected
        self.pending: list[tuple[Future[Any], Any, tuple[Any, ...]]] = []

    def submit(self, fn: Any, *args: Any) -> Future[Any]:
        future: Future[Any] = Future()
        self.pending.append((future, fn, args))
        if len(self.pending) == self.expected:
            for pending_future, task, task_args in reversed(self.pending):
                pending_future.set_result(task(*task_args))
        return future


def test_row_ranges_split_supply_by_row() -> None:
    assert row_ranges(3, 2, 5) == [(0, 0, 2), (1, 2, 2), (2, 4, 1)]
    assert row_ranges(3, 2, 1) == [(0, 0, 1), (1, 2, 0), (2, 4, 0)]


def test_populate_matrix_exact_fill() -> None:
    matrix = populate_matrix(2, 3, [1, 2, 3, 4, 5, 6])

    assert matrix.tolist() == [[1, 2, 3], [4, 5, 6]]


def test_populate_matrix_zero_pads_shortfall() -> None:
    assert populate_matrix(2, 3, [7, 8]).tolist() == [[7, 8, 0], [0, 0, 0]]


def test_populate_matrix_truncates_excess() -> None:
    assert populate_matrix(1, 2, iter([1, 2, 3])).tolist() == [[1, 2]]


def test_populate_matrix_empty_shapes() -> None:
    assert populate_matrix(0, 0, [1]).shape == (0, 0)
    assert populate_matrix(1, 0, []).shape == (1, 0)


def test_populate_matrix_is_independent_of_row_completion_order(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    pool = _ReversingPool(expected=4)
    monkeypatch.setattr(populator, "get_worker_pool", lambda: pool)

    matrix = populate_matrix(4, 3, range(10))

    assert len(pool.pending) == 4
    assert matrix.tolist() == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9, 0, 0]]


def test_populate_matrix_large_rows_on_shared_pool() -> None:
    digits = [index % 10 for index in range(9 * 5000)]

    matrix = populate_matrix(9, 5000, digits)

    np.testing.assert_array_equal(matrix, np.array(digits).reshape(9, 5000))


def test_populate_matrix_filled_cells_match_supply() -> None:
    for rows, columns, supply in [(2, 3, 4), (3, 3, 20), (1, 7, 0)]:
        filled = sum(count for _, _, count in row_ranges(rows, columns, supply))
        assert filled == min(rows * columns, supply)


def test_populate_matrix_refuses_oversized_grid(small_cell_limit: int) -> None:
    with pytest.raises(ResourceExhaustedError, match="exceeds 16 cells") as exc_info:
        populate_matrix(5, 5, [])

    assert isinstance(exc_info.value, MemoryError)


def test_populate_matrix_maps_allocation_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def _zeros(*_args: Any, **_kwargs: Any) -> np.ndarray:
        raise MemoryError("out of memory")

    monkeypatch.setattr(populator, "np", SimpleNamespace(zeros=_zeros))

    with pytest.raises(ResourceExhaustedError, match="Unable to allocate a 3x3 matrix"):
        populate_matrix(3, 3, [1])


def test_get_worker_pool_is_shared() -> None:
    assert populator.get_worker_pool() is populator.get_worker_pool()
