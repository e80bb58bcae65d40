"""Row-parallel matrix fill from a digit sequence."""

import threading
from itertools import islice
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, wait

import numpy as np

from digit_matrix.core.config import settings
from digit_matrix.core.errors import ResourceExhaustedError
from digit_matrix.core.logging import get_logger

logger = get_logger(__name__)

MATRIX_DTYPE = np.int32

_pool: ThreadPoolExecutor | None = None
_pool_lock = threading.Lock()


def get_worker_pool() -> ThreadPoolExecutor:
    """Return the process-wide pool used for row tasks, creating it on first use."""
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = ThreadPoolExecutor(
                max_workers=settings.matrix_max_workers,
                thread_name_prefix="matrix-row",
            )
        return _pool


def shutdown_worker_pool() -> None:
    global _pool
    with _pool_lock:
        if _pool is not None:
            _pool.shutdown(wait=True)
            _pool = None


def row_ranges(rows: int, columns: int, supply: int) -> list[tuple[int, int, int]]:
    """Return ``(row, offset, count)`` for every row.

    ``offset`` is where the row starts in the digit supply and ``count`` how
    many digits it takes from there; rows past the supply get ``count == 0``.
    """
    ranges: list[tuple[int, int, int]] = []
    for row in range(rows):
        offset = row * columns
        count = max(0, min(columns, supply - offset))
        ranges.append((row, offset, count))
    return ranges


def _allocate(rows: int, columns: int) -> np.ndarray:
    cells = rows * columns
    if cells > settings.max_matrix_cells:
        logger.error(
            "matrix.allocation_refused",
            rows=rows,
            columns=columns,
            max_cells=settings.max_matrix_cells,
        )
        raise ResourceExhaustedError(
            f"Matrix of {rows}x{columns} exceeds {settings.max_matrix_cells} cells."
        )
    try:
        return np.zeros((rows, columns), dtype=MATRIX_DTYPE)
    except MemoryError as exc:
        logger.exception("matrix.allocation_failed", rows=rows, columns=columns)
        raise ResourceExhaustedError(
            f"Unable to allocate a {rows}x{columns} matrix."
        ) from exc


def _fill_row(
    matrix: np.ndarray, digits: np.ndarray, row: int, offset: int, count: int
) -> None:
    if count:
        matrix[row, :count] = digits[offset : offset + count]


def populate_matrix(rows: int, columns: int, digits: Iterable[int]) -> np.ndarray:
    """Build a ``rows x columns`` matrix filled row-major from ``digits``.

    Cells beyond the digit supply stay zero and digits beyond ``rows * columns``
    are ignored. Each row is filled by its own task on the shared pool; the
    call returns once every row task has finished.
    """
    matrix = _allocate(rows, columns)
    if matrix.size == 0:
        return matrix

    supply = np.fromiter(islice(digits, matrix.size), dtype=MATRIX_DTYPE)
    ranges = row_ranges(rows, columns, len(supply))

    if rows == 1:
        _fill_row(matrix, supply, *ranges[0])
        return matrix

    pool = get_worker_pool()
    futures = [pool.submit(_fill_row, matrix, supply, *row_range) for row_range in ranges]
    wait(futures)
    for future in futures:
        future.result()
    return matrix
