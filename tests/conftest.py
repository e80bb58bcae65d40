from collections.abc import Generator

import pytest

from digit_matrix.core.config import settings
from digit_matrix.processing.populator import shutdown_worker_pool


@pytest.fixture(autouse=True)
def fresh_worker_pool() -> Generator[None, None, None]:
    yield
    shutdown_worker_pool()


@pytest.fixture()
def small_cell_limit(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr(settings, "max_matrix_cells", 16)
    return 16


@pytest.fixture()
def messy_strings() -> list[str | None]:
    return [
        None,
        "",
        "1234",
        "999000===493",
        "34r4f3f3f3343",
        "2962728abcs1119__1",
    ]
