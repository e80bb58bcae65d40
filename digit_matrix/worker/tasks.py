from typing import Any

from pydantic import ValidationError

from digit_matrix.core.errors import AppError, InvalidInputError
from digit_matrix.core.logging import bind_context, clear_context, get_logger
from digit_matrix.core.schemas import ConversionRequest, ConversionResult, TaskState
from digit_matrix.processing import to_matrices

from .celery_app import celery_app

logger = get_logger(__name__)


@celery_app.task
def ping() -> str:
    return "pong"


def _failure(exc: AppError) -> dict[str, Any]:
    return ConversionResult(
        state=TaskState.failure,
        error_code=exc.code,
        error=str(exc.detail),
    ).model_dump(mode="json")


@celery_app.task(name="convert_strings", bind=True)
def convert_strings(self: Any, items: list[str | None], length_filter: int = 0) -> dict[str, Any]:
    clear_context()
    bind_context(task_id=getattr(self.request, "id", None), task="convert_strings")

    try:
        try:
            request = ConversionRequest(items=items, length_filter=length_filter)
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid conversion payload: {exc.error_count()} error(s).") from exc

        logger.info(
            "tasks.convert.started",
            item_count=len(request.items),
            length_filter=request.length_filter,
        )
        matrices = list(to_matrices(request.items, request.length_filter))
        result = ConversionResult(
            state=TaskState.success,
            matrices=[matrix.tolist() for matrix in matrices],
            shapes=[(int(matrix.shape[0]), int(matrix.shape[1])) for matrix in matrices],
        )
        logger.info("tasks.convert.completed", matrix_count=len(matrices))
        return result.model_dump(mode="json")
    except AppError as exc:
        logger.warning("tasks.convert.failed", error_code=exc.code, error=str(exc.detail))
        return _failure(exc)
    except Exception:
        logger.exception("tasks.convert.unexpected_error")
        raise
    finally:
        clear_context()
