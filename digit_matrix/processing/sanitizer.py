"""Raw item normalization ahead of digit extraction."""

import regex

from digit_matrix.core.config import settings
from digit_matrix.core.errors import InvalidInputError, PatternTimeoutError
from digit_matrix.core.logging import get_logger

logger = get_logger(__name__)

EMPTY_PLACEHOLDER = "0"
STRAY_SYMBOL_PATTERN = regex.compile(r"^\D$")


def sanitize(item: str | None, timeout: float | None = None) -> str:
    """Map a raw item to the string the dimension rules operate on.

    ``None`` and ``""`` become ``"0"``. A string made of exactly one non-digit
    character is reduced to ``""``. Everything else is returned unchanged.
    """
    if item is None or item == "":
        return EMPTY_PLACEHOLDER
    if not isinstance(item, str):
        raise InvalidInputError(f"Item of type {type(item).__name__} is not a string.")

    budget = settings.sanitize_timeout_seconds if timeout is None else timeout
    try:
        return STRAY_SYMBOL_PATTERN.sub("", item, timeout=budget)
    except TimeoutError as exc:
        logger.warning("sanitizer.timeout", item=item, timeout_seconds=budget)
        raise PatternTimeoutError(
            f"Sanitizer match exceeded {budget} seconds."
        ) from exc
