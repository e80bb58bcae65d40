"""Domain exception hierarchy for the digit matrix pipeline."""

from typing import Any


class AppError(Exception):
    """Base class for expected errors surfaced to callers and worker results."""

    code = "app_error"
    default_detail: Any = "Digit matrix processing failed."

    def __init__(self, detail: Any | None = None) -> None:
        """Initialize the error with custom or default detail payload."""
        self.detail = self.default_detail if detail is None else detail
        super().__init__(str(self.detail))


class InvalidInputError(AppError, TypeError):
    """Error raised when a required sequence is missing or holds a non-string item."""

    code = "invalid_input"
    default_detail = "Input sequence is required."


class PatternTimeoutError(AppError, TimeoutError):
    """Error raised when the sanitizer cleanup match exceeds its time budget."""

    code = "pattern_timeout"
    default_detail = "Sanitizer pattern match timed out."


class DivideByZeroError(AppError, ZeroDivisionError):
    """Error raised when a length's leading decimal digit is zero."""

    code = "divide_by_zero"
    default_detail = "Row count resolved to zero."


class ResourceExhaustedError(AppError, MemoryError):
    """Error raised when a matrix cannot be allocated."""

    code = "resource_exhausted"
    default_detail = "Matrix dimensions exceed allocatable memory."
