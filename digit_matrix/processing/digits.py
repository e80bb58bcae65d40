"""Digit extraction from sanitized strings."""

from collections.abc import Iterator


class DigitSequence:
    """Restartable view over the decimal digits of a string.

    Every ``iter()`` rescans the source left to right, so the sequence can be
    consumed more than once. Non-digit characters are skipped entirely.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[int]:
        for char in self._text:
            if char.isdecimal():
                yield int(char)

    def __repr__(self) -> str:
        return f"DigitSequence({self._text!r})"

    def digit_count(self) -> int:
        return sum(1 for char in self._text if char.isdecimal())


def extract_digits(text: str) -> DigitSequence:
    return DigitSequence(text)
