from digit_matrix.processing.digits import DigitSequence, extract_digits


def test_extract_digits_skips_non_digits() -> None:
    assert list(extract_digits("a1b2-c3")) == [1, 2, 3]


def test_extract_digits_is_restartable() -> None:
    digits = extract_digits("9x8")

    assert list(digits) == [9, 8]
    assert list(digits) == [9, 8]


def test_extract_digits_empty_when_no_digits() -> None:
    digits = extract_digits("(*)_")

    assert list(digits) == []
    assert digits.digit_count() == 0


def test_extract_digits_reads_unicode_decimals_only() -> None:
    # Arabic-Indic three is a decimal digit, superscript two is not.
    assert list(extract_digits("x٣²")) == [3]


def test_digit_count_matches_iteration() -> None:
    digits = DigitSequence("ABD34783489BSNCI3289")

    assert digits.digit_count() == len(list(digits)) == 12
