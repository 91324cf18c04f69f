"""
Тесты для Digits — представление модуля и сравнение

Проверяемые инварианты:
1. Каноническая форма: нет старших нулей, ноль = (0,)
2. compare_magnitudes — полный порядок, согласованный с int
3. Входы не мутируются
"""

import pytest

from src.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Ordering,
    compare_magnitudes,
    digits_from_int,
    digits_from_text,
    is_canonical,
    is_zero_digits,
    trim_leading_zeros,
    validate_digits,
)


SAMPLE_NUMBERS = [0, 1, 7, 9, 10, 11, 99, 100, 101, 999, 1000, 12345, 54321, 10**20, 10**20 + 1]


# =============================================================================
# ТЕСТЫ: Canonical form
# =============================================================================


class TestTrimLeadingZeros:
    """Тесты trim_leading_zeros: приведение к канонической форме."""

    def test_strips_most_significant_zeros(self):
        assert trim_leading_zeros([4, 2, 0, 0]) == (4, 2)

    def test_keeps_single_zero(self):
        assert trim_leading_zeros([0, 0, 0]) == ZERO_DIGITS
        assert trim_leading_zeros([0]) == ZERO_DIGITS

    def test_empty_is_zero(self):
        assert trim_leading_zeros([]) == ZERO_DIGITS

    def test_keeps_inner_zeros(self):
        assert trim_leading_zeros([0, 0, 1]) == (0, 0, 1)

    def test_returns_tuple(self):
        assert isinstance(trim_leading_zeros([1, 2]), tuple)


class TestCanonicalChecks:
    """Тесты is_canonical / validate_digits / is_zero_digits."""

    def test_canonical_sequences(self):
        assert is_canonical((0,))
        assert is_canonical((3, 2, 1))
        assert is_canonical((0, 0, 1))

    def test_non_canonical_sequences(self):
        assert not is_canonical(())
        assert not is_canonical((1, 0))
        assert not is_canonical((10,))
        assert not is_canonical((-1,))
        assert not is_canonical((1, True))

    def test_validate_raises(self):
        with pytest.raises(ValueError, match="canonical"):
            validate_digits((5, 0), "lhs")

    def test_validate_returns_input(self):
        assert validate_digits((5, 1)) == (5, 1)

    def test_is_zero(self):
        assert is_zero_digits(ZERO_DIGITS)
        assert not is_zero_digits(ONE_DIGITS)


class TestConversions:
    """Тесты digits_from_text / digits_from_int."""

    def test_text_is_reversed(self):
        assert digits_from_text("120") == (0, 2, 1)

    def test_text_leading_zeros_dropped(self):
        assert digits_from_text("000") == ZERO_DIGITS
        assert digits_from_text("007") == (7,)

    def test_text_rejects_empty(self):
        with pytest.raises(ValueError, match="empty"):
            digits_from_text("")

    def test_text_rejects_non_digits(self):
        with pytest.raises(ValueError, match="ASCII digits"):
            digits_from_text("12a")
        with pytest.raises(ValueError):
            digits_from_text("-5")

    def test_int_matches_text(self):
        for n in SAMPLE_NUMBERS:
            assert digits_from_int(n) == digits_from_text(str(n))

    def test_int_rejects_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            digits_from_int(-1)


# =============================================================================
# ТЕСТЫ: Comparison
# =============================================================================


class TestCompareMagnitudes:
    """Тесты compare_magnitudes: полный порядок на модулях."""

    def test_shorter_is_less(self):
        assert compare_magnitudes((9,), (0, 1)) == Ordering.LESS
        assert compare_magnitudes((0, 1), (9,)) == Ordering.GREATER

    def test_equal_length_most_significant_decides(self):
        assert compare_magnitudes((9, 1), (0, 2)) == Ordering.LESS
        assert compare_magnitudes((0, 3), (9, 2)) == Ordering.GREATER

    def test_equal(self):
        assert compare_magnitudes((3, 2, 1), (3, 2, 1)) == Ordering.EQUAL
        assert compare_magnitudes(ZERO_DIGITS, ZERO_DIGITS) == Ordering.EQUAL

    def test_reflexive(self):
        for n in SAMPLE_NUMBERS:
            d = digits_from_int(n)
            assert compare_magnitudes(d, d) == Ordering.EQUAL

    def test_agrees_with_int_ordering(self):
        for x in SAMPLE_NUMBERS:
            for y in SAMPLE_NUMBERS:
                expected = Ordering.LESS if x < y else Ordering.GREATER if x > y else Ordering.EQUAL
                assert compare_magnitudes(digits_from_int(x), digits_from_int(y)) == expected

    def test_antisymmetric(self):
        a, b = digits_from_int(12345), digits_from_int(12354)
        assert compare_magnitudes(a, b) == Ordering.LESS
        assert compare_magnitudes(b, a) == Ordering.GREATER
