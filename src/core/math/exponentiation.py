"""
Exponentiation — возведение в степень двоичным методом

Модуль обеспечивает безопасное возведение модуля в степень:
- Показатель задаётся последовательностью цифр и сворачивается в native int
- Жёсткий потолок показателя (ExponentOverflow) ограничивает время и размер
- Мягкий порог (ExponentAdvisory) — диагностика, не ошибка
- Итеративный square-and-multiply: O(log exponent) умножений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exponent == 0 → (1,), в том числе для base == 0 (0^0 = 1)
2. base == 0, exponent > 0 → (0,)
3. exponent == 1 → base без изменений
4. Свёртка показателя прекращается сразу после превышения потолка

СТОИМОСТЬ:
    Каждое умножение — O(len(x) * len(y)) (см. arithmetic.multiply_magnitudes),
    длина операндов растёт с каждым возведением в квадрат, поэтому общая
    стоимость определяется последними (самыми большими) умножениями.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from src.core.domain.errors import ExponentOverflow
from src.core.math.arithmetic import multiply_magnitudes
from src.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Digits,
    is_zero_digits,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXPONENT POLICY
# =============================================================================

# Жёсткий потолок показателя: больше → ExponentOverflow
EXPONENT_CEILING_DEFAULT: Final[int] = 1_000_000

# Мягкий порог: больше → ExponentAdvisory (вычисление продолжается)
EXPONENT_ADVISORY_THRESHOLD_DEFAULT: Final[int] = 1_000


@dataclass(frozen=True)
class ExponentAdvisory:
    """Предупреждение о большом показателе (не ошибка)."""

    exponent: int
    threshold: int

    @property
    def message(self) -> str:
        return (
            f"exponent {self.exponent} exceeds advisory threshold {self.threshold}; "
            f"computation may take a while"
        )


def collapse_exponent(exponent: Digits, ceiling: int = EXPONENT_CEILING_DEFAULT) -> int:
    """
    Свёртка последовательности цифр показателя в native int.

    Цифры читаются от старшей к младшей; свёртка прекращается, как только
    накопленное значение превысило потолок, поэтому очень длинный
    показатель не разворачивается целиком.

    Args:
        exponent: показатель (канонический модуль)
        ceiling: жёсткий потолок показателя

    Returns:
        Значение показателя, 0 <= value <= ceiling

    Raises:
        ExponentOverflow: если показатель больше ceiling
        ValueError: если ceiling < 0

    Examples:
        >>> collapse_exponent((0, 1))
        10
    """
    if ceiling < 0:
        raise ValueError(f"ceiling must be non-negative, got {ceiling}")

    value = 0
    for i in range(len(exponent) - 1, -1, -1):
        value = value * 10 + exponent[i]
        if value > ceiling:
            raise ExponentOverflow(
                f"exponent exceeds ceiling {ceiling}", ceiling=ceiling
            )
    return value


def check_exponent_advisory(
    exponent: int, threshold: int = EXPONENT_ADVISORY_THRESHOLD_DEFAULT
) -> Optional[ExponentAdvisory]:
    """
    Проверка мягкого порога показателя.

    Returns:
        ExponentAdvisory если exponent > threshold, иначе None
    """
    if exponent > threshold:
        return ExponentAdvisory(exponent=exponent, threshold=threshold)
    return None


# =============================================================================
# POWER
# =============================================================================


def power_by_squaring(base: Digits, exponent: int) -> Digits:
    """
    Двоичное возведение в степень с native показателем.

    Итеративная форма: аккумулятор и удваиваемое основание, без рекурсии.

    Raises:
        ValueError: если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return ONE_DIGITS
    if exponent == 1:
        return base

    result = ONE_DIGITS
    square = base
    while True:
        if exponent & 1:
            result = multiply_magnitudes(result, square)
        exponent >>= 1
        if not exponent:
            return result
        square = multiply_magnitudes(square, square)


def power_magnitudes(
    base: Digits,
    exponent: Digits,
    ceiling: int = EXPONENT_CEILING_DEFAULT,
) -> Digits:
    """
    Возведение модуля в степень, заданную последовательностью цифр.

    Частные случаи проверяются до свёртки показателя, в этом порядке:
    exponent 0 → (1,); base 0 → (0,); exponent 1 → base.

    Args:
        base: основание (канонический модуль)
        exponent: показатель (канонический модуль)
        ceiling: жёсткий потолок показателя

    Returns:
        base ** exponent как модуль

    Raises:
        ExponentOverflow: если показатель больше ceiling

    Examples:
        >>> power_magnitudes((2,), (0, 1))
        (4, 2, 0, 1)
    """
    if is_zero_digits(exponent):
        return ONE_DIGITS
    if is_zero_digits(base):
        return ZERO_DIGITS
    if exponent == ONE_DIGITS:
        return base

    exp = collapse_exponent(exponent, ceiling)
    logger.debug("power: base has %d digits, exponent=%d", len(base), exp)
    return power_by_squaring(base, exp)
