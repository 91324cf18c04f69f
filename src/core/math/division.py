"""
Division — деление столбиком с остатком

Модуль реализует деление неотрицательных модулей:
- Частное и остаток — неотрицательные модули
- Цифра частного ищется бинарным поиском по d ∈ [0, 9]
- Знаковая композиция (sign(q) = XOR, sign(r) = sign(dividend)) —
  ответственность src.core.math.signed.divide_values

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на канонический ноль → DivisionByZero (никогда не тихий (0, 0))
2. quotient * divisor + remainder == dividend
3. 0 <= remainder < divisor
4. Бегущий остаток приводится к канонической форме после каждого сноса
   цифры: компаратор корректен только на канонических последовательностях

АЛГОРИТМ:
    Для каждой цифры делимого от старшей к младшей:
      res = digit :: res   (снос цифры в младший разряд)
      d   = max { d ∈ [0, 9] : d × divisor <= res }   (бинарный поиск,
            d × divisor монотонно по d)
      q[i] = d
      res = res - d × divisor
"""

from typing import NamedTuple

from src.core.domain.errors import DivisionByZero
from src.core.math.arithmetic import multiply_magnitudes, subtract_magnitudes
from src.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Digits,
    Ordering,
    compare_magnitudes,
    is_zero_digits,
    trim_leading_zeros,
)


class DivisionResult(NamedTuple):
    """Результат деления модулей."""

    quotient: Digits
    remainder: Digits


def _largest_quotient_digit(res: Digits, divisor: Digits) -> int:
    """
    Наибольшая цифра d ∈ [0, 9] такая, что d × divisor <= res.

    Бинарный поиск: lo/hi сходятся к границе монотонного предиката.
    """
    lo, hi = 0, 9
    while lo <= hi:
        mid = (lo + hi) // 2
        trial = multiply_magnitudes((mid,), divisor)
        if compare_magnitudes(trial, res) != Ordering.GREATER:
            lo = mid + 1
        else:
            hi = mid - 1
    return hi


def divide_magnitudes(a: Digits, b: Digits) -> DivisionResult:
    """
    Деление с остатком: a = quotient * b + remainder.

    Args:
        a: делимое (канонический модуль)
        b: делитель (канонический модуль, не ноль)

    Returns:
        DivisionResult(quotient, remainder)

    Raises:
        DivisionByZero: если b == (0,)

    Examples:
        >>> divide_magnitudes((0, 0, 1), (7,))
        DivisionResult(quotient=(4, 1), remainder=(2,))
    """
    if is_zero_digits(b):
        raise DivisionByZero("divisor must not be zero")

    if is_zero_digits(a):
        return DivisionResult(ZERO_DIGITS, ZERO_DIGITS)

    order = compare_magnitudes(a, b)
    if order == Ordering.LESS:
        return DivisionResult(ZERO_DIGITS, a)
    if order == Ordering.EQUAL:
        return DivisionResult(ONE_DIGITS, ZERO_DIGITS)

    quotient = [0] * len(a)
    res: Digits = ZERO_DIGITS

    for i in range(len(a) - 1, -1, -1):
        res = trim_leading_zeros((a[i],) + res)

        d = _largest_quotient_digit(res, b)
        quotient[i] = d
        if d > 0:
            # d × b <= res, поэтому разность неотрицательна
            res = subtract_magnitudes(res, multiply_magnitudes(b, (d,))).magnitude

    return DivisionResult(trim_leading_zeros(quotient), trim_leading_zeros(res))
