"""
Signed — знаковая композиция над BigValue

Функции над модулями (arithmetic, division, exponentiation) работают только
с неотрицательными последовательностями. Этот модуль добавляет знак:

- add_values: одинаковые знаки → сложение модулей; разные → вычитание
- subtract_values: a - b == a + (-b)
- multiply_values: знак = XOR знаков
- divide_values: усечение к нулю; sign(q) = XOR, sign(r) = sign(dividend)
- power_values: результат отрицателен iff основание < 0 и показатель нечётный

Инвариант для деления: quotient * divisor + remainder == dividend,
|remainder| < |divisor|.
"""

from typing import NamedTuple

from src.core.domain.big_value import BigValue
from src.core.math.arithmetic import (
    add_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)
from src.core.math.digits import Ordering, compare_magnitudes
from src.core.math.division import divide_magnitudes
from src.core.math.exponentiation import EXPONENT_CEILING_DEFAULT, power_magnitudes


class SignedDivisionResult(NamedTuple):
    """Результат знакового деления."""

    quotient: BigValue
    remainder: BigValue


def compare_values(a: BigValue, b: BigValue) -> Ordering:
    """Сравнение знаковых значений."""
    if a.negative != b.negative:
        return Ordering.LESS if a.negative else Ordering.GREATER

    order = compare_magnitudes(a.magnitude, b.magnitude)
    if not a.negative or order == Ordering.EQUAL:
        return order
    # Оба отрицательные: порядок модулей обратный
    return Ordering.GREATER if order == Ordering.LESS else Ordering.LESS


def add_values(a: BigValue, b: BigValue) -> BigValue:
    """
    Знаковое сложение.

    При разных знаках диспетчеризуется в subtract_magnitudes:
    (+a) + (-b) = a - b, (-a) + (+b) = b - a.

    Examples:
        >>> add_values(BigValue.from_text("5"), BigValue.from_text("8").negate()).negative
        True
    """
    if a.negative == b.negative:
        return BigValue(
            negative=a.negative,
            magnitude=add_magnitudes(a.magnitude, b.magnitude),
        )

    if a.negative:
        return subtract_magnitudes(b.magnitude, a.magnitude)
    return subtract_magnitudes(a.magnitude, b.magnitude)


def subtract_values(a: BigValue, b: BigValue) -> BigValue:
    return add_values(a, b.negate())


def multiply_values(a: BigValue, b: BigValue) -> BigValue:
    return BigValue(
        negative=a.negative != b.negative,
        magnitude=multiply_magnitudes(a.magnitude, b.magnitude),
    )


def divide_values(a: BigValue, b: BigValue) -> SignedDivisionResult:
    """
    Знаковое деление с усечением к нулю.

    Raises:
        DivisionByZero: если b — ноль

    Examples:
        -7 / 2 → (-3, -1); 7 / -2 → (-3, 1)
    """
    quotient, remainder = divide_magnitudes(a.magnitude, b.magnitude)
    return SignedDivisionResult(
        quotient=BigValue(negative=a.negative != b.negative, magnitude=quotient),
        remainder=BigValue(negative=a.negative, magnitude=remainder),
    )


def power_values(
    base: BigValue,
    exponent: BigValue,
    ceiling: int = EXPONENT_CEILING_DEFAULT,
) -> BigValue:
    """
    Знаковое возведение в степень (только целые, показатель >= 0).

    Raises:
        ValueError: если показатель отрицательный
        ExponentOverflow: если показатель больше ceiling
    """
    if exponent.negative:
        raise ValueError("exponent must be non-negative for integer power")

    magnitude = power_magnitudes(base.magnitude, exponent.magnitude, ceiling)
    return BigValue(
        negative=base.negative and exponent.is_odd(),
        magnitude=magnitude,
    )
