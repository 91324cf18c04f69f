"""
Arithmetic — школьные алгоритмы над модулями

Модуль реализует сложение, вычитание и умножение последовательностей цифр:
- add_magnitudes: сложение с переносом
- subtract_magnitudes: вычитание с заёмом, знаковый результат
- multiply_magnitudes: свёртка с единственным проходом нормализации переносов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды — канонические неотрицательные модули
2. Результат всегда в канонической форме (без старших нулей)
3. Входы не мутируются, каждый вызов строит новый tuple
4. Ноль никогда не получает отрицательный знак

СЛОЖНОСТЬ:
    add/subtract: O(max(len(a), len(b)))
    multiply:     O(len(a) * len(b)) — потолок сложности для движка;
                  Karatsuba/FFT не используются
"""

from src.core.domain.big_value import BigValue
from src.core.math.digits import (
    ZERO_DIGITS,
    Digits,
    Ordering,
    compare_magnitudes,
    trim_leading_zeros,
)


# =============================================================================
# ADDITION
# =============================================================================


def add_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Сложение двух неотрицательных модулей.

    Только модули: оба операнда считаются неотрицательными. Знаковое
    сложение реализует src.core.math.signed.add_values.

    Результат выделяется на одну цифру длиннее более длинного операнда,
    переносы протягиваются к старшим разрядам, затем старшие нули
    отбрасываются.

    Examples:
        >>> add_magnitudes((9, 9, 9), (1,))
        (0, 0, 0, 1)
    """
    width = max(len(a), len(b))
    out = [0] * (width + 1)

    for i in range(width):
        total = out[i]
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        out[i] = total % 10
        out[i + 1] += total // 10

    return trim_leading_zeros(out)


# =============================================================================
# SUBTRACTION
# =============================================================================


def subtract_magnitudes(a: Digits, b: Digits) -> BigValue:
    """
    Вычитание модулей с корректным знаковым результатом.

    Сначала операнды сравниваются: при a == b сразу возвращается
    канонический ноль; при a < b операнды меняются местами и знак
    результата инвертируется.

    Args:
        a: уменьшаемое (модуль)
        b: вычитаемое (модуль)

    Returns:
        BigValue со значением a - b

    Examples:
        >>> subtract_magnitudes((0, 0, 1), (9, 9, 9)).negative
        True
    """
    order = compare_magnitudes(a, b)
    if order == Ordering.EQUAL:
        return BigValue.zero()

    flipped = order == Ordering.LESS
    if flipped:
        a, b = b, a

    out = list(a)
    for i in range(len(out)):
        if i < len(b):
            out[i] -= b[i]
        if out[i] < 0:
            # Заём у следующего разряда; a > b, поэтому i + 1 существует
            out[i] += 10
            out[i + 1] -= 1

    magnitude = trim_leading_zeros(out)
    return BigValue(negative=flipped, magnitude=magnitude)


# =============================================================================
# MULTIPLICATION
# =============================================================================


def multiply_magnitudes(a: Digits, b: Digits) -> Digits:
    """
    Умножение модулей столбиком (свёрткой).

    Произведения a[i] * b[j] накапливаются в result[i + j] без раннего
    переноса; затем один проход от младших разрядов к старшим
    нормализует корзины (> 9) и старшие нули отбрасываются.

    Нулевой операнд даёт одни нули при накоплении, то есть (0,) после trim.

    Examples:
        >>> multiply_magnitudes((3, 2, 1), (6, 5, 4))
        (8, 8, 0, 6, 5)
    """
    out = [0] * (len(a) + len(b))

    for i, da in enumerate(a):
        if da == 0:
            continue
        for j, db in enumerate(b):
            out[i + j] += da * db

    for i in range(len(out) - 1):
        out[i + 1] += out[i] // 10
        out[i] %= 10

    if not out:
        return ZERO_DIGITS
    return trim_leading_zeros(out)
