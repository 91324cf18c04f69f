"""
Digits — представление модуля и сравнение

Модуль задаёт представление модуля большого целого и базовые примитивы:
- Digits: tuple цифр [0, 9], младшая цифра первой (index 0 = единицы)
- Каноническая форма: без старших нулей, ноль = (0,)
- compare_magnitudes: полный порядок на канонических модулях

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции возвращают канонические последовательности
2. Входные последовательности никогда не мутируются
3. Длина канонической последовательности строго упорядочивает модули
"""

from enum import Enum
from typing import Final, Iterable

from src.core.domain.big_value import ONE_MAGNITUDE, ZERO_MAGNITUDE

Digits = tuple[int, ...]

ZERO_DIGITS: Final[Digits] = ZERO_MAGNITUDE
ONE_DIGITS: Final[Digits] = ONE_MAGNITUDE


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух модулей."""

    LESS = "LESS"
    EQUAL = "EQUAL"
    GREATER = "GREATER"


# =============================================================================
# CANONICAL FORM
# =============================================================================


def trim_leading_zeros(digits: Iterable[int]) -> Digits:
    """
    Приведение последовательности к канонической форме.

    Отбрасывает старшие (хвостовые в LSB-first записи) нули, оставляя
    минимум одну цифру. Пустой вход даёт канонический ноль.

    Examples:
        >>> trim_leading_zeros([4, 2, 0, 0])
        (4, 2)
        >>> trim_leading_zeros([0, 0, 0])
        (0,)
    """
    buf = list(digits)
    while len(buf) > 1 and buf[-1] == 0:
        buf.pop()
    if not buf:
        return ZERO_DIGITS
    return tuple(buf)


def is_zero_digits(digits: Digits) -> bool:
    return digits == ZERO_DIGITS


def is_canonical(digits: Digits) -> bool:
    """Проверка канонической формы без исключений."""
    if not digits:
        return False
    if any(not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9 for d in digits):
        return False
    return len(digits) == 1 or digits[-1] != 0


def validate_digits(digits: Digits, name: str = "digits") -> Digits:
    """
    Валидация канонической последовательности.

    Raises:
        ValueError: если последовательность пустая, содержит не-цифры
            или имеет старшие нули
    """
    if not is_canonical(digits):
        raise ValueError(f"{name} must be a canonical digit sequence, got {digits!r}")
    return digits


def digits_from_int(value: int) -> Digits:
    """
    Разложение неотрицательного native int в последовательность цифр.

    Используется только для малых значений (цифра частного, тесты);
    арифметика над большими числами идёт цифра за цифрой.
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value == 0:
        return ZERO_DIGITS
    out = []
    while value:
        value, digit = divmod(value, 10)
        out.append(digit)
    return tuple(out)


def digits_from_text(text: str) -> Digits:
    """
    Разбор строки ASCII-цифр (MSB first) в LSB-first последовательность.

    Raises:
        ValueError: если строка пустая или содержит не-цифры
    """
    if not text:
        raise ValueError("text must not be empty")
    if not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"text must contain ASCII digits only, got {text!r}")
    return trim_leading_zeros(ord(ch) - ord("0") for ch in reversed(text))


# =============================================================================
# COMPARISON
# =============================================================================


def compare_magnitudes(a: Digits, b: Digits) -> Ordering:
    """
    Сравнение двух канонических модулей.

    Более короткая каноническая последовательность меньше. При равной длине
    цифры сравниваются от старшей к младшей, первое отличие решает.

    Args:
        a: первый модуль (канонический)
        b: второй модуль (канонический)

    Returns:
        Ordering.LESS если a < b, GREATER если a > b, EQUAL если совпадают

    Examples:
        >>> compare_magnitudes((9,), (0, 1))
        <Ordering.LESS: 'LESS'>
        >>> compare_magnitudes((3, 2, 1), (3, 2, 1))
        <Ordering.EQUAL: 'EQUAL'>
    """
    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.LESS if a[i] < b[i] else Ordering.GREATER

    return Ordering.EQUAL
