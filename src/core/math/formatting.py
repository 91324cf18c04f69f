"""Formatting — рендеринг значений в десятичный текст.

Внутреннее представление LSB first, поэтому направление обхода выбирает
вызывающий: most_significant_first=True даёт привычную запись.
"""

from src.core.domain.big_value import BigValue
from src.core.math.digits import Digits, validate_digits


def format_magnitude(digits: Digits, most_significant_first: bool = True) -> str:
    """
    Рендеринг модуля без знака.

    Raises:
        ValueError: если последовательность не каноническая (нарушение
            контракта вызывающим)

    Examples:
        >>> format_magnitude((4, 2, 0, 1))
        '1024'
        >>> format_magnitude((4, 2, 0, 1), most_significant_first=False)
        '4201'
    """
    validate_digits(digits, "magnitude")
    ordered = reversed(digits) if most_significant_first else iter(digits)
    return "".join(chr(ord("0") + d) for d in ordered)


def format_value(value: BigValue, most_significant_first: bool = True) -> str:
    """
    Рендеринг знакового значения.

    Канонический ноль → "0" без знака; отрицательное → "-" + цифры модуля.

    Examples:
        >>> format_value(BigValue(negative=True, magnitude=(9, 9, 8)))
        '-899'
    """
    text = format_magnitude(value.magnitude, most_significant_first)
    if value.negative and not value.is_zero():
        return "-" + text
    return text
