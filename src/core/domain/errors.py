"""
Errors — таксономия ошибок BigInt engine

Все ошибки детектируются в начале соответствующей операции, частичных
вычислений для отката нет. Чистые функции из src.core.math поднимают
исключения; граница движка (src.engine) превращает их в tagged result.

Таксономия:
- DivisionByZero: делитель равен каноническому нулю
- ExponentOverflow: показатель степени больше жёсткого потолка
- InvalidOperator: токен оператора не из {+, -, *, /, ^}
- EmptyOperand: один из операндов пустая строка
- InvalidDigit: в операнде есть символ, не являющийся ASCII-цифрой
- InvalidExpression: в выражении нет оператора

ExponentAdvisory ошибкой не является (см. src.core.math.exponentiation).
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Тип ошибки для tagged result на границе движка."""

    DIVISION_BY_ZERO = "DivisionByZero"
    EXPONENT_OVERFLOW = "ExponentOverflow"
    INVALID_OPERATOR = "InvalidOperator"
    EMPTY_OPERAND = "EmptyOperand"
    INVALID_DIGIT = "InvalidDigit"
    INVALID_EXPRESSION = "InvalidExpression"


class BigIntError(Exception):
    """Базовое исключение BigInt engine.

    Каждый подкласс несёт свой ErrorKind, чтобы граница движка могла
    построить результат без isinstance-цепочек.
    """

    kind: ErrorKind


class DivisionByZero(BigIntError):
    """Деление на канонический ноль.

    В отличие от тихого (0, 0) позволяет вызывающему отличить
    "делитель ноль" от "частное законно равно нулю".
    """

    kind = ErrorKind.DIVISION_BY_ZERO


class ExponentOverflow(BigIntError):
    """Показатель степени превышает настроенный потолок."""

    kind = ErrorKind.EXPONENT_OVERFLOW

    def __init__(self, message: str, ceiling: int):
        super().__init__(message)
        self.ceiling = ceiling


class InvalidOperator(BigIntError):
    """Неподдерживаемый токен оператора."""

    kind = ErrorKind.INVALID_OPERATOR

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class EmptyOperand(BigIntError):
    kind = ErrorKind.EMPTY_OPERAND


class InvalidDigit(BigIntError):
    kind = ErrorKind.INVALID_DIGIT


class InvalidExpression(BigIntError):
    kind = ErrorKind.INVALID_EXPRESSION
