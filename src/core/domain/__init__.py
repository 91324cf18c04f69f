"""
Domain models для BigInt engine

Immutable Pydantic модели значений и таксономия ошибок.
"""

from .big_value import ONE_MAGNITUDE, ZERO_MAGNITUDE, BigValue
from .errors import (
    BigIntError,
    DivisionByZero,
    EmptyOperand,
    ErrorKind,
    ExponentOverflow,
    InvalidDigit,
    InvalidExpression,
    InvalidOperator,
)

__all__ = [
    # Models
    "BigValue",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Errors
    "BigIntError",
    "DivisionByZero",
    "EmptyOperand",
    "ErrorKind",
    "ExponentOverflow",
    "InvalidDigit",
    "InvalidExpression",
    "InvalidOperator",
]
