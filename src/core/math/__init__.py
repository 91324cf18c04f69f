"""
Core math modules для BigInt engine

Арифметика произвольной точности над последовательностями десятичных цифр.
"""

# Digits: представление и сравнение
from src.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Digits,
    Ordering,
    compare_magnitudes,
    digits_from_int,
    digits_from_text,
    is_canonical,
    is_zero_digits,
    trim_leading_zeros,
    validate_digits,
)

# Arithmetic: сложение, вычитание, умножение
from src.core.math.arithmetic import (
    add_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Division
from src.core.math.division import DivisionResult, divide_magnitudes

# Exponentiation
from src.core.math.exponentiation import (
    EXPONENT_ADVISORY_THRESHOLD_DEFAULT,
    EXPONENT_CEILING_DEFAULT,
    ExponentAdvisory,
    check_exponent_advisory,
    collapse_exponent,
    power_by_squaring,
    power_magnitudes,
)

# Signed composition
from src.core.math.signed import (
    SignedDivisionResult,
    add_values,
    compare_values,
    divide_values,
    multiply_values,
    power_values,
    subtract_values,
)

# Formatting
from src.core.math.formatting import format_magnitude, format_value

__all__ = [
    # Digits: Constants
    "ONE_DIGITS",
    "ZERO_DIGITS",
    # Digits: Types
    "Digits",
    "Ordering",
    # Digits: Functions
    "compare_magnitudes",
    "digits_from_int",
    "digits_from_text",
    "is_canonical",
    "is_zero_digits",
    "trim_leading_zeros",
    "validate_digits",
    # Arithmetic
    "add_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Division
    "DivisionResult",
    "divide_magnitudes",
    # Exponentiation: Constants
    "EXPONENT_ADVISORY_THRESHOLD_DEFAULT",
    "EXPONENT_CEILING_DEFAULT",
    # Exponentiation: Types
    "ExponentAdvisory",
    # Exponentiation: Functions
    "check_exponent_advisory",
    "collapse_exponent",
    "power_by_squaring",
    "power_magnitudes",
    # Signed
    "SignedDivisionResult",
    "add_values",
    "compare_values",
    "divide_values",
    "multiply_values",
    "power_values",
    "subtract_values",
    # Formatting
    "format_magnitude",
    "format_value",
]
