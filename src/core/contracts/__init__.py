"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе BigInt engine.
"""

from .validators import (
    CalculationRequestValidator,
    CalculationResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculation_request,
    validate_calculation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationRequestValidator",
    "CalculationResultValidator",
    # Functions
    "validate_calculation_request",
    "validate_calculation_result",
]
