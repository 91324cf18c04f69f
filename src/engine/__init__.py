"""Engine — граница BigInt движка для внешнего коллаборатора (REPL/UI).

Принимает текстовые операнды и оператор, возвращает tagged result.
"""

from .calculator import (
    DIVISION_SEPARATOR_DEFAULT,
    SUPPORTED_OPERATORS,
    BigIntCalculator,
    CalculationResult,
    EngineConfig,
    Operator,
    parse_operator,
)
from .expression import ParsedExpression, split_expression

__all__ = [
    "DIVISION_SEPARATOR_DEFAULT",
    "SUPPORTED_OPERATORS",
    "BigIntCalculator",
    "CalculationResult",
    "EngineConfig",
    "Operator",
    "ParsedExpression",
    "parse_operator",
    "split_expression",
]
