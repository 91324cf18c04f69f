"""BigInt Calculator — граница движка для внешнего коллаборатора

Принимает два десятичных операнда (строки ASCII-цифр без знака) и токен
оператора из {+, -, *, /, ^}, возвращает tagged result:
- Успех: одно значение (для "/" — частное и остаток) + advisories
- Ошибка: ErrorKind + сообщение; процесс никогда не прерывается

Порядок проверок:
1. Пустые операнды → EmptyOperand
2. Неподдерживаемый оператор → InvalidOperator
3. Не-цифры в операндах → InvalidDigit
4. Операция: DivisionByZero / ExponentOverflow из чистых функций

Внутренних повторов нет: все операции детерминированы.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Final, Optional

from src.core.contracts import validate_calculation_request, validate_calculation_result
from src.core.domain.big_value import BigValue
from src.core.domain.errors import BigIntError, EmptyOperand, ErrorKind, InvalidOperator
from src.core.math.digits import ONE_DIGITS
from src.core.math.exponentiation import (
    EXPONENT_ADVISORY_THRESHOLD_DEFAULT,
    EXPONENT_CEILING_DEFAULT,
    ExponentAdvisory,
    check_exponent_advisory,
    collapse_exponent,
)
from src.core.math.formatting import format_value
from src.core.math.signed import (
    add_values,
    divide_values,
    multiply_values,
    power_values,
    subtract_values,
)
from src.diagnostics.resource_ledger import ResourceLedger
from src.engine.expression import split_expression

logger = logging.getLogger(__name__)


# =============================================================================
# OPERATORS
# =============================================================================


class Operator(str, Enum):
    """Поддерживаемые операторы."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"


SUPPORTED_OPERATORS: Final[frozenset[str]] = frozenset(op.value for op in Operator)

# Операторы с единственным значением-результатом
_SIMPLE_OPERATIONS: Final[Dict[Operator, Callable[[BigValue, BigValue], BigValue]]] = {
    Operator.ADD: add_values,
    Operator.SUBTRACT: subtract_values,
    Operator.MULTIPLY: multiply_values,
}

# Разделитель частного и остатка при рендеринге деления
DIVISION_SEPARATOR_DEFAULT: Final[str] = "......"


def parse_operator(token: str) -> Operator:
    """
    Raises:
        InvalidOperator: если token не из SUPPORTED_OPERATORS
    """
    if token not in SUPPORTED_OPERATORS:
        raise InvalidOperator(f"unsupported operator {token!r}", token=token)
    return Operator(token)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    exponent_ceiling — жёсткий потолок показателя (больше → ExponentOverflow).
    exponent_advisory_threshold — мягкий порог (больше → ExponentAdvisory).
    most_significant_first — направление рендеринга цифр.
    """

    exponent_ceiling: int = EXPONENT_CEILING_DEFAULT
    exponent_advisory_threshold: int = EXPONENT_ADVISORY_THRESHOLD_DEFAULT
    most_significant_first: bool = True

    def __post_init__(self):
        if self.exponent_ceiling < 1:
            raise ValueError(f"exponent_ceiling must be >= 1, got {self.exponent_ceiling}")
        if self.exponent_advisory_threshold < 0:
            raise ValueError(
                f"exponent_advisory_threshold must be >= 0, got {self.exponent_advisory_threshold}"
            )
        if self.exponent_advisory_threshold > self.exponent_ceiling:
            raise ValueError(
                f"exponent_advisory_threshold {self.exponent_advisory_threshold} "
                f"exceeds exponent_ceiling {self.exponent_ceiling}"
            )


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculationResult:
    """Tagged result вычисления."""

    ok: bool
    operator: str

    # Успех
    value: Optional[BigValue] = None
    remainder: Optional[BigValue] = None  # только для "/"
    advisories: tuple[ExponentAdvisory, ...] = field(default_factory=tuple)

    # Ошибка
    error_kind: Optional[ErrorKind] = None
    error_message: str = ""

    # Рендеринг
    most_significant_first: bool = True

    @classmethod
    def failure(cls, operator: str, error: BigIntError) -> "CalculationResult":
        return cls(
            ok=False,
            operator=operator,
            error_kind=error.kind,
            error_message=str(error),
        )

    def rendered(self) -> tuple[str, ...]:
        """Десятичные строки результата: (value,) или (quotient, remainder)."""
        if not self.ok:
            return ()
        values = [self.value] if self.remainder is None else [self.value, self.remainder]
        return tuple(format_value(v, self.most_significant_first) for v in values)

    def render(self, separator: str = DIVISION_SEPARATOR_DEFAULT) -> str:
        """
        Одна строка результата; частное и остаток соединяются separator.

        Raises:
            ValueError: если результат — ошибка
        """
        if not self.ok:
            raise ValueError(f"cannot render failed result: {self.error_kind.value}")
        return separator.join(self.rendered())

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту calculation_result."""
        return {
            "ok": self.ok,
            "operator": self.operator,
            "values": list(self.rendered()),
            "error_kind": self.error_kind.value if self.error_kind else None,
            "error_message": self.error_message,
            "advisories": [a.message for a in self.advisories],
        }


# =============================================================================
# CALCULATOR
# =============================================================================


class BigIntCalculator:
    """Вычислитель выражений над большими целыми.

    Без общего изменяемого состояния, кроме необязательного ledger,
    который передаётся явно.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        ledger: Optional[ResourceLedger] = None,
    ):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
            ledger: диагностический учёт выделений (опционально)
        """
        self.config = config or EngineConfig()
        self.ledger = ledger

    def evaluate(self, left: str, operator: str, right: str) -> CalculationResult:
        """Вычисление `left operator right`.

        Args:
            left: левый операнд, ASCII-цифры
            operator: токен оператора
            right: правый операнд, ASCII-цифры

        Returns:
            CalculationResult (успех или ошибка)
        """
        logger.debug("evaluate: %d digits %r %d digits", len(left), operator, len(right))
        try:
            if not left or not right:
                raise EmptyOperand("operands must not be empty")
            op = parse_operator(operator)
            a = BigValue.from_text(left)
            b = BigValue.from_text(right)

            if self.ledger is None:
                return self._dispatch(op, a, b)
            with self.ledger.scope():
                self.ledger.acquire("operand.left", a.digit_count())
                self.ledger.acquire("operand.right", b.digit_count())
                result = self._dispatch(op, a, b)
                self.ledger.acquire("result.value", result.value.digit_count())
                if result.remainder is not None:
                    self.ledger.acquire("result.remainder", result.remainder.digit_count())
                return result
        except BigIntError as e:
            logger.info("evaluate failed: %s: %s", e.kind.value, e)
            return CalculationResult.failure(operator, e)

    def evaluate_expression(self, text: str) -> CalculationResult:
        """Вычисление выражения вида "1234+5678"."""
        try:
            parsed = split_expression(text)
        except BigIntError as e:
            logger.info("expression rejected: %s: %s", e.kind.value, e)
            return CalculationResult.failure("", e)
        return self.evaluate(parsed.left, parsed.operator, parsed.right)

    def evaluate_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Вычисление по JSON контракту.

        Raises:
            ValidationError: если payload не соответствует calculation_request
        """
        validate_calculation_request(payload)
        result = self.evaluate(payload["left"], payload["operator"], payload["right"]).to_dict()
        validate_calculation_result(result)
        return result

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def _dispatch(self, op: Operator, a: BigValue, b: BigValue) -> CalculationResult:
        msf = self.config.most_significant_first

        if op in _SIMPLE_OPERATIONS:
            return CalculationResult(
                ok=True,
                operator=op.value,
                value=_SIMPLE_OPERATIONS[op](a, b),
                most_significant_first=msf,
            )

        if op == Operator.DIVIDE:
            quotient, remainder = divide_values(a, b)
            return CalculationResult(
                ok=True,
                operator=op.value,
                value=quotient,
                remainder=remainder,
                most_significant_first=msf,
            )

        return self._power(a, b)

    def _power(self, base: BigValue, exponent: BigValue) -> CalculationResult:
        advisories: tuple[ExponentAdvisory, ...] = ()

        # Частные случаи (0, 1, нулевое основание) не требуют свёртки показателя
        if not (base.is_zero() or exponent.is_zero() or exponent.magnitude == ONE_DIGITS):
            exp = collapse_exponent(exponent.magnitude, self.config.exponent_ceiling)
            advisory = check_exponent_advisory(exp, self.config.exponent_advisory_threshold)
            if advisory is not None:
                logger.warning(advisory.message)
                advisories = (advisory,)

        value = power_values(base, exponent, self.config.exponent_ceiling)
        return CalculationResult(
            ok=True,
            operator=Operator.POWER.value,
            value=value,
            advisories=advisories,
            most_significant_first=self.config.most_significant_first,
        )
