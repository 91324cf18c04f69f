"""BigValue — знаковое целое произвольной точности

Immutable Pydantic модель: (negative, magnitude).

Инварианты:
1. magnitude — непустой tuple цифр [0, 9], младшая цифра первой
2. Нет ведущих (старших) нулей, кроме канонического нуля (0,)
3. Канонический ноль никогда не отрицательный: negative принудительно False
4. Знак хранится отдельным флагом, никогда не смешивается с цифрами
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.errors import EmptyOperand, InvalidDigit


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO_MAGNITUDE: Final[tuple[int, ...]] = (0,)
ONE_MAGNITUDE: Final[tuple[int, ...]] = (1,)

ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# MODEL
# =============================================================================


class BigValue(BaseModel):
    """Знаковое целое: отдельный флаг знака + magnitude (LSB first).

    Создаётся парсингом десятичного текста (from_text) или как результат
    арифметической операции. Операции всегда возвращают новые значения.
    """

    negative: bool = Field(default=False, description="True если значение < 0")
    magnitude: tuple[int, ...] = Field(
        default=ZERO_MAGNITUDE, description="Цифры модуля, младшая первой"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def force_unsigned_zero(cls, data: Any) -> Any:
        """Канонический ноль всегда положительный."""
        if isinstance(data, dict):
            magnitude = data.get("magnitude", ZERO_MAGNITUDE)
            if isinstance(magnitude, (list, tuple)) and tuple(magnitude) == ZERO_MAGNITUDE:
                data = {**data, "negative": False}
        return data

    @field_validator("magnitude", mode="before")
    @classmethod
    def validate_magnitude(cls, v: Any) -> tuple[int, ...]:
        """Проверка канонической формы последовательности цифр."""
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"magnitude must be a sequence of digits, got {type(v).__name__}")
        digits = tuple(v)
        if not digits:
            raise ValueError("magnitude must contain at least one digit")
        for digit in digits:
            # bool не считается цифрой
            if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
                raise ValueError(f"magnitude digit out of range [0, 9]: {digit!r}")
        if len(digits) > 1 and digits[-1] == 0:
            raise ValueError(f"magnitude has leading zero digits: {digits}")
        return digits

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigValue":
        return cls(magnitude=ZERO_MAGNITUDE)

    @classmethod
    def one(cls) -> "BigValue":
        return cls(magnitude=ONE_MAGNITUDE)

    @classmethod
    def from_magnitude(cls, magnitude: tuple[int, ...], negative: bool = False) -> "BigValue":
        return cls(negative=negative, magnitude=magnitude)

    @classmethod
    def from_text(cls, text: str) -> "BigValue":
        """
        Парсинг десятичного текста в значение.

        Текст — только ASCII-цифры, без знака (отрицательные литералы из
        текста не принимаются). Ведущие нули отбрасываются: "007" → 7.

        Args:
            text: десятичная строка, например "12345"

        Returns:
            Неотрицательный BigValue

        Raises:
            EmptyOperand: если text пустой
            InvalidDigit: если в text есть не-цифра

        Examples:
            >>> BigValue.from_text("120").magnitude
            (0, 2, 1)
        """
        if not text:
            raise EmptyOperand("operand must not be empty")

        bad = [ch for ch in text if ch not in ASCII_DIGITS]
        if bad:
            raise InvalidDigit(f"operand {text!r} contains non-digit character {bad[0]!r}")

        digits = [ord(ch) - ord("0") for ch in reversed(text)]
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        return cls(magnitude=tuple(digits))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.magnitude == ZERO_MAGNITUDE

    def is_negative(self) -> bool:
        return self.negative

    def digit_count(self) -> int:
        """Количество цифр модуля (без знака)."""
        return len(self.magnitude)

    def is_odd(self) -> bool:
        return self.magnitude[0] % 2 == 1

    # -------------------------------------------------------------------------
    # Sign manipulation
    # -------------------------------------------------------------------------

    def negate(self) -> "BigValue":
        """Смена знака; ноль остаётся неотрицательным."""
        return BigValue(negative=not self.negative, magnitude=self.magnitude)

    def absolute(self) -> "BigValue":
        if not self.negative:
            return self
        return BigValue(negative=False, magnitude=self.magnitude)

    def with_sign(self, negative: bool) -> "BigValue":
        return BigValue(negative=negative, magnitude=self.magnitude)

    def __neg__(self) -> "BigValue":
        return self.negate()
