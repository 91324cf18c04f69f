"""Expression — разбор выражения вида "<цифры><оператор><цифры>".

Оператор — первый символ, не являющийся ASCII-цифрой. Поддерживается ровно
один оператор; выражения из нескольких операторов не разбираются.
"""

from dataclasses import dataclass

from src.core.domain.errors import EmptyOperand, InvalidExpression


@dataclass(frozen=True)
class ParsedExpression:
    """Выражение, разделённое на операнды и токен оператора."""

    left: str
    operator: str
    right: str


def split_expression(text: str) -> ParsedExpression:
    """
    Разделение выражения по первому не-цифровому символу.

    Проверка содержимого правого операнда и поддержки оператора — дело
    движка (InvalidDigit / InvalidOperator).

    Args:
        text: выражение, например "1234+5678"

    Returns:
        ParsedExpression(left="1234", operator="+", right="5678")

    Raises:
        InvalidExpression: если в тексте нет оператора
        EmptyOperand: если левый или правый операнд пустой

    Examples:
        >>> split_expression("100/7")
        ParsedExpression(left='100', operator='/', right='7')
    """
    for i, ch in enumerate(text):
        if not "0" <= ch <= "9":
            left, right = text[:i], text[i + 1:]
            break
    else:
        raise InvalidExpression(f"expression {text!r} contains no operator")

    if not left or not right:
        raise EmptyOperand(f"expression {text!r} has an empty operand")

    return ParsedExpression(left=left, operator=ch, right=right)
