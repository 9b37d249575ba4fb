"""
Errors — Иерархия исключений Pilosa

Все ошибки домена наследуются от PilosaError и дополнительно от
соответствующего встроенного исключения (ValueError, ArithmeticError,
ZeroDivisionError), чтобы вызывающий код мог ловить их привычным способом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка всегда пробрасывается вызывающему без изменений
2. Никаких неявных подстановок (например, ноль вместо неразобранной строки)
"""

from typing import Optional


class PilosaError(Exception):
    """Базовое исключение для всех ошибок Pilosa."""

    pass


# =============================================================================
# ПАРСИНГ И КОНВЕРСИЯ
# =============================================================================


class ParseError(PilosaError, ValueError):
    """
    Некорректная десятичная строка.

    Attributes:
        text: Исходная строка (если доступна)
        position: Индекс первого недопустимого символа или None,
            если ошибка структурная (пустая строка, нет цифр)
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        self.text = text
        self.position = position

        detail = message
        if text is not None:
            detail = f"{detail} in {text!r}"
        if position is not None:
            detail = f"{detail} at position {position}"

        super().__init__(detail)


class ConversionError(PilosaError, ValueError):
    """
    Невозможна точная конверсия из нативного типа.

    Возникает для NaN/Inf, для int вне диапазона int32 (from_i32),
    и для неподдерживаемых типов входа.
    """

    pass


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class DecimalArithmeticError(PilosaError, ArithmeticError):
    """Базовое исключение для ошибок арифметических операций."""

    pass


class DivisionByZero(DecimalArithmeticError, ZeroDivisionError):
    """Делитель равен нулю."""

    pass


class UndefinedPower(DecimalArithmeticError):
    """
    Степень не определена: нулевое основание с отрицательным показателем.

    0 ** -n == 1 / 0 ** n == 1 / 0
    """

    pass
