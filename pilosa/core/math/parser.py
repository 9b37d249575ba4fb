"""
Parser — Построение канонического значения из внешних форм

Источники:
- Десятичная строка: [+|-]DIGITS[.DIGITS]
- Целое int32 (с проверкой диапазона) и произвольное int
- float (только конечные значения)

ГРАНИЦА ТОЧНОСТИ float:
float конвертируется через кратчайшее десятичное представление, которое
однозначно восстанавливает то же значение (repr). Поэтому
from_f64(0.1) == from_string("0.1"), а не точное двоичное разложение
0.1000000000000000055511151231257827... Это документированное поведение.

Пробелы вокруг числа и экспоненциальная запись в строках не принимаются.
"""

import math
from typing import Final

from pilosa.core.config import INT32_MAX, INT32_MIN
from pilosa.core.errors import ConversionError, ParseError
from pilosa.core.math.digits import digits_from_int
from pilosa.core.math.normalizer import RawDecimal, canonicalize
from pilosa.logging_config import get_logger, log_operation

logger = get_logger(__name__)

SIGN_CHARS: Final[str] = "+-"
DECIMAL_POINT: Final[str] = "."


# =============================================================================
# СТРОКИ
# =============================================================================


def parse_decimal(text: str) -> RawDecimal:
    """
    Разбор десятичной строки.

    Грамматика: необязательный знак (+/-), одна или более цифр,
    затем необязательно одна точка и одна или более цифр.

    Args:
        text: Десятичная строка

    Returns:
        Каноническая тройка; scale = количество цифр после точки
        до нормализации

    Raises:
        TypeError: Если text не str
        ParseError: Пустая строка, нет цифр, больше одной точки,
            посторонний символ, знак без цифр, точка без цифр с любой стороны

    Examples:
        >>> parse_decimal("-0012.340")
        RawDecimal(negative=True, magnitude=(1, 2, 3, 4), scale=2)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    if not text:
        raise ParseError("empty input", text=text)

    negative = False
    start = 0
    if text[0] in SIGN_CHARS:
        negative = text[0] == "-"
        start = 1

    integer_digits: list[int] = []
    fraction_digits: list[int] = []
    seen_point = False

    for position in range(start, len(text)):
        ch = text[position]

        if "0" <= ch <= "9":
            if seen_point:
                fraction_digits.append(ord(ch) - 48)
            else:
                integer_digits.append(ord(ch) - 48)
        elif ch == DECIMAL_POINT:
            if seen_point:
                raise ParseError("more than one decimal point", text=text, position=position)
            if not integer_digits:
                raise ParseError("missing digits before decimal point", text=text, position=position)
            seen_point = True
        else:
            raise ParseError(f"unexpected character {ch!r}", text=text, position=position)

    if not integer_digits:
        raise ParseError("no digits", text=text)

    if seen_point and not fraction_digits:
        raise ParseError("missing digits after decimal point", text=text)

    return canonicalize(negative, integer_digits + fraction_digits, len(fraction_digits))


# =============================================================================
# ЦЕЛЫЕ
# =============================================================================


def _require_int(value: object, name: str) -> int:
    # bool является подклассом int, но числом здесь не считается
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError(f"{name} must be an int, got {type(value).__name__}")
    return value


def convert_int(value: int) -> RawDecimal:
    """
    Точная конверсия произвольного int.

    Raises:
        ConversionError: Если value не int
    """
    value = _require_int(value, "value")
    return canonicalize(value < 0, digits_from_int(value), 0)


def convert_int32(value: int) -> RawDecimal:
    """
    Точная конверсия знакового 32-битного целого.

    Raises:
        ConversionError: Если value не int или вне [INT32_MIN, INT32_MAX]

    Examples:
        >>> convert_int32(-242952842)
        RawDecimal(negative=True, magnitude=(2, 4, 2, 9, 5, 2, 8, 4, 2), scale=0)
    """
    value = _require_int(value, "value")

    if not INT32_MIN <= value <= INT32_MAX:
        raise ConversionError(
            f"value must be in int32 range [{INT32_MIN}, {INT32_MAX}], got {value}"
        )

    return convert_int(value)


# =============================================================================
# FLOAT
# =============================================================================


def expand_exponent(text: str) -> str:
    """
    Перевод экспоненциальной записи float в позиционную.

    Строки без экспоненты возвращаются без изменений.

    Examples:
        >>> expand_exponent("1.5e-07")
        '0.00000015'
        >>> expand_exponent("-2.5e+16")
        '-25000000000000000'
        >>> expand_exponent("12.5")
        '12.5'
    """
    mantissa, marker, exponent = text.lower().partition("e")
    if not marker:
        return text

    negative = mantissa.startswith("-")
    mantissa = mantissa.lstrip(SIGN_CHARS)

    integer_part, _, fraction_part = mantissa.partition(DECIMAL_POINT)
    digits = integer_part + fraction_part
    point = len(integer_part) + int(exponent)

    if point <= 0:
        body = "0." + "0" * (-point) + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + DECIMAL_POINT + digits[point:]

    return ("-" if negative else "") + body


def convert_float(value: float) -> RawDecimal:
    """
    Конверсия float через его кратчайшее десятичное представление.

    int принимается и конвертируется точно (convert_int).

    Raises:
        ConversionError: NaN/Inf или неподдерживаемый тип

    Examples:
        >>> convert_float(0.1)
        RawDecimal(negative=False, magnitude=(1,), scale=1)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConversionError(f"value must be a float, got {type(value).__name__}")

    if isinstance(value, int):
        return convert_int(value)

    if not math.isfinite(value):
        raise ConversionError(f"value must be finite (not NaN/Inf), got {value}")

    rendered = repr(value)
    text = expand_exponent(rendered)

    if text != rendered:
        log_operation(
            logger,
            "Expanded float exponent notation",
            operation="from_f64",
            extra={"repr": rendered, "expanded": text},
        )

    return parse_decimal(text)
