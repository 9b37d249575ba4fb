"""
Formatter — Каноническое строковое представление

Формат: [-]INTEGER[.FRACTION]
- знак "-" только для отрицательных ненулевых (никогда "+")
- целая часть без ведущих нулей (кроме одиночного "0")
- дробная часть без завершающих нулей
- без экспоненциальной записи
"""

from pilosa.core.math.digits import digits_to_text, is_zero_digits
from pilosa.core.math.normalizer import RawDecimal


def format_decimal(value: RawDecimal) -> str:
    """
    Строка для канонического значения.

    Модуль короче scale дополняется нулями слева: (5,), scale=3 → "0.005".

    Examples:
        >>> format_decimal(RawDecimal(True, (1, 2, 3, 4), 2))
        '-12.34'
        >>> format_decimal(RawDecimal(False, (5,), 3))
        '0.005'
    """
    digits = digits_to_text(value.magnitude)
    scale = value.scale

    if scale == 0:
        body = digits
    else:
        if len(digits) <= scale:
            digits = "0" * (scale - len(digits) + 1) + digits
        body = f"{digits[:-scale]}.{digits[-scale:]}"

    if value.negative and not is_zero_digits(value.magnitude):
        return "-" + body
    return body
