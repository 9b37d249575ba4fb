"""
Arithmetic — Точная десятичная арифметика

Операции над каноническими тройками RawDecimal:
- add / subtract: выравнивание scale, сложение или вычитание модулей
- multiply: умножение «в столбик», scale = a.scale + b.scale
- divide: деление «уголком» до precision дробных цифр + округление
- power: целая степень через возведение в квадрат
- quantize: округление до заданного числа дробных цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый результат проходит через canonicalize
2. Операнды не изменяются, результат — новое значение
3. Деление на ноль → DivisionByZero, 0 ** -n → UndefinedPower
4. Округление применяется к модулю, знак результата сохраняется

ЗНАК (multiply, divide):
    negative = a.negative XOR b.negative, ноль всегда положительный

ДЕЛЕНИЕ:
    |a / b| = (A * 10**sb) / (B * 10**sa)
    Частное вычисляется до precision + 1 дробных цифр (guard digit),
    остаток деления даёт sticky-признак для HALF_EVEN.
"""

from typing import Optional, Sequence

from pilosa.core.config import DEFAULT_DIVISION_CONFIG, DivisionConfig, RoundingMode
from pilosa.core.errors import DivisionByZero, UndefinedPower
from pilosa.core.math.digits import (
    ONE_DIGITS,
    Digits,
    add_digits,
    align_scales,
    compare_digits,
    divmod_digits,
    is_zero_digits,
    multiply_digits,
    pad_right,
    strip_leading_zeros,
    subtract_digits,
)
from pilosa.core.math.normalizer import ONE, ZERO, RawDecimal, canonicalize
from pilosa.logging_config import get_logger, log_operation

logger = get_logger(__name__)


# =============================================================================
# ЗНАК
# =============================================================================


def negate_raw(a: RawDecimal) -> RawDecimal:
    """Смена знака; ноль остаётся положительным"""
    if is_zero_digits(a.magnitude):
        return ZERO
    return RawDecimal(not a.negative, a.magnitude, a.scale)


def absolute_raw(a: RawDecimal) -> RawDecimal:
    """Модуль значения"""
    return RawDecimal(False, a.magnitude, a.scale)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_raw(a: RawDecimal, b: RawDecimal) -> RawDecimal:
    """
    Сумма a + b.

    Знаки совпадают → модули складываются, знак общий.
    Знаки различаются → из большего модуля вычитается меньший,
    знак берётся от операнда с большим модулем.
    """
    u, v, scale = align_scales(a.magnitude, a.scale, b.magnitude, b.scale)

    if a.negative == b.negative:
        return canonicalize(a.negative, add_digits(u, v), scale)

    order = compare_digits(u, v)
    if order == 0:
        return ZERO
    if order > 0:
        return canonicalize(a.negative, subtract_digits(u, v), scale)
    return canonicalize(b.negative, subtract_digits(v, u), scale)


def subtract_raw(a: RawDecimal, b: RawDecimal) -> RawDecimal:
    """Разность a - b, определена как a + (-b)"""
    return add_raw(a, negate_raw(b))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_raw(a: RawDecimal, b: RawDecimal) -> RawDecimal:
    """Произведение a * b"""
    magnitude = multiply_digits(a.magnitude, b.magnitude)
    return canonicalize(a.negative != b.negative, magnitude, a.scale + b.scale)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_digits(
    digits: Sequence[int],
    drop: int,
    rounding: RoundingMode,
    sticky: bool = False,
) -> Digits:
    """
    Отбрасывание drop младших цифр с округлением.

    Args:
        digits: Модуль, старшая цифра первая
        drop: Количество отбрасываемых младших цифр (>= 1)
        rounding: Режим округления
        sticky: True если за отбрасываемыми цифрами есть ненулевой остаток

    Returns:
        Округлённый модуль (digits // 10**drop, +1 при округлении вверх)

    Examples:
        >>> round_digits((1, 2, 5), 1, RoundingMode.HALF_UP)
        (1, 3)
        >>> round_digits((1, 2, 5), 1, RoundingMode.HALF_EVEN)
        (1, 2)
        >>> round_digits((1, 2, 5), 1, RoundingMode.HALF_EVEN, sticky=True)
        (1, 3)
    """
    if drop < 1:
        raise ValueError(f"drop must be >= 1, got {drop}")

    values = tuple(digits)
    if len(values) <= drop:
        kept: Digits = (0,)
        dropped = (0,) * (drop - len(values)) + values
    else:
        kept = values[:-drop]
        dropped = values[-drop:]

    first = dropped[0]
    rest_nonzero = sticky or any(dropped[1:])

    if rounding is RoundingMode.DOWN:
        round_up = False
    elif rounding is RoundingMode.HALF_UP:
        round_up = first >= 5
    elif rounding is RoundingMode.HALF_EVEN:
        round_up = first > 5 or (first == 5 and (rest_nonzero or kept[-1] % 2 == 1))
    else:
        raise ValueError(f"Unsupported rounding mode: {rounding!r}")

    if round_up:
        return add_digits(kept, ONE_DIGITS)
    return strip_leading_zeros(kept)


def quantize_raw(
    a: RawDecimal,
    places: int,
    rounding: RoundingMode = RoundingMode.HALF_UP,
) -> RawDecimal:
    """
    Округление до не более чем places дробных цифр.

    Значения с scale <= places возвращаются без изменений.

    Raises:
        ValueError: Если places < 0
    """
    if isinstance(places, bool) or not isinstance(places, int):
        raise TypeError(f"places must be an int, got {type(places).__name__}")
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if a.scale <= places:
        return a

    magnitude = round_digits(a.magnitude, a.scale - places, rounding)
    return canonicalize(a.negative, magnitude, places)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_raw(
    a: RawDecimal,
    b: RawDecimal,
    config: Optional[DivisionConfig] = None,
) -> RawDecimal:
    """
    Частное a / b с точностью config.precision дробных цифр.

    Последняя сохранённая цифра округляется по config.rounding.
    Точные частные нормализуются (0.5 остаётся 0.5, а не 0.500...).

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divide_raw(ONE, RawDecimal(False, (3,), 0), DivisionConfig(precision=4))
        RawDecimal(negative=False, magnitude=(3, 3, 3, 3), scale=4)
        >>> divide_raw(RawDecimal(False, (2,), 0), RawDecimal(False, (3,), 0), DivisionConfig(precision=4))
        RawDecimal(negative=False, magnitude=(6, 6, 6, 7), scale=4)
    """
    if config is None:
        config = DEFAULT_DIVISION_CONFIG

    if is_zero_digits(b.magnitude):
        raise DivisionByZero("division by zero")

    negative = a.negative != b.negative
    if is_zero_digits(a.magnitude):
        return ZERO

    precision = config.precision

    # +1 guard digit для решения об округлении
    numerator = pad_right(a.magnitude, b.scale + precision + 1)
    denominator = pad_right(b.magnitude, a.scale)
    quotient, remainder = divmod_digits(numerator, denominator)

    inexact = not is_zero_digits(remainder) or quotient[-1] != 0
    magnitude = round_digits(quotient, 1, config.rounding, sticky=not is_zero_digits(remainder))

    if inexact:
        log_operation(
            logger,
            "Quotient rounded to division precision",
            operation="divide",
            extra={"precision": precision, "rounding": config.rounding.value},
        )

    return canonicalize(negative, magnitude, precision)


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def _power_by_squaring(base: RawDecimal, exponent: int) -> RawDecimal:
    # exponent > 0; O(log exponent) умножений
    result = ONE
    while exponent:
        if exponent & 1:
            result = multiply_raw(result, base)
        exponent >>= 1
        if exponent:
            base = multiply_raw(base, base)
    return result


def power_raw(
    a: RawDecimal,
    exponent: int,
    config: Optional[DivisionConfig] = None,
) -> RawDecimal:
    """
    Целая степень a ** exponent.

    - exponent == 0 → 1 (включая 0 ** 0)
    - exponent > 0 → возведение в квадрат
    - exponent < 0 → 1 / a ** -exponent по политике деления config

    Raises:
        TypeError: Если exponent не int
        UndefinedPower: Если a == 0 и exponent < 0
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")

    if exponent == 0:
        return ONE

    if exponent > 0:
        return _power_by_squaring(a, exponent)

    if is_zero_digits(a.magnitude):
        raise UndefinedPower(f"zero cannot be raised to a negative power ({exponent})")

    log_operation(
        logger,
        "Negative exponent evaluated through division",
        operation="pow",
        extra={"exponent": exponent},
    )
    return divide_raw(ONE, _power_by_squaring(a, -exponent), config)
