"""
Operations — Функциональный API над BigNum

Именованные операции с тем же контрактом, что и методы/операторы BigNum:
from_string, from_i32, from_int, from_f64, add, subtract, multiply,
divide, pow, negate, absolute, quantize, compare, to_string.
"""

from typing import Optional

from pilosa.core.config import DivisionConfig, RoundingMode
from pilosa.core.domain.big_num import BigNum
from pilosa.core.math.comparator import Ordering

# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def from_string(text: str) -> BigNum:
    """Разбор десятичной строки (ParseError при ошибке)"""
    return BigNum.from_string(text)


def from_i32(value: int) -> BigNum:
    """Точная конверсия int32 (ConversionError вне диапазона)"""
    return BigNum.from_i32(value)


def from_int(value: int) -> BigNum:
    return BigNum.from_int(value)


def from_f64(value: float) -> BigNum:
    """Конверсия конечного float (ConversionError для NaN/Inf)"""
    return BigNum.from_f64(value)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: BigNum, b: BigNum) -> BigNum:
    return a.add(b)


def subtract(a: BigNum, b: BigNum) -> BigNum:
    return a.subtract(b)


def multiply(a: BigNum, b: BigNum) -> BigNum:
    return a.multiply(b)


def divide(
    a: BigNum,
    b: BigNum,
    precision: Optional[int] = None,
    rounding: Optional[RoundingMode] = None,
    config: Optional[DivisionConfig] = None,
) -> BigNum:
    """
    Частное a / b.

    По умолчанию 20 дробных цифр и RoundingMode.HALF_UP.

    Raises:
        DivisionByZero: Если b == 0
    """
    return a.divide(b, precision=precision, rounding=rounding, config=config)


def pow(
    a: BigNum,
    exponent: int,
    precision: Optional[int] = None,
    rounding: Optional[RoundingMode] = None,
    config: Optional[DivisionConfig] = None,
) -> BigNum:
    """
    Целая степень a ** exponent.

    Raises:
        UndefinedPower: Ноль в отрицательной степени
    """
    return a.pow(exponent, precision=precision, rounding=rounding, config=config)


def negate(a: BigNum) -> BigNum:
    return a.negate()


def absolute(a: BigNum) -> BigNum:
    return a.absolute()


def quantize(a: BigNum, places: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> BigNum:
    return a.quantize(places, rounding)


# =============================================================================
# СРАВНЕНИЕ И ФОРМАТ
# =============================================================================


def compare(a: BigNum, b: BigNum) -> Ordering:
    return a.compare(b)


def to_string(a: BigNum) -> str:
    return a.to_string()
