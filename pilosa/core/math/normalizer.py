"""
Normalizer — Каноническая форма десятичного значения

Сырое значение — тройка (negative, magnitude, scale):
- negative: знак
- magnitude: цифры модуля, старшая первая
- scale: количество цифр после десятичной точки

КАНОНИЧЕСКИЕ ИНВАРИАНТЫ:
1. В magnitude нет ведущих нулей (кроме единственного (0,) для нуля)
2. При scale > 0 последняя цифра magnitude ненулевая
3. Ноль представлен единственным образом: (False, (0,), 0)
"""

from typing import NamedTuple, Sequence

from pilosa.core.math.digits import Digits, ZERO_DIGITS, is_zero_digits, strip_leading_zeros


class RawDecimal(NamedTuple):
    """Тройка (negative, magnitude, scale) без гарантий каноничности"""

    negative: bool
    magnitude: Digits
    scale: int


ZERO: RawDecimal = RawDecimal(False, ZERO_DIGITS, 0)
ONE: RawDecimal = RawDecimal(False, (1,), 0)


def validate_raw(magnitude: Sequence[int], scale: int) -> None:
    """
    Проверка корректности сырой тройки.

    Raises:
        ValueError: Если scale < 0, magnitude пуст или содержит не-цифры
    """
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an int, got {scale!r}")
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    if len(magnitude) == 0:
        raise ValueError("magnitude must contain at least one digit")

    for digit in magnitude:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"magnitude digits must be ints in 0..9, got {digit!r}")


def canonicalize(negative: bool, magnitude: Sequence[int], scale: int) -> RawDecimal:
    """
    Приведение сырой тройки к канонической форме.

    1. Отбрасывает дробные нули справа, уменьшая scale (до scale = 0)
    2. Отбрасывает ведущие нули (но не до пустой последовательности)
    3. Для нулевого модуля: знак положительный, scale = 0

    Raises:
        ValueError: Если тройка некорректна (см. validate_raw)

    Examples:
        >>> canonicalize(False, (0, 1, 5, 0), 2)
        RawDecimal(negative=False, magnitude=(1, 5), scale=1)
        >>> canonicalize(True, (0, 0, 0), 2)
        RawDecimal(negative=False, magnitude=(0,), scale=0)
    """
    validate_raw(magnitude, scale)
    digits = tuple(magnitude)

    if is_zero_digits(digits):
        return ZERO

    end = len(digits)
    while scale > 0 and digits[end - 1] == 0:
        end -= 1
        scale -= 1

    return RawDecimal(bool(negative), strip_leading_zeros(digits[:end]), scale)


def is_canonical(negative: bool, magnitude: Sequence[int], scale: int) -> bool:
    """True если тройка уже в канонической форме"""
    try:
        validate_raw(magnitude, scale)
    except ValueError:
        return False

    if len(magnitude) > 1 and magnitude[0] == 0:
        return False

    if is_zero_digits(magnitude):
        return not negative and scale == 0

    return scale == 0 or magnitude[-1] != 0
