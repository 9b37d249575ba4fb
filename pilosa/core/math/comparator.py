"""
Comparator — Полный порядок над десятичными значениями

Сравнение по математическому значению, независимо от различий scale.
Значения не изменяются.
"""

from enum import Enum

from pilosa.core.math.digits import align_scales, compare_digits, is_zero_digits
from pilosa.core.math.normalizer import RawDecimal


class Ordering(int, Enum):
    """Результат сравнения (совместим с -1/0/+1)"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_raw(a: RawDecimal, b: RawDecimal) -> Ordering:
    """
    Сравнение двух значений.

    Алгоритм:
    1. Знаки различаются → положительное больше (нули всегда равны)
    2. Знаки совпадают → модули выравниваются по max(scale) и
       сравниваются поразрядно от старшей цифры
    3. Для отрицательных направление сравнения инвертируется

    Examples:
        >>> compare_raw(RawDecimal(False, (1, 5), 1), RawDecimal(False, (2,), 0))
        <Ordering.LESS: -1>
        >>> compare_raw(RawDecimal(True, (1, 5), 1), RawDecimal(True, (2,), 0))
        <Ordering.GREATER: 1>
    """
    a_zero = is_zero_digits(a.magnitude)
    b_zero = is_zero_digits(b.magnitude)

    if a_zero and b_zero:
        return Ordering.EQUAL

    a_negative = a.negative and not a_zero
    b_negative = b.negative and not b_zero

    if a_negative != b_negative:
        return Ordering.LESS if a_negative else Ordering.GREATER

    u, v, _ = align_scales(a.magnitude, a.scale, b.magnitude, b.scale)
    result = compare_digits(u, v)

    if a_negative:
        result = -result

    return Ordering(result)
