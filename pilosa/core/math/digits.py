"""
Digits — Арифметика беззнаковых последовательностей десятичных цифр

Модуль содержит примитивы над модулями чисел (magnitude):
- Сравнение и выравнивание по scale
- Сложение с переносом и вычитание с заимствованием
- Умножение «в столбик» (Knuth, TAOCP vol. 2, Algorithm M)
- Деление «уголком» с остатком

Представление: tuple[int, ...], старшая цифра первая, каждая цифра 0..9.
Все функции чистые: вход не изменяется, результат — новый tuple
без ведущих нулей (кроме единственного (0,)).
"""

from typing import Final, Iterable, Sequence

Digits = tuple[int, ...]

ZERO_DIGITS: Final[Digits] = (0,)
ONE_DIGITS: Final[Digits] = (1,)

# Размер блока при конверсии int <-> цифры (меньше лимита str(int) в CPython)
INT_CHUNK_DIGITS: Final[int] = 1000


# =============================================================================
# КОНВЕРСИЯ И НОРМАЛИЗАЦИЯ ПОСЛЕДОВАТЕЛЬНОСТЕЙ
# =============================================================================


def strip_leading_zeros(digits: Iterable[int]) -> Digits:
    """
    Удаление ведущих нулей.

    Examples:
        >>> strip_leading_zeros((0, 0, 1, 2))
        (1, 2)
        >>> strip_leading_zeros((0, 0))
        (0,)
        >>> strip_leading_zeros(())
        (0,)
    """
    values = tuple(digits)
    start = 0
    while start < len(values) - 1 and values[start] == 0:
        start += 1

    if not values:
        return ZERO_DIGITS
    return values[start:]


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если все цифры нулевые (или последовательность пуста)"""
    return not any(digits)


def digits_from_int(value: int) -> Digits:
    """
    Цифры модуля целого числа.

    Конверсия идёт блоками по INT_CHUNK_DIGITS цифр, поэтому лимит
    интерпретатора на длину str(int) не применяется.

    Examples:
        >>> digits_from_int(-1203)
        (1, 2, 0, 3)
    """
    n = abs(value)
    base = 10**INT_CHUNK_DIGITS
    chunks = []

    while n >= base:
        n, low = divmod(n, base)
        chunks.append(str(low).zfill(INT_CHUNK_DIGITS))
    chunks.append(str(n))

    return tuple(ord(ch) - 48 for ch in "".join(reversed(chunks)))


def digits_to_int(digits: Sequence[int]) -> int:
    """
    Целое число по цифрам модуля (блоками по INT_CHUNK_DIGITS).

    Examples:
        >>> digits_to_int((1, 2, 0, 3))
        1203
    """
    value = 0
    for start in range(0, len(digits), INT_CHUNK_DIGITS):
        chunk = digits[start:start + INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(digits_to_text(chunk))
    return value


def digits_to_text(digits: Sequence[int]) -> str:
    """(1, 0, 5) → '105'"""
    return "".join(chr(48 + d) for d in digits)


def pad_right(digits: Sequence[int], count: int) -> Digits:
    """Умножение на 10**count дописыванием нулей справа"""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return tuple(digits) + (0,) * count


def align_scales(
    u: Sequence[int],
    u_scale: int,
    v: Sequence[int],
    v_scale: int,
) -> tuple[Digits, Digits, int]:
    """
    Выравнивание двух модулей к общему scale = max(u_scale, v_scale).

    Операнд с меньшим scale дополняется нулями справа.

    Returns:
        (u_aligned, v_aligned, common_scale)

    Examples:
        >>> align_scales((1, 5), 1, (2,), 0)
        ((1, 5), (2, 0), 1)
    """
    scale = max(u_scale, v_scale)
    return pad_right(u, scale - u_scale), pad_right(v, scale - v_scale), scale


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_digits(u: Sequence[int], v: Sequence[int]) -> int:
    """
    Сравнение модулей.

    Returns:
        -1 если u < v, 0 если u == v, +1 если u > v
    """
    a = strip_leading_zeros(u)
    b = strip_leading_zeros(v)

    # Более длинная целая часть решает
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for da, db in zip(a, b):
        if da != db:
            return -1 if da < db else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_digits(u: Sequence[int], v: Sequence[int]) -> Digits:
    """
    Сложение модулей с переносом.

    Examples:
        >>> add_digits((9, 9), (1,))
        (1, 0, 0)
    """
    result = []
    carry = 0
    i = len(u) - 1
    j = len(v) - 1

    while i >= 0 or j >= 0 or carry:
        total = carry
        if i >= 0:
            total += u[i]
        if j >= 0:
            total += v[j]

        result.append(total % 10)
        carry = total // 10
        i -= 1
        j -= 1

    result.reverse()
    return strip_leading_zeros(result)


def subtract_digits(u: Sequence[int], v: Sequence[int]) -> Digits:
    """
    Вычитание модулей с заимствованием: u - v.

    Raises:
        ValueError: Если u < v (результат был бы отрицательным)

    Examples:
        >>> subtract_digits((1, 0, 0), (1,))
        (9, 9)
    """
    if compare_digits(u, v) < 0:
        raise ValueError("subtract_digits requires u >= v")

    result = []
    borrow = 0
    j = len(v) - 1

    for i in range(len(u) - 1, -1, -1):
        diff = u[i] - borrow
        if j >= 0:
            diff -= v[j]
            j -= 1

        if diff < 0:
            diff += 10
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    result.reverse()
    return strip_leading_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digits(u: Sequence[int], v: Sequence[int]) -> Digits:
    """
    Умножение модулей «в столбик», O(len(u) * len(v)).

    Цифры каждого частичного произведения сразу аккумулируются в w,
    перенос протягивается внутри строки.

    Examples:
        >>> multiply_digits((1, 2), (1, 2))
        (1, 4, 4)
    """
    if is_zero_digits(u) or is_zero_digits(v):
        return ZERO_DIGITS
    if tuple(v) == ONE_DIGITS:
        return strip_leading_zeros(u)
    if tuple(u) == ONE_DIGITS:
        return strip_leading_zeros(v)

    # Младшая цифра первая
    ur = tuple(reversed(u))
    vr = tuple(reversed(v))
    m = len(ur)
    w = [0] * (m + len(vr))

    for j, vj in enumerate(vr):
        if vj == 0:
            continue

        carry = 0
        for i, ui in enumerate(ur):
            t = ui * vj + w[i + j] + carry
            w[i + j] = t % 10
            carry = t // 10
        w[j + m] = carry

    w.reverse()
    return strip_leading_zeros(w)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_digits(u: Sequence[int], v: Sequence[int]) -> tuple[Digits, Digits]:
    """
    Деление «уголком»: (u // v, u % v).

    Каждая цифра частного подбирается повторным вычитанием делителя
    (не более 9 вычитаний на цифру).

    Raises:
        ZeroDivisionError: Если v == 0

    Examples:
        >>> divmod_digits((1, 0, 0), (7,))
        ((1, 4), (2,))
    """
    if is_zero_digits(v):
        raise ZeroDivisionError("divmod_digits divisor is zero")

    divisor = strip_leading_zeros(v)
    remainder: Digits = ZERO_DIGITS
    quotient = []

    for digit in u:
        remainder = strip_leading_zeros(remainder + (digit,))

        count = 0
        while compare_digits(remainder, divisor) >= 0:
            remainder = subtract_digits(remainder, divisor)
            count += 1

        quotient.append(count)

    return strip_leading_zeros(quotient), remainder
