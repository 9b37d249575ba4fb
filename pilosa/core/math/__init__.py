"""
Core math modules для Pilosa

Арифметика над сырыми тройками (negative, magnitude, scale).
"""

# Digit primitives
from pilosa.core.math.digits import (
    ONE_DIGITS,
    ZERO_DIGITS,
    Digits,
    add_digits,
    align_scales,
    compare_digits,
    digits_from_int,
    digits_to_int,
    digits_to_text,
    divmod_digits,
    is_zero_digits,
    multiply_digits,
    pad_right,
    strip_leading_zeros,
    subtract_digits,
)

# Normalizer
from pilosa.core.math.normalizer import (
    ONE,
    ZERO,
    RawDecimal,
    canonicalize,
    is_canonical,
    validate_raw,
)

# Parser/Converters
from pilosa.core.math.parser import (
    convert_float,
    convert_int,
    convert_int32,
    expand_exponent,
    parse_decimal,
)

# Comparator
from pilosa.core.math.comparator import Ordering, compare_raw

# Arithmetic
from pilosa.core.math.arithmetic import (
    absolute_raw,
    add_raw,
    divide_raw,
    multiply_raw,
    negate_raw,
    power_raw,
    quantize_raw,
    round_digits,
    subtract_raw,
)

# Formatter
from pilosa.core.math.formatter import format_decimal

__all__ = [
    # Digits — Types & constants
    "Digits",
    "ONE_DIGITS",
    "ZERO_DIGITS",
    # Digits — Functions
    "add_digits",
    "align_scales",
    "compare_digits",
    "digits_from_int",
    "digits_to_int",
    "digits_to_text",
    "divmod_digits",
    "is_zero_digits",
    "multiply_digits",
    "pad_right",
    "strip_leading_zeros",
    "subtract_digits",
    # Normalizer
    "ONE",
    "ZERO",
    "RawDecimal",
    "canonicalize",
    "is_canonical",
    "validate_raw",
    # Parser
    "convert_float",
    "convert_int",
    "convert_int32",
    "expand_exponent",
    "parse_decimal",
    # Comparator
    "Ordering",
    "compare_raw",
    # Arithmetic
    "absolute_raw",
    "add_raw",
    "divide_raw",
    "multiply_raw",
    "negate_raw",
    "power_raw",
    "quantize_raw",
    "round_digits",
    "subtract_raw",
    # Formatter
    "format_decimal",
]
