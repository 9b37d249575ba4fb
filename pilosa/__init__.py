"""
Pilosa — exact arbitrary-precision decimal arithmetic.

Main type is BigNum; the same operations are available as plain
functions (from_string, add, divide, ...).
"""

import logging

from pilosa.core.config import (
    DEFAULT_DIVISION_CONFIG,
    DEFAULT_DIVISION_PRECISION,
    DivisionConfig,
    RoundingMode,
)
from pilosa.core.domain import BigNum, Sign
from pilosa.core.errors import (
    ConversionError,
    DecimalArithmeticError,
    DivisionByZero,
    ParseError,
    PilosaError,
    UndefinedPower,
)
from pilosa.core.math.comparator import Ordering
from pilosa.operations import (
    absolute,
    add,
    compare,
    divide,
    from_f64,
    from_i32,
    from_int,
    from_string,
    multiply,
    negate,
    pow,
    quantize,
    subtract,
    to_string,
)

# Библиотека не пишет в stderr, пока приложение не вызовет setup_logging()
logging.getLogger("pilosa").addHandler(logging.NullHandler())

__all__ = [
    # Types
    "BigNum",
    "Ordering",
    "Sign",
    # Config
    "DEFAULT_DIVISION_CONFIG",
    "DEFAULT_DIVISION_PRECISION",
    "DivisionConfig",
    "RoundingMode",
    # Errors
    "ConversionError",
    "DecimalArithmeticError",
    "DivisionByZero",
    "ParseError",
    "PilosaError",
    "UndefinedPower",
    # Operations
    "absolute",
    "add",
    "compare",
    "divide",
    "from_f64",
    "from_i32",
    "from_int",
    "from_string",
    "multiply",
    "negate",
    "pow",
    "quantize",
    "subtract",
    "to_string",
]
