"""
BigNum — Десятичное число произвольной точности

Immutable Pydantic модель: знак, модуль (цифры, старшая первая) и scale.
Каждый экземпляр находится в канонической форме, это проверяется
валидатором модели при любом создании. Арифметика всегда возвращает
новый экземпляр.

Операторы Python (+, -, *, /, **, сравнения) отображаются на именованные
методы add/subtract/multiply/divide/pow/compare с тем же контрактом.
int-операнды приводятся точно через from_int.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from pilosa.core.config import DivisionConfig, RoundingMode, resolve_division_config
from pilosa.core.math.arithmetic import (
    absolute_raw,
    add_raw,
    divide_raw,
    multiply_raw,
    negate_raw,
    power_raw,
    quantize_raw,
    subtract_raw,
)
from pilosa.core.math.comparator import Ordering, compare_raw
from pilosa.core.math.digits import digits_to_int, digits_to_text, is_zero_digits
from pilosa.core.math.formatter import format_decimal
from pilosa.core.math.normalizer import RawDecimal, canonicalize, is_canonical
from pilosa.core.math.parser import convert_float, convert_int, convert_int32, parse_decimal


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак значения (ноль всегда POSITIVE)"""

    POSITIVE = "+"
    NEGATIVE = "-"


Operand = Union["BigNum", int]


# =============================================================================
# BIGNUM MODEL
# =============================================================================


class BigNum(BaseModel):
    """
    Точное десятичное значение.

    Значение = (-1 if NEGATIVE) * int(magnitude) / 10 ** scale

    Создаётся конструкторами from_string / from_i32 / from_int / from_f64 /
    normalize или как результат операции. Прямое создание
    неканонической тройки отклоняется валидатором.
    """

    sign: Sign = Field(default=Sign.POSITIVE, description="Знак (ноль всегда POSITIVE)")
    magnitude: tuple[int, ...] = Field(
        ..., min_length=1, description="Цифры модуля, старшая первая"
    )
    scale: int = Field(default=0, ge=0, description="Количество цифр после точки")

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра модуля в диапазоне 0..9"""
        for digit in v:
            if not 0 <= digit <= 9:
                raise ValueError(f"magnitude digits must be in 0..9, got {digit}")
        return v

    @model_validator(mode="after")
    def validate_canonical(self) -> "BigNum":
        """
        Проверка канонической формы.

        Неканонические тройки приводятся только через BigNum.normalize().
        """
        if not is_canonical(self.sign is Sign.NEGATIVE, self.magnitude, self.scale):
            raise ValueError(
                f"BigNum(sign={self.sign.value!r}, magnitude={digits_to_text(self.magnitude)!r}, "
                f"scale={self.scale}) is not canonical; use BigNum.normalize()"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_raw(cls, raw: RawDecimal) -> "BigNum":
        return cls(
            sign=Sign.NEGATIVE if raw.negative else Sign.POSITIVE,
            magnitude=raw.magnitude,
            scale=raw.scale,
        )

    @classmethod
    def normalize(cls, sign: Sign, magnitude: Any, scale: int) -> "BigNum":
        """
        Каноническое значение из сырой тройки.

        Args:
            sign: Знак
            magnitude: Последовательность цифр 0..9, старшая первая
            scale: Количество цифр после точки (>= 0)

        Raises:
            ValueError: Если тройка некорректна (пустой модуль, не-цифры, scale < 0)
        """
        return cls._from_raw(canonicalize(Sign(sign) is Sign.NEGATIVE, tuple(magnitude), scale))

    @classmethod
    def from_string(cls, text: str) -> "BigNum":
        """
        Разбор десятичной строки вида [+|-]DIGITS[.DIGITS].

        Raises:
            ParseError: Некорректная строка
        """
        return cls._from_raw(parse_decimal(text))

    @classmethod
    def from_i32(cls, value: int) -> "BigNum":
        """
        Точная конверсия int32.

        Raises:
            ConversionError: Вне диапазона int32 или не int
        """
        return cls._from_raw(convert_int32(value))

    @classmethod
    def from_int(cls, value: int) -> "BigNum":
        """Точная конверсия произвольного int"""
        return cls._from_raw(convert_int(value))

    @classmethod
    def from_f64(cls, value: float) -> "BigNum":
        """
        Конверсия float через его кратчайшее десятичное представление.

        Точность ограничена repr(value): from_f64(0.1) == from_string("0.1").

        Raises:
            ConversionError: NaN/Inf
        """
        return cls._from_raw(convert_float(value))

    from_float = from_f64

    @classmethod
    def of(cls, value: Union["BigNum", str, int, float]) -> "BigNum":
        """
        Универсальный конструктор: BigNum, str, int или float.

        Raises:
            TypeError: Неподдерживаемый тип
        """
        if isinstance(value, BigNum):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, bool):
            raise TypeError("bool is not a supported BigNum source")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_f64(value)
        raise TypeError(f"Cannot build BigNum from {type(value).__name__}")

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> RawDecimal:
        """Тройка (negative, magnitude, scale)"""
        return RawDecimal(self.sign is Sign.NEGATIVE, self.magnitude, self.scale)

    @property
    def is_zero(self) -> bool:
        return is_zero_digits(self.magnitude)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: Any) -> Optional["BigNum"]:
        if isinstance(other, BigNum):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigNum.from_int(other)
        return None

    def _require(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            raise TypeError(f"Unsupported operand type for BigNum: {type(other).__name__}")
        return operand

    def negate(self) -> "BigNum":
        return self._from_raw(negate_raw(self.raw))

    def absolute(self) -> "BigNum":
        return self._from_raw(absolute_raw(self.raw))

    def add(self, other: Operand) -> "BigNum":
        return self._from_raw(add_raw(self.raw, self._require(other).raw))

    def subtract(self, other: Operand) -> "BigNum":
        return self._from_raw(subtract_raw(self.raw, self._require(other).raw))

    def multiply(self, other: Operand) -> "BigNum":
        return self._from_raw(multiply_raw(self.raw, self._require(other).raw))

    def divide(
        self,
        other: Operand,
        precision: Optional[int] = None,
        rounding: Optional[RoundingMode] = None,
        config: Optional[DivisionConfig] = None,
    ) -> "BigNum":
        """
        Частное self / other.

        Args:
            other: Делитель
            precision: Максимум дробных цифр (override config)
            rounding: Режим округления (override config)
            config: Базовая политика деления (default: 20 цифр, HALF_UP)

        Raises:
            DivisionByZero: Если other == 0
        """
        resolved = resolve_division_config(config, precision, rounding)
        return self._from_raw(divide_raw(self.raw, self._require(other).raw, resolved))

    def pow(
        self,
        exponent: int,
        precision: Optional[int] = None,
        rounding: Optional[RoundingMode] = None,
        config: Optional[DivisionConfig] = None,
    ) -> "BigNum":
        """
        Целая степень; отрицательные показатели вычисляются делением.

        Raises:
            TypeError: Если exponent не int
            UndefinedPower: Ноль в отрицательной степени
        """
        resolved = resolve_division_config(config, precision, rounding)
        return self._from_raw(power_raw(self.raw, exponent, resolved))

    def quantize(self, places: int, rounding: RoundingMode = RoundingMode.HALF_UP) -> "BigNum":
        """Округление до не более чем places дробных цифр"""
        return self._from_raw(quantize_raw(self.raw, places, rounding))

    def compare(self, other: Operand) -> Ordering:
        return compare_raw(self.raw, self._require(other).raw)

    def to_string(self) -> str:
        return format_decimal(self.raw)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigNum":
        return self.negate()

    def __pos__(self) -> "BigNum":
        return self

    def __abs__(self) -> "BigNum":
        return self.absolute()

    def __add__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: Any) -> "BigNum":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: Any) -> "BigNum":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: Any) -> "BigNum":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __pow__(self, exponent: Any, modulo: Any = None) -> "BigNum":
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __eq__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is Ordering.EQUAL

    def __ne__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is not Ordering.EQUAL

    def __lt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) is not Ordering.LESS

    def __hash__(self) -> int:
        # Целые значения хешируются как int, чтобы BigNum(5) == 5 было согласовано
        if self.scale == 0:
            return hash(int(self))
        return hash((self.sign, self.magnitude, self.scale))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        """Отбрасывание дробной части (к нулю)"""
        integer_length = len(self.magnitude) - self.scale
        if integer_length <= 0:
            return 0
        value = digits_to_int(self.magnitude[:integer_length])
        return -value if self.is_negative else value

    def __float__(self) -> float:
        return float(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigNum({self.to_string()!r})"
