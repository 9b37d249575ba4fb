"""
Тесты функционального API и алгебраических свойств

Проверяемые свойства:
1. Round trip: from_string(to_string(x)) == x
2. Коммутативность add и multiply
3. Аддитивная обратная: add(a, negate(a)) == 0
4. subtract(a, b) == add(a, negate(b))
5. compare(a, b) == GREATER ⟺ subtract(a, b) положительно и ненулевое
6. pow(a, 0) == 1, pow(a, 1) == a, pow(a, 2) == multiply(a, a)
7. Канонический ноль и документированные сценарии
"""

import pytest

import pilosa
from pilosa import (
    BigNum,
    ConversionError,
    DivisionByZero,
    Ordering,
    ParseError,
    PilosaError,
    RoundingMode,
    UndefinedPower,
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
    quantize,
    subtract,
    to_string,
)

SAMPLE_VALUES = [
    "0",
    "1",
    "-1",
    "0.5",
    "-0.001",
    "12.34",
    "-987654321.123456789",
    "100",
    "0.000000000000000000000001",
    "24872398247.24982",
]


@pytest.fixture
def samples() -> list[BigNum]:
    """Набор значений с разными знаками и scale"""
    return [from_string(text) for text in SAMPLE_VALUES]


# =============================================================================
# ТЕСТЫ СВОЙСТВ
# =============================================================================


class TestAlgebraicProperties:
    """Алгебраические свойства над набором значений"""

    def test_round_trip(self, samples: list[BigNum]) -> None:
        """from_string(to_string(x)) == x"""
        for x in samples:
            assert from_string(to_string(x)) == x

    def test_round_trip_preserves_fields(self, samples: list[BigNum]) -> None:
        """Round trip сохраняет каноническую тройку"""
        for x in samples:
            again = from_string(to_string(x))
            assert (again.sign, again.magnitude, again.scale) == (x.sign, x.magnitude, x.scale)

    def test_commutativity(self, samples: list[BigNum]) -> None:
        """add и multiply коммутативны"""
        for a in samples:
            for b in samples:
                assert add(a, b) == add(b, a)
                assert multiply(a, b) == multiply(b, a)

    def test_additive_inverse(self, samples: list[BigNum]) -> None:
        """a + (-a) == 0"""
        zero = from_string("0")
        for a in samples:
            assert add(a, negate(a)) == zero

    def test_subtraction_consistency(self, samples: list[BigNum]) -> None:
        """subtract(a, b) == add(a, negate(b))"""
        for a in samples:
            for b in samples:
                assert subtract(a, b) == add(a, negate(b))

    def test_compare_matches_subtraction_sign(self, samples: list[BigNum]) -> None:
        """compare(a, b) == GREATER ⟺ a - b > 0"""
        for a in samples:
            for b in samples:
                difference = subtract(a, b)
                is_positive = not difference.is_negative and not difference.is_zero
                assert (compare(a, b) is Ordering.GREATER) == is_positive

    def test_exponent_identities(self, samples: list[BigNum]) -> None:
        """a**0 == 1, a**1 == a, a**2 == a*a"""
        one = from_string("1")
        for a in samples:
            assert pilosa.pow(a, 0) == one
            assert pilosa.pow(a, 1) == a
            assert pilosa.pow(a, 2) == multiply(a, a)

    def test_associativity_of_addition(self, samples: list[BigNum]) -> None:
        """(a + b) + c == a + (b + c) — сложение точное"""
        for a in samples[:5]:
            for b in samples[:5]:
                for c in samples[5:]:
                    assert add(add(a, b), c) == add(a, add(b, c))

    def test_distributivity(self, samples: list[BigNum]) -> None:
        """a * (b + c) == a*b + a*c"""
        for a in samples[:4]:
            for b in samples[4:7]:
                for c in samples[7:]:
                    assert multiply(a, add(b, c)) == add(multiply(a, b), multiply(a, c))


# =============================================================================
# ТЕСТЫ СЦЕНАРИЕВ
# =============================================================================


class TestDocumentedScenarios:
    """Конкретные сценарии"""

    def test_canonical_zero(self) -> None:
        """from_string('-0.00') == from_string('0')"""
        negative_zero = from_string("-0.00")
        zero = from_string("0")
        assert negative_zero == zero
        assert (negative_zero.sign, negative_zero.magnitude, negative_zero.scale) == (
            zero.sign,
            zero.magnitude,
            zero.scale,
        )

    def test_subtraction_scenario(self) -> None:
        """53643.368359 - 24872398247.24982"""
        result = subtract(from_string("53643.368359"), from_string("24872398247.24982"))
        assert result == from_string("-24872344603.881461")
        assert to_string(result) == "-24872344603.881461"

    def test_from_i32_scenario(self) -> None:
        """from_i32(-242952842) → '-242952842'"""
        assert to_string(from_i32(-242952842)) == "-242952842"

    def test_division_by_zero_scenario(self) -> None:
        """1 / 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            divide(from_string("1"), from_string("0"))

    def test_parse_error_scenario(self) -> None:
        """'12.34.56' → ParseError"""
        with pytest.raises(ParseError):
            from_string("12.34.56")

    def test_big_division(self) -> None:
        """Целая часть 123456789123456789123456789 / 1992113"""
        result = divide(
            from_string("123456789123456789123456789"),
            from_string("1992113"),
            precision=0,
            rounding=RoundingMode.DOWN,
        )
        assert to_string(result) == "61972784236364497959"


# =============================================================================
# ТЕСТЫ API
# =============================================================================


class TestFunctionalApi:
    """Функциональный API повторяет методы BigNum"""

    def test_constructors(self) -> None:
        """from_int / from_f64"""
        assert to_string(from_int(10**25)) == "1" + "0" * 25
        assert from_f64(1.25) == from_string("1.25")

    def test_conversion_errors(self) -> None:
        """ConversionError для NaN и вне int32"""
        with pytest.raises(ConversionError):
            from_f64(float("inf"))
        with pytest.raises(ConversionError):
            from_i32(-(2**31) - 1)

    def test_absolute_and_quantize(self) -> None:
        """absolute / quantize"""
        assert absolute(from_string("-3.5")) == from_string("3.5")
        assert quantize(from_string("3.14159"), 3) == from_string("3.142")

    def test_divide_default_policy(self) -> None:
        """20 дробных цифр, HALF_UP"""
        assert to_string(divide(from_string("1"), from_string("7"))) == "0.14285714285714285714"

    def test_pow_negative_zero_base(self) -> None:
        """0 ** -1 → UndefinedPower"""
        with pytest.raises(UndefinedPower):
            pilosa.pow(from_string("0"), -1)

    def test_errors_share_base(self) -> None:
        """Все ошибки домена — PilosaError"""
        for error in (ParseError, ConversionError, DivisionByZero, UndefinedPower):
            assert issubclass(error, PilosaError)
