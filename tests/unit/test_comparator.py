"""
Тесты для Comparator — полный порядок

Проверяет:
1. Сравнение по знаку
2. Независимость от scale
3. Инверсию для отрицательных значений
4. Равенство нулей
"""

import pytest

from pilosa.core.math.comparator import Ordering, compare_raw
from pilosa.core.math.parser import parse_decimal


def cmp(a: str, b: str) -> Ordering:
    return compare_raw(parse_decimal(a), parse_decimal(b))


class TestCompareRaw:
    """Тесты compare_raw"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("1", "2", Ordering.LESS),
            ("2", "1", Ordering.GREATER),
            ("1.5", "1.5", Ordering.EQUAL),
            ("1.5", "2", Ordering.LESS),
            ("10", "9.999", Ordering.GREATER),
            ("0.1", "0.09", Ordering.GREATER),
            ("0.001", "0.01", Ordering.LESS),
            ("123.45", "123.450", Ordering.EQUAL),
        ],
    )
    def test_positive_values(self, a: str, b: str, expected: Ordering) -> None:
        """Положительные значения с разными scale"""
        assert cmp(a, b) is expected

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("-1", "-2", Ordering.GREATER),
            ("-1.5", "-2", Ordering.GREATER),
            ("-10", "-9.999", Ordering.LESS),
            ("-0.001", "-0.01", Ordering.GREATER),
            ("-7.25", "-7.25", Ordering.EQUAL),
        ],
    )
    def test_negative_values_inverted(self, a: str, b: str, expected: Ordering) -> None:
        """Для отрицательных направление инвертировано"""
        assert cmp(a, b) is expected

    def test_sign_decides(self) -> None:
        """Положительное больше отрицательного"""
        assert cmp("-1000", "0.001") is Ordering.LESS
        assert cmp("0.001", "-1000") is Ordering.GREATER
        assert cmp("0", "-0.5") is Ordering.GREATER
        assert cmp("-0.5", "0") is Ordering.LESS

    def test_zeros_equal(self) -> None:
        """Все нули равны"""
        assert cmp("0", "-0.000") is Ordering.EQUAL
        assert cmp("+0.0", "0") is Ordering.EQUAL

    def test_ordering_is_int_compatible(self) -> None:
        """Ordering совместим с -1/0/+1"""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1

    def test_antisymmetry(self) -> None:
        """compare(a, b) == -compare(b, a)"""
        values = ["-3.5", "-0.01", "0", "0.01", "2", "2.000001"]
        for a in values:
            for b in values:
                assert cmp(a, b) == -cmp(b, a)
