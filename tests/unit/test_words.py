"""
Тесты для модуля Words (арифметика машинных слов)

Проверяет:
1. Wrap в знаковые диапазоны 8/16/32/64 бит
2. Логический и арифметический сдвиги
3. Деление и остаток с усечением к нулю
4. Беззнаковые представления, деление и остаток
"""

import pytest

from src.core.bits.words import (
    INT_BYTES,
    INT_MAX,
    INT_MIN,
    INT_SIZE,
    SHORT_BYTES,
    divide_unsigned,
    fits,
    int_max,
    int_min,
    int_sum,
    remainder_unsigned,
    sar32,
    shl32,
    tdiv,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_unsigned_int,
    to_unsigned_long,
    trem,
    ushr32,
)


class TestWrap:
    """Тесты приведения к ширине слова"""

    def test_in_range_unchanged(self) -> None:
        assert to_int32(0) == 0
        assert to_int32(INT_MAX) == INT_MAX
        assert to_int32(INT_MIN) == INT_MIN

    def test_wraps_around(self) -> None:
        assert to_int32(INT_MAX + 1) == INT_MIN
        assert to_int32(0xFFFF_FFFF) == -1
        assert to_int16(0x8000) == -32768
        assert to_int8(300) == 44
        assert to_int64(1 << 63) == -(1 << 63)

    def test_fits(self) -> None:
        assert fits(127, 8)
        assert not fits(128, 8)
        assert fits(-128, 8)
        assert not fits(-129, 8)
        assert fits(INT_MIN, 32)

    def test_size_constants(self) -> None:
        assert INT_SIZE == 32
        assert INT_BYTES == 4
        assert SHORT_BYTES == 2


class TestShifts:
    """Тесты сдвигов (дистанция по модулю 32)"""

    def test_logical_shift_of_negative(self) -> None:
        assert ushr32(-1, 28) == 0xF
        assert ushr32(INT_MIN, 31) == 1

    def test_shift_distance_wraps(self) -> None:
        assert ushr32(INT_MIN, 32) == INT_MIN
        assert shl32(1, 32) == 1
        assert shl32(1, -1) == INT_MIN

    def test_arithmetic_shift_keeps_sign(self) -> None:
        assert sar32(INT_MIN, 31) == -1
        assert sar32(-8, 1) == -4
        assert sar32(8, 1) == 4

    def test_shl_overflow_wraps(self) -> None:
        assert shl32(0x4000_0000, 1) == INT_MIN
        assert shl32(INT_MIN, 1) == 0


class TestTruncatingDivision:
    """Тесты tdiv/trem: усечение к нулю, знак остатка по делимому"""

    @pytest.mark.parametrize(
        "dividend,divisor,quotient,remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (-2147483648, 10, -214748364, -8),
            (0, 5, 0, 0),
        ],
    )
    def test_truncation(self, dividend: int, divisor: int, quotient: int, remainder: int) -> None:
        assert tdiv(dividend, divisor) == quotient
        assert trem(dividend, divisor) == remainder
        assert divisor * quotient + remainder == dividend

    def test_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            tdiv(1, 0)


class TestUnsignedViews:
    """Тесты беззнаковых представлений"""

    def test_to_unsigned_long(self) -> None:
        assert to_unsigned_long(-1) == 4_294_967_295
        assert to_unsigned_long(INT_MIN) == 2_147_483_648
        assert to_unsigned_long(42) == 42

    def test_to_unsigned_int_narrow(self) -> None:
        assert to_unsigned_int(-1, 16) == 0xFFFF
        assert to_unsigned_int(-128, 8) == 128

    def test_divide_unsigned(self) -> None:
        assert divide_unsigned(-1, 2) == INT_MAX
        assert divide_unsigned(-2, -1) == 0
        assert divide_unsigned(10, 3) == 3

    def test_remainder_unsigned(self) -> None:
        assert remainder_unsigned(-1, 10) == 5  # 4294967295 % 10
        assert remainder_unsigned(10, 3) == 1

    def test_unsigned_division_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide_unsigned(1, 0)
        with pytest.raises(ZeroDivisionError):
            remainder_unsigned(1, 0)


class TestArithmetic:
    """Тесты int_sum/int_max/int_min"""

    def test_sum_wraps(self) -> None:
        assert int_sum(INT_MAX, 1) == INT_MIN
        assert int_sum(2, 3) == 5

    def test_max_min(self) -> None:
        assert int_max(-1, 1) == 1
        assert int_min(-1, 1) == -1
        assert int_max(0xFFFF_FFFF, 0) == 0
