"""
Words — Fixed-Width Two's-Complement Arithmetic

Python int не ограничен по разрядности, поэтому все операции над машинными
словами (8/16/32/64 бит) выполняются явно:
- Wrap в диапазон знакового слова (to_int8/16/32/64)
- Логический (беззнаковый) сдвиг вправо
- Деление и остаток с усечением к нулю (как на two's-complement машине)
- Беззнаковые представления того же битового паттерна

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаковое и беззнаковое значение — две интерпретации одних и тех же бит
2. tdiv/trem округляют к нулю, знак остатка совпадает со знаком делимого
3. Все функции тотальны и не имеют побочных эффектов
"""

from typing import Final

# =============================================================================
# WIDTH CONSTANTS
# =============================================================================

BYTE_SIZE: Final[int] = 8
SHORT_SIZE: Final[int] = 16
INT_SIZE: Final[int] = 32
LONG_SIZE: Final[int] = 64

BYTE_BYTES: Final[int] = BYTE_SIZE // BYTE_SIZE
SHORT_BYTES: Final[int] = SHORT_SIZE // BYTE_SIZE
INT_BYTES: Final[int] = INT_SIZE // BYTE_SIZE
LONG_BYTES: Final[int] = LONG_SIZE // BYTE_SIZE

BYTE_MIN: Final[int] = -0x80
BYTE_MAX: Final[int] = 0x7F
SHORT_MIN: Final[int] = -0x8000
SHORT_MAX: Final[int] = 0x7FFF
INT_MIN: Final[int] = -0x8000_0000
INT_MAX: Final[int] = 0x7FFF_FFFF
LONG_MIN: Final[int] = -0x8000_0000_0000_0000
LONG_MAX: Final[int] = 0x7FFF_FFFF_FFFF_FFFF

MASK8: Final[int] = 0xFF
MASK16: Final[int] = 0xFFFF
MASK32: Final[int] = 0xFFFF_FFFF
MASK64: Final[int] = 0xFFFF_FFFF_FFFF_FFFF


# =============================================================================
# WRAPPING
# =============================================================================


def wrap(value: int, bits: int) -> int:
    """
    Приведение произвольного int к знаковому слову ширины bits.

    Берутся младшие bits бит, старший из них трактуется как знаковый.

    Examples:
        >>> wrap(0xFFFF_FFFF, 32)
        -1
        >>> wrap(0x8000_0000, 32)
        -2147483648
        >>> wrap(300, 8)
        44
    """
    sign_bit = 1 << (bits - 1)
    return ((value + sign_bit) & ((1 << bits) - 1)) - sign_bit


def to_int8(value: int) -> int:
    return wrap(value, BYTE_SIZE)


def to_int16(value: int) -> int:
    return wrap(value, SHORT_SIZE)


def to_int32(value: int) -> int:
    return wrap(value, INT_SIZE)


def to_int64(value: int) -> int:
    return wrap(value, LONG_SIZE)


def fits(value: int, bits: int) -> bool:
    """Проверка, что value лежит в знаковом диапазоне слова ширины bits."""
    return -(1 << (bits - 1)) <= value < (1 << (bits - 1))


# =============================================================================
# SHIFTS & DIVISION
# =============================================================================


def ushr32(value: int, distance: int) -> int:
    """
    Логический сдвиг вправо 32-битного слова (>>>).

    Дистанция берётся по модулю 32 (используются только младшие 5 бит),
    поэтому ushr32(x, 32) == x.

    Returns:
        Знаковое 32-битное слово
    """
    return to_int32((value & MASK32) >> (distance & 31))


def shl32(value: int, distance: int) -> int:
    """Сдвиг влево 32-битного слова, дистанция по модулю 32."""
    return to_int32(value << (distance & 31))


def sar32(value: int, distance: int) -> int:
    """Арифметический сдвиг вправо 32-битного слова, дистанция по модулю 32."""
    return to_int32(value) >> (distance & 31)


def tdiv(dividend: int, divisor: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python // округляет к минус бесконечности, а digit-extraction в
    formatter/parser опирается на усечение к нулю для отрицательных операндов.

    Raises:
        ZeroDivisionError: если divisor == 0

    Examples:
        >>> tdiv(-7, 2)
        -3
        >>> tdiv(7, -2)
        -3
        >>> tdiv(-2147483647, 10)
        -214748364
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


def trem(dividend: int, divisor: int) -> int:
    """
    Остаток от деления с усечением к нулю (знак совпадает со знаком делимого).

    Examples:
        >>> trem(-7, 2)
        -1
        >>> trem(7, -2)
        1
    """
    return dividend - divisor * tdiv(dividend, divisor)


# =============================================================================
# UNSIGNED VIEWS
# =============================================================================


def to_unsigned_int(value: int, bits: int = INT_SIZE) -> int:
    """
    Беззнаковое представление битового паттерна слова ширины bits.

    Examples:
        >>> to_unsigned_int(-1, 16)
        65535
        >>> to_unsigned_int(-128, 8)
        128
    """
    return value & ((1 << bits) - 1)


def to_unsigned_long(value: int) -> int:
    """
    Расширение 32-битного слова до беззнакового значения в [0, 2^32 - 1].

    Examples:
        >>> to_unsigned_long(-1)
        4294967295
        >>> to_unsigned_long(42)
        42
    """
    return value & MASK32


def divide_unsigned(dividend: int, divisor: int) -> int:
    """
    Беззнаковое частное двух 32-битных слов.

    Операнды расширяются до беззнаковых 64-битных значений, где деление
    корректно для всего диапазона.

    Raises:
        ZeroDivisionError: если divisor == 0
    """
    return to_int32(to_unsigned_long(dividend) // to_unsigned_long(divisor))


def remainder_unsigned(dividend: int, divisor: int) -> int:
    """
    Беззнаковый остаток двух 32-битных слов.

    Raises:
        ZeroDivisionError: если divisor == 0
    """
    return to_int32(to_unsigned_long(dividend) % to_unsigned_long(divisor))


# =============================================================================
# ARITHMETIC
# =============================================================================


def int_sum(a: int, b: int) -> int:
    """Сумма двух 32-битных слов с переполнением по модулю 2^32."""
    return to_int32(a + b)


def int_max(a: int, b: int) -> int:
    return max(to_int32(a), to_int32(b))


def int_min(a: int, b: int) -> int:
    return min(to_int32(a), to_int32(b))
