"""
IntegerFormatter — целое фиксированной ширины → текст в системе счисления radix

- format_int: знаковое 32-битное слово, radix в [2, 36] (иначе 10)
- format_unsigned: тот же битовый паттерн как беззнаковое значение
- to_hex_string / to_octal_string / to_binary_string: беззнаковый вывод
  для оснований-степеней двойки через маску и логический сдвиг
- format_decimal: быстрый путь для основания 10 (по две цифры за шаг)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Negate-first: положительное значение сразу превращается в отрицательное,
   цифры извлекаются из отрицательной величины. -INT_MIN никогда не
   вычисляется
2. Деление и остаток — с усечением к нулю (tdiv/trem), как на
   two's-complement машине
3. У форматирования нет ошибок: неверный radix молча заменяется на 10
4. Ведущие нули подавляются, кроме единственного "0" для нуля
"""

from typing import Final

from src.codec.radix_alphabet import is_valid_radix, value_to_digit
from src.core.bits.bit_ops import number_of_leading_zeros
from src.core.bits.words import (
    INT_SIZE,
    LONG_SIZE,
    tdiv,
    to_int32,
    to_unsigned_long,
    trem,
    ushr32,
)

# =============================================================================
# DECIMAL LOOKUP TABLES
# =============================================================================

# Десятки и единицы для r в [0, 99]: DIGIT_TENS[r] + DIGIT_ONES[r] == f"{r:02d}"
DIGIT_TENS: Final[str] = "".join(value_to_digit(r // 10) for r in range(100))
DIGIT_ONES: Final[str] = "".join(value_to_digit(r % 10) for r in range(100))

# Сдвиги для оснований-степеней двойки
SHIFT_HEX: Final[int] = 4
SHIFT_OCTAL: Final[int] = 3
SHIFT_BINARY: Final[int] = 1


# =============================================================================
# SIGNED FORMATTING
# =============================================================================


def format_int(value: int, radix: int = 10) -> str:
    """
    Текстовая запись знакового 32-битного слова в системе счисления radix.

    Args:
        value: Любой int, приводится к 32-битному слову
        radix: Основание; вне [2, 36] заменяется на 10

    Returns:
        Цифры в нижнем регистре, "-" только для отрицательных

    Examples:
        >>> format_int(255, 16)
        'ff'
        >>> format_int(-2147483648, 2)
        '-10000000000000000000000000000000'
        >>> format_int(42, 99)
        '42'
    """
    value = to_int32(value)
    if not is_valid_radix(radix):
        radix = 10
    if radix == 10:
        return format_decimal(value)
    return _format_radix(value, radix, INT_SIZE)


def _format_radix(i: int, radix: int, bits: int) -> str:
    # bits двоичных цифр плюс знак
    buf = [""] * (bits + 1)
    pos = bits
    negative = i < 0
    if not negative:
        i = -i

    while i <= -radix:
        buf[pos] = value_to_digit(-trem(i, radix))
        pos -= 1
        i = tdiv(i, radix)
    buf[pos] = value_to_digit(-i)

    if negative:
        pos -= 1
        buf[pos] = "-"
    return "".join(buf[pos:])


# =============================================================================
# DECIMAL FAST PATH
# =============================================================================


def string_size(value: int) -> int:
    """
    Длина десятичной записи value, включая знак.

    Examples:
        >>> string_size(0)
        1
        >>> string_size(-2147483648)
        11
    """
    d = 1
    if value >= 0:
        d = 0
        value = -value
    p = -10
    size = 1
    while value <= p:
        p *= 10
        size += 1
    return size + d


def format_decimal(value: int) -> str:
    """
    Десятичная запись значения без деления общего вида.

    Две цифры за итерацию через таблицы DIGIT_TENS/DIGIT_ONES; поведение
    совпадает с format_int(value, 10). Ширина не ограничена 32 битами,
    format_unsigned использует этот путь для 64-битного расширения.

    Examples:
        >>> format_decimal(-2147483648)
        '-2147483648'
        >>> format_decimal(4294967295)
        '4294967295'
    """
    size = string_size(value)
    buf = [""] * size
    pos = size

    i = value
    negative = i < 0
    if not negative:
        i = -i

    while i <= -100:
        q = tdiv(i, 100)
        r = (q * 100) - i
        i = q
        pos -= 1
        buf[pos] = DIGIT_ONES[r]
        pos -= 1
        buf[pos] = DIGIT_TENS[r]

    # Осталось не больше двух цифр
    q = tdiv(i, 10)
    r = (q * 10) - i
    pos -= 1
    buf[pos] = value_to_digit(r)
    if q < 0:
        pos -= 1
        buf[pos] = value_to_digit(-q)

    if negative:
        pos -= 1
        buf[pos] = "-"
    return "".join(buf)


# =============================================================================
# UNSIGNED FORMATTING
# =============================================================================


def format_unsigned(value: int, radix: int = 10) -> str:
    """
    Запись битового паттерна 32-битного слова как беззнакового числа.

    Слово расширяется до беззнакового 64-битного значения и форматируется
    знаковым 64-битным путём; знак при этом никогда не выводится.

    Examples:
        >>> format_unsigned(-1)
        '4294967295'
        >>> format_unsigned(-1, 36)
        '1z141z3'
    """
    widened = to_unsigned_long(value)
    if not is_valid_radix(radix):
        radix = 10
    if radix == 10:
        return format_decimal(widened)
    return _format_radix(widened, radix, LONG_SIZE)


def format_unsigned_decimal(value: int) -> str:
    return format_decimal(to_unsigned_long(value))


def to_hex_string(value: int) -> str:
    """
    Беззнаковая шестнадцатеричная запись без ведущих нулей.

    Examples:
        >>> to_hex_string(-1)
        'ffffffff'
        >>> to_hex_string(0)
        '0'
    """
    return _format_power_of_two(value, SHIFT_HEX)


def to_octal_string(value: int) -> str:
    """
    Examples:
        >>> to_octal_string(8)
        '10'
        >>> to_octal_string(-1)
        '37777777777'
    """
    return _format_power_of_two(value, SHIFT_OCTAL)


def to_binary_string(value: int) -> str:
    """
    Examples:
        >>> to_binary_string(10)
        '1010'
    """
    return _format_power_of_two(value, SHIFT_BINARY)


def _format_power_of_two(value: int, shift: int) -> str:
    value = to_int32(value)
    # Число значащих бит и число цифр (минимум одна, для нуля)
    mag = INT_SIZE - number_of_leading_zeros(value)
    chars = max((mag + (shift - 1)) // shift, 1)

    radix = 1 << shift
    mask = radix - 1
    buf = [""] * chars
    pos = chars
    while pos > 0:
        pos -= 1
        buf[pos] = value_to_digit(value & mask)
        value = ushr32(value, shift)
    return "".join(buf)
