"""
BitOps — Bit-Level Primitives on a 32-bit Word

Примитивы над одним 32-битным two's-complement словом
(16-битный вариант для reverse_bytes16):
- Изоляция старшего/младшего единичного бита
- Подсчёт ведущих/хвостовых нулей (бинарный поиск, не 32 итерации)
- Population count (SWAR)
- Циклические сдвиги, реверс бит и байт
- signum и трёхсторонние сравнения (signed/unsigned)

Алгоритмы по Hacker's Delight (H. Warren), ссылки на разделы в docstring.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции тотальны: определены для 0 и для INT_MIN, исключений нет
2. Вход — любой Python int, он сначала приводится к 32-битному слову
3. Результат всегда лежит в знаковом 32-битном диапазоне
4. Дистанции сдвига берутся по модулю 32 (включая отрицательные)
"""

from typing import Final

from src.core.bits.words import (
    INT_MIN,
    INT_SIZE,
    MASK32,
    sar32,
    shl32,
    to_int16,
    to_int32,
    ushr32,
)

# =============================================================================
# SWAR MASKS
# =============================================================================

# Чередующиеся группы бит для параллельной редукции
M1: Final[int] = 0x5555_5555   # 01010101...
M2: Final[int] = 0x3333_3333   # 00110011...
M4: Final[int] = 0x0F0F_0F0F   # 00001111...

# Максимальный bit_count (32) помещается в 6 бит
POPCOUNT_MASK: Final[int] = 0x3F


# =============================================================================
# SINGLE BIT ISOLATION
# =============================================================================


def highest_one_bit(value: int) -> int:
    """
    Слово, в котором сохранён только старший единичный бит value.

    HD, Figure 3-1: value & (INT_MIN >>> nlz(value))

    Для value == 0 nlz == 32, сдвиг на 32 вырождается в сдвиг на 0,
    и финальный & возвращает результат к 0.

    Examples:
        >>> highest_one_bit(0b1011_0000)
        128
        >>> highest_one_bit(-1)
        -2147483648
        >>> highest_one_bit(0)
        0
    """
    value = to_int32(value)
    return value & ushr32(INT_MIN, number_of_leading_zeros(value))


def lowest_one_bit(value: int) -> int:
    """
    Слово, в котором сохранён только младший единичный бит value.

    HD, Section 2-1: value & -value

    Examples:
        >>> lowest_one_bit(0b1011_0000)
        16
        >>> lowest_one_bit(0)
        0
    """
    value = to_int32(value)
    return to_int32(value & -value)


# =============================================================================
# ZERO COUNTS
# =============================================================================


def number_of_leading_zeros(value: int) -> int:
    """
    Количество нулевых бит выше старшего единичного бита.

    HD, Count leading 0's: бинарный поиск по границам 2^16, 2^8, 2^4, 2^2,
    последний бит разрешается вычитанием.

    Returns:
        Число в [0, 32]; 32 для value == 0, 0 для отрицательных

    Examples:
        >>> number_of_leading_zeros(1)
        31
        >>> number_of_leading_zeros(0)
        32
    """
    i = to_int32(value)
    if i <= 0:
        return INT_SIZE if i == 0 else 0

    n = 31
    if i >= 1 << 16:
        n -= 16
        i >>= 16
    if i >= 1 << 8:
        n -= 8
        i >>= 8
    if i >= 1 << 4:
        n -= 4
        i >>= 4
    if i >= 1 << 2:
        n -= 2
        i >>= 2
    return n - (i >> 1)


def number_of_trailing_zeros(value: int) -> int:
    """
    Количество нулевых бит ниже младшего единичного бита.

    HD, Figure 5-14: младшая половина сдвигается в старшую; если результат
    ненулевой, значит единица лежит в младшей половине.

    Returns:
        Число в [0, 32]; 32 для value == 0

    Examples:
        >>> number_of_trailing_zeros(8)
        3
        >>> number_of_trailing_zeros(-2147483648)
        31
    """
    i = to_int32(value)
    if i == 0:
        return INT_SIZE

    n = 31
    for distance in (16, 8, 4, 2):
        y = shl32(i, distance)
        if y != 0:
            n -= distance
            i = y
    return n - ushr32(shl32(i, 1), 31)


# =============================================================================
# POPULATION COUNT
# =============================================================================


def bit_count(value: int) -> int:
    """
    Количество единичных бит в two's-complement представлении.

    HD, Figure 5-2 (SWAR):
    1. Суммы в 2-битных группах
    2. Суммы в 4-битных группах
    3. Суммы в байтах
    4. Сложение байт, финальная маска 0x3f

    Examples:
        >>> bit_count(0b1011)
        3
        >>> bit_count(-1)
        32
    """
    i = value & MASK32
    i = i - ((i >> 1) & M1)
    i = (i & M2) + ((i >> 2) & M2)
    i = (i + (i >> 4)) & M4
    i = i + (i >> 8)
    i = i + (i >> 16)
    return i & POPCOUNT_MASK


# =============================================================================
# ROTATIONS & REVERSALS
# =============================================================================


def rotate_left(value: int, distance: int) -> int:
    """
    Циклический сдвиг влево на distance бит.

    (value << distance) | (value >>> -distance); обе дистанции берутся по
    модулю 32, поэтому rotate_left(x, -d) == rotate_right(x, d).

    Examples:
        >>> rotate_left(1, 1)
        2
        >>> rotate_left(-2147483648, 1)
        1
        >>> rotate_left(1, -1)
        -2147483648
    """
    return to_int32(shl32(value, distance) | ushr32(value, -distance))


def rotate_right(value: int, distance: int) -> int:
    """
    Циклический сдвиг вправо на distance бит.

    Examples:
        >>> rotate_right(1, 1)
        -2147483648
        >>> rotate_right(2, 1)
        1
    """
    return to_int32(ushr32(value, distance) | shl32(value, -distance))


def reverse(value: int) -> int:
    """
    Реверс порядка всех 32 бит.

    HD, Figure 7-1: обмен соседних 1-битных, 2-битных и 4-битных групп,
    затем reverse_bytes. Более крупные обмены покрываются реверсом байт.

    Examples:
        >>> reverse(1)
        -2147483648
        >>> reverse(0x0000_00F0)
        251658240
    """
    i = value & MASK32
    i = (i & M1) << 1 | (i >> 1) & M1
    i = (i & M2) << 2 | (i >> 2) & M2
    i = (i & M4) << 4 | (i >> 4) & M4
    return reverse_bytes(i)


def reverse_bytes(value: int) -> int:
    """
    Реверс порядка байт 32-битного слова; порядок бит в байте сохраняется.

    Examples:
        >>> hex(reverse_bytes(0x0102_0304))
        '0x4030201'
    """
    i = value & MASK32
    return to_int32(
        (i << 24)
        | ((i & 0xFF00) << 8)
        | ((i >> 8) & 0xFF00)
        | (i >> 24)
    )


def reverse_bytes16(value: int) -> int:
    """
    Реверс порядка байт 16-битного слова (прямой обмен двух байт).

    Examples:
        >>> hex(reverse_bytes16(0x0102))
        '0x201'
        >>> reverse_bytes16(0x00FF)
        -256
    """
    i = to_int16(value)
    return to_int16(((i & 0xFF00) >> 8) | (i << 8))


# =============================================================================
# SIGN & COMPARISON
# =============================================================================


def signum(value: int) -> int:
    """
    Знак слова: -1, 0 или +1.

    HD, Section 2-7 (без ветвлений): (value >> 31) | (-value >>> 31)

    Examples:
        >>> signum(-2147483648)
        -1
        >>> signum(0)
        0
        >>> signum(17)
        1
    """
    value = to_int32(value)
    return sar32(value, 31) | ushr32(-value, 31)


def compare(x: int, y: int) -> int:
    """Трёхстороннее знаковое сравнение двух 32-битных слов."""
    x = to_int32(x)
    y = to_int32(y)
    if x < y:
        return -1
    return 0 if x == y else 1


def compare_unsigned(x: int, y: int) -> int:
    """
    Трёхстороннее беззнаковое сравнение двух 32-битных слов.

    Сдвиг обоих операндов на INT_MIN (с переполнением) переводит
    беззнаковый порядок в знаковый.

    Examples:
        >>> compare_unsigned(-1, 1)
        1
        >>> compare_unsigned(1, -1)
        -1
    """
    return compare(to_int32(x + INT_MIN), to_int32(y + INT_MIN))
