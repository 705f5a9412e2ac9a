"""
RadixAlphabet — 36-символьный алфавит цифр и его обратное отображение

Символ с индексом i обозначает цифру со значением i: '0'-'9', затем 'a'-'z'.
Обратное отображение регистронезависимо ('F' и 'f' — цифра 15).
Символ вне алфавита или цифра >= radix — "invalid", а не ошибка:
решение о неуспехе разбора принимает вызывающий код.
"""

from typing import Final

# =============================================================================
# RADIX BOUNDS
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36

# Значение digit_to_value для символа вне алфавита
INVALID_DIGIT: Final[int] = -1

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: Final[dict[str, int]] = {
    **{symbol: index for index, symbol in enumerate(DIGITS)},
    **{symbol.upper(): index for index, symbol in enumerate(DIGITS) if symbol.isalpha()},
}


def is_valid_radix(radix: int) -> bool:
    """Проверка, что radix лежит в [MIN_RADIX, MAX_RADIX]."""
    return MIN_RADIX <= radix <= MAX_RADIX


def digit_to_value(char: str, radix: int) -> int:
    """
    Числовое значение символа-цифры в системе счисления radix.

    Args:
        char: Один символ
        radix: Основание системы счисления

    Returns:
        Значение в [0, radix - 1] либо INVALID_DIGIT, если символ не является
        цифрой этого основания (или radix вне [2, 36])

    Examples:
        >>> digit_to_value("7", 8)
        7
        >>> digit_to_value("F", 16)
        15
        >>> digit_to_value("9", 8)
        -1
    """
    if not is_valid_radix(radix):
        return INVALID_DIGIT
    value = _DIGIT_VALUES.get(char, INVALID_DIGIT)
    return value if value < radix else INVALID_DIGIT


def value_to_digit(value: int) -> str:
    """
    Символ алфавита для цифры value (нижний регистр).

    Raises:
        ValueError: если value вне [0, 35]
    """
    if not 0 <= value < MAX_RADIX:
        raise ValueError(f"digit value must be in [0, {MAX_RADIX - 1}], got {value}")
    return DIGITS[value]
