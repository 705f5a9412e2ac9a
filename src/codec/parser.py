"""
IntegerParser — текст → знаковое/беззнаковое 32-битное слово

Точки входа:
- parse_signed: строка целиком, необязательный знак и цифры основания radix
- parse_signed_range: то же для поддиапазона [begin, end) последовательности
- parse_unsigned / parse_unsigned_range: беззнаковая запись, результат —
  знаковое слово с тем же битовым паттерном
- decode: автоопределение основания по префиксу (0x, 0X, #, ведущий 0)

Все точки входа возвращают ParseResult и никогда не поднимают исключений
на некорректном вводе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Накопление идёт в отрицательную сторону: диапазон аккумулятора
   [limit, 0] симметричен для положительных и отрицательных результатов
2. До умножения: result >= limit / radix; после: result >= limit + digit.
   Промежуточное значение никогда не выходит из диапазона слова
3. Неверный radix при разборе — ошибка (в отличие от форматирования)
4. Границы поддиапазона проверяются раньше содержимого текста
"""

from typing import Optional, Sequence

from src.codec.errors import ParseErrorKind, ParseResult
from src.codec.radix_alphabet import MAX_RADIX, MIN_RADIX, digit_to_value
from src.core.bits.words import INT_SIZE, LONG_SIZE, tdiv, to_int32

# Последовательность символов: str или любая индексируемая последовательность
# односимвольных строк
CharSequence = Sequence[str]

# Старшие 32 бита 64-битного аккумулятора беззнакового разбора
_UPPER_WORD_MASK = 0xFFFF_FFFF_0000_0000


# =============================================================================
# SIGNED PARSING
# =============================================================================


def parse_signed(text: Optional[str], radix: int = 10) -> ParseResult:
    """
    Разбор знакового 32-битного слова.

    Args:
        text: Необязательный '+'/'-' и одна или более цифр основания radix
        radix: Основание в [2, 36]

    Returns:
        ParseResult с value при успехе; иначе error:
        - MALFORMED_INPUT: None, пустая строка, одиночный знак, неверная цифра
        - RADIX_OUT_OF_RANGE: radix вне [2, 36]
        - NUMERIC_OVERFLOW: величина вне [INT_MIN, INT_MAX]

    Examples:
        >>> parse_signed("-FF", 16).value
        -255
        >>> parse_signed("2147483648").error
        <ParseErrorKind.NUMERIC_OVERFLOW: 'NUMERIC_OVERFLOW'>
    """
    if text is None:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "null")

    radix_error = _check_radix(radix)
    if radix_error is not None:
        return radix_error

    return _accumulate(text, 0, len(text), radix, INT_SIZE)


def parse_signed_range(
    text: Optional[CharSequence],
    begin: int,
    end: int,
    radix: int = 10,
) -> ParseResult:
    """
    Разбор знакового 32-битного слова из text[begin:end].

    Семантика совпадает с parse_signed; INDEX_OUT_OF_RANGE, если
    begin < 0, begin > end или end > len(text) (до проверки radix и текста).

    Examples:
        >>> parse_signed_range("id=-42;", 3, 6).value
        -42
    """
    if text is None:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "null")

    index_error = _check_bounds(text, begin, end)
    if index_error is not None:
        return index_error

    radix_error = _check_radix(radix)
    if radix_error is not None:
        return radix_error

    return _accumulate(text, begin, end, radix, INT_SIZE)


def _accumulate(
    text: CharSequence,
    begin: int,
    end: int,
    radix: int,
    bits: int,
) -> ParseResult:
    """
    Negate-first накопление цифр text[begin:end] в слово ширины bits.

    Предполагается, что границы и radix уже проверены.
    """
    negative = False
    i = begin
    limit = -((1 << (bits - 1)) - 1)

    if i >= end:
        return ParseResult.failure(
            ParseErrorKind.MALFORMED_INPUT,
            _input_message(text, begin, end, radix),
        )

    first_char = text[i]
    if first_char == "-" or first_char == "+":
        if first_char == "-":
            negative = True
            limit = -(1 << (bits - 1))
        i += 1
        if i == end:
            # Одиночный "+" или "-"
            return ParseResult.failure(
                ParseErrorKind.MALFORMED_INPUT,
                _input_message(text, begin, end, radix),
            )

    multmin = tdiv(limit, radix)
    result = 0
    while i < end:
        digit = digit_to_value(text[i], radix)
        if digit < 0:
            return ParseResult.failure(
                ParseErrorKind.MALFORMED_INPUT,
                _input_message(text, begin, end, radix, index=i),
            )
        if result < multmin:
            return ParseResult.failure(
                ParseErrorKind.NUMERIC_OVERFLOW,
                _input_message(text, begin, end, radix, index=i),
            )
        result *= radix
        if result < limit + digit:
            return ParseResult.failure(
                ParseErrorKind.NUMERIC_OVERFLOW,
                _input_message(text, begin, end, radix, index=i),
            )
        i += 1
        result -= digit

    return ParseResult.success(result if negative else -result)


# =============================================================================
# UNSIGNED PARSING
# =============================================================================


def parse_unsigned(text: Optional[str], radix: int = 10) -> ParseResult:
    """
    Разбор беззнакового 32-битного значения.

    Результат — знаковое слово с тем же битовым паттерном:
    parse_unsigned("4294967295").value == -1.

    Короткие записи (до 5 цифр, или до 9 десятичных), которые не могут
    переполнить слово по числу цифр, делегируются parse_signed; длинные
    разбираются в 64-битный аккумулятор с проверкой старших 32 бит.

    Returns:
        ParseResult; ведущий '-' всегда MALFORMED_INPUT

    Examples:
        >>> parse_unsigned("4294967295").value
        -1
        >>> parse_unsigned("4294967296").error
        <ParseErrorKind.NUMERIC_OVERFLOW: 'NUMERIC_OVERFLOW'>
    """
    if text is None:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "null")
    return _parse_unsigned(text, 0, len(text), radix)


def parse_unsigned_range(
    text: Optional[CharSequence],
    begin: int,
    end: int,
    radix: int = 10,
) -> ParseResult:
    """Разбор беззнакового 32-битного значения из text[begin:end]."""
    if text is None:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "null")

    index_error = _check_bounds(text, begin, end)
    if index_error is not None:
        return index_error

    return _parse_unsigned(text, begin, end, radix)


def _parse_unsigned(text: CharSequence, begin: int, end: int, radix: int) -> ParseResult:
    length = end - begin
    if length <= 0:
        return ParseResult.failure(
            ParseErrorKind.MALFORMED_INPUT,
            _input_message(text, begin, end, radix),
        )

    if text[begin] == "-":
        return ParseResult.failure(
            ParseErrorKind.MALFORMED_INPUT,
            f'Illegal leading minus sign on unsigned string "{_slice(text, begin, end)}"',
        )

    radix_error = _check_radix(radix)
    if radix_error is not None:
        return radix_error

    # INT_MAX занимает 6 цифр при radix 36 и 10 цифр при radix 10
    if length <= 5 or (radix == 10 and length <= 9):
        return _accumulate(text, begin, end, radix, INT_SIZE)

    wide = _accumulate(text, begin, end, radix, LONG_SIZE)
    if not wide.ok:
        return wide

    if wide.value & _UPPER_WORD_MASK != 0:
        return ParseResult.failure(
            ParseErrorKind.NUMERIC_OVERFLOW,
            f'String value "{_slice(text, begin, end)}" exceeds range of unsigned int',
        )
    return ParseResult.success(to_int32(wide.value))


# =============================================================================
# DECODE
# =============================================================================


def decode(text: Optional[str]) -> ParseResult:
    """
    Разбор знакового 32-битного слова с автоопределением основания.

    Формат: [знак] [префикс] цифры
    - "0x", "0X", "#" → 16
    - "0" и далее хотя бы один символ → 8
    - иначе → 10 (одиночный "0" — десятичный ноль)

    Знак после префикса — MALFORMED_INPUT. Знак присоединяется к разбираемой
    записи, а не к положительной величине, поэтому "-2147483648" и
    "-0x80000000" дают INT_MIN без промежуточного переполнения.

    Examples:
        >>> decode("0x1F").value
        31
        >>> decode("010").value
        8
        >>> decode("-0x10").value
        -16
    """
    if text is None:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "null")
    if len(text) == 0:
        return ParseResult.failure(ParseErrorKind.MALFORMED_INPUT, "Zero length string")

    radix = 10
    index = 0
    negative = False

    first_char = text[0]
    if first_char == "-":
        negative = True
        index += 1
    elif first_char == "+":
        index += 1

    if text.startswith(("0x", "0X"), index):
        index += 2
        radix = 16
    elif text.startswith("#", index):
        index += 1
        radix = 16
    elif text.startswith("0", index) and len(text) > 1 + index:
        index += 1
        radix = 8

    if text.startswith(("-", "+"), index):
        return ParseResult.failure(
            ParseErrorKind.MALFORMED_INPUT,
            f'Sign character in wrong position: "{text}"',
        )

    body = text[index:]
    return parse_signed("-" + body if negative else body, radix)


# =============================================================================
# HELPERS
# =============================================================================


def _check_radix(radix: int) -> Optional[ParseResult]:
    if radix < MIN_RADIX:
        return ParseResult.failure(
            ParseErrorKind.RADIX_OUT_OF_RANGE,
            f"radix {radix} less than MIN_RADIX {MIN_RADIX}",
        )
    if radix > MAX_RADIX:
        return ParseResult.failure(
            ParseErrorKind.RADIX_OUT_OF_RANGE,
            f"radix {radix} greater than MAX_RADIX {MAX_RADIX}",
        )
    return None


def _check_bounds(text: CharSequence, begin: int, end: int) -> Optional[ParseResult]:
    if begin < 0 or begin > end or end > len(text):
        return ParseResult.failure(
            ParseErrorKind.INDEX_OUT_OF_RANGE,
            f"begin {begin}, end {end}, length {len(text)}",
        )
    return None


def _slice(text: CharSequence, begin: int, end: int) -> str:
    return "".join(text[begin:end])


def _input_message(
    text: CharSequence,
    begin: int,
    end: int,
    radix: int,
    index: Optional[int] = None,
) -> str:
    message = f'For input string: "{_slice(text, begin, end)}"'
    if radix != 10:
        message += f" under radix {radix}"
    if index is not None:
        message += f" (error at index {index})"
    return message
