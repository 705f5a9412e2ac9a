"""
Integer codec — текстовые представления целых фиксированной ширины

Форматирование и разбор знаковых/беззнаковых 8/16/32-битных слов
в системах счисления с основанием 2–36.
"""

from src.codec.errors import (
    IndexOutOfRangeError,
    IntegerCodecError,
    MalformedInputError,
    NumericOverflowError,
    ParseErrorKind,
    ParseResult,
    RadixOutOfRangeError,
)
from src.codec.formatter import (
    format_decimal,
    format_int,
    format_unsigned,
    format_unsigned_decimal,
    string_size,
    to_binary_string,
    to_hex_string,
    to_octal_string,
)
from src.codec.narrow import (
    BYTE_CODEC,
    SHORT_CODEC,
    NarrowIntegerCodec,
    NarrowWidthConfig,
)
from src.codec.parser import (
    decode,
    parse_signed,
    parse_signed_range,
    parse_unsigned,
    parse_unsigned_range,
)
from src.codec.properties import get_integer
from src.codec.radix_alphabet import (
    DIGITS,
    INVALID_DIGIT,
    MAX_RADIX,
    MIN_RADIX,
    digit_to_value,
    is_valid_radix,
    value_to_digit,
)

__all__ = [
    # Radix alphabet
    "DIGITS",
    "INVALID_DIGIT",
    "MAX_RADIX",
    "MIN_RADIX",
    "digit_to_value",
    "is_valid_radix",
    "value_to_digit",
    # Errors & result
    "IndexOutOfRangeError",
    "IntegerCodecError",
    "MalformedInputError",
    "NumericOverflowError",
    "ParseErrorKind",
    "ParseResult",
    "RadixOutOfRangeError",
    # Formatter
    "format_decimal",
    "format_int",
    "format_unsigned",
    "format_unsigned_decimal",
    "string_size",
    "to_binary_string",
    "to_hex_string",
    "to_octal_string",
    # Parser
    "decode",
    "parse_signed",
    "parse_signed_range",
    "parse_unsigned",
    "parse_unsigned_range",
    # Narrow adapters
    "BYTE_CODEC",
    "SHORT_CODEC",
    "NarrowIntegerCodec",
    "NarrowWidthConfig",
    # Properties
    "get_integer",
]
