"""
Bit-level primitives и арифметика машинных слов фиксированной ширины
"""

# Fixed-width words
from src.core.bits.words import (
    BYTE_MAX,
    BYTE_MIN,
    BYTE_SIZE,
    INT_BYTES,
    INT_MAX,
    INT_MIN,
    INT_SIZE,
    LONG_SIZE,
    MASK32,
    SHORT_BYTES,
    SHORT_MAX,
    SHORT_MIN,
    SHORT_SIZE,
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
    wrap,
)

# BitOps
from src.core.bits.bit_ops import (
    bit_count,
    compare,
    compare_unsigned,
    highest_one_bit,
    lowest_one_bit,
    number_of_leading_zeros,
    number_of_trailing_zeros,
    reverse,
    reverse_bytes,
    reverse_bytes16,
    rotate_left,
    rotate_right,
    signum,
)

__all__ = [
    # Words — Constants
    "BYTE_MAX",
    "BYTE_MIN",
    "BYTE_SIZE",
    "INT_BYTES",
    "INT_MAX",
    "INT_MIN",
    "INT_SIZE",
    "LONG_SIZE",
    "MASK32",
    "SHORT_BYTES",
    "SHORT_MAX",
    "SHORT_MIN",
    "SHORT_SIZE",
    # Words — Functions
    "divide_unsigned",
    "fits",
    "int_max",
    "int_min",
    "int_sum",
    "remainder_unsigned",
    "sar32",
    "shl32",
    "tdiv",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_unsigned_int",
    "to_unsigned_long",
    "trem",
    "ushr32",
    "wrap",
    # BitOps
    "bit_count",
    "compare",
    "compare_unsigned",
    "highest_one_bit",
    "lowest_one_bit",
    "number_of_leading_zeros",
    "number_of_trailing_zeros",
    "reverse",
    "reverse_bytes",
    "reverse_bytes16",
    "rotate_left",
    "rotate_right",
    "signum",
]
