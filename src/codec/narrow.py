"""
NarrowIntegerAdapter — 16-битные и 8-битные фасады над 32-битным кодеком

parse / parse_unsigned / decode делегируются 32-битному parser, затем
результат проверяется на попадание в более узкий диапазон. format
делегируется 32-битному formatter на расширенном значении.
reverse_bytes для 16 бит — прямой обмен двух байт, без делегирования.
parse_unsigned_bits — чтение беззнакового битового паттерна [0, 2^bits - 1].

Интеграция:
- SHORT_CODEC (16 бит) и BYTE_CODEC (8 бит) — готовые экземпляры
- Ошибка 32-битного разбора передаётся без изменений
- Выход за узкий диапазон → NUMERIC_OVERFLOW
"""

from dataclasses import dataclass
from typing import Optional

from src.codec import formatter, parser
from src.codec.errors import ParseErrorKind, ParseResult
from src.core.bits.bit_ops import reverse_bytes16
from src.core.bits.words import (
    BYTE_SIZE,
    SHORT_SIZE,
    fits,
    to_unsigned_int,
    wrap,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NarrowWidthConfig:
    """Конфигурация узкой ширины слова.

    Границы диапазонов выводятся из bits.
    """

    bits: int = SHORT_SIZE

    def __post_init__(self) -> None:
        if self.bits not in (BYTE_SIZE, SHORT_SIZE):
            raise ValueError(f"bits must be {BYTE_SIZE} or {SHORT_SIZE}, got {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def unsigned_max(self) -> int:
        return (1 << self.bits) - 1

    @property
    def size_bytes(self) -> int:
        return self.bits // BYTE_SIZE


# =============================================================================
# ADAPTER
# =============================================================================


class NarrowIntegerCodec:
    """Кодек узкого (8/16 бит) целого поверх 32-битного кодека.

    Порядок проверок parse:
    1. 32-битный разбор (все его ошибки передаются как есть)
    2. Проверка узкого знакового диапазона
    """

    def __init__(self, config: NarrowWidthConfig | None = None):
        """
        Args:
            config: ширина слова (опционально, по умолчанию 16 бит)
        """
        self.config = config or NarrowWidthConfig()

    @property
    def size(self) -> int:
        return self.config.bits

    @property
    def size_bytes(self) -> int:
        return self.config.size_bytes

    @property
    def min_value(self) -> int:
        return self.config.min_value

    @property
    def max_value(self) -> int:
        return self.config.max_value

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse(self, text: Optional[str], radix: int = 10) -> ParseResult:
        """Разбор знакового узкого слова.

        Examples:
            >>> SHORT_CODEC.parse("-32768").value
            -32768
            >>> BYTE_CODEC.parse("128").error
            <ParseErrorKind.NUMERIC_OVERFLOW: 'NUMERIC_OVERFLOW'>
        """
        return self._narrow_signed(parser.parse_signed(text, radix), text, radix)

    def decode(self, text: Optional[str]) -> ParseResult:
        """Разбор с автоопределением основания (см. parser.decode)."""
        return self._narrow_signed(parser.decode(text), text, None)

    def parse_unsigned(self, text: Optional[str], radix: int = 10) -> ParseResult:
        """Беззнаковый 32-битный разбор с проверкой узкого знакового диапазона.

        Examples:
            >>> BYTE_CODEC.parse_unsigned("127").value
            127
            >>> BYTE_CODEC.parse_unsigned("255").error
            <ParseErrorKind.NUMERIC_OVERFLOW: 'NUMERIC_OVERFLOW'>
        """
        return self._narrow_signed(parser.parse_unsigned(text, radix), text, radix)

    def parse_unsigned_bits(self, text: Optional[str], radix: int = 10) -> ParseResult:
        """Разбор битового паттерна узкого слова из записи в [0, 2^bits - 1].

        Результат — знаковое узкое слово с тем же битовым паттерном.

        Examples:
            >>> BYTE_CODEC.parse_unsigned_bits("255").value
            -1
        """
        result = parser.parse_unsigned(text, radix)
        if not result.ok:
            return result

        unsigned = to_unsigned_int(result.value)
        if unsigned > self.config.unsigned_max:
            return ParseResult.failure(
                ParseErrorKind.NUMERIC_OVERFLOW,
                f'Value {unsigned} out of unsigned {self.config.bits}-bit range '
                f'from input "{text}"',
            )
        return ParseResult.success(wrap(unsigned, self.config.bits))

    def _narrow_signed(
        self,
        result: ParseResult,
        text: Optional[str],
        radix: Optional[int],
    ) -> ParseResult:
        if not result.ok:
            return result

        if not fits(result.value, self.config.bits):
            details = f'Value {result.value} out of range from input "{text}"'
            if radix is not None:
                details += f" radix {radix}"
            return ParseResult.failure(ParseErrorKind.NUMERIC_OVERFLOW, details)
        return result

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, value: int, radix: int = 10) -> str:
        """Запись узкого слова (value приводится к ширине) через 32-битный formatter."""
        return formatter.format_int(wrap(value, self.config.bits), radix)

    def format_unsigned(self, value: int, radix: int = 10) -> str:
        """Запись битового паттерна узкого слова как беззнакового числа."""
        return formatter.format_int(self.to_unsigned_int(value), radix)

    # -------------------------------------------------------------------------
    # Bits & comparison
    # -------------------------------------------------------------------------

    def to_unsigned_int(self, value: int) -> int:
        return to_unsigned_int(value, self.config.bits)

    def compare(self, x: int, y: int) -> int:
        """Знаковое сравнение как разность (не нормализовано к {-1, 0, 1})."""
        return wrap(x, self.config.bits) - wrap(y, self.config.bits)

    def compare_unsigned(self, x: int, y: int) -> int:
        """Беззнаковое сравнение как разность беззнаковых представлений."""
        return self.to_unsigned_int(x) - self.to_unsigned_int(y)

    def reverse_bytes(self, value: int) -> int:
        """Реверс порядка байт; для 8 бит — тождество.

        Examples:
            >>> hex(SHORT_CODEC.reverse_bytes(0x1234))
            '0x3412'
        """
        if self.config.bits == BYTE_SIZE:
            return wrap(value, BYTE_SIZE)
        return reverse_bytes16(value)


SHORT_CODEC = NarrowIntegerCodec(NarrowWidthConfig(bits=SHORT_SIZE))
BYTE_CODEC = NarrowIntegerCodec(NarrowWidthConfig(bits=BYTE_SIZE))
