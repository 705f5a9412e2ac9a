"""
FixedWidthInteger — значение, хранимое как width бит в two's-complement

Immutable Pydantic модель. Знаковое и беззнаковое значение — две
интерпретации одного битового паттерна, а не два способа хранения:
хранится только знаковая интерпретация (value), беззнаковая вычисляется.

Соответствует схеме contracts/schema/fixed_width_integer.json.
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.codec import formatter, parser
from src.codec.narrow import BYTE_CODEC, SHORT_CODEC
from src.core.bits.words import INT_SIZE, fits, to_unsigned_int, wrap

# Поддерживаемые ширины слова
SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32)


class FixedWidthInteger(BaseModel):
    """
    Целое фиксированной ширины.

    Инвариант: value в [-2^(width-1), 2^(width-1) - 1].
    """

    width: int = Field(..., description="Ширина слова в битах: 8, 16 или 32")
    value: int = Field(..., description="Знаковая интерпретация битового паттерна")

    model_config = {"frozen": True}

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v not in SUPPORTED_WIDTHS:
            raise ValueError(f"width must be one of {SUPPORTED_WIDTHS}, got {v}")
        return v

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int, info) -> int:
        """Проверка знакового диапазона (ширина проверяется раньше)"""
        if "width" in info.data:
            width = info.data["width"]
            if not fits(v, width):
                raise ValueError(f"value {v} does not fit in signed {width}-bit range")
        return v

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_bits(cls, bits: int, width: int = INT_SIZE) -> "FixedWidthInteger":
        """
        Слово из произвольного int: берутся младшие width бит.

        Examples:
            >>> FixedWidthInteger.from_bits(0xFF, 8).value
            -1
        """
        return cls(width=width, value=wrap(bits, width))

    @classmethod
    def parse(
        cls,
        text: Optional[str],
        radix: int = 10,
        width: int = INT_SIZE,
        unsigned: bool = False,
    ) -> "FixedWidthInteger":
        """
        Разбор текста в слово ширины width.

        Raises:
            IntegerCodecError: подкласс по виду ошибки разбора
            ValueError: если width не поддерживается
        """
        if width not in SUPPORTED_WIDTHS:
            raise ValueError(f"width must be one of {SUPPORTED_WIDTHS}, got {width}")

        if width == INT_SIZE:
            result = (
                parser.parse_unsigned(text, radix) if unsigned else parser.parse_signed(text, radix)
            )
        else:
            codec = SHORT_CODEC if width == 16 else BYTE_CODEC
            result = (
                codec.parse_unsigned_bits(text, radix) if unsigned else codec.parse(text, radix)
            )

        return cls(width=width, value=result.unwrap())

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def unsigned_value(self) -> int:
        """Беззнаковая интерпретация того же паттерна в [0, 2^width - 1]"""
        return to_unsigned_int(self.value, self.width)

    def to_string(self, radix: int = 10) -> str:
        return formatter.format_int(self.value, radix)

    def to_unsigned_string(self, radix: int = 10) -> str:
        if self.width == INT_SIZE:
            return formatter.format_unsigned(self.value, radix)
        return formatter.format_int(self.unsigned_value, radix)

    def compare_to(self, other: "FixedWidthInteger") -> int:
        """Знаковое трёхстороннее сравнение (-1, 0, 1)."""
        if self.value < other.value:
            return -1
        return 0 if self.value == other.value else 1

    def __int__(self) -> int:
        return self.value
