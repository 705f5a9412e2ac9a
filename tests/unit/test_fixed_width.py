"""
Тесты для доменной модели FixedWidthInteger

Проверяет:
1. Создание и валидацию модели Pydantic (ширина, знаковый диапазон)
2. Immutability (frozen=True)
3. Знаковую и беззнаковую интерпретации одного паттерна
4. Разбор и форматирование через кодек
5. Сериализацию/десериализацию JSON
"""

import json

import pytest
from pydantic import ValidationError

from src.codec.errors import MalformedInputError, NumericOverflowError, RadixOutOfRangeError
from src.core.domain.fixed_width import FixedWidthInteger


class TestFixedWidthIntegerValidation:
    """Тесты валидации модели"""

    @pytest.mark.parametrize(
        "width,value",
        [(8, -128), (8, 127), (16, -32768), (16, 32767), (32, -2147483648), (32, 2147483647)],
    )
    def test_bounds_accepted(self, width: int, value: int) -> None:
        assert FixedWidthInteger(width=width, value=value).value == value

    @pytest.mark.parametrize(
        "width,value",
        [(8, 128), (8, -129), (16, 32768), (32, 2147483648), (32, -2147483649)],
    )
    def test_out_of_range_rejected(self, width: int, value: int) -> None:
        with pytest.raises(ValidationError, match="does not fit"):
            FixedWidthInteger(width=width, value=value)

    @pytest.mark.parametrize("width", [0, 12, 64])
    def test_unsupported_width(self, width: int) -> None:
        with pytest.raises(ValidationError, match="width must be one of"):
            FixedWidthInteger(width=width, value=0)

    def test_frozen(self) -> None:
        word = FixedWidthInteger(width=16, value=1)
        with pytest.raises(ValidationError):
            word.value = 2


class TestFixedWidthIntegerViews:
    """Тесты интерпретаций битового паттерна"""

    def test_from_bits(self) -> None:
        assert FixedWidthInteger.from_bits(0xFF, 8).value == -1
        assert FixedWidthInteger.from_bits(0x1_0000_0001).value == 1
        assert FixedWidthInteger.from_bits(0x8000, 16).value == -32768

    def test_unsigned_value(self) -> None:
        assert FixedWidthInteger(width=8, value=-1).unsigned_value == 255
        assert FixedWidthInteger(width=32, value=-1).unsigned_value == 4294967295
        assert FixedWidthInteger(width=16, value=5).unsigned_value == 5

    def test_same_bits_two_views(self) -> None:
        """Знаковое и беззнаковое — один паттерн"""
        word = FixedWidthInteger.from_bits(0xFFFF_FFFE)
        assert word.value == -2
        assert word.unsigned_value == 0xFFFF_FFFE

    def test_to_string(self) -> None:
        assert FixedWidthInteger(width=32, value=-2147483648).to_string() == "-2147483648"
        assert FixedWidthInteger(width=16, value=-1).to_string(16) == "-1"

    def test_to_unsigned_string(self) -> None:
        assert FixedWidthInteger(width=32, value=-1).to_unsigned_string() == "4294967295"
        assert FixedWidthInteger(width=16, value=-1).to_unsigned_string(16) == "ffff"
        assert FixedWidthInteger(width=8, value=-128).to_unsigned_string(2) == "10000000"

    def test_compare_and_int(self) -> None:
        low = FixedWidthInteger(width=32, value=-5)
        high = FixedWidthInteger(width=32, value=5)
        assert low.compare_to(high) == -1
        assert high.compare_to(low) == 1
        assert low.compare_to(low) == 0
        assert int(low) == -5


class TestFixedWidthIntegerParse:
    """Тесты разбора через кодек"""

    def test_parse_widths(self) -> None:
        assert FixedWidthInteger.parse("-2147483648").value == -2147483648
        assert FixedWidthInteger.parse("-8000", 16, width=16).value == -32768
        assert FixedWidthInteger.parse("127", width=8).value == 127

    def test_parse_unsigned(self) -> None:
        assert FixedWidthInteger.parse("4294967295", unsigned=True).value == -1
        assert FixedWidthInteger.parse("ffff", 16, width=16, unsigned=True).value == -1
        assert FixedWidthInteger.parse("255", width=8, unsigned=True).unsigned_value == 255

    def test_parse_errors_raise(self) -> None:
        with pytest.raises(MalformedInputError):
            FixedWidthInteger.parse("Kona")
        with pytest.raises(NumericOverflowError):
            FixedWidthInteger.parse("128", width=8)
        with pytest.raises(RadixOutOfRangeError):
            FixedWidthInteger.parse("1", 37)

    def test_parse_unsupported_width(self) -> None:
        with pytest.raises(ValueError, match="width must be one of"):
            FixedWidthInteger.parse("1", width=64)


class TestFixedWidthIntegerSerialization:
    """Тесты JSON сериализации"""

    def test_json_roundtrip(self) -> None:
        word = FixedWidthInteger(width=16, value=-300)
        restored = FixedWidthInteger.model_validate_json(word.model_dump_json())
        assert restored == word

    def test_dump_shape(self) -> None:
        data = json.loads(FixedWidthInteger(width=8, value=7).model_dump_json())
        assert data == {"width": 8, "value": 7}
