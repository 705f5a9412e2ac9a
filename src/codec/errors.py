"""
Parse Errors — типизированный результат разбора и исключения

Каждая точка входа parser возвращает ParseResult: либо значение, либо
вид ошибки с деталями. Ошибки не логируются и не повторяются внутри —
политика повторов принадлежит вызывающему коду.

Для кода, предпочитающего исключения, ParseResult.unwrap() поднимает
исключение, соответствующее виду ошибки.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# =============================================================================
# ERROR KINDS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Вид ошибки разбора"""

    RADIX_OUT_OF_RANGE = "RADIX_OUT_OF_RANGE"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    NUMERIC_OVERFLOW = "NUMERIC_OVERFLOW"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerCodecError(Exception):
    """Базовое исключение кодека целых чисел."""
    pass


class RadixOutOfRangeError(IntegerCodecError, ValueError):
    """Основание системы счисления вне [2, 36] (только при разборе)."""
    pass


class MalformedInputError(IntegerCodecError, ValueError):
    """
    Текст не является записью числа.

    Пустой/отсутствующий текст, одиночный знак, символ вне алфавита
    основания, знак после префикса основания в decode.
    """
    pass


class NumericOverflowError(IntegerCodecError, ValueError):
    """Разобранная величина не помещается в целевую ширину слова."""
    pass


class IndexOutOfRangeError(IntegerCodecError, IndexError):
    """Неверные границы [begin, end) при разборе поддиапазона."""
    pass


_ERROR_TYPES: Dict[ParseErrorKind, type] = {
    ParseErrorKind.RADIX_OUT_OF_RANGE: RadixOutOfRangeError,
    ParseErrorKind.MALFORMED_INPUT: MalformedInputError,
    ParseErrorKind.NUMERIC_OVERFLOW: NumericOverflowError,
    ParseErrorKind.INDEX_OUT_OF_RANGE: IndexOutOfRangeError,
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора текста в целое фиксированной ширины."""

    ok: bool
    value: Optional[int]
    error: Optional[ParseErrorKind]

    # Детали
    details: str

    @classmethod
    def success(cls, value: int) -> "ParseResult":
        return cls(ok=True, value=value, error=None, details="")

    @classmethod
    def failure(cls, error: ParseErrorKind, details: str) -> "ParseResult":
        return cls(ok=False, value=None, error=error, details=details)

    def unwrap(self) -> int:
        """
        Значение успешного разбора.

        Raises:
            IntegerCodecError: подкласс, соответствующий self.error
        """
        if self.ok:
            return self.value
        raise _ERROR_TYPES[self.error](self.details)

    def value_or(self, default: Optional[int]) -> Optional[int]:
        """Значение при успехе, иначе default."""
        return self.value if self.ok else default

    def as_dict(self) -> Dict[str, Any]:
        """Сериализуемое представление (см. contracts/schema/parse_result.json)."""
        return {
            "ok": self.ok,
            "value": self.value,
            "error": self.error.value if self.error is not None else None,
            "details": self.details,
        }
