"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений кодека.
"""

from .validators import (
    FIXED_WIDTH_INTEGER_CONTRACT,
    PARSE_RESULT_CONTRACT,
    ContractValidator,
    FixedWidthIntegerValidator,
    ParseResultValidator,
    SchemaLoader,
    default_loader,
    validate_fixed_width_integer,
    validate_parse_result,
)

__all__ = [
    # Contract names
    "FIXED_WIDTH_INTEGER_CONTRACT",
    "PARSE_RESULT_CONTRACT",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FixedWidthIntegerValidator",
    "ParseResultValidator",
    # Functions
    "default_loader",
    "validate_fixed_width_integer",
    "validate_parse_result",
]
