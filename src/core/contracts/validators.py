"""
JSON Schema Contract Validators

Модуль для валидации сериализованных значений кодека согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Контракты:
- fixed_width_integer.json (FixedWidthInteger.model_dump())
- parse_result.json (ParseResult.as_dict())
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.codec.errors import ParseResult
from src.core.domain.fixed_width import FixedWidthInteger

# contracts/schema/ в корне проекта
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

FIXED_WIDTH_INTEGER_CONTRACT: Final[str] = "fixed_width_integer"
PARSE_RESULT_CONTRACT: Final[str] = "parse_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик контрактов кодека из каталога *.json схем.

    Каждая схема проходит meta-validation (Draft 2020-12) один раз
    и затем отдаётся из кэша.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена контрактов, найденных в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, contract: str) -> Dict[str, Any]:
        """
        Схема контракта по имени.

        Raises:
            FileNotFoundError: нет файла <contract>.json
            ValueError: файл не является валидной JSON Schema
        """
        cached = self._cache.get(contract)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{contract}.json"
        if not path.is_file():
            raise FileNotFoundError(
                f"Contract '{contract}' not found in {self._schema_dir} "
                f"(available: {', '.join(self.available()) or 'none'})"
            )

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid contract schema '{contract}': {e.message}") from e

        self._cache[contract] = schema
        return schema


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    """Загрузчик для contracts/schema/ проекта (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одного контракта."""

    def __init__(self, contract: str, loader: Optional[SchemaLoader] = None):
        self.contract = contract
        self.schema = (loader or default_loader()).load_schema(contract)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: данные нарушают контракт
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде '<путь>: <сообщение>', упорядочены по пути."""
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{e.json_path}: {e.message}" for e in errors]


class FixedWidthIntegerValidator(ContractValidator):
    """Контракт fixed_width_integer: ширина 8/16/32 и знаковый диапазон по ширине."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(FIXED_WIDTH_INTEGER_CONTRACT, loader)

    def validate_model(self, word: FixedWidthInteger) -> None:
        self.validate(word.model_dump())


class ParseResultValidator(ContractValidator):
    """Контракт parse_result: успех без error, неудача без value."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(PARSE_RESULT_CONTRACT, loader)

    def validate_result(self, result: ParseResult) -> None:
        self.validate(result.as_dict())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fixed_width_integer(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного FixedWidthInteger.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FixedWidthIntegerValidator().validate(data)


def validate_parse_result(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного ParseResult.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ParseResultValidator().validate(data)
