"""
JSON Schema Contract Validators

Валидация JSON payload'ов polycalc согласно JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (polycalc/contracts/schema/):
- polynomial.json: {"degree": n, "coefficients": [c_0, ..., c_n]}
- range.json     : {"min": a, "max": b}

Схема проверяет структуру и типы. Семантические инварианты
(len(coefficients) >= degree + 1, min <= max) проверяют сами модели
Polynomial и Range.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'polynomial')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class PolynomialValidator(ContractValidator):
    def __init__(self):
        super().__init__("polynomial")


class RangeValidator(ContractValidator):
    def __init__(self):
        super().__init__("range")


# Валидаторы неизменяемы после создания: один экземпляр на схему
_POLYNOMIAL_VALIDATOR = PolynomialValidator()
_RANGE_VALIDATOR = RangeValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_polynomial(data: Dict[str, Any]) -> None:
    """
    Валидация polynomial payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _POLYNOMIAL_VALIDATOR.validate(data)


def validate_range(data: Dict[str, Any]) -> None:
    """
    Валидация range payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _RANGE_VALIDATOR.validate(data)
