"""
JSON Schema Contract Validators

Модуль для валидации сырых входных данных согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema.

Схемы:
- matrix_grid.json (входная сетка для MathMatrix)

Отличия от стандартного Draft 2020-12:
- "array" принимает list и tuple (Python-последовательности)
- "integer" принимает только целые (bool и float отклоняются)
"""

import json
import numbers
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match
from jsonschema.validators import extend


GRID_SCHEMA_NAME: Final[str] = "matrix_grid"


# =============================================================================
# TYPE CHECKER
# =============================================================================


def _is_array(checker, instance: Any) -> bool:
    return isinstance(instance, (list, tuple))


def _is_strict_integer(checker, instance: Any) -> bool:
    # bool — подкласс int, но ячейкой матрицы не считается
    if isinstance(instance, bool):
        return False
    return isinstance(instance, numbers.Integral)


_STRICT_TYPE_CHECKER = Draft202012Validator.TYPE_CHECKER.redefine_many(
    {"array": _is_array, "integer": _is_strict_integer}
)

StrictDraft202012Validator = extend(
    Draft202012Validator, type_checker=_STRICT_TYPE_CHECKER
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение JSON Schema контрактов intmatrix.

    По умолчанию схемы берутся из ресурсов пакета intmatrix.contracts
    (подкаталог schema/, объявлен как package-data), поэтому работают и из
    установленного wheel. Каталог можно подменить, например в тестах.
    Каждая схема проверяется meta-схемой Draft 2020-12 один раз и кэшируется.
    """

    def __init__(self, schema_dir: Path | Traversable | None = None):
        self._schema_dir = schema_dir or resources.files(__package__) / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта по имени файла без расширения.

        Args:
            schema_name: Например, GRID_SCHEMA_NAME ('matrix_grid')

        Returns:
            Разобранная схема (dict), один и тот же объект при повторных вызовах

        Raises:
            FileNotFoundError: Если в каталоге нет <schema_name>.json
            ValueError: Если файл не является корректной схемой Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        resource = self._schema_dir.joinpath(f"{schema_name}.json")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# Загрузчик пакетных схем, общий для всех валидаторов
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = StrictDraft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)

    def first_error(self, data: Any) -> ValidationError | None:
        """
        Наиболее релевантная ошибка валидации или None.

        Выбирается через jsonschema.exceptions.best_match, чтобы сообщение
        указывало на конкретную ячейку/строку, а не на корень.
        """
        return best_match(self.validator.iter_errors(data))


class MatrixGridValidator(ContractValidator):
    """Валидатор для matrix_grid контракта."""

    def __init__(self):
        super().__init__(GRID_SCHEMA_NAME)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_grid(data: Any) -> None:
    """
    Валидация сырой сетки matrix_grid.

    Проверяется только структура и типы ячеек; прямоугольность
    контрактом не выражается и проверяется отдельно.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixGridValidator().validate(data)
