"""
JSON Schema Contract Validators

Модуль для валидации сериализованных неопределённых величин согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (поставляются внутри пакета, contracts/schema/):
- abs_uncertainty.json — {"mean", "standard_deviation", "precision"?}
- rel_uncertainty.json — {"mean", "coefficient_of_variation", "precision"?}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'abs_uncertainty')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
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
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class AbsUncertaintyValidator(ContractValidator):
    """Валидатор для записи AbsUncertainty"""

    def __init__(self):
        super().__init__("abs_uncertainty")


class RelUncertaintyValidator(ContractValidator):
    """Валидатор для записи RelUncertainty"""

    def __init__(self):
        super().__init__("rel_uncertainty")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_abs_uncertainty(data: Dict[str, Any]) -> None:
    """
    Валидация записи AbsUncertainty.

    Args:
        data: Данные для валидации (например, AbsUncertainty.model_dump(mode="json"))

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AbsUncertaintyValidator().validate(data)


def validate_rel_uncertainty(data: Dict[str, Any]) -> None:
    """
    Валидация записи RelUncertainty.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RelUncertaintyValidator().validate(data)
