"""
JSON Schema Contract Validators

Модуль для валидации внешних payload'ов (состояние формы, декодированные
чтения контракта) согласно JSON Schema контрактам до разбора чисел.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- tokenomics_form.json (сырые строки формы создания проекта)
- fee_config.json (конфигурация комиссий AMM)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from loguru import logger


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
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
            schema_name: Имя схемы без расширения (например, 'fee_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
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
        try:
            self.validator.validate(data)
        except jsonschema.ValidationError as e:
            logger.debug("{} payload rejected: {}", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class TokenomicsFormValidator(ContractValidator):
    """Валидатор сырого состояния формы токеномики."""

    def __init__(self):
        super().__init__("tokenomics_form")


class FeeConfigValidator(ContractValidator):
    """Валидатор конфигурации комиссий AMM."""

    def __init__(self):
        super().__init__("fee_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_tokenomics_form_payload(data: Dict[str, Any]) -> None:
    """
    Валидация формы токеномики.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TokenomicsFormValidator().validate(data)


def validate_fee_config_payload(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации комиссий.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FeeConfigValidator().validate(data)
