"""
Options Contract Validators

Модуль для валидации options-записей, передаваемых в render().

Двухступенчатая проверка:
1. Plain record: dict (или read-only MappingProxyType) со строковыми ключами.
   Списки, экземпляры классов, функции → InvalidOptions.
2. JSON Schema языка (Draft 2020-12): распознанные ключи должны иметь
   объявленный тип/enum. Нераспознанные ключи игнорируются
   (additionalProperties: true).

Схемы:
- base_options.json       (en-GB, hi, bn)
- english_options.json    (en)
- gendered_options.json   (es, ru, uk, pl)
- french_options.json     (fr, fr-BE)
- turkic_options.json     (tr, az)
- hebrew_options.json     (he, hbo)
- chinese_options.json    (zh-Hans)
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from src.core.errors import InvalidOptions


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем в schema/ (package data).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена всех схем в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'gendered_options')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
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

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()

BASE_OPTIONS_SCHEMA = "base_options"


# =============================================================================
# PLAIN RECORD CHECK
# =============================================================================


def is_plain_record(value: Any) -> bool:
    """
    Проверка, что value — простая запись ключ-значение.

    Принимаются только dict (точный тип) и MappingProxyType со строковыми
    ключами. Подклассы dict, списки, экземпляры классов и функции — нет.

    Examples:
        >>> is_plain_record({"gender": "feminine"})
        True
        >>> is_plain_record([("gender", "feminine")])
        False
    """
    if type(value) is not dict and type(value) is not MappingProxyType:
        return False
    return all(isinstance(key, str) for key in value)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Mapping[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(dict(data))


class OptionsValidator(ContractValidator):
    """
    Валидатор options-записи для конкретной схемы языка.

    check() поднимает InvalidOptions с самым релевантным сообщением
    jsonschema (best_match).
    """

    def check(self, options: Any) -> Mapping[str, Any]:
        """
        Проверка options и возврат исходной записи без изменений.

        Args:
            options: None или plain record

        Returns:
            Исходный record (или пустой read-only record для None)

        Raises:
            InvalidOptions: не plain record или нарушение схемы
        """
        if options is None:
            return MappingProxyType({})

        if not is_plain_record(options):
            raise InvalidOptions(
                "Invalid options: expected plain dict or None, "
                f"got {type(options).__name__}"
            )

        error = best_match(self.iter_errors(options))
        if error is not None:
            location = ".".join(str(part) for part in error.absolute_path) or "options"
            raise InvalidOptions(f"Invalid options ({self.schema_name}) at {location}: {error.message}")

        return options


# Валидаторы строятся один раз при импорте; после этого только чтение
_VALIDATORS: Dict[str, OptionsValidator] = {
    name: OptionsValidator(name) for name in _SCHEMA_LOADER.available()
}


def get_options_validator(schema_name: Optional[str] = None) -> OptionsValidator:
    """
    Валидатор для схемы (default: base_options).

    Raises:
        KeyError: Если схема с таким именем не существует
    """
    name = schema_name or BASE_OPTIONS_SCHEMA
    try:
        return _VALIDATORS[name]
    except KeyError:
        raise KeyError(f"Unknown options schema: {name!r}") from None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_options(options: Any, schema_name: Optional[str] = None) -> Mapping[str, Any]:
    """
    Валидация options против схемы языка.

    Args:
        options: None или plain record
        schema_name: имя схемы (default: base_options)

    Returns:
        Исходный record, не изменённый

    Raises:
        InvalidOptions: Если options не plain record или нарушает схему
    """
    return get_options_validator(schema_name).check(options)
