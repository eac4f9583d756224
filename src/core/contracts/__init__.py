"""
Options Contract Validation Module

Модуль для валидации options-записей против JSON Schema языков.
"""

from .validators import (
    BASE_OPTIONS_SCHEMA,
    ContractValidator,
    OptionsValidator,
    SchemaLoader,
    get_options_validator,
    is_plain_record,
    validate_options,
)

__all__ = [
    # Constants
    "BASE_OPTIONS_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OptionsValidator",
    # Functions
    "get_options_validator",
    "is_plain_record",
    "validate_options",
]
