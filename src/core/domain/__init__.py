"""
Domain models and value objects.

NumericValue (вход одного вызова) и неизменяемые таблицы языка.
"""

from src.core.domain.numeric import NumericValue, Sign
from src.core.domain.rules import (
    DecimalMode,
    Gender,
    LanguageRules,
    PluralCategory,
    PluralForms,
    ScaleTable,
)

__all__ = [
    # Numeric
    "NumericValue",
    "Sign",
    # Rules
    "LanguageRules",
    "ScaleTable",
    "PluralForms",
    # Enums
    "DecimalMode",
    "Gender",
    "PluralCategory",
]
