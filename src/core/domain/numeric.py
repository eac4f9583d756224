"""
NumericValue — каноническое представление входного числа

Immutable Pydantic модель: знак, целая часть (arbitrary-precision int)
и дробные цифры как строка.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_magnitude >= 0 (знак хранится отдельно)
2. fractional_digits — литеральная строка ASCII-цифр, никогда не
   конвертируется обратно в число (сохраняет ведущие/хвостовые нули)
3. Создаётся на каждый вызов и отбрасывается после рендеринга
"""

import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

# Только ASCII-цифры: str.isdigit() пропускает '²', '١' и т.п.
_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]*")


class Sign(int, Enum):
    """Знак числа"""

    NEGATIVE = -1
    POSITIVE = 1


class NumericValue(BaseModel):
    """
    Нормализованное число: sign × (integer_magnitude . fractional_digits).

    Examples:
        >>> NumericValue(sign=Sign.NEGATIVE, integer_magnitude=17, fractional_digits="42")
        -17.42
        >>> NumericValue(sign=Sign.POSITIVE, integer_magnitude=3, fractional_digits="005")
        3.005
    """

    sign: Sign = Field(Sign.POSITIVE, description="Знак: -1 или +1")
    integer_magnitude: int = Field(..., description="Модуль целой части (без ограничения разрядности)")
    fractional_digits: str = Field("", description="Дробные цифры как строка")

    model_config = {"frozen": True}

    @field_validator("integer_magnitude")
    @classmethod
    def validate_integer_magnitude(cls, v: int) -> int:
        """Модуль целой части не может быть отрицательным"""
        if v < 0:
            raise ValueError(f"integer_magnitude must be non-negative, got {v}")
        return v

    @field_validator("fractional_digits")
    @classmethod
    def validate_fractional_digits(cls, v: str) -> str:
        """Дробная часть — только ASCII-цифры"""
        if _DIGITS_RE.fullmatch(v) is None:
            raise ValueError(f"fractional_digits must contain only digits 0-9, got {v!r}")
        return v

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @property
    def has_fraction(self) -> bool:
        return len(self.fractional_digits) > 0

    @property
    def is_zero(self) -> bool:
        """Ноль без дробной части (рендерится одним zeroWord, без знака)"""
        return self.integer_magnitude == 0 and not self.has_fraction

    def __repr__(self) -> str:
        sign = "-" if self.is_negative else ""
        if self.has_fraction:
            return f"{sign}{self.integer_magnitude}.{self.fractional_digits}"
        return f"{sign}{self.integer_magnitude}"
