"""
Language Rules — неизменяемая конфигурация языка

Модели, которые описывают статические таблицы языка:
- LanguageRules: zeroWord, negativeWord, decimalSeparatorWord, wordSeparator
- ScaleTable: строго убывающая последовательность (magnitude, word)
- PluralForms: singular/few/many формы scale-слова

Таблицы создаются один раз при импорте модуля языка и никогда не
мутируются (frozen=True). Ошибки в таблицах всплывают как
pydantic.ValidationError при импорте, а не во время рендеринга.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class Gender(str, Enum):
    """Грамматический род числительного"""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class DecimalMode(str, Enum):
    """Политика рендеринга дробной части"""

    GROUPED = "grouped"  # ведущие нули по одному, остаток одним числом
    PER_DIGIT = "per_digit"  # каждая цифра отдельно


class PluralCategory(str, Enum):
    """Категория множественного числа для scale-слова"""

    SINGULAR = "singular"
    FEW = "few"
    MANY = "many"


# =============================================================================
# LANGUAGE RULES
# =============================================================================


class LanguageRules(BaseModel):
    """
    Базовые слова и разделители языка.

    Caller-supplied options применяются на каждый вызов отдельно и
    никогда не записываются в этот объект.
    """

    code: str = Field(..., min_length=2, description="Канонический BCP-47 тег")
    name: str = Field(..., min_length=1, description="Английское название языка")
    zero_word: str = Field(..., min_length=1)
    negative_word: str = Field(..., min_length=1)
    decimal_separator_word: str = Field(..., min_length=1)
    word_separator: str = Field(" ", description="Разделитель слов в выводе")
    decimal_mode: DecimalMode = Field(DecimalMode.GROUPED)
    options_schema: Optional[str] = Field(
        None, description="Имя JSON Schema опций языка (contracts/schema/<name>.json)"
    )

    model_config = {"frozen": True}


# =============================================================================
# SCALE TABLE
# =============================================================================


class ScaleTable(BaseModel):
    """
    Таблица (magnitude, word) для GreedyScale декомпозиции.

    Инварианты:
    - magnitudes строго убывают
    - magnitude = 1 присутствует (базовый случай декомпозиции)
    - все magnitudes > 0 (ноль обрабатывается zeroWord в контракте)
    """

    pairs: tuple[tuple[int, str], ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("pairs")
    @classmethod
    def validate_pairs(cls, v: tuple[tuple[int, str], ...]) -> tuple[tuple[int, str], ...]:
        """Проверка порядка и наличия единицы"""
        previous: Optional[int] = None
        for magnitude, word in v:
            if magnitude <= 0:
                raise ValueError(f"scale magnitude must be positive, got {magnitude}")
            if not word:
                raise ValueError(f"scale word for {magnitude} must be non-empty")
            if previous is not None and magnitude >= previous:
                raise ValueError(
                    f"scale table must be strictly descending: {magnitude} after {previous}"
                )
            previous = magnitude
        if v[-1][0] != 1:
            raise ValueError("scale table must end with magnitude 1")
        return v

    @classmethod
    def of(cls, *pairs: tuple[int, str]) -> "ScaleTable":
        return cls(pairs=pairs)

    @property
    def unit_word(self) -> str:
        """Слово для magnitude = 1"""
        return self.pairs[-1][1]

    def largest_not_exceeding(self, n: int) -> tuple[int, str]:
        """
        Наибольшая пара с magnitude <= n.

        Для n меньше наименьшей неединичной magnitude возвращает пару с
        magnitude = 1.
        """
        for magnitude, word in self.pairs:
            if magnitude <= n:
                return magnitude, word
        return self.pairs[-1]

    def with_pairs(self, *extra: tuple[int, str]) -> "ScaleTable":
        """
        Новая таблица с добавленными/заменёнными парами (региональные варианты).

        Исходная таблица не изменяется.
        """
        merged = dict(self.pairs)
        merged.update(extra)
        return ScaleTable(pairs=tuple(sorted(merged.items(), reverse=True)))


# =============================================================================
# PLURAL FORMS
# =============================================================================


class PluralForms(BaseModel):
    """Три формы scale-слова: singular / few / many"""

    singular: str = Field(..., min_length=1)
    few: str = Field(..., min_length=1)
    many: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    @classmethod
    def of(cls, singular: str, few: str, many: str) -> "PluralForms":
        return cls(singular=singular, few=few, many=many)

    def form_for(self, category: PluralCategory) -> str:
        if category == PluralCategory.SINGULAR:
            return self.singular
        if category == PluralCategory.FEW:
            return self.few
        return self.many
