"""
Slavic Strategy — триады с трёхформенным множественным числом

Число делится на чанки по 3 цифры (group_by_threes). Для каждого
ненулевого чанка:
- единицы выбирают мужскую/женскую форму
  * чанк единиц: по опции gender (default masculine)
  * чанки из feminine_scales (тысячи в ru/uk): всегда женская форма,
    независимо от опции
- scale-слово выбирает форму singular/few/many по значению чанка

Нулевые чанки пропускаются целиком (нет "ноль тысяч").

Польские отличия задаются флагами словаря:
- omit_one_before_scale: "tysiąc", а не "jeden tysiąc"
- singular_only_for_one: 21 → "dwadzieścia jeden tysięcy" (many)

Порядковые (SlavicOrdinals): порядковой становится только последняя
ненулевая группа, всё выше остаётся кардиналом:
121 → "sto dwudziesty pierwszy", 2000 → "дві тисячний".
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.domain.rules import Gender, LanguageRules, PluralCategory, PluralForms
from src.core.errors import OutOfRange
from src.core.math.segments import (
    Segment,
    segment_by_threes,
    select_plural_form,
    slavic_plural_category,
)
from src.languages.strategies.base import LanguageStrategy, StrategyKind, parse_gender


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SlavicOptions:
    """Опции одного вызова для славянских языков."""

    gender: Gender = Gender.MASCULINE

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "SlavicOptions":
        return cls(gender=parse_gender(record.get("gender")))


class SlavicVocabulary(BaseModel):
    """
    Статические таблицы славянского языка.

    Списки по 10 элементов индексируются цифрой; ones_*[0] и tens[0..1]
    не используются и могут быть пустыми.
    """

    ones_masculine: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    ones_feminine: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    teens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    tens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    hundreds: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    scales: tuple[PluralForms, ...] = Field(..., min_length=1, description="index 0 = тысяча")
    feminine_scales: FrozenSet[int] = frozenset({1})
    omit_one_before_scale: bool = False
    singular_only_for_one: bool = False

    model_config = {"frozen": True}

    @field_validator("teens")
    @classmethod
    def validate_teens(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not all(v):
            raise ValueError("every teen word (10..19) must be non-empty")
        return v


# =============================================================================
# STRATEGY
# =============================================================================


class SlavicStrategy(LanguageStrategy):
    """Славянская декомпозиция (ru, uk, pl)."""

    kind = StrategyKind.SLAVIC

    def __init__(self, rules: LanguageRules, vocabulary: SlavicVocabulary):
        super().__init__(rules)
        self.vocabulary = vocabulary

    def parse_options(self, options: Mapping[str, Any]) -> SlavicOptions:
        return SlavicOptions.from_record(self.recognized(options))

    @property
    def top_scale_index(self) -> int:
        return len(self.vocabulary.scales)

    def integer_to_words(self, n: int, options: SlavicOptions) -> str:
        separator = self.rules.word_separator
        top = self.top_scale_index
        top_magnitude = 1000**top

        # Выше последнего scale-слова: множитель рендерится рекурсивно
        if n >= top_magnitude * 1000:
            quotient, remainder = divmod(n, top_magnitude)
            head = [
                self.integer_to_words(quotient, SlavicOptions()),
                self.scale_form(quotient, top),
            ]
            if remainder:
                head.append(self.integer_to_words(remainder, options))
            return separator.join(head)

        words: List[str] = []
        for segment in segment_by_threes(n):
            if segment.is_zero:
                continue
            if segment.scale_index == 0:
                words.append(self.chunk_words(segment, options.gender))
                continue

            scale_word = self.scale_form(segment.value, segment.scale_index)
            if segment.value == 1 and self.vocabulary.omit_one_before_scale:
                words.append(scale_word)
                continue

            gender = (
                Gender.FEMININE
                if segment.scale_index in self.vocabulary.feminine_scales
                else Gender.MASCULINE
            )
            words.append(f"{self.chunk_words(segment, gender)}{separator}{scale_word}")
        return separator.join(words)

    def chunk_words(self, segment: Segment, gender: Gender) -> str:
        """Слова для чанка 1..999 без scale-слова."""
        vocabulary = self.vocabulary
        ones = vocabulary.ones_feminine if gender == Gender.FEMININE else vocabulary.ones_masculine

        parts = []
        if segment.hundreds:
            parts.append(vocabulary.hundreds[segment.hundreds])
        if segment.tens == 1:
            parts.append(vocabulary.teens[segment.ones])
        else:
            if segment.tens > 1:
                parts.append(vocabulary.tens[segment.tens])
            if segment.ones:
                parts.append(ones[segment.ones])
        return self.rules.word_separator.join(parts)

    def scale_form(self, count: int, scale_index: int) -> str:
        """Форма scale-слова (тысяча/тысячи/тысяч) для количества count."""
        forms = self.vocabulary.scales[scale_index - 1]
        if not self.vocabulary.singular_only_for_one:
            return select_plural_form(count, forms)

        category = slavic_plural_category(count)
        if category == PluralCategory.SINGULAR and count != 1:
            category = PluralCategory.MANY
        return forms.form_for(category)


# =============================================================================
# ORDINALS
# =============================================================================


class SlavicOrdinals(BaseModel):
    """
    Таблицы порядковых числительных (мужской род, именительный падеж).

    scales[0] — тысячный; выше последнего слова → OutOfRange.
    """

    ones: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    teens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    tens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    hundreds: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    scales: tuple[str, ...] = Field(..., min_length=1)
    # pl: "dwudziesty pierwszy"; uk: "двадцять перший"
    ordinal_tens_in_compounds: bool = False

    model_config = {"frozen": True}

    def __call__(self, strategy: SlavicStrategy, n: int, options: Any) -> str:
        segments = segment_by_threes(n)
        last = next(segment for segment in reversed(segments) if not segment.is_zero)
        if last.scale_index > len(self.scales):
            raise OutOfRange(
                f"Ordinal numbers in {strategy.rules.code!r} are supported below "
                f"10^{3 * (len(self.scales) + 1)}"
            )

        separator = strategy.rules.word_separator
        words: List[str] = []
        head = n - last.value * 1000**last.scale_index
        if head:
            words.append(strategy.integer_to_words(head, SlavicOptions()))

        if last.scale_index == 0:
            words.append(self.chunk_words(strategy, last))
        elif last.value == 1:
            words.append(self.scales[last.scale_index - 1])
        else:
            gender = (
                Gender.FEMININE
                if last.scale_index in strategy.vocabulary.feminine_scales
                else Gender.MASCULINE
            )
            words.append(strategy.chunk_words(last, gender))
            words.append(self.scales[last.scale_index - 1])
        return separator.join(words)

    def chunk_words(self, strategy: SlavicStrategy, segment: Segment) -> str:
        """Порядковые слова для последнего чанка единиц 1..999."""
        if segment.tens_and_ones == 0:
            return self.hundreds[segment.hundreds]

        words = []
        if segment.hundreds:
            words.append(strategy.vocabulary.hundreds[segment.hundreds])
        if segment.tens == 1:
            words.append(self.teens[segment.ones])
        elif segment.ones == 0:
            words.append(self.tens[segment.tens])
        else:
            if segment.tens:
                tens = self.tens if self.ordinal_tens_in_compounds else strategy.vocabulary.tens
                words.append(tens[segment.tens])
            words.append(self.ones[segment.ones])
        return strategy.rules.word_separator.join(words)
