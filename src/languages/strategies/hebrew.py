"""
Hebrew Strategy — триады с родом, особыми тысячами и союзом ו

Порядок сборки:
1. Чанк единиц раскладывается на отдельные компоненты
   (сотни, десятки, единицы/teens)
2. Тысячи: 1..9 берутся из особых форм (אלף, אלפיים, שלושת אלפים, ...),
   иначе чанк + אלף
3. Миллионы и выше: 1 → одно scale-слово, иначе чанк + форма мн. числа
4. Внутри чанка перед scale-словом союз стоит перед каждой частью
   после первой (מאה ועשרים וחמש אלף)
5. В остальном союз (andWord, default ו) приклеивается только к
   последнему компоненту, и только если компонентов больше одного

Опции: gender (род единиц), andWord, biblical (библейский регистр
словаря). Дробная часть читается по цифрам.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from pydantic import BaseModel, Field

from src.core.domain.rules import Gender, LanguageRules
from src.core.math.segments import place_values, segment_by_threes
from src.languages.strategies.base import LanguageStrategy, StrategyKind, parse_gender

DEFAULT_AND_WORD = "ו"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class HebrewOptions:
    """Опции одного вызова для иврита."""

    gender: Gender
    biblical: bool
    and_word: str = DEFAULT_AND_WORD


class HebrewGenderForms(BaseModel):
    """Формы, зависящие от рода (списки индексируются цифрой)."""

    ones: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    teens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    hundreds: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    thousands: tuple[str, ...] = Field(..., min_length=10, max_length=10)

    model_config = {"frozen": True}


class HebrewVocabulary(BaseModel):
    """Словарь одного регистра (современный или библейский)."""

    masculine: HebrewGenderForms
    feminine: HebrewGenderForms
    tens: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    scales: tuple[str, ...] = Field(..., min_length=1, description="index 0 = אלף")
    scales_plural: tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    def forms(self, gender: Gender) -> HebrewGenderForms:
        return self.feminine if gender == Gender.FEMININE else self.masculine


# =============================================================================
# STRATEGY
# =============================================================================


class HebrewStrategy(LanguageStrategy):
    """
    Декомпозиция иврита (he, hbo).

    Args:
        rules: базовые слова языка
        modern: словарь современного регистра
        biblical: словарь библейского регистра
        default_gender: род по умолчанию (he: feminine, hbo: masculine)
        default_biblical: регистр по умолчанию
    """

    kind = StrategyKind.HEBREW

    def __init__(
        self,
        rules: LanguageRules,
        modern: HebrewVocabulary,
        biblical: HebrewVocabulary,
        default_gender: Gender = Gender.FEMININE,
        default_biblical: bool = False,
    ):
        super().__init__(rules)
        self.modern = modern
        self.biblical = biblical
        self.default_gender = default_gender
        self.default_biblical = default_biblical

    def parse_options(self, options: Mapping[str, Any]) -> HebrewOptions:
        record = self.recognized(options)
        return HebrewOptions(
            gender=parse_gender(record.get("gender"), self.default_gender),
            biblical=bool(record.get("biblical", self.default_biblical)),
            and_word=record.get("andWord", DEFAULT_AND_WORD),
        )

    def vocabulary_for(self, options: HebrewOptions) -> HebrewVocabulary:
        return self.biblical if options.biblical else self.modern

    def integer_to_words(self, n: int, options: HebrewOptions) -> str:
        components = self.components(n, options)
        if len(components) > 1:
            components[-1] = options.and_word + components[-1]
        return self.rules.word_separator.join(components)

    def components(self, n: int, options: HebrewOptions) -> List[str]:
        """Компоненты числа до вставки союза."""
        separator = self.rules.word_separator
        vocabulary = self.vocabulary_for(options)
        forms = vocabulary.forms(options.gender)
        top = len(vocabulary.scales)
        top_magnitude = 1000**top

        if n >= top_magnitude * 1000:
            quotient, remainder = divmod(n, top_magnitude)
            head = f"{self.integer_to_words(quotient, options)}{separator}{vocabulary.scales_plural[-1]}"
            return [head] + (self.components(remainder, options) if remainder else [])

        result: List[str] = []
        for segment in segment_by_threes(n):
            if segment.is_zero:
                continue
            index = segment.scale_index
            if index == 0:
                result.extend(self.chunk_parts(segment.value, forms, vocabulary))
            elif index == 1 and segment.value <= 9:
                result.append(forms.thousands[segment.value])
            elif index == 1:
                chunk = self.scale_chunk_parts(segment.value, forms, vocabulary, options.and_word)
                result.append(separator.join(chunk + [vocabulary.scales[0]]))
            elif segment.value == 1:
                result.append(vocabulary.scales[index - 1])
            else:
                chunk = self.scale_chunk_parts(segment.value, forms, vocabulary, options.and_word)
                result.append(separator.join(chunk + [vocabulary.scales_plural[index - 1]]))
        return result

    @staticmethod
    def chunk_parts(value: int, forms: HebrewGenderForms, vocabulary: HebrewVocabulary) -> List[str]:
        """Сотни, десятки и единицы чанка 1..999 по отдельности."""
        ones, tens, hundreds = place_values(value)
        parts = []
        if hundreds:
            parts.append(forms.hundreds[hundreds])
        if tens == 1:
            parts.append(forms.teens[ones])
        else:
            if tens > 1:
                parts.append(vocabulary.tens[tens])
            if ones:
                parts.append(forms.ones[ones])
        return parts

    @classmethod
    def scale_chunk_parts(
        cls,
        value: int,
        forms: HebrewGenderForms,
        vocabulary: HebrewVocabulary,
        and_word: str,
    ) -> List[str]:
        """Чанк перед scale-словом: союз перед каждой частью после первой.

        125 000 → מאה ועשרים וחמש אלף
        """
        parts = cls.chunk_parts(value, forms, vocabulary)
        return parts[:1] + [and_word + part for part in parts[1:]]
