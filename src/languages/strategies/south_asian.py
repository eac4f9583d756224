"""
SouthAsian Strategy — индийская группировка 3-2-2-2

Младшие 3 цифры образуют чанк единиц, далее пары цифр для
हज़ार / लाख / करोड़ / अरब / ... Каждый чанк <= 999 рендерится прямым
словарём 0..99 плюс слово для сотни; ненулевые чанки соединяются
пробелом со своим scale-словом, нулевые пропускаются.

Выше последнего scale-слова множитель рендерится рекурсивно
(например, "... शंख" после многозначного множителя).

Порядковые (SouthAsianOrdinals): особые формы для малых чисел, дальше
кардинал + суффикс (दस → दसवाँ, দশ → দশতম).
"""

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from src.core.domain.rules import LanguageRules
from src.core.math.segments import segment_by_three_then_twos
from src.languages.strategies.base import LanguageStrategy, StrategyKind


class SouthAsianVocabulary(BaseModel):
    """Слова 0..99, слово сотни и scale-слова (index 0 = единицы, пусто)."""

    below_hundred: tuple[str, ...] = Field(..., min_length=100, max_length=100)
    hundred_word: str = Field(..., min_length=1)
    scale_words: tuple[str, ...] = Field(..., min_length=2)

    model_config = {"frozen": True}


class SouthAsianStrategy(LanguageStrategy):
    """Декомпозиция lakh/crore (hi, bn)."""

    kind = StrategyKind.SOUTH_ASIAN

    def __init__(self, rules: LanguageRules, vocabulary: SouthAsianVocabulary):
        super().__init__(rules)
        self.vocabulary = vocabulary

    def parse_options(self, options: Mapping[str, Any]) -> Optional[Any]:
        # Семейство не имеет собственных опций
        return None

    @property
    def top_magnitude(self) -> int:
        """Значение последнего scale-слова: 10^3 × 100^(k-1)."""
        return 1000 * 100 ** (len(self.vocabulary.scale_words) - 2)

    def integer_to_words(self, n: int, options: Any = None) -> str:
        separator = self.rules.word_separator
        vocabulary = self.vocabulary
        top_word = vocabulary.scale_words[-1]

        if n >= self.top_magnitude * 100:
            quotient, remainder = divmod(n, self.top_magnitude)
            words = [self.integer_to_words(quotient), top_word]
            if remainder:
                words.append(self.integer_to_words(remainder))
            return separator.join(words)

        parts: List[str] = []
        for segment in segment_by_three_then_twos(n):
            if segment.is_zero:
                continue
            parts.append(self.segment_words(segment.value))
            if segment.scale_index > 0:
                parts.append(vocabulary.scale_words[segment.scale_index])
        return separator.join(parts)

    def segment_words(self, value: int) -> str:
        """Слова для чанка 1..999."""
        below_hundred = self.vocabulary.below_hundred
        if value < 100:
            return below_hundred[value]

        hundreds, remainder = divmod(value, 100)
        words = [below_hundred[hundreds], self.vocabulary.hundred_word]
        if remainder:
            words.append(below_hundred[remainder])
        return self.rules.word_separator.join(words)


class SouthAsianOrdinals(BaseModel):
    """Особые порядковые формы (index = число) и суффикс для остальных."""

    special: tuple[str, ...] = Field(..., min_length=2)
    suffix: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def __call__(self, strategy: SouthAsianStrategy, n: int, options: Any) -> str:
        if n < len(self.special):
            return self.special[n]
        return strategy.integer_to_words(n) + self.suffix
