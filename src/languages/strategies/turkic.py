"""
Turkic Strategy — GreedyScale с опусканием неявного "bir"

Скелет декомпозиции общий с GreedyScale; отличается merge:
- "bir" перед словами <= 100 и перед 1000 опускается (yüz, bin),
  но сохраняется перед milyon и выше (bir milyon)
- больший правый фрагмент умножает, меньший прибавляется

Опция dropSpaces убирает все разделители слов, включая разделители
вокруг знака и дробной части: число становится одним токеном.

Порядковые (TurkicOrdinals): особые формы 1..10, дальше кардинал одним
словом + суффикс по гармонии гласных (yirmibir → yirmibirinci).
"""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from pydantic import BaseModel, Field

from src.core.domain.rules import LanguageRules, ScaleTable
from src.languages.strategies.greedy_scale import GreedyScaleStrategy, WordPair
from src.languages.strategies.base import StrategyKind


@dataclass(frozen=True)
class TurkicOptions:
    """Опции одного вызова для тюркских языков."""

    drop_spaces: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "TurkicOptions":
        return cls(drop_spaces=bool(record.get("dropSpaces", False)))

    @property
    def separator(self) -> str:
        return "" if self.drop_spaces else " "


def turkic_merge(left: WordPair, right: WordPair, options: TurkicOptions) -> WordPair:
    """Слияние фрагментов с опусканием неявного множителя 1."""
    if left.value == 1 and (right.value <= 100 or right.value == 1000):
        return right
    joined = f"{left.word}{options.separator}{right.word}"
    if right.value > left.value:
        return WordPair(joined, left.value * right.value)
    return WordPair(joined, left.value + right.value)


class TurkicStrategy(GreedyScaleStrategy):
    """Тюркская декомпозиция (tr, az)."""

    kind = StrategyKind.TURKIC

    def __init__(self, rules: LanguageRules, table: ScaleTable):
        super().__init__(rules, table, turkic_merge)

    def parse_options(self, options: Mapping[str, Any]) -> TurkicOptions:
        return TurkicOptions.from_record(self.recognized(options))

    def integer_to_words(self, n: int, options: TurkicOptions) -> str:
        return self.decompose(n, options).word

    def word_separator(self, options: TurkicOptions) -> str:
        return options.separator


# =============================================================================
# ORDINALS
# =============================================================================

BACK_VOWELS = "aıou"
ROUNDED_VOWELS = "oöuü"


class TurkicOrdinals(BaseModel):
    """Порядковые числительные тюркского языка."""

    special: Tuple[str, ...] = Field(..., min_length=2, description="index = число, [0] не используется")
    front_vowels: str = Field("eiöü", min_length=1)

    model_config = {"frozen": True}

    def suffix(self, word: str) -> str:
        """-inci / -ıncı / -uncu / -üncü по последней гласной слова."""
        for char in reversed(word):
            if char in BACK_VOWELS:
                return "uncu" if char in ROUNDED_VOWELS else "ıncı"
            if char in self.front_vowels:
                return "üncü" if char in ROUNDED_VOWELS else "inci"
        return "inci"

    def __call__(self, strategy: TurkicStrategy, n: int, options: Any) -> str:
        if n < len(self.special):
            return self.special[n]
        cardinal = strategy.integer_to_words(n, TurkicOptions(drop_spaces=True))
        return cardinal + self.suffix(cardinal)
