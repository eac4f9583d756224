"""
Direct Strategy — мириадная группировка (万 / 亿) без разделителей

Число ниже 万 собирается из разрядов 千/百/十 и единиц; пропущенные
разряды обозначаются одним 零:
- 1001 → 壹仟零壹, 1010 → 壹仟零壹拾, 30210 → 叁万零贰佰壹拾
Значения от 亿 и выше: множитель 亿 рендерится рекурсивно, так что
разрядность не ограничена.

Опция formal (default True) выбирает финансовые цифры 壹贰叁 и 拾佰仟;
formal=False — повседневные 一二三 и 十百千.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from pydantic import BaseModel, Field

from src.core.domain.rules import LanguageRules
from src.languages.strategies.base import LanguageStrategy, StrategyKind

WAN = 10_000
YI = 100_000_000


@dataclass(frozen=True)
class DirectOptions:
    """Опции одного вызова для китайского."""

    formal: bool = True

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "DirectOptions":
        return cls(formal=bool(record.get("formal", True)))


class DigitSet(BaseModel):
    """Цифры 0..9 и слова разрядов 十/百/千 одного регистра."""

    digits: tuple[str, ...] = Field(..., min_length=10, max_length=10)
    ten: str = Field(..., min_length=1)
    hundred: str = Field(..., min_length=1)
    thousand: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class MyriadVocabulary(BaseModel):
    formal: DigitSet
    common: DigitSet
    wan_word: str = Field(..., min_length=1)
    yi_word: str = Field(..., min_length=1)

    model_config = {"frozen": True}

    def digit_set(self, formal: bool) -> DigitSet:
        return self.formal if formal else self.common


class DirectStrategy(LanguageStrategy):
    """Мириадная декомпозиция (zh-Hans)."""

    kind = StrategyKind.DIRECT

    def __init__(self, rules: LanguageRules, vocabulary: MyriadVocabulary):
        super().__init__(rules)
        self.vocabulary = vocabulary

    def parse_options(self, options: Mapping[str, Any]) -> DirectOptions:
        return DirectOptions.from_record(self.recognized(options))

    def digit_word(self, digit: int, options: DirectOptions) -> str:
        return self.vocabulary.digit_set(options.formal).digits[digit]

    def integer_to_words(self, n: int, options: DirectOptions) -> str:
        zero = self.rules.zero_word
        if n < YI:
            return self._below_yi(n, options)

        yi_value, remainder = divmod(n, YI)
        parts = [self.integer_to_words(yi_value, options) + self.vocabulary.yi_word]
        if remainder:
            if remainder < YI // 10:
                parts.append(zero)
            parts.append(self._below_yi(remainder, options))
        return "".join(parts)

    def _below_yi(self, value: int, options: DirectOptions) -> str:
        if value < WAN:
            return self._below_wan(value, options)

        wan_value, remainder = divmod(value, WAN)
        parts = [self._below_wan(wan_value, options) + self.vocabulary.wan_word]
        if remainder:
            if wan_value % 10 == 0 or remainder < 1000:
                parts.append(self.rules.zero_word)
            parts.append(self._below_wan(remainder, options))
        return "".join(parts)

    def _below_wan(self, value: int, options: DirectOptions) -> str:
        """Число 1..9999 с одним 零 на каждый пропуск разрядов."""
        digit_set = self.vocabulary.digit_set(options.formal)
        digits = digit_set.digits
        zero = self.rules.zero_word
        places = (
            (value // 1000, digit_set.thousand),
            (value // 100 % 10, digit_set.hundred),
            (value // 10 % 10, digit_set.ten),
            (value % 10, ""),
        )

        parts: List[str] = []
        pending_zero = False
        for digit, unit in places:
            if digit == 0:
                pending_zero = bool(parts)
                continue
            if pending_zero:
                parts.append(zero)
                pending_zero = False
            parts.append(digits[digit] + unit)
        return "".join(parts)
