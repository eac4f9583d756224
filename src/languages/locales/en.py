"""
English (en, en-GB) — GreedyScale, короткая шкала до vigintillion

en: американский стиль без "and" (one hundred one). Опции:
- and: "and" после сотен и перед последней группой < 100 (как en-GB)
- hundredPairing: 1100..9999 парами сотен (fifteen hundred); дробная
  часть всегда без пар
en-GB: "and" всегда (one hundred and one, one million and one).

Порядковые: последнее слово кардинального числа → порядковая форма
(twenty-one → twenty-first, one hundred → one hundredth).
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Final, Mapping

from src.core.domain.rules import LanguageRules, ScaleTable
from src.languages.contract import LanguageContract
from src.languages.strategies.base import parse_gender
from src.languages.strategies.greedy_scale import GreedyScaleOptions, GreedyScaleStrategy, WordPair

SHORT_SCALE_NAMES = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
)

BASE_WORDS = {
    100: "hundred",
    90: "ninety",
    80: "eighty",
    70: "seventy",
    60: "sixty",
    50: "fifty",
    40: "forty",
    30: "thirty",
    20: "twenty",
    19: "nineteen",
    18: "eighteen",
    17: "seventeen",
    16: "sixteen",
    15: "fifteen",
    14: "fourteen",
    13: "thirteen",
    12: "twelve",
    11: "eleven",
    10: "ten",
    9: "nine",
    8: "eight",
    7: "seven",
    6: "six",
    5: "five",
    4: "four",
    3: "three",
    2: "two",
    1: "one",
}

ENGLISH_SCALE_TABLE = ScaleTable.of(
    *((1000 ** (power + 1), name) for power, name in reversed(list(enumerate(SHORT_SCALE_NAMES)))),
    *BASE_WORDS.items(),
)

ENGLISH_RULES = LanguageRules(
    code="en",
    name="English",
    zero_word="zero",
    negative_word="minus",
    decimal_separator_word="point",
    options_schema="english_options",
)

BRITISH_ENGLISH_RULES = ENGLISH_RULES.model_copy(
    update={"code": "en-GB", "name": "British English", "options_schema": "base_options"}
)

# hundredPairing применяется только к целым из этого диапазона
HUNDRED_PAIRING_RANGE: Final[range] = range(1100, 10_000)

IRREGULAR_ORDINALS = {
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
}

_LAST_WORD_RE: Final[re.Pattern[str]] = re.compile(r"[^ -]+$")


def american_merge(left: WordPair, right: WordPair, options: GreedyScaleOptions) -> WordPair:
    # "one" перед словами < 100 неявный: 1 × twenty → twenty
    if left.value == 1 and right.value < 100:
        return right
    if left.value < 100 and left.value > right.value:
        return WordPair(f"{left.word}-{right.word}", left.value + right.value)
    if right.value > left.value:
        return WordPair(f"{left.word} {right.word}", left.value * right.value)
    return WordPair(f"{left.word} {right.word}", left.value + right.value)


def british_merge(left: WordPair, right: WordPair, options: GreedyScaleOptions) -> WordPair:
    if left.value == 1 and right.value < 100:
        return right
    if left.value < 100 and left.value > right.value:
        return WordPair(f"{left.word}-{right.word}", left.value + right.value)
    if left.value >= 100 and right.value < 100:
        return WordPair(f"{left.word} and {right.word}", left.value + right.value)
    if right.value > left.value:
        return WordPair(f"{left.word} {right.word}", left.value * right.value)
    return WordPair(f"{left.word} {right.word}", left.value + right.value)


# =============================================================================
# OPTIONS
# =============================================================================


@dataclass(frozen=True)
class EnglishOptions(GreedyScaleOptions):
    """GreedyScale опции + and / hundredPairing."""

    hundred_pairing: bool = False
    use_and: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "EnglishOptions":
        return cls(
            gender=parse_gender(record.get("gender")),
            hundred_pairing=bool(record.get("hundredPairing", False)),
            use_and=bool(record.get("and", False)),
        )


class EnglishStrategy(GreedyScaleStrategy):
    """Американский английский с опциональными "and" и парами сотен."""

    def __init__(self, rules: LanguageRules, table: ScaleTable):
        super().__init__(rules, table, american_merge)

    def parse_options(self, options: Mapping[str, Any]) -> EnglishOptions:
        return EnglishOptions.from_record(self.recognized(options))

    def merge(self, left: WordPair, right: WordPair, options: Any) -> WordPair:
        if getattr(options, "use_and", False):
            return british_merge(left, right, options)
        return super().merge(left, right, options)

    def integer_to_words(self, n: int, options: EnglishOptions) -> str:
        if options.hundred_pairing and n in HUNDRED_PAIRING_RANGE:
            return self.pair_hundreds(n, options).word
        return super().integer_to_words(n, options)

    def pair_hundreds(self, n: int, options: EnglishOptions) -> WordPair:
        """1500 → fifteen hundred, 1999 → nineteen hundred ninety-nine."""
        high, low = divmod(n, 100)
        left = self.merge(self.decompose(high, options), WordPair(BASE_WORDS[100], 100), options)
        if low == 0:
            return left
        return self.merge(left, self.decompose(low, options), options)

    def fraction_options(self, options: EnglishOptions) -> EnglishOptions:
        return replace(options, hundred_pairing=False)


# =============================================================================
# ORDINALS
# =============================================================================


def ordinal_word(word: str) -> str:
    """Порядковая форма одного кардинального слова (twenty → twentieth)."""
    if word in IRREGULAR_ORDINALS:
        return IRREGULAR_ORDINALS[word]
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"


def cardinal_to_ordinal(cardinal: str) -> str:
    """Меняется только слово после последнего пробела или дефиса."""
    match = _LAST_WORD_RE.search(cardinal)
    return cardinal[: match.start()] + ordinal_word(match.group())


def english_ordinal(strategy: GreedyScaleStrategy, n: int, options: Any) -> str:
    # Порядковые строятся от кардинала без and / hundredPairing
    return cardinal_to_ordinal(strategy.integer_to_words(n, strategy.parse_options({})))


ENGLISH = LanguageContract(EnglishStrategy(ENGLISH_RULES, ENGLISH_SCALE_TABLE), ordinal=english_ordinal)
BRITISH_ENGLISH = LanguageContract(
    GreedyScaleStrategy(BRITISH_ENGLISH_RULES, ENGLISH_SCALE_TABLE, british_merge),
    ordinal=english_ordinal,
)
