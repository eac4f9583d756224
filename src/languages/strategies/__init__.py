"""Strategies — закрытое семейство стратегий декомпозиции.

- GreedyScale: жадная декомпозиция по таблице масштабов + merge языка
- Slavic: триады, singular/few/many, женские тысячи
- SouthAsian: группировка 3-2-2-2 (lakh/crore)
- Turkic: GreedyScale без неявного "bir", опция dropSpaces
- Hebrew: род, особые тысячи, союз ו перед последним компонентом
- Direct: мириадная группировка (万/亿) без разделителей
"""

from .base import LanguageStrategy, StrategyKind, parse_gender
from .greedy_scale import GreedyScaleOptions, GreedyScaleStrategy, MergeFunction, WordPair
from .slavic import SlavicOptions, SlavicStrategy, SlavicVocabulary
from .south_asian import SouthAsianStrategy, SouthAsianVocabulary
from .turkic import TurkicOptions, TurkicStrategy, turkic_merge
from .hebrew import (
    HebrewGenderForms,
    HebrewOptions,
    HebrewStrategy,
    HebrewVocabulary,
)
from .direct import DigitSet, DirectOptions, DirectStrategy, MyriadVocabulary

__all__ = [
    # Base
    "LanguageStrategy",
    "StrategyKind",
    "parse_gender",
    # GreedyScale
    "GreedyScaleStrategy",
    "GreedyScaleOptions",
    "MergeFunction",
    "WordPair",
    # Slavic
    "SlavicStrategy",
    "SlavicOptions",
    "SlavicVocabulary",
    # SouthAsian
    "SouthAsianStrategy",
    "SouthAsianVocabulary",
    # Turkic
    "TurkicStrategy",
    "TurkicOptions",
    "turkic_merge",
    # Hebrew
    "HebrewStrategy",
    "HebrewOptions",
    "HebrewVocabulary",
    "HebrewGenderForms",
    # Direct
    "DirectStrategy",
    "DirectOptions",
    "DigitSet",
    "MyriadVocabulary",
]
