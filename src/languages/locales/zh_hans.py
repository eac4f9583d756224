"""Simplified Chinese (zh-Hans) — Direct: 万/亿, финансовые цифры по умолчанию.

Порядковые: 第 + кардинал (第壹, 第一 при formal=False).
"""

from typing import Any

from src.core.domain.rules import DecimalMode, LanguageRules
from src.languages.contract import LanguageContract
from src.languages.strategies.direct import DigitSet, DirectStrategy, MyriadVocabulary

SIMPLIFIED_CHINESE_VOCABULARY = MyriadVocabulary(
    formal=DigitSet(
        digits=("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖"),
        ten="拾",
        hundred="佰",
        thousand="仟",
    ),
    common=DigitSet(
        digits=("零", "一", "二", "三", "四", "五", "六", "七", "八", "九"),
        ten="十",
        hundred="百",
        thousand="千",
    ),
    wan_word="万",
    yi_word="亿",
)

SIMPLIFIED_CHINESE_RULES = LanguageRules(
    code="zh-Hans",
    name="Simplified Chinese",
    zero_word="零",
    negative_word="负",
    decimal_separator_word="点",
    word_separator="",
    decimal_mode=DecimalMode.PER_DIGIT,
    options_schema="chinese_options",
)

ORDINAL_PREFIX = "第"


def chinese_ordinal(strategy: DirectStrategy, n: int, options: Any) -> str:
    return ORDINAL_PREFIX + strategy.integer_to_words(n, options)


SIMPLIFIED_CHINESE = LanguageContract(
    DirectStrategy(SIMPLIFIED_CHINESE_RULES, SIMPLIFIED_CHINESE_VOCABULARY),
    ordinal=chinese_ordinal,
)
