"""Ukrainian (uk) — Slavic: тисячі завжди жіночого роду (одна тисяча, дві тисячі)."""

from src.core.domain.rules import LanguageRules, PluralForms
from src.languages.contract import LanguageContract
from src.languages.strategies.slavic import SlavicOrdinals, SlavicStrategy, SlavicVocabulary

UKRAINIAN_VOCABULARY = SlavicVocabulary(
    ones_masculine=("", "один", "два", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять"),
    ones_feminine=("", "одна", "дві", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять"),
    teens=(
        "десять",
        "одинадцять",
        "дванадцять",
        "тринадцять",
        "чотирнадцять",
        "п'ятнадцять",
        "шістнадцять",
        "сімнадцять",
        "вісімнадцять",
        "дев'ятнадцять",
    ),
    tens=(
        "",
        "",
        "двадцять",
        "тридцять",
        "сорок",
        "п'ятдесят",
        "шістдесят",
        "сімдесят",
        "вісімдесят",
        "дев'яносто",
    ),
    hundreds=(
        "",
        "сто",
        "двісті",
        "триста",
        "чотириста",
        "п'ятсот",
        "шістсот",
        "сімсот",
        "вісімсот",
        "дев'ятсот",
    ),
    scales=(
        PluralForms.of("тисяча", "тисячі", "тисяч"),
        PluralForms.of("мільйон", "мільйони", "мільйонів"),
        PluralForms.of("мільярд", "мільярди", "мільярдів"),
        PluralForms.of("трильйон", "трильйони", "трильйонів"),
        PluralForms.of("квадрильйон", "квадрильйони", "квадрильйонів"),
        PluralForms.of("квінтильйон", "квінтильйони", "квінтильйонів"),
        PluralForms.of("секстильйон", "секстильйони", "секстильйонів"),
        PluralForms.of("септильйон", "септильйони", "септильйонів"),
        PluralForms.of("октильйон", "октильйони", "октильйонів"),
        PluralForms.of("нонільйон", "нонільйони", "нонільйонів"),
    ),
)

UKRAINIAN_RULES = LanguageRules(
    code="uk",
    name="Ukrainian",
    zero_word="нуль",
    negative_word="мінус",
    decimal_separator_word="кома",
    options_schema="gendered_options",
)

UKRAINIAN_ORDINALS = SlavicOrdinals(
    ones=("", "перший", "другий", "третій", "четвертий", "п'ятий", "шостий", "сьомий", "восьмий", "дев'ятий"),
    teens=(
        "десятий",
        "одинадцятий",
        "дванадцятий",
        "тринадцятий",
        "чотирнадцятий",
        "п'ятнадцятий",
        "шістнадцятий",
        "сімнадцятий",
        "вісімнадцятий",
        "дев'ятнадцятий",
    ),
    tens=(
        "",
        "",
        "двадцятий",
        "тридцятий",
        "сороковий",
        "п'ятдесятий",
        "шістдесятий",
        "сімдесятий",
        "вісімдесятий",
        "дев'яностий",
    ),
    hundreds=(
        "",
        "сотий",
        "двохсотий",
        "трьохсотий",
        "чотирьохсотий",
        "п'ятисотий",
        "шестисотий",
        "семисотий",
        "восьмисотий",
        "дев'ятисотий",
    ),
    scales=("тисячний", "мільйонний", "мільярдний", "трильйонний"),
)

UKRAINIAN = LanguageContract(
    SlavicStrategy(UKRAINIAN_RULES, UKRAINIAN_VOCABULARY), ordinal=UKRAINIAN_ORDINALS
)
