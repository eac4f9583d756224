"""Russian (ru) — Slavic: тысячи всегда женского рода (одна тысяча, две тысячи)."""

from src.core.domain.rules import LanguageRules, PluralForms
from src.languages.contract import LanguageContract
from src.languages.strategies.slavic import SlavicStrategy, SlavicVocabulary

RUSSIAN_VOCABULARY = SlavicVocabulary(
    ones_masculine=("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    ones_feminine=("", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    teens=(
        "десять",
        "одиннадцать",
        "двенадцать",
        "тринадцать",
        "четырнадцать",
        "пятнадцать",
        "шестнадцать",
        "семнадцать",
        "восемнадцать",
        "девятнадцать",
    ),
    tens=(
        "",
        "",
        "двадцать",
        "тридцать",
        "сорок",
        "пятьдесят",
        "шестьдесят",
        "семьдесят",
        "восемьдесят",
        "девяносто",
    ),
    hundreds=(
        "",
        "сто",
        "двести",
        "триста",
        "четыреста",
        "пятьсот",
        "шестьсот",
        "семьсот",
        "восемьсот",
        "девятьсот",
    ),
    scales=(
        PluralForms.of("тысяча", "тысячи", "тысяч"),
        PluralForms.of("миллион", "миллиона", "миллионов"),
        PluralForms.of("миллиард", "миллиарда", "миллиардов"),
        PluralForms.of("триллион", "триллиона", "триллионов"),
        PluralForms.of("квадриллион", "квадриллиона", "квадриллионов"),
        PluralForms.of("квинтиллион", "квинтиллиона", "квинтиллионов"),
        PluralForms.of("секстиллион", "секстиллиона", "секстиллионов"),
        PluralForms.of("септиллион", "септиллиона", "септиллионов"),
        PluralForms.of("октиллион", "октиллиона", "октиллионов"),
        PluralForms.of("нониллион", "нониллиона", "нониллионов"),
    ),
)

RUSSIAN_RULES = LanguageRules(
    code="ru",
    name="Russian",
    zero_word="ноль",
    negative_word="минус",
    decimal_separator_word="запятая",
    options_schema="gendered_options",
)

RUSSIAN = LanguageContract(SlavicStrategy(RUSSIAN_RULES, RUSSIAN_VOCABULARY))
