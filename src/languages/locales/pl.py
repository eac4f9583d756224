"""
Polish (pl) — Slavic с польскими отличиями

- "jeden" перед scale-словом опускается: tysiąc, milion
- форма singular только для ровно 1: 21 000 → dwadzieścia jeden tysięcy
- тысячи не переводятся в женский род
- порядковые: обе части составного десятка порядковые (dwudziesty pierwszy)
"""

from src.core.domain.rules import LanguageRules, PluralForms
from src.languages.contract import LanguageContract
from src.languages.strategies.slavic import SlavicOrdinals, SlavicStrategy, SlavicVocabulary

POLISH_VOCABULARY = SlavicVocabulary(
    ones_masculine=("", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    ones_feminine=("", "jedna", "dwie", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    teens=(
        "dziesięć",
        "jedenaście",
        "dwanaście",
        "trzynaście",
        "czternaście",
        "piętnaście",
        "szesnaście",
        "siedemnaście",
        "osiemnaście",
        "dziewiętnaście",
    ),
    tens=(
        "",
        "",
        "dwadzieścia",
        "trzydzieści",
        "czterdzieści",
        "pięćdziesiąt",
        "sześćdziesiąt",
        "siedemdziesiąt",
        "osiemdziesiąt",
        "dziewięćdziesiąt",
    ),
    hundreds=(
        "",
        "sto",
        "dwieście",
        "trzysta",
        "czterysta",
        "pięćset",
        "sześćset",
        "siedemset",
        "osiemset",
        "dziewięćset",
    ),
    scales=(
        PluralForms.of("tysiąc", "tysiące", "tysięcy"),
        PluralForms.of("milion", "miliony", "milionów"),
        PluralForms.of("miliard", "miliardy", "miliardów"),
        PluralForms.of("bilion", "biliony", "bilionów"),
        PluralForms.of("biliard", "biliardy", "biliardów"),
        PluralForms.of("trylion", "tryliony", "trylionów"),
        PluralForms.of("tryliard", "tryliardy", "tryliardów"),
        PluralForms.of("kwadrylion", "kwadryliony", "kwadrylionów"),
        PluralForms.of("kwaryliard", "kwadryliardy", "kwadryliardów"),
        PluralForms.of("kwintylion", "kwintyliony", "kwintylionów"),
    ),
    feminine_scales=frozenset(),
    omit_one_before_scale=True,
    singular_only_for_one=True,
)

POLISH_RULES = LanguageRules(
    code="pl",
    name="Polish",
    zero_word="zero",
    negative_word="minus",
    decimal_separator_word="przecinek",
    options_schema="gendered_options",
)

POLISH_ORDINALS = SlavicOrdinals(
    ones=("", "pierwszy", "drugi", "trzeci", "czwarty", "piąty", "szósty", "siódmy", "ósmy", "dziewiąty"),
    teens=(
        "dziesiąty",
        "jedenasty",
        "dwunasty",
        "trzynasty",
        "czternasty",
        "piętnasty",
        "szesnasty",
        "siedemnasty",
        "osiemnasty",
        "dziewiętnasty",
    ),
    tens=(
        "",
        "",
        "dwudziesty",
        "trzydziesty",
        "czterdziesty",
        "pięćdziesiąty",
        "sześćdziesiąty",
        "siedemdziesiąty",
        "osiemdziesiąty",
        "dziewięćdziesiąty",
    ),
    hundreds=(
        "",
        "setny",
        "dwusetny",
        "trzechsetny",
        "czterechsetny",
        "pięćsetny",
        "sześćsetny",
        "siedemsetny",
        "osiemsetny",
        "dziewięćsetny",
    ),
    scales=("tysięczny", "milionowy", "miliardowy", "bilionowy", "biliardowy", "trylionowy", "tryliardowy"),
    ordinal_tens_in_compounds=True,
)

POLISH = LanguageContract(SlavicStrategy(POLISH_RULES, POLISH_VOCABULARY), ordinal=POLISH_ORDINALS)
