"""Azerbaijani (az) — Turkic, те же правила слияния, что и в tr."""

from src.core.domain.rules import LanguageRules, ScaleTable
from src.languages.contract import LanguageContract
from src.languages.strategies.turkic import TurkicOrdinals, TurkicStrategy

AZERBAIJANI_SCALE_TABLE = ScaleTable.of(
    (10**18, "kentilyon"),
    (10**15, "katrilyon"),
    (10**12, "trilyon"),
    (10**9, "milyar"),
    (10**6, "milyon"),
    (1000, "min"),
    (100, "yüz"),
    (90, "doxsan"),
    (80, "səksən"),
    (70, "yetmiş"),
    (60, "altmış"),
    (50, "əlli"),
    (40, "qırx"),
    (30, "otuz"),
    (20, "iyirmi"),
    (10, "on"),
    (9, "doqquz"),
    (8, "səkkiz"),
    (7, "yeddi"),
    (6, "altı"),
    (5, "beş"),
    (4, "dörd"),
    (3, "üç"),
    (2, "iki"),
    (1, "bir"),
)

AZERBAIJANI_RULES = LanguageRules(
    code="az",
    name="Azerbaijani",
    zero_word="sıfır",
    negative_word="mənfi",
    decimal_separator_word="nöqtə",
    options_schema="turkic_options",
)

AZERBAIJANI_ORDINALS = TurkicOrdinals(
    special=(
        "",
        "birinci",
        "ikinci",
        "üçüncü",
        "dördüncü",
        "beşinci",
        "altıncı",
        "yeddinci",
        "səkkizinci",
        "doqquzuncu",
        "onuncu",
    ),
    front_vowels="əeiöü",
)

AZERBAIJANI = LanguageContract(
    TurkicStrategy(AZERBAIJANI_RULES, AZERBAIJANI_SCALE_TABLE), ordinal=AZERBAIJANI_ORDINALS
)
