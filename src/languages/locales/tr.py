"""Turkish (tr) — Turkic: "bir" опускается перед yüz и bin (yüz, bin, bir milyon)."""

from src.core.domain.rules import LanguageRules, ScaleTable
from src.languages.contract import LanguageContract
from src.languages.strategies.turkic import TurkicOrdinals, TurkicStrategy

TURKISH_SCALE_TABLE = ScaleTable.of(
    (10**18, "kentilyon"),
    (10**15, "katrilyon"),
    (10**12, "trilyon"),
    (10**9, "milyar"),
    (10**6, "milyon"),
    (1000, "bin"),
    (100, "yüz"),
    (90, "doksan"),
    (80, "seksen"),
    (70, "yetmiş"),
    (60, "altmış"),
    (50, "elli"),
    (40, "kırk"),
    (30, "otuz"),
    (20, "yirmi"),
    (10, "on"),
    (9, "dokuz"),
    (8, "sekiz"),
    (7, "yedi"),
    (6, "altı"),
    (5, "beş"),
    (4, "dört"),
    (3, "üç"),
    (2, "iki"),
    (1, "bir"),
)

TURKISH_RULES = LanguageRules(
    code="tr",
    name="Turkish",
    zero_word="sıfır",
    negative_word="eksi",
    decimal_separator_word="virgül",
    options_schema="turkic_options",
)

TURKISH_ORDINALS = TurkicOrdinals(
    special=(
        "",
        "birinci",
        "ikinci",
        "üçüncü",
        "dördüncü",
        "beşinci",
        "altıncı",
        "yedinci",
        "sekizinci",
        "dokuzuncu",
        "onuncu",
    ),
)

TURKISH = LanguageContract(TurkicStrategy(TURKISH_RULES, TURKISH_SCALE_TABLE), ordinal=TURKISH_ORDINALS)
