"""
Spanish (es, es-MX) — GreedyScale с родом

- es: длинная шкала (billón = 10^12, trillón = 10^18)
- es-MX: короткая шкала (billón = 10^9, trillón = 10^12, ...);
  es-US разрешается в es-MX как псевдоним
- gender='feminine': una, veintiuna, doscientas, ...
  ("cienta una" для 101 сохранено как есть в данных локали)
"""

from src.core.domain.rules import Gender, LanguageRules, ScaleTable
from src.languages.contract import LanguageContract
from src.languages.strategies.greedy_scale import GreedyScaleOptions, GreedyScaleStrategy, WordPair

MILLION = 1_000_000

BASE_WORDS = (
    (1000, "mil"),
    (100, "cien"),
    (90, "noventa"),
    (80, "ochenta"),
    (70, "setenta"),
    (60, "sesenta"),
    (50, "cincuenta"),
    (40, "cuarenta"),
    (30, "treinta"),
    (29, "veintinueve"),
    (28, "veintiocho"),
    (27, "veintisiete"),
    (26, "veintiséis"),
    (25, "veinticinco"),
    (24, "veinticuatro"),
    (23, "veintitrés"),
    (22, "veintidós"),
    (21, "veintiuno"),
    (20, "veinte"),
    (19, "diecinueve"),
    (18, "dieciocho"),
    (17, "diecisiete"),
    (16, "dieciseis"),
    (15, "quince"),
    (14, "catorce"),
    (13, "trece"),
    (12, "doce"),
    (11, "once"),
    (10, "diez"),
    (9, "nueve"),
    (8, "ocho"),
    (7, "siete"),
    (6, "seis"),
    (5, "cinco"),
    (4, "cuatro"),
    (3, "tres"),
    (2, "dos"),
    (1, "uno"),
)

FEMININE_WORDS = ((21, "veintiuna"), (1, "una"))

SPANISH_SCALE_TABLE = ScaleTable.of(
    (10**24, "cuatrillón"),
    (10**18, "trillón"),
    (10**12, "billón"),
    (10**6, "millón"),
    *BASE_WORDS,
)

MEXICAN_SPANISH_SCALE_TABLE = ScaleTable.of(
    (10**18, "quintillón"),
    (10**15, "cuatrillón"),
    (10**12, "trillón"),
    (10**9, "billón"),
    (10**6, "millón"),
    *BASE_WORDS,
)

SPANISH_RULES = LanguageRules(
    code="es",
    name="Spanish",
    zero_word="cero",
    negative_word="menos",
    decimal_separator_word="punto",
    options_schema="gendered_options",
)

MEXICAN_SPANISH_RULES = SPANISH_RULES.model_copy(update={"code": "es-MX", "name": "Mexican Spanish"})


def spanish_merge(current: WordPair, following: WordPair, options: GreedyScaleOptions) -> WordPair:
    current_word, current_value = current
    following_word, following_value = following
    stem = "a" if options.gender == Gender.FEMININE else "o"

    if current_value == 1:
        if following_value < MILLION:
            return following
        current_word = "un"
    elif current_value == 100 and following_value % 1000 != 0:
        current_word += "t" + stem

    if following_value < current_value:
        if current_value < 100:
            return WordPair(f"{current_word} y {following_word}", current_value + following_value)
        return WordPair(f"{current_word} {following_word}", current_value + following_value)

    # millón → millones, billón → billones
    if following_value % MILLION == 0 and current_value > 1:
        following_word = following_word[:-3] + "lones"

    if following_value == 100:
        if current_value == 5:
            current_word = "quinien"
            following_word = ""
        elif current_value == 7:
            current_word = "sete"
        elif current_value == 9:
            current_word = "nove"
        following_word += "t" + stem + "s"
    else:
        following_word = " " + following_word

    return WordPair(f"{current_word}{following_word}", current_value * following_value)


def _strategy(rules: LanguageRules, table: ScaleTable) -> GreedyScaleStrategy:
    return GreedyScaleStrategy(
        rules,
        table,
        spanish_merge,
        feminine_table=table.with_pairs(*FEMININE_WORDS),
    )


SPANISH = LanguageContract(_strategy(SPANISH_RULES, SPANISH_SCALE_TABLE))
MEXICAN_SPANISH = LanguageContract(_strategy(MEXICAN_SPANISH_RULES, MEXICAN_SPANISH_SCALE_TABLE))
