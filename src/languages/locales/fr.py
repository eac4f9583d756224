"""
French (fr, fr-BE) — GreedyScale, длинная шкала

- 70 = soixante-dix, 80 = quatre-vingts, 90 = quatre-vingt-dix (fr)
- fr-BE: septante (70), nonante (90); quatre-vingts остаётся
- "et" перед un/onze: vingt et un, soixante et onze (но quatre-vingt-un)
- множественное -s у cents/vingts, если за ними ничего не следует
- withHyphenSeparator: орфография 1990, все слова через дефис

Порядковые: premier для 1, иначе кардинал + -ième (quatrième, cinquième,
neuvième, quatre-vingtième).
"""

from src.core.domain.rules import LanguageRules, ScaleTable
from src.languages.contract import LanguageContract
from src.languages.strategies.greedy_scale import GreedyScaleOptions, GreedyScaleStrategy, WordPair

MILLION = 1_000_000

PREMIER = "premier"
ORDINAL_SUFFIX = "ième"

FRENCH_SCALE_TABLE = ScaleTable.of(
    (10**27, "quadrilliard"),
    (10**24, "quadrillion"),
    (10**21, "trilliard"),
    (10**18, "trillion"),
    (10**15, "billiard"),
    (10**12, "billion"),
    (10**9, "milliard"),
    (10**6, "million"),
    (1000, "mille"),
    (100, "cent"),
    (80, "quatre-vingts"),
    (60, "soixante"),
    (50, "cinquante"),
    (40, "quarante"),
    (30, "trente"),
    (20, "vingt"),
    (19, "dix-neuf"),
    (18, "dix-huit"),
    (17, "dix-sept"),
    (16, "seize"),
    (15, "quinze"),
    (14, "quatorze"),
    (13, "treize"),
    (12, "douze"),
    (11, "onze"),
    (10, "dix"),
    (9, "neuf"),
    (8, "huit"),
    (7, "sept"),
    (6, "six"),
    (5, "cinq"),
    (4, "quatre"),
    (3, "trois"),
    (2, "deux"),
    (1, "un"),
)

BELGIAN_FRENCH_SCALE_TABLE = FRENCH_SCALE_TABLE.with_pairs((90, "nonante"), (70, "septante"))

FRENCH_RULES = LanguageRules(
    code="fr",
    name="French",
    zero_word="zéro",
    negative_word="moins",
    decimal_separator_word="virgule",
    options_schema="french_options",
)

BELGIAN_FRENCH_RULES = FRENCH_RULES.model_copy(update={"code": "fr-BE", "name": "Belgian French"})


def french_merge(current: WordPair, following: WordPair, options: GreedyScaleOptions) -> WordPair:
    current_word, current_value = current
    following_word, following_value = following

    if current_value == 1 and following_value < MILLION:
        return following

    if current_value != 1:
        # quatre-vingts / deux cents теряют -s, если за ними идёт число
        drops_plural = (current_value - 80) % 100 == 0 or (
            current_value % 100 == 0 and current_value < 1000
        )
        if drops_plural and following_value < MILLION and current_word.endswith("s"):
            current_word = current_word[:-1]
        if (
            current_value < 1000
            and following_value != 1000
            and not following_word.endswith("s")
            and following_value % 100 == 0
        ):
            following_word += "s"

    if following_value < current_value < 100:
        if following_value % 10 == 1 and current_value != 80:
            return WordPair(f"{current_word} et {following_word}", current_value + following_value)
        return WordPair(f"{current_word}-{following_word}", current_value + following_value)
    if following_value > current_value:
        return WordPair(f"{current_word} {following_word}", current_value * following_value)
    return WordPair(f"{current_word} {following_word}", current_value + following_value)


def cardinal_to_ordinal(cardinal: str) -> str:
    if cardinal.endswith("cinq"):
        return cardinal + "u" + ORDINAL_SUFFIX
    if cardinal.endswith("neuf"):
        return cardinal[:-1] + "v" + ORDINAL_SUFFIX
    # множественное -s (cents, vingts, millions) отбрасывается; trois — не множественное
    if cardinal.endswith("s") and not cardinal.endswith("trois"):
        return cardinal[:-1] + ORDINAL_SUFFIX
    if cardinal.endswith("e"):
        return cardinal[:-1] + ORDINAL_SUFFIX
    return cardinal + ORDINAL_SUFFIX


def french_ordinal(strategy: GreedyScaleStrategy, n: int, options: GreedyScaleOptions) -> str:
    if n == 1:
        return PREMIER
    return cardinal_to_ordinal(strategy.integer_to_words(n, options))


FRENCH = LanguageContract(
    GreedyScaleStrategy(FRENCH_RULES, FRENCH_SCALE_TABLE, french_merge), ordinal=french_ordinal
)
BELGIAN_FRENCH = LanguageContract(
    GreedyScaleStrategy(BELGIAN_FRENCH_RULES, BELGIAN_FRENCH_SCALE_TABLE, french_merge),
    ordinal=french_ordinal,
)
