"""
Тесты для GreedyScale Strategy (en, en-GB, fr, fr-BE, es, es-MX)

Проверяемые инварианты:
1. Значение результата decompose() всегда равно n
2. Нулевой остаток опускается целиком
3. Неявное "one"/"un"/"uno" перед малыми словами
4. Региональные варианты: en-GB "and", fr-BE septante/nonante,
   es длинная шкала против es-MX короткой
5. en: "and" и пары сотен (1100..9999) только по опциям вызова,
   дробная часть без пар
6. Род (es) и дефисная орфография (fr) задаются per-call опциями
"""

import pytest

from src.core.domain.rules import Gender, LanguageRules, ScaleTable
from src.core.errors import InvalidOptions
from src.languages.locales.en import BRITISH_ENGLISH, ENGLISH, EnglishOptions
from src.languages.locales.es import MEXICAN_SPANISH, SPANISH
from src.languages.locales.fr import BELGIAN_FRENCH, FRENCH
from src.languages.strategies.base import StrategyKind
from src.languages.strategies.greedy_scale import (
    GreedyScaleOptions,
    GreedyScaleStrategy,
    WordPair,
)


def _sum_merge(left, right, options):
    if right.value > left.value:
        return WordPair(f"{left.word} {right.word}", left.value * right.value)
    return WordPair(f"{left.word} {right.word}", left.value + right.value)


# =============================================================================
# ТЕСТЫ: АЛГОРИТМ
# =============================================================================


class TestDecompose:
    """Жадная декомпозиция."""

    @pytest.mark.parametrize(
        "n", [1, 7, 19, 21, 99, 100, 101, 999, 1000, 1001, 123456, 10**21 + 17, 10**70 + 5]
    )
    def test_value_preserved_en(self, n):
        strategy = ENGLISH.strategy
        assert strategy.decompose(n, GreedyScaleOptions()).value == n

    @pytest.mark.parametrize("n", [70, 71, 80, 81, 91, 200, 201, 80_000_000, 10**30 + 1])
    def test_value_preserved_fr(self, n):
        strategy = FRENCH.strategy
        assert strategy.decompose(n, GreedyScaleOptions()).value == n

    @pytest.mark.parametrize("n", [1, 21, 101, 500, 1001, 2_000_000, 10**9])
    def test_value_preserved_es(self, n):
        for strategy in (SPANISH.strategy, MEXICAN_SPANISH.strategy):
            assert strategy.decompose(n, GreedyScaleOptions()).value == n
            assert strategy.decompose(n, GreedyScaleOptions(gender=Gender.FEMININE)).value == n

    def test_non_positive_rejected(self):
        with pytest.raises(ValueError):
            ENGLISH.strategy.decompose(0, GreedyScaleOptions())

    def test_gap_in_table(self):
        """Нет слова ниже наименьшей неединичной magnitude → ValueError."""
        rules = LanguageRules(
            code="xx", name="Test", zero_word="nil", negative_word="neg", decimal_separator_word="dot"
        )
        strategy = GreedyScaleStrategy(rules, ScaleTable.of((10, "ten"), (1, "one")), _sum_merge)
        assert strategy.integer_to_words(10, GreedyScaleOptions()) == "one ten"
        with pytest.raises(ValueError, match="no word for 5"):
            strategy.integer_to_words(5, GreedyScaleOptions())

    def test_kind(self):
        assert ENGLISH.kind == StrategyKind.GREEDY_SCALE


# =============================================================================
# ТЕСТЫ: ENGLISH
# =============================================================================


class TestEnglish:
    """Американский английский без "and"."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zero"),
            (1, "one"),
            (13, "thirteen"),
            (21, "twenty-one"),
            (99, "ninety-nine"),
            (100, "one hundred"),
            (101, "one hundred one"),
            (999, "nine hundred ninety-nine"),
            (1000, "one thousand"),
            (1234, "one thousand two hundred thirty-four"),
            (1_000_000, "one million"),
            (1_000_001, "one million one"),
            (
                123_456_789,
                "one hundred twenty-three million four hundred fifty-six thousand "
                "seven hundred eighty-nine",
            ),
            (10**63, "one vigintillion"),
            (10**66, "one thousand vigintillion"),
        ],
    )
    def test_integers(self, value, expected):
        assert ENGLISH(value) == expected

    def test_beyond_double_precision(self):
        assert ENGLISH(2**53 + 1) == (
            "nine quadrillion seven trillion one hundred ninety-nine billion "
            "two hundred fifty-four million seven hundred forty thousand "
            "nine hundred ninety-three"
        )

    def test_negative_fraction(self):
        assert ENGLISH(-17.42) == "minus seventeen point forty-two"

    def test_fraction_leading_zeros(self):
        assert ENGLISH("3.005") == "three point zero zero five"

    def test_inner_zero_segments_skipped(self):
        assert ENGLISH(1_000_000_000_007) == "one trillion seven"


class TestBritishEnglish:
    """en-GB: "and" перед последней группой < 100."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (101, "one hundred and one"),
            (120, "one hundred and twenty"),
            (1001, "one thousand and one"),
            (1100, "one thousand one hundred"),
            (1234, "one thousand two hundred and thirty-four"),
            (1_000_001, "one million and one"),
            (2000, "two thousand"),
        ],
    )
    def test_and_rule(self, value, expected):
        assert BRITISH_ENGLISH(value) == expected

    def test_same_words_below_hundred(self):
        assert BRITISH_ENGLISH(42) == ENGLISH(42)


class TestEnglishOptions:
    """en: опции and и hundredPairing."""

    @pytest.mark.parametrize(
        "value, expected, options",
        [
            (1100, "eleven hundred", {"hundredPairing": True}),
            (1500, "fifteen hundred", {"hundredPairing": True}),
            (1999, "nineteen hundred ninety-nine", {"hundredPairing": True}),
            (2300, "twenty-three hundred", {"hundredPairing": True}),
            (5050, "fifty hundred fifty", {"hundredPairing": True}),
            (9900, "ninety-nine hundred", {"hundredPairing": True}),
            (9999, "ninety-nine hundred ninety-nine", {"hundredPairing": True}),
            # вне 1100..9999 пары сотен не применяются
            (1000, "one thousand", {"hundredPairing": True}),
            (1099, "one thousand ninety-nine", {"hundredPairing": True}),
            (10000, "ten thousand", {"hundredPairing": True}),
            (101, "one hundred and one", {"and": True}),
            (123, "one hundred and twenty-three", {"and": True}),
            (1001, "one thousand and one", {"and": True}),
            (1100, "one thousand one hundred", {"and": True}),
            (1101, "one thousand one hundred and one", {"and": True}),
            (2020, "two thousand and twenty", {"and": True}),
            (1000001, "one million and one", {"and": True}),
            (1001001, "one million one thousand and one", {"and": True}),
            (1000000001, "one billion and one", {"and": True}),
            (1501, "fifteen hundred and one", {"and": True, "hundredPairing": True}),
            (1523, "fifteen hundred and twenty-three", {"and": True, "hundredPairing": True}),
        ],
    )
    def test_option_rows(self, value, expected, options):
        assert ENGLISH(value, options) == expected

    def test_and_matches_british(self):
        for value in (101, 1234, 1_000_001, 123_456_789):
            assert ENGLISH(value, {"and": True}) == BRITISH_ENGLISH(value)

    def test_pairing_not_applied_inside_larger_numbers(self):
        assert ENGLISH(1_500_000, {"hundredPairing": True}) == "one million five hundred thousand"

    def test_pairing_not_applied_to_fraction(self):
        assert ENGLISH("1500.1500", {"hundredPairing": True}) == (
            "fifteen hundred point one thousand five hundred"
        )

    def test_and_applies_to_fraction(self):
        assert ENGLISH("1.101", {"and": True}) == "one point one hundred and one"

    def test_options_off_by_default(self):
        assert ENGLISH(1500) == "one thousand five hundred"
        assert ENGLISH(1500, {"hundredPairing": False, "and": False}) == "one thousand five hundred"

    def test_options_not_persisted(self):
        ENGLISH(101, {"and": True})
        assert ENGLISH(101) == "one hundred one"

    def test_option_type_checked(self):
        with pytest.raises(InvalidOptions):
            ENGLISH(1500, {"hundredPairing": "yes"})
        with pytest.raises(InvalidOptions):
            ENGLISH(101, {"and": 1})

    def test_british_ignores_pairing(self):
        """en-GB не объявляет hundredPairing: ключ не распознаётся."""
        assert BRITISH_ENGLISH(1500, {"hundredPairing": True}) == "one thousand five hundred"

    def test_parse_options(self):
        options = ENGLISH.strategy.parse_options({"and": True, "hundredPairing": True})
        assert options == EnglishOptions(hundred_pairing=True, use_and=True)
        assert ENGLISH.strategy.fraction_options(options) == EnglishOptions(use_and=True)


# =============================================================================
# ТЕСТЫ: FRENCH
# =============================================================================


class TestFrench:
    """Французский (Франция)."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zéro"),
            (21, "vingt et un"),
            (70, "soixante-dix"),
            (71, "soixante et onze"),
            (80, "quatre-vingts"),
            (81, "quatre-vingt-un"),
            (90, "quatre-vingt-dix"),
            (200, "deux cents"),
            (201, "deux cent un"),
            (1000, "mille"),
            (2000, "deux mille"),
            (1_000_000, "un million"),
            (2_000_000, "deux millions"),
            (80_000_000, "quatre-vingts millions"),
            (300_000_000, "trois cents millions"),
            (4_300_000, "quatre millions trois cent mille"),
            (10**9, "un milliard"),
        ],
    )
    def test_integers(self, value, expected):
        assert FRENCH(value) == expected

    def test_hyphen_separator(self):
        assert FRENCH(21_602, {"withHyphenSeparator": True}) == "vingt-et-un-mille-six-cent-deux"

    def test_hyphen_separator_fraction(self):
        assert FRENCH(142.61, {"withHyphenSeparator": True}) == (
            "cent-quarante-deux-virgule-soixante-et-un"
        )

    def test_hyphen_separator_negative(self):
        assert FRENCH(-5, {"withHyphenSeparator": True}) == "moins-cinq"

    def test_hyphen_option_not_persisted(self):
        FRENCH(21, {"withHyphenSeparator": True})
        assert FRENCH(21) == "vingt et un"


class TestBelgianFrench:
    """fr-BE: septante, nonante."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (70, "septante"),
            (71, "septante et un"),
            (80, "quatre-vingts"),
            (90, "nonante"),
            (91, "nonante et un"),
            (99, "nonante-neuf"),
        ],
    )
    def test_regional_words(self, value, expected):
        assert BELGIAN_FRENCH(value) == expected

    def test_france_table_untouched(self):
        assert FRENCH(90) == "quatre-vingt-dix"


# =============================================================================
# ТЕСТЫ: SPANISH
# =============================================================================


class TestSpanish:
    """Испанский (длинная шкала)."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "cero"),
            (1, "uno"),
            (21, "veintiuno"),
            (31, "treinta y uno"),
            (100, "cien"),
            (101, "ciento uno"),
            (200, "doscientos"),
            (500, "quinientos"),
            (700, "setecientos"),
            (900, "novecientos"),
            (1000, "mil"),
            (2000, "dos mil"),
            (1_000_000, "un millón"),
            (2_000_000, "dos millones"),
            (10**9, "mil millones"),
            (10**12, "un billón"),
        ],
    )
    def test_integers(self, value, expected):
        assert SPANISH(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "una"),
            (21, "veintiuna"),
            (101, "cienta una"),
            (201, "doscientas una"),
            (1000, "mil"),
            (1_000_000, "un millón"),
        ],
    )
    def test_feminine(self, value, expected):
        assert SPANISH(value, {"gender": "feminine"}) == expected

    def test_masculine_explicit(self):
        assert SPANISH(21, {"gender": "masculine"}) == "veintiuno"

    def test_negative(self):
        assert SPANISH(-2) == "menos dos"


class TestMexicanSpanish:
    """es-MX: короткая шкала."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (10**9, "un billón"),
            (2 * 10**9, "dos billones"),
            (10**12, "un trillón"),
            (10**15, "un cuatrillón"),
            (10**18, "un quintillón"),
        ],
    )
    def test_short_scale(self, value, expected):
        assert MEXICAN_SPANISH(value) == expected

    def test_below_million_same_as_spanish(self):
        assert MEXICAN_SPANISH(123_456) == SPANISH(123_456)
