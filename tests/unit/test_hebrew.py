"""
Тесты для Hebrew Strategy (he, hbo)

Проверяемые инварианты:
1. Союз ו приклеивается только к последнему компоненту; внутри чанка
   перед scale-словом он стоит перед каждой частью после первой
2. Особые формы тысяч 1..9 (אלף, אלפיים, שלשת אלפים)
3. he: женский род по умолчанию; hbo: мужской и библейский регистр
4. andWord / gender / biblical действуют только на один вызов
5. Дробная часть читается по цифрам
"""

import pytest

from src.core.domain.rules import Gender
from src.languages.locales.he import BIBLICAL_HEBREW, HEBREW
from src.languages.strategies.base import StrategyKind
from src.languages.strategies.hebrew import DEFAULT_AND_WORD, HebrewOptions


class TestModernHebrew:
    """he: современный регистр."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "אפס"),
            (1, "אחת"),
            (3, "שלש"),
            (21, "עשרים ואחת"),
            (100, "מאה"),
            (105, "מאה וחמש"),
            (1001, "אלף ואחת"),
            (2000, "אלפיים"),
            (3000, "שלשת אלפים"),
            (20_000, "עשרים אלף"),
            (1_000_000, "מיליון"),
            (1_000_021, "מיליון עשרים ואחת"),
        ],
    )
    def test_integers(self, value, expected):
        assert HEBREW(value) == expected

    def test_masculine(self):
        assert HEBREW(3, {"gender": "masculine"}) == "שלשה"
        assert HEBREW(12, {"gender": "masculine"}) == "שנים עשר"

    def test_conjunction_inside_scale_chunk(self):
        """Союз перед каждой частью чанка, стоящего перед scale-словом."""
        assert HEBREW(21_000) == "עשרים ואחת אלף"
        assert HEBREW(125_000) == "מאה ועשרים וחמש אלף"
        assert HEBREW(21_021) == "עשרים ואחת אלף עשרים ואחת"

    def test_scale_chunk_follows_and_word(self):
        assert HEBREW(21_000, {"andWord": ""}) == "עשרים אחת אלף"
        assert HEBREW(125_000, {"andWord": "ו-"}) == "מאה ו-עשרים ו-חמש אלף"

    def test_single_part_scale_chunk_unchanged(self):
        assert HEBREW(20_000) == "עשרים אלף"
        assert HEBREW(500_000) == "חמש מאות אלף"

    def test_custom_and_word(self):
        assert HEBREW(21, {"andWord": ""}) == "עשרים אחת"
        assert HEBREW(21) == "עשרים ואחת"

    def test_biblical_option(self):
        assert HEBREW(300, {"biblical": True}) == "שלש מאות"
        assert HEBREW(300, {"biblical": True, "gender": "masculine"}) == "שלשה מאות"

    def test_fraction_per_digit(self):
        assert HEBREW(1.5) == "אחת נקודה חמש"
        assert HEBREW("0.05") == "אפס נקודה אפס חמש"

    def test_negative(self):
        assert HEBREW(-3) == "מינוס שלש"

    def test_kind(self):
        assert HEBREW.kind == StrategyKind.HEBREW


class TestBiblicalHebrew:
    """hbo: мужской род и библейский регистр по умолчанию."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3, "שלשה"),
            (300, "שלשה מאות"),
            (3000, "שלשה אלפים"),
            (2_000_000, "שניים מיליונים"),
        ],
    )
    def test_integers(self, value, expected):
        assert BIBLICAL_HEBREW(value) == expected

    def test_modern_register_on_request(self):
        assert BIBLICAL_HEBREW(300, {"biblical": False}) == "שלש מאות"

    def test_feminine(self):
        assert BIBLICAL_HEBREW(3, {"gender": "feminine"}) == "שלש"


class TestHebrewOptions:
    """Разбор options."""

    def test_defaults_he(self):
        options = HEBREW.strategy.parse_options({})
        assert options == HebrewOptions(gender=Gender.FEMININE, biblical=False)
        assert options.and_word == DEFAULT_AND_WORD

    def test_defaults_hbo(self):
        options = BIBLICAL_HEBREW.strategy.parse_options({})
        assert options == HebrewOptions(gender=Gender.MASCULINE, biblical=True)

    def test_components_without_conjunction(self):
        options = HEBREW.strategy.parse_options({})
        assert HEBREW.strategy.components(121, options) == ["מאה", "עשרים", "אחת"]

    def test_components_scale_chunk(self):
        options = HEBREW.strategy.parse_options({})
        assert HEBREW.strategy.components(125_021, options) == ["מאה ועשרים וחמש אלף", "עשרים", "אחת"]
