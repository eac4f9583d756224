"""
Тесты для Direct Strategy (zh-Hans)

Проверяемые инварианты:
1. Пропуск разрядов обозначается одним 零
2. 万 / 亿 без разделителей, 亿 рекурсивно
3. formal=True (default) — 壹贰叁 и 拾佰仟; formal=False — 一二三 и 十百千
4. Дробная часть по цифрам, разделитель слов — пустая строка
"""

import pytest

from src.languages.locales.zh_hans import SIMPLIFIED_CHINESE
from src.languages.strategies.base import StrategyKind
from src.languages.strategies.direct import DirectOptions


class TestFormalNumerals:
    """Финансовые цифры (по умолчанию)."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "零"),
            (1, "壹"),
            (10, "壹拾"),
            (11, "壹拾壹"),
            (100, "壹佰"),
            (101, "壹佰零壹"),
            (1001, "壹仟零壹"),
            (1010, "壹仟零壹拾"),
            (10_000, "壹万"),
            (12_345, "壹万贰仟叁佰肆拾伍"),
            (30_210, "叁万零贰佰壹拾"),
            (100_000_000, "壹亿"),
            (100_000_001, "壹亿零壹"),
            (10**16, "壹亿亿"),
        ],
    )
    def test_integers(self, value, expected):
        assert SIMPLIFIED_CHINESE(value) == expected

    def test_fraction(self):
        assert SIMPLIFIED_CHINESE(0.01) == "零点零壹"
        assert SIMPLIFIED_CHINESE(1.5) == "壹点伍"

    def test_negative(self):
        assert SIMPLIFIED_CHINESE(-5) == "负伍"

    def test_kind(self):
        assert SIMPLIFIED_CHINESE.kind == StrategyKind.DIRECT


class TestCommonNumerals:
    """formal=False."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, "一十"),
            (101, "一百零一"),
            (30_210, "三万零二百一十"),
        ],
    )
    def test_integers(self, value, expected):
        assert SIMPLIFIED_CHINESE(value, {"formal": False}) == expected

    def test_fraction_digits_follow_register(self):
        assert SIMPLIFIED_CHINESE(2.5, {"formal": False}) == "二点五"

    def test_options_from_record(self):
        assert DirectOptions.from_record({}) == DirectOptions(formal=True)
        assert not DirectOptions.from_record({"formal": False}).formal
