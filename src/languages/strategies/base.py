"""
Strategy Base — общий интерфейс стратегий декомпозиции

Закрытое объединение стратегий (StrategyKind) и базовый класс, который
знает только то, что одинаково для всех семейств:
- какие ключи options объявлены в JSON Schema языка
- zeroWord / wordSeparator / digit_word по умолчанию

Каждая стратегия хранит собственные статические таблицы и строится один
раз при импорте модуля локали. После конструирования экземпляр только
читается, поэтому его можно разделять между потоками.
"""

from enum import Enum
from typing import Any, ClassVar, FrozenSet, Mapping

from src.core.contracts import OptionsValidator, get_options_validator
from src.core.domain.rules import DecimalMode, Gender, LanguageRules


class StrategyKind(str, Enum):
    """Семейства грамматик числительных"""

    GREEDY_SCALE = "greedy_scale"
    SLAVIC = "slavic"
    SOUTH_ASIAN = "south_asian"
    TURKIC = "turkic"
    HEBREW = "hebrew"
    DIRECT = "direct"


def parse_gender(value: Any, default: Gender = Gender.MASCULINE) -> Gender:
    """'masculine' / 'feminine' → Gender; отсутствие ключа → default."""
    if value is None:
        return default
    return Gender(value)


class LanguageStrategy:
    """
    Базовый класс стратегии.

    Подклассы задают `kind` и реализуют parse_options() и
    integer_to_words(). Вызов integer_to_words() с n = 0 не происходит:
    ноль рендерится через number_to_words().
    """

    kind: ClassVar[StrategyKind]

    def __init__(self, rules: LanguageRules):
        self.rules = rules
        self._validator = get_options_validator(rules.options_schema)
        self._recognized: FrozenSet[str] = frozenset(
            self._validator.schema.get("properties", {})
        )

    # -------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------

    @property
    def validator(self) -> OptionsValidator:
        return self._validator

    def recognized(self, options: Mapping[str, Any]) -> dict:
        return {key: value for key, value in options.items() if key in self._recognized}

    def parse_options(self, options: Mapping[str, Any]) -> Any:
        """
        Построение family options dataclass из проверенной записи.

        Получает только распознанные ключи (см. recognized()).
        """
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def integer_to_words(self, n: int, options: Any) -> str:
        """Слова для целого n > 0."""
        raise NotImplementedError

    def number_to_words(self, n: int, options: Any) -> str:
        if n == 0:
            return self.zero_word(options)
        return self.integer_to_words(n, options)

    def zero_word(self, options: Any) -> str:
        return self.rules.zero_word

    def word_separator(self, options: Any) -> str:
        return self.rules.word_separator

    def digit_word(self, digit: int, options: Any) -> str:
        """Слово для одной цифры дробной части (режим PER_DIGIT)."""
        return self.number_to_words(digit, options)

    def fraction_options(self, options: Any) -> Any:
        """Опции для чисел дробной части (по умолчанию те же)."""
        return options

    @property
    def decimal_mode(self) -> DecimalMode:
        return self.rules.decimal_mode

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rules.code!r})"
