"""
Language Contract — общая оркестрация рендеринга

to_words(value, options) одинаков для всех семейств:
1. Ноль без дробной части → zeroWord (без знака, даже для "-0")
2. Целая часть → strategy.integer_to_words
3. Дробные цифры (если есть) → decimalSeparatorWord + слова дробной части
   - GROUPED: каждый ведущий "0" → zeroWord, остаток одним числом
   - PER_DIGIT: каждая цифра отдельно
4. Отрицательное число → negativeWord + separator в начало

Меняются только integer_to_words и политика дробной части; всё
остальное вынесено сюда, чтобы отрицание и дроби вели себя одинаково во
всех языках.

Опции проверяются один раз на вызов (схемой языка) и никогда не
сохраняются: negativeWord из options заменяет слово языка только для
этого вызова.

Порядковые числительные (ordinal) подключаются функцией локали; язык
без такой функции поднимает UnsupportedLanguage.
"""

from typing import Any, Callable, List, Mapping, Optional

from src.core.domain.numeric import NumericValue
from src.core.domain.rules import DecimalMode, LanguageRules
from src.core.errors import UnsupportedLanguage
from src.core.math.numeric_value import (
    NumericInput,
    digits_to_int,
    parse_numeric_value,
    parse_ordinal_value,
)
from src.languages.strategies.base import LanguageStrategy, StrategyKind

# (strategy, n > 0, family options) → порядковое числительное
OrdinalFunction = Callable[[Any, int, Any], str]


class LanguageContract:
    """
    Связка стратегии языка с общей оркестрацией.

    Экземпляр неизменяем и может вызываться из нескольких потоков.

    Args:
        strategy: стратегия декомпозиции языка
        ordinal: функция порядковых числительных (None: язык их не поддерживает)
    """

    def __init__(self, strategy: LanguageStrategy, ordinal: Optional[OrdinalFunction] = None):
        self.strategy = strategy
        self._ordinal = ordinal

    @property
    def rules(self) -> LanguageRules:
        return self.strategy.rules

    @property
    def kind(self) -> StrategyKind:
        return self.strategy.kind

    @property
    def code(self) -> str:
        return self.strategy.rules.code

    @property
    def supports_ordinals(self) -> bool:
        return self._ordinal is not None

    def convert(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Нормализация value и рендеринг.

        Options проверяются до разбора значения: при любой ошибке
        рендеринг не начинается.

        Raises:
            InvalidOptions: options не plain record или нарушает схему
            InvalidType / InvalidFormat / NotFinite: ошибка значения
        """
        record = self.strategy.validator.check(options)
        return self._render(parse_numeric_value(value), record)

    def to_words(self, value: NumericValue, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Рендеринг нормализованного значения.

        Examples:
            >>> english.to_words(parse_numeric_value(-17.42))
            'minus seventeen point forty-two'
            >>> english.to_words(parse_numeric_value("3.005"))
            'three point zero zero five'
        """
        return self._render(value, self.strategy.validator.check(options))

    def _render(self, value: NumericValue, record: Mapping[str, Any]) -> str:
        # record уже проверен схемой языка
        strategy = self.strategy
        family_options = strategy.parse_options(record)

        if value.is_zero:
            return strategy.zero_word(family_options)

        words = [strategy.number_to_words(value.integer_magnitude, family_options)]
        if value.has_fraction:
            words.append(self.rules.decimal_separator_word)
            words.extend(self.fraction_words(value.fractional_digits, family_options))

        if value.is_negative:
            words.insert(0, self.negative_word(record))

        return strategy.word_separator(family_options).join(words)

    def fraction_words(self, digits: str, family_options: Any) -> List[str]:
        """Слова дробной части по политике языка."""
        strategy = self.strategy
        options = strategy.fraction_options(family_options)
        if strategy.decimal_mode == DecimalMode.PER_DIGIT:
            return [strategy.digit_word(int(digit), options) for digit in digits]

        significant = digits.lstrip("0")
        words = [strategy.zero_word(options)] * (len(digits) - len(significant))
        if significant:
            words.append(strategy.number_to_words(digits_to_int(significant), options))
        return words

    def negative_word(self, record: Mapping[str, Any]) -> str:
        return record.get("negativeWord") or self.rules.negative_word

    def ordinal(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Порядковое числительное для целого value > 0.

        Raises:
            InvalidOptions: options не plain record или нарушает схему
            UnsupportedLanguage: у языка нет порядковых числительных
            InvalidType / InvalidFormat / NotFinite: value не целое > 0

        Examples:
            >>> english.ordinal(21)
            'twenty-first'
            >>> english.ordinal("1000")
            'one thousandth'
        """
        record = self.strategy.validator.check(options)
        if self._ordinal is None:
            raise UnsupportedLanguage(self.code, f"Ordinal numbers are not supported for {self.code!r}")
        n = parse_ordinal_value(value)
        return self._ordinal(self.strategy, n, self.strategy.parse_options(record))

    def __call__(self, value: NumericInput, options: Optional[Mapping[str, Any]] = None) -> str:
        return self.convert(value, options)

    def __repr__(self) -> str:
        return f"LanguageContract({self.code!r}, kind={self.kind.value})"
