"""
GreedyScale Strategy — жадная декомпозиция по таблице масштабов

Алгоритм integer_to_words(n):
1. Найти наибольшую пару (magnitude, word) с magnitude <= n
2. quotient, remainder = divmod(n, magnitude)
3. Левый фрагмент: merge(unit, scale) при quotient = 1, иначе
   merge(decompose(quotient), scale)
4. remainder > 0 → merge(левый, decompose(remainder)); нулевой остаток
   опускается целиком

Каждый рекурсивный вызов получает строго меньшее значение:
quotient < n при magnitude > 1, remainder < magnitude <= n.
Глубина рекурсии ограничена числом уровней масштаба, а не величиной n.

merge() — нерегулярное ядро языка: разделители, дефисы, союзы,
множественное число scale-слова и опускание неявного "one".
Функция merge получает и возвращает WordPair (слово, значение); значение
результата всегда равно арифметике фрагментов (сумма или произведение).
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, NamedTuple, Optional

from src.core.domain.rules import Gender, LanguageRules, ScaleTable
from src.languages.strategies.base import LanguageStrategy, StrategyKind, parse_gender


class WordPair(NamedTuple):
    """Отрендеренный фрагмент и его числовое значение"""

    word: str
    value: int


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GreedyScaleOptions:
    """Опции одного вызова для GreedyScale языков."""

    gender: Gender = Gender.MASCULINE
    hyphenate: bool = False  # withHyphenSeparator: все пробелы → "-"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "GreedyScaleOptions":
        return cls(
            gender=parse_gender(record.get("gender")),
            hyphenate=bool(record.get("withHyphenSeparator", False)),
        )


MergeFunction = Callable[[WordPair, WordPair, Any], WordPair]


# =============================================================================
# STRATEGY
# =============================================================================


class GreedyScaleStrategy(LanguageStrategy):
    """
    Жадная декомпозиция с языковой функцией merge.

    Args:
        rules: базовые слова языка
        table: таблица масштабов (строго убывающая, с magnitude = 1)
        merge: языковая операция слияния двух фрагментов
        feminine_table: таблица для gender='feminine' (если язык различает)
    """

    kind = StrategyKind.GREEDY_SCALE

    def __init__(
        self,
        rules: LanguageRules,
        table: ScaleTable,
        merge: MergeFunction,
        feminine_table: Optional[ScaleTable] = None,
    ):
        super().__init__(rules)
        self.table = table
        self.feminine_table = feminine_table
        self._merge = merge

    def parse_options(self, options: Mapping[str, Any]) -> GreedyScaleOptions:
        return GreedyScaleOptions.from_record(self.recognized(options))

    def table_for(self, options: Any) -> ScaleTable:
        if self.feminine_table is not None and getattr(options, "gender", None) == Gender.FEMININE:
            return self.feminine_table
        return self.table

    def merge(self, left: WordPair, right: WordPair, options: Any) -> WordPair:
        return self._merge(left, right, options)

    def decompose(self, n: int, options: Any) -> WordPair:
        """
        Рекурсивная декомпозиция n > 0 в WordPair со значением n.

        Raises:
            ValueError: n <= 0 или в таблице нет слова для n ниже
                наименьшей неединичной magnitude
        """
        if n <= 0:
            raise ValueError(f"decompose() requires n > 0, got {n}")

        table = self.table_for(options)
        magnitude, word = table.largest_not_exceeding(n)
        if magnitude == 1:
            if n != 1:
                raise ValueError(f"scale table of {self.rules.code!r} has no word for {n}")
            return WordPair(table.unit_word, 1)

        quotient, remainder = divmod(n, magnitude)
        scale = WordPair(word, magnitude)
        if quotient == 1:
            left = self.merge(WordPair(table.unit_word, 1), scale, options)
        else:
            left = self.merge(self.decompose(quotient, options), scale, options)

        if remainder == 0:
            return left
        return self.merge(left, self.decompose(remainder, options), options)

    def integer_to_words(self, n: int, options: GreedyScaleOptions) -> str:
        word = self.decompose(n, options).word
        if options.hyphenate:
            return word.replace(" ", "-")
        return word

    def word_separator(self, options: GreedyScaleOptions) -> str:
        if options.hyphenate:
            return "-"
        return self.rules.word_separator
