"""
Segmentation Utilities — группировка цифр и выбор форм множественного числа

Чистые функции без состояния:
- group_by_threes: западная группировка по 3 цифры (1,234,567)
- group_by_three_then_twos: индийская группировка 3-2-2-2 (1,23,45,67,890)
- place_values: разложение сегмента 0..999 на ones/tens/hundreds
- slavic_plural_category: singular/few/many по последним цифрам

Segment хранит значение чанка, индекс его scale-слова (0 = единицы,
1 = тысячи, ...) и разложение на разряды.
"""

from dataclasses import dataclass
from typing import List

from src.core.domain.rules import PluralCategory, PluralForms


# =============================================================================
# SEGMENT
# =============================================================================


@dataclass(frozen=True)
class Segment:
    """Ограниченный чанк цифр с индексом scale-слова."""

    value: int
    scale_index: int
    ones: int
    tens: int
    hundreds: int

    @classmethod
    def from_value(cls, value: int, scale_index: int) -> "Segment":
        ones, tens, hundreds = place_values(value)
        return cls(value=value, scale_index=scale_index, ones=ones, tens=tens, hundreds=hundreds)

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    @property
    def tens_and_ones(self) -> int:
        return self.value % 100


# =============================================================================
# GROUPING
# =============================================================================


def group_by_threes(n: int) -> List[int]:
    """
    Группировка по 3 цифры справа налево (Western thousand-grouping).

    Args:
        n: неотрицательное целое

    Returns:
        Сегменты от старшего к младшему

    Examples:
        >>> group_by_threes(1234567)
        [1, 234, 567]
        >>> group_by_threes(0)
        [0]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    segments: List[int] = []
    while True:
        n, segment = divmod(n, 1000)
        segments.append(segment)
        if n == 0:
            break
    segments.reverse()
    return segments


def group_by_three_then_twos(n: int) -> List[int]:
    """
    Индийская группировка: 3 младшие цифры, затем пары.

    Examples:
        >>> group_by_three_then_twos(1234567)
        [12, 34, 567]
        >>> group_by_three_then_twos(98765432)
        [9, 87, 65, 432]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if n < 1000:
        return [n]

    n, low = divmod(n, 1000)
    segments = [low]
    while n:
        n, pair = divmod(n, 100)
        segments.append(pair)
    segments.reverse()
    return segments


def segment_by_threes(n: int) -> List[Segment]:
    """Сегменты по 3 цифры с индексами scale (старший первым)."""
    values = group_by_threes(n)
    top = len(values) - 1
    return [Segment.from_value(value, top - i) for i, value in enumerate(values)]


def segment_by_three_then_twos(n: int) -> List[Segment]:
    """Сегменты 3-2-2-2 с индексами scale (старший первым)."""
    values = group_by_three_then_twos(n)
    top = len(values) - 1
    return [Segment.from_value(value, top - i) for i, value in enumerate(values)]


def place_values(segment: int) -> tuple[int, int, int]:
    """
    Разряды сегмента 0..999: (ones, tens, hundreds).

    Examples:
        >>> place_values(456)
        (6, 5, 4)
    """
    if not 0 <= segment <= 999:
        raise ValueError(f"segment must be in [0, 999], got {segment}")
    return segment % 10, (segment // 10) % 10, segment // 100


# =============================================================================
# PLURALIZATION
# =============================================================================


def slavic_plural_category(n: int) -> PluralCategory:
    """
    Трёхформенная категория множественного числа.

    - n%10 == 1 и n%100 != 11 → singular (1, 21, 101)
    - n%10 ∈ [2,4] и n%100 ∉ [12,14] → few (2, 23, 104)
    - иначе → many (0, 5, 11, 12, 25)
    """
    last_digit = n % 10
    last_two = n % 100
    if last_digit == 1 and last_two != 11:
        return PluralCategory.SINGULAR
    if 2 <= last_digit <= 4 and not 12 <= last_two <= 14:
        return PluralCategory.FEW
    return PluralCategory.MANY


def select_plural_form(n: int, forms: PluralForms) -> str:
    """Форма scale-слова для количества n (например, тысяча/тысячи/тысяч)."""
    return forms.form_for(slavic_plural_category(n))
