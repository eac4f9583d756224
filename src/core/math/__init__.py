"""
Core math modules для numwords

Нормализация входных чисел и чистые функции сегментации цифр.
"""

# Numeric Normalizer
from src.core.math.numeric_value import (
    NUMERIC_STRING_RE,
    NumericInput,
    float_to_plain_string,
    parse_numeric_string,
    parse_numeric_value,
)

# Segmentation Utilities
from src.core.math.segments import (
    Segment,
    group_by_three_then_twos,
    group_by_threes,
    place_values,
    segment_by_three_then_twos,
    segment_by_threes,
    select_plural_form,
    slavic_plural_category,
)

__all__ = [
    # Numeric Normalizer
    "NUMERIC_STRING_RE",
    "NumericInput",
    "float_to_plain_string",
    "parse_numeric_string",
    "parse_numeric_value",
    # Segmentation: Types
    "Segment",
    # Segmentation: Grouping
    "group_by_three_then_twos",
    "group_by_threes",
    "place_values",
    "segment_by_three_then_twos",
    "segment_by_threes",
    # Segmentation: Pluralization
    "select_plural_form",
    "slavic_plural_category",
]
