"""
Numeric Normalizer — разбор входного значения в NumericValue

Принимает int (arbitrary precision), float, Decimal или str и возвращает
каноническое представление sign / integer_magnitude / fractional_digits.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целая и дробная части разделяются как строки ДО расширения в int,
   поэтому принятые цифры никогда не округляются
2. NaN/Inf никогда не проходят (NotFinite)
3. Пустая строка / строка из пробелов / научная нотация в строке → InvalidFormat
4. bool отвергается (InvalidType), хотя bool — подкласс int
5. Длина цифровой строки не ограничена пределом int/str интерпретатора
   (sys.get_int_max_str_digits): цифры переводятся в int блоками
"""

import math
import re
from decimal import Decimal
from typing import Final, Union

from src.core.domain.numeric import NumericValue, Sign
from src.core.errors import InvalidFormat, InvalidType, NotFinite

# Грамматика строкового ввода: ^\s*[+-]?\d+(\.\d+)?\s*$ (только ASCII-цифры)
NUMERIC_STRING_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<sign>[+-]?)(?P<integer>[0-9]+)(?:\.(?P<fraction>[0-9]+))?\s*$"
)

NumericInput = Union[int, float, Decimal, str]

# Длина блока при переводе длинной цифровой строки в int; меньше
# минимально допустимого sys.get_int_max_str_digits() (640)
DIGIT_CHUNK_SIZE: Final[int] = 600


def parse_numeric_value(value: NumericInput) -> NumericValue:
    """
    Нормализация входного значения.

    Args:
        value: int, float, Decimal или числовая строка

    Returns:
        NumericValue с разделёнными знаком, целой и дробной частями

    Raises:
        InvalidType: bool или неподдерживаемый тип
        NotFinite: NaN/±Infinity
        InvalidFormat: строка не соответствует грамматике

    Examples:
        >>> parse_numeric_value(-17.42)
        -17.42
        >>> parse_numeric_value("3.005")
        3.005
        >>> parse_numeric_value(10**30)
        1000000000000000000000000000000
    """
    if isinstance(value, bool):
        raise InvalidType("Invalid value type: expected number, string, or int, received bool")

    if isinstance(value, int):
        return _from_int(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise NotFinite("Number must be finite (NaN and Infinity are not supported)")
        if value.is_integer():
            # 17.0 → 17, -0.0 → 0
            return _from_int(int(value))
        return parse_numeric_string(float_to_plain_string(value))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise NotFinite("Decimal must be finite (NaN and Infinity are not supported)")
        return parse_numeric_string(format(value, "f"))

    if isinstance(value, str):
        return parse_numeric_string(value)

    raise InvalidType(
        f"Invalid value type: expected number, string, or int, received {type(value).__name__}"
    )


def parse_numeric_string(text: str) -> NumericValue:
    """
    Разбор строки по грамматике `[+-]?digits(.digits)?` с пробелами по краям.

    Raises:
        InvalidFormat: строка пустая, из одних пробелов или не по грамматике
    """
    match = NUMERIC_STRING_RE.match(text)
    if match is None:
        raise InvalidFormat(f'Invalid number format: "{text}"')

    sign = Sign.NEGATIVE if match.group("sign") == "-" else Sign.POSITIVE
    return NumericValue(
        sign=sign,
        integer_magnitude=digits_to_int(match.group("integer")),
        fractional_digits=match.group("fraction") or "",
    )


def float_to_plain_string(value: float) -> str:
    """
    Кратчайшее round-trip представление float без научной нотации.

    repr() даёт кратчайшую строку ('17.42', '1e+21', '5e-07'); Decimal
    раскрывает экспоненту точно, без двоичного шума.

    Examples:
        >>> float_to_plain_string(1e21)
        '1000000000000000000000'
        >>> float_to_plain_string(5e-07)
        '0.0000005'
    """
    return format(Decimal(repr(value)), "f")


def _from_int(value: int) -> NumericValue:
    if value < 0:
        return NumericValue(sign=Sign.NEGATIVE, integer_magnitude=-value)
    return NumericValue(sign=Sign.POSITIVE, integer_magnitude=value)


def digits_to_int(digits: str) -> int:
    """
    int(digits) для строки ASCII-цифр любой длины.

    int() отвергает строки длиннее sys.get_int_max_str_digits() (4300 по
    умолчанию), поэтому длинная строка переводится блоками.

    Examples:
        >>> digits_to_int("0042")
        42
        >>> digits_to_int("1" + "0" * 5000) == 10**5000
        True
    """
    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK_SIZE):
        chunk = digits[start : start + DIGIT_CHUNK_SIZE]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_ordinal_value(value: NumericInput) -> int:
    """
    Разбор значения для порядкового числительного: только целое > 0.

    Грамматика та же, что у parse_numeric_value; "5.0" отвергается,
    float 5.0 принимается (это целое число).

    Raises:
        InvalidType: bool или неподдерживаемый тип
        NotFinite: NaN/±Infinity
        InvalidFormat: не по грамматике, ноль, отрицательное или дробное

    Examples:
        >>> parse_ordinal_value("42")
        42
        >>> parse_ordinal_value(7.0)
        7
    """
    numeric = parse_numeric_value(value)
    if numeric.has_fraction:
        raise InvalidFormat("Ordinals must be whole numbers")
    if numeric.is_negative or numeric.integer_magnitude == 0:
        raise InvalidFormat("Ordinals must be positive integers")
    return numeric.integer_magnitude
