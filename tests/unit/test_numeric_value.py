"""
Тесты для Numeric Normalizer — разбор входа в NumericValue

Проверяемые инварианты:
1. int любой разрядности принимается без потерь
2. Дробные цифры сохраняются как строка (ведущие/хвостовые нули)
3. NaN/Inf → NotFinite, bool и прочие типы → InvalidType
4. Строки вне грамматики → InvalidFormat (включая пустые и научную нотацию)
5. float без научной нотации в выводе (1e21, 5e-07)
6. Длина строки цифр не ограничена лимитом int() (4300)
7. Порядковые: только целые > 0, "5.0" отвергается
"""

from decimal import Decimal

import pytest

from src.core.domain.numeric import NumericValue, Sign
from src.core.errors import InvalidFormat, InvalidType, NotFinite, NumeralError
from src.core.math.numeric_value import (
    DIGIT_CHUNK_SIZE,
    digits_to_int,
    float_to_plain_string,
    parse_numeric_string,
    parse_numeric_value,
    parse_ordinal_value,
)


# =============================================================================
# ТЕСТЫ: int
# =============================================================================


class TestIntegers:
    """Целые числа произвольной разрядности."""

    def test_positive(self):
        value = parse_numeric_value(42)
        assert value.sign == Sign.POSITIVE
        assert value.integer_magnitude == 42
        assert value.fractional_digits == ""

    def test_negative(self):
        value = parse_numeric_value(-7)
        assert value.is_negative
        assert value.integer_magnitude == 7

    def test_zero(self):
        value = parse_numeric_value(0)
        assert value.is_zero
        assert not value.is_negative

    def test_beyond_64_bit(self):
        """Значения далеко за пределами int64 не округляются."""
        n = 10**63 + 123
        assert parse_numeric_value(n).integer_magnitude == n

    def test_bool_rejected(self):
        """bool — подкласс int, но не число для рендеринга."""
        with pytest.raises(InvalidType):
            parse_numeric_value(True)


# =============================================================================
# ТЕСТЫ: float / Decimal
# =============================================================================


class TestFloats:
    """Нативные числа с плавающей точкой."""

    def test_fraction_digits_kept(self):
        value = parse_numeric_value(-17.42)
        assert value.is_negative
        assert value.integer_magnitude == 17
        assert value.fractional_digits == "42"

    def test_integral_float_has_no_fraction(self):
        value = parse_numeric_value(17.0)
        assert value.integer_magnitude == 17
        assert not value.has_fraction

    def test_negative_zero_is_zero(self):
        value = parse_numeric_value(-0.0)
        assert value.is_zero
        assert not value.is_negative

    def test_small_float_leading_zeros(self):
        assert parse_numeric_value(0.007).fractional_digits == "007"

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, bad):
        with pytest.raises(NotFinite):
            parse_numeric_value(bad)

    def test_plain_string_expands_exponent(self):
        assert float_to_plain_string(1e21) == "1000000000000000000000"
        assert float_to_plain_string(5e-07) == "0.0000005"

    def test_large_integral_float(self):
        assert parse_numeric_value(1e21).integer_magnitude == 10**21


class TestDecimals:
    """decimal.Decimal принимается как нативное число."""

    def test_exact_digits(self):
        value = parse_numeric_value(Decimal("3.0050"))
        assert value.integer_magnitude == 3
        assert value.fractional_digits == "0050"

    def test_exponent_expanded(self):
        assert parse_numeric_value(Decimal("1E+3")).integer_magnitude == 1000

    def test_nan_rejected(self):
        with pytest.raises(NotFinite):
            parse_numeric_value(Decimal("NaN"))


# =============================================================================
# ТЕСТЫ: str
# =============================================================================


class TestStrings:
    """Грамматика ^\\s*[+-]?\\d+(\\.\\d+)?\\s*$."""

    def test_fraction_leading_zeros(self):
        value = parse_numeric_value("3.005")
        assert value.integer_magnitude == 3
        assert value.fractional_digits == "005"

    def test_trailing_zeros_kept(self):
        assert parse_numeric_value("1.50").fractional_digits == "50"

    def test_whitespace_and_sign(self):
        value = parse_numeric_value("  -12  ")
        assert value.is_negative
        assert value.integer_magnitude == 12

    def test_plus_sign(self):
        assert parse_numeric_value("+5").sign == Sign.POSITIVE

    def test_integer_leading_zeros_collapse(self):
        assert parse_numeric_value("007").integer_magnitude == 7

    def test_long_digit_string(self):
        text = "9" * 300
        assert parse_numeric_value(text).integer_magnitude == int(text)

    def test_beyond_int_digit_limit(self):
        """Больше 4300 цифр: int() отверг бы такую строку."""
        assert parse_numeric_value("1" + "0" * 5000).integer_magnitude == 10**5000
        assert parse_numeric_value("-" + "9" * 5000).integer_magnitude == 10**5000 - 1

    def test_long_fraction_kept_as_digits(self):
        value = parse_numeric_value("0." + "3" * 5000)
        assert value.fractional_digits == "3" * 5000

    @pytest.mark.parametrize(
        "bad",
        ["", "   ", "abc", "1e5", "1.", ".5", "1.2.3", "--1", "1 000", "١٢", "0x10"],
    )
    def test_invalid_format(self, bad):
        with pytest.raises(InvalidFormat):
            parse_numeric_string(bad)

    def test_error_message_contains_input(self):
        with pytest.raises(InvalidFormat, match="abc"):
            parse_numeric_value("abc")


class TestInvalidTypes:
    """Неподдерживаемые типы."""

    @pytest.mark.parametrize("bad", [None, [1], {"a": 1}, object(), b"12", 1 + 2j])
    def test_rejected(self, bad):
        with pytest.raises(InvalidType):
            parse_numeric_value(bad)

    def test_errors_share_base_class(self):
        """Все ошибки ловятся как NumeralError и как встроенные исключения."""
        with pytest.raises(NumeralError):
            parse_numeric_value(None)
        with pytest.raises(TypeError):
            parse_numeric_value(None)
        with pytest.raises(ValueError):
            parse_numeric_value("x")


class TestNumericValueModel:
    """Инварианты модели NumericValue."""

    def test_repr(self):
        value = NumericValue(sign=Sign.NEGATIVE, integer_magnitude=17, fractional_digits="42")
        assert repr(value) == "-17.42"

    def test_negative_magnitude_rejected(self):
        with pytest.raises(ValueError):
            NumericValue(integer_magnitude=-1)

    def test_non_digit_fraction_rejected(self):
        with pytest.raises(ValueError):
            NumericValue(integer_magnitude=1, fractional_digits="4a")

    def test_frozen(self):
        value = NumericValue(integer_magnitude=1)
        with pytest.raises(ValueError):
            value.integer_magnitude = 2


# =============================================================================
# ТЕСТЫ: DIGIT STRINGS / ORDINAL VALUES
# =============================================================================


class TestDigitsToInt:
    """digits_to_int() — строка цифр без ограничения длины."""

    @pytest.mark.parametrize("digits", ["0", "0042", "9" * DIGIT_CHUNK_SIZE, "1" * (DIGIT_CHUNK_SIZE + 1)])
    def test_matches_int(self, digits):
        assert digits_to_int(digits) == int(digits)

    def test_power_of_ten(self):
        assert digits_to_int("1" + "0" * 5000) == 10**5000

    def test_chunk_boundaries(self):
        digits = "12345" * 1000
        expected = sum(int(d) * 10**i for i, d in enumerate(reversed(digits)))
        assert digits_to_int(digits) == expected


class TestOrdinalValue:
    """parse_ordinal_value() — только целые > 0."""

    @pytest.mark.parametrize("value, expected", [(1, 1), ("42", 42), (7.0, 7), (Decimal("12"), 12), (" +3 ", 3)])
    def test_accepted(self, value, expected):
        assert parse_ordinal_value(value) == expected

    @pytest.mark.parametrize("bad", [0, "0", -1, "-5", 1.5, "5.0", "0.0"])
    def test_rejected(self, bad):
        with pytest.raises(InvalidFormat):
            parse_ordinal_value(bad)

    def test_type_errors_propagate(self):
        with pytest.raises(InvalidType):
            parse_ordinal_value(True)
        with pytest.raises(NotFinite):
            parse_ordinal_value(float("inf"))
