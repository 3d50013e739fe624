"""Tests for runtime/intl.py - Babel-backed IntlNumberFormatter.

Expected strings follow CLDR data as shipped with Babel for en_US and de_DE.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from formatnumber.core.errors import IntlFormatterError, UnsupportedAttributeError
from formatnumber.enums import (
    NumberFormatAttribute,
    NumberFormatStyle,
    NumberFormatTextAttribute,
    RoundingMode,
)
from formatnumber.runtime.intl import IntlNumberFormatter
from tests.strategies.numbers import SAMPLE_LOCALES, finite_numbers

A = NumberFormatAttribute
T = NumberFormatTextAttribute


def _formatter(
    locale_code: str = "en_US",
    style: int = NumberFormatStyle.DECIMAL,
    pattern: str | None = None,
    fraction_digits: int | None = 2,
) -> IntlNumberFormatter:
    fmt = IntlNumberFormatter(locale_code, style, pattern)
    if fraction_digits is not None:
        fmt.set_attribute(A.FRACTION_DIGITS, fraction_digits)
    return fmt


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Test formatter construction and its failure modes."""

    def test_decimal_style(self) -> None:
        """DECIMAL style uses the locale decimal pattern."""
        assert _formatter().format(1234.5) == "1,234.50"

    def test_default_style_is_decimal(self) -> None:
        """DEFAULT_STYLE is an alias of DECIMAL."""
        assert NumberFormatStyle.DEFAULT_STYLE is NumberFormatStyle.DECIMAL
        fmt = IntlNumberFormatter("en_US")
        assert fmt.format(1234.5) == "1,234.5"

    def test_locale_code_normalized(self) -> None:
        """BCP-47 codes are accepted and stored in POSIX form."""
        fmt = _formatter("de-DE")
        assert fmt.locale_code == "de_DE"
        assert fmt.format(1234.5) == "1.234,50"

    def test_raw_integer_style(self) -> None:
        """Plain integers are accepted as style ids."""
        assert _formatter(style=1).format(7) == "7.00"

    def test_unknown_locale_raises(self) -> None:
        """Unknown locales raise IntlFormatterError with context."""
        with pytest.raises(IntlFormatterError, match="Unknown locale") as exc_info:
            IntlNumberFormatter("xx_XX", NumberFormatStyle.DECIMAL)
        assert exc_info.value.locale_code == "xx_XX"
        assert exc_info.value.__cause__ is not None

    def test_malformed_locale_raises(self) -> None:
        """Malformed locale codes raise IntlFormatterError."""
        with pytest.raises(IntlFormatterError):
            IntlNumberFormatter("not a locale!", NumberFormatStyle.DECIMAL)

    def test_unknown_style_raises(self) -> None:
        """Style ids outside UNumberFormatStyle raise."""
        with pytest.raises(IntlFormatterError, match="Unknown number format style") as exc_info:
            IntlNumberFormatter("en_US", 99)
        assert exc_info.value.style == 99

    @pytest.mark.parametrize(
        "style",
        [
            NumberFormatStyle.SPELLOUT,
            NumberFormatStyle.ORDINAL,
            NumberFormatStyle.DURATION,
            NumberFormatStyle.PATTERN_RULEBASED,
        ],
    )
    def test_rule_based_styles_unsupported(self, style: NumberFormatStyle) -> None:
        """Rule-based styles have no Babel equivalent."""
        with pytest.raises(IntlFormatterError, match="not supported by Babel"):
            IntlNumberFormatter("en_US", style)

    def test_pattern_style_requires_pattern(self) -> None:
        """PATTERN_DECIMAL without a pattern raises."""
        with pytest.raises(IntlFormatterError, match="requires a pattern"):
            IntlNumberFormatter("en_US", NumberFormatStyle.PATTERN_DECIMAL)

    def test_pattern_without_digits_raises(self) -> None:
        """Patterns with no digit placeholder raise."""
        with pytest.raises(IntlFormatterError, match="no digit placeholder") as exc_info:
            IntlNumberFormatter("en_US", NumberFormatStyle.PATTERN_DECIMAL, "abc")
        assert exc_info.value.pattern == "abc"

    def test_cldr_pattern_not_shared(self) -> None:
        """Attributes on one formatter do not leak into another."""
        first = _formatter(fraction_digits=4)
        second = IntlNumberFormatter("en_US", NumberFormatStyle.DECIMAL)
        assert first.format(1.5) == "1.5000"
        assert second.format(1.5) == "1.5"


# ============================================================================
# Styles
# ============================================================================


class TestStyles:
    """Test the CLDR-backed styles."""

    def test_percent(self) -> None:
        """PERCENT scales by 100 and appends the percent sign."""
        assert _formatter(style=NumberFormatStyle.PERCENT, fraction_digits=0).format(0.256) == "26%"
        assert _formatter(style=NumberFormatStyle.PERCENT).format(0.256) == "25.60%"

    def test_currency_uses_territory_currency(self) -> None:
        """CURRENCY picks the locale territory's currency."""
        fmt = _formatter(style=NumberFormatStyle.CURRENCY)
        assert fmt.format(1234.5) == "$1,234.50"
        assert fmt.format(-1234.5) == "-$1,234.50"

    def test_currency_de_de(self) -> None:
        """de_DE currency follows the value with a no-break space."""
        fmt = _formatter("de_DE", NumberFormatStyle.CURRENCY)
        assert fmt.format(1234.5) == "1.234,50\xa0€"

    def test_currency_code_text_attribute(self) -> None:
        """CURRENCY_CODE overrides the territory currency."""
        fmt = _formatter(style=NumberFormatStyle.CURRENCY)
        fmt.set_text_attribute(T.CURRENCY_CODE, "eur")
        assert fmt.format(5) == "€5.00"

    def test_currency_digits_follow_attributes(self) -> None:
        """Fraction digit attributes win over the currency's minor unit."""
        fmt = _formatter(style=NumberFormatStyle.CURRENCY, fraction_digits=0)
        assert fmt.format(1234.5) == "$1,234"

    def test_accounting_parenthesizes_negatives(self) -> None:
        """CURRENCY_ACCOUNTING wraps negatives in parentheses."""
        fmt = _formatter(style=NumberFormatStyle.CURRENCY_ACCOUNTING)
        assert fmt.format(-5) == "($5.00)"

    def test_scientific(self) -> None:
        """SCIENTIFIC renders an exponent."""
        result = IntlNumberFormatter("en_US", NumberFormatStyle.SCIENTIFIC).format(1234)
        assert "E" in result

    def test_pattern_decimal(self) -> None:
        """PATTERN_DECIMAL applies the caller's pattern."""
        fmt = _formatter(
            style=NumberFormatStyle.PATTERN_DECIMAL, pattern="#,##0.00;(#,##0.00)"
        )
        assert fmt.format(-1234.56) == "(1,234.56)"
        assert fmt.format(1234.56) == "1,234.56"

    def test_pattern_decimal_uses_locale_symbols(self) -> None:
        """Pattern symbols are localized."""
        fmt = IntlNumberFormatter("de_DE", NumberFormatStyle.PATTERN_DECIMAL, "#,##0.0")
        assert fmt.format(-1234.56) == "-1.234,6"

    def test_pattern_with_currency_sign(self) -> None:
        """A currency sign in a custom pattern gets the locale currency."""
        fmt = _formatter(style=NumberFormatStyle.PATTERN_DECIMAL, pattern="#,##0.00 \xa4")
        assert fmt.format(3) == "3.00 $"

    def test_decimal_input(self) -> None:
        """Decimal values are formatted without float conversion."""
        assert _formatter().format(Decimal("0.125")) == "0.12"


# ============================================================================
# Numeric attributes
# ============================================================================


class TestNumericAttributes:
    """Test set_attribute()."""

    def test_min_fraction_raises_max(self) -> None:
        """MIN_FRACTION_DIGITS above the maximum raises the maximum."""
        fmt = IntlNumberFormatter("en_US", NumberFormatStyle.DECIMAL)
        fmt.set_attribute(A.MIN_FRACTION_DIGITS, 5)
        assert fmt.format(1.5) == "1.50000"

    def test_max_fraction_lowers_min(self) -> None:
        """MAX_FRACTION_DIGITS below the minimum lowers the minimum."""
        fmt = _formatter(fraction_digits=3)
        fmt.set_attribute(A.MAX_FRACTION_DIGITS, 1)
        assert fmt.format(1.25) == "1.2"

    def test_grouping_used_off(self) -> None:
        """GROUPING_USED=0 drops the group separator."""
        fmt = _formatter()
        fmt.set_attribute(A.GROUPING_USED, 0)
        assert fmt.format(1234567) == "1234567.00"

    def test_min_integer_digits(self) -> None:
        """MIN_INTEGER_DIGITS pads with leading zeros."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.MIN_INTEGER_DIGITS, 3)
        assert fmt.format(5) == "005"

    def test_integer_digits(self) -> None:
        """INTEGER_DIGITS sets the minimum integer digits."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.INTEGER_DIGITS, 2)
        assert fmt.format(7) == "07"

    def test_multiplier(self) -> None:
        """MULTIPLIER scales the value before formatting."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.MULTIPLIER, 100)
        assert fmt.format(1.5) == "150"

    def test_multiplier_keeps_wide_values_exact(self) -> None:
        """Scaling a 30-digit integer loses no digits."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.MULTIPLIER, 1000)
        result = fmt.format(123456789012345678901234567890)
        assert result == "123,456,789,012,345,678,901,234,567,890,000"

    def test_percent_scale_on_wide_values(self) -> None:
        """The percent scale adds digits without overflowing the context."""
        fmt = _formatter(style=NumberFormatStyle.PERCENT, fraction_digits=2)
        assert fmt.format(10**30) == "100" + ",000" * 10 + ".00%"

    def test_grouping_size(self) -> None:
        """GROUPING_SIZE changes the group width."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.GROUPING_SIZE, 4)
        assert fmt.format(12345678) == "1234,5678"

    def test_secondary_grouping_size(self) -> None:
        """SECONDARY_GROUPING_SIZE changes all groups but the last."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.SECONDARY_GROUPING_SIZE, 2)
        assert fmt.format(12345678) == "1,23,45,678"

    def test_default_rounding_is_half_even(self) -> None:
        """Babel rounds halves to even by default."""
        fmt = _formatter(fraction_digits=0)
        assert fmt.format(2.5) == "2"
        assert fmt.format(3.5) == "4"

    def test_rounding_mode_half_up(self) -> None:
        """ROUNDING_MODE switches the decimal rounding."""
        fmt = _formatter(fraction_digits=0)
        fmt.set_attribute(A.ROUNDING_MODE, RoundingMode.ROUND_HALFUP)
        assert fmt.format(2.5) == "3"

    def test_rounding_mode_floor(self) -> None:
        """ROUND_FLOOR truncates toward negative infinity."""
        fmt = _formatter(fraction_digits=1)
        fmt.set_attribute(A.ROUNDING_MODE, RoundingMode.ROUND_FLOOR)
        assert fmt.format(1.29) == "1.2"

    def test_unknown_rounding_mode_raises(self) -> None:
        """Rounding mode ids outside UNumberFormatRoundingMode raise."""
        fmt = _formatter()
        with pytest.raises(UnsupportedAttributeError, match="rounding mode") as exc_info:
            fmt.set_attribute(A.ROUNDING_MODE, 42)
        assert exc_info.value.attribute == A.ROUNDING_MODE

    @pytest.mark.parametrize(
        "attribute",
        [A.SIGNIFICANT_DIGITS_USED, A.MAX_SIGNIFICANT_DIGITS, A.PADDING_POSITION, 999],
    )
    def test_unsupported_attribute_raises(self, attribute: int) -> None:
        """Attributes Babel cannot express raise instead of being ignored."""
        fmt = _formatter()
        with pytest.raises(UnsupportedAttributeError) as exc_info:
            fmt.set_attribute(attribute, 1)
        assert exc_info.value.attribute == attribute
        assert exc_info.value.locale_code == "en_US"

    def test_unsupported_attribute_is_intl_error(self) -> None:
        """UnsupportedAttributeError is an IntlFormatterError."""
        assert issubclass(UnsupportedAttributeError, IntlFormatterError)


# ============================================================================
# Text attributes
# ============================================================================


class TestTextAttributes:
    """Test set_text_attribute()."""

    def test_positive_prefix(self) -> None:
        """POSITIVE_PREFIX replaces the positive prefix only."""
        fmt = _formatter()
        fmt.set_text_attribute(T.POSITIVE_PREFIX, "+")
        assert fmt.format(5) == "+5.00"
        assert fmt.format(-5) == "-5.00"

    def test_negative_suffix(self) -> None:
        """NEGATIVE_PREFIX/SUFFIX move the sign behind the value."""
        fmt = _formatter()
        fmt.set_text_attribute(T.NEGATIVE_PREFIX, "")
        fmt.set_text_attribute(T.NEGATIVE_SUFFIX, "-")
        assert fmt.format(-5) == "5.00-"

    def test_positive_suffix(self) -> None:
        """POSITIVE_SUFFIX appends to positive values."""
        fmt = _formatter()
        fmt.set_text_attribute(T.POSITIVE_SUFFIX, " pcs")
        assert fmt.format(3) == "3.00 pcs"

    @pytest.mark.parametrize("attribute", [T.PADDING_CHARACTER, T.DEFAULT_RULESET, 42])
    def test_unsupported_text_attribute_raises(self, attribute: int) -> None:
        """Text attributes Babel cannot express raise."""
        fmt = _formatter()
        with pytest.raises(UnsupportedAttributeError):
            fmt.set_text_attribute(attribute, "*")


# ============================================================================
# Properties across locales
# ============================================================================


class TestLocaleProperties:
    """Properties that hold for every sample locale."""

    @given(locale_code=st.sampled_from(SAMPLE_LOCALES), value=st.integers(0, 999))
    @settings(deadline=None)
    def test_small_integers_render_as_digits(self, locale_code: str, value: int) -> None:
        """Property: ungrouped integers render as their plain digits."""
        event(f"locale={locale_code}")
        assert IntlNumberFormatter(locale_code).format(value) == str(value)

    @given(locale_code=st.sampled_from(SAMPLE_LOCALES), value=st.integers(1, 10**9))
    @settings(deadline=None)
    def test_negative_differs_from_positive(self, locale_code: str, value: int) -> None:
        """Property: negation always changes the rendered text."""
        fmt = IntlNumberFormatter(locale_code)
        assert fmt.format(-value) != fmt.format(value)

    @pytest.mark.fuzz
    @given(
        locale_code=st.sampled_from(SAMPLE_LOCALES),
        style=st.sampled_from(
            [
                NumberFormatStyle.DECIMAL,
                NumberFormatStyle.CURRENCY,
                NumberFormatStyle.PERCENT,
                NumberFormatStyle.SCIENTIFIC,
                NumberFormatStyle.CURRENCY_ACCOUNTING,
            ]
        ),
        value=finite_numbers(),
        digits=st.integers(0, 6),
    )
    @settings(max_examples=2000, deadline=None)
    def test_cldr_styles_never_fail(
        self, locale_code: str, style: int, value: int | float | Decimal, digits: int
    ) -> None:
        """Fuzz: every CLDR style formats every finite number."""
        event(f"style={NumberFormatStyle(style).name}")
        fmt = IntlNumberFormatter(locale_code, style)
        fmt.set_attribute(A.FRACTION_DIGITS, digits)
        assert fmt.format(value)
