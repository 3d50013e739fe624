"""Babel-backed number formatter with an ICU NumberFormatter-style API.

IntlNumberFormatter is built once per (locale, style, pattern), configured
with numeric and text attributes, then reused to format many values.
Internally it holds a private copy of a Babel NumberPattern (either the
locale's CLDR pattern for the style or one parsed from the caller's pattern)
and edits its precision, grouping and affixes as attributes arrive.

Only the attributes a Babel pattern can express are supported; any other id
raises UnsupportedAttributeError rather than being silently ignored.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import copy
import logging
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from formatnumber.core.errors import IntlFormatterError, UnsupportedAttributeError
from formatnumber.enums import (
    NumberFormatAttribute,
    NumberFormatStyle,
    NumberFormatTextAttribute,
    RoundingMode,
)
from formatnumber.locale_utils import get_babel_locale, get_locale_currency, normalize_locale

if TYPE_CHECKING:
    from babel.numbers import NumberPattern

__all__ = ["IntlNumberFormatter"]

logger = logging.getLogger(__name__)

# Currency placeholder in CLDR number patterns
_CURRENCY_SIGN = "\xa4"

# Styles that take their pattern from CLDR data: style -> (Locale property, key)
_CLDR_PATTERNS: dict[NumberFormatStyle, tuple[str, str | None]] = {
    NumberFormatStyle.DECIMAL: ("decimal_formats", None),
    NumberFormatStyle.CURRENCY: ("currency_formats", "standard"),
    NumberFormatStyle.PERCENT: ("percent_formats", None),
    NumberFormatStyle.SCIENTIFIC: ("scientific_formats", None),
    NumberFormatStyle.CURRENCY_ACCOUNTING: ("currency_formats", "accounting"),
}


class IntlNumberFormatter:
    """Reusable locale number formatter.

    Examples:
        >>> fmt = IntlNumberFormatter("en_US", NumberFormatStyle.DECIMAL)
        >>> fmt.set_attribute(NumberFormatAttribute.FRACTION_DIGITS, 2)
        >>> fmt.format(1234.5)
        '1,234.50'

        >>> fmt = IntlNumberFormatter("de_DE", NumberFormatStyle.PATTERN_DECIMAL, "#,##0.0")
        >>> fmt.format(-1234.56)
        '-1.234,6'

    Raises:
        IntlFormatterError: On unknown locale, unsupported style, or a
            missing/invalid pattern
    """

    def __init__(
        self,
        locale_code: str,
        style: int = NumberFormatStyle.DEFAULT_STYLE,
        pattern: str | None = None,
    ) -> None:
        """Build the formatter.

        Args:
            locale_code: BCP-47 or POSIX locale code
            style: NumberFormatStyle id
            pattern: Number pattern, required by PATTERN_DECIMAL and
                ignored by the CLDR-backed styles
        """
        self.locale_code = normalize_locale(locale_code)
        self.style = style
        self.pattern = pattern
        try:
            self._locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            msg = f"Unknown locale '{locale_code}': {e}"
            raise IntlFormatterError(
                msg, locale_code=locale_code, style=style, pattern=pattern
            ) from e
        self._number_pattern = self._build_pattern()
        self._grouping_used = True
        self._multiplier = Decimal(1)
        self._rounding = ROUND_HALF_EVEN
        self._currency: str | None = None

    def _error(self, message: str) -> IntlFormatterError:
        return IntlFormatterError(
            message, locale_code=self.locale_code, style=self.style, pattern=self.pattern
        )

    def _build_pattern(self) -> NumberPattern:
        try:
            style = NumberFormatStyle(self.style)
        except ValueError as e:
            msg = f"Unknown number format style {self.style!r}"
            raise self._error(msg) from e

        if style is NumberFormatStyle.PATTERN_DECIMAL:
            if not self.pattern:
                msg = "PATTERN_DECIMAL style requires a pattern"
                raise self._error(msg)
            if not any(ch in self.pattern for ch in "0#@"):
                msg = f"Number pattern '{self.pattern}' has no digit placeholder"
                raise self._error(msg)
            try:
                return babel_numbers.parse_pattern(self.pattern)
            except ValueError as e:
                msg = f"Invalid number pattern '{self.pattern}': {e}"
                raise self._error(msg) from e

        if style not in _CLDR_PATTERNS:
            msg = f"Number format style {style.name} is not supported by Babel"
            raise self._error(msg)

        prop, key = _CLDR_PATTERNS[style]
        base = getattr(self._locale, prop).get(key)
        if base is None:
            msg = f"Locale '{self.locale_code}' has no {style.name} pattern"
            raise self._error(msg)
        # Locale data is shared; attributes edit a private copy
        return copy.copy(base)

    def set_attribute(self, attr: int, value: int | float) -> None:
        """Set a numeric attribute (NumberFormatAttribute id).

        Minimum and maximum fraction/integer digit counts stay ordered:
        raising a minimum above the maximum raises the maximum too, and
        vice versa.

        Raises:
            UnsupportedAttributeError: For ids Babel patterns cannot express
        """
        try:
            attribute = NumberFormatAttribute(attr)
        except ValueError:
            attribute = None

        pattern = self._number_pattern
        match attribute:
            case NumberFormatAttribute.GROUPING_USED:
                self._grouping_used = bool(value)
            case NumberFormatAttribute.MIN_INTEGER_DIGITS:
                digits = max(int(value), 0)
                pattern.int_prec = (digits, max(digits, pattern.int_prec[1]))
            case NumberFormatAttribute.INTEGER_DIGITS:
                digits = max(int(value), 0)
                pattern.int_prec = (digits, digits)
            case NumberFormatAttribute.MIN_FRACTION_DIGITS:
                digits = max(int(value), 0)
                pattern.frac_prec = (digits, max(digits, pattern.frac_prec[1]))
            case NumberFormatAttribute.MAX_FRACTION_DIGITS:
                digits = max(int(value), 0)
                pattern.frac_prec = (min(digits, pattern.frac_prec[0]), digits)
            case NumberFormatAttribute.FRACTION_DIGITS:
                digits = max(int(value), 0)
                pattern.frac_prec = (digits, digits)
            case NumberFormatAttribute.MULTIPLIER:
                self._multiplier = Decimal(str(value))
            case NumberFormatAttribute.GROUPING_SIZE:
                primary, secondary = pattern.grouping
                size = int(value)
                pattern.grouping = (size, size if secondary == primary else secondary)
            case NumberFormatAttribute.SECONDARY_GROUPING_SIZE:
                pattern.grouping = (pattern.grouping[0], int(value))
            case NumberFormatAttribute.ROUNDING_MODE:
                try:
                    self._rounding = RoundingMode(int(value)).decimal_rounding
                except ValueError as e:
                    msg = f"Unknown rounding mode {value!r}"
                    raise UnsupportedAttributeError(
                        msg, attribute=attr, locale_code=self.locale_code
                    ) from e
            case _:
                msg = f"Numeric attribute {attr!r} is not supported"
                raise UnsupportedAttributeError(msg, attribute=attr, locale_code=self.locale_code)

    def set_text_attribute(self, attr: int, value: str) -> None:
        """Set a text attribute (NumberFormatTextAttribute id).

        Raises:
            UnsupportedAttributeError: For ids Babel patterns cannot express
        """
        try:
            attribute = NumberFormatTextAttribute(attr)
        except ValueError:
            attribute = None

        pattern = self._number_pattern
        positive_prefix, negative_prefix = pattern.prefix
        positive_suffix, negative_suffix = pattern.suffix
        match attribute:
            case NumberFormatTextAttribute.POSITIVE_PREFIX:
                pattern.prefix = (value, negative_prefix)
            case NumberFormatTextAttribute.NEGATIVE_PREFIX:
                pattern.prefix = (positive_prefix, value)
            case NumberFormatTextAttribute.POSITIVE_SUFFIX:
                pattern.suffix = (value, negative_suffix)
            case NumberFormatTextAttribute.NEGATIVE_SUFFIX:
                pattern.suffix = (positive_suffix, value)
            case NumberFormatTextAttribute.CURRENCY_CODE:
                self._currency = value.upper()
            case _:
                msg = f"Text attribute {attr!r} is not supported"
                raise UnsupportedAttributeError(msg, attribute=attr, locale_code=self.locale_code)

    def _currency_code(self) -> str | None:
        affixes = "".join((*self._number_pattern.prefix, *self._number_pattern.suffix))
        if _CURRENCY_SIGN not in affixes:
            return None
        if self._currency is None:
            self._currency = get_locale_currency(self.locale_code)
            logger.debug("Currency for locale %s resolved to %s", self.locale_code, self._currency)
        return self._currency

    def format(self, value: int | float | Decimal) -> str:
        """Format value with the configured pattern and attributes.

        Raises:
            IntlFormatterError: If Babel rejects the value or currency
        """
        number = value if isinstance(value, Decimal) else Decimal(str(value))
        try:
            with localcontext() as ctx:
                ctx.rounding = self._rounding
                # quantize needs room for every digit once multiplier and pattern scale apply
                digits = (
                    number.adjusted()
                    + self._multiplier.adjusted()
                    + self._number_pattern.frac_prec[1]
                )
                ctx.prec = max(ctx.prec, digits + 6)
                if self._multiplier != 1:
                    number *= self._multiplier
                return str(
                    self._number_pattern.apply(
                        number,
                        self._locale,
                        currency=self._currency_code(),
                        currency_digits=False,
                        group_separator=self._grouping_used,
                    )
                )
        except (ValueError, TypeError, InvalidOperation, KeyError) as e:
            msg = f"Number formatting failed for '{value}': {e}"
            raise self._error(msg) from e
