"""NumberFormatter: locale-aware number formatting for view templates.

Formats a value either with Babel (CLDR patterns, ICU-style attributes) or
with the locale-conventions fallback, depending on the configuration's
intl_formatting flag. Arguments left out of a format() call are taken from
the formatter's FormatterConfig.

Architecture:
    - FormatterConfig: immutable defaults, swapped by the set_* methods
    - IntlNumberFormatter: one instance per distinct construction key,
      memoized for the lifetime of the NumberFormatter
    - format_fallback(): pure function over LocaleConventions

Thread Safety:
    format() only mutates the formatter-instance cache. Concurrent cache
    misses may build equivalent formatters twice; the last one stored wins.
    Calls to set_* methods must be synchronized by the caller.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeAlias

from formatnumber.constants import DEFAULT_DECIMALS_COUNT, FALLBACK_DECIMAL_POINT
from formatnumber.enums import NumberFormatAttribute, NumberFormatStyle
from formatnumber.locale_utils import normalize_locale

from .config import FormatterConfig
from .conventions import (
    LocaleConventions,
    load_system_conventions,
    resolve_conventions,
)
from .fallback import format_fallback
from .intl import IntlNumberFormatter

__all__ = ["NumberFormatter", "coerce_number"]

logger = logging.getLogger(__name__)

# Optional surrounding whitespace, sign, digits with optional fraction, exponent.
# ASCII digits only. Hex, "inf", "nan" and digit separators are not numeric.
_NUMERIC_STRING = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII
)

Number: TypeAlias = int | float | Decimal

# (locale, style, pattern, numeric attributes in order, sorted text attributes)
IntlCacheKey: TypeAlias = tuple[
    str,
    int,
    str | None,
    tuple[tuple[int, int | float], ...],
    tuple[tuple[int, str], ...],
]


def coerce_number(value: object) -> Number | None:
    """Return value as a number, or None if it is not numeric.

    Numbers pass through unchanged (bool is not a number here). Numeric
    strings become float. Other real number types become float.

    Examples:
        >>> coerce_number(" 12.5 ")
        12.5
        >>> coerce_number("1e3")
        1000.0
        >>> coerce_number("12 500") is None
        True
        >>> coerce_number(True) is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | Decimal):
        return value
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str) and _NUMERIC_STRING.fullmatch(value):
        return float(value)
    return None


def _conventions_from(
    conventions: LocaleConventions | Mapping[str, Any],
    defaults: LocaleConventions | None = None,
) -> LocaleConventions:
    if isinstance(conventions, LocaleConventions):
        return conventions
    return LocaleConventions.from_mapping(conventions, defaults)


class NumberFormatter:
    """Format numbers by explicit arguments or by configured defaults.

    Two formatting paths share one entry point:

    1. Babel (intl_formatting=True): style, pattern and attributes describe
       an IntlNumberFormatter. Minimum and maximum fraction digits default
       to the decimals count unless the attributes set them.
    2. Fallback (intl_formatting=False): fixed-point formatting with the
       given (or locale) decimal point and thousands separator, signs placed
       by the locale conventions.

    Examples:
        >>> fmt = NumberFormatter()
        >>> fmt.format(1234.5)
        '1,234.50'
        >>> fmt.set_locale("de_DE").format(1234.5, 1)
        '1.234,5'

        >>> fmt = NumberFormatter(FormatterConfig(intl_formatting=False))
        >>> fmt.set_locale_conventions({"n_sign_posn": 2}).format(-42, 0)
        '42-'

        >>> fmt.format("n/a")
        'n/a'
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        """Create a formatter.

        Args:
            config: Initial defaults (default: FormatterConfig())
        """
        self._config = config if config is not None else FormatterConfig()
        self._conventions: LocaleConventions | None = None
        self._intl_formatters: dict[IntlCacheKey, IntlNumberFormatter] = {}

    @property
    def config(self) -> FormatterConfig:
        """Current immutable configuration."""
        return self._config

    @property
    def locale_conventions(self) -> LocaleConventions:
        """Effective conventions for the fallback path.

        Resolved on first access from the configured conventions, or from
        the system locale when none were set. Unusable data is replaced by
        the default conventions and a falsy n_sign_posn becomes 3.
        """
        if self._conventions is None:
            source = self._config.locale_conventions
            if source is None:
                source = load_system_conventions()
            self._conventions = resolve_conventions(
                source, self._config.default_locale_conventions
            )
        return self._conventions

    def _replace(self, **changes: Any) -> NumberFormatter:
        self._config = self._config.replace(**changes)
        return self

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_default_decimals_count(
        self, decimals_count: int = DEFAULT_DECIMALS_COUNT
    ) -> NumberFormatter:
        """Set digits after the decimal point used when a call gives none."""
        return self._replace(decimals_count=decimals_count)

    def set_default_style(self, style: int = NumberFormatStyle.DEFAULT_STYLE) -> NumberFormatter:
        """Set the default NumberFormatStyle for the Babel path."""
        return self._replace(style=style)

    def set_default_pattern(self, pattern: str | None = None) -> NumberFormatter:
        """Set the default pattern for PATTERN_DECIMAL style."""
        return self._replace(pattern=pattern)

    def set_default_attributes(
        self, attributes: Mapping[int, int | float] | None = None
    ) -> NumberFormatter:
        """Set default numeric attributes (NumberFormatAttribute id -> value)."""
        return self._replace(attributes=attributes or {})

    def set_default_text_attributes(
        self, text_attributes: Mapping[int, str] | None = None
    ) -> NumberFormatter:
        """Set default text attributes (NumberFormatTextAttribute id -> value)."""
        return self._replace(text_attributes=text_attributes or {})

    def set_locale_conventions(
        self, conventions: LocaleConventions | Mapping[str, Any]
    ) -> NumberFormatter:
        """Use these conventions instead of the system locale ones.

        A mapping is read like a localeconv() result; missing keys take the
        values of the configured default conventions.
        """
        self._conventions = None
        defaults = self._config.default_locale_conventions
        return self._replace(locale_conventions=_conventions_from(conventions, defaults))

    def set_default_locale_conventions(
        self, conventions: LocaleConventions | Mapping[str, Any]
    ) -> NumberFormatter:
        """Set conventions substituted for missing or unusable locale data."""
        self._conventions = None
        return self._replace(default_locale_conventions=_conventions_from(conventions))

    def set_locale(self, locale_code: str) -> NumberFormatter:
        """Set the locale of the Babel path (BCP-47 or POSIX code)."""
        return self._replace(locale_code=locale_code)

    def set_intl_formatting(self, enabled: bool = True) -> NumberFormatter:
        """Choose the Babel path (True) or the fallback path (False)."""
        return self._replace(intl_formatting=enabled)

    # ------------------------------------------------------------------
    # Formatter cache
    # ------------------------------------------------------------------

    def cache_size(self) -> int:
        """Number of memoized IntlNumberFormatter instances."""
        return len(self._intl_formatters)

    def clear_cache(self) -> None:
        """Drop all memoized IntlNumberFormatter instances."""
        self._intl_formatters.clear()

    def _get_intl_formatter(
        self,
        locale_code: str,
        style: int,
        pattern: str | None,
        attributes: Mapping[int, int | float],
        text_attributes: Mapping[int, str],
    ) -> IntlNumberFormatter:
        # Numeric attributes apply in insertion order (a later min/max fraction
        # setting clamps an earlier one), so the key keeps that order
        key: IntlCacheKey = (
            normalize_locale(locale_code),
            style,
            pattern,
            tuple((int(attr), value) for attr, value in attributes.items()),
            tuple(sorted((int(attr), value) for attr, value in text_attributes.items())),
        )
        formatter = self._intl_formatters.get(key)
        if formatter is None:
            logger.debug(
                "Creating number formatter: locale=%s style=%s pattern=%r",
                key[0],
                style,
                pattern,
            )
            formatter = IntlNumberFormatter(locale_code, style, pattern)
            for attr, value in key[3]:
                formatter.set_attribute(attr, value)
            for attr, text in key[4]:
                formatter.set_text_attribute(attr, text)
            self._intl_formatters[key] = formatter
        return formatter

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(
        self,
        value: object,
        decimals_count: int | None = None,
        style_or_decimal_point: int | str | None = None,
        pattern_or_thousands_sep: str | None = None,
        attributes: Mapping[int, int | float] | None = None,
        text_attributes: Mapping[int, str] | None = None,
    ) -> str:
        """Format value by the given arguments or by configured defaults.

        Args:
            value: Number or numeric string to format. Anything else is
                returned as its string form (None as "").
            decimals_count: Digits after the decimal point
            style_or_decimal_point: NumberFormatStyle id (Babel path) or
                decimal point (fallback path)
            pattern_or_thousands_sep: Number pattern (Babel path) or
                thousands separator (fallback path)
            attributes: Numeric attributes (Babel path only)
            text_attributes: Text attributes (Babel path only)

        Returns:
            Formatted string

        Raises:
            IntlFormatterError: If Babel cannot build or apply the formatter
        """
        number = coerce_number(value)
        if number is None:
            return "" if value is None else str(value)

        config = self._config
        if config.intl_formatting:
            return self._format_intl(
                config,
                number,
                decimals_count,
                style_or_decimal_point,
                pattern_or_thousands_sep,
                attributes,
                text_attributes,
            )
        return self._format_fallback(
            config, number, decimals_count, style_or_decimal_point, pattern_or_thousands_sep
        )

    def format_number(
        self,
        value: Number,
        decimals_count: int | None = None,
        style_or_decimal_point: int | str | None = None,
        pattern_or_thousands_sep: str | None = None,
        attributes: Mapping[int, int | float] | None = None,
        text_attributes: Mapping[int, str] | None = None,
    ) -> str:
        """Like format(), but only for real numbers.

        Raises:
            TypeError: If value is not a real number
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real | Decimal):
            msg = f"format_number() expects a real number, got {type(value).__name__}"
            raise TypeError(msg)
        return self.format(
            value,
            decimals_count,
            style_or_decimal_point,
            pattern_or_thousands_sep,
            attributes,
            text_attributes,
        )

    def _format_intl(
        self,
        config: FormatterConfig,
        number: Number,
        decimals_count: int | None,
        style: int | str | None,
        pattern: str | None,
        attributes: Mapping[int, int | float] | None,
        text_attributes: Mapping[int, str] | None,
    ) -> str:
        if decimals_count is None:
            decimals_count = config.decimals_count
        merged = dict(attributes if attributes is not None else config.attributes)
        merged.setdefault(NumberFormatAttribute.MIN_FRACTION_DIGITS, decimals_count)
        merged.setdefault(NumberFormatAttribute.MAX_FRACTION_DIGITS, decimals_count)
        formatter = self._get_intl_formatter(
            config.locale_code,
            style if style is not None else config.style,  # type: ignore[arg-type]
            pattern if pattern is not None else config.pattern,
            merged,
            text_attributes if text_attributes is not None else config.text_attributes,
        )
        return formatter.format(number)

    def _format_fallback(
        self,
        config: FormatterConfig,
        number: Number,
        decimals_count: int | None,
        decimal_point: int | str | None,
        thousands_sep: str | None,
    ) -> str:
        conventions = self.locale_conventions
        if decimals_count is None:
            decimals_count = config.decimals_count
        if decimal_point is None:
            decimal_point = conventions.decimal_point or FALLBACK_DECIMAL_POINT
        if thousands_sep is None:
            thousands_sep = conventions.thousands_sep
        return format_fallback(
            number, decimals_count, str(decimal_point), thousands_sep, conventions
        )
