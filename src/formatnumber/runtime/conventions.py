"""Locale formatting conventions for the fallback formatter.

LocaleConventions mirrors the numeric and monetary fields of POSIX
localeconv(). The fallback formatter only reads separators and the sign
placement fields; the currency fields travel along so a conventions object
round-trips a localeconv() snapshot without losing data.

Sources:
    - load_system_conventions(): snapshot of the process locale (locale module)
    - conventions_from_locale(): CLDR symbols for a named locale (Babel)
    - DEFAULT_LOCALE_CONVENTIONS: built-in en_US table

resolve_conventions() turns any of them into the effective conventions:
unusable data (None, or frac_digits == CHAR_MAX) is replaced by the default
table, and a falsy n_sign_posn is normalized so negatives are never
parenthesized by default.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import dataclasses
import locale
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from formatnumber.constants import (
    CHAR_MAX,
    FALLBACK_DECIMAL_POINT,
    FALLBACK_THOUSANDS_SEP,
    NORMALIZED_SIGN_POSITION,
)
from formatnumber.locale_utils import get_babel_locale, get_locale_currency

__all__ = [
    "DEFAULT_LOCALE_CONVENTIONS",
    "LocaleConventions",
    "conventions_from_locale",
    "load_system_conventions",
    "resolve_conventions",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleConventions:
    """Immutable snapshot of localeconv()-style formatting conventions.

    Field defaults form the built-in en_US table.

    Sign position values (p_sign_posn, n_sign_posn):
        0: parentheses around value and currency symbol
        1: sign before value and currency symbol
        2: sign after value and currency symbol
        3: sign immediately before currency symbol
        4: sign immediately after currency symbol

    Example:
        >>> conv = LocaleConventions.from_mapping({"decimal_point": ","})
        >>> conv.decimal_point, conv.thousands_sep
        (',', ',')
    """

    decimal_point: str = FALLBACK_DECIMAL_POINT
    thousands_sep: str = FALLBACK_THOUSANDS_SEP
    mon_decimal_point: str = "."
    mon_thousands_sep: str = ","
    int_curr_symbol: str = "USD"
    currency_symbol: str = "$"
    frac_digits: int = 2
    positive_sign: str = ""
    negative_sign: str = "-"
    p_cs_precedes: int = 1
    n_cs_precedes: int = 1
    p_sep_by_space: int = 0
    n_sep_by_space: int = 0
    p_sign_posn: int = 3
    n_sign_posn: int = 3

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        defaults: LocaleConventions | None = None,
    ) -> LocaleConventions:
        """Build conventions from a localeconv()-style mapping.

        Keys missing from mapping (or mapped to None) take the value from
        defaults. Keys that are not convention fields, like localeconv()'s
        "grouping" list, are ignored.

        Args:
            mapping: Field name to value mapping
            defaults: Values for missing keys (default: built-in table)

        Returns:
            New LocaleConventions instance
        """
        base = defaults if defaults is not None else DEFAULT_LOCALE_CONVENTIONS
        changes = {
            field.name: mapping[field.name]
            for field in dataclasses.fields(cls)
            if mapping.get(field.name) is not None
        }
        return dataclasses.replace(base, **changes)

    def as_dict(self) -> dict[str, str | int]:
        """Return conventions as a localeconv()-style dict."""
        return dataclasses.asdict(self)

    @property
    def has_locale_data(self) -> bool:
        """False when frac_digits carries the CHAR_MAX "no data" sentinel."""
        return self.frac_digits != CHAR_MAX


DEFAULT_LOCALE_CONVENTIONS = LocaleConventions()


def load_system_conventions() -> LocaleConventions | None:
    """Snapshot the process locale conventions via locale.localeconv().

    The snapshot reflects whatever LC_NUMERIC / LC_MONETARY the process
    has set. Under the C locale frac_digits is CHAR_MAX, which
    resolve_conventions() treats as "no locale data".

    Returns:
        LocaleConventions, or None if the locale module cannot report them
    """
    try:
        raw = locale.localeconv()
    except (locale.Error, ValueError) as e:
        logger.warning("Cannot read system locale conventions: %s", e)
        return None
    return LocaleConventions.from_mapping(raw)


def conventions_from_locale(locale_code: str) -> LocaleConventions:
    """Build conventions from CLDR data for the given locale.

    Separators and signs come from the locale's number symbols. Currency
    fields use the territory's current tender currency and the placement of
    the currency sign in the locale's standard currency pattern. Negative
    values place the sign before value and currency, as CLDR patterns do.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "de-DE", "cs_CZ")

    Returns:
        LocaleConventions for the locale

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> conv = conventions_from_locale("de_DE")
        >>> conv.decimal_point, conv.thousands_sep
        (',', '.')
    """
    from babel import numbers as babel_numbers  # noqa: PLC0415

    babel_locale = get_babel_locale(locale_code)
    decimal_point = babel_numbers.get_decimal_symbol(babel_locale)
    thousands_sep = babel_numbers.get_group_symbol(babel_locale)

    currency = get_locale_currency(locale_code)

    cs_precedes = 1
    sep_by_space = 0
    standard = babel_locale.currency_formats.get("standard")
    if standard is not None:
        prefix, suffix = standard.prefix[0], standard.suffix[0]
        if "\xa4" in suffix and "\xa4" not in prefix:
            cs_precedes = 0
            sep_by_space = int(suffix[:1].isspace())
        elif "\xa4" in prefix:
            sep_by_space = int(prefix[-1:].isspace())

    return LocaleConventions(
        decimal_point=decimal_point,
        thousands_sep=thousands_sep,
        mon_decimal_point=decimal_point,
        mon_thousands_sep=thousands_sep,
        int_curr_symbol=currency,
        currency_symbol=babel_numbers.get_currency_symbol(currency, locale=babel_locale),
        frac_digits=babel_numbers.get_currency_precision(currency),
        positive_sign="",
        negative_sign=babel_numbers.get_minus_sign_symbol(babel_locale),
        p_cs_precedes=cs_precedes,
        n_cs_precedes=cs_precedes,
        p_sep_by_space=sep_by_space,
        n_sep_by_space=sep_by_space,
        p_sign_posn=1,
        n_sign_posn=1,
    )


def resolve_conventions(
    source: LocaleConventions | None,
    defaults: LocaleConventions = DEFAULT_LOCALE_CONVENTIONS,
) -> LocaleConventions:
    """Compute the effective conventions used by the fallback formatter.

    Args:
        source: Conventions from the system, CLDR or the caller (may be None)
        defaults: Substitute when source is None or has no locale data

    Returns:
        Conventions with n_sign_posn never falsy

    Example:
        >>> resolve_conventions(LocaleConventions(n_sign_posn=0)).n_sign_posn
        3
        >>> resolve_conventions(LocaleConventions(frac_digits=127)) == DEFAULT_LOCALE_CONVENTIONS
        True
    """
    if source is None or not source.has_locale_data:
        logger.debug("No usable locale conventions, using defaults")
        source = defaults
    if not source.n_sign_posn:
        source = dataclasses.replace(source, n_sign_posn=NORMALIZED_SIGN_POSITION)
    return source
