"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code normalization so the formatter cache and Babel
lookups see one canonical form per locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from formatnumber.constants import DEFAULT_CURRENCY_CODE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_locale_currency",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Strips an encoding suffix (``.UTF-8``) or modifier (``@euro``) as found
    in POSIX environment variables.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("cs_CZ.UTF-8")
        'cs_CZ'
        >>> normalize_locale("en")
        'en'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parsed locales are memoized by the code as given, so "en-US" and
    "en_US" are separate entries sharing equal Locale data.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_locale_currency(locale_code: str) -> str:
    """Get the current tender currency of the locale's territory.

    Locales without a territory (or territories without a tender currency)
    get DEFAULT_CURRENCY_CODE.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        ISO 4217 currency code

    Example:
        >>> get_locale_currency("cs-CZ")
        'CZK'
        >>> get_locale_currency("en")
        'USD'
    """
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    territory = get_babel_locale(locale_code).territory
    currencies = get_territory_currencies(territory) if territory else []
    return currencies[0] if currencies else DEFAULT_CURRENCY_CODE
