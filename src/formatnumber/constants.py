"""Shared constants for formatnumber.

Single source of truth for defaults used by the configuration layer, the
fallback formatter and the Babel-backed formatter.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Formatting defaults
    "DEFAULT_DECIMALS_COUNT",
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY_CODE",
    # Fallback separators
    "FALLBACK_DECIMAL_POINT",
    "FALLBACK_THOUSANDS_SEP",
    # localeconv() sentinels
    "CHAR_MAX",
    "NORMALIZED_SIGN_POSITION",
    # Digit grouping
    "GROUP_SIZE",
]

# ============================================================================
# FORMATTING DEFAULTS
# ============================================================================

# Digits after the decimal point when a call does not say otherwise.
DEFAULT_DECIMALS_COUNT: int = 2

# Locale used by the Babel formatter until set_locale() is called.
DEFAULT_LOCALE: str = "en_US"

# Currency used by CURRENCY styles when the locale has no territory currency
# and no CURRENCY_CODE text attribute was given.
DEFAULT_CURRENCY_CODE: str = "USD"

# ============================================================================
# FALLBACK SEPARATORS
# ============================================================================

# Used when locale conventions carry no decimal point.
FALLBACK_DECIMAL_POINT: str = "."

# Used when locale conventions carry no thousands separator at all.
FALLBACK_THOUSANDS_SEP: str = ","

# ============================================================================
# LOCALECONV SENTINELS
# ============================================================================

# localeconv() reports CHAR_MAX (127) for fields the C/POSIX locale leaves
# undefined. A frac_digits of 127 means "no usable locale data".
CHAR_MAX: int = 127

# n_sign_posn value substituted for a falsy one (0 would mean parentheses).
# 3 places the sign right next to the (virtual) currency symbol.
NORMALIZED_SIGN_POSITION: int = 3

# ============================================================================
# DIGIT GROUPING
# ============================================================================

# Integer digits per group in the fallback formatter.
GROUP_SIZE: int = 3
