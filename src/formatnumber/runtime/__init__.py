"""Formatting runtime: configuration, conventions and both formatting paths.

Exports:
    NumberFormatter: Configurable formatter (Babel or locale-conventions path)
    FormatterConfig: Immutable formatter defaults
    IntlNumberFormatter: Babel-backed formatter with ICU-style attributes
    LocaleConventions: localeconv()-style conventions
    format_fallback: Pure locale-conventions formatting function

Python 3.13+.
"""

from .config import FormatterConfig
from .conventions import (
    DEFAULT_LOCALE_CONVENTIONS,
    LocaleConventions,
    conventions_from_locale,
    load_system_conventions,
    resolve_conventions,
)
from .fallback import format_fallback
from .formatter import NumberFormatter, coerce_number
from .intl import IntlNumberFormatter

__all__ = [
    "DEFAULT_LOCALE_CONVENTIONS",
    "FormatterConfig",
    "IntlNumberFormatter",
    "LocaleConventions",
    "NumberFormatter",
    "coerce_number",
    "conventions_from_locale",
    "format_fallback",
    "load_system_conventions",
    "resolve_conventions",
]
