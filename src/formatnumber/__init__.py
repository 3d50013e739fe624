"""formatnumber - locale-aware number formatting for view templates.

Formats numbers with Babel (CLDR patterns configured through ICU-style
styles and attributes) or, when Babel formatting is switched off, with
localeconv()-style conventions: decimal point, thousands separator and
sign placement.

Public API:
    NumberFormatter - Configurable formatter with a single format() entry point
    FormatterConfig - Immutable formatter defaults
    LocaleConventions - localeconv()-style formatting conventions
    IntlNumberFormatter - Babel-backed formatter handle
    format_fallback - Pure locale-conventions formatting function

Enumerations:
    NumberFormatStyle, NumberFormatAttribute, NumberFormatTextAttribute, RoundingMode

Exceptions:
    FormatNumberError - Base exception class
    IntlFormatterError - Babel formatter construction/formatting failure
    UnsupportedAttributeError - Attribute id Babel cannot express
"""

from .core.errors import FormatNumberError, IntlFormatterError, UnsupportedAttributeError
from .enums import NumberFormatAttribute, NumberFormatStyle, NumberFormatTextAttribute, RoundingMode
from .runtime import (
    FormatterConfig,
    IntlNumberFormatter,
    LocaleConventions,
    NumberFormatter,
    conventions_from_locale,
    format_fallback,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("formatnumber")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatNumberError",
    "FormatterConfig",
    "IntlFormatterError",
    "IntlNumberFormatter",
    "LocaleConventions",
    "NumberFormatAttribute",
    "NumberFormatStyle",
    "NumberFormatTextAttribute",
    "NumberFormatter",
    "RoundingMode",
    "UnsupportedAttributeError",
    "__version__",
    "conventions_from_locale",
    "format_fallback",
]
