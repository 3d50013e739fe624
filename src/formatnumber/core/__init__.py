"""Core utilities shared by the fallback and Babel formatting layers.

Exports:
    FormatNumberError: Base exception
    IntlFormatterError: Babel formatter construction or formatting failed
    UnsupportedAttributeError: Attribute id not expressible with Babel

Python 3.13+.
"""

from .errors import FormatNumberError, IntlFormatterError, UnsupportedAttributeError

__all__ = ["FormatNumberError", "IntlFormatterError", "UnsupportedAttributeError"]
