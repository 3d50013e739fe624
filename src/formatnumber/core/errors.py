"""Exception hierarchy for formatnumber.

Only the Babel-backed formatter raises. The fallback formatter never fails
on input it accepts: non-numeric values pass through, missing locale data
falls back to built-in defaults.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "FormatNumberError",
    "IntlFormatterError",
    "UnsupportedAttributeError",
]


class FormatNumberError(Exception):
    """Base exception for all formatnumber errors."""


class IntlFormatterError(FormatNumberError):
    """Raised when the Babel-backed formatter cannot be built or applied.

    Covers unknown locales, styles Babel has no data for, and malformed
    patterns. These are caller configuration bugs, so the error propagates
    instead of degrading to the fallback formatter.

    Attributes:
        locale_code: Locale the formatter was built for
        style: Requested formatter style id
        pattern: Requested pattern (None when the style needs none)
    """

    def __init__(
        self,
        message: str,
        *,
        locale_code: str = "",
        style: int | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize IntlFormatterError.

        Args:
            message: Error message
            locale_code: Locale the formatter was built for
            style: Requested formatter style id
            pattern: Requested pattern, if any
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.style = style
        self.pattern = pattern


class UnsupportedAttributeError(IntlFormatterError):
    """Numeric or text attribute id that Babel patterns cannot express.

    Attributes:
        attribute: The rejected attribute id
    """

    def __init__(self, message: str, *, attribute: int, locale_code: str = "") -> None:
        """Initialize UnsupportedAttributeError.

        Args:
            message: Error message
            attribute: The rejected attribute id
            locale_code: Locale the formatter was built for
        """
        super().__init__(message, locale_code=locale_code)
        self.attribute = attribute
