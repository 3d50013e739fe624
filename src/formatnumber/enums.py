"""ICU-compatible identifiers for number formatter configuration.

Values mirror ICU's UNumberFormatStyle, UNumberFormatAttribute,
UNumberFormatTextAttribute and UNumberFormatRoundingMode constants, so
configuration written against ICU (or PHP's NumberFormatter constants)
keeps its meaning. IntEnum members compare equal to their raw integers:
NumberFormatAttribute.MIN_FRACTION_DIGITS == 7.

Python 3.13+.
"""

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import IntEnum


class NumberFormatStyle(IntEnum):
    """Formatter style (UNumberFormatStyle)."""

    PATTERN_DECIMAL = 0
    """Decimal format defined by a pattern string."""

    DECIMAL = 1
    """Locale decimal format."""

    CURRENCY = 2
    """Locale currency format."""

    PERCENT = 3
    """Locale percent format."""

    SCIENTIFIC = 4
    """Locale scientific format."""

    SPELLOUT = 5
    ORDINAL = 6
    DURATION = 7
    NUMBERING_SYSTEM = 8
    PATTERN_RULEBASED = 9

    CURRENCY_ACCOUNTING = 12
    """Locale accounting currency format (negatives usually parenthesized)."""

    DEFAULT_STYLE = 1  # noqa: PIE796 - ICU alias of DECIMAL


class NumberFormatAttribute(IntEnum):
    """Numeric formatter attribute (UNumberFormatAttribute)."""

    PARSE_INT_ONLY = 0
    GROUPING_USED = 1
    DECIMAL_ALWAYS_SHOWN = 2
    MAX_INTEGER_DIGITS = 3
    MIN_INTEGER_DIGITS = 4
    INTEGER_DIGITS = 5
    MAX_FRACTION_DIGITS = 6
    MIN_FRACTION_DIGITS = 7
    FRACTION_DIGITS = 8
    MULTIPLIER = 9
    GROUPING_SIZE = 10
    ROUNDING_MODE = 11
    ROUNDING_INCREMENT = 12
    FORMAT_WIDTH = 13
    PADDING_POSITION = 14
    SECONDARY_GROUPING_SIZE = 15
    SIGNIFICANT_DIGITS_USED = 16
    MIN_SIGNIFICANT_DIGITS = 17
    MAX_SIGNIFICANT_DIGITS = 18
    LENIENT_PARSE = 19


class NumberFormatTextAttribute(IntEnum):
    """Text formatter attribute (UNumberFormatTextAttribute)."""

    POSITIVE_PREFIX = 0
    POSITIVE_SUFFIX = 1
    NEGATIVE_PREFIX = 2
    NEGATIVE_SUFFIX = 3
    PADDING_CHARACTER = 4
    CURRENCY_CODE = 5
    DEFAULT_RULESET = 6
    PUBLIC_RULESETS = 7


class RoundingMode(IntEnum):
    """Rounding mode (UNumberFormatRoundingMode).

    Use decimal_rounding to get the matching decimal module constant.
    """

    ROUND_CEILING = 0
    ROUND_FLOOR = 1
    ROUND_DOWN = 2
    ROUND_UP = 3
    ROUND_HALFEVEN = 4
    ROUND_HALFDOWN = 5
    ROUND_HALFUP = 6

    @property
    def decimal_rounding(self) -> str:
        """decimal module rounding constant for this mode."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING: dict[RoundingMode, str] = {
    RoundingMode.ROUND_CEILING: ROUND_CEILING,
    RoundingMode.ROUND_FLOOR: ROUND_FLOOR,
    RoundingMode.ROUND_DOWN: ROUND_DOWN,
    RoundingMode.ROUND_UP: ROUND_UP,
    RoundingMode.ROUND_HALFEVEN: ROUND_HALF_EVEN,
    RoundingMode.ROUND_HALFDOWN: ROUND_HALF_DOWN,
    RoundingMode.ROUND_HALFUP: ROUND_HALF_UP,
}


__all__ = [
    "NumberFormatAttribute",
    "NumberFormatStyle",
    "NumberFormatTextAttribute",
    "RoundingMode",
]
