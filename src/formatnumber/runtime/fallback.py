"""Locale-convention number formatting without Babel.

Fixed-point formatting with explicit separators, then sign placement driven
by the localeconv() sign fields. The currency symbol itself is never
inserted; only the sign is positioned as if a currency symbol were next to
the value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from formatnumber.constants import GROUP_SIZE

from .conventions import LocaleConventions

__all__ = ["apply_sign", "format_fallback", "format_fixed", "group_digits"]


def _to_decimal(value: float | int | Decimal) -> Decimal:
    """Exact decimal form of value, using the shortest repr for floats."""
    return value if isinstance(value, Decimal) else Decimal(str(value))


def group_digits(digits: str, separator: str) -> str:
    """Insert separator between groups of three digits, counted from the right.

    Example:
        >>> group_digits("1234567", ",")
        '1,234,567'
        >>> group_digits("1234567", "")
        '1234567'
    """
    if not separator or len(digits) <= GROUP_SIZE:
        return digits
    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))
    return separator.join(groups)


def format_fixed(
    value: float | int | Decimal,
    decimals_count: int,
    decimal_point: str,
    thousands_sep: str,
) -> str:
    """Format the magnitude of value in fixed-point notation.

    Rounds half away from zero. A decimals_count of zero (or less) emits no
    decimal point; negative counts round to tens, hundreds and so on.

    Example:
        >>> format_fixed(1234.565, 2, ",", " ")
        '1 234,57'
        >>> format_fixed(-0.5, 0, ".", ",")
        '1'
    """
    number = _to_decimal(value)
    if not number.is_finite():
        return "nan" if number.is_nan() else "inf"
    quantum = Decimal(1).scaleb(-decimals_count)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the fraction
        ctx.prec = max(ctx.prec, number.adjusted() + decimals_count + 2)
        rounded = abs(number).quantize(quantum, rounding=ROUND_HALF_UP)
    integer, _, fraction = f"{rounded:f}".partition(".")
    result = group_digits(integer, thousands_sep)
    if decimals_count > 0:
        result += decimal_point + fraction
    return result


def apply_sign(
    text: str,
    sign_position: int,
    sign_symbol: str,
    currency_before_value: bool | int,
) -> str:
    """Place sign_symbol around formatted digits per a localeconv sign position.

    Positions 3 and above describe the sign next to a currency symbol; the
    sign lands on the side the currency symbol would occupy. Unknown
    (negative) positions leave text unsigned.

    Example:
        >>> apply_sign("1.00", 0, "-", True)
        '(1.00)'
        >>> apply_sign("1.00", 4, "-", False)
        '1.00-'
    """
    if sign_position == 0:
        return f"({text})"
    if sign_position == 1:
        return sign_symbol + text
    if sign_position == 2:
        return text + sign_symbol
    if sign_position > 2 and currency_before_value:
        return sign_symbol + text
    if sign_position > 2:
        return text + sign_symbol
    return text


def format_fallback(
    value: float | int | Decimal,
    decimals_count: int,
    decimal_point: str,
    thousands_sep: str,
    conventions: LocaleConventions,
) -> str:
    """Format value with explicit separators and locale sign placement.

    Args:
        value: Number to format
        decimals_count: Digits after the decimal point
        decimal_point: Separator between integer and fraction digits
        thousands_sep: Separator between groups of three integer digits
            (empty string disables grouping)
        conventions: Sign fields source (p_*/n_* by sign of value)

    Returns:
        Formatted string

    Examples:
        >>> format_fallback(123456.789, 2, ".", ",", LocaleConventions())
        '123,456.79'
        >>> format_fallback(-42, 2, ".", ",", LocaleConventions(n_sign_posn=0))
        '(42.00)'
    """
    number = _to_decimal(value)
    negative = not number.is_nan() and number < 0
    result = format_fixed(value, decimals_count, decimal_point, thousands_sep)
    if negative:
        currency_before_value = conventions.n_cs_precedes
        sign_position = conventions.n_sign_posn
        sign_symbol = conventions.negative_sign
    else:
        currency_before_value = conventions.p_cs_precedes
        sign_position = conventions.p_sign_posn
        sign_symbol = conventions.positive_sign
    return apply_sign(result, sign_position, sign_symbol, currency_before_value)
