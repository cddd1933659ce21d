"""Text parsing for the numeric part of amounts.

The accepted grammar is `<INTEGER>[.<FRACTION>]` where INTEGER is a non-negative decimal
integer not greater than MAX_VALUE and FRACTION has 1-8 decimal digits. Only ASCII digits
are accepted; signs, whitespace and exponents are rejected.
"""

from __future__ import annotations

import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

from wallet_core.domain.monetary.amount_errors import AmountFormatError, FormatErrorKind
from wallet_core.domain.monetary.validators import MAX_VALUE, check_fraction, check_value
from wallet_core.utils.decimal_tools import DECIMAL_PRECISION

# Number of 1e-8 units in one whole unit
FRACTIONAL_BASE: int = 100_000_000

# Maximum number of digits after the decimal point
MAX_FRACTION_LENGTH: int = 8

_DIGITS_PATTERN = re.compile(r"[0-9]+")

# Digits of MAX_VALUE; longer digit runs are out of range without converting them
_MAX_VALUE_DIGITS = len(str(MAX_VALUE))


def _parse_digits(text: str) -> int | None:
    # int() alone would also accept signs, whitespace, underscores and non-ASCII digits
    if _DIGITS_PATTERN.fullmatch(text) is None:
        return None

    # int() refuses very long digit strings, and anything this long exceeds MAX_VALUE anyway
    significant = text.lstrip("0") or "0"
    if len(significant) > _MAX_VALUE_DIGITS:
        return None
    return int(significant)


def fraction_from_digits(digits: str) -> int | None:
    """Convert fractional digits into units of 1e-8.

    The digits are read as the decimal `0.<digits>` and scaled by 1e8, rounding ties half up.

    Args:
        digits: Text after the decimal point (e.g. "50" for "3.50").

    Returns:
        int | None: Fraction in units of 1e-8 (e.g. 50000000), or None if $digits is not
            a non-empty run of ASCII digits.
    """
    if _DIGITS_PATTERN.fullmatch(digits) is None:
        return None

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        scaled = Decimal(f"0.{digits}") * FRACTIONAL_BASE
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_amount_str(text: str) -> tuple[int, int]:
    """Parse the numeric part of an amount into validated `(value, fraction)`.

    Args:
        text: Amount text like "3", "3.5" or "0.00000001".

    Returns:
        tuple[int, int]: Integral part and fractional part (units of 1e-8).

    Raises:
        AmountFormatError: With kind VALUE_OUT_OF_RANGE if the integral part is not a
            non-negative integer <= MAX_VALUE; FRACTION_TOO_LONG if the fractional part has
            more than 8 digits; FRACTION_OUT_OF_RANGE if the fractional part is empty or
            not made of digits.
    """
    # Raise: only strings can be parsed
    if not isinstance(text, str):
        raise AmountFormatError(FormatErrorKind.VALUE_OUT_OF_RANGE, f"Cannot call `parse_amount_str` because $text ({text!r}) is not a string")

    integer_part, separator, fraction_part = text.partition(".")
    value = check_value(_parse_digits(integer_part))

    if not separator:
        return value, 0

    # Raise: fraction with more digits than the 1e-8 resolution can hold
    if len(fraction_part) > MAX_FRACTION_LENGTH:
        raise AmountFormatError(FormatErrorKind.FRACTION_TOO_LONG, f"Fraction '{fraction_part}' is longer than {MAX_FRACTION_LENGTH} digits")

    fraction = check_fraction(fraction_from_digits(fraction_part))
    return value, fraction


def is_valid_amount_str(text: str) -> bool:
    """Check if $text would be accepted as the numeric part of an amount.

    Suited for live input checking: it never raises and accepts exactly what
    `parse_amount_str` accepts.

    Args:
        text: Text to check.

    Returns:
        bool: True if $text parses, otherwise False.
    """
    try:
        parse_amount_str(text)
    except AmountFormatError:
        return False
    return True
