from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias


DecimalLike: TypeAlias = Decimal | str | int

# Enough significant digits for 2^52 with 8 fractional digits, shifted by a few places
DECIMAL_PRECISION = 40


def as_decimal(value: DecimalLike) -> Decimal:
    """Convert supported scalar types into Decimal.

    Floats are deliberately not accepted; amounts never pass through binary floating point.

    Args:
        value: Input value as Decimal, string or int.

    Returns:
        Value converted to Decimal.

    Raises:
        TypeError: If $value is a float or another unsupported type.
    """

    if isinstance(value, Decimal):
        return value

    # Raise: floats would bring binary rounding noise into exact amounts
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"Cannot call `as_decimal` because $value has unsupported type '{type(value).__name__}'")

    return Decimal(value)


def to_plain_str(value: Decimal) -> str:
    """Render $value as a plain decimal string without exponent and trailing fractional zeros.

    Examples:
        >>> to_plain_str(Decimal("35.0100"))
        '35.01'
        >>> to_plain_str(Decimal("1E+2"))
        '100'
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
