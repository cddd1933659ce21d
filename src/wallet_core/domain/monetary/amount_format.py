from __future__ import annotations

from wallet_core.domain.monetary.amount_parser import FRACTIONAL_BASE

# Separator between currency and number in the wire format
CURRENCY_SEPARATOR = ":"


def format_amount_str(value: int, fraction: int) -> str:
    """Render `(value, fraction)` as the shortest exact decimal string.

    No decimal point is written for a zero fraction and the fractional digits never end
    with a padding zero.

    Args:
        value: Integral part.
        fraction: Fractional part in units of 1e-8.

    Returns:
        str: Decimal text, e.g. "3" or "3.5".

    Examples:
        >>> format_amount_str(3, 50_000_000)
        '3.5'
        >>> format_amount_str(0, 1)
        '0.00000001'
    """
    if fraction == 0:
        return str(value)

    digits = []
    remaining = fraction
    # Peel off the leading digit until nothing is left
    while remaining > 0:
        digits.append(str(remaining // (FRACTIONAL_BASE // 10)))
        remaining = (remaining * 10) % FRACTIONAL_BASE

    return f"{value}.{''.join(digits)}"


def format_json_str(currency: str, value: int, fraction: int) -> str:
    """Render the canonical wire form `CURRENCY:value[.fraction]`."""
    return f"{currency}{CURRENCY_SEPARATOR}{format_amount_str(value, fraction)}"
