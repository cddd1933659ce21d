"""Keypad-style editing of amounts.

A keypad shows the amount with a fixed number of fraction digits N and every key press
shifts the digits: typing `1`, `2`, `3` with N = 2 gives 0.01, 0.12, 1.23. Both operations
return None instead of raising, so a key press that would make the amount invalid is
simply ignored by the input flow.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_FLOOR, localcontext

from wallet_core.config import get_settings
from wallet_core.domain.monetary.amount import Amount
from wallet_core.domain.monetary.amount_errors import AmountFormatError, AmountOverflowError
from wallet_core.utils.decimal_tools import DECIMAL_PRECISION, as_decimal, to_plain_str

logger = logging.getLogger(__name__)


def input_decimals(amount: Amount) -> int:
    """Return how many fraction digits a user may type for $amount.

    Uses the CurrencySpecification of $amount if present, otherwise the configured default.
    """
    if amount.spec is not None:
        return amount.spec.num_fractional_input_digits
    return get_settings().default_input_decimals


def _parse_digit(digit: str | int) -> int | None:
    if isinstance(digit, bool):
        return None
    if isinstance(digit, int):
        return digit if 0 <= digit <= 9 else None
    if isinstance(digit, str) and len(digit) == 1 and "0" <= digit <= "9":
        return int(digit)
    return None


def add_input_digit(amount: Amount, digit: str | int) -> Amount | None:
    """Append $digit as the new last fraction digit, shifting the rest one place left.

    Args:
        amount: Current keypad amount.
        digit: Pressed key, "0"-"9" (or int 0-9).

    Returns:
        Amount | None: New amount with the same currency and spec, or None if $digit is not
            a digit or the result is not a valid Amount.

    Example:
        >>> add_input_digit(Amount.from_string("USD", "1.23"), "4")
        Amount(USD, 12, 34000000)
    """
    parsed_digit = _parse_digit(digit)
    if parsed_digit is None:
        logger.debug(f"Ignored key {digit!r} because it is not a digit")
        return None

    decimals = input_decimals(amount)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        shifted = as_decimal(amount.amount_str) * 10
        new_value = shifted + Decimal(parsed_digit).scaleb(-decimals)
        text = to_plain_str(new_value)

    try:
        return Amount.from_string(amount.currency, text, amount.spec)
    except (AmountFormatError, AmountOverflowError) as e:
        logger.debug(f"Ignored key {digit!r} because result '{text}' is not a valid amount: {e}")
        return None


def remove_input_digit(amount: Amount) -> Amount | None:
    """Drop the last typed fraction digit, shifting the rest one place right.

    The amount is first truncated to N + 1 fraction digits, then divided by 10 and truncated
    to N digits, where N is `input_decimals(amount)`.

    Returns:
        Amount | None: New amount with the same currency and spec, or None if the result is
            not a valid Amount.

    Example:
        >>> remove_input_digit(Amount.from_string("USD", "12.34"))
        Amount(USD, 1, 23000000)
    """
    decimals = input_decimals(amount)
    try:
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            current = as_decimal(amount.amount_str).quantize(Decimal(1).scaleb(-(decimals + 1)), rounding=ROUND_FLOOR)
            new_value = (current / 10).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_FLOOR)
            text = to_plain_str(new_value)
        return Amount.from_string(amount.currency, text, amount.spec)
    except (AmountFormatError, AmountOverflowError, InvalidOperation) as e:
        logger.debug(f"Ignored removal of last digit from {amount!r}: {e}")
        return None
