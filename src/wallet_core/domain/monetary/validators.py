from __future__ import annotations

import re
from typing import Any

from wallet_core.domain.monetary.amount_errors import AmountFormatError, FormatErrorKind

# Largest allowed integral part (2^52)
MAX_VALUE: int = 2**52

# Largest allowed fractional part, in units of 1e-8
MAX_FRACTION: int = 99_999_999

_CURRENCY_PATTERN = re.compile(r"^[-_*A-Za-z0-9]{1,12}$")


def _is_int(value: Any) -> bool:
    # bool is a subclass of int, but True/False are never amounts
    return isinstance(value, int) and not isinstance(value, bool)


def check_currency(currency: Any) -> str:
    """Validate a currency code and return it unchanged.

    Args:
        currency: Candidate currency code (e.g. "USD", "KUDOS", "*LOCAL").

    Returns:
        str: The same $currency.

    Raises:
        AmountFormatError: With kind INVALID_CURRENCY if $currency is not a 1-12 character
            string made of letters, digits, `-`, `_` or `*`.
    """
    # Raise: currency must be a str matching the allowed charset and length
    if not isinstance(currency, str) or _CURRENCY_PATTERN.fullmatch(currency) is None:
        raise AmountFormatError(FormatErrorKind.INVALID_CURRENCY, f"Invalid currency: '{currency}'")
    return currency


def check_value(value: Any) -> int:
    """Validate the integral part of an Amount and return it unchanged.

    Args:
        value: Candidate integral part; None means "could not be parsed".

    Returns:
        int: The same $value.

    Raises:
        AmountFormatError: With kind VALUE_OUT_OF_RANGE if $value is None, not an int,
            negative or greater than MAX_VALUE.
    """
    # Raise: value must be present and integral
    if value is None or not _is_int(value):
        raise AmountFormatError(FormatErrorKind.VALUE_OUT_OF_RANGE, f"$value ({value!r}) is not a valid integral amount")

    # Raise: value must fit into [0, MAX_VALUE]
    if value < 0 or value > MAX_VALUE:
        raise AmountFormatError(FormatErrorKind.VALUE_OUT_OF_RANGE, f"$value ({value}) is outside of range [0, {MAX_VALUE}]")

    return value


def check_fraction(fraction: Any) -> int:
    """Validate the fractional part of an Amount and return it unchanged.

    Args:
        fraction: Candidate fractional part in units of 1e-8; None means "could not be parsed".

    Returns:
        int: The same $fraction.

    Raises:
        AmountFormatError: With kind FRACTION_OUT_OF_RANGE if $fraction is None, not an int,
            negative or greater than MAX_FRACTION.
    """
    # Raise: fraction must be present and integral
    if fraction is None or not _is_int(fraction):
        raise AmountFormatError(FormatErrorKind.FRACTION_OUT_OF_RANGE, f"$fraction ({fraction!r}) is not a valid fractional amount")

    # Raise: fraction must fit into [0, MAX_FRACTION]
    if fraction < 0 or fraction > MAX_FRACTION:
        raise AmountFormatError(FormatErrorKind.FRACTION_OUT_OF_RANGE, f"$fraction ({fraction}) is outside of range [0, {MAX_FRACTION}]")

    return fraction
