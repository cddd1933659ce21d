from __future__ import annotations

from enum import Enum


class FormatErrorKind(Enum):
    """Reason why a text or a raw component could not become an Amount.

    Members:
        INVALID_CURRENCY: Currency code is not 1-12 chars from `[-_*A-Za-z0-9]`.
        VALUE_OUT_OF_RANGE: Integer part is missing, not a number, negative or above MAX_VALUE.
        FRACTION_OUT_OF_RANGE: Fraction is missing, not a number, negative or above MAX_FRACTION.
        FRACTION_TOO_LONG: Fractional text has more than 8 digits.
        BAD_AMOUNT_FORMAT: Wire string is not of the form `CURRENCY:VALUE`.
    """

    INVALID_CURRENCY = "INVALID_CURRENCY"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    FRACTION_OUT_OF_RANGE = "FRACTION_OUT_OF_RANGE"
    FRACTION_TOO_LONG = "FRACTION_TOO_LONG"
    BAD_AMOUNT_FORMAT = "BAD_AMOUNT_FORMAT"


class AmountFormatError(ValueError):
    """Raised when input cannot be turned into a valid Amount.

    Callers are expected to reject the input (e.g. show an "invalid amount" state).

    Attributes:
        kind (FormatErrorKind): Machine-readable reason of the failure.
    """

    def __init__(self, kind: FormatErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class AmountOverflowError(OverflowError):
    """Raised when arithmetic on valid Amounts leaves the representable range.

    This covers results above MAX_VALUE as well as results below zero. It usually points
    to a business-logic bug upstream (e.g. spending beyond a balance) and must not be clamped.
    """


class CurrencyMismatchError(ValueError):
    """Raised when a binary operation gets Amounts of different currencies.

    Correct programs never trigger this; operands must share a currency before they meet.
    """
