from __future__ import annotations

from typing import Protocol, runtime_checkable

from wallet_core.domain.monetary.currency_specification import CurrencySpecification

# Fraction digits always shown when there is no CurrencySpecification
DEFAULT_TRAILING_ZERO_DIGITS = 2


@runtime_checkable
class DisplayAdapter(Protocol):
    """Protocol for turning an exact amount into text for humans.

    Implementations own every presentation concern: locale punctuation, digit grouping and
    symbol placement. The monetary core only hands over the exact decimal text.
    """

    def render(
        self,
        amount_str: str,
        negative: bool,
        currency: str,
        spec: CurrencySpecification | None,
        show_symbol: bool,
    ) -> str:
        """Return display text.

        Args:
            amount_str: Exact minimal decimal text (e.g. "3.5").
            negative: True if the amount must be shown with a minus sign.
            currency: Currency code of the amount.
            spec: Optional display metadata of the currency.
            show_symbol: True if the currency symbol (or code) should be shown.
        """
        ...


class PlainDisplayAdapter:
    """Locale-free DisplayAdapter with `.` as decimal point and no grouping.

    The fraction is padded with zeros up to `num_fractional_trailing_zero_digits` of the
    spec (2 without a spec) and never cut, so no precision is hidden.

    Example:
        >>> PlainDisplayAdapter().render("3.5", False, "USD", None, True)
        '3.50 USD'
    """

    def render(
        self,
        amount_str: str,
        negative: bool,
        currency: str,
        spec: CurrencySpecification | None,
        show_symbol: bool,
    ) -> str:
        min_digits = spec.num_fractional_trailing_zero_digits if spec is not None else DEFAULT_TRAILING_ZERO_DIGITS
        number = self._pad_fraction(amount_str, min_digits)
        sign = "-" if negative else ""

        if not show_symbol:
            return f"{sign}{number}"

        symbol = spec.symbol if spec is not None else None
        if symbol:
            return f"{sign}{symbol}{number}"
        return f"{sign}{number} {currency}"

    @staticmethod
    def _pad_fraction(amount_str: str, min_digits: int) -> str:
        integer_part, _, fraction_part = amount_str.partition(".")
        fraction_part = fraction_part.ljust(min_digits, "0")
        if not fraction_part:
            return integer_part
        return f"{integer_part}.{fraction_part}"
