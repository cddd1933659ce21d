from __future__ import annotations

from typing import Iterable

from wallet_core.domain.monetary.amount_errors import AmountFormatError, AmountOverflowError, CurrencyMismatchError, FormatErrorKind
from wallet_core.domain.monetary.amount_format import CURRENCY_SEPARATOR, format_amount_str, format_json_str
from wallet_core.domain.monetary.amount_parser import FRACTIONAL_BASE, parse_amount_str
from wallet_core.domain.monetary.currency_specification import CurrencySpecification
from wallet_core.domain.monetary.display import DisplayAdapter, PlainDisplayAdapter
from wallet_core.domain.monetary.validators import MAX_FRACTION, MAX_VALUE, check_currency, check_fraction, check_value

_DEFAULT_DISPLAY_ADAPTER = PlainDisplayAdapter()


class Amount:
    """Exact, non-negative monetary amount in one currency.

    An Amount is a fixed-point number: `value` whole units plus `fraction` hundred-millionths
    (1e-8) of a unit. All arithmetic is exact and overflow-checked; nothing is ever rounded
    or clamped. Instances are immutable and every operation returns a new Amount.

    The canonical text form is `CURRENCY:value[.fraction]`, e.g. "USD:3.5".

    Attributes:
        currency (str): Currency code, 1-12 chars from `[-_*A-Za-z0-9]` (e.g. "EUR", "KUDOS").
        value (int): Whole units, between 0 and MAX_VALUE (2^52).
        fraction (int): Units of 1e-8, between 0 and MAX_FRACTION (99_999_999).
            For example 50_000_000 is half a unit.
        spec (CurrencySpecification | None): Optional display metadata. It is ignored by
            equality, hashing, ordering and serialization.
    """

    MAX_VALUE = MAX_VALUE
    MAX_FRACTION = MAX_FRACTION
    FRACTIONAL_BASE = FRACTIONAL_BASE

    __slots__ = ("_currency", "_value", "_fraction", "_spec")

    def __init__(self, currency: str, value: int, fraction: int, spec: CurrencySpecification | None = None):
        """Initialize a validated Amount.

        Args:
            currency: Currency code.
            value: Whole units.
            fraction: Units of 1e-8.
            spec: Optional display metadata.

        Raises:
            AmountFormatError: If any component is invalid.
            TypeError: If $spec is neither None nor a CurrencySpecification.
        """
        # Raise: spec must be CurrencySpecification when provided
        if spec is not None and not isinstance(spec, CurrencySpecification):
            raise TypeError(f"$spec must be a CurrencySpecification instance, but provided value is: {spec!r}")

        self._currency = check_currency(currency)
        self._value = check_value(value)
        self._fraction = check_fraction(fraction)
        self._spec = spec

    # region Factories

    @classmethod
    def zero(cls, currency: str) -> Amount:
        """Return zero in $currency."""
        return cls(currency, 0, 0)

    @classmethod
    def min(cls, currency: str) -> Amount:
        """Return the smallest nonzero Amount (1e-8) in $currency."""
        return cls(currency, 0, 1)

    @classmethod
    def max(cls, currency: str) -> Amount:
        """Return the largest representable Amount in $currency."""
        return cls(currency, MAX_VALUE, MAX_FRACTION)

    @classmethod
    def from_string(cls, currency: str, text: str, spec: CurrencySpecification | None = None) -> Amount:
        """Parse the numeric $text of an amount in $currency.

        Args:
            currency: Currency code.
            text: Amount text like "3", "3.50" or "42.1337".
            spec: Optional display metadata to attach.

        Returns:
            Amount: Parsed amount, e.g. `from_string("USD", "3.50")` has value 3 and
                fraction 50_000_000.

        Raises:
            AmountFormatError: If $text or $currency is invalid.
        """
        value, fraction = parse_amount_str(text)
        return cls(currency, value, fraction, spec)

    @classmethod
    def from_json_string(cls, text: str) -> Amount:
        """Parse the canonical form `CURRENCY:value[.fraction]`.

        Raises:
            AmountFormatError: With kind BAD_AMOUNT_FORMAT if $text does not contain exactly
                one `:`; other kinds if either side is invalid.
        """
        # Raise: wire form must consist of exactly two parts
        if not isinstance(text, str) or text.count(CURRENCY_SEPARATOR) != 1:
            raise AmountFormatError(FormatErrorKind.BAD_AMOUNT_FORMAT, f"Invalid amount format: '{text}'. Expected 'CURRENCY:VALUE'")

        currency, number = text.split(CURRENCY_SEPARATOR)
        return cls.from_string(currency, number)

    # endregion

    # region Properties

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    @property
    def value(self) -> int:
        """Get the whole units."""
        return self._value

    @property
    def fraction(self) -> int:
        """Get the fractional units (1e-8)."""
        return self._fraction

    @property
    def spec(self) -> CurrencySpecification | None:
        """Get the optional display metadata."""
        return self._spec

    @property
    def amount_str(self) -> str:
        """Get the shortest exact decimal text, e.g. "3" or "3.5"."""
        return format_amount_str(self._value, self._fraction)

    # endregion

    # region Convenience

    def with_currency(self, currency: str) -> Amount:
        """Return a copy in another $currency; display metadata is dropped.

        Raises:
            AmountFormatError: If $currency is invalid.
        """
        return Amount(currency, self._value, self._fraction)

    def with_spec(self, spec: CurrencySpecification | None) -> Amount:
        """Return a copy with $spec as display metadata."""
        return Amount(self._currency, self._value, self._fraction, spec)

    def is_zero(self) -> bool:
        """Return True if both $value and $fraction are zero."""
        return self._value == 0 and self._fraction == 0

    def to_json_string(self) -> str:
        """Return the canonical form `CURRENCY:value[.fraction]`, e.g. "USD:3.5"."""
        return format_json_str(self._currency, self._value, self._fraction)

    def to_display_string(self, show_symbol: bool = True, negative: bool = False, adapter: DisplayAdapter | None = None) -> str:
        """Return text for humans, rendered by $adapter (PlainDisplayAdapter by default).

        Args:
            show_symbol: Whether to include the currency symbol or code.
            negative: Whether to prefix a minus sign (e.g. for outgoing payments).
            adapter: Renderer that owns locale concerns.
        """
        adapter = adapter if adapter is not None else _DEFAULT_DISPLAY_ADAPTER
        return adapter.render(self.amount_str, negative, self._currency, self._spec, show_symbol)

    # endregion

    # region Arithmetic

    def _check_same_currency(self, other: Amount, operation: str) -> None:
        # Raise: mixing currencies is a programming error, never a user error
        if self._currency != other._currency:
            raise CurrencyMismatchError(f"Cannot call `{operation}` because currencies differ: '{self._currency}' and '{other._currency}'")

    def __add__(self, other):
        """Add an Amount of the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
            AmountOverflowError: If the sum exceeds MAX_VALUE.
        """
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency(other, "__add__")

        fraction_sum = self._fraction + other._fraction
        result_value = self._value + other._value + fraction_sum // FRACTIONAL_BASE

        # Raise: sum does not fit
        if result_value > MAX_VALUE:
            raise AmountOverflowError(f"Cannot call `__add__` because result value ({result_value}) exceeds {MAX_VALUE}")

        return Amount(self._currency, result_value, fraction_sum % FRACTIONAL_BASE, self._spec)

    def __sub__(self, other):
        """Subtract an Amount of the same currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
            AmountOverflowError: If the result would be negative.
        """
        if not isinstance(other, Amount):
            return NotImplemented
        self._check_same_currency(other, "__sub__")

        result_value = self._value
        result_fraction = self._fraction

        # Borrow one whole unit when the fraction is too small
        if result_fraction < other._fraction:
            # Raise: nothing to borrow from
            if result_value < 1:
                raise AmountOverflowError(f"Cannot call `__sub__` because {other!r} is greater than {self!r}")
            result_value -= 1
            result_fraction += FRACTIONAL_BASE

        # Raise: result would be negative
        if result_value < other._value:
            raise AmountOverflowError(f"Cannot call `__sub__` because {other!r} is greater than {self!r}")

        return Amount(self._currency, result_value - other._value, result_fraction - other._fraction, self._spec)

    def __mul__(self, factor):
        """Multiply by a non-negative integer $factor.

        The result equals adding $factor copies of this Amount. Overflow is decided on the
        final total; partial sums only grow, so this matches repeated addition exactly.

        Raises:
            ValueError: If $factor is negative.
            AmountOverflowError: If the product exceeds MAX_VALUE.
        """
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented

        # Raise: amounts are never negative
        if factor < 0:
            raise ValueError(f"Cannot call `__mul__` because $factor ({factor}) is negative")

        if factor == 0:
            return Amount(self._currency, 0, 0, self._spec)

        total_fraction = self._fraction * factor
        result_value = self._value * factor + total_fraction // FRACTIONAL_BASE

        # Raise: product does not fit
        if result_value > MAX_VALUE:
            raise AmountOverflowError(f"Cannot call `__mul__` because result value ({result_value}) exceeds {MAX_VALUE}")

        return Amount(self._currency, result_value, total_fraction % FRACTIONAL_BASE, self._spec)

    def __rmul__(self, factor):
        """Right multiplication: int * Amount."""
        return self.__mul__(factor)

    # endregion

    # region Comparison

    def compare(self, other: Amount) -> int:
        """Compare with $other of the same currency.

        Returns:
            int: -1 if smaller, 0 if equal, 1 if greater than $other.

        Raises:
            TypeError: If $other is not an Amount.
            CurrencyMismatchError: If currencies differ.
        """
        # Raise: only Amounts can be ordered against each other
        if not isinstance(other, Amount):
            raise TypeError(f"Cannot call `compare` because $other ({other!r}) is not an Amount")
        self._check_same_currency(other, "compare")
        mine = (self._value, self._fraction)
        theirs = (other._value, other._fraction)
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def __eq__(self, other) -> bool:
        """Check equality of currency, value and fraction; $spec is ignored."""
        if not isinstance(other, Amount):
            return False
        return self._currency == other._currency and self._value == other._value and self._fraction == other._fraction

    def __lt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self._currency, self._value, self._fraction))

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return display text like '3.50 USD'."""
        return self.to_display_string()

    def __repr__(self) -> str:
        """Return string like 'Amount(USD, 3, 50000000)'."""
        return f"{self.__class__.__name__}({self._currency}, {self._value}, {self._fraction})"

    # endregion


def sum_amounts(amounts: Iterable[Amount], currency: str) -> Amount:
    """Add up $amounts, all in $currency; an empty iterable gives zero.

    Raises:
        CurrencyMismatchError: If any Amount is in another currency.
        AmountOverflowError: If a partial sum exceeds MAX_VALUE.
    """
    total = Amount.zero(currency)
    for amount in amounts:
        total = total + amount
    return total
