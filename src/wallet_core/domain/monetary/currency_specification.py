from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from wallet_core.domain.monetary.amount_parser import MAX_FRACTION_LENGTH


@dataclass(frozen=True)
class CurrencySpecification:
    """Display metadata of a currency, as announced by the exchange.

    Only rendering and keypad input use it; it never takes part in arithmetic or
    serialization of amounts.

    Attributes:
        name (str): Human readable currency name (e.g. "Euro").
        num_fractional_input_digits (int): Digits after the decimal point a user may type.
        num_fractional_normal_digits (int): Digits after the decimal point normally shown.
        num_fractional_trailing_zero_digits (int): Digits always shown, padded with zeros.
        alt_unit_names (dict[int, str]): Unit names keyed by power of ten; 0 is the main unit.
    """

    name: str
    num_fractional_input_digits: int
    num_fractional_normal_digits: int
    num_fractional_trailing_zero_digits: int
    alt_unit_names: dict[int, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Raise: every digit count must fit into the 8 fractional digits of an Amount
        for attr in ("num_fractional_input_digits", "num_fractional_normal_digits", "num_fractional_trailing_zero_digits"):
            digits = getattr(self, attr)
            if not isinstance(digits, int) or isinstance(digits, bool) or not 0 <= digits <= MAX_FRACTION_LENGTH:
                raise ValueError(f"${attr} must be an integer between 0 and {MAX_FRACTION_LENGTH}, but provided value is: {digits!r}")

        # Raise: name must be a non-empty string
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{self.name}'")

    @property
    def symbol(self) -> str | None:
        """Get the symbol of the main unit, if announced."""
        return self.alt_unit_names.get(0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CurrencySpecification:
        """Build a CurrencySpecification from its JSON object form.

        Keys of `alt_unit_names` arrive as strings in JSON and are converted to int.

        Raises:
            ValueError: If a required key is missing or a value is invalid.
        """
        raw_unit_names = data.get("alt_unit_names") or {}

        # Raise: unit names must be a JSON object keyed by power of ten
        if not isinstance(raw_unit_names, Mapping):
            raise ValueError(f"Cannot call `CurrencySpecification.from_dict` because $alt_unit_names ({raw_unit_names!r}) is not a mapping")

        try:
            alt_unit_names = {int(k): str(v) for k, v in raw_unit_names.items()}
            return cls(
                name=data["name"],
                num_fractional_input_digits=data["num_fractional_input_digits"],
                num_fractional_normal_digits=data["num_fractional_normal_digits"],
                num_fractional_trailing_zero_digits=data["num_fractional_trailing_zero_digits"],
                alt_unit_names=alt_unit_names,
            )
        except KeyError as e:
            raise ValueError(f"Cannot call `CurrencySpecification.from_dict` because key {e} is missing") from e
        except TypeError as e:
            raise ValueError(f"Cannot call `CurrencySpecification.from_dict` because $alt_unit_names has a key that is not an integer: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form (keys of `alt_unit_names` become strings)."""
        return {
            "name": self.name,
            "num_fractional_input_digits": self.num_fractional_input_digits,
            "num_fractional_normal_digits": self.num_fractional_normal_digits,
            "num_fractional_trailing_zero_digits": self.num_fractional_trailing_zero_digits,
            "alt_unit_names": {str(k): v for k, v in self.alt_unit_names.items()},
        }
