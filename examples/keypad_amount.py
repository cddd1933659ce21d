from __future__ import annotations

import logging

from wallet_core.domain.monetary.amount import Amount
from wallet_core.domain.monetary.amount_input import add_input_digit, remove_input_digit
from wallet_core.domain.monetary.currency_specification import CurrencySpecification


logger = logging.getLogger(__name__)

EURO = CurrencySpecification(
    name="Euro",
    num_fractional_input_digits=2,
    num_fractional_normal_digits=2,
    num_fractional_trailing_zero_digits=2,
    alt_unit_names={0: "€"},
)


def type_keys(amount: Amount, keys: str) -> Amount:
    """Feed $keys to the keypad; `<` removes the last digit, invalid keys are ignored."""
    for key in keys:
        result = remove_input_digit(amount) if key == "<" else add_input_digit(amount, key)
        if result is None:
            logger.info(f"Key '{key}' ignored, amount stays {amount}")
            continue
        amount = result
        logger.info(f"Key '{key}' -> {amount}")
    return amount


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    price = type_keys(Amount.zero("EUR").with_spec(EURO), "1250x<<99")
    balance = Amount.from_json_string("EUR:100")
    remaining = balance - price * 3

    logger.info(f"3 x {price} from {balance} leaves {remaining} ({remaining.to_json_string()})")
