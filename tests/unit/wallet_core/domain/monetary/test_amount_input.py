import logging

import pytest

from tests.helpers.helper_amount import create_euro_spec, create_usd, create_yen_spec
from wallet_core.config import ENV_DEFAULT_INPUT_DECIMALS, get_settings
from wallet_core.domain.monetary.amount import Amount
from wallet_core.domain.monetary.amount_input import add_input_digit, input_decimals, remove_input_digit
from wallet_core.domain.monetary.validators import MAX_VALUE


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    # Keypad tests run with the built-in default of 2 input decimals
    monkeypatch.delenv(ENV_DEFAULT_INPUT_DECIMALS, raising=False)
    monkeypatch.setattr("wallet_core.config.load_dotenv", lambda *args, **kwargs: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_typing_digits_shifts_left():
    amount = Amount.zero("USD")
    for key, expected in [("1", "0.01"), ("2", "0.12"), ("3", "1.23"), ("0", "12.3"), ("5", "123.05")]:
        amount = add_input_digit(amount, key)
        assert amount.amount_str == expected


def test_add_input_digit_accepts_int():
    assert add_input_digit(create_usd(1, 23_000_000), 4) == create_usd(12, 34_000_000)


@pytest.mark.parametrize("key", ["a", "", "12", "-", 10, -1, None, True, "٣"])
def test_add_input_digit_rejects_non_digits(key):
    assert add_input_digit(create_usd(1), key) is None


def test_add_input_digit_returns_none_on_overflow(caplog):
    with caplog.at_level(logging.DEBUG, logger="wallet_core.domain.monetary.amount_input"):
        assert add_input_digit(Amount("USD", MAX_VALUE, 0), "1") is None
    assert "not a valid amount" in caplog.text


def test_add_input_digit_keeps_digits_below_input_precision():
    # 0.0000001 * 10 + 0.01 == 0.010001
    assert add_input_digit(Amount("USD", 0, 10), "1") == Amount("USD", 0, 1_000_100)
    assert add_input_digit(Amount("USD", 0, 1), "1") == Amount("USD", 0, 1_000_010)


def test_add_input_digit_uses_spec_input_decimals():
    yen = Amount("JPY", 12, 0, create_yen_spec())
    result = add_input_digit(yen, "3")
    assert result == Amount("JPY", 123, 0)
    assert result.spec == create_yen_spec()

    euro = Amount("EUR", 0, 0, create_euro_spec())
    assert add_input_digit(euro, "7") == Amount("EUR", 0, 7_000_000)


def test_remove_input_digit_shifts_right():
    assert remove_input_digit(Amount.from_string("USD", "12.34")) == Amount.from_string("USD", "1.23")
    assert remove_input_digit(Amount.from_string("USD", "0.01")) == Amount.zero("USD")
    assert remove_input_digit(Amount.zero("USD")) == Amount.zero("USD")


def test_remove_input_digit_truncates_extra_precision():
    # 1.23456 is floored to 1.234 first, then 0.1234 is floored to 0.12
    assert remove_input_digit(Amount.from_string("USD", "1.23456")) == Amount.from_string("USD", "0.12")


def test_remove_input_digit_with_yen_spec():
    assert remove_input_digit(Amount("JPY", 123, 0, create_yen_spec())) == Amount("JPY", 12, 0)


def test_remove_input_digit_handles_maximum():
    assert remove_input_digit(Amount.max("USD")) == Amount.from_string("USD", "450359962737049.69")


def test_add_then_remove_restores_amount():
    amount = Amount.from_string("USD", "45.67")
    assert remove_input_digit(add_input_digit(amount, "8")) == amount


def test_input_decimals_from_environment(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_INPUT_DECIMALS, "3")
    get_settings.cache_clear()

    amount = Amount.zero("USD")
    assert input_decimals(amount) == 3
    assert add_input_digit(amount, "1") == Amount("USD", 0, 100_000)
    assert input_decimals(amount.with_spec(create_yen_spec())) == 0
