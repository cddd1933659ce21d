import pytest

from wallet_core.domain.monetary.amount_errors import AmountFormatError, FormatErrorKind
from wallet_core.domain.monetary.validators import MAX_FRACTION, MAX_VALUE, check_currency, check_fraction, check_value


@pytest.mark.parametrize("currency", ["USD", "EUR", "KUDOS", "*LOCAL", "TESTKUDOS", "a-b_c", "X", "ABCDEFGHIJKL"])
def test_check_currency_accepts_valid_codes(currency):
    assert check_currency(currency) == currency


@pytest.mark.parametrize("currency", ["", "ABCDEFGHIJKLM", "US D", "EUR:", "EUR.", "ÄUR", None, 42])
def test_check_currency_rejects_invalid_codes(currency):
    with pytest.raises(AmountFormatError) as exc_info:
        check_currency(currency)
    assert exc_info.value.kind == FormatErrorKind.INVALID_CURRENCY


def test_check_currency_rejects_trailing_newline():
    # `$` in a plain regex search would accept "USD\n"
    with pytest.raises(AmountFormatError):
        check_currency("USD\n")


@pytest.mark.parametrize("value", [0, 1, MAX_VALUE])
def test_check_value_accepts_range(value):
    assert check_value(value) == value


@pytest.mark.parametrize("value", [None, -1, MAX_VALUE + 1, True, 1.0, "1"])
def test_check_value_rejects_out_of_range(value):
    with pytest.raises(AmountFormatError) as exc_info:
        check_value(value)
    assert exc_info.value.kind == FormatErrorKind.VALUE_OUT_OF_RANGE


@pytest.mark.parametrize("fraction", [0, 1, MAX_FRACTION])
def test_check_fraction_accepts_range(fraction):
    assert check_fraction(fraction) == fraction


@pytest.mark.parametrize("fraction", [None, -1, MAX_FRACTION + 1, False, 0.5])
def test_check_fraction_rejects_out_of_range(fraction):
    with pytest.raises(AmountFormatError) as exc_info:
        check_fraction(fraction)
    assert exc_info.value.kind == FormatErrorKind.FRACTION_OUT_OF_RANGE


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        check_value(-5)
