from decimal import Decimal

import pytest

from wallet_core.utils.decimal_tools import as_decimal, to_plain_str


def test_as_decimal():
    assert as_decimal("1.50") == Decimal("1.50")
    assert as_decimal(3) == Decimal(3)
    value = Decimal("2")
    assert as_decimal(value) is value


@pytest.mark.parametrize("value", [1.5, True, None])
def test_as_decimal_rejects_floats_and_others(value):
    with pytest.raises(TypeError):
        as_decimal(value)


@pytest.mark.parametrize(
    "value, expected",
    [("35.0100", "35.01"), ("0.00", "0"), ("1E+2", "100"), ("120", "120"), ("0E-8", "0"), ("1.23456789", "1.23456789")],
)
def test_to_plain_str(value, expected):
    assert to_plain_str(Decimal(value)) == expected
