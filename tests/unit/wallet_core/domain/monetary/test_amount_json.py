import json

import pytest

from tests.helpers.helper_amount import create_euro_spec
from wallet_core.domain.monetary.amount import Amount
from wallet_core.domain.monetary.amount_errors import AmountFormatError, FormatErrorKind
from wallet_core.domain.monetary.amount_json import AmountJSONEncoder, dumps_amount, loads_amount


def test_amount_encodes_as_canonical_string():
    document = {"amount": Amount("EUR", 1, 50_000_000, create_euro_spec()), "fees": [Amount.zero("EUR")]}
    assert json.loads(json.dumps(document, cls=AmountJSONEncoder)) == {"amount": "EUR:1.5", "fees": ["EUR:0"]}


def test_encoder_rejects_unknown_types():
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=AmountJSONEncoder)


def test_dumps_and_loads():
    amount = Amount("KUDOS", 42, 13_370_000)
    assert dumps_amount(amount) == '"KUDOS:42.1337"'
    assert loads_amount('"KUDOS:42.1337"') == amount


def test_loads_rejects_non_string_document():
    with pytest.raises(AmountFormatError) as exc_info:
        loads_amount("3.5")
    assert exc_info.value.kind == FormatErrorKind.BAD_AMOUNT_FORMAT
