"""JSON encoding of amounts.

In JSON documents (contract terms, transaction records, ...) an Amount is a plain string
in canonical form, e.g. `{"amount": "EUR:1.5"}`. Display metadata is never written.
"""

from __future__ import annotations

import json
from typing import Any

from wallet_core.domain.monetary.amount import Amount


class AmountJSONEncoder(json.JSONEncoder):
    """JSONEncoder that writes every Amount as its canonical string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Amount):
            return o.to_json_string()
        return super().default(o)


def dumps_amount(amount: Amount) -> str:
    """Return $amount as a JSON document (a quoted canonical string)."""
    return json.dumps(amount, cls=AmountJSONEncoder)


def loads_amount(document: str) -> Amount:
    """Parse a JSON document holding one canonical amount string.

    Raises:
        AmountFormatError: If the document is not a JSON string or the string is not a
            valid amount.
        json.JSONDecodeError: If $document is not valid JSON.
    """
    return Amount.from_json_string(json.loads(document))
