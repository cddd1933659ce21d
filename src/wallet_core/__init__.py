__version__ = "0.0.1"

from wallet_core.domain.monetary.amount import Amount, sum_amounts
from wallet_core.domain.monetary.amount_errors import AmountFormatError, AmountOverflowError, CurrencyMismatchError, FormatErrorKind
from wallet_core.domain.monetary.amount_parser import is_valid_amount_str
from wallet_core.domain.monetary.currency_specification import CurrencySpecification

__all__ = [
    "Amount",
    "AmountFormatError",
    "AmountOverflowError",
    "CurrencyMismatchError",
    "CurrencySpecification",
    "FormatErrorKind",
    "is_valid_amount_str",
    "sum_amounts",
]
