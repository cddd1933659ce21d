"""Runtime settings of the monetary core.

Values come from the process environment; a `.env` file in the working directory is
loaded first, so local overrides do not need to be exported by hand.

Format of `.env`:
    WALLET_DEFAULT_INPUT_DECIMALS=2
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

from wallet_core.domain.monetary.amount_parser import MAX_FRACTION_LENGTH

logger = logging.getLogger(__name__)

ENV_DEFAULT_INPUT_DECIMALS = "WALLET_DEFAULT_INPUT_DECIMALS"

# Decimal digits a user may type when the currency has no CurrencySpecification
DEFAULT_INPUT_DECIMALS = 2


@dataclass(frozen=True)
class Settings:
    """Settings of the monetary core.

    Attributes:
        default_input_decimals (int): Fraction digits for keypad input without a currency spec.
    """

    default_input_decimals: int = DEFAULT_INPUT_DECIMALS


def _read_int(name: str, default: int, lower: int, upper: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        result = int(raw.strip())
    except ValueError as e:
        raise ValueError(f"Environment variable ${name} must be an integer, but provided value is: '{raw}'") from e

    # Raise: value must be within the supported range
    if not lower <= result <= upper:
        raise ValueError(f"Environment variable ${name} must be between {lower} and {upper}, but provided value is: {result}")

    return result


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process; call `get_settings.cache_clear()` to reload.

    Raises:
        ValueError: If an environment variable holds an invalid value.
    """
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings(
        default_input_decimals=_read_int(ENV_DEFAULT_INPUT_DECIMALS, DEFAULT_INPUT_DECIMALS, 0, MAX_FRACTION_LENGTH),
    )
    logger.debug(f"Loaded settings {settings}")
    return settings
