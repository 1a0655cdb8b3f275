"""Loading exchange rate tables supplied by the user.

Rates are never fetched; they come from a JSON file mapping currency codes to
their rate against a common base (``{"USD": 1.0, "EUR": 0.9}``) and from
``CODE=RATE`` pairs given on the command line.
"""

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from billable.domain.currency import parse_currency_code
from billable.domain.errors import InvalidAmountError, ValidationError
from billable.domain.money import to_decimal


def _validated(code: Any, rate: Any) -> tuple[str, Decimal]:
    currency = parse_currency_code(code)
    value = to_decimal(rate)
    if value <= 0:
        raise InvalidAmountError(rate, f"exchange rate for {currency} must be positive")
    return currency, value


def rates_from_mapping(data: Mapping[str, Any]) -> dict[str, Decimal]:
    """Validate a code -> rate mapping and normalize it to Decimals."""
    rates: dict[str, Decimal] = {}
    for code, rate in data.items():
        currency, value = _validated(code, rate)
        rates[currency] = value
    return rates


def load_rates(path: str | Path) -> dict[str, Decimal]:
    """Load a rate table from a JSON file.

    The file holds either the mapping itself or an object with a ``rates``
    key, the shape most rate APIs return.

    Raises:
        ValidationError: If the file is not a JSON object of rates
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Rates file '{path}' is not valid JSON: {e}")

    if isinstance(data, dict) and isinstance(data.get("rates"), dict):
        data = data["rates"]
    if not isinstance(data, dict):
        raise ValidationError(f"Rates file '{path}' must contain a JSON object")
    return rates_from_mapping(data)


def parse_rate_pairs(pairs: Iterable[str]) -> dict[str, Decimal]:
    """Parse ``CODE=RATE`` strings, e.g. ["USD=1", "EUR=0.9"]."""
    rates: dict[str, Decimal] = {}
    for pair in pairs:
        code, sep, rate = pair.partition("=")
        if not sep:
            raise ValidationError(f"Rate '{pair}' must look like CODE=RATE")
        currency, value = _validated(code, rate)
        rates[currency] = value
    return rates


def build_rates(
    rates_file: Optional[str | Path] = None, pairs: Iterable[str] = ()
) -> dict[str, Decimal]:
    """Combine a rates file and command-line pairs; pairs win on conflicts."""
    rates: dict[str, Decimal] = {}
    if rates_file:
        rates.update(load_rates(rates_file))
    rates.update(parse_rate_pairs(pairs))
    return rates
