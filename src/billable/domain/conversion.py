"""Currency conversion through a common-base rate table.

A rate table maps currency codes to their rate against one implicit base
currency, so any pair can be cross-converted with a single division. The
cross rate is first fixed to ``RATE_SCALE`` fractional digits as an integer,
then applied to the integer amount with exact integer arithmetic and a single
half-up rounding to the target currency's minor units.
"""

from decimal import Decimal, localcontext
from typing import Mapping, Union

from billable.domain.currency import lookup_currency, parse_currency_code
from billable.domain.errors import InvalidAmountError, MissingRateError
from billable.domain.money import Money, round_half_up, to_decimal

ExchangeRates = Mapping[str, Union[Decimal, float, int, str]]

RATE_SCALE = 6


def _rate_for(code: str, rates: ExchangeRates) -> Decimal:
    raw = rates.get(code)
    if raw is None:
        raise MissingRateError(code)
    rate = to_decimal(raw)
    if rate <= 0:
        raise InvalidAmountError(raw, f"exchange rate for {code} must be positive")
    return rate


def _divide_half_up(numerator: int, denominator: int) -> int:
    quotient, remainder = divmod(abs(numerator), denominator)
    if remainder * 2 >= denominator:
        quotient += 1
    return -quotient if numerator < 0 else quotient


def cross_rate(source: str, target: str, rates: ExchangeRates) -> int:
    """Return the source->target rate as an integer scaled by 10**RATE_SCALE.

    Raises:
        MissingRateError: If either currency is absent from ``rates``
        InvalidAmountError: If a rate is not a positive finite number
    """
    source_rate = _rate_for(source, rates)
    target_rate = _rate_for(target, rates)
    with localcontext() as ctx:
        ctx.prec = 60
        ratio = target_rate / source_rate
        return round_half_up(ratio * (10**RATE_SCALE))


def convert(value: Money, target_currency: str, rates: ExchangeRates) -> Money:
    """Convert an amount into another currency.

    Converting into the amount's own currency returns it unchanged without
    consulting ``rates``.

    Args:
        value: Amount to convert
        target_currency: Currency code to convert into
        rates: Rates of each currency against a common base

    Returns:
        Money in the target currency, rounded to whole minor units

    Raises:
        UnknownCurrencyError: If the target currency is not registered
        MissingRateError: If a needed rate is absent from ``rates``
    """
    target = parse_currency_code(target_currency)
    if value.currency == target:
        return value

    scaled_rate = cross_rate(value.currency, target, rates)
    source_units = lookup_currency(value.currency).minor_units
    target_units = lookup_currency(target).minor_units

    amount = _divide_half_up(
        value.amount * scaled_rate * target_units,
        (10**RATE_SCALE) * source_units,
    )
    return Money(amount, target)
