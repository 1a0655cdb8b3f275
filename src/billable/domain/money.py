"""Money value type.

Amounts are held as whole numbers of minor units (cents for USD) so that
addition and subtraction are exact. Anything that can produce a fractional
minor unit (entering a major-unit amount, multiplying by hours) rounds once,
half away from zero (``decimal.ROUND_HALF_UP``).
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, Overflow, localcontext
from typing import Union

from billable.domain.currency import lookup_currency, parse_currency_code
from billable.domain.errors import CurrencyMismatchError, InvalidAmountError

Number = Union[Decimal, int, float, str]

# Enough digits that products of realistic amounts, hours and rates stay exact
# before the final rounding.
_PRECISION = 60

# Largest magnitude a stored minor-unit amount may have (signed 64-bit column).
MAX_MINOR_UNITS = 2**63 - 1


def to_decimal(value: Number) -> Decimal:
    """Convert a user or storage supplied number to a finite Decimal.

    Floats go through ``str`` so that ``12.5`` becomes ``Decimal("12.5")``
    rather than its binary expansion.

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value, "expected a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(value, "not a number") from None
    else:
        raise InvalidAmountError(value, "expected a number")

    if not result.is_finite():
        raise InvalidAmountError(value, "must be finite")
    return result


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, halves away from zero.

    Raises:
        InvalidAmountError: If the integer has more than _PRECISION digits
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        except InvalidOperation:
            raise InvalidAmountError(value, "amount too large") from None


def _bounded(amount: int, source: object) -> int:
    if abs(amount) > MAX_MINOR_UNITS:
        raise InvalidAmountError(source, "amount too large")
    return amount


def _product(value: Decimal, factor: Decimal, source: object) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            return value * factor
        except Overflow:
            raise InvalidAmountError(source, "amount too large") from None


@dataclass(frozen=True)
class Money:
    """An integer number of minor units in a registered currency."""

    amount: int
    currency: str

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmountError(self.amount, "minor-unit amount must be an integer")
        object.__setattr__(self, "currency", parse_currency_code(self.currency))

    def to_decimal(self) -> Decimal:
        """Return the amount in major units (e.g. 1250 USD -> Decimal("12.5"))."""
        minor_units = lookup_currency(self.currency).minor_units
        with localcontext() as ctx:
            ctx.prec = _PRECISION
            return Decimal(self.amount) / Decimal(minor_units)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self):
        return Money(-self.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.to_decimal()} {self.currency}"


def _check_same_currency(a: Money, b: Money) -> None:
    if a.currency != b.currency:
        raise CurrencyMismatchError(a.currency, b.currency)


def from_major_units(amount_major: Number, currency: str) -> Money:
    """Create Money from a major-unit amount such as ``"12.50"``.

    Args:
        amount_major: Amount in major units
        currency: Currency code

    Returns:
        Money holding ``round_half_up(amount_major * base ** exponent)``

    Raises:
        InvalidAmountError: If the amount is malformed or not finite, or its
            minor-unit value does not fit in MAX_MINOR_UNITS
        UnknownCurrencyError: If the currency is not registered
    """
    info = lookup_currency(currency)
    value = to_decimal(amount_major)
    scaled = _product(value, Decimal(info.minor_units), amount_major)
    return Money(_bounded(round_half_up(scaled), amount_major), info.code)


to_minor_units = from_major_units


def zero(currency: str) -> Money:
    """Return a zero amount in the given currency."""
    return Money(0, currency)


def add(a: Money, b: Money) -> Money:
    """Add two amounts of the same currency."""
    _check_same_currency(a, b)
    return Money(a.amount + b.amount, a.currency)


def subtract(a: Money, b: Money) -> Money:
    """Subtract ``b`` from ``a``; the result may be negative."""
    _check_same_currency(a, b)
    return Money(a.amount - b.amount, a.currency)


def multiply_by_scalar(value: Money, factor: Number) -> Money:
    """Multiply an amount by a scalar, e.g. an hourly rate by hours worked.

    The product is rounded to whole minor units with the same rule as
    from_major_units.
    """
    multiplier = to_decimal(factor)
    product = _product(Decimal(value.amount), multiplier, factor)
    return Money(_bounded(round_half_up(product), factor), value.currency)
