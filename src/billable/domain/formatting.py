"""Display formatting for amounts, hours and period-over-period diffs."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from billable.domain.currency import lookup_currency
from billable.domain.money import Money, Number, to_decimal

# en-US display symbols; other currencies are shown with their code.
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "CNY": "CN¥",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
    "TWD": "NT$",
    "INR": "₹",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
}


def currency_prefix(code: str) -> str:
    """Symbol placed before an amount, e.g. "$" or "SEK "."""
    return CURRENCY_SYMBOLS.get(code, f"{code} ")


def format_money(value: Money) -> str:
    """Format an amount for display, e.g. ``Money(-12000, "USD")`` -> "-$120.00".

    The number of fraction digits follows the currency (none for JPY, three
    for KWD). Only en-US rendering is supported: the symbol comes from the
    fixed CURRENCY_SYMBOLS table, the thousands separator is always a comma
    and there is no locale lookup.
    """
    digits = lookup_currency(value.currency).display_digits
    quantum = Decimal(1).scaleb(-digits)
    major = value.to_decimal().quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if major < 0 else ""
    return f"{sign}{currency_prefix(value.currency)}{abs(major):,.{digits}f}"


def format_hours(hours: Number) -> str:
    """Format hours without trailing zeros ("2.50" -> "2.5", "3.0" -> "3")."""
    value = to_decimal(hours)
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


def format_diff(value: Union[Money, Number]) -> str:
    """Format a "since last period" difference with an explicit sign.

    Money is rendered with format_money and numbers as hours; a string is
    taken as already formatted. Non-negative values get a leading "+",
    negative ones keep their "-".
    """
    if isinstance(value, Money):
        text = format_money(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        text = format_hours(value)

    if text.startswith("-"):
        return text
    return f"+{text}"
