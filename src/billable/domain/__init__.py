"""Domain layer for billable application.

The monetary core is re-exported here; services live in their own modules
(``billable.domain.client`` and friends) because they depend on the database
interface.
"""

from billable.domain.currency import (
    CurrencyInfo,
    lookup_currency,
    parse_currency_code,
    list_currencies,
)
from billable.domain.money import (
    Money,
    from_major_units,
    to_minor_units,
    add,
    subtract,
    multiply_by_scalar,
    zero,
)
from billable.domain.conversion import ExchangeRates, convert, cross_rate
from billable.domain.aggregation import (
    sum_money,
    slots_to_money,
    compute_period_aggregate,
    compare_aggregates,
    sum_period_totals,
)
from billable.domain.formatting import format_money, format_hours, format_diff

__all__ = [
    "CurrencyInfo",
    "lookup_currency",
    "parse_currency_code",
    "list_currencies",
    "Money",
    "from_major_units",
    "to_minor_units",
    "add",
    "subtract",
    "multiply_by_scalar",
    "zero",
    "ExchangeRates",
    "convert",
    "cross_rate",
    "sum_money",
    "slots_to_money",
    "compute_period_aggregate",
    "compare_aggregates",
    "sum_period_totals",
    "format_money",
    "format_hours",
    "format_diff",
]
