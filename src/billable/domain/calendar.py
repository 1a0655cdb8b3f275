"""Date arithmetic for months and billing periods."""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from billable.domain.entities import BillingPeriod


def month_bounds(day: date) -> tuple[date, date]:
    """First and last day of the month containing ``day``."""
    start = day.replace(day=1)
    end = start + relativedelta(months=1) - timedelta(days=1)
    return start, end


def previous_month(day: date) -> date:
    """First day of the month before the one containing ``day``."""
    return day.replace(day=1) - relativedelta(months=1)


def billing_period_end(start: date, billing_period: BillingPeriod) -> date:
    """Last day of a billing period starting on ``start``."""
    if billing_period == BillingPeriod.WEEKLY:
        return start + timedelta(days=6)
    if billing_period == BillingPeriod.BIWEEKLY:
        return start + timedelta(days=13)
    return start + relativedelta(months=1) - timedelta(days=1)
