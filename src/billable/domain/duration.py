"""Parsing of timeslot durations."""

import re
from decimal import Decimal

from billable.domain.errors import InvalidAmountError
from billable.domain.money import to_decimal

_CLOCK_PATTERN = re.compile(r"^(\d+):([0-5]\d)$")


def parse_duration(duration: str | Decimal | int | float) -> Decimal:
    """Parse a duration in hours into a non-negative Decimal.

    Handles:
    - "2" and "2.5" (decimal hours, as stored)
    - "2:30" (hours and minutes)

    Raises:
        InvalidAmountError: If the duration is malformed or negative
    """
    if isinstance(duration, str):
        text = duration.strip()
        if not text:
            raise InvalidAmountError(duration, "empty duration")
        match = _CLOCK_PATTERN.match(text)
        if match:
            hours, minutes = match.groups()
            return Decimal(hours) + Decimal(minutes) / Decimal(60)
        hours = to_decimal(text)
    else:
        hours = to_decimal(duration)

    if hours < 0:
        raise InvalidAmountError(duration, "duration cannot be negative")
    return hours
