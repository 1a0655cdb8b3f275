"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from billable.domain.errors import InvalidAmountError

_SYMBOLS = re.compile(r"[$€£¥₹₩₪₫₱]")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a major-unit amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string as typed by a user

    Returns:
        Decimal amount in major units

    Raises:
        InvalidAmountError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise InvalidAmountError(amount_str, "empty amount")

    text = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    text = _SYMBOLS.sub("", text).replace(",", "").strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidAmountError(amount_str, "not a number") from None

    if not amount.is_finite():
        raise InvalidAmountError(amount_str, "must be finite")
    return -amount if is_negative else amount
