"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class UnknownCurrencyError(ValidationError):
    """Currency code is not present in the currency registry."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(unknown_currency(code))


class InvalidAmountError(ValidationError):
    """Amount, duration, factor or rate is not a finite, well-formed number."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        super().__init__(invalid_amount(value, reason))


class CurrencyMismatchError(DomainError):
    """Arithmetic between two different currencies without a conversion."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(currency_mismatch(left, right))


class MissingRateError(DomainError):
    """Exchange rate table has no entry for a currency that needs converting."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(missing_rate(code))


def unknown_currency(code: object) -> str:
    """Return message for a currency code missing from the registry."""
    return f"Unknown currency '{code}'"


def invalid_amount(value: object, reason: str | None = None) -> str:
    """Return message for a malformed or non-finite amount."""
    message = f"Invalid amount '{value}'"
    if reason:
        message = f"{message}: {reason}"
    return message


def currency_mismatch(left: str, right: str) -> str:
    """Return message for arithmetic across currencies."""
    return f"Cannot combine {left} and {right} amounts without converting first"


def missing_rate(code: str) -> str:
    """Return message for a rate table lacking a currency."""
    return f"No exchange rate for {code}"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def period_not_found(period_id: int) -> str:
    """Return message for missing billing period."""
    return f"Period {period_id} not found"


def timeslot_not_found(timeslot_id: int) -> str:
    """Return message for missing timeslot."""
    return f"Timeslot {timeslot_id} not found"


def no_open_period(client_id: int) -> str:
    """Return message when a client has no open billing period."""
    return f"No open period found for client {client_id}"


def duplicate_client_name(name: str) -> str:
    """Return message for duplicate client name."""
    return f"Client with name '{name}' already exists"
