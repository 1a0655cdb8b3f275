"""Currency registry.

Every currency the application can bill in is listed here once, with the
base and exponent that define its minor unit (``base ** exponent`` minor units
per major unit). Arithmetic and formatting code always look a currency up
instead of assuming two decimal places.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from billable.domain.errors import UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Minor-unit definition of a single currency."""

    code: str
    base: int
    exponent: int
    name: str
    fraction_digits: Optional[int] = None

    def __post_init__(self):
        if self.base < 2:
            raise ValueError(f"Currency {self.code} base must be >= 2, got {self.base}")
        if self.exponent < 0:
            raise ValueError(
                f"Currency {self.code} exponent must be >= 0, got {self.exponent}"
            )

    @property
    def minor_units(self) -> int:
        """Number of minor units in one major unit."""
        return self.base**self.exponent

    @property
    def display_digits(self) -> int:
        """Fraction digits shown when rendering a major-unit amount."""
        if self.fraction_digits is not None:
            return self.fraction_digits
        return self.exponent if self.base == 10 else 2


def _decimal(code: str, name: str, exponent: int = 2) -> CurrencyInfo:
    return CurrencyInfo(code=code, base=10, exponent=exponent, name=name)


_CURRENCIES = (
    # Major currencies
    _decimal("USD", "US Dollar"),
    _decimal("EUR", "Euro"),
    _decimal("GBP", "Pound Sterling"),
    _decimal("JPY", "Japanese Yen", 0),
    _decimal("CHF", "Swiss Franc"),
    _decimal("CAD", "Canadian Dollar"),
    _decimal("AUD", "Australian Dollar"),
    _decimal("NZD", "New Zealand Dollar"),
    _decimal("CNY", "Chinese Yuan"),
    _decimal("HKD", "Hong Kong Dollar"),
    _decimal("SGD", "Singapore Dollar"),
    # Nordics and Europe
    _decimal("SEK", "Swedish Krona"),
    _decimal("NOK", "Norwegian Krone"),
    _decimal("DKK", "Danish Krone"),
    _decimal("ISK", "Icelandic Krona", 0),
    _decimal("PLN", "Polish Zloty"),
    _decimal("CZK", "Czech Koruna"),
    _decimal("HUF", "Hungarian Forint"),
    _decimal("RON", "Romanian Leu"),
    _decimal("BGN", "Bulgarian Lev"),
    _decimal("TRY", "Turkish Lira"),
    _decimal("UAH", "Ukrainian Hryvnia"),
    # Americas
    _decimal("MXN", "Mexican Peso"),
    _decimal("BRL", "Brazilian Real"),
    _decimal("ARS", "Argentine Peso"),
    _decimal("CLP", "Chilean Peso", 0),
    _decimal("COP", "Colombian Peso"),
    _decimal("PEN", "Peruvian Sol"),
    _decimal("UYU", "Uruguayan Peso"),
    # Asia and Pacific
    _decimal("INR", "Indian Rupee"),
    _decimal("KRW", "South Korean Won", 0),
    _decimal("VND", "Vietnamese Dong", 0),
    _decimal("IDR", "Indonesian Rupiah"),
    _decimal("MYR", "Malaysian Ringgit"),
    _decimal("PHP", "Philippine Peso"),
    _decimal("THB", "Thai Baht"),
    _decimal("TWD", "New Taiwan Dollar"),
    _decimal("PKR", "Pakistani Rupee"),
    _decimal("BDT", "Bangladeshi Taka"),
    # Middle East and Africa
    _decimal("AED", "UAE Dirham"),
    _decimal("SAR", "Saudi Riyal"),
    _decimal("ILS", "Israeli New Shekel"),
    _decimal("EGP", "Egyptian Pound"),
    _decimal("ZAR", "South African Rand"),
    _decimal("NGN", "Nigerian Naira"),
    _decimal("KES", "Kenyan Shilling"),
    _decimal("MAD", "Moroccan Dirham"),
    _decimal("XAF", "Central African CFA Franc", 0),
    _decimal("XOF", "West African CFA Franc", 0),
    # Three decimal currencies
    _decimal("BHD", "Bahraini Dinar", 3),
    _decimal("JOD", "Jordanian Dinar", 3),
    _decimal("KWD", "Kuwaiti Dinar", 3),
    _decimal("OMR", "Omani Rial", 3),
    _decimal("TND", "Tunisian Dinar", 3),
    # Four decimal currencies
    _decimal("CLF", "Chilean Unidad de Fomento", 4),
    # Non-decimal minor units
    CurrencyInfo(code="MGA", base=5, exponent=1, name="Malagasy Ariary"),
    CurrencyInfo(code="MRU", base=5, exponent=1, name="Mauritanian Ouguiya"),
)

CURRENCIES: Mapping[str, CurrencyInfo] = MappingProxyType(
    {currency.code: currency for currency in _CURRENCIES}
)


def _normalize_code(code: object) -> str:
    if not isinstance(code, str):
        raise UnknownCurrencyError(code)
    return code.strip().upper()


def lookup_currency(code: str) -> CurrencyInfo:
    """Look up a currency by code.

    Args:
        code: Currency code, case-insensitive (e.g. "USD", "eur")

    Returns:
        CurrencyInfo for the code

    Raises:
        UnknownCurrencyError: If the code is not in the registry
    """
    normalized = _normalize_code(code)
    currency = CURRENCIES.get(normalized)
    if currency is None:
        raise UnknownCurrencyError(code)
    return currency


def parse_currency_code(code: str) -> str:
    """Validate a currency code and return its canonical upper-case form."""
    return lookup_currency(code).code


def is_known_currency(code: str) -> bool:
    """Return True if the code is in the registry."""
    try:
        lookup_currency(code)
    except UnknownCurrencyError:
        return False
    return True


def list_currencies() -> list[CurrencyInfo]:
    """List all registered currencies ordered by code."""
    return sorted(CURRENCIES.values(), key=lambda currency: currency.code)
