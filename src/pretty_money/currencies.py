"""Static currency registry.

ISO 4217 code, display symbol and number of minor-unit digits for the
currencies the formatter ships with. Lookups are case-insensitive.
"""
from __future__ import annotations

from .errors import UnknownCurrencyError
from .types import Currency

_TABLE = [
    # (iso_code, symbol, decimal_digits, name)
    ("USD", "$", 2, "US Dollar"),
    ("EUR", "\u20ac", 2, "Euro"),            # €
    ("GBP", "\u00a3", 2, "Pound Sterling"),  # £
    ("JPY", "\u00a5", 0, "Yen"),             # ¥
    ("CHF", "CHF", 2, "Swiss Franc"),
    ("SEK", "kr", 2, "Swedish Krona"),
    ("NOK", "kr", 2, "Norwegian Krone"),
    ("DKK", "kr", 2, "Danish Krone"),
    ("ISK", "kr", 0, "Iceland Krona"),
    ("CAD", "$", 2, "Canadian Dollar"),
    ("AUD", "$", 2, "Australian Dollar"),
    ("NZD", "$", 2, "New Zealand Dollar"),
    ("SGD", "$", 2, "Singapore Dollar"),
    ("HKD", "$", 2, "Hong Kong Dollar"),
    ("MXN", "$", 2, "Mexican Peso"),
    ("CLP", "$", 0, "Chilean Peso"),
    ("BRL", "R$", 2, "Brazilian Real"),
    ("CNY", "\u00a5", 2, "Yuan Renminbi"),   # ¥
    ("KRW", "\u20a9", 0, "Won"),             # ₩
    ("INR", "\u20b9", 2, "Indian Rupee"),    # ₹
    ("RUB", "\u20bd", 2, "Russian Ruble"),   # ₽
    ("TRY", "\u20ba", 2, "Turkish Lira"),    # ₺
    ("PLN", "z\u0142", 2, "Zloty"),          # zł
    ("CZK", "K\u010d", 2, "Czech Koruna"),   # Kč
    ("HUF", "Ft", 2, "Forint"),
    ("ZAR", "R", 2, "Rand"),
    ("BHD", "BD", 3, "Bahraini Dinar"),
    ("JOD", "JD", 3, "Jordanian Dinar"),
    ("KWD", "KD", 3, "Kuwaiti Dinar"),
    ("OMR", "OMR", 3, "Rial Omani"),
    ("TND", "DT", 3, "Tunisian Dinar"),
]

CURRENCIES: dict[str, Currency] = {
    code: Currency(iso_code=code, symbol=symbol, decimal_digits=digits, name=name)
    for code, symbol, digits, name in _TABLE
}

USD = CURRENCIES["USD"]
EUR = CURRENCIES["EUR"]
GBP = CURRENCIES["GBP"]
JPY = CURRENCIES["JPY"]
CHF = CURRENCIES["CHF"]


def get_currency(code: str) -> Currency:
    """Look up a currency by ISO code.

    Raises:
        UnknownCurrencyError: if the code is empty or not in the registry.
    """
    key = (code or "").strip().upper()
    try:
        return CURRENCIES[key]
    except KeyError:
        raise UnknownCurrencyError(code) from None
