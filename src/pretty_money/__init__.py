"""pretty-money — render monetary amounts as human-readable strings."""
from .config import DEFAULT_CONFIG, FormatConfig
from .currencies import CHF, CURRENCIES, EUR, GBP, JPY, USD, get_currency
from .errors import (
    ConfigError,
    InvalidAmountError,
    PrettyMoneyError,
    UnknownCurrencyError,
)
from .format import (
    affix_currency,
    apply_sign,
    format_amount,
    group_digits,
    render,
    render_value,
    split_sign,
    substitute_decimal_separator,
    to_fixed,
)
from .types import Amount, Currency

__all__ = [
    "render",
    "render_value",
    "format_amount",
    "split_sign",
    "to_fixed",
    "group_digits",
    "apply_sign",
    "substitute_decimal_separator",
    "affix_currency",
    "FormatConfig",
    "DEFAULT_CONFIG",
    "Amount",
    "Currency",
    "CURRENCIES",
    "get_currency",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "PrettyMoneyError",
    "UnknownCurrencyError",
    "ConfigError",
    "InvalidAmountError",
]
