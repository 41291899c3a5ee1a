"""Error classes for pretty-money."""
from __future__ import annotations


class PrettyMoneyError(Exception):
    """Base error for pretty-money operations."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class UnknownCurrencyError(PrettyMoneyError, LookupError):
    """Raised when an ISO code is not in the currency registry."""

    def __init__(self, iso_code: str):
        super().__init__("UNKNOWN_CURRENCY", f"Unknown currency code: {iso_code!r}")
        self.iso_code = iso_code


class ConfigError(PrettyMoneyError, ValueError):
    """Raised when a FormatConfig field is not well-typed or an override key is unknown."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__("INVALID_CONFIG", message)
        self.field = field


class InvalidAmountError(PrettyMoneyError, ValueError):
    """Raised when a string value cannot be read as a number."""

    def __init__(self, value: str):
        super().__init__("INVALID_AMOUNT", f"Not a numeric amount: {value!r}")
        self.value = value
