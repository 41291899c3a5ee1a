"""Formatting configuration.

FormatConfig is immutable; variants are built from DEFAULT_CONFIG with
``replace()`` or from a plain dict of overrides with ``from_dict()``.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

_FLAG_FIELDS = (
    "show_decimals",
    "compact_four_digit_amounts",
    "use_currency_symbol",
    "suffix_iso_code",
)
_SEPARATOR_FIELDS = ("large_amount_separator", "decimal_separator")


@dataclass(frozen=True)
class FormatConfig:
    """Settings for render().

    Attributes:
        show_decimals: Keep the fractional digits. When False the value is
            rounded to one decimal and then truncated, so 25.50 prints as 25.
        compact_four_digit_amounts: Print four digit amounts as
            ``USD 1000.00`` instead of ``USD 1,000.00``.
        use_currency_symbol: Replace the ISO code with the symbol to produce
            ``$ 23.50`` instead of ``USD 23.50``. Takes priority over
            suffix_iso_code.
        suffix_iso_code: Put the ISO code after the number to produce
            ``23.50 USD`` instead of ``USD 23.50``.
        large_amount_separator: Character between groups of three digits.
        decimal_separator: Character between integer and fractional digits.
    """
    show_decimals: bool = True
    compact_four_digit_amounts: bool = True
    use_currency_symbol: bool = False
    suffix_iso_code: bool = False
    large_amount_separator: str = ","
    decimal_separator: str = "."

    def __post_init__(self):
        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool", field=name)
        # Equal separators, or digit separators, are accepted as-is.
        for name in _SEPARATOR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigError(f"{name} must be a single character", field=name)

    def replace(self, **overrides: Any) -> FormatConfig:
        """Return a copy with the given fields overridden."""
        unknown = set(overrides) - _field_names()
        if unknown:
            raise ConfigError(f"Unknown config field(s): {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_dict(cls, overrides: dict | None = None) -> FormatConfig:
        """Build a config from DEFAULT_CONFIG merged with a dict of overrides."""
        merged = {**dataclasses.asdict(DEFAULT_CONFIG), **(overrides or {})}
        unknown = set(merged) - _field_names()
        if unknown:
            raise ConfigError(f"Unknown config field(s): {', '.join(sorted(unknown))}")
        if overrides:
            logger.debug("FormatConfig overrides: %s", overrides)
        return cls(**merged)


def _field_names() -> set[str]:
    return {f.name for f in dataclasses.fields(FormatConfig)}


# Show decimals, compact four digit amounts, prefix the ISO code,
# comma between thousands, dot before decimals.
DEFAULT_CONFIG = FormatConfig()
