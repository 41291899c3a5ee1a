"""Dataclasses for currencies and monetary amounts."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal, str]


@dataclass(frozen=True)
class Currency:
    """A currency as seen by the formatter: ISO code, symbol and minor-unit digits."""
    iso_code: str
    symbol: str
    decimal_digits: int
    name: str | None = None


@dataclass(frozen=True)
class Amount:
    """A numeric value tagged with its currency."""
    currency: Currency
    value: Number

    def __str__(self) -> str:
        from .format import render
        return render(self)
