"""Monetary amount formatting.

Pretty print amounts like ``$ 34.50``, ``USD 3,456.29`` or ``32 433 938.23 EUR``.

render() runs five stages, each usable on its own:

1. split_sign                   -- sign marker and unsigned magnitude
2. to_fixed                     -- fixed precision, half away from zero
3. group_digits / apply_sign    -- thousands grouping of the integer digits
4. substitute_decimal_separator -- swap the decimal point
5. affix_currency               -- symbol or ISO code, prefix or suffix
"""
from __future__ import annotations

import logging
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG, FormatConfig
from .currencies import get_currency
from .errors import InvalidAmountError

if TYPE_CHECKING:
    from .types import Amount, Currency, Number

logger = logging.getLogger(__name__)

_GROUP_SIZE = 3
_COMPACT_MAX_DIGITS = 4


def render(amount: Amount, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Pretty print an amount, using DEFAULT_CONFIG unless a config is given."""
    return render_value(amount.currency, amount.value, config)


def render_value(currency: Currency, value: Number, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Pretty print a bare value in the given currency."""
    sign, magnitude = split_sign(value)
    fixed = to_fixed(magnitude, currency.decimal_digits, config.show_decimals)
    integer, point, fraction = fixed.partition(".")
    numeric = apply_sign(sign, group_digits(integer, config))
    numeric += substitute_decimal_separator(point + fraction, config)
    return affix_currency(numeric, currency, config)


def format_amount(value: Number, currency_code: str, config: FormatConfig | None = None) -> str:
    """Pretty print a value given the ISO code of its currency.

    Raises:
        UnknownCurrencyError: if currency_code is not in the registry.
    """
    return render_value(get_currency(currency_code), value, config or DEFAULT_CONFIG)


def split_sign(value: Number) -> tuple[str, Decimal]:
    """Split a value into its sign marker ("-", "+" or "") and unsigned magnitude.

    Floats go through their shortest repr, so 0.95 is read as Decimal("0.95")
    rather than its binary expansion. Ints and Decimals convert directly, and
    bools count as 0 and 1. Negative zero keeps its "-".
    """
    if isinstance(value, str):
        text = value.strip()
        sign = ""
        if text[:1] in ("-", "+"):
            sign, text = text[0], text[1:]
        try:
            magnitude = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(value) from None
        if magnitude.is_signed():
            raise InvalidAmountError(value)
    else:
        number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
        sign = "-" if number.is_signed() else ""
        magnitude = number.copy_abs()
    if magnitude.is_nan():
        magnitude = Decimal("NaN")
    return sign, magnitude


def to_fixed(magnitude: Decimal, decimal_digits: int, show_decimals: bool = True) -> str:
    """Render an unsigned magnitude with a fixed number of fractional digits.

    Without show_decimals the magnitude is rounded to one decimal first and
    then truncated, so 0.95 gives "1" and 25.50 gives "25".
    """
    if not magnitude.is_finite():
        logger.debug("Non-finite amount %s rendered verbatim", magnitude)
        return "nan" if magnitude.is_nan() else "inf"

    places = decimal_digits if show_decimals else 1
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, magnitude.adjusted() + places + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        rounded = magnitude.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    fixed = format(rounded, "f")

    if not show_decimals:
        return fixed.partition(".")[0]
    return fixed


def group_digits(integer_digits: str, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Insert config.large_amount_separator between groups of three digits.

    Only the integer digits are passed in. With compact_four_digit_amounts,
    runs of four digits or fewer are returned unchanged.
    """
    if config.compact_four_digit_amounts and len(integer_digits) <= _COMPACT_MAX_DIGITS:
        return integer_digits
    return _intersperse_every(_GROUP_SIZE, config.large_amount_separator, integer_digits)


def apply_sign(sign: str, text: str) -> str:
    return sign + text


def substitute_decimal_separator(text: str, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Replace the first "." in text with config.decimal_separator."""
    if config.decimal_separator == ".":
        return text
    return text.replace(".", config.decimal_separator, 1)


def affix_currency(numeric: str, currency: Currency, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Attach the currency symbol or ISO code to a rendered number.

    Priority: symbol prefix, then ISO code suffix, then ISO code prefix.
    """
    if config.use_currency_symbol:
        return f"{currency.symbol} {numeric}"
    if config.suffix_iso_code:
        return f"{numeric} {currency.iso_code}"
    return f"{currency.iso_code} {numeric}"


def _intersperse_every(n: int, separator: str, digits: str) -> str:
    """Join digits in groups of n counted from the right."""
    head = len(digits) % n or n
    groups = [digits[:head]] + [digits[i:i + n] for i in range(head, len(digits), n)]
    return separator.join(groups)
