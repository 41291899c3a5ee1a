"""Unit tests for the currency registry and the Currency/Amount value types."""
from __future__ import annotations

import dataclasses

import pytest

from pretty_money import (
    CURRENCIES,
    EUR,
    JPY,
    USD,
    Amount,
    Currency,
    PrettyMoneyError,
    UnknownCurrencyError,
    get_currency,
)


class TestGetCurrency:
    def test_exact_code(self):
        assert get_currency("USD") is USD

    def test_lowercase_code(self):
        assert get_currency("eur") is EUR

    def test_surrounding_whitespace(self):
        assert get_currency(" jpy ") is JPY

    def test_unknown_code(self):
        with pytest.raises(UnknownCurrencyError, match="XYZ"):
            get_currency("XYZ")

    def test_empty_code(self):
        with pytest.raises(UnknownCurrencyError):
            get_currency("")

    def test_error_is_lookup_error(self):
        try:
            get_currency("ABC")
            assert False, "Should have raised"
        except LookupError as e:
            assert isinstance(e, PrettyMoneyError)
            assert e.code == "UNKNOWN_CURRENCY"
            assert e.iso_code == "ABC"


class TestRegistry:
    def test_well_known_entries(self):
        assert USD.symbol == "$"
        assert USD.decimal_digits == 2
        assert EUR.symbol == "\u20ac"
        assert JPY.decimal_digits == 0
        assert CURRENCIES["KWD"].decimal_digits == 3

    @pytest.mark.parametrize("code", sorted(CURRENCIES))
    def test_entry_shape(self, code):
        currency = CURRENCIES[code]
        assert currency.iso_code == code
        assert len(code) == 3 and code.isupper()
        assert currency.symbol
        assert 0 <= currency.decimal_digits <= 3


class TestValueTypes:
    def test_currency_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            USD.symbol = "US$"

    def test_amount_is_frozen(self):
        amount = Amount(USD, 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            amount.value = 11

    def test_amount_equality(self):
        assert Amount(EUR, 1.5) == Amount(EUR, 1.5)

    def test_currency_name_optional(self):
        assert Currency(iso_code="XTS", symbol="T", decimal_digits=2).name is None
