"""Tests de reglas de precio: parseo, formato CLP e IVA."""
from __future__ import annotations

from decimal import Decimal

import pytest

from gmexpress.domain.pricing import calc_tax, format_price, price_to_number, round_half_up


class TestPriceToNumber:
    def test_strips_symbol_and_separators(self):
        assert price_to_number("$16.990") == 16990

    def test_empty_is_zero(self):
        assert price_to_number("") == 0
        assert price_to_number(None) == 0

    def test_non_numeric_is_zero(self):
        assert price_to_number("Gratis") == 0

    def test_mixed_text(self):
        assert price_to_number("CLP $1.234.567 c/u") == 1234567


class TestFormatPrice:
    def test_thousands_grouping(self):
        assert format_price(16990) == "$16.990"

    def test_small_values(self):
        assert format_price(0) == "$0"
        assert format_price(999) == "$999"

    def test_millions(self):
        assert format_price(1234567) == "$1.234.567"

    def test_custom_symbol_and_separator(self):
        assert format_price(16990, symbol="US$", thousands_sep=",") == "US$16,990"


class TestTax:
    def test_nineteen_percent(self):
        assert calc_tax(2500, 0.19) == 475

    @pytest.mark.parametrize("subtotal,expected", [(50, 10), (150, 29), (1, 0), (0, 0)])
    def test_rounds_half_up(self, subtotal, expected):
        # 50 * 0.19 = 9.5 -> 10
        assert calc_tax(subtotal, 0.19) == expected

    def test_round_half_up(self):
        assert round_half_up(Decimal("2.5")) == 3
        assert round_half_up(Decimal("2.49")) == 2
