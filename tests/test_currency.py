"""Tests for currency conversion and formatting."""

import pytest

from proposal_engine.engine.currency import (
    RATES,
    build_totals,
    convert,
    convert_all,
    format_amount,
    format_lek,
)


class TestConversion:
    """Tests for convert and convert_all."""

    @pytest.mark.parametrize("total", [0, 60800, 121600, 214200, 1_250_000])
    @pytest.mark.parametrize("currency", list(RATES))
    def test_round_trip(self, total, currency):
        """Dividing a conversion by its rate gives back the Lek total."""
        conversion = convert(total, currency)

        assert conversion.amount / conversion.rate == pytest.approx(total, abs=0.01)

    def test_rate_display_has_eight_decimals(self):
        """Rates are shown per 1 ALL with 8 decimals."""
        conversion = convert(100000, "EUR")

        assert conversion.rate_display == "1.00 ALL = 0.01037032 EUR"

    def test_amount_display(self):
        """Converted amounts use thousands separators and 2 decimals."""
        conversion = convert(100000, "EUR")

        assert conversion.amount_display == "1,037.03 EUR"

    def test_convert_all_order(self):
        """Conversions come out in table order."""
        assert [c.currency for c in convert_all(1000)] == ["EUR", "USD", "GBP"]

    def test_unknown_currency_raises(self):
        """Only the fixed rate table is supported."""
        with pytest.raises(KeyError):
            convert(1000, "CHF")


class TestFormatting:
    """Tests for number formatting."""

    def test_format_lek(self):
        assert format_lek(45000) == "45,000 ALL"
        assert format_lek(0) == "0 ALL"
        assert format_lek(-20000) == "-20,000 ALL"

    def test_format_amount(self):
        assert format_amount(1234567.891) == "1,234,567.89"
        assert format_amount(250000, 0) == "250,000"


class TestBuildTotals:
    """Tests for build_totals."""

    def test_total_is_sum_of_subtotals(self):
        totals = build_totals(45000, 15800)

        assert totals.total_minor_units == 60800
        assert totals.service_subtotal == 45000
        assert totals.additional_subtotal == 15800

    def test_foreign_totals_rounded(self):
        totals = build_totals(100000, 0)

        assert totals.total_eur == 1037.03
        assert totals.total_usd == 1212.46
        assert totals.total_gbp == 902.41
