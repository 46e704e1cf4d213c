"""Currency conversion and number formatting for fee tables."""

from typing import Dict, List

from proposal_engine.models.fees import CurrencyConversion, FeeTotals

# Units of foreign currency per 1 ALL. Fixed, indicative rates.
EUR_RATE = 0.01037032
USD_RATE = 0.01212463
GBP_RATE = 0.00902409

RATES: Dict[str, float] = {
    "EUR": EUR_RATE,
    "USD": USD_RATE,
    "GBP": GBP_RATE,
}

BASE_CURRENCY = "ALL"
CONVERSION_SOURCE_NOTE = "Conversion Source: https://www.xe.com/ (indicative rates — subject to change)"


def format_amount(value: float, decimals: int = 2) -> str:
    """Format a number with thousands separators and a fixed number of decimals."""
    return f"{value:,.{decimals}f}"


def format_lek(value: int) -> str:
    """Format a whole-Lek amount, e.g. '45,000 ALL'."""
    return f"{format_amount(value, 0)} {BASE_CURRENCY}"


def convert(total: int, currency: str) -> CurrencyConversion:
    """Convert a Lek total into one foreign currency."""
    rate = RATES[currency]
    amount = total * rate
    return CurrencyConversion(
        currency=currency,
        rate=rate,
        amount=amount,
        rate_display=f"1.00 {BASE_CURRENCY} = {rate:.8f} {currency}",
        amount_display=f"{format_amount(amount, 2)} {currency}",
    )


def convert_all(total: int) -> List[CurrencyConversion]:
    """Convert a Lek total into every supported currency, in table order."""
    return [convert(total, currency) for currency in RATES]


def build_totals(service_subtotal: int, additional_subtotal: int) -> FeeTotals:
    """Totals for a fee table, with foreign totals rounded for display."""
    total = service_subtotal + additional_subtotal
    return FeeTotals(
        service_subtotal=service_subtotal,
        additional_subtotal=additional_subtotal,
        total_minor_units=total,
        total_eur=round(total * EUR_RATE, 2),
        total_usd=round(total * USD_RATE, 2),
        total_gbp=round(total * GBP_RATE, 2),
    )
