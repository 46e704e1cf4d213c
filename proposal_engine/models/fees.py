"""Fee models - presets, breakdowns and per-template fee tables."""

from typing import List, Optional
from pydantic import BaseModel, Field


class FeePreset(BaseModel):
    """Default fee amounts for one service category, in Lek."""
    consultation_fee: int = Field(0, description="Consultation fee")
    service_fee: int = Field(0, description="Legal service fee")
    poa_fee: int = Field(0, description="Power of Attorney fee")
    translation_fee: int = Field(0, description="Translation and notary fee")

    class Config:
        frozen = True


class CurrencyConversion(BaseModel):
    """A Lek total converted into one foreign currency."""
    currency: str = Field(..., description="ISO currency code")
    rate: float = Field(..., description="Units of currency per 1 ALL")
    amount: float = Field(..., description="Unrounded converted amount")
    rate_display: str = Field(..., description="Rate to 8 decimals, e.g. '1.00 ALL = 0.01037032 EUR'")
    amount_display: str = Field(..., description="Amount to 2 decimals with thousands separators")

    class Config:
        frozen = True

    @property
    def rounded_amount(self) -> float:
        return round(self.amount, 2)


class FeeTotals(BaseModel):
    """Subtotals, total and foreign-currency totals of a fee table."""
    service_subtotal: int = Field(0, description="Service fees subtotal")
    additional_subtotal: int = Field(0, description="Additional costs subtotal")
    total_minor_units: int = Field(0, description="Final total in Lek")
    total_eur: float = Field(0.0, description="Total in EUR, 2 decimals")
    total_usd: float = Field(0.0, description="Total in USD, 2 decimals")
    total_gbp: float = Field(0.0, description="Total in GBP, 2 decimals")

    class Config:
        frozen = True


class FeeBreakdown(FeeTotals):
    """Generic fee breakdown built from editable fee line items."""
    consultation_fee: int = Field(0, description="Consultation fee")
    service_fee: int = Field(0, description="Legal service fee")
    poa_fee: int = Field(0, description="Power of Attorney fee")
    translation_fee: int = Field(0, description="Translation and notary fee")
    other_fees: int = Field(0, description="Other fees")


class FeeLine(BaseModel):
    """A row of a service or additional-costs table."""
    description: str = Field(..., description="Row description")
    details: List[str] = Field(default_factory=list, description="Included activities")
    note: Optional[str] = Field(None, description="Secondary line under the description")
    units: Optional[int] = Field(None, description="Quantity, when the table shows units")
    unit_cost: Optional[int] = Field(None, description="Cost per unit in Lek")
    value: int = Field(..., description="Row value in Lek")

    class Config:
        frozen = True


class InfoTable(BaseModel):
    """A table shown for information only; never summed into totals."""
    title: str = Field(..., description="Table caption")
    intro: Optional[str] = Field(None, description="Paragraph shown before the table")
    columns: List[str] = Field(default_factory=list, description="Column headers")
    rows: List[List[str]] = Field(default_factory=list, description="Pre-formatted cells")
    note: Optional[str] = Field(None, description="Paragraph shown after the table")

    class Config:
        frozen = True


class FeeTable(BaseModel):
    """Fee table of one rendered proposal."""
    service_lines: List[FeeLine] = Field(default_factory=list, description="Service fee rows")
    additional_lines: List[FeeLine] = Field(default_factory=list, description="Additional cost rows")
    totals: FeeTotals = Field(..., description="Subtotals and totals")
    total_label: str = Field("FINAL COST TOTAL", description="Label of the grand total row")
    conversions: List[CurrencyConversion] = Field(
        default_factory=list,
        description="Grand total in each foreign currency"
    )
    informational: List[InfoTable] = Field(
        default_factory=list,
        description="Tables displayed but excluded from totals"
    )

    class Config:
        frozen = True

    @property
    def total(self) -> int:
        return self.totals.total_minor_units

    @property
    def service_table_has_units(self) -> bool:
        return any(line.units is not None for line in self.service_lines)
