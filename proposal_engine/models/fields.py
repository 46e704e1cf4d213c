"""Field record models - intake answers and editable fee line items."""

from datetime import date
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from proposal_engine.core.config import (
    clean_text,
    is_skip_answer,
    parse_date_value,
    parse_float_value,
    parse_int_value,
)

TEXT_FIELDS = (
    "proposal_title",
    "property_description",
    "additional_costs_note",
    "payment_terms_note",
    "nationality",
    "country",
    "id_passport_number",
    "purpose_of_stay",
    "employment_type",
    "previous_refusals",
    "dependent_name",
    "dependent_nationality",
    "dependent_occupation",
    "company_type",
    "business_activity",
    "situation_description",
)

INT_FIELDS = (
    "consultation_fee",
    "service_fee",
    "poa_fee",
    "translation_fee",
    "other_fees",
    "number_of_applicants",
    "number_of_family_members",
    "property_completion_year",
    "number_of_shareholders",
    "share_capital",
)

FLOAT_FIELDS = (
    "transaction_value_eur",
    "service_fee_pct",
)

TRUE_ANSWERS = {"true", "yes", "y", "1"}
FALSE_ANSWERS = {"false", "no", "n", "0"}


class Dependent(BaseModel):
    """A family member covered by the same proposal."""
    name: Optional[str] = Field(None, description="Full name")
    nationality: Optional[str] = Field(None, description="Nationality")
    occupation: Optional[str] = Field(None, description="Occupation")
    relationship: Optional[str] = Field(None, description="Relationship to the main applicant")

    class Config:
        frozen = True

    @field_validator("name", "nationality", "occupation", "relationship", mode="before")
    @classmethod
    def _clean(cls, value: Any) -> Optional[str]:
        return clean_text(value)


class FieldRecord(BaseModel):
    """
    Intake answers and fee line items for one proposal.

    Immutable: edits produce a new record via `with_updates`. Accepts the
    customer store's camelCase keys and dumps back to them with `to_store`.
    Blank answers and malformed numbers are stored as None ("unset").
    """

    # Proposal header
    proposal_title: Optional[str] = Field(None, alias="proposalTitle", description="Services Provided title")
    proposal_date: Optional[date] = Field(None, alias="proposalDate", description="Proposal date")

    # Real estate
    property_description: Optional[str] = Field(
        None,
        alias="propertyDescription",
        description="Short description of the property being purchased"
    )
    transaction_value_eur: Optional[float] = Field(
        None,
        alias="transactionValueEUR",
        description="Estimated transaction value in EUR"
    )
    is_off_plan: Optional[bool] = Field(None, alias="isOffPlan", description="Property is off-plan")
    is_move_in_ready: Optional[bool] = Field(None, alias="isMoveInReady", description="Property is move-in ready")
    property_completion_year: Optional[int] = Field(
        None,
        alias="propertyCompletionYear",
        description="Expected construction completion year"
    )

    # Fee line items (Lek)
    consultation_fee: Optional[int] = Field(None, alias="consultationFeeALL", description="Consultation fee")
    service_fee: Optional[int] = Field(None, alias="serviceFeeALL", description="Legal service fee")
    service_fee_pct: Optional[float] = Field(
        None,
        alias="serviceFeePct",
        description="Percentage-based fee, informational"
    )
    poa_fee: Optional[int] = Field(None, alias="poaFeeALL", description="Power of Attorney fee")
    translation_fee: Optional[int] = Field(
        None,
        alias="translationFeeALL",
        description="Documents legal translation and notary fee"
    )
    other_fees: Optional[int] = Field(None, alias="otherFeesALL", description="Other fees")
    additional_costs_note: Optional[str] = Field(
        None,
        alias="additionalCostsNote",
        description="Note shown next to the translation line"
    )
    payment_terms_note: Optional[str] = Field(
        None,
        alias="paymentTermsNote",
        description="Replaces the default payment terms when set"
    )

    # Identity
    nationality: Optional[str] = Field(None, description="Main applicant nationality")
    country: Optional[str] = Field(None, description="Country of residence")
    id_passport_number: Optional[str] = Field(None, alias="idPassportNumber", description="ID or passport number")

    # Immigration
    purpose_of_stay: Optional[str] = Field(None, alias="purposeOfStay", description="Relocation motive")
    employment_type: Optional[str] = Field(None, alias="employmentType", description="Occupation or status")
    number_of_applicants: Optional[int] = Field(None, alias="numberOfApplicants", description="Applicant count")
    number_of_family_members: Optional[int] = Field(
        None,
        alias="numberOfFamilyMembers",
        description="Family members or dependants"
    )
    previous_refusals: Optional[str] = Field(None, alias="previousRefusals", description="Previous visa refusals")
    dependent_name: Optional[str] = Field(None, alias="dependentName", description="Dependent full name")
    dependent_nationality: Optional[str] = Field(
        None,
        alias="dependentNationality",
        description="Dependent nationality"
    )
    dependent_occupation: Optional[str] = Field(
        None,
        alias="dependentOccupation",
        description="Dependent occupation"
    )
    dependents: List[Dependent] = Field(default_factory=list, description="Additional dependents")

    # Company formation
    company_type: Optional[str] = Field(None, alias="companyType", description="Entity type, e.g. SH.P.K.")
    business_activity: Optional[str] = Field(None, alias="businessActivity", description="Business activity")
    number_of_shareholders: Optional[int] = Field(
        None,
        alias="numberOfShareholders",
        description="Shareholder count"
    )
    share_capital: Optional[int] = Field(None, alias="shareCapitalALL", description="Registered capital in Lek")

    # Tax / compliance
    situation_description: Optional[str] = Field(
        None,
        alias="situationDescription",
        description="Matter the client needs assistance with"
    )

    class Config:
        frozen = True
        populate_by_name = True
        extra = "ignore"

    # ===========================================
    # Validators
    # ===========================================

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> Optional[str]:
        return clean_text(value)

    @field_validator(*INT_FIELDS, mode="before")
    @classmethod
    def _parse_int(cls, value: Any) -> Optional[int]:
        return parse_int_value(value)

    @field_validator(*FLOAT_FIELDS, mode="before")
    @classmethod
    def _parse_float(cls, value: Any) -> Optional[float]:
        return parse_float_value(value)

    @field_validator("proposal_date", mode="before")
    @classmethod
    def _parse_date(cls, value: Any) -> Optional[date]:
        return parse_date_value(value)

    @field_validator("is_off_plan", "is_move_in_ready", mode="before")
    @classmethod
    def _parse_bool(cls, value: Any) -> Optional[bool]:
        if value is None or isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in TRUE_ANSWERS:
            return True
        if text in FALSE_ANSWERS:
            return False
        return None

    @field_validator("dependents", mode="before")
    @classmethod
    def _parse_dependents(cls, value: Any) -> List[Any]:
        if not value or not isinstance(value, (list, tuple)):
            return []
        entries = []
        for item in value:
            if isinstance(item, str):
                entries.append({"name": item})
            elif isinstance(item, (dict, Dependent)):
                entries.append(item)
        return entries

    # ===========================================
    # Derived Values
    # ===========================================

    @property
    def has_dependent(self) -> bool:
        """A dependent is present when named or counted."""
        if any(dependent.name for dependent in self.dependents):
            return True
        if not is_skip_answer(self.dependent_name):
            return True
        return (self.number_of_family_members or 0) > 0

    @property
    def dependent_display_name(self) -> Optional[str]:
        """Name of the first dependent, if one was given."""
        if not is_skip_answer(self.dependent_name):
            return self.dependent_name
        for dependent in self.dependents:
            if dependent.name:
                return dependent.name
        return None

    @property
    def applicant_count(self) -> int:
        """Number of applicants, at least 1."""
        count = self.number_of_applicants or 0
        return count if count > 1 else 1

    @property
    def previous_refusal(self) -> Optional[str]:
        """Previous refusal details, or None when the answer was skipped."""
        if is_skip_answer(self.previous_refusals):
            return None
        return self.previous_refusals

    def with_updates(self, **changes: Any) -> "FieldRecord":
        """Return a new validated record with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return FieldRecord.model_validate(data)

    def to_store(self) -> Dict[str, Any]:
        """Serialize with the customer store's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
