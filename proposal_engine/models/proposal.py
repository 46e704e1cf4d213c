"""Proposal lifecycle models - snapshots, draft/sent state and customer records."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

from proposal_engine.models.enums import (
    ProposalStatus,
    ProposalTemplate,
    ServiceCategory,
    parse_services,
)
from proposal_engine.models.document import ProposalDocument
from proposal_engine.models.fees import FeeTotals
from proposal_engine.models.fields import FieldRecord


class ProposalSnapshot(BaseModel):
    """Frozen copy of the field record and totals taken when a proposal is sent."""
    fields: FieldRecord = Field(..., description="Field record as sent")
    services: List[ServiceCategory] = Field(default_factory=list, description="Service set as sent")
    template: Optional[ProposalTemplate] = Field(None, description="Template used when sent")
    totals: Optional[FeeTotals] = Field(None, description="Fee totals as sent")
    sent_at: Optional[datetime] = Field(None, alias="sentAt", description="Send timestamp")

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_fields(cls, data: Any) -> Any:
        # Older records stored the field record itself as the snapshot.
        if isinstance(data, dict) and "fields" not in data:
            return {"fields": data}
        return data

    def to_store(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DraftProposal(BaseModel):
    """A proposal that has not been sent; renders from the live fields."""
    status: Literal[ProposalStatus.DRAFT] = ProposalStatus.DRAFT
    fields: FieldRecord

    @property
    def render_fields(self) -> FieldRecord:
        return self.fields


class SentProposal(BaseModel):
    """A sent proposal; renders from its snapshot, never from the live fields."""
    status: Literal[ProposalStatus.SENT] = ProposalStatus.SENT
    fields: FieldRecord
    snapshot: ProposalSnapshot
    sent_at: datetime
    expires_at: Optional[datetime] = None

    @property
    def render_fields(self) -> FieldRecord:
        return self.snapshot.fields


ProposalState = Union[DraftProposal, SentProposal]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CustomerRecord(BaseModel):
    """Customer row from the store, limited to what proposals need."""
    customer_id: str = Field(..., alias="customerId", description="Customer ID")
    name: str = Field("", description="Customer name shown on the cover")
    email: Optional[str] = Field(None, description="Contact email")
    services: List[str] = Field(default_factory=list, description="Raw selected service values")
    proposal_fields: Optional[FieldRecord] = Field(None, alias="proposalFields", description="Live fields")
    proposal_sent_at: Optional[datetime] = Field(None, alias="proposalSentAt", description="Send timestamp")
    proposal_expires_at: Optional[datetime] = Field(
        None,
        alias="proposalExpiresAt",
        description="Expiry timestamp"
    )
    proposal_snapshot: Optional[ProposalSnapshot] = Field(
        None,
        alias="proposalSnapshot",
        description="Snapshot taken at send time"
    )

    class Config:
        populate_by_name = True
        extra = "ignore"

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("services", mode="before")
    @classmethod
    def _services_or_empty(cls, value: Any) -> Any:
        # Rows hold null until a service bundle is chosen.
        return [] if value is None else value

    @property
    def service_categories(self) -> List[ServiceCategory]:
        return parse_services(self.services)

    def proposal_state(self) -> ProposalState:
        """Sent only when both the send time and the snapshot exist."""
        fields = self.proposal_fields or FieldRecord()
        if self.proposal_sent_at and self.proposal_snapshot:
            return SentProposal(
                fields=fields,
                snapshot=self.proposal_snapshot,
                sent_at=self.proposal_sent_at,
                expires_at=self.proposal_expires_at,
            )
        return DraftProposal(fields=fields)

    def is_proposal_expired(self, now: Optional[datetime] = None) -> bool:
        if not self.proposal_expires_at:
            return False
        now = _as_utc(now or datetime.now(timezone.utc))
        return _as_utc(self.proposal_expires_at) < now


class CustomerProposal(BaseModel):
    """A customer's proposal as shown to staff or the client portal."""
    customer_id: str = Field(..., description="Customer ID")
    status: ProposalStatus = Field(..., description="Draft or sent")
    expired: bool = Field(False, description="Sent proposal past its expiry")
    sent_at: Optional[datetime] = Field(None, description="Send timestamp")
    expires_at: Optional[datetime] = Field(None, description="Expiry timestamp")
    document: ProposalDocument = Field(..., description="Rendered proposal")
