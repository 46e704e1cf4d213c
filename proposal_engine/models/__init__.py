"""Models package - All Pydantic models organized by domain."""

from proposal_engine.models.enums import (
    ServiceCategory,
    ProposalTemplate,
    ProposalStatus,
    ContactBrand,
    SERVICE_LABELS,
    parse_services,
    canonical_order,
)
from proposal_engine.models.fields import FieldRecord, Dependent
from proposal_engine.models.content import ServiceContent, ServiceSection, ProcessStep
from proposal_engine.models.fees import (
    FeePreset,
    FeeTotals,
    FeeBreakdown,
    FeeLine,
    FeeTable,
    InfoTable,
    CurrencyConversion,
)
from proposal_engine.models.document import (
    ProposalDocument,
    DocumentSection,
    Paragraph,
    BulletList,
    Table,
    TableRow,
    Definition,
    OverviewParty,
    Cover,
    Office,
    Footer,
    FooterEntry,
    ClientInfo,
)
from proposal_engine.models.proposal import (
    ProposalSnapshot,
    DraftProposal,
    SentProposal,
    ProposalState,
    CustomerRecord,
    CustomerProposal,
)

__all__ = [
    # Enums
    "ServiceCategory",
    "ProposalTemplate",
    "ProposalStatus",
    "ContactBrand",
    "SERVICE_LABELS",
    "parse_services",
    "canonical_order",
    # Field models
    "FieldRecord",
    "Dependent",
    # Content models
    "ServiceContent",
    "ServiceSection",
    "ProcessStep",
    # Fee models
    "FeePreset",
    "FeeTotals",
    "FeeBreakdown",
    "FeeLine",
    "FeeTable",
    "InfoTable",
    "CurrencyConversion",
    # Document models
    "ProposalDocument",
    "DocumentSection",
    "Paragraph",
    "BulletList",
    "Table",
    "TableRow",
    "Definition",
    "OverviewParty",
    "Cover",
    "Office",
    "Footer",
    "FooterEntry",
    "ClientInfo",
    # Lifecycle models
    "ProposalSnapshot",
    "DraftProposal",
    "SentProposal",
    "ProposalState",
    "CustomerRecord",
    "CustomerProposal",
]
