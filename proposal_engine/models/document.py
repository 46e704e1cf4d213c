"""Document tree models - the render output handed to exporters."""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from proposal_engine.models.enums import ProposalTemplate, ServiceCategory
from proposal_engine.models.fees import FeeTable


# ===========================================
# Content Blocks
# ===========================================

class Paragraph(BaseModel):
    """A paragraph of running text."""
    kind: Literal["paragraph"] = "paragraph"
    text: str
    strong: bool = False


class BulletList(BaseModel):
    """A bullet list with an optional caption and lead-in sentence."""
    kind: Literal["bullets"] = "bullets"
    caption: Optional[str] = None
    intro: Optional[str] = None
    items: List[str] = Field(default_factory=list)


class TableRow(BaseModel):
    """A table row; `details` render as a nested list under the first cell."""
    cells: List[str]
    details: List[str] = Field(default_factory=list)
    note: Optional[str] = None
    emphasis: bool = False


class Table(BaseModel):
    """A table with pre-formatted cells."""
    kind: Literal["table"] = "table"
    caption: Optional[str] = None
    intro: Optional[str] = None
    columns: List[str] = Field(default_factory=list)
    rows: List[TableRow] = Field(default_factory=list)
    note: Optional[str] = None


Block = Annotated[Union[Paragraph, BulletList, Table], Field(discriminator="kind")]


# ===========================================
# Sections
# ===========================================

class DocumentSection(BaseModel):
    """
    A document section.

    Top-level sections are always numbered by the renderer. Subsections get
    "<n>.<k>" numbers only when `numbered` is set; otherwise their title is
    shown as written.
    """
    number: Optional[str] = Field(None, description="Assigned by the renderer")
    title: str
    numbered: bool = True
    blocks: List[Block] = Field(default_factory=list)
    subsections: List["DocumentSection"] = Field(default_factory=list)

    @property
    def heading(self) -> str:
        if self.number and "." in self.number:
            return f"{self.number} {self.title}"
        if self.number:
            return f"{self.number} — {self.title}"
        return self.title


# ===========================================
# Cover, Overview and Footer
# ===========================================

class Definition(BaseModel):
    """A label/value pair."""
    label: str
    value: str


class OverviewParty(BaseModel):
    """One column of the case overview (main applicant, dependent)."""
    title: str
    rows: List[Definition] = Field(default_factory=list)


class Office(BaseModel):
    city: str
    address: str


class Cover(BaseModel):
    """Cover block of the proposal."""
    title: str = "Service Proposal"
    client_name: str = ""
    client_id: str = ""
    services_title: Optional[str] = None
    offices: List[Office] = Field(default_factory=list)
    contacts: List[str] = Field(default_factory=list)
    date_display: Optional[str] = None


class FooterEntry(BaseModel):
    name: str
    tagline: str
    website: str


class Footer(BaseModel):
    """Business-group footer or a single contact line."""
    title: Optional[str] = None
    entries: List[FooterEntry] = Field(default_factory=list)
    line: Optional[str] = None


class ClientInfo(BaseModel):
    """Who the proposal is presented to."""
    name: str = Field("", description="Client or customer name")
    customer_id: str = Field("", description="Client ID shown on the cover")


# ===========================================
# Document
# ===========================================

class ProposalDocument(BaseModel):
    """A fully rendered proposal. Recomputed on every render."""
    template: ProposalTemplate = Field(..., description="Template the document was built from")
    services: List[ServiceCategory] = Field(default_factory=list, description="Selected categories")
    cover: Cover = Field(..., description="Cover block")
    case_overview: List[OverviewParty] = Field(default_factory=list, description="Case overview parties")
    sections: List[DocumentSection] = Field(default_factory=list, description="Numbered sections")
    fee_table: FeeTable = Field(..., description="Fee table feeding the fees section")
    footer: Footer = Field(default_factory=Footer, description="Footer block")

    def section_numbers(self) -> List[int]:
        """Top-level section numbers, in document order."""
        return [int(section.number) for section in self.sections if section.number]

    def find_section(self, title: str) -> Optional[DocumentSection]:
        """First top-level section with the given title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None
