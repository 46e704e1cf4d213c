"""Narrative content models produced by the content composer."""

from typing import List, Optional
from pydantic import BaseModel, Field


class ServiceSection(BaseModel):
    """A headed group of service bullets."""
    heading: str = Field(..., description="Section heading")
    bullets: List[str] = Field(default_factory=list, description="Service bullets")

    class Config:
        frozen = True


class ProcessStep(BaseModel):
    """One step of a process overview."""
    step: str = Field(..., description="Step title, e.g. 'STEP 1: ...'")
    bullets: List[str] = Field(default_factory=list, description="Step activities")

    class Config:
        frozen = True


class ServiceContent(BaseModel):
    """Generated narrative for one category, or the merge of several."""
    scope_paragraph: str = Field(..., description="Scope of the proposal")
    sections: List[ServiceSection] = Field(default_factory=list, description="Scope of services")
    process_steps: Optional[List[ProcessStep]] = Field(
        None,
        description="Step-by-step process overview, when the service has one"
    )
    required_docs: List[str] = Field(default_factory=list, description="Required documents")
    timeline: List[str] = Field(default_factory=list, description="Timeline entries")
    next_steps: List[str] = Field(default_factory=list, description="Next steps")
    fee_description: str = Field("", description="General legal service fee text")

    class Config:
        frozen = True

    @property
    def has_process_steps(self) -> bool:
        return bool(self.process_steps)
