"""Real estate purchase (off-plan) with a fixed fee and a monitoring retainer."""

from typing import List, Optional

from proposal_engine.engine.currency import format_amount
from proposal_engine.engine.templates.base import (
    FEES_AND_COSTS,
    IMPORTANT_NOTES,
    NEXT_STEPS,
    PAYMENT_TERMS,
    REQUIRED_DOCUMENTS,
    SCOPE_OF_SERVICES,
    TIMELINE_OVERVIEW,
    ProposalTemplateBuilder,
    build_fee_table,
    fee_blocks,
    group_blocks,
)
from proposal_engine.engine.texts import (
    REAL_ESTATE_GENERAL_FEE,
    REAL_ESTATE_OBJECTIVES,
    REAL_ESTATE_OFF_PLAN_PARAGRAPH,
    REAL_ESTATE_PHASE_ONE,
    REAL_ESTATE_SERVICES_INTRO,
    REAL_ESTATE_TIMELINE_NOTE,
    TextGroup,
)
from proposal_engine.models.content import ServiceContent
from proposal_engine.models.document import BulletList, DocumentSection, Paragraph
from proposal_engine.models.enums import ProposalTemplate
from proposal_engine.models.fees import FeeLine, FeeTable, InfoTable
from proposal_engine.models.fields import FieldRecord

DEFAULT_SERVICE_FEE = 95_000
MONITORING_FEE_EUR = 50
HOURLY_RATE_EUR = 100

DEFAULT_PROPERTY = "residential property in Albania"

ASSISTANCE_DETAILS = [
    "Legal due diligence of the project, land ownership, construction permit, and developer documentation",
    "Legal review and negotiation of reservation and preliminary sale contracts",
    "Representation and coordination with the real estate agency, developer, notary, and authorities",
    "Legal assistance and presence during notarial signing",
    "Payment coordination and legal safeguards",
]


def monitoring_table() -> InfoTable:
    """Phase 2 retainer terms. Billed separately, never part of the total."""
    return InfoTable(
        title="Phase 2 – Long-Term Legal Monitoring (Monthly Retainer)",
        columns=["Item", "Terms"],
        rows=[
            ["Monitoring fee", f"EUR {MONITORING_FEE_EUR} per month"],
            ["Billing", "payable monthly or quarterly in advance, at the Client's discretion"],
            ["Duration", "from contract execution until project completion, handover, and registration"],
            ["Hourly rate for out-of-scope services", f"EUR {HOURLY_RATE_EUR} / hour"],
        ],
        note=(
            "The monitoring service includes advisory support and reasonable legal communication. Any complex "
            "dispute, prolonged negotiation, formal legal action, or litigation shall fall outside the scope of "
            "monitoring and be billed separately."
        ),
    )


class RealEstateTemplate(ProposalTemplateBuilder):
    """Eight numbered sections with numbered subsections under services and fees."""

    template = ProposalTemplate.REAL_ESTATE

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        service_fee = fields.service_fee if fields.service_fee and fields.service_fee > 0 else DEFAULT_SERVICE_FEE
        service_lines = [
            FeeLine(description="Consultation fee", value=0),
            FeeLine(
                description="Comprehensive legal assistance for off-plan real estate investment, including:",
                details=ASSISTANCE_DETAILS,
                value=service_fee,
            ),
        ]
        additional_lines = [
            FeeLine(
                description="Power of Attorney",
                note="Needed in case of representation without the presence of the client",
                units=0,
                unit_cost=0,
                value=0,
            ),
            FeeLine(
                description="Documents legal Translation and Notary",
                note="To be specified later upon documents collection and calculated based on the documents volume",
                units=0,
                unit_cost=0,
                value=0,
            ),
            FeeLine(description="Other fees", units=0, unit_cost=0, value=0),
        ]
        return build_fee_table(service_lines, additional_lines, informational=[monitoring_table()])

    def scope_paragraph(self, fields: FieldRecord) -> str:
        description = fields.property_description or DEFAULT_PROPERTY
        if fields.transaction_value_eur:
            value = f"EUR {format_amount(fields.transaction_value_eur, 0)}"
        else:
            value = "to be confirmed"
        return (
            "This proposal outlines the provision of comprehensive legal, advisory, and procedural assistance in "
            f"connection with the purchase of a {description}. The total estimated transaction value is {value}."
        )

    def timeline_group(self, fields: FieldRecord) -> TextGroup:
        completion: Optional[str] = None
        if fields.property_completion_year:
            completion = f"expected in {fields.property_completion_year}"
        timeline = self.text.timeline
        return TextGroup(
            intro=timeline.intro,
            items=[
                *timeline.items,
                f"Construction completion & handover: {completion or 'to be confirmed'}",
                "Ownership registration after completion: approx. 15–30 business days",
            ],
        )

    def sections(
        self,
        fields: FieldRecord,
        fee_table: FeeTable,
        content: Optional[ServiceContent] = None,
    ) -> List[DocumentSection]:
        text = self.text

        scope_blocks = [Paragraph(text=self.scope_paragraph(fields))]
        if fields.is_off_plan is not False:
            scope_blocks.append(Paragraph(text=REAL_ESTATE_OFF_PLAN_PARAGRAPH))
        scope_blocks.extend(group_blocks([REAL_ESTATE_OBJECTIVES]))

        service_subsections = [
            DocumentSection(
                title=group.caption,
                blocks=[Paragraph(text=group.intro), BulletList(items=list(group.items))],
            )
            for group in text.scope
        ]

        fee_subsections = [
            DocumentSection(title="General Legal Service Fee", blocks=[Paragraph(text=REAL_ESTATE_GENERAL_FEE)]),
            DocumentSection(
                title="Fees and Costs applied to this specific case",
                blocks=[
                    Paragraph(text="Phase 1 – Transaction & Contractual Assistance (Fixed Fee)", strong=True),
                    Paragraph(text=REAL_ESTATE_PHASE_ONE),
                    *fee_blocks(fee_table),
                ],
            ),
            DocumentSection(
                title=text.exclusions.caption,
                blocks=[BulletList(intro=text.exclusions.intro, items=list(text.exclusions.items))],
            ),
        ]

        timeline_blocks = group_blocks([self.timeline_group(fields)])
        timeline_blocks.append(Paragraph(text=REAL_ESTATE_TIMELINE_NOTE))

        return [
            DocumentSection(title="Scope of the Proposal", blocks=scope_blocks),
            DocumentSection(
                title=SCOPE_OF_SERVICES,
                blocks=[Paragraph(text=REAL_ESTATE_SERVICES_INTRO)],
                subsections=service_subsections,
            ),
            DocumentSection(title=REQUIRED_DOCUMENTS, blocks=group_blocks(text.documents)),
            DocumentSection(title=FEES_AND_COSTS, subsections=fee_subsections),
            DocumentSection(title=PAYMENT_TERMS, blocks=group_blocks([text.payment_terms])),
            DocumentSection(title=TIMELINE_OVERVIEW, blocks=timeline_blocks),
            DocumentSection(title=IMPORTANT_NOTES, blocks=group_blocks(text.notes)),
            DocumentSection(title=NEXT_STEPS, blocks=group_blocks([text.next_steps])),
        ]
