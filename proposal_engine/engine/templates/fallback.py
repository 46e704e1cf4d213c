"""Generic proposal built from composed service content and editable fee fields."""

from typing import List, Optional

from proposal_engine.core.exceptions import ProposalEngineError
from proposal_engine.engine.currency import build_totals, format_amount
from proposal_engine.engine.templates.base import (
    FEES_AND_COSTS,
    IMPORTANT_NOTES,
    NEXT_STEPS,
    PAYMENT_TERMS,
    PROCESS_OVERVIEW,
    REQUIRED_DOCUMENTS,
    SCOPE_OF_SERVICES,
    TIMELINE_OVERVIEW,
    ProposalTemplateBuilder,
    build_fee_table,
    definition,
    fee_blocks,
    group_blocks,
)
from proposal_engine.models.content import ServiceContent
from proposal_engine.models.document import BulletList, DocumentSection, OverviewParty, Paragraph
from proposal_engine.models.enums import ProposalTemplate
from proposal_engine.models.fees import FeeBreakdown, FeeLine, FeeTable
from proposal_engine.models.fields import FieldRecord

TRANSLATION_NOTE_DEFAULT = "to be specified later upon documents collection"


def compute_fee_breakdown(fields: FieldRecord) -> FeeBreakdown:
    """
    Generic fee breakdown from the editable fee fields.

    Unset fields count as 0. Service subtotal is consultation + service;
    additional subtotal is POA + translation + other.
    """
    consultation_fee = fields.consultation_fee or 0
    service_fee = fields.service_fee or 0
    poa_fee = fields.poa_fee or 0
    translation_fee = fields.translation_fee or 0
    other_fees = fields.other_fees or 0

    totals = build_totals(
        consultation_fee + service_fee,
        poa_fee + translation_fee + other_fees,
    )
    return FeeBreakdown(
        consultation_fee=consultation_fee,
        service_fee=service_fee,
        poa_fee=poa_fee,
        translation_fee=translation_fee,
        other_fees=other_fees,
        **totals.model_dump(),
    )


class FallbackTemplate(ProposalTemplateBuilder):
    """Any service set without a bespoke variant."""

    template = ProposalTemplate.FALLBACK
    business_group_footer = False

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        breakdown = compute_fee_breakdown(fields)
        translation_note = fields.additional_costs_note or TRANSLATION_NOTE_DEFAULT

        service_lines = [
            FeeLine(description="Consultation fee", value=breakdown.consultation_fee),
            FeeLine(description="Service fee for the assistance", value=breakdown.service_fee),
        ]
        additional_lines = [
            FeeLine(description="Power of Attorney", unit_cost=breakdown.poa_fee, value=breakdown.poa_fee),
            FeeLine(
                description=f"Documents Legal Translation and Notary ({translation_note})",
                unit_cost=breakdown.translation_fee,
                value=breakdown.translation_fee,
            ),
            FeeLine(description="Other fees", unit_cost=breakdown.other_fees, value=breakdown.other_fees),
        ]
        return build_fee_table(service_lines, additional_lines)

    def shows_case_overview(self, fields: FieldRecord) -> bool:
        # Country alone is not enough to describe the applicant.
        return bool(fields.nationality or fields.employment_type or fields.purpose_of_stay)

    def case_overview(self, fields: FieldRecord, client_name: str) -> List[OverviewParty]:
        rows = [definition("Name", client_name)]
        if fields.nationality:
            rows.append(definition("Nationality", fields.nationality))
        if fields.country:
            rows.append(definition("Country of residence", fields.country))
        if fields.employment_type:
            rows.append(definition("Occupation", fields.employment_type))
        if fields.purpose_of_stay:
            rows.append(definition("Relocation motive", fields.purpose_of_stay))
        return [OverviewParty(title="Main Applicant", rows=rows)]

    def sections(
        self,
        fields: FieldRecord,
        fee_table: FeeTable,
        content: Optional[ServiceContent] = None,
    ) -> List[DocumentSection]:
        if content is None:
            raise ProposalEngineError("The generic proposal needs composed service content")
        text = self.text

        scope_blocks = [Paragraph(text=part) for part in content.scope_paragraph.split("\n\n") if part]
        if fields.transaction_value_eur:
            scope_blocks.append(Paragraph(
                text=f"Total estimated transaction value: EUR {format_amount(fields.transaction_value_eur, 0)}."
            ))

        # Composed headings already carry their "2.<n>" prefix.
        service_subsections = [
            DocumentSection(title=section.heading, numbered=False, blocks=[BulletList(items=list(section.bullets))])
            for section in content.sections
        ]

        fee_section_blocks = [Paragraph(text=content.fee_description)]
        fee_section_blocks.extend(fee_blocks(fee_table))
        fee_section_blocks.extend(group_blocks([text.exclusions]))

        if fields.payment_terms_note:
            payment_blocks = [Paragraph(text=fields.payment_terms_note)]
        else:
            payment_blocks = group_blocks([text.payment_terms])

        sections = [
            DocumentSection(title="Scope of the Proposal", blocks=scope_blocks),
            DocumentSection(title=SCOPE_OF_SERVICES, subsections=service_subsections),
        ]
        if content.has_process_steps:
            sections.append(DocumentSection(
                title=PROCESS_OVERVIEW,
                blocks=[BulletList(caption=step.step, items=list(step.bullets)) for step in content.process_steps],
            ))
        sections.extend([
            DocumentSection(title=REQUIRED_DOCUMENTS, blocks=[BulletList(items=list(content.required_docs))]),
            DocumentSection(title=FEES_AND_COSTS, blocks=fee_section_blocks),
            DocumentSection(title=PAYMENT_TERMS, blocks=payment_blocks),
            DocumentSection(title=TIMELINE_OVERVIEW, blocks=[BulletList(items=list(content.timeline))]),
            DocumentSection(title=IMPORTANT_NOTES, blocks=group_blocks(text.notes)),
            DocumentSection(
                title=NEXT_STEPS,
                blocks=[BulletList(intro=text.next_steps.intro, items=list(content.next_steps))],
            ),
        ])
        return sections
