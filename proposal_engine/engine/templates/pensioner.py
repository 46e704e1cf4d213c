"""Residence Permit for Pensioner (with optional Family Reunification)."""

from typing import List

from proposal_engine.engine.templates.base import ProposalTemplateBuilder, build_fee_table, definition
from proposal_engine.engine.texts import TextGroup
from proposal_engine.models.document import OverviewParty
from proposal_engine.models.enums import ProposalTemplate
from proposal_engine.models.fees import FeeLine, FeeTable
from proposal_engine.models.fields import FieldRecord

APPLICANT_SERVICE_FEE = 45_000
DEPENDENT_SERVICE_FEE = 45_000
PERMIT_GOVERNMENT_FEE = 5_100
ID_CARD_COUPON = 5_700
HEALTH_INSURANCE = 5_000

MAIN_APPLICANT_DETAILS = [
    "Documents check and preparation",
    "Employment Contract drafting/adjustment",
    "Residency Permit Application",
    "Follow-up with immigration Office",
    "Assistance with Registry Office",
    "Assistance with Biometric Card and Fingerprints",
]


class PensionerTemplate(ProposalTemplateBuilder):
    """Main applicant as pensioner, plus a dependent when one is present."""

    template = ProposalTemplate.PENSIONER

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        has_dependent = fields.has_dependent
        headcount = 2 if has_dependent else 1
        translation = fields.translation_fee or 0

        service_lines = [
            FeeLine(description="Consultation fee", value=0),
            FeeLine(
                description="Residency service fee – Main applicant – Pensioner",
                details=MAIN_APPLICANT_DETAILS,
                value=APPLICANT_SERVICE_FEE,
            ),
        ]
        additional_lines = [
            FeeLine(
                description="Residency Permit government fee – Pensioner",
                units=1,
                unit_cost=PERMIT_GOVERNMENT_FEE,
                value=PERMIT_GOVERNMENT_FEE,
            ),
        ]
        if has_dependent:
            service_lines.append(FeeLine(
                description="Residency service fee – Dependent – Family Reunification",
                details=["Same procedure as above"],
                value=DEPENDENT_SERVICE_FEE,
            ))
            additional_lines.append(FeeLine(
                description="Residency Permit government fee – Family Reunification",
                units=1,
                unit_cost=PERMIT_GOVERNMENT_FEE,
                value=PERMIT_GOVERNMENT_FEE,
            ))

        additional_lines.extend([
            FeeLine(
                description="Residency Permit ID Card Coupon",
                units=headcount,
                unit_cost=ID_CARD_COUPON,
                value=ID_CARD_COUPON * headcount,
            ),
            FeeLine(
                description="Documents legal Translation and Notary (to be specified later)",
                units=1 if translation else 0,
                unit_cost=translation,
                value=translation,
            ),
            FeeLine(
                description="Other fees – Health Insurance",
                units=headcount,
                unit_cost=HEALTH_INSURANCE,
                value=HEALTH_INSURANCE * headcount,
            ),
        ])
        return build_fee_table(service_lines, additional_lines)

    def case_overview(self, fields: FieldRecord, client_name: str) -> List[OverviewParty]:
        parties = [
            OverviewParty(
                title="Main Applicant",
                rows=[
                    definition("Name", client_name),
                    definition("Nationality", fields.nationality),
                    definition("Occupation", fields.employment_type),
                    definition("Relocation motive", "Pensioner"),
                ],
            ),
        ]
        if fields.has_dependent:
            parties.append(OverviewParty(
                title="Dependent",
                rows=[
                    definition("Name", fields.dependent_display_name),
                    definition("Nationality", fields.dependent_nationality),
                    definition("Occupation", fields.dependent_occupation),
                    definition("Relocation motive", "Family Reunification"),
                ],
            ))
        return parties

    def process_groups(self, fields: FieldRecord) -> List[TextGroup]:
        groups = list(self.text.process)
        if fields.has_dependent:
            groups.extend(self.text.dependent_process)
        return groups

    def document_groups(self, fields: FieldRecord) -> List[TextGroup]:
        groups = list(self.text.documents)
        if fields.has_dependent:
            groups.extend(self.text.dependent_documents)
        return groups
