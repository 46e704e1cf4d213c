"""Type D Visa & Residence Permit for Employees."""

from typing import List

from proposal_engine.engine.templates.base import ProposalTemplateBuilder, build_fee_table, definition
from proposal_engine.models.document import OverviewParty
from proposal_engine.models.enums import ProposalTemplate
from proposal_engine.models.fees import FeeLine, FeeTable
from proposal_engine.models.fields import FieldRecord

UNIT_SERVICE_FEE = 75_000
GROUP_DISCOUNT = 20_000
VISA_GOVERNMENT_FEE = 2_100
PERMIT_GOVERNMENT_FEE = 8_600
ID_CARD_COUPON = 5_700

EMPLOYEE_DETAILS = [
    "Job Contract Preparation",
    "Documentation Collection and Checking",
    "Visa Application and Follow-Up",
    "Payment of government fees",
    "Residency Permit Application",
    "Follow-Up of the process",
    "Representation and support with immigration office",
    "Support with Registry Office for address registration",
    "Fingerprints setting support for ID Card",
]


class EmploymentVisaTemplate(ProposalTemplateBuilder):
    """Per-applicant pricing with a group discount above one applicant."""

    template = ProposalTemplate.EMPLOYMENT_VISA

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        n = fields.applicant_count
        discount = GROUP_DISCOUNT if n > 1 else 0
        discounted_unit = UNIT_SERVICE_FEE - discount

        service_lines = [
            FeeLine(description="Consultation fee", value=0),
            FeeLine(
                description="Visa and Residency Permit service fee – Employee",
                details=EMPLOYEE_DETAILS,
                units=n,
                unit_cost=UNIT_SERVICE_FEE,
                value=UNIT_SERVICE_FEE * n,
            ),
        ]
        if discount:
            service_lines.extend([
                FeeLine(
                    description="Discount on group application",
                    units=n,
                    unit_cost=-discount,
                    value=-discount * n,
                ),
                FeeLine(
                    description="Visa and Residency Permit service fee after discount",
                    units=n,
                    unit_cost=discounted_unit,
                    value=discounted_unit * n,
                ),
            ])

        additional_lines = [
            FeeLine(
                description="Visa government fee",
                units=n,
                unit_cost=VISA_GOVERNMENT_FEE,
                value=VISA_GOVERNMENT_FEE * n,
            ),
            FeeLine(
                description="Residency Permit government fee – Self employment",
                units=n,
                unit_cost=PERMIT_GOVERNMENT_FEE,
                value=PERMIT_GOVERNMENT_FEE * n,
            ),
            FeeLine(
                description="Residency Permit ID Card Coupon",
                units=n,
                unit_cost=ID_CARD_COUPON,
                value=ID_CARD_COUPON * n,
            ),
            FeeLine(
                description="Documents legal Translation and Notary (to be specified later)",
                units=0,
                unit_cost=0,
                value=0,
            ),
            FeeLine(
                description="Other fees (residence contract, and related supporting service upon request)",
                units=0,
                unit_cost=0,
                value=0,
            ),
        ]
        # The after-discount row restates the gross and discount rows.
        return build_fee_table(
            service_lines,
            additional_lines,
            total_label="TOTAL",
            service_subtotal=discounted_unit * n,
        )

    def case_overview(self, fields: FieldRecord, client_name: str) -> List[OverviewParty]:
        rows = [
            definition("Name", client_name),
            definition("Nationality", fields.nationality),
            definition("Occupation", fields.employment_type),
            definition("Staff Relocation motive", "Employment"),
        ]
        if fields.applicant_count > 1:
            rows.append(definition("Number of applicants", fields.applicant_count))
        if fields.previous_refusal:
            rows.append(definition("Previous refusals", fields.previous_refusal))
        return [OverviewParty(title="Client", rows=rows)]
