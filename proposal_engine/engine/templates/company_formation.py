"""Company Registration and Management + Type D Visa & Residence Permit (self-employed)."""

from typing import List

from proposal_engine.engine.currency import format_amount, format_lek
from proposal_engine.engine.templates.base import ProposalTemplateBuilder, build_fee_table, definition
from proposal_engine.models.document import OverviewParty
from proposal_engine.models.enums import ProposalTemplate
from proposal_engine.models.fees import FeeLine, FeeTable, InfoTable
from proposal_engine.models.fields import FieldRecord

COMPANY_SERVICE_FEE = 85_000
PERMIT_SERVICE_FEE = 75_000
VISA_GOVERNMENT_FEE = 4_500
PERMIT_GOVERNMENT_FEE = 8_800
ID_CARD_COUPON = 5_700

COMPANY_DETAILS = [
    "Power of Attorney",
    "Name check and reservation",
    "Statute and Establishment Act Drafting",
    "Company Registration Application",
    "Company Registration with relevant authorities",
    "Accounting and Virtual Office for 1 month",
    "Bank Account Opening Support",
    "Business Plan Drafting",
]

PERMIT_DETAILS = [
    "Documentation Checking",
    "Visa Application and Follow-Up",
    "Residency Permit Application and Follow-Up",
    "Payment of government fees",
    "Representation and support with immigration office",
    "Support with Registry Office and Fingerprints",
]

# (service, billing unit, Lek)
FIXED_MANAGEMENT_COSTS = [
    ("Accounting", "Month", 5_000),
    ("Legal Support", "Month", 5_000),
    ("Virtual Office", "Month", 5_000),
    ("Electronic Fiscal Certificate", "Annual", 4_500),
    ("Invoicing Software", "Annual", 7_500),
]

# (service, billing unit, low, high)
VARIABLE_MANAGEMENT_COSTS = [
    ("Office rent", "Month", 30_000, 50_000),
    ("Social and Health Security", "Month", 12_000, 15_000),
    ("Local Municipal Taxes", "Month", 25_000, 40_000),
]

TAX_RATES = [
    ("VAT – Turnover 10,000,000 ALL", "0%", "20%"),
    ("Corporate Tax – Turnover 14,000,000 ALL", "0%", "15%"),
    ("Dividend Tax – Flat Rate", "8%", "8%"),
]


def management_tables() -> List[InfoTable]:
    """Ongoing company costs and tax rates. Shown, never summed."""
    return [
        InfoTable(
            title="Company Management Costs",
            intro=(
                "Fixed fees: The maintenance service fees listed below are the minimum fees applied for new "
                "businesses initially registered in Albania. These fees remain fixed at this amount for businesses "
                "with an annual turnover of 5,000,000 ALL (50,000 EUR). Above this limit, the fees will increase "
                "accordingly depending on the administrative and legal support required."
            ),
            columns=["Service", "Unit", "Value"],
            rows=[[name, unit, format_lek(value)] for name, unit, value in FIXED_MANAGEMENT_COSTS],
        ),
        InfoTable(
            title="Non-fixed Management Costs",
            intro=(
                "Non-fixed fees: The maintenance service fees listed below are calculated based on our "
                "experience with other clients and in reference to the market prices."
            ),
            columns=["Service", "Unit", "Value"],
            rows=[
                [name, unit, f"{format_amount(low, 0)} – {format_lek(high)}"]
                for name, unit, low, high in VARIABLE_MANAGEMENT_COSTS
            ],
            note=(
                "Note: The above are ongoing management costs and are separate from the one-time service fee "
                "above."
            ),
        ),
        InfoTable(
            title="Taxation Overview (Albania)",
            columns=["Tax", "Below turnover", "Above turnover"],
            rows=[list(row) for row in TAX_RATES],
        ),
    ]


class CompanyFormationTemplate(ProposalTemplateBuilder):
    """Company formation combined with a self-employed visa and permit."""

    template = ProposalTemplate.COMPANY_FORMATION

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        service_lines = [
            FeeLine(description="Consultation fee", value=0),
            FeeLine(
                description="Company Formation service fee which includes:",
                details=COMPANY_DETAILS,
                value=COMPANY_SERVICE_FEE,
            ),
            FeeLine(
                description="Visa and Residency Permit service fee – Main Applicant",
                details=PERMIT_DETAILS,
                value=PERMIT_SERVICE_FEE,
            ),
        ]
        additional_lines = [
            FeeLine(description="Visa government fee", units=1, unit_cost=VISA_GOVERNMENT_FEE,
                    value=VISA_GOVERNMENT_FEE),
            FeeLine(description="Residency Permit government fee – Self employment", units=1,
                    unit_cost=PERMIT_GOVERNMENT_FEE, value=PERMIT_GOVERNMENT_FEE),
            FeeLine(description="Residency Permit ID Card Coupon", units=1, unit_cost=ID_CARD_COUPON,
                    value=ID_CARD_COUPON),
            FeeLine(description="Documents legal Translation and Notary (to be specified later)", units=0,
                    unit_cost=0, value=0),
            FeeLine(description="Other fees", units=0, unit_cost=0, value=0),
        ]
        return build_fee_table(service_lines, additional_lines, informational=management_tables())

    def case_overview(self, fields: FieldRecord, client_name: str) -> List[OverviewParty]:
        rows = [
            definition("Name", client_name),
            definition("Nationality", fields.nationality),
            definition("Occupation", fields.employment_type),
            definition("Relocation motive", fields.purpose_of_stay or "Self-Employment/Company Registration"),
        ]
        if fields.business_activity:
            rows.append(definition("Business activity", fields.business_activity))
        if fields.number_of_shareholders:
            rows.append(definition("Number of shareholders", fields.number_of_shareholders))
        return [OverviewParty(title="Main Applicant", rows=rows)]
