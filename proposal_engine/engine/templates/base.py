"""Base class for document-variant builders."""

from typing import List, Optional

from proposal_engine.engine.currency import (
    CONVERSION_SOURCE_NOTE,
    build_totals,
    convert_all,
    format_lek,
)
from proposal_engine.engine.texts import TemplateText, TextGroup, get_template_text
from proposal_engine.models.content import ServiceContent
from proposal_engine.models.document import (
    Block,
    BulletList,
    Definition,
    DocumentSection,
    OverviewParty,
    Paragraph,
    Table,
    TableRow,
)
from proposal_engine.models.enums import ContactBrand, ProposalTemplate
from proposal_engine.models.fees import FeeLine, FeeTable, InfoTable
from proposal_engine.models.fields import FieldRecord

MISSING = "—"

# Section titles
SCOPE_OF_SERVICES = "Scope of Services Provided"
PROCESS_OVERVIEW = "Process Overview"
REQUIRED_DOCUMENTS = "Required Documents"
FEES_AND_COSTS = "Fees & Costs"
PAYMENT_TERMS = "Payment Terms"
TIMELINE_OVERVIEW = "Timeline Overview"
IMPORTANT_NOTES = "Important Notes & Legal Disclaimers"
NEXT_STEPS = "Next Steps"


# ===========================================
# Block Helpers
# ===========================================

def group_blocks(groups: List[TextGroup]) -> List[Block]:
    """One bullet list per text group."""
    return [BulletList(caption=group.caption, intro=group.intro, items=list(group.items)) for group in groups]


def fee_line_rows(lines: List[FeeLine], with_units: bool, with_cost: bool) -> List[TableRow]:
    rows = []
    for line in lines:
        cells = [line.description]
        if with_units:
            cells.append("" if line.units is None else str(line.units))
        if with_cost:
            cells.append("" if line.unit_cost is None else format_lek(line.unit_cost))
        cells.append(format_lek(line.value))
        rows.append(TableRow(cells=cells, details=list(line.details), note=line.note))
    return rows


def summary_row(label: str, value: int, width: int) -> TableRow:
    """A bold row with the label first and the amount in the last column."""
    return TableRow(cells=[label] + [""] * (width - 2) + [format_lek(value)], emphasis=True)


def fee_blocks(fee_table: FeeTable) -> List[Block]:
    """
    Tables for a fee table: services, additional costs with the grand
    total, the currency conversions and any informational tables.
    """
    service_units = fee_table.service_table_has_units
    service_columns = ["Description of the service"]
    if service_units:
        service_columns += ["Unit", "Cost/Unit"]
    service_columns.append("Value")
    service_rows = fee_line_rows(fee_table.service_lines, service_units, service_units)
    service_rows.append(summary_row("Service fees Subtotal", fee_table.totals.service_subtotal, len(service_columns)))

    additional_units = any(line.units is not None for line in fee_table.additional_lines)
    additional_cost = any(line.unit_cost is not None for line in fee_table.additional_lines)
    additional_columns = ["Additional costs"]
    if additional_units:
        additional_columns.append("Unit")
    if additional_cost:
        additional_columns.append("Cost")
    additional_columns.append("Value")
    width = len(additional_columns)
    additional_rows = fee_line_rows(fee_table.additional_lines, additional_units, additional_cost)
    additional_rows.append(summary_row("Additional costs Subtotal", fee_table.totals.additional_subtotal, width))
    additional_rows.append(summary_row(fee_table.total_label, fee_table.total, width))

    blocks: List[Block] = [
        Table(columns=service_columns, rows=service_rows),
        Table(columns=additional_columns, rows=additional_rows),
        Table(
            columns=["Currency", "Conversion Rate", "Value after Conversion"],
            rows=[
                TableRow(cells=[conversion.currency, conversion.rate_display, conversion.amount_display])
                for conversion in fee_table.conversions
            ],
            note=CONVERSION_SOURCE_NOTE,
        ),
    ]
    blocks.extend(info_table_block(info) for info in fee_table.informational)
    return blocks


def info_table_block(info: InfoTable) -> Table:
    return Table(
        caption=info.title,
        intro=info.intro,
        columns=list(info.columns),
        rows=[TableRow(cells=list(row)) for row in info.rows],
        note=info.note,
    )


def build_fee_table(
    service_lines: List[FeeLine],
    additional_lines: List[FeeLine],
    total_label: str = "FINAL COST TOTAL",
    service_subtotal: Optional[int] = None,
    informational: Optional[List[InfoTable]] = None,
) -> FeeTable:
    """
    Assemble a fee table from its rows.

    Subtotals are the sum of the row values unless `service_subtotal` is
    given, for tables whose rows show a gross amount and its discount.
    """
    if service_subtotal is None:
        service_subtotal = sum(line.value for line in service_lines)
    additional_subtotal = sum(line.value for line in additional_lines)
    totals = build_totals(service_subtotal, additional_subtotal)
    return FeeTable(
        service_lines=service_lines,
        additional_lines=additional_lines,
        totals=totals,
        total_label=total_label,
        conversions=convert_all(totals.total_minor_units),
        informational=informational or [],
    )


def has_identity(fields: FieldRecord) -> bool:
    """Whether any identity answer is present for the case overview."""
    return any([
        fields.nationality,
        fields.country,
        fields.employment_type,
        fields.purpose_of_stay,
        fields.id_passport_number,
    ]) or fields.has_dependent


# ===========================================
# Template Builder
# ===========================================

class ProposalTemplateBuilder:
    """
    Builds the variant-specific parts of a proposal document.

    Subclasses set `template` and implement `calculate_fees`. The default
    `sections` produce the eight-section layout shared by the immigration
    variants; the renderer numbers them.
    """

    template: ProposalTemplate = ProposalTemplate.FALLBACK
    business_group_footer: bool = True

    @property
    def text(self) -> TemplateText:
        return get_template_text(self.template)

    @property
    def contact_brand(self) -> ContactBrand:
        return self.text.contact_brand

    def calculate_fees(self, fields: FieldRecord) -> FeeTable:
        raise NotImplementedError

    def shows_case_overview(self, fields: FieldRecord) -> bool:
        return has_identity(fields)

    def case_overview(self, fields: FieldRecord, client_name: str) -> List[OverviewParty]:
        return []

    # ===========================================
    # Sections
    # ===========================================

    def process_groups(self, fields: FieldRecord) -> List[TextGroup]:
        return list(self.text.process)

    def document_groups(self, fields: FieldRecord) -> List[TextGroup]:
        return list(self.text.documents)

    def fee_section(self, fee_table: FeeTable) -> DocumentSection:
        blocks: List[Block] = [Paragraph(text=self.text.fee_intro)]
        blocks.extend(fee_blocks(fee_table))
        if self.text.exclusions:
            blocks.extend(group_blocks([self.text.exclusions]))
        return DocumentSection(title=FEES_AND_COSTS, blocks=blocks)

    def sections(
        self,
        fields: FieldRecord,
        fee_table: FeeTable,
        content: Optional[ServiceContent] = None,
    ) -> List[DocumentSection]:
        text = self.text
        return [
            DocumentSection(title=SCOPE_OF_SERVICES, blocks=group_blocks(text.scope)),
            DocumentSection(title=PROCESS_OVERVIEW, blocks=group_blocks(self.process_groups(fields))),
            DocumentSection(title=REQUIRED_DOCUMENTS, blocks=group_blocks(self.document_groups(fields))),
            self.fee_section(fee_table),
            DocumentSection(title=PAYMENT_TERMS, blocks=group_blocks([text.payment_terms])),
            DocumentSection(title=TIMELINE_OVERVIEW, blocks=group_blocks([text.timeline])),
            DocumentSection(title=IMPORTANT_NOTES, blocks=group_blocks(text.notes)),
            DocumentSection(title=NEXT_STEPS, blocks=group_blocks([text.next_steps])),
        ]


def definition(label: str, value: Optional[object]) -> Definition:
    """A case-overview row, with a dash for missing answers."""
    if value is None or value == "":
        return Definition(label=label, value=MISSING)
    return Definition(label=label, value=str(value))
