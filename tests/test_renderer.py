"""Tests for document rendering and section numbering."""

from datetime import date

import pytest

from proposal_engine.core.exceptions import ProposalEngineError
from proposal_engine.engine.composer import compose_content
from proposal_engine.engine.renderer import format_display_date, number_sections, render_proposal
from proposal_engine.engine.templates.base import FEES_AND_COSTS, PROCESS_OVERVIEW, SCOPE_OF_SERVICES
from proposal_engine.engine.templates.fallback import FallbackTemplate
from proposal_engine.engine.texts import BUSINESS_GROUP_TITLE, FALLBACK_FOOTER_LINE
from proposal_engine.models import (
    ClientInfo,
    ContactBrand,
    DocumentSection,
    FieldRecord,
    ProposalTemplate,
    Table,
)


class TestNumberSections:
    """Tests for number_sections."""

    def test_contiguous_numbering(self):
        sections = [DocumentSection(title=t) for t in ("A", "B", "C")]

        assert [s.number for s in number_sections(sections)] == ["1", "2", "3"]

    def test_subsections_numbered_under_parent(self):
        parent = DocumentSection(
            title="Parent",
            subsections=[
                DocumentSection(title="One"),
                DocumentSection(title="Loose", numbered=False),
                DocumentSection(title="Two"),
            ],
        )
        numbered = number_sections([DocumentSection(title="First"), parent])

        assert [s.number for s in numbered[1].subsections] == ["2.1", None, "2.2"]
        assert numbered[1].subsections[0].heading == "2.1 One"
        assert numbered[1].subsections[1].heading == "Loose"

    def test_heading_format(self):
        numbered = number_sections([DocumentSection(title="Fees")])

        assert numbered[0].heading == "1 — Fees"


class TestRenderProposal:
    """Tests for render_proposal across variants."""

    @pytest.mark.parametrize("services", [
        ["residency_pensioner"],
        ["visa_d"],
        ["company_formation"],
        ["real_estate"],
        ["visa_c", "compliance"],
        [],
    ])
    def test_numbering_is_contiguous(self, services):
        document = render_proposal(services, FieldRecord())

        assert document.section_numbers() == list(range(1, len(document.sections) + 1))

    def test_selects_template(self):
        assert render_proposal(["visa_d"], FieldRecord()).template == ProposalTemplate.EMPLOYMENT_VISA

    def test_pure(self, pensioner_fields):
        """The same inputs render equal documents."""
        client = ClientInfo(name="John Smith", customer_id="cust_1")

        first = render_proposal(["residency_pensioner"], pensioner_fields, client)
        second = render_proposal(["residency_pensioner"], pensioner_fields, client)

        assert first == second

    def test_cover(self, pensioner_fields):
        fields = pensioner_fields.with_updates(proposal_title="Residence Permit")
        client = ClientInfo(name="John Smith", customer_id="cust_1")
        document = render_proposal(["residency_pensioner"], fields, client)

        assert document.cover.client_name == "John Smith"
        assert document.cover.client_id == "cust_1"
        assert document.cover.services_title == "Residence Permit"
        assert document.cover.date_display == "01.03.2025"
        assert len(document.cover.offices) == 2

    def test_pensioner_dependent_overview(self, pensioner_fields_with_dependent):
        document = render_proposal(["residency_pensioner"], pensioner_fields_with_dependent)

        assert [party.title for party in document.case_overview] == ["Main Applicant", "Dependent"]
        assert document.fee_table.total == 121600

    def test_no_identity_no_overview(self):
        assert render_proposal(["visa_d"], FieldRecord()).case_overview == []

    def test_fallback_country_alone_no_overview(self):
        assert render_proposal(["visa_c"], FieldRecord(country="Germany")).case_overview == []

    def test_fallback_overview_with_nationality(self):
        document = render_proposal(["visa_c"], FieldRecord(nationality="German", country="Germany"))
        rows = {row.label: row.value for row in document.case_overview[0].rows}

        assert rows["Nationality"] == "German"
        assert rows["Country of residence"] == "Germany"

    def test_missing_answers_show_dash(self):
        document = render_proposal(["visa_d"], FieldRecord(purpose_of_stay="employment"))
        rows = {row.label: row.value for row in document.case_overview[0].rows}

        assert rows["Nationality"] == "—"

    def test_fee_section_has_totals(self, pensioner_fields):
        document = render_proposal(["residency_pensioner"], pensioner_fields)
        fees = document.find_section(FEES_AND_COSTS)
        tables = [block for block in fees.blocks if isinstance(block, Table)]

        assert tables[1].rows[-1].cells[0] == "FINAL COST TOTAL"
        assert tables[1].rows[-1].cells[-1] == "60,800 ALL"
        assert [row.cells[0] for row in tables[2].rows] == ["EUR", "USD", "GBP"]

    def test_footers(self):
        bespoke = render_proposal(["visa_d"], FieldRecord())
        generic = render_proposal(["visa_c"], FieldRecord())

        assert bespoke.footer.title == BUSINESS_GROUP_TITLE
        assert generic.footer.line == FALLBACK_FOOTER_LINE
        assert generic.footer.entries == []

    def test_contact_brand(self):
        from proposal_engine.engine.texts import CONTACT_BARS

        document = render_proposal(["real_estate"], FieldRecord())

        assert document.cover.contacts == CONTACT_BARS[ContactBrand.DAFKU]


class TestRealEstateDocument:
    """Tests for the real estate layout."""

    def test_subsections(self):
        document = render_proposal(["real_estate"], FieldRecord())
        services = document.find_section(SCOPE_OF_SERVICES)
        fees = document.find_section(FEES_AND_COSTS)

        assert services.number == "2"
        assert [s.number for s in services.subsections] == [f"2.{i}" for i in range(1, 7)]
        assert fees.number == "4"
        assert [s.number for s in fees.subsections] == ["4.1", "4.2", "4.3"]
        assert fees.subsections[1].title == "Fees and Costs applied to this specific case"

    def test_scope_defaults(self):
        document = render_proposal(["real_estate"], FieldRecord())
        scope = document.sections[0].blocks[0].text

        assert "residential property in Albania" in scope
        assert "to be confirmed" in scope

    def test_scope_with_values(self):
        fields = FieldRecord(property_description="two-bedroom apartment", transaction_value_eur=185000)
        scope = render_proposal(["real_estate"], fields).sections[0].blocks[0].text

        assert "two-bedroom apartment" in scope
        assert "EUR 185,000" in scope

    def test_off_plan_paragraph_dropped_when_not_off_plan(self):
        off_plan = render_proposal(["real_estate"], FieldRecord())
        ready = render_proposal(["real_estate"], FieldRecord(is_off_plan=False))

        assert len(ready.sections[0].blocks) == len(off_plan.sections[0].blocks) - 1


class TestFallbackDocument:
    """Tests for the generic layout."""

    def test_eight_sections_without_process(self, generic_fields):
        document = render_proposal(["residency_permit"], generic_fields)

        assert len(document.sections) == 8
        assert document.find_section(PROCESS_OVERVIEW) is None

    def test_process_overview_shifts_numbers(self):
        """Process steps insert a section and shift the later numbers by one."""
        fields = FieldRecord()
        builder = FallbackTemplate()
        fee_table = builder.calculate_fees(fields)

        plain = number_sections(builder.sections(fields, fee_table, compose_content(["residency_permit"], fields)))
        stepped = number_sections(
            builder.sections(fields, fee_table, compose_content(["residency_pensioner"], fields))
        )

        assert len(stepped) == len(plain) + 1
        assert stepped[2].title == PROCESS_OVERVIEW
        assert stepped[2].number == "3"
        assert [s.number for s in stepped] == [str(i) for i in range(1, 10)]
        assert plain[2].title == stepped[3].title

    def test_service_subsections_keep_composed_numbers(self, generic_fields):
        document = render_proposal(["visa_c", "compliance"], generic_fields)
        services = document.find_section(SCOPE_OF_SERVICES)

        assert all(s.number is None for s in services.subsections)
        assert services.subsections[0].heading.startswith("2.1 ")

    def test_payment_terms_note_overrides(self, generic_fields):
        fields = generic_fields.with_updates(payment_terms_note="100% upon signing.")
        document = render_proposal(["visa_c"], fields)

        assert document.find_section("Payment Terms").blocks[0].text == "100% upon signing."

    def test_requires_content(self, generic_fields):
        builder = FallbackTemplate()

        with pytest.raises(ProposalEngineError):
            builder.sections(generic_fields, builder.calculate_fees(generic_fields))


class TestFormatDisplayDate:
    """Tests for format_display_date."""

    def test_format(self):
        assert format_display_date(date(2025, 1, 9)) == "09.01.2025"

    def test_missing(self):
        assert format_display_date(None) is None
