"""Tests for Markdown and PDF export."""

import builtins

import pytest

from proposal_engine.engine.renderer import render_proposal
from proposal_engine.integrations.export import ProposalExporter, table_row
from proposal_engine.models import ClientInfo, FieldRecord, TableRow


@pytest.fixture
def exporter() -> ProposalExporter:
    return ProposalExporter()


class TestRenderMarkdown:
    """Tests for ProposalExporter.render_markdown."""

    def test_headings_follow_numbering(self, exporter):
        document = render_proposal(["real_estate"], FieldRecord())
        markdown = exporter.render_markdown(document)

        assert "## 1 — Scope of the Proposal" in markdown
        assert "### 2.1 Legal Due Diligence & Project Verification" in markdown
        assert "### 4.2 Fees and Costs applied to this specific case" in markdown

    def test_fee_table_rows(self, exporter, pensioner_fields):
        document = render_proposal(["residency_pensioner"], pensioner_fields)
        markdown = exporter.render_markdown(document)

        assert "| Currency | Conversion Rate | Value after Conversion |" in markdown
        assert "| **FINAL COST TOTAL** |  |  | 60,800 ALL |" in markdown
        assert "## Case Overview" in markdown

    def test_cover_and_footer(self, exporter, generic_fields):
        client = ClientInfo(name="John Smith", customer_id="cust_1")
        markdown = exporter.render_markdown(render_proposal(["visa_c"], generic_fields, client))

        assert markdown.startswith("# Service Proposal")
        assert "**Services Provided:** Legal Assistance — Residency Permit" in markdown
        assert "**Date:** 01.03.2025" in markdown
        assert markdown.rstrip().endswith("www.dafkulawfirm.al")

    def test_table_rows_stay_contiguous(self, exporter, generic_fields):
        """Markdown tables need their rows on consecutive lines."""
        markdown = exporter.render_markdown(render_proposal(["visa_c"], generic_fields))
        lines = markdown.splitlines()
        start = lines.index("| Description of the service | Value |")

        assert lines[start + 1] == "| --- | --- |"
        assert lines[start + 2].startswith("| Consultation fee |")


class TestTableRow:
    """Tests for table_row."""

    def test_details_and_note_fold_into_first_cell(self):
        row = TableRow(cells=["Service", "45,000 ALL"], details=["Step one"], note="Per applicant")

        assert table_row(row) == "| Service<br>*Per applicant*<br>• Step one | 45,000 ALL |"

    def test_pipes_escaped(self):
        assert table_row(TableRow(cells=["A | B"])) == "| A \\| B |"


class TestRenderHtml:
    """Tests for ProposalExporter.render_html."""

    def test_tables_become_html(self, exporter, pensioner_fields):
        client = ClientInfo(name="John Smith", customer_id="cust_1")
        page = exporter.render_html(render_proposal(["residency_pensioner"], pensioner_fields, client))

        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Service Proposal - John Smith</title>" in page
        assert "<table>" in page
        assert "60,800 ALL" in page

    def test_title_escaped(self, exporter):
        client = ClientInfo(name="Smith & <Sons>")
        page = exporter.render_html(render_proposal(["visa_c"], FieldRecord(), client))

        assert "Smith &amp; &lt;Sons&gt;" in page


class TestRenderPdf:
    """Tests for ProposalExporter.render_pdf."""

    def test_missing_dependency_returns_none(self, exporter, monkeypatch):
        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == "weasyprint":
                raise ImportError("No module named 'weasyprint'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)

        assert exporter.render_pdf(render_proposal(["visa_c"], FieldRecord())) is None

    def test_filename_from_customer_id(self, exporter):
        client = ClientInfo(name="John Smith", customer_id="cust/001")
        document = render_proposal(["visa_c"], FieldRecord(), client)

        assert exporter.pdf_filename(document) == "proposal_cust_001.pdf"

    def test_filename_without_client(self, exporter):
        assert exporter.pdf_filename(render_proposal(["visa_c"], FieldRecord())) == "proposal_client.pdf"

    @pytest.mark.slow
    def test_writes_pdf(self, exporter, generic_fields):
        try:
            import weasyprint  # noqa: F401
        except (ImportError, OSError) as e:
            pytest.skip(f"WeasyPrint unavailable: {e}")

        pdf = exporter.render_pdf(render_proposal(["visa_c"], generic_fields))

        assert pdf is not None
        assert pdf.startswith(b"%PDF")
