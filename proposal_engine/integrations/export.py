"""Proposal export - Markdown rendering and PDF conversion."""

import html
import logging
from typing import Optional

from jinja2 import Template

logger = logging.getLogger(__name__)


# Markdown layout of a rendered ProposalDocument.
PROPOSAL_MARKDOWN = """\
{% macro render_block(block) %}
{% if block.kind == "paragraph" %}
{{ ("**" ~ block.text ~ "**") if block.strong else block.text }}

{% elif block.kind == "bullets" %}
{% if block.caption %}
**{{ block.caption }}**

{% endif %}
{% if block.intro %}
{{ block.intro }}

{% endif %}
{% for item in block.items %}
- {{ item }}
{% endfor %}

{% else %}
{% if block.caption %}
**{{ block.caption }}**

{% endif %}
{% if block.intro %}
{{ block.intro }}

{% endif %}
{{ table_header(block) }}
{% for row in block.rows %}
{{ table_row(row) }}
{% endfor %}

{% if block.note %}
*{{ block.note }}*

{% endif %}
{% endif %}
{% endmacro %}
# {{ document.cover.title }}

**Client:** {{ document.cover.client_name or "—" }}{{ (" (ID " ~ document.cover.client_id ~ ")") if document.cover.client_id else "" }}

{% if document.cover.services_title %}
**Services Provided:** {{ document.cover.services_title }}

{% endif %}
{% if document.cover.date_display %}
**Date:** {{ document.cover.date_display }}

{% endif %}
{% for office in document.cover.offices %}
- {{ office.city }}: {{ office.address }}
{% endfor %}

{{ document.cover.contacts | join(" · ") }}

{% if document.case_overview %}
## Case Overview

{% for party in document.case_overview %}
**{{ party.title }}**

{% for row in party.rows %}
- {{ row.label }}: {{ row.value }}
{% endfor %}

{% endfor %}
{% endif %}
{% for section in document.sections %}
## {{ section.heading }}

{% for block in section.blocks %}
{{ render_block(block) }}
{% endfor %}
{% for subsection in section.subsections %}
### {{ subsection.heading }}

{% for block in subsection.blocks %}
{{ render_block(block) }}
{% endfor %}
{% endfor %}
{% endfor %}
---

{% if document.footer.entries %}
**{{ document.footer.title }}**

{% for entry in document.footer.entries %}
- **{{ entry.name }}** - {{ entry.tagline }} ({{ entry.website }})
{% endfor %}
{% elif document.footer.line %}
{{ document.footer.line }}
{% endif %}
"""


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def table_header(table: "Table") -> str:
    """Header and separator lines of a Markdown table."""
    header = "| " + " | ".join(_cell(column) for column in table.columns) + " |"
    separator = "|" + " --- |" * len(table.columns)
    return f"{header}\n{separator}"


def table_row(row: "TableRow") -> str:
    """One Markdown table line; the note and details fold into the first cell."""
    cells = [_cell(cell) for cell in row.cells]
    if cells:
        first = f"**{cells[0]}**" if row.emphasis else cells[0]
        if row.note:
            first += f"<br>*{_cell(row.note)}*"
        for detail in row.details:
            first += f"<br>• {_cell(detail)}"
        cells[0] = first
    return "| " + " | ".join(cells) + " |"


# Print layout for the HTML built from the Markdown export.
PROPOSAL_CSS = """
@page { size: A4; margin: 20mm 18mm; }
body { font-family: "Helvetica", "Arial", sans-serif; font-size: 10pt; line-height: 1.45; }
h1 { font-size: 18pt; margin-bottom: 4mm; }
h2 { font-size: 13pt; margin-top: 8mm; border-bottom: 1px solid #999; }
h3 { font-size: 11pt; margin-top: 5mm; }
table { width: 100%; border-collapse: collapse; margin: 3mm 0; }
th, td { border: 1px solid #bbb; padding: 2mm; vertical-align: top; }
th { background: #f0f0f0; text-align: left; }
"""


class ProposalExporter:
    """
    Turns rendered proposals into Markdown and PDF documents.

    Markdown goes through a jinja2 template. PDFs convert that Markdown to
    HTML with python-markdown and lay it out with WeasyPrint, both imported
    on first use.
    """

    def __init__(self):
        """Initialize exporter."""
        self._template = Template(PROPOSAL_MARKDOWN, trim_blocks=True, lstrip_blocks=True)
        logger.info("Proposal exporter initialized")

    def render_markdown(self, document: "ProposalDocument") -> str:
        """Render a ProposalDocument as Markdown."""
        rendered = self._template.render(
            document=document,
            table_header=table_header,
            table_row=table_row,
        )
        return rendered.strip() + "\n"

    def render_html(self, document: "ProposalDocument") -> str:
        """Render a ProposalDocument as a standalone HTML page."""
        import markdown

        body = markdown.markdown(self.render_markdown(document), extensions=["tables", "sane_lists"])
        title = html.escape(document.cover.title)
        if document.cover.client_name:
            title += f" - {html.escape(document.cover.client_name)}"

        return (
            "<!DOCTYPE html>\n"
            f'<html><head><meta charset="utf-8"><title>{title}</title></head>\n'
            f"<body>\n{body}\n</body></html>\n"
        )

    def render_pdf(self, document: "ProposalDocument") -> Optional[bytes]:
        """
        Render a ProposalDocument as PDF bytes.

        Returns:
            The PDF, or None when the PDF libraries are missing or layout fails
        """
        try:
            from weasyprint import CSS, HTML

            pdf = HTML(string=self.render_html(document)).write_pdf(
                stylesheets=[CSS(string=PROPOSAL_CSS)]
            )
            logger.info(f"Rendered {document.template.value} proposal PDF ({len(pdf)} bytes)")
            return pdf

        except ImportError as e:
            logger.error(f"Missing dependency for PDF generation: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to generate PDF: {e}")
            return None

    @staticmethod
    def pdf_filename(document: "ProposalDocument") -> str:
        """Download name built from the customer ID, or the client name."""
        label = document.cover.client_id or document.cover.client_name or "client"
        safe_label = "".join(c if c.isalnum() else "_" for c in label)
        return f"proposal_{safe_label}.pdf"


# Forward reference
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from proposal_engine.models import ProposalDocument, Table, TableRow

# Singleton instance
proposal_exporter = ProposalExporter()
