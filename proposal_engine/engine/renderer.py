"""Document renderer - assembles the numbered proposal document tree."""

import logging
from datetime import date
from typing import Any, Iterable, List, Optional

from proposal_engine.engine.composer import compose_content
from proposal_engine.engine.selector import select_template
from proposal_engine.engine.templates import get_template_builder
from proposal_engine.engine.texts import (
    BUSINESS_GROUP,
    BUSINESS_GROUP_TITLE,
    CONTACT_BARS,
    FALLBACK_FOOTER_LINE,
    OFFICES,
)
from proposal_engine.models.document import ClientInfo, Cover, DocumentSection, Footer, ProposalDocument
from proposal_engine.models.enums import ProposalTemplate, parse_services
from proposal_engine.models.fields import FieldRecord

logger = logging.getLogger(__name__)


def format_display_date(value: Optional[date]) -> Optional[str]:
    """Cover date as dd.mm.yyyy."""
    if value is None:
        return None
    return value.strftime("%d.%m.%Y")


def number_sections(sections: List[DocumentSection]) -> List[DocumentSection]:
    """
    Number top-level sections 1..n and their numbered subsections n.k.

    Numbers are assigned on every call, so inserting or dropping a
    section shifts the later ones.
    """
    numbered = []
    for index, section in enumerate(sections, start=1):
        subsections = []
        position = 0
        for subsection in section.subsections:
            if subsection.numbered:
                position += 1
                subsection = subsection.model_copy(update={"number": f"{index}.{position}"})
            else:
                subsection = subsection.model_copy(update={"number": None})
            subsections.append(subsection)
        numbered.append(section.model_copy(update={"number": str(index), "subsections": subsections}))
    return numbered


def render_proposal(
    services: Iterable[Any],
    fields: FieldRecord,
    client: Optional[ClientInfo] = None,
) -> ProposalDocument:
    """
    Render a proposal for a service set and field record.

    Pure: the same inputs always produce an equal document.

    Args:
        services: Selected categories; unknown values are ignored
        fields: Field record (the snapshot's copy for sent proposals)
        client: Name and ID shown on the cover

    Returns:
        ProposalDocument with numbered sections and its fee table
    """
    client = client or ClientInfo()
    categories = parse_services(services)
    template = select_template(categories)
    builder = get_template_builder(template)

    content = None
    if template == ProposalTemplate.FALLBACK:
        content = compose_content(categories, fields)

    fee_table = builder.calculate_fees(fields)
    sections = number_sections(builder.sections(fields, fee_table, content))
    case_overview = builder.case_overview(fields, client.name) if builder.shows_case_overview(fields) else []

    cover = Cover(
        client_name=client.name,
        client_id=client.customer_id,
        services_title=fields.proposal_title,
        offices=list(OFFICES),
        contacts=list(CONTACT_BARS[builder.contact_brand]),
        date_display=format_display_date(fields.proposal_date),
    )
    if builder.business_group_footer:
        footer = Footer(title=BUSINESS_GROUP_TITLE, entries=list(BUSINESS_GROUP))
    else:
        footer = Footer(line=FALLBACK_FOOTER_LINE)

    logger.debug(
        f"Rendered {template.value} proposal with {len(sections)} sections, "
        f"total {fee_table.total} ALL"
    )
    return ProposalDocument(
        template=template,
        services=categories,
        cover=cover,
        case_overview=case_overview,
        sections=sections,
        fee_table=fee_table,
        footer=footer,
    )
