"""Content composer - builds and merges per-category narrative content."""

import logging
from typing import Any, Iterable, List, Optional

from proposal_engine.core.exceptions import UnsupportedCategoryError
from proposal_engine.engine.builders import CONTENT_BUILDERS
from proposal_engine.models.content import ProcessStep, ServiceContent, ServiceSection
from proposal_engine.models.enums import ServiceCategory, canonical_order, parse_services
from proposal_engine.models.fields import FieldRecord

logger = logging.getLogger(__name__)

SINGLE_SCOPE_PREFIX = "This proposal outlines the provision of legal services as described below.\n\n"
MULTI_SCOPE_PREFIX = (
    "This proposal outlines the provision of integrated legal assistance covering the following services: "
)

ENGAGEMENT_STEP = "Execution of the legal service engagement agreement"
INITIAL_PAYMENT_STEP = "Payment of the initial portion of the legal fee as agreed"
COMPLETION_STEP = "Completion of all service engagements and issuance of final documents"


def build_category_content(category: ServiceCategory, fields: FieldRecord) -> ServiceContent:
    """Run the content builder registered for one category."""
    builder = CONTENT_BUILDERS.get(category)
    if builder is None:
        raise UnsupportedCategoryError(f"No content builder for category: {category}")
    return builder(fields)


def _numbered(sections: Iterable[ServiceSection]) -> List[ServiceSection]:
    return [
        ServiceSection(heading=f"2.{index} {section.heading}", bullets=list(section.bullets))
        for index, section in enumerate(sections, start=1)
    ]


def dedupe_documents(documents: Iterable[str]) -> List[str]:
    """Drop documents whose trimmed, lower-cased text was already seen."""
    seen = set()
    unique = []
    for document in documents:
        key = document.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(document)
    return unique


def compose_content(services: Iterable[Any], fields: FieldRecord) -> ServiceContent:
    """
    Build the narrative for a service set.

    One category passes through with numbered section headings. Several
    categories are merged in canonical order. An empty selection composes
    the residency-permit content.

    Args:
        services: Selected categories; unknown values are ignored
        fields: Field record to interpolate

    Returns:
        ServiceContent with "2.<n>" numbered section headings
    """
    categories = canonical_order(parse_services(services))
    if not categories:
        categories = [ServiceCategory.RESIDENCY_PERMIT]

    if len(categories) == 1:
        content = build_category_content(categories[0], fields)
        return content.model_copy(update={
            "scope_paragraph": SINGLE_SCOPE_PREFIX + content.scope_paragraph,
            "sections": _numbered(content.sections),
        })

    parts = [build_category_content(category, fields) for category in categories]
    logger.debug(f"Merging content for {[category.value for category in categories]}")

    labels = ", ".join(category.label for category in categories)
    scope = f"{MULTI_SCOPE_PREFIX}{labels}.\n\n" + "\n\n".join(part.scope_paragraph for part in parts)

    process_steps: Optional[List[ProcessStep]] = None
    if any(part.has_process_steps for part in parts):
        process_steps = [step for part in parts for step in (part.process_steps or [])]

    return ServiceContent(
        scope_paragraph=scope,
        sections=_numbered(section for part in parts for section in part.sections),
        process_steps=process_steps,
        required_docs=dedupe_documents(doc for part in parts for doc in part.required_docs),
        timeline=[entry for part in parts for entry in part.timeline],
        next_steps=[
            ENGAGEMENT_STEP,
            INITIAL_PAYMENT_STEP,
            *(step for part in parts for step in part.next_steps),
            COMPLETION_STEP,
        ],
        fee_description=" ".join(part.fee_description for part in parts),
    )
