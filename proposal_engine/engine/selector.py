"""Template selection by service-set priority."""

import logging
from typing import Any, Iterable

from proposal_engine.models.enums import ProposalTemplate, ServiceCategory, canonical_order, parse_services

logger = logging.getLogger(__name__)

PENSIONER_TITLE = "Residence Permit for Pensioner and Family Reunification"
COMPANY_TITLE = (
    "Company Registration and Management + Type D Visa & Residence Permit as Self-Employed/Business Owner"
)
EMPLOYMENT_VISA_TITLE = "Type D Visa & Residence Permit for Employees"
GENERIC_TITLE_PREFIX = "Legal Assistance — "


def select_template(services: Iterable[Any]) -> ProposalTemplate:
    """
    Pick the document variant for a service set. First match wins:

        1. residency_pensioner
        2. visa_d without company_formation
        3. company_formation
        4. real_estate
        5. fallback
    """
    selected = set(parse_services(services))

    if ServiceCategory.RESIDENCY_PENSIONER in selected:
        template = ProposalTemplate.PENSIONER
    elif ServiceCategory.VISA_D in selected and ServiceCategory.COMPANY_FORMATION not in selected:
        template = ProposalTemplate.EMPLOYMENT_VISA
    elif ServiceCategory.COMPANY_FORMATION in selected:
        template = ProposalTemplate.COMPANY_FORMATION
    elif ServiceCategory.REAL_ESTATE in selected:
        template = ProposalTemplate.REAL_ESTATE
    else:
        template = ProposalTemplate.FALLBACK

    logger.debug(f"Selected template {template.value} for {sorted(c.value for c in selected)}")
    return template


def default_proposal_title(services: Iterable[Any]) -> str:
    """Default "Services Provided" title for a service set."""
    categories = canonical_order(parse_services(services))
    selected = set(categories)

    if ServiceCategory.RESIDENCY_PENSIONER in selected:
        return PENSIONER_TITLE
    if ServiceCategory.COMPANY_FORMATION in selected:
        return COMPANY_TITLE
    if ServiceCategory.VISA_D in selected:
        return EMPLOYMENT_VISA_TITLE
    return GENERIC_TITLE_PREFIX + ", ".join(category.label for category in categories)
