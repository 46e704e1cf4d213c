"""Enumeration types for the proposal engine."""

import logging
from enum import Enum
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


class ServiceCategory(str, Enum):
    """Legal-service product lines. Declaration order is the canonical merge order."""
    REAL_ESTATE = "real_estate"
    VISA_C = "visa_c"
    VISA_D = "visa_d"
    RESIDENCY_PERMIT = "residency_permit"
    RESIDENCY_PENSIONER = "residency_pensioner"
    COMPANY_FORMATION = "company_formation"
    TAX_CONSULTING = "tax_consulting"
    COMPLIANCE = "compliance"

    @property
    def label(self) -> str:
        """Display label used in titles and combined scope paragraphs."""
        return SERVICE_LABELS[self]

    @property
    def rank(self) -> int:
        """Position in the canonical category order."""
        return _CATEGORY_ORDER.index(self)


class ProposalTemplate(str, Enum):
    """Document variants, in descending selection priority."""
    PENSIONER = "pensioner"
    EMPLOYMENT_VISA = "employment_visa"
    COMPANY_FORMATION = "company_formation"
    REAL_ESTATE = "real_estate"
    FALLBACK = "fallback"


class ProposalStatus(str, Enum):
    """Lifecycle of a customer's proposal."""
    DRAFT = "draft"
    SENT = "sent"


class ContactBrand(str, Enum):
    """Which firm's contact bar appears on the cover."""
    RELOCATE = "relocate"
    DAFKU = "dafku"


SERVICE_LABELS = {
    ServiceCategory.REAL_ESTATE: "Real Estate",
    ServiceCategory.VISA_C: "Visa C",
    ServiceCategory.VISA_D: "Visa D",
    ServiceCategory.RESIDENCY_PERMIT: "Residency Permit",
    ServiceCategory.RESIDENCY_PENSIONER: "Residency Permit (Pensioner)",
    ServiceCategory.COMPANY_FORMATION: "Company Formation",
    ServiceCategory.TAX_CONSULTING: "Tax Consulting",
    ServiceCategory.COMPLIANCE: "Compliance",
}

_CATEGORY_ORDER = list(ServiceCategory)


def parse_services(values: Iterable[Any]) -> List[ServiceCategory]:
    """
    Convert raw service values into known categories.

    Keeps first-seen order, drops repeats, and skips values that are not a
    known category. Skipped values are logged but never raise.

    Args:
        values: Category members or their string values

    Returns:
        List of distinct ServiceCategory members
    """
    result: List[ServiceCategory] = []
    for value in values or []:
        try:
            category = ServiceCategory(value)
        except (ValueError, TypeError):
            logger.warning(f"Ignoring unknown service category: {value!r}")
            continue
        if category not in result:
            result.append(category)
    return result


def canonical_order(categories: Iterable[ServiceCategory]) -> List[ServiceCategory]:
    """Distinct categories sorted into the canonical merge order."""
    return sorted(set(categories), key=lambda category: category.rank)
