"""Fee preset catalog and the preset calculator."""

import logging
from typing import Any, Dict, Iterable

from proposal_engine.engine.currency import build_totals
from proposal_engine.models.enums import ServiceCategory, parse_services
from proposal_engine.models.fees import FeeBreakdown, FeePreset

logger = logging.getLogger(__name__)


# ===========================================
# Fee Preset Catalog (Lek)
# ===========================================
# Suggested starting points; staff can adjust the fields afterwards.
# Service fees are summed across categories; shared costs (consultation,
# POA, translation) take the maximum.

FEE_PRESETS: Dict[ServiceCategory, FeePreset] = {
    ServiceCategory.REAL_ESTATE: FeePreset(
        consultation_fee=20_000, service_fee=150_000, poa_fee=15_000, translation_fee=15_000
    ),
    ServiceCategory.VISA_C: FeePreset(
        consultation_fee=15_000, service_fee=75_000, translation_fee=10_000
    ),
    ServiceCategory.VISA_D: FeePreset(
        consultation_fee=15_000, service_fee=100_000, poa_fee=15_000, translation_fee=10_000
    ),
    ServiceCategory.RESIDENCY_PERMIT: FeePreset(
        consultation_fee=20_000, service_fee=120_000, poa_fee=15_000, translation_fee=15_000
    ),
    ServiceCategory.RESIDENCY_PENSIONER: FeePreset(
        consultation_fee=0, service_fee=90_000, translation_fee=15_000
    ),
    ServiceCategory.COMPANY_FORMATION: FeePreset(
        consultation_fee=20_000, service_fee=100_000, translation_fee=20_000
    ),
    ServiceCategory.TAX_CONSULTING: FeePreset(consultation_fee=15_000, service_fee=80_000),
    ServiceCategory.COMPLIANCE: FeePreset(consultation_fee=15_000, service_fee=60_000),
}


def compute_preset_fees(services: Iterable[Any]) -> FeeBreakdown:
    """
    Aggregate catalog presets for a service set.

    Repeated categories count once. Categories missing from the catalog
    contribute nothing. `other_fees` is always 0 in the seed.

    Args:
        services: Selected categories, in any order

    Returns:
        FeeBreakdown seed with subtotals and converted totals
    """
    consultation_fee = service_fee = poa_fee = translation_fee = 0

    for category in parse_services(services):
        preset = FEE_PRESETS.get(category)
        if preset is None:
            logger.debug(f"No fee preset for {category.value}")
            continue
        consultation_fee = max(consultation_fee, preset.consultation_fee)
        service_fee += preset.service_fee
        poa_fee = max(poa_fee, preset.poa_fee)
        translation_fee = max(translation_fee, preset.translation_fee)

    totals = build_totals(
        consultation_fee + service_fee,
        poa_fee + translation_fee,
    )
    return FeeBreakdown(
        consultation_fee=consultation_fee,
        service_fee=service_fee,
        poa_fee=poa_fee,
        translation_fee=translation_fee,
        other_fees=0,
        **totals.model_dump(),
    )
