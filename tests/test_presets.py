"""Tests for the fee preset calculator."""

import pytest

from proposal_engine.engine.presets import FEE_PRESETS, compute_preset_fees
from proposal_engine.models import ServiceCategory


class TestComputePresetFees:
    """Tests for compute_preset_fees."""

    def test_real_estate_and_company(self):
        """Shared costs take the maximum, service fees are summed."""
        fees = compute_preset_fees(["real_estate", "company_formation"])

        assert fees.consultation_fee == 20000
        assert fees.service_fee == 250000
        assert fees.poa_fee == 15000
        assert fees.translation_fee == 20000
        assert fees.other_fees == 0

    def test_subtotals_and_total(self):
        """Subtotals follow the generic fee formula."""
        fees = compute_preset_fees(["real_estate", "company_formation"])

        assert fees.service_subtotal == 270000
        assert fees.additional_subtotal == 35000
        assert fees.total_minor_units == 305000

    def test_empty_selection_is_zero(self):
        """No services means an all-zero seed."""
        fees = compute_preset_fees([])

        assert fees.consultation_fee == 0
        assert fees.service_fee == 0
        assert fees.total_minor_units == 0
        assert fees.total_eur == 0.0

    def test_single_category_matches_catalog(self):
        """A single category passes its catalog preset through."""
        preset = FEE_PRESETS[ServiceCategory.VISA_D]
        fees = compute_preset_fees([ServiceCategory.VISA_D])

        assert fees.consultation_fee == preset.consultation_fee
        assert fees.service_fee == preset.service_fee
        assert fees.poa_fee == preset.poa_fee
        assert fees.translation_fee == preset.translation_fee

    @pytest.mark.parametrize("services", [
        ["visa_c", "tax_consulting", "compliance"],
        ["residency_pensioner", "real_estate"],
        ["company_formation", "visa_d", "residency_permit"],
    ])
    def test_order_does_not_matter(self, services):
        """The seed is the same for any order of the service set."""
        assert compute_preset_fees(services) == compute_preset_fees(list(reversed(services)))

    @pytest.mark.parametrize("first,second", [
        (["real_estate"], ["company_formation"]),
        (["visa_c", "visa_d"], ["residency_pensioner", "compliance"]),
        (["tax_consulting"], ["residency_permit", "real_estate"]),
    ])
    def test_aggregation_laws(self, first, second):
        """Service fees add across disjoint sets; shared costs take the max."""
        a = compute_preset_fees(first)
        b = compute_preset_fees(second)
        union = compute_preset_fees(first + second)

        assert union.service_fee == a.service_fee + b.service_fee
        assert union.consultation_fee == max(a.consultation_fee, b.consultation_fee)
        assert union.poa_fee == max(a.poa_fee, b.poa_fee)
        assert union.translation_fee == max(a.translation_fee, b.translation_fee)

    def test_duplicates_count_once(self):
        """Repeated categories do not double the service fee."""
        once = compute_preset_fees(["real_estate"])
        twice = compute_preset_fees(["real_estate", "real_estate"])

        assert twice == once

    def test_unknown_categories_are_ignored(self):
        """Values outside the category set contribute nothing."""
        fees = compute_preset_fees(["compliance", "space_tourism"])

        assert fees == compute_preset_fees(["compliance"])
